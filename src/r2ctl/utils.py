# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import logging
import os
import time

from .types import ValidationError

logger = logging.getLogger(__name__)

_MAKEDIRS_MAX_RETRIES = 5
_MAKEDIRS_RETRY_DELAY = 0.01

_BINARY_UNITS = ["B", "KiB", "MiB", "GiB", "TiB", "PiB"]


def safe_makedirs(path: str, mode: int = 0o777, exist_ok: bool = True) -> None:
    """
    Create a directory tree, tolerating concurrent creation by other processes.

    ``os.makedirs`` can fail with :py:class:`FileNotFoundError` when another process removes
    or renames a parent while the tree is being created. Those failures are retried.

    :param path: Directory to create.
    :param mode: Permission bits for newly created directories.
    :param exist_ok: Do not raise if the directory already exists.
    :raises FileNotFoundError: If creation keeps failing after all retries.
    """
    for attempt in range(_MAKEDIRS_MAX_RETRIES):
        try:
            os.makedirs(path, mode=mode, exist_ok=exist_ok)
            return
        except FileExistsError:
            if exist_ok:
                return
            raise
        except FileNotFoundError:
            if attempt == _MAKEDIRS_MAX_RETRIES - 1:
                raise
            logger.debug(f"Retrying creation of {path} after attempt {attempt + 1} failed")
            time.sleep(_MAKEDIRS_RETRY_DELAY)


def format_size(size: int) -> str:
    """
    Format a byte count with binary units and three significant digits, e.g. ``300 MiB``.
    """
    if size < 1024:
        return f"{size} B"

    value = float(size)
    unit_index = 0
    while value >= 1024 and unit_index < len(_BINARY_UNITS) - 1:
        value /= 1024
        unit_index += 1

    # Round to three significant digits, then drop trailing zeros.
    rounded = float(f"{value:.3g}")
    return f"{rounded:g} {_BINARY_UNITS[unit_index]}"


def validate_bucket_name(name: str) -> str:
    """
    Check that a bucket name can be used as a single namespace component.

    :raises ValidationError: If the name is empty, contains a slash or whitespace, or is a dot segment.
    """
    if not name:
        raise ValidationError("The bucket name must not be empty")
    if "/" in name or any(c.isspace() for c in name):
        raise ValidationError(f"The bucket name {name!r} must not contain slashes or whitespace")
    if name in (".", ".."):
        raise ValidationError(f"The bucket name {name!r} is not allowed")
    return name


def parse_object_path(object_path: str) -> tuple[str, str]:
    """
    Split ``<bucket>/<key>`` on the first slash.

    The key keeps any further slashes verbatim.

    :return: A ``(bucket, key)`` tuple.
    :raises ValidationError: If either part is missing.
    """
    bucket, sep, key = object_path.partition("/")
    if not sep or not bucket or not key:
        raise ValidationError("The object path must be in the form of {bucket}/{key}")
    return validate_bucket_name(bucket), key
