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

from .constants import MAX_UPLOAD_SIZE
from .types import TooLargeError
from .utils import format_size


def check_upload_size(size: int, name: str = "Object", max_size: int = MAX_UPLOAD_SIZE) -> None:
    """
    Reject an upload body larger than ``max_size`` bytes.

    This has no side effects and must run before any storage backend is touched.

    :param size: Size of the body in bytes.
    :param name: Name reported in the error message, usually the source file name.
    :param max_size: Largest accepted size in bytes.
    :raises TooLargeError: If ``size`` exceeds ``max_size``.
    """
    if size > max_size:
        raise TooLargeError(
            f"r2ctl only supports uploading files up to {format_size(max_size)} in size\n"
            f"{name} is {format_size(size)} in size",
            max_size=max_size,
            size=size,
        )
