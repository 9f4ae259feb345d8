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
from dataclasses import dataclass
from typing import Optional

from .constants import DEFAULT_PERSIST_DIR, LOCAL_R2_DIR, LOCAL_STATE_VERSION
from .utils import safe_makedirs

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PersistenceRoot:
    """Directory under which local emulation keeps all buckets and objects."""

    path: str

    @property
    def r2_dir(self) -> str:
        return os.path.join(self.path, LOCAL_STATE_VERSION, LOCAL_R2_DIR)

    def bucket_dir(self, bucket: str) -> str:
        return os.path.join(self.r2_dir, bucket)


def resolve_persistence_root(persist_to: Optional[str] = None, cwd: Optional[str] = None) -> PersistenceRoot:
    """
    Resolve the persistence root for a local invocation.

    An explicit ``persist_to`` is used as given (relative paths are taken relative to ``cwd``).
    Otherwise the default state directory under ``cwd`` is used. The directory is created if
    it does not exist yet.

    :param persist_to: Explicit persistence directory.
    :param cwd: Working directory to resolve against. Defaults to the process working directory.
    :return: The resolved :py:class:`PersistenceRoot`.
    """
    base = cwd if cwd is not None else os.getcwd()
    path = os.path.join(base, persist_to if persist_to else DEFAULT_PERSIST_DIR)
    path = os.path.abspath(path)

    safe_makedirs(path)
    logger.debug(f"Using persistence root {path}")
    return PersistenceRoot(path=path)
