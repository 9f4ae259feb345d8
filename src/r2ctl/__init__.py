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

from .config import R2CtlConfig, read_config
from .limits import check_upload_size
from .persistence import PersistenceRoot, resolve_persistence_root
from .types import (
    ArgumentConflictError,
    ConfigurationError,
    HttpMetadata,
    NotFoundError,
    R2Object,
    RemoteAPIError,
    TooLargeError,
    ValidationError,
)

__version__ = "0.1.0"

__all__ = [
    "ArgumentConflictError",
    "ConfigurationError",
    "HttpMetadata",
    "NotFoundError",
    "PersistenceRoot",
    "R2CtlConfig",
    "R2Object",
    "RemoteAPIError",
    "TooLargeError",
    "ValidationError",
    "check_upload_size",
    "read_config",
    "resolve_persistence_root",
]
