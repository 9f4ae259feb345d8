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
from typing import Optional

from ..client.api import R2ApiClient
from ..config import R2CtlConfig
from ..persistence import resolve_persistence_root
from .base import ObjectStore
from .local import LocalObjectStore
from .r2 import RemoteObjectStore

logger = logging.getLogger(__name__)

__all__ = ["LocalObjectStore", "ObjectStore", "RemoteObjectStore", "make_api_client", "make_object_store"]


def make_api_client(config: R2CtlConfig) -> R2ApiClient:
    account_id, api_token = config.require_credentials()
    return R2ApiClient(account_id=account_id, api_token=api_token, base_url=config.api_base_url)


def make_object_store(local: bool, config: R2CtlConfig, persist_to: Optional[str] = None) -> ObjectStore:
    """
    Pick the storage backend for one invocation.

    :param local: Use the local emulator instead of the remote API.
    :param config: Loaded configuration.
    :param persist_to: Persistence directory override, local mode only.
    """
    if local:
        store: ObjectStore = LocalObjectStore(resolve_persistence_root(persist_to or config.persist_to))
    else:
        store = RemoteObjectStore(make_api_client(config))
    logger.debug(f"Using {store.name} object store")
    return store
