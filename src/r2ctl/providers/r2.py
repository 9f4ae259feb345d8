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

from typing import Optional

from ..client.api import R2ApiClient
from ..types import HttpMetadata, R2Object
from .base import ObjectStore


class RemoteObjectStore(ObjectStore):
    """
    :py:class:`ObjectStore` backed by the remote R2 API.

    Deletes are not existence checked by the API.
    """

    def __init__(self, client: R2ApiClient):
        self._client = client

    @property
    def name(self) -> str:
        return "r2"

    @property
    def client(self) -> R2ApiClient:
        return self._client

    def put_object(self, bucket: str, key: str, body: bytes, http_metadata: Optional[HttpMetadata] = None) -> None:
        self._client.put_object(bucket, key, body, http_metadata=http_metadata)

    def get_object(self, bucket: str, key: str) -> R2Object:
        body = self._client.get_object(bucket, key)
        return R2Object(bucket=bucket, key=key, body=body, size=len(body))

    def delete_object(self, bucket: str, key: str) -> None:
        self._client.delete_object(bucket, key)
