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

from abc import ABC, abstractmethod
from typing import Optional

from ..types import HttpMetadata, R2Object


class ObjectStore(ABC):
    """
    Bucket-scoped object operations shared by the local emulator and the remote API.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short name of the backend, used in log messages."""
        pass

    @abstractmethod
    def put_object(self, bucket: str, key: str, body: bytes, http_metadata: Optional[HttpMetadata] = None) -> None:
        """
        Create or overwrite an object.

        :param bucket: Bucket name.
        :param key: Object key. Slashes are part of the key.
        :param body: Object body.
        :param http_metadata: Optional HTTP metadata to store with the body.
        """
        pass

    @abstractmethod
    def get_object(self, bucket: str, key: str) -> R2Object:
        """
        Fetch an object.

        :raises NotFoundError: If the object does not exist.
        """
        pass

    @abstractmethod
    def delete_object(self, bucket: str, key: str) -> None:
        """
        Delete an object. Deleting a missing object is not an error.
        """
        pass
