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

from dataclasses import asdict, dataclass, field, fields
from typing import Any, Optional

# Metadata field name -> HTTP header name.
HTTP_METADATA_HEADERS = {
    "content_type": "content-type",
    "content_disposition": "content-disposition",
    "content_encoding": "content-encoding",
    "content_language": "content-language",
    "cache_control": "cache-control",
    "expires": "expires",
}


@dataclass(frozen=True)
class HttpMetadata:
    """
    Optional HTTP metadata stored alongside an object body.

    Every field is optional; unset fields are omitted from headers and from the
    persisted record.
    """

    content_type: Optional[str] = None
    content_encoding: Optional[str] = None
    content_language: Optional[str] = None
    content_disposition: Optional[str] = None
    cache_control: Optional[str] = None
    expires: Optional[str] = None

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def to_dict(self) -> dict[str, str]:
        return {key: value for key, value in asdict(self).items() if value is not None}

    @staticmethod
    def from_dict(data: Optional[dict[str, Any]]) -> "HttpMetadata":
        if not data:
            return HttpMetadata()
        known = {f.name for f in fields(HttpMetadata)}
        return HttpMetadata(**{key: value for key, value in data.items() if key in known})

    def to_headers(self) -> dict[str, str]:
        """Map the set fields to their HTTP header names."""
        return {HTTP_METADATA_HEADERS[key]: value for key, value in self.to_dict().items()}


@dataclass
class R2Object:
    """An object body together with its metadata."""

    bucket: str
    key: str
    body: bytes
    http_metadata: HttpMetadata = field(default_factory=HttpMetadata)
    size: int = 0
    etag: Optional[str] = None
    uploaded: Optional[str] = None


class NotFoundError(FileNotFoundError):
    """
    Raised when an object key does not exist.
    """

    DEFAULT_MESSAGE = "The specified key does not exist."

    def __init__(self, message: str = DEFAULT_MESSAGE, bucket: Optional[str] = None, key: Optional[str] = None):
        super().__init__(message)
        self.bucket = bucket
        self.key = key


class TooLargeError(ValueError):
    """
    Raised when an upload body exceeds the maximum upload size.
    """

    def __init__(self, message: str, max_size: int, size: int):
        super().__init__(message)
        self.max_size = max_size
        self.size = size


class ArgumentConflictError(ValueError):
    """
    Raised when mutually exclusive arguments are used together.
    """

    pass


class ValidationError(ValueError):
    """
    Raised when a required argument is missing or invalid.
    """

    pass


class ConfigurationError(ValueError):
    """
    Raised when the configuration is malformed or incomplete.
    """

    pass


class RemoteAPIError(Exception):
    """
    Raised when the remote API reports a failure.
    """

    def __init__(self, message: str, status_code: Optional[int] = None, errors: Optional[list[str]] = None):
        super().__init__(message)
        self.status_code = status_code
        self.errors = errors or []
