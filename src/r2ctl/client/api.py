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
from typing import Any, Optional
from urllib.parse import quote

import requests
from pydantic import ValidationError as PydanticValidationError
from requests.adapters import HTTPAdapter, Retry

from ..constants import (
    BACKOFF_FACTOR,
    DEFAULT_API_BASE_URL,
    DEFAULT_REQUEST_TIMEOUT,
    JURISDICTION_HEADER,
    MAX_RETRIES,
)
from ..types import HttpMetadata, NotFoundError, RemoteAPIError
from .models import ApiResponse, BucketInfo, BucketList

logger = logging.getLogger(__name__)


def _create_session() -> requests.Session:
    session = requests.Session()
    retries = Retry(
        total=MAX_RETRIES,
        backoff_factor=BACKOFF_FACTOR,
        connect=MAX_RETRIES,
        read=MAX_RETRIES,
        status_forcelist=[408, 429, 500, 502, 503, 504],
    )
    session.mount("https://", HTTPAdapter(max_retries=retries))
    session.mount("http://", HTTPAdapter(max_retries=retries))
    return session


class R2ApiClient:
    """
    Thin client for the bucket and object endpoints of the R2 REST API.

    Transport-level retries for throttling and server errors are handled by the
    ``requests`` session. Everything else surfaces as :py:class:`RemoteAPIError`.
    """

    def __init__(
        self,
        account_id: str,
        api_token: str,
        base_url: str = DEFAULT_API_BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
    ):
        """
        :param account_id: Account identifier used in every request path.
        :param api_token: Bearer token sent in the ``Authorization`` header.
        :param base_url: API base URL.
        :param session: Pre-configured session. A retrying session is created when omitted.
        :param timeout: Request timeout in seconds.
        """
        self._account_id = account_id
        self._api_token = api_token
        self._base_url = base_url.rstrip("/")
        self._session = session if session is not None else _create_session()
        self._timeout = timeout

    def _buckets_url(self, bucket: Optional[str] = None) -> str:
        url = f"{self._base_url}/accounts/{quote(self._account_id, safe='')}/r2/buckets"
        if bucket is not None:
            url = f"{url}/{quote(bucket, safe='')}"
        return url

    def _object_url(self, bucket: str, key: str) -> str:
        return f"{self._buckets_url(bucket)}/objects/{quote(key, safe='')}"

    def _request(
        self,
        method: str,
        url: str,
        jurisdiction: Optional[str] = None,
        headers: Optional[dict[str, str]] = None,
        **kwargs: Any,
    ) -> requests.Response:
        request_headers = {"Authorization": f"Bearer {self._api_token}"}
        if jurisdiction:
            request_headers[JURISDICTION_HEADER] = jurisdiction
        if headers:
            request_headers.update(headers)

        logger.debug(f"{method} {url}")
        return self._session.request(method, url, headers=request_headers, timeout=self._timeout, **kwargs)

    @staticmethod
    def _parse_envelope(response: requests.Response) -> Optional[ApiResponse]:
        try:
            return ApiResponse.model_validate(response.json())
        except (ValueError, PydanticValidationError):
            return None

    def _raise_for_failure(self, response: requests.Response, operation: str) -> Optional[ApiResponse]:
        envelope = self._parse_envelope(response)
        failed = response.status_code >= 400 or (envelope is not None and not envelope.success)
        if not failed:
            return envelope

        errors = [e.message for e in envelope.errors] if envelope is not None else []
        detail = "; ".join(errors) if errors else f"HTTP {response.status_code}"
        raise RemoteAPIError(f"{operation} failed: {detail}", status_code=response.status_code, errors=errors)

    def create_bucket(self, name: str, jurisdiction: Optional[str] = None) -> None:
        response = self._request("POST", self._buckets_url(), jurisdiction=jurisdiction, json={"name": name})
        self._raise_for_failure(response, f"Creating bucket {name}")

    def list_buckets(self) -> list[BucketInfo]:
        response = self._request("GET", self._buckets_url())
        envelope = self._raise_for_failure(response, "Listing buckets")
        if envelope is None or envelope.result is None:
            return []
        return BucketList.model_validate(envelope.result).buckets

    def delete_bucket(self, name: str, jurisdiction: Optional[str] = None) -> None:
        response = self._request("DELETE", self._buckets_url(name), jurisdiction=jurisdiction)
        self._raise_for_failure(response, f"Deleting bucket {name}")

    def put_object(self, bucket: str, key: str, body: bytes, http_metadata: Optional[HttpMetadata] = None) -> None:
        headers = http_metadata.to_headers() if http_metadata is not None else {}
        response = self._request("PUT", self._object_url(bucket, key), headers=headers, data=body)
        self._raise_for_failure(response, f"Uploading {bucket}/{key}")

    def get_object(self, bucket: str, key: str) -> bytes:
        response = self._request("GET", self._object_url(bucket, key))
        if response.status_code == 404:
            raise NotFoundError(bucket=bucket, key=key)
        if response.status_code >= 400:
            self._raise_for_failure(response, f"Downloading {bucket}/{key}")
        return response.content

    def delete_object(self, bucket: str, key: str) -> None:
        response = self._request("DELETE", self._object_url(bucket, key))
        self._raise_for_failure(response, f"Deleting {bucket}/{key}")
