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

import fcntl
import hashlib
import json
import logging
import os
import tempfile
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Optional

from ..persistence import PersistenceRoot
from ..types import HttpMetadata, NotFoundError, R2Object
from ..utils import safe_makedirs, validate_bucket_name
from .base import ObjectStore

logger = logging.getLogger(__name__)

LOCK_FILE_NAME = ".lock"
RECORDS_DIR_NAME = "records"
BLOBS_DIR_NAME = "blobs"


class LocalObjectStore(ObjectStore):
    """
    Emulates the object storage API on the local filesystem.

    Each bucket is a directory under the persistence root::

        <root>/v3/r2/<bucket>/.lock
        <root>/v3/r2/<bucket>/records/<sha256(key)>.json
        <root>/v3/r2/<bucket>/blobs/<uuid>

    A record holds the original key, the metadata and the name of the blob file with the
    body. Bodies are written to a new blob first and the record is then swapped in with
    :py:func:`os.replace`, so a reader sees either the old or the new object in full.
    Mutations hold an exclusive ``flock`` on the bucket lock file and reads hold a shared
    one, which keeps separate processes sharing a root from interleaving.
    """

    def __init__(self, root: PersistenceRoot):
        self._root = root

    @property
    def name(self) -> str:
        return "local"

    @property
    def root(self) -> PersistenceRoot:
        return self._root

    def _bucket_dir(self, bucket: str) -> str:
        return self._root.bucket_dir(validate_bucket_name(bucket))

    def _record_path(self, bucket_dir: str, key: str) -> str:
        digest = hashlib.sha256(key.encode("utf-8")).hexdigest()
        return os.path.join(bucket_dir, RECORDS_DIR_NAME, f"{digest}.json")

    def _blob_path(self, bucket_dir: str, blob_id: str) -> str:
        return os.path.join(bucket_dir, BLOBS_DIR_NAME, blob_id)

    @contextmanager
    def _bucket_lock(self, bucket_dir: str, exclusive: bool) -> Iterator[None]:
        lock_file = os.path.join(bucket_dir, LOCK_FILE_NAME)
        with open(lock_file, "a") as lock_fd:
            fcntl.flock(lock_fd, fcntl.LOCK_EX if exclusive else fcntl.LOCK_SH)
            try:
                yield
            finally:
                fcntl.flock(lock_fd, fcntl.LOCK_UN)

    def _read_record(self, record_path: str) -> Optional[dict[str, Any]]:
        try:
            with open(record_path, "r", encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError:
            return None

    def _write_record(self, record_path: str, record: dict[str, Any]) -> None:
        record_dir = os.path.dirname(record_path)
        fd, temp_path = tempfile.mkstemp(dir=record_dir, prefix=".tmp-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(record, f)
                f.flush()
                os.fsync(f.fileno())
            os.replace(temp_path, record_path)
        except BaseException:
            if os.path.exists(temp_path):
                os.unlink(temp_path)
            raise

    def _remove_blob(self, bucket_dir: str, blob_id: str) -> None:
        try:
            os.unlink(self._blob_path(bucket_dir, blob_id))
        except FileNotFoundError:
            logger.warning(f"Blob {blob_id} in {bucket_dir} was already removed")

    def put_object(self, bucket: str, key: str, body: bytes, http_metadata: Optional[HttpMetadata] = None) -> None:
        bucket_dir = self._bucket_dir(bucket)
        safe_makedirs(os.path.join(bucket_dir, RECORDS_DIR_NAME))
        safe_makedirs(os.path.join(bucket_dir, BLOBS_DIR_NAME))

        metadata = http_metadata or HttpMetadata()
        blob_id = uuid.uuid4().hex
        record = {
            "key": key,
            "blob": blob_id,
            "size": len(body),
            "etag": hashlib.md5(body).hexdigest(),
            "uploaded": datetime.now(tz=timezone.utc).isoformat(),
            "http_metadata": metadata.to_dict(),
        }

        with self._bucket_lock(bucket_dir, exclusive=True):
            record_path = self._record_path(bucket_dir, key)
            previous = self._read_record(record_path)

            blob_path = self._blob_path(bucket_dir, blob_id)
            try:
                with open(blob_path, "xb") as f:
                    f.write(body)
                    f.flush()
                    os.fsync(f.fileno())
                self._write_record(record_path, record)
            except BaseException:
                if os.path.exists(blob_path):
                    os.unlink(blob_path)
                raise

            if previous is not None:
                self._remove_blob(bucket_dir, previous["blob"])

        logger.debug(f"Stored {bucket}/{key} ({len(body)} bytes) at {record_path}")

    def get_object(self, bucket: str, key: str) -> R2Object:
        bucket_dir = self._bucket_dir(bucket)
        if not os.path.isdir(bucket_dir):
            raise NotFoundError(bucket=bucket, key=key)

        with self._bucket_lock(bucket_dir, exclusive=False):
            record = self._read_record(self._record_path(bucket_dir, key))
            if record is None or record.get("key") != key:
                raise NotFoundError(bucket=bucket, key=key)

            with open(self._blob_path(bucket_dir, record["blob"]), "rb") as f:
                body = f.read()

        return R2Object(
            bucket=bucket,
            key=key,
            body=body,
            http_metadata=HttpMetadata.from_dict(record.get("http_metadata")),
            size=record.get("size", len(body)),
            etag=record.get("etag"),
            uploaded=record.get("uploaded"),
        )

    def delete_object(self, bucket: str, key: str) -> None:
        bucket_dir = self._bucket_dir(bucket)
        if not os.path.isdir(bucket_dir):
            logger.debug(f"Bucket {bucket} does not exist under {self._root.path}, nothing to delete")
            return

        with self._bucket_lock(bucket_dir, exclusive=True):
            record_path = self._record_path(bucket_dir, key)
            record = self._read_record(record_path)
            if record is None or record.get("key") != key:
                logger.debug(f"Object {bucket}/{key} does not exist, nothing to delete")
                return

            os.unlink(record_path)
            self._remove_blob(bucket_dir, record["blob"])

        logger.debug(f"Deleted {bucket}/{key}")
