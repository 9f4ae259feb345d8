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

import json
import multiprocessing
import os

import pytest

from r2ctl.persistence import PersistenceRoot, resolve_persistence_root
from r2ctl.providers.local import BLOBS_DIR_NAME, RECORDS_DIR_NAME, LocalObjectStore
from r2ctl.types import HttpMetadata, NotFoundError, ValidationError

FULL_METADATA = HttpMetadata(
    content_type="content-type-mock",
    content_encoding="content-encoding-mock",
    content_language="content-lang-mock",
    content_disposition="content-disposition-mock",
    cache_control="cache-control-mock",
    expires="expire-time-mock",
)


@pytest.fixture
def store(tmp_path) -> LocalObjectStore:
    return LocalObjectStore(resolve_persistence_root(str(tmp_path / "state")))


def _put_from_process(root_path: str, index: int) -> None:
    store = LocalObjectStore(PersistenceRoot(path=root_path))
    store.put_object("shared-bucket", "contended-key", f"body-{index}".encode() * 1000)


def test_get_missing_object_raises_not_found(store):
    with pytest.raises(NotFoundError, match="The specified key does not exist."):
        store.get_object("bucketName-object-test", "wormhole-img.png")


def test_get_does_not_create_bucket(store):
    with pytest.raises(NotFoundError):
        store.get_object("never-written", "key")
    assert not os.path.exists(store.root.bucket_dir("never-written"))


def test_put_then_get_roundtrip(store):
    store.put_object("bucket", "wormhole-img.png", b"passageway", http_metadata=FULL_METADATA)

    obj = store.get_object("bucket", "wormhole-img.png")
    assert obj.bucket == "bucket"
    assert obj.key == "wormhole-img.png"
    assert obj.body == b"passageway"
    assert obj.http_metadata == FULL_METADATA
    assert obj.size == len(b"passageway")
    assert obj.etag is not None
    assert obj.uploaded is not None


def test_put_without_metadata_returns_empty_metadata(store):
    store.put_object("bucket", "key", b"\x00\x01\xff")

    obj = store.get_object("bucket", "key")
    assert obj.body == b"\x00\x01\xff"
    assert obj.http_metadata == HttpMetadata()
    assert obj.http_metadata.is_empty()


def test_partial_metadata_roundtrip(store):
    metadata = HttpMetadata(content_type="text/plain", cache_control="no-cache")
    store.put_object("bucket", "key", b"hello", http_metadata=metadata)

    assert store.get_object("bucket", "key").http_metadata == metadata


def test_empty_body_roundtrip(store):
    store.put_object("bucket", "empty", b"")
    assert store.get_object("bucket", "empty").body == b""


def test_overwrite_replaces_body_and_metadata(store):
    store.put_object("bucket", "key", b"body1", http_metadata=FULL_METADATA)
    store.put_object("bucket", "key", b"body2")

    obj = store.get_object("bucket", "key")
    assert obj.body == b"body2"
    assert obj.http_metadata == HttpMetadata()


def test_overwrite_removes_previous_blob(store):
    store.put_object("bucket", "key", b"body1")
    store.put_object("bucket", "key", b"body2")

    blobs_dir = os.path.join(store.root.bucket_dir("bucket"), BLOBS_DIR_NAME)
    assert len(os.listdir(blobs_dir)) == 1


def test_delete_then_get_raises_not_found(store):
    store.put_object("bucket", "key", b"passageway")
    store.delete_object("bucket", "key")

    with pytest.raises(NotFoundError):
        store.get_object("bucket", "key")

    bucket_dir = store.root.bucket_dir("bucket")
    assert os.listdir(os.path.join(bucket_dir, RECORDS_DIR_NAME)) == []
    assert os.listdir(os.path.join(bucket_dir, BLOBS_DIR_NAME)) == []


def test_delete_missing_object_is_idempotent(store):
    store.delete_object("no-such-bucket", "key")

    store.put_object("bucket", "other", b"x")
    store.delete_object("bucket", "key")
    store.delete_object("bucket", "key")

    with pytest.raises(NotFoundError):
        store.get_object("bucket", "key")
    assert store.get_object("bucket", "other").body == b"x"


def test_keys_with_slashes_are_opaque(store):
    store.put_object("bucket", "a/b", b"slash")
    store.put_object("bucket", "ab", b"no-slash")
    store.put_object("bucket", "a", b"prefix")

    assert store.get_object("bucket", "a/b").body == b"slash"
    assert store.get_object("bucket", "ab").body == b"no-slash"
    assert store.get_object("bucket", "a").body == b"prefix"

    store.delete_object("bucket", "a")
    assert store.get_object("bucket", "a/b").body == b"slash"


def test_keys_that_look_like_paths_stay_inside_bucket(store):
    store.put_object("bucket", "../../escape", b"contained")

    assert store.get_object("bucket", "../../escape").body == b"contained"
    assert not os.path.exists(os.path.join(store.root.r2_dir, "escape"))


def test_buckets_are_isolated(store):
    store.put_object("bucket-one", "key", b"one")

    with pytest.raises(NotFoundError):
        store.get_object("bucket-two", "key")


def test_roots_are_isolated(tmp_path):
    first = LocalObjectStore(resolve_persistence_root(str(tmp_path / "first")))
    second = LocalObjectStore(resolve_persistence_root(str(tmp_path / "second")))

    first.put_object("bucket", "file-one", b"passageway")
    second.put_object("bucket", "file-two", b"passageway")

    with pytest.raises(NotFoundError):
        second.get_object("bucket", "file-one")
    with pytest.raises(NotFoundError):
        first.get_object("bucket", "file-two")
    assert second.get_object("bucket", "file-two").body == b"passageway"


def test_separate_store_instances_share_state_through_disk(tmp_path):
    root_path = str(tmp_path / "state")
    LocalObjectStore(resolve_persistence_root(root_path)).put_object("bucket", "key", b"persisted")

    assert LocalObjectStore(resolve_persistence_root(root_path)).get_object("bucket", "key").body == b"persisted"


def test_record_stores_original_key_and_metadata(store):
    store.put_object("bucket", "dir/file-one", b"passageway", http_metadata=FULL_METADATA)

    records_dir = os.path.join(store.root.bucket_dir("bucket"), RECORDS_DIR_NAME)
    (record_file,) = os.listdir(records_dir)
    with open(os.path.join(records_dir, record_file)) as f:
        record = json.load(f)

    assert record["key"] == "dir/file-one"
    assert record["size"] == len(b"passageway")
    assert record["http_metadata"] == FULL_METADATA.to_dict()


def test_invalid_bucket_name_is_rejected(store):
    with pytest.raises(ValidationError):
        store.put_object("..", "key", b"x")


def test_concurrent_puts_from_processes_leave_one_complete_object(tmp_path):
    root_path = resolve_persistence_root(str(tmp_path / "state")).path
    num_processes = 4

    processes = [
        multiprocessing.Process(target=_put_from_process, args=(root_path, i)) for i in range(num_processes)
    ]
    for p in processes:
        p.start()
    for p in processes:
        p.join()
        assert p.exitcode == 0

    store = LocalObjectStore(PersistenceRoot(path=root_path))
    body = store.get_object("shared-bucket", "contended-key").body
    assert body in [f"body-{i}".encode() * 1000 for i in range(num_processes)]

    blobs_dir = os.path.join(store.root.bucket_dir("shared-bucket"), BLOBS_DIR_NAME)
    assert len(os.listdir(blobs_dir)) == 1
