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

import os

import pytest

from r2ctl.client.api import R2ApiClient
from r2ctl.config import R2CtlConfig
from r2ctl.providers import LocalObjectStore, RemoteObjectStore, make_api_client, make_object_store
from r2ctl.types import ConfigurationError, HttpMetadata, NotFoundError
from test_r2ctl.unit.utils import make_response


@pytest.fixture
def remote_store(mock_session) -> RemoteObjectStore:
    client = R2ApiClient(account_id="some-account-id", api_token="some-api-token", session=mock_session)
    return RemoteObjectStore(client)


def test_remote_put_forwards_metadata(remote_store, mock_session):
    remote_store.put_object("bucket", "key", b"body", http_metadata=HttpMetadata(content_type="text/plain"))

    _, kwargs = mock_session.request.call_args
    assert kwargs["headers"]["content-type"] == "text/plain"
    assert kwargs["data"] == b"body"


def test_remote_get_wraps_body(remote_store, mock_session):
    mock_session.request.return_value = make_response(content=b"passageway")

    obj = remote_store.get_object("bucket", "key")
    assert obj.body == b"passageway"
    assert obj.size == len(b"passageway")
    assert obj.http_metadata.is_empty()


def test_remote_get_missing_object(remote_store, mock_session):
    mock_session.request.return_value = make_response(status_code=404)

    with pytest.raises(NotFoundError):
        remote_store.get_object("bucket", "key")


def test_make_object_store_local_uses_default_root(run_in_tmp_dir):
    store = make_object_store(local=True, config=R2CtlConfig())

    assert isinstance(store, LocalObjectStore)
    assert store.name == "local"
    assert os.path.realpath(store.root.path) == os.path.realpath(str(run_in_tmp_dir / ".r2ctl" / "state"))


def test_make_object_store_local_honors_persist_to(run_in_tmp_dir):
    store = make_object_store(local=True, config=R2CtlConfig(persist_to="from-config"), persist_to="./different-dir")

    assert isinstance(store, LocalObjectStore)
    assert os.path.realpath(store.root.path) == os.path.realpath(str(run_in_tmp_dir / "different-dir"))


def test_make_object_store_local_falls_back_to_configured_root(run_in_tmp_dir):
    store = make_object_store(local=True, config=R2CtlConfig(persist_to="from-config"))

    assert isinstance(store, LocalObjectStore)
    assert os.path.realpath(store.root.path) == os.path.realpath(str(run_in_tmp_dir / "from-config"))


def test_make_object_store_local_does_not_need_credentials(run_in_tmp_dir):
    make_object_store(local=True, config=R2CtlConfig())


def test_make_object_store_remote():
    store = make_object_store(local=False, config=R2CtlConfig(account_id="some-account-id", api_token="token"))

    assert isinstance(store, RemoteObjectStore)
    assert store.name == "r2"


def test_make_object_store_remote_requires_credentials():
    with pytest.raises(ConfigurationError, match="account id"):
        make_object_store(local=False, config=R2CtlConfig(api_token="token"))
    with pytest.raises(ConfigurationError, match="API token"):
        make_api_client(R2CtlConfig(account_id="some-account-id"))
