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

from unittest.mock import MagicMock

import pytest

from r2ctl.constants import ENV_ACCOUNT_ID, ENV_API_BASE_URL, ENV_API_TOKEN, ENV_CONFIG_FILE, ENV_LOG_LEVEL
from test_r2ctl.unit.utils import fetch_result, make_response


@pytest.fixture(autouse=True)
def clean_r2ctl_env_vars(monkeypatch, tmp_path_factory):
    """Keep the developer's environment and home directory config out of the tests."""
    for var in (ENV_CONFIG_FILE, ENV_ACCOUNT_ID, ENV_API_TOKEN, ENV_API_BASE_URL, ENV_LOG_LEVEL):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path_factory.mktemp("home")))


@pytest.fixture
def run_in_tmp_dir(tmp_path, monkeypatch):
    """Run the test with the temporary directory as working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def mock_session():
    """A fake ``requests.Session`` that answers every request with an empty success envelope."""
    session = MagicMock()
    session.request.return_value = make_response(json_body=fetch_result())
    return session
