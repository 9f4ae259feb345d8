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
import logging
import os
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from .constants import DEFAULT_API_BASE_URL, ENV_ACCOUNT_ID, ENV_API_BASE_URL, ENV_API_TOKEN, ENV_CONFIG_FILE
from .types import ConfigurationError

logger = logging.getLogger(__name__)


def _default_config_file_paths() -> list[str]:
    home = os.path.expanduser("~")
    return [
        os.path.join(home, ".r2ctl.yaml"),
        os.path.join(home, ".r2ctl.json"),
        os.path.join(home, ".config", "r2ctl", "config.yaml"),
    ]


class R2CtlConfig(BaseModel):
    """Settings for the remote API and local emulation."""

    model_config = ConfigDict(extra="ignore")

    account_id: Optional[str] = None
    api_token: Optional[str] = None
    api_base_url: str = DEFAULT_API_BASE_URL
    persist_to: Optional[str] = None

    def require_credentials(self) -> tuple[str, str]:
        """
        Return ``(account_id, api_token)`` for remote operations.

        :raises ConfigurationError: If either value is missing.
        """
        if not self.account_id:
            raise ConfigurationError(f"Missing account id; set {ENV_ACCOUNT_ID} or account_id in the r2ctl config file")
        if not self.api_token:
            raise ConfigurationError(f"Missing API token; set {ENV_API_TOKEN} or api_token in the r2ctl config file")
        return self.account_id, self.api_token


def _load_config_file(path: str) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()
    try:
        if path.endswith(".json"):
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigurationError(f"malformed r2ctl config file: {path}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"malformed r2ctl config file: {path}")
    return data


def find_config_file_paths() -> list[str]:
    """
    Candidate config files in lookup order, starting with ``$R2CTL_CONFIG`` if set.
    """
    paths = []
    env_path = os.getenv(ENV_CONFIG_FILE)
    if env_path:
        paths.append(env_path)
    paths.extend(_default_config_file_paths())
    return paths


def read_config(config_file_paths: Optional[list[str]] = None) -> tuple[R2CtlConfig, Optional[str]]:
    """
    Load the configuration from the first existing config file, then apply environment overrides.

    :param config_file_paths: Explicit candidate paths. Defaults to :py:func:`find_config_file_paths`.
    :return: The configuration and the config file used, if any.
    :raises ConfigurationError: If the chosen file is malformed.
    """
    candidates = config_file_paths if config_file_paths is not None else find_config_file_paths()

    data: dict[str, Any] = {}
    used_config_file = None
    for path in candidates:
        if os.path.isfile(path):
            data = _load_config_file(path)
            used_config_file = path
            logger.debug(f"Using r2ctl config file: {path}")
            break
    else:
        logger.debug("No r2ctl config files found")

    overrides = {
        "account_id": os.getenv(ENV_ACCOUNT_ID),
        "api_token": os.getenv(ENV_API_TOKEN),
        "api_base_url": os.getenv(ENV_API_BASE_URL),
    }
    data.update({key: value for key, value in overrides.items() if value})

    try:
        return R2CtlConfig.model_validate(data), used_config_file
    except PydanticValidationError as e:
        raise ConfigurationError(f"invalid r2ctl config: {e}") from e
