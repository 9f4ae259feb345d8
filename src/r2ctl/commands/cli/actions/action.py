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

import argparse
from abc import ABC, abstractmethod
from typing import Optional

from r2ctl.config import R2CtlConfig, read_config
from r2ctl.types import ValidationError


class ArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises :py:class:`ValidationError` instead of exiting."""

    def error(self, message: str):  # type: ignore[override]
        raise ValidationError(message)


class Action(ABC):
    """Base class for CLI actions."""

    def __init__(self, config: Optional[R2CtlConfig] = None):
        self._config = config

    @property
    def config(self) -> R2CtlConfig:
        """Configuration, loaded on first use so that local commands never need credentials."""
        if self._config is None:
            self._config, _ = read_config()
        return self._config

    @abstractmethod
    def name(self) -> str:
        """Return the name of this CLI action."""
        pass

    @abstractmethod
    def help(self) -> str:
        """Return the help text for this CLI action."""
        pass

    @abstractmethod
    def setup_parser(self, parser: argparse.ArgumentParser) -> None:
        """Set up the argument parser for this action."""
        pass

    @abstractmethod
    def run(self, args: argparse.Namespace) -> int:
        """
        Execute the action.

        :return: Exit code (0 for success, non-zero for failure)
        """
        pass
