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
import logging
import os
import platform
import sys
from typing import Optional

from r2ctl import __version__
from r2ctl.config import R2CtlConfig
from r2ctl.constants import DEFAULT_LOG_LEVEL, ENV_LOG_LEVEL
from r2ctl.types import NotFoundError, RemoteAPIError, ValidationError

from .actions.action import Action, ArgumentParser
from .actions.bucket import BucketAction
from .actions.help import HelpAction
from .actions.object import ObjectAction

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _make_parser(action: Action) -> argparse.ArgumentParser:
    parser = ArgumentParser(prog=f"r2ctl {action.name()}", description=action.help())
    action.setup_parser(parser)
    return parser


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _build_actions(config: Optional[R2CtlConfig]) -> dict[str, Action]:
    actions: dict[str, Action] = {}
    for action in (BucketAction(config), ObjectAction(config)):
        actions[action.name()] = action
    actions["help"] = HelpAction(actions, _make_parser)
    return actions


def _run_action(action: Action, argv: list[str]) -> int:
    parser = _make_parser(action)
    args, unknown = parser.parse_known_args(argv)
    if unknown:
        raise ValidationError(f"Unknown arguments: {', '.join(unknown)}")
    return action.run(args)


def main(argv: Optional[list[str]] = None, config: Optional[R2CtlConfig] = None) -> int:
    """
    Entry point of the ``r2ctl`` command.

    :param argv: Command line arguments without the program name. Defaults to ``sys.argv[1:]``.
    :param config: Preloaded configuration. Loaded lazily from the config files when omitted.
    :return: Exit code.
    """
    argv = list(sys.argv[1:] if argv is None else argv)

    top_parser = argparse.ArgumentParser(prog="r2ctl", add_help=False)
    top_parser.add_argument("--version", action="store_true")
    top_parser.add_argument("--log-level", default=os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL))
    top_parser.add_argument("command", nargs="?")
    top_parser.add_argument("args", nargs=argparse.REMAINDER)
    top_args, unknown = top_parser.parse_known_args(argv)

    log_level = top_args.log_level.upper()
    if log_level not in LOG_LEVELS:
        print(f"Error: Invalid log level: {top_args.log_level} (choose from {', '.join(LOG_LEVELS)})", file=sys.stderr)
        return 1
    _configure_logging(log_level)

    if top_args.version:
        print(f"r2ctl/{__version__} Python/{platform.python_version()}")
        return 0

    actions = _build_actions(config)
    command = top_args.command
    if command is None or unknown:
        if unknown and unknown[0] not in ("-h", "--help"):
            print(f"Unknown option: {unknown[0]}", file=sys.stderr)
            print("Run 'r2ctl help' for usage.", file=sys.stderr)
            return 1
        command = "help"

    action = actions.get(command)
    if action is None:
        print(f"Unknown command: {command}", file=sys.stderr)
        print("Run 'r2ctl help' for usage.", file=sys.stderr)
        return 1

    try:
        return _run_action(action, top_args.args)
    except NotFoundError as e:
        logger.debug(f"Object not found: {e}", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (ValueError, RemoteAPIError, OSError) as e:
        logger.debug(f"Command {command} failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
