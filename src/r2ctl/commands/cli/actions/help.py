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
import sys
from collections.abc import Callable

from .action import Action


class HelpAction(Action):
    """Action for showing the available commands or the help of one command."""

    def __init__(self, actions: dict[str, Action], make_parser: Callable[[Action], argparse.ArgumentParser]):
        super().__init__()
        self._actions = actions
        self._make_parser = make_parser

    def name(self) -> str:
        return "help"

    def help(self) -> str:
        return "Show help for r2ctl or one of its commands"

    def setup_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("command", nargs="?", help="Command to show help for")

    def run(self, args: argparse.Namespace) -> int:
        if args.command:
            action = self._actions.get(args.command)
            if action is None:
                print(f"Unknown command: {args.command}", file=sys.stderr)
                return 1
            self._make_parser(action).print_help()
            return 0

        print("usage: r2ctl <command> [options]\n")
        print("commands:")
        for name, action in self._actions.items():
            print(f"  {name:<10} {action.help()}")
        print("\noptions:")
        print("  --version  Show the r2ctl version")
        print("  --log-level LEVEL  Set the log level (default: WARNING)")
        return 0
