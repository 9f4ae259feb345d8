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
import json
from typing import Optional

from r2ctl.providers import make_api_client
from r2ctl.utils import validate_bucket_name

from .action import Action


def _describe(name: str, jurisdiction: Optional[str]) -> str:
    return f"{name} ({jurisdiction})" if jurisdiction else name


class BucketAction(Action):
    """Action for managing remote buckets."""

    def name(self) -> str:
        return "bucket"

    def help(self) -> str:
        return "Manage R2 buckets"

    def setup_parser(self, parser: argparse.ArgumentParser) -> None:
        subparsers = parser.add_subparsers(dest="bucket_command", metavar="<command>", required=True)

        create_parser = subparsers.add_parser("create", help="Create a new R2 bucket")
        create_parser.add_argument("name", help="The name of the new bucket")
        create_parser.add_argument(
            "-J", "--jurisdiction", help="The jurisdiction where the new bucket will be created"
        )

        subparsers.add_parser("list", help="List R2 buckets")

        delete_parser = subparsers.add_parser("delete", help="Delete an R2 bucket")
        delete_parser.add_argument("name", help="The name of the bucket to delete")
        delete_parser.add_argument("-J", "--jurisdiction", help="The jurisdiction where the bucket exists")

    def run(self, args: argparse.Namespace) -> int:
        if args.bucket_command == "create":
            return self._create(args.name, args.jurisdiction)
        if args.bucket_command == "delete":
            return self._delete(args.name, args.jurisdiction)
        return self._list()

    def _create(self, name: str, jurisdiction: Optional[str]) -> int:
        validate_bucket_name(name)
        client = make_api_client(self.config)
        print(f"Creating bucket {_describe(name, jurisdiction)}.")
        client.create_bucket(name, jurisdiction=jurisdiction)
        print(f"Created bucket {_describe(name, jurisdiction)}.")
        return 0

    def _list(self) -> int:
        client = make_api_client(self.config)
        buckets = client.list_buckets()
        print(json.dumps([bucket.model_dump() for bucket in buckets], indent=2))
        return 0

    def _delete(self, name: str, jurisdiction: Optional[str]) -> int:
        validate_bucket_name(name)
        client = make_api_client(self.config)
        print(f"Deleting bucket {_describe(name, jurisdiction)}.")
        client.delete_bucket(name, jurisdiction=jurisdiction)
        print(f"Deleted bucket {_describe(name, jurisdiction)}.")
        return 0
