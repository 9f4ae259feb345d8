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
import os
import sys

from r2ctl.config import R2CtlConfig
from r2ctl.limits import check_upload_size
from r2ctl.providers import ObjectStore, make_object_store
from r2ctl.types import ArgumentConflictError, HttpMetadata, ValidationError
from r2ctl.utils import parse_object_path

from .action import Action


def _add_location_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "object_path",
        metavar="objectPath",
        help="The destination object path in the form of {bucket}/{key}",
    )
    parser.add_argument(
        "--local",
        action="store_true",
        help="Interact with the local emulator instead of the remote API",
    )
    parser.add_argument("--persist-to", dest="persist_to", help="Directory for local persistence (local mode only)")


def _check_pipe_and_file(args: argparse.Namespace) -> None:
    if args.pipe and args.file:
        raise ArgumentConflictError("Arguments pipe and file are mutually exclusive")


class ObjectAction(Action):
    """Action for uploading, downloading and deleting objects."""

    def name(self) -> str:
        return "object"

    def help(self) -> str:
        return "Manage R2 objects"

    def setup_parser(self, parser: argparse.ArgumentParser) -> None:
        subparsers = parser.add_subparsers(dest="object_command", metavar="<command>", required=True)

        get_parser = subparsers.add_parser("get", help="Fetch an object from an R2 bucket")
        _add_location_arguments(get_parser)
        get_parser.add_argument("-f", "--file", help="The destination file to create")
        get_parser.add_argument("-p", "--pipe", action="store_true", help="Write the object body to stdout")

        put_parser = subparsers.add_parser("put", help="Create an object in an R2 bucket")
        _add_location_arguments(put_parser)
        put_parser.add_argument("-f", "--file", help="The path of the file to upload")
        put_parser.add_argument("-p", "--pipe", action="store_true", help="Read the object body from stdin")
        put_parser.add_argument(
            "--ct",
            "--content-type",
            dest="content_type",
            help="A standard MIME type describing the format of the object data",
        )
        put_parser.add_argument(
            "--cd",
            "--content-disposition",
            dest="content_disposition",
            help="Specifies presentational information for the object",
        )
        put_parser.add_argument(
            "--ce",
            "--content-encoding",
            dest="content_encoding",
            help="Specifies what content encodings have been applied to the object",
        )
        put_parser.add_argument(
            "--cl",
            "--content-language",
            dest="content_language",
            help="The language the content is in",
        )
        put_parser.add_argument(
            "--cc",
            "--cache-control",
            dest="cache_control",
            help="Specifies caching behavior along the request/reply chain",
        )
        put_parser.add_argument(
            "--e",
            "--expires",
            dest="expires",
            help="The date and time at which the object is no longer cacheable",
        )

        delete_parser = subparsers.add_parser("delete", help="Delete an object in an R2 bucket")
        _add_location_arguments(delete_parser)

    def run(self, args: argparse.Namespace) -> int:
        if args.object_command == "put":
            return self._put(args)
        if args.object_command == "get":
            return self._get(args)
        return self._delete(args)

    def _read_body(self, args: argparse.Namespace, key: str) -> bytes:
        if args.file:
            check_upload_size(os.path.getsize(args.file), name=os.path.basename(args.file))
            with open(args.file, "rb") as f:
                return f.read()

        body = sys.stdin.buffer.read()
        check_upload_size(len(body), name=key)
        return body

    def _make_store(self, args: argparse.Namespace) -> ObjectStore:
        # Local mode with an explicit root reads nothing from the config files.
        config = R2CtlConfig() if args.local and args.persist_to else self.config
        return make_object_store(args.local, config, persist_to=args.persist_to)

    def _put(self, args: argparse.Namespace) -> int:
        _check_pipe_and_file(args)
        if not args.pipe and not args.file:
            raise ValidationError("Either the --file or --pipe options are required")
        bucket, key = parse_object_path(args.object_path)

        body = self._read_body(args, key)

        http_metadata = HttpMetadata(
            content_type=args.content_type,
            content_encoding=args.content_encoding,
            content_language=args.content_language,
            content_disposition=args.content_disposition,
            cache_control=args.cache_control,
            expires=args.expires,
        )

        store = self._make_store(args)
        if not args.pipe:
            print(f'Creating object "{key}" in bucket "{bucket}".')
        store.put_object(bucket, key, body, http_metadata=None if http_metadata.is_empty() else http_metadata)
        if not args.pipe:
            print("Upload complete.")
        return 0

    def _get(self, args: argparse.Namespace) -> int:
        _check_pipe_and_file(args)
        bucket, key = parse_object_path(args.object_path)
        # Progress lines would corrupt a body written to stdout.
        quiet = args.pipe or not args.file

        store = self._make_store(args)
        if not quiet:
            print(f'Downloading "{key}" from "{bucket}".')
        obj = store.get_object(bucket, key)

        if args.file:
            with open(args.file, "wb") as f:
                f.write(obj.body)
        else:
            sys.stdout.buffer.write(obj.body)
            sys.stdout.buffer.flush()

        if not quiet:
            print("Download complete.")
        return 0

    def _delete(self, args: argparse.Namespace) -> int:
        bucket, key = parse_object_path(args.object_path)

        store = self._make_store(args)
        print(f'Deleting object "{key}" from bucket "{bucket}".')
        store.delete_object(bucket, key)
        print("Delete complete.")
        return 0
