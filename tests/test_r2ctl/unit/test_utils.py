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

import pytest

from r2ctl.types import ValidationError
from r2ctl.utils import format_size, parse_object_path, validate_bucket_name


@pytest.mark.parametrize(
    argnames=["size", "expected"],
    argvalues=[
        [0, "0 B"],
        [1023, "1023 B"],
        [1024, "1 KiB"],
        [1536, "1.5 KiB"],
        [300 * 1024 * 1024, "300 MiB"],
        [301 * 1024 * 1024, "301 MiB"],
        [int(2.25 * 1024**3), "2.25 GiB"],
    ],
)
def test_format_size(size, expected):
    assert format_size(size) == expected


def test_format_size_rounds_to_three_significant_digits():
    assert format_size(1024 * 1024 + 1) == "1 MiB"
    assert format_size(int(12.345 * 1024)) == "12.3 KiB"


def test_parse_object_path():
    assert parse_object_path("bucketName-object-test/wormhole-img.png") == (
        "bucketName-object-test",
        "wormhole-img.png",
    )


def test_parse_object_path_keeps_slashes_in_key():
    assert parse_object_path("bucket/dir/file-one") == ("bucket", "dir/file-one")
    assert parse_object_path("bucket//leading") == ("bucket", "/leading")


@pytest.mark.parametrize("object_path", ["bucket", "bucket/", "/key", ""])
def test_parse_object_path_rejects_incomplete_paths(object_path):
    with pytest.raises(ValidationError, match=r"\{bucket\}/\{key\}"):
        parse_object_path(object_path)


@pytest.mark.parametrize("name", ["", "abc def", "a/b", ".", "..", "tab\tname"])
def test_validate_bucket_name_rejects(name):
    with pytest.raises(ValidationError):
        validate_bucket_name(name)


def test_validate_bucket_name_accepts():
    assert validate_bucket_name("testBucket") == "testBucket"
