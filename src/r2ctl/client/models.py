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

from typing import Any, List, Optional

from pydantic import BaseModel


class ApiMessage(BaseModel):
    """Error or informational message returned by the API"""

    code: Optional[int] = None
    message: str = ""


class ApiResponse(BaseModel):
    """Response envelope shared by the JSON endpoints"""

    success: bool = True
    errors: List[ApiMessage] = []
    messages: List[ApiMessage] = []
    result: Any = None


class BucketInfo(BaseModel):
    """Bucket entry returned when listing buckets"""

    name: str
    creation_date: str


class BucketList(BaseModel):
    """Result payload of the list buckets endpoint"""

    buckets: List[BucketInfo] = []
