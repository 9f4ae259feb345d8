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

from typing import Any, Optional
from unittest.mock import MagicMock


def make_response(
    status_code: int = 200, json_body: Optional[dict[str, Any]] = None, content: bytes = b""
) -> MagicMock:
    """Build a fake ``requests.Response``."""
    response = MagicMock()
    response.status_code = status_code
    response.content = content
    if json_body is None:
        response.json.side_effect = ValueError("No JSON body")
    else:
        response.json.return_value = json_body
    return response


def fetch_result(result: Any = None) -> dict[str, Any]:
    """Wrap a result in the API response envelope."""
    return {"success": True, "errors": [], "messages": [], "result": result}
