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

# Upload limit applied to every object put, local or remote.
MAX_UPLOAD_SIZE = 300 * 1024 * 1024

# Local emulation
DEFAULT_PERSIST_DIR = ".r2ctl/state"
LOCAL_STATE_VERSION = "v3"
LOCAL_R2_DIR = "r2"

# Remote API
DEFAULT_API_BASE_URL = "https://api.cloudflare.com/client/v4"
JURISDICTION_HEADER = "cf-r2-jurisdiction"
DEFAULT_REQUEST_TIMEOUT = 60
MAX_RETRIES = 5
BACKOFF_FACTOR = 0.5

# Environment variables
ENV_CONFIG_FILE = "R2CTL_CONFIG"
ENV_LOG_LEVEL = "R2CTL_LOG_LEVEL"
ENV_ACCOUNT_ID = "CLOUDFLARE_ACCOUNT_ID"
ENV_API_TOKEN = "CLOUDFLARE_API_TOKEN"
ENV_API_BASE_URL = "R2CTL_API_BASE_URL"

DEFAULT_LOG_LEVEL = "WARNING"
