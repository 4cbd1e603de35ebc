# Copyright 2024 Michael Maillet, Damien Davison, Sacha Davison
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Process-wide constants.
"""
from typing import Tuple

# Images the admission webhook itself installs; these must never be blocked
# by the policies they enforce.
GLOBAL_IMAGE_ALLOWLIST: Tuple[str, ...] = (
    "gcr.io/kritis-project/kritis-server",
    "gcr.io/kritis-project/preinstall",
    "gcr.io/kritis-project/postinstall",
    "gcr.io/kritis-project/predelete",
)

DEFAULT_REGISTRY = "index.docker.io"
DEFAULT_TAG = "latest"
