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
allowgate - container image allowlist gate.

Classifies container image identifiers against a global reference allowlist
and per-policy name-pattern allowlists, for use in admission control.
"""

from .errors import AllowgateError, ParseError, InvalidPatternError, ConfigError
from .constants import GLOBAL_IMAGE_ALLOWLIST
from .FILTERS.global_filter import GlobalAllowlistFilter, remove_globally_allowed_images
from .MATCHERS.allowlist import (
    image_in_allowlist_by_pattern,
    image_in_allowlist_by_reference,
    image_in_policy_allowlist,
)

__version__ = "0.1.0"
__author__ = "Michael Maillet, Damien Davison, Sacha Davison"
__license__ = "Apache-2.0"

__all__ = [
    "AllowgateError",
    "ParseError",
    "InvalidPatternError",
    "ConfigError",
    "GLOBAL_IMAGE_ALLOWLIST",
    "GlobalAllowlistFilter",
    "remove_globally_allowed_images",
    "image_in_allowlist_by_pattern",
    "image_in_allowlist_by_reference",
    "image_in_policy_allowlist",
]
