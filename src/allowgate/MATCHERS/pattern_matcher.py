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
Name pattern matching for policy allowlists.

A pattern is either a full image name, matched exactly, or a prefix ending
in '*'. The wildcard covers the rest of the last path segment (and any tag
or digest), but never a further '/'.
"""
from ..errors import InvalidPatternError

WILDCARD = "*"


def image_name_pattern_match(image: str, pattern: str) -> bool:
    """
    Matches an image name against a single allowlist pattern.

    Examples:
        - ('gcr.io/proj/repo:v1', 'gcr.io/proj/*') -> True
        - ('gcr.io/proj/sub/repo:v1', 'gcr.io/proj/*') -> False
        - ('gcr.io/proj/repo:v1', 'gcr.io/proj/repo:v1') -> True

    :param image: The image name, taken as a plain string.
    :param pattern: The allowlist pattern.
    :return: True on a match.
    :raises InvalidPatternError: If the pattern is empty.
    """
    if not pattern:
        raise InvalidPatternError(pattern)

    if pattern.endswith(WILDCARD):
        prefix = pattern[:-1]
        return image.startswith(prefix) and image.rfind("/") < len(prefix)

    return image == pattern
