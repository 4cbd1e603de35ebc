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
Allowlist lookups built on the reference and pattern matchers.

Both lookups stop at the first matching entry. An entry that raises stops
the lookup too, and the error reaches the caller.
"""
from typing import Iterable

from ..REGISTRY.image_reference import ReferenceParser, parse_reference
from .pattern_matcher import image_name_pattern_match
from .reference_matcher import image_ref_match


def image_in_allowlist_by_reference(
    image: str,
    allowlist: Iterable[str],
    parser: ReferenceParser = parse_reference,
) -> bool:
    """
    Checks an image against allowlist entries using reference matching.

    :raises ParseError: If the image or an entry reached before a match cannot be parsed.
    """
    for entry in allowlist:
        if image_ref_match(image, entry, parser=parser):
            return True
    return False


def image_in_allowlist_by_pattern(image: str, allowlist: Iterable[str]) -> bool:
    """
    Checks an image against allowlist entries using name pattern matching.

    :raises InvalidPatternError: If an entry reached before a match is empty.
    """
    for entry in allowlist:
        if image_name_pattern_match(image, entry):
            return True
    return False


def image_in_policy_allowlist(image: str, allowlist: Iterable[str]) -> bool:
    """
    Checks whether a policy's admission allowlist admits an image.

    Policy allowlists hold name patterns ('gcr.io/proj/*'), so this uses
    pattern matching. An empty allowlist admits nothing.
    """
    return image_in_allowlist_by_pattern(image, allowlist)
