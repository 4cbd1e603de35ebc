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
Reference matching: two identifiers match when they name the same
registry and repository, whatever their tags or digests.
"""
from ..REGISTRY.image_reference import ReferenceParser, parse_reference


def image_ref_match(image: str, pattern: str, parser: ReferenceParser = parse_reference) -> bool:
    """
    Checks whether an image refers to the same repository as a pattern.

    :param image: The image identifier to check.
    :param pattern: A full image identifier from an allowlist.
    :param parser: Callable turning an identifier into an ImageReference.
    :return: True if registry and repository are equal.
    :raises ParseError: If either string is not a valid image identifier.
    """
    allow_ref = parser(pattern)
    image_ref = parser(image)
    return allow_ref.context == image_ref.context
