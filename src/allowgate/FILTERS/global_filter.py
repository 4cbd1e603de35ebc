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
Global allowlist filtering.
Removes images that the process-wide allowlist exempts from policy checks.
"""
import logging
from typing import Iterable, List, Optional, Tuple

from ..constants import GLOBAL_IMAGE_ALLOWLIST
from ..errors import ParseError
from ..MATCHERS.allowlist import image_in_allowlist_by_reference
from ..REGISTRY.image_reference import ReferenceParser, parse_reference

logger = logging.getLogger(__name__)


class GlobalAllowlistFilter:
    """
    Filters image lists against a fixed allowlist of image references.

    Entries are full image identifiers; an image is allowlisted when it names
    the same registry and repository as an entry, with any tag or digest.
    """

    def __init__(
        self,
        allowlist: Optional[Iterable[str]] = None,
        parser: ReferenceParser = parse_reference,
    ):
        """
        Initializes the filter.

        :param allowlist: Allowlisted image references. Defaults to GLOBAL_IMAGE_ALLOWLIST.
        :param parser: Callable turning an identifier into an ImageReference.
        """
        if allowlist is None:
            allowlist = GLOBAL_IMAGE_ALLOWLIST
        self._allowlist: Tuple[str, ...] = tuple(allowlist)
        self._parser = parser

    @property
    def allowlist(self) -> Tuple[str, ...]:
        return self._allowlist

    def is_allowed(self, image: str) -> bool:
        """
        Checks a single image against the allowlist.

        A parse failure is logged and the image is reported as not allowed.

        :param image: The image identifier.
        :return: True if the image is allowlisted.
        """
        try:
            allowed = image_in_allowlist_by_reference(image, self._allowlist, parser=self._parser)
        except ParseError as e:
            logger.error("couldn't check if %s is in global allowlist: %s", image, e)
            return False
        if allowed:
            logger.debug("%s is in global allowlist", image)
        return allowed

    def remove_allowed(self, images: Iterable[str]) -> List[str]:
        """
        Returns the images that are not allowlisted, in their original order.

        :param images: Image identifiers to filter.
        :return: Images that still need policy checks.
        """
        return [image for image in images if not self.is_allowed(image)]


_default_filter = GlobalAllowlistFilter()


def remove_globally_allowed_images(images: Iterable[str]) -> List[str]:
    """Returns all images that aren't in the global allowlist."""
    return _default_filter.remove_allowed(images)
