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
Image reference parsing and handling.
Parses image references like 'nginx:latest' or 'gcr.io/project/image@sha256:...'
under weak validation: a missing registry or tag is filled in with defaults
instead of being rejected.
"""

import re
from typing import Callable, Optional, Tuple
from dataclasses import dataclass

from ..constants import DEFAULT_REGISTRY, DEFAULT_TAG
from ..errors import ParseError

_COMPONENT_RE = re.compile(r"[a-z0-9]+(?:(?:[._]|__|-+)[a-z0-9]+)*")
_TAG_RE = re.compile(r"[A-Za-z0-9_.-]{1,128}")
_HOST_RE = re.compile(
    r"(?:[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?"
    r"(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?)*"
    r"|\[[0-9A-Fa-f:.]+\])"
    r"(?::[0-9]+)?"
)
_DIGEST_HEX_LENGTHS = {"sha256": 64, "sha512": 128}

MAX_REPOSITORY_LENGTH = 255


@dataclass(frozen=True)
class RepositoryContext:
    """
    The identity of an image: registry host plus repository path.
    Tags and digests are not part of it.
    """

    registry: str
    repository: str

    def __str__(self) -> str:
        return f"{self.registry}/{self.repository}"


@dataclass(frozen=True)
class ImageReference:
    """
    Parsed image reference.

    Examples:
        - nginx -> index.docker.io/library/nginx:latest
        - nginx:1.21 -> index.docker.io/library/nginx:1.21
        - myuser/myimage:v1 -> index.docker.io/myuser/myimage:v1
        - gcr.io/project/image@sha256:abc... -> gcr.io/project/image@sha256:abc...
    """

    registry: str
    repository: str
    tag: Optional[str] = None
    digest: Optional[str] = None

    @classmethod
    def parse(cls, reference: str) -> "ImageReference":
        """
        Parse an image reference string.

        Args:
            reference: Image reference string (e.g., 'nginx:latest', 'myuser/myimage:v1')

        Returns:
            Parsed ImageReference object.

        Raises:
            ParseError: If the reference is not a valid image identifier.
        """
        if not reference:
            raise ParseError(reference, "empty reference")

        # Handle digest format (image@sha256:...)
        digest = None
        name = reference
        if "@" in reference:
            name, digest = reference.rsplit("@", 1)
            _check_digest(reference, digest)

        # Handle tag format (image:tag)
        tag = None
        last_colon = name.rfind(":")
        if last_colon != -1:
            after_colon = name[last_colon + 1:]
            # If there's a slash after the colon, it's a port, not a tag
            if "/" not in after_colon:
                tag = after_colon
                name = name[:last_colon]
                if not _TAG_RE.fullmatch(tag):
                    raise ParseError(reference, f"invalid tag {tag!r}")

        registry, repository = _split_repository(reference, name)

        if not tag and not digest:
            tag = DEFAULT_TAG

        return cls(registry=registry, repository=repository, tag=tag, digest=digest)

    @property
    def context(self) -> RepositoryContext:
        """The registry and repository, without tag or digest."""
        return RepositoryContext(registry=self.registry, repository=self.repository)

    @property
    def full_name(self) -> str:
        """Get full image name with registry."""
        name = str(self.context)
        if self.tag:
            name = f"{name}:{self.tag}"
        if self.digest:
            name = f"{name}@{self.digest}"
        return name

    @property
    def short_name(self) -> str:
        """Get short image name (without registry if default)."""
        if self.registry != DEFAULT_REGISTRY:
            return self.full_name
        repo = self.repository
        # Remove 'library/' prefix for official images
        if repo.startswith("library/"):
            repo = repo[len("library/"):]
        if self.tag:
            repo = f"{repo}:{self.tag}"
        if self.digest:
            repo = f"{repo}@{self.digest}"
        return repo

    def __str__(self) -> str:
        return self.short_name

    def __repr__(self) -> str:
        return f"ImageReference({self.full_name})"


def _check_digest(reference: str, digest: str) -> None:
    algorithm, sep, hex_part = digest.partition(":")
    expected = _DIGEST_HEX_LENGTHS.get(algorithm)
    if not sep or expected is None:
        raise ParseError(reference, f"unsupported digest {digest!r}")
    if len(hex_part) != expected or not all(c in "0123456789abcdef" for c in hex_part):
        raise ParseError(reference, f"digest must be {expected} lowercase hex characters")


def _split_repository(reference: str, name: str) -> Tuple[str, str]:
    """Split 'registry/repo/path' into registry and repository, applying defaults."""
    registry = ""
    repository = name
    parts = name.split("/", 1)
    if len(parts) == 2:
        first_part = parts[0]
        # The first component is a registry only if it contains "." or ":"
        if "." in first_part or ":" in first_part:
            registry, repository = parts

    if not repository:
        raise ParseError(reference, "missing repository")
    if len(repository) > MAX_REPOSITORY_LENGTH:
        raise ParseError(reference, f"repository longer than {MAX_REPOSITORY_LENGTH} characters")
    for component in repository.split("/"):
        if not _COMPONENT_RE.fullmatch(component):
            raise ParseError(reference, f"invalid repository component {component!r}")

    if registry and not _HOST_RE.fullmatch(registry):
        raise ParseError(reference, f"invalid registry {registry!r}")
    if not registry or registry == "docker.io":
        registry = DEFAULT_REGISTRY

    # Official images on the default registry live under library/
    if registry == DEFAULT_REGISTRY and "/" not in repository:
        repository = f"library/{repository}"

    return registry, repository


def parse_reference(reference: str) -> ImageReference:
    """Default parser used by the reference matcher."""
    return ImageReference.parse(reference)


ReferenceParser = Callable[[str], ImageReference]
