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
Exceptions raised by allowgate.
"""
from typing import Optional


class AllowgateError(Exception):
    """Base class for all allowgate errors."""


class ParseError(AllowgateError, ValueError):
    """
    An image identifier could not be parsed, even under weak validation.

    Args:
        reference: The offending identifier.
        reason: Why it was rejected.
    """

    def __init__(self, reference: str, reason: str):
        self.reference = reference
        self.reason = reason
        super().__init__(f"could not parse reference {reference!r}: {reason}")


class InvalidPatternError(AllowgateError, ValueError):
    """An allowlist name pattern is unusable (currently: empty)."""

    def __init__(self, pattern: str, reason: str = "empty pattern"):
        self.pattern = pattern
        self.reason = reason
        super().__init__(reason)


class ConfigError(AllowgateError):
    """The allowlist configuration could not be read or validated."""

    def __init__(self, message: str, path: Optional[str] = None, variable: Optional[str] = None):
        self.path = path
        self.variable = variable
        if path:
            message = f"{path}: {message}"
        super().__init__(message)
