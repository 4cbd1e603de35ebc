"""
Models for allowlist configuration: the global reference allowlist and
per-policy admission allowlist patterns.
"""
from typing import List
from pydantic import BaseModel, ConfigDict, Field

from ..constants import GLOBAL_IMAGE_ALLOWLIST


class AdmissionAllowlistPattern(BaseModel):
    """
    A single name pattern, e.g. 'gcr.io/my-project/*'.
    """
    model_config = ConfigDict(populate_by_name=True)

    name_pattern: str = Field(alias="namePattern")


class AllowlistPolicy(BaseModel):
    """
    A named policy whose allowlisted images skip attestation checks.
    """
    model_config = ConfigDict(populate_by_name=True)

    name: str
    admission_allowlist_patterns: List[AdmissionAllowlistPattern] = Field(
        default_factory=list, alias="admissionAllowlistPatterns"
    )

    @property
    def patterns(self) -> List[str]:
        return [p.name_pattern for p in self.admission_allowlist_patterns]


class AllowlistConfig(BaseModel):
    """
    Complete allowlist configuration.
    Equivalent to a parsed allowlist YAML file.
    """
    model_config = ConfigDict(populate_by_name=True)

    global_allowlist: List[str] = Field(
        default_factory=lambda: list(GLOBAL_IMAGE_ALLOWLIST), alias="globalAllowlist"
    )
    policies: List[AllowlistPolicy] = []

    def policy(self, name: str) -> AllowlistPolicy:
        """
        Looks up a policy by name.

        :raises KeyError: If no policy has that name.
        """
        for policy in self.policies:
            if policy.name == name:
                return policy
        raise KeyError(name)
