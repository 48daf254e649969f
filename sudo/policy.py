"""
Eligibility Policy.

Pure predicate over already-known identity state. No network, no clock.

A superuser operating under a downgraded role may re-elevate.
A non-superuser may never elevate.
"""

from enum import IntEnum
from typing import Union

from pydantic import BaseModel, ConfigDict, field_validator


class Role(IntEnum):
    """Backend role tiers. Values match the numeric codes the server sends."""

    GUEST = 0
    USER = 1
    ADMIN = 2

    @classmethod
    def parse(cls, value: Union["Role", int, str]) -> "Role":
        """Accept a Role, its numeric code (int or string), or its name."""
        if isinstance(value, Role):
            return value
        if isinstance(value, str):
            text = value.strip()
            if text.lstrip("-").isdigit():
                return cls(int(text))
            try:
                return cls[text.upper()]
            except KeyError:
                raise ValueError(f"Unknown role: {value!r}")
        return cls(value)


HIGHEST_ROLE = max(Role)


class SessionIdentity(BaseModel):
    """Read-only identity inputs from the external session provider."""

    model_config = ConfigDict(frozen=True)

    base_role: Role
    active_role: Role

    @field_validator("base_role", "active_role", mode="before")
    @classmethod
    def _coerce_role(cls, value):
        return Role.parse(value)


def can_elevate(identity: SessionIdentity) -> bool:
    """True when elevation may be offered to this principal."""
    return identity.active_role != HIGHEST_ROLE and identity.base_role == HIGHEST_ROLE
