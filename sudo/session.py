"""
Sudo Session.

In-memory, process-wide elevation record. Reset on reload; never persisted.
Mutated only by the elevation workflow (activate) and on expiry or
explicit close. Expiry against the live clock is enforced by the server.
"""

import logging
from datetime import datetime, timedelta
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

DEFAULT_SUDO_TTL = timedelta(hours=2)


class SessionRole(str, Enum):
    NORMAL = "normal"
    ELEVATED = "elevated"


class SudoSessionState(BaseModel):
    """Immutable snapshot of the session for callers."""

    model_config = ConfigDict(frozen=True)

    active: bool
    role: SessionRole
    expires_at: Optional[datetime] = None


class SudoSession:
    """Mutable elevation record."""

    def __init__(self):
        self.active = False
        self.role = SessionRole.NORMAL
        self.expires_at: Optional[datetime] = None

    def activate(self, now: datetime, ttl: timedelta = DEFAULT_SUDO_TTL) -> None:
        """Mark the session elevated until now + ttl."""
        if ttl <= timedelta(0):
            raise ValueError(f"Elevation TTL must be positive, got {ttl}")
        self.active = True
        self.role = SessionRole.ELEVATED
        self.expires_at = now + ttl
        logger.info(f"Sudo session active until {self.expires_at.isoformat()}")

    def close(self) -> None:
        """Drop elevation (expiry, logout, or explicit close)."""
        if self.active:
            logger.info("Sudo session closed")
        self.active = False
        self.role = SessionRole.NORMAL
        self.expires_at = None

    def snapshot(self) -> SudoSessionState:
        return SudoSessionState(active=self.active, role=self.role, expires_at=self.expires_at)
