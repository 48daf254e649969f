"""
Sudo Elevation Workflow.

Client-side state machine gating admin actions behind re-authentication.

    CLOSED ──open()──▶ OPEN ──submit()──▶ SUBMITTING ──Success──▶ ELEVATED
       ▲                 │                    │
       │              cancel()             ApiError
       │                 ▼                    ▼
       └──cancel()──── CLOSED ◀──cancel()── DENIED ──submit()──▶ SUBMITTING

Invariants:
- At most one submission in flight (loading flag, not a lock)
- loading is cleared on every exit path of submit()
- A rejected credential always shows INVALID_PASSWORD_MESSAGE, never server text
- cancel() never touches the session and never calls the network
- ELEVATED is left only through observe() (external expiry/logout)
- Passwords are never logged
"""

import logging
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Callable, Optional

from envelope import ApiError

from .api import AuthApi
from .policy import HIGHEST_ROLE, SessionIdentity, can_elevate
from .session import DEFAULT_SUDO_TTL, SudoSession

logger = logging.getLogger(__name__)

INVALID_PASSWORD_MESSAGE = "Invalid password"

IdentityProvider = Callable[[], SessionIdentity]
Clock = Callable[[], datetime]


class WorkflowState(str, Enum):
    CLOSED = "closed"
    OPEN = "open"
    SUBMITTING = "submitting"
    ELEVATED = "elevated"
    DENIED = "denied"


class WorkflowError(Exception):
    """Workflow used out of order."""
    pass


class ElevationNotAllowed(WorkflowError):
    """The current principal may not elevate."""
    pass


class InvalidTransition(WorkflowError):
    """The requested transition does not exist from the current state."""
    pass


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SudoWorkflow:
    """
    Drives one elevation interaction.

    Usage:
        workflow = SudoWorkflow(auth_api, session, identity_provider)
        if workflow.eligible:
            workflow.open()
            await workflow.submit(password)
    """

    def __init__(
        self,
        auth_api: AuthApi,
        session: SudoSession,
        identity_provider: IdentityProvider,
        clock: Clock = utcnow,
        ttl: timedelta = DEFAULT_SUDO_TTL,
    ):
        """
        Args:
            auth_api:          Elevation endpoint client
            session:           Process-wide SudoSession to mutate on success
            identity_provider: Returns the current {base_role, active_role}
            clock:             Source of "now" for the expiry stamp
            ttl:               Elevation lifetime
        """
        if ttl <= timedelta(0):
            raise ValueError(f"Elevation TTL must be positive, got {ttl}")

        self.auth_api = auth_api
        self.session = session
        self.identity_provider = identity_provider
        self.clock = clock
        self.ttl = ttl

        self.state = WorkflowState.CLOSED
        self.loading = False
        self.password = ""
        self.field_error: Optional[str] = None

    # ── Derived ───────────────────────────────────────────────

    @property
    def eligible(self) -> bool:
        """Whether the elevation control should be offered at all."""
        return can_elevate(self.identity_provider())

    @property
    def is_open(self) -> bool:
        """Whether the credential interaction is visible."""
        return self.state in (
            WorkflowState.OPEN,
            WorkflowState.SUBMITTING,
            WorkflowState.DENIED,
        )

    # ── Transitions ───────────────────────────────────────────

    def open(self) -> None:
        """CLOSED → OPEN."""
        if self.state is not WorkflowState.CLOSED:
            raise InvalidTransition(f"Cannot open from {self.state.value}")
        if not self.eligible:
            raise ElevationNotAllowed("Elevation is not available for this session")
        self._transition(WorkflowState.OPEN)

    async def submit(self, password: str) -> WorkflowState:
        """
        OPEN/DENIED → SUBMITTING → ELEVATED | DENIED.

        Exceptions other than ApiError propagate after the interaction is
        returned to OPEN with loading cleared.
        """
        if self.state not in (WorkflowState.OPEN, WorkflowState.DENIED):
            raise InvalidTransition(f"Cannot submit from {self.state.value}")

        self.password = password
        self.field_error = None
        self.loading = True
        self._transition(WorkflowState.SUBMITTING)

        try:
            await self.auth_api.sudo(password)
            self.session.activate(self.clock(), self.ttl)
        except ApiError as e:
            logger.info(
                "Elevation rejected",
                extra={"status_code": e.status_code},
            )
            self.field_error = INVALID_PASSWORD_MESSAGE
            self._transition(WorkflowState.DENIED)
        except BaseException:
            # Unclassified failure or task cancellation: back to editing
            self._transition(WorkflowState.OPEN)
            raise
        else:
            self.password = ""
            self._transition(WorkflowState.ELEVATED)
        finally:
            self.loading = False

        return self.state

    def cancel(self) -> None:
        """OPEN/DENIED → CLOSED. Clears interaction fields only."""
        if self.state not in (WorkflowState.OPEN, WorkflowState.DENIED):
            raise InvalidTransition(f"Cannot cancel from {self.state.value}")
        self._reset_fields()
        self._transition(WorkflowState.CLOSED)

    def observe(self, identity: SessionIdentity) -> None:
        """
        Passively follow an external downgrade (expiry or logout).

        Only acts while ELEVATED: once the provider reports an active role
        below the highest tier, the session is closed and the workflow
        returns to CLOSED.
        """
        if self.state is not WorkflowState.ELEVATED:
            return
        if identity.active_role == HIGHEST_ROLE:
            return
        self.session.close()
        self._reset_fields()
        self._transition(WorkflowState.CLOSED)

    # ── Helpers ───────────────────────────────────────────────

    def _reset_fields(self) -> None:
        self.password = ""
        self.field_error = None
        self.loading = False

    def _transition(self, new_state: WorkflowState) -> None:
        logger.debug(
            f"Sudo workflow {self.state.value} -> {new_state.value}",
            extra={"from_state": self.state.value, "to_state": new_state.value},
        )
        self.state = new_state
