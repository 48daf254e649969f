"""
Sudo elevation exports.

Eligibility policy, in-memory session record, elevation endpoint client,
and the workflow state machine that ties them together.
"""

from .api import DEFAULT_SUDO_PATH, AuthApi
from .policy import HIGHEST_ROLE, Role, SessionIdentity, can_elevate
from .session import DEFAULT_SUDO_TTL, SessionRole, SudoSession, SudoSessionState
from .workflow import (
    INVALID_PASSWORD_MESSAGE,
    ElevationNotAllowed,
    IdentityProvider,
    InvalidTransition,
    SudoWorkflow,
    WorkflowError,
    WorkflowState,
)

__all__ = [
    # Policy
    "Role",
    "HIGHEST_ROLE",
    "SessionIdentity",
    "can_elevate",
    # Session
    "SudoSession",
    "SudoSessionState",
    "SessionRole",
    "DEFAULT_SUDO_TTL",
    # API
    "AuthApi",
    "DEFAULT_SUDO_PATH",
    # Workflow
    "SudoWorkflow",
    "WorkflowState",
    "WorkflowError",
    "ElevationNotAllowed",
    "InvalidTransition",
    "IdentityProvider",
    "INVALID_PASSWORD_MESSAGE",
]
