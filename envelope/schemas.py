"""
Envelope Normalizer - Result Contract

PURE DATA MODELS - NO LOGIC
Every response leaves the normalizer as exactly one of these shapes.
"""

from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

SERVER_ERROR_MESSAGE = "Server error"


class ApiError(Exception):
    """
    Classified API failure.

    `code` mirrors `status_code`: the backend does not send a separate
    application code. Any field may be None when the response did not
    carry it. Fields are read-only once constructed.
    """

    _FIELDS = ("message", "status_code", "code")

    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        code: Optional[int] = None,
    ):
        super().__init__(message)
        object.__setattr__(self, "message", message)
        object.__setattr__(self, "status_code", status_code)
        object.__setattr__(self, "code", code)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._FIELDS:
            raise AttributeError(f"ApiError.{name} is read-only")
        super().__setattr__(name, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ApiError):
            return NotImplemented
        return (self.message, self.status_code, self.code) == (
            other.message, other.status_code, other.code
        )

    def __hash__(self) -> int:
        return hash((self.message, self.status_code, self.code))

    def __repr__(self) -> str:
        return (
            f"ApiError(message={self.message!r}, "
            f"status_code={self.status_code!r}, code={self.code!r})"
        )


# ============================================================================
# NORMALIZED RESULT (THE CONTRACT)
# ============================================================================

class Success(BaseModel):
    """Status 200 (or < 400 on the strict path). Payload is the parsed body, unvalidated."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"
    payload: Any = Field(None, description="Parsed JSON body; schema is backend-defined")


class Failure(BaseModel):
    """Classified failure carried as a value instead of raised."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal["failure"] = "failure"
    error: ApiError


NormalizedResult = Union[Success, Failure]
