"""
Transport request/outcome types.

PURE DATA - NO I/O
The core only builds method/path/headers/body; everything else about a
request is the adapter's business.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union


class TransportReadError(Exception):
    """The transport call or the body read failed before any classification."""
    pass


def _json_headers() -> Dict[str, str]:
    return {"Content-Type": "application/json"}


@dataclass(frozen=True)
class RequestDescriptor:
    """Describes a single request issued by the core."""

    method: str
    path: str
    headers: Dict[str, str] = field(default_factory=_json_headers)
    json_body: Optional[Any] = None


@dataclass
class RequestOutcome:
    """Raw result of a transport call: status code plus undecoded body."""

    status_code: int
    body: Union[bytes, str] = b""

    def read_text(self) -> str:
        """
        Return the body as text.

        Raises:
            TransportReadError: body is not decodable as UTF-8
        """
        if isinstance(self.body, str):
            return self.body
        try:
            return self.body.decode("utf-8")
        except (UnicodeDecodeError, AttributeError) as e:
            raise TransportReadError(f"Unreadable response body: {e}") from e
