import json
from typing import Dict, List, Tuple, Union

from .base import TransportAdapter
from .types import RequestDescriptor, RequestOutcome, TransportReadError

Scripted = Union[RequestOutcome, Exception]


class StubTransportAdapter(TransportAdapter):
    """
    Deterministic fake transport for testing and offline use.

    Outcomes are scripted per (method, path) and served in FIFO order; the
    last scripted outcome for a route is repeated once the queue drains.
    Unrouted requests get a 404 with a JSON message body.
    Every request is recorded in `requests`.
    """

    def __init__(self):
        self._routes: Dict[Tuple[str, str], List[Scripted]] = {}
        self.requests: List[RequestDescriptor] = []

    def script(self, method: str, path: str, *outcomes: Scripted) -> "StubTransportAdapter":
        """Queue outcomes (or exceptions to raise) for a route."""
        self._routes.setdefault((method.upper(), path), []).extend(outcomes)
        return self

    def script_json(self, method: str, path: str, status_code: int, body) -> "StubTransportAdapter":
        """Queue a JSON-encoded outcome for a route."""
        return self.script(
            method, path, RequestOutcome(status_code, json.dumps(body).encode("utf-8"))
        )

    async def perform(self, request: RequestDescriptor) -> RequestOutcome:
        self.requests.append(request)

        queue = self._routes.get((request.method.upper(), request.path))
        if not queue:
            return RequestOutcome(404, b'{"message": "Not found", "status": 404, "code": 404}')

        scripted = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(scripted, Exception):
            if isinstance(scripted, TransportReadError):
                raise scripted
            raise TransportReadError(str(scripted)) from scripted
        return scripted
