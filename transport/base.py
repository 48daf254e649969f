from abc import ABC, abstractmethod

from .types import RequestDescriptor, RequestOutcome


class TransportAdapter(ABC):
    """
    Abstract network boundary.
    Normalizer and API wrappers must depend ONLY on this interface.
    """

    @abstractmethod
    async def perform(self, request: RequestDescriptor) -> RequestOutcome:
        """
        Issue a request and return its raw outcome.

        Raises:
            TransportReadError: the request never produced a readable outcome
        """
        raise NotImplementedError
