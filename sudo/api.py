"""
Auth API wrapper for the elevation endpoint.

The server's accept/reject decision is opaque. Only the status code is
interpreted, through the best-effort envelope contract.
"""

from envelope import EnvelopeNormalizer, Success
from transport import RequestDescriptor, TransportAdapter

DEFAULT_SUDO_PATH = "/cosmos/api/sudo"


class AuthApi:
    """Elevation endpoint client."""

    def __init__(
        self,
        transport: TransportAdapter,
        normalizer: EnvelopeNormalizer,
        sudo_path: str = DEFAULT_SUDO_PATH,
    ):
        self.transport = transport
        self.normalizer = normalizer
        self.sudo_path = sudo_path

    async def sudo(self, password: str, suppress_notify: bool = True) -> Success:
        """
        Submit the credential for elevation.

        Server rejection text stays off the notification channel by default;
        the workflow shows its own fixed message instead.

        Raises:
            ApiError: the server rejected the credential or the call failed
        """
        request = RequestDescriptor(
            method="POST",
            path=self.sudo_path,
            json_body={"password": password},
        )
        return await self.normalizer.normalize(
            self.transport.perform(request), suppress_notify=suppress_notify
        )
