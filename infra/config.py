"""
Client configuration.

Loads environment variables from .env and provides typed access.
Defaults target a local server with the stock elevation endpoint.
"""

import os
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv

# Load environment variables from .env file at the project root
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(env_path)

TransportBackendType = Literal["httpx", "stub"]


@dataclass
class ClientConfig:
    """Client configuration from environment."""

    base_url: str
    timeout_s: float
    sudo_path: str
    sudo_ttl_hours: float
    transport_backend: TransportBackendType

    @property
    def sudo_ttl(self) -> timedelta:
        return timedelta(hours=self.sudo_ttl_hours)

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """
        Load configuration from environment variables.

        Raises:
            ValueError: a numeric variable does not parse, TTL is not
                        positive, or the transport backend is unknown
        """
        config = cls(
            base_url=os.getenv("ADMIN_CLIENT_BASE_URL", "http://localhost"),
            timeout_s=float(os.getenv("ADMIN_CLIENT_TIMEOUT_S", "10.0")),
            sudo_path=os.getenv("ADMIN_CLIENT_SUDO_PATH", "/cosmos/api/sudo"),
            sudo_ttl_hours=float(os.getenv("ADMIN_CLIENT_SUDO_TTL_HOURS", "2")),
            transport_backend=os.getenv("ADMIN_CLIENT_TRANSPORT", "httpx").lower(),  # type: ignore
        )
        config.validate()
        return config

    def validate(self) -> None:
        if self.sudo_ttl_hours <= 0:
            raise ValueError(f"ADMIN_CLIENT_SUDO_TTL_HOURS must be positive, got {self.sudo_ttl_hours}")
        if self.transport_backend not in ("httpx", "stub"):
            raise ValueError(f"Unknown ADMIN_CLIENT_TRANSPORT: {self.transport_backend}")


def get_config() -> ClientConfig:
    """Get client configuration from the current environment."""
    return ClientConfig.from_env()
