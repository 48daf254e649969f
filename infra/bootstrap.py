"""
Client initialization and bootstrap.

Singleton pattern for wiring transport, notification sink, normalizer,
session and elevation workflow from configuration.
"""

import logging
from typing import Optional

import envelope.notifier as notifier_module
from envelope import EnvelopeNormalizer, Notifier
from sudo import AuthApi, IdentityProvider, SudoSession, SudoWorkflow
from transport import HttpxTransportAdapter, StubTransportAdapter, TransportAdapter

from .config import ClientConfig, get_config

logger = logging.getLogger(__name__)


class ClientBootstrap:
    """
    Bootstrap the client core based on configuration.

    Singleton pattern - single instance per process, matching the
    process-wide lifetime of the Notification Sink and SudoSession.
    """

    _instance: Optional["ClientBootstrap"] = None

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        transport: Optional[TransportAdapter] = None,
    ):
        """Initialize bootstrap with configuration."""
        self.config = config or get_config()
        self.transport = transport or self._create_transport()
        # Process-wide sink, the one envelope.set_notifier() writes to
        self.sink = notifier_module.default_sink
        self.normalizer = EnvelopeNormalizer(self.sink)
        self.auth_api = AuthApi(self.transport, self.normalizer, sudo_path=self.config.sudo_path)
        self.session = SudoSession()
        self.workflow: Optional[SudoWorkflow] = None

    @classmethod
    def get_instance(
        cls,
        config: Optional[ClientConfig] = None,
        transport: Optional[TransportAdapter] = None,
    ) -> "ClientBootstrap":
        """
        Get singleton instance.

        Args:
            config:    Optional custom configuration (only used first time)
            transport: Optional transport override (only used first time)
        """
        if cls._instance is None:
            cls._instance = cls(config, transport)
        return cls._instance

    @classmethod
    def reset(cls):
        """Reset singleton (for testing)."""
        cls._instance = None

    def _create_transport(self) -> TransportAdapter:
        if self.config.transport_backend == "stub":
            return StubTransportAdapter()
        return HttpxTransportAdapter(
            base_url=self.config.base_url,
            timeout=self.config.timeout_s,
        )

    def register_notifier(self, notifier: Notifier) -> None:
        self.sink.set_notifier(notifier)

    def create_workflow(self, identity_provider: IdentityProvider) -> SudoWorkflow:
        """Create (or replace) the elevation workflow bound to the shared session."""
        self.workflow = SudoWorkflow(
            self.auth_api,
            self.session,
            identity_provider,
            ttl=self.config.sudo_ttl,
        )
        return self.workflow


def bootstrap_client(
    notifier: Notifier,
    identity_provider: IdentityProvider,
    config: Optional[ClientConfig] = None,
    transport: Optional[TransportAdapter] = None,
) -> ClientBootstrap:
    """
    Startup entry point for the hosting shell.

    Registers the notifier before any request can fail, then builds the
    elevation workflow.
    """
    instance = ClientBootstrap.get_instance(config, transport)
    instance.register_notifier(notifier)
    instance.create_workflow(identity_provider)
    logger.info(
        "Client core ready",
        extra={
            "base_url": instance.config.base_url,
            "transport": instance.config.transport_backend,
        },
    )
    return instance
