"""Ordered RPC endpoint failover for Sepolia Quick Wallet."""

from __future__ import annotations

import asyncio
from typing import Callable, Sequence

from sepolia_wallet.client import EthereumClient
from sepolia_wallet.config import DEFAULT_CONFIG, WalletConfig
from sepolia_wallet.shared.connection_state import (
    ConnectionState,
    ConnectionStatus,
    StateChangeCallback,
)
from sepolia_wallet.shared.errors import NoEndpointReachableError
from sepolia_wallet.shared.logging import get_logger
from sepolia_wallet.shared.protocols import SigningClient

logger = get_logger(__name__)

NO_ENDPOINT_MESSAGE = (
    "Could not connect to Sepolia. No RPC endpoint answered; if public endpoints "
    "are blocked on your network, route requests through a local proxy "
    "(set HTTPS_PROXY) and try again."
)

ClientFactory = Callable[[str], SigningClient]


class EndpointSelector:
    """Connects to the first endpoint in ``endpoints`` that answers a block height query.

    Every ``connect()`` starts again from the first endpoint.
    """

    def __init__(
        self,
        endpoints: Sequence[str] | None = None,
        client_factory: ClientFactory | None = None,
        config: WalletConfig | None = None,
        on_state_change: StateChangeCallback | None = None,
    ):
        self.config = config or DEFAULT_CONFIG
        self.endpoints = tuple(endpoints if endpoints is not None else self.config.rpc_urls)
        self.client_factory = client_factory or (
            lambda url: EthereumClient(url, config=self.config)
        )
        self.on_state_change = on_state_change
        self._state = ConnectionState()

    @property
    def state(self) -> ConnectionState:
        return self._state

    def _transition(self, new_state: ConnectionState) -> None:
        old_status = self._state.status
        self._state = new_state
        if self.on_state_change and old_status != new_state.status:
            try:
                self.on_state_change(old_status, new_state.status, new_state)
            except Exception as e:
                logger.error("Error in connection state callback: %s", e)

    async def connect(self) -> SigningClient:
        self._transition(ConnectionState(status=ConnectionStatus.CONNECTING))

        for index, url in enumerate(self.endpoints):
            log = logger.with_context(endpoint=url, attempt=index + 1)
            client = None
            try:
                client = self.client_factory(url)
                height = await asyncio.to_thread(client.get_block_height)
            except Exception as e:
                log.warning("Endpoint unreachable: %s", e)
                if client is not None:
                    client.close()
                continue

            log.info("Connected to RPC endpoint at block %s", height)
            self._transition(
                ConnectionState(
                    selected_endpoint_index=index,
                    client=client,
                    status=ConnectionStatus.CONNECTED,
                    endpoint_url=url,
                )
            )
            return client

        logger.error("All %d RPC endpoints failed the liveness check", len(self.endpoints))
        self._transition(
            ConnectionState(
                status=ConnectionStatus.FAILED,
                error_message=NO_ENDPOINT_MESSAGE,
            )
        )
        raise NoEndpointReachableError(NO_ENDPOINT_MESSAGE)

    def reset(self) -> None:
        client = self._state.client
        self._transition(ConnectionState())
        if client is not None:
            client.close()
