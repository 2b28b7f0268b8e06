"""Connection state tracking for Sepolia Quick Wallet.

The state is owned by the endpoint selector; everything else only reads it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from sepolia_wallet.shared.protocols import SigningClient


class ConnectionStatus(Enum):
    UNINITIALIZED = "uninitialized"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    FAILED = "failed"


@dataclass
class ConnectionState:
    selected_endpoint_index: int | None = None
    client: SigningClient | None = None
    status: ConnectionStatus = ConnectionStatus.UNINITIALIZED
    endpoint_url: str | None = None
    error_message: str = ""

    @property
    def is_connected(self) -> bool:
        return self.status == ConnectionStatus.CONNECTED and self.client is not None


StateChangeCallback = Callable[[ConnectionStatus, ConnectionStatus, ConnectionState], None]


def get_connection_state_message(status: ConnectionStatus) -> tuple[str, str]:
    messages = {
        ConnectionStatus.UNINITIALIZED: (
            "Not connected",
            "Create or import a wallet to connect to Sepolia.",
        ),
        ConnectionStatus.CONNECTING: (
            "Connecting",
            "Looking for a reachable Sepolia RPC endpoint...",
        ),
        ConnectionStatus.CONNECTED: (
            "Connected to Sepolia",
            "Balance is refreshed automatically.",
        ),
        ConnectionStatus.FAILED: (
            "Connection failed",
            "No Sepolia RPC endpoint answered. Retry or use a local proxy.",
        ),
    }
    return messages.get(status, ("Unknown status", ""))
