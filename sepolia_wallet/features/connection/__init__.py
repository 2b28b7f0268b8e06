"""RPC endpoint selection feature for Sepolia Quick Wallet."""

from sepolia_wallet.features.connection.service import (
    NO_ENDPOINT_MESSAGE,
    EndpointSelector,
)

__all__ = ["EndpointSelector", "NO_ENDPOINT_MESSAGE"]
