"""Feature modules for Sepolia Quick Wallet.

- connection: ordered RPC endpoint failover
- account: session lifecycle (create, import, logout)
- balance: balance polling and incoming-funds notifications
- transfer: transfer validation, signing and broadcast
"""

from sepolia_wallet.features import account
from sepolia_wallet.features import balance
from sepolia_wallet.features import connection
from sepolia_wallet.features import transfer

__all__ = ["account", "balance", "connection", "transfer"]
