"""Sepolia Quick Wallet - a terminal wallet for one ephemeral Sepolia account.

This package is organized into feature-based modules:
- features.connection: RPC endpoint failover
- features.account: session lifecycle
- features.balance: balance polling
- features.transfer: signed value transfers
- shared: logging, network transport, errors and collaborator protocols
"""

from sepolia_wallet.client import EthereumClient
from sepolia_wallet.config import WalletConfig
from sepolia_wallet.features.account import SessionManager, WalletSession
from sepolia_wallet.features.balance import BalanceMonitor, BalanceSample
from sepolia_wallet.features.connection import EndpointSelector
from sepolia_wallet.features.transfer import TransactionSubmitter
from sepolia_wallet.shared import Account, PendingTransfer, Severity, WalletError

__version__ = "0.1.0"
__all__ = [
    "Account",
    "BalanceMonitor",
    "BalanceSample",
    "EndpointSelector",
    "EthereumClient",
    "PendingTransfer",
    "SessionManager",
    "Severity",
    "TransactionSubmitter",
    "WalletConfig",
    "WalletError",
    "WalletSession",
]
