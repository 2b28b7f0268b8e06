"""Shared utilities for Sepolia Quick Wallet."""

from sepolia_wallet.shared.errors import (
    AlreadyAuthenticatedError,
    BalanceQueryError,
    BroadcastError,
    InsufficientFundsError,
    InvalidKeyFormatError,
    NoEndpointReachableError,
    NotAuthenticatedError,
    SigningError,
    TransactionPendingError,
    TransferError,
    ValidationError,
    WalletError,
)
from sepolia_wallet.shared.logging import (
    ContextAdapter,
    LoggingConfig,
    LogLevel,
    format_error_for_user,
    get_logger,
    get_user_friendly_error,
    sanitize_message,
    setup_logging,
)
from sepolia_wallet.shared.models import (
    Account,
    PendingTransfer,
    TransactionReceipt,
    TransferTransaction,
)
from sepolia_wallet.shared.network import (
    NetworkClient,
    NetworkError,
    NetworkErrorType,
    TimeoutConfig,
)
from sepolia_wallet.shared.protocols import Confirmer, Notifier, Severity, SigningClient

__all__ = [
    "Account",
    "AlreadyAuthenticatedError",
    "BalanceQueryError",
    "BroadcastError",
    "Confirmer",
    "ContextAdapter",
    "InsufficientFundsError",
    "InvalidKeyFormatError",
    "LogLevel",
    "LoggingConfig",
    "NetworkClient",
    "NetworkError",
    "NetworkErrorType",
    "NoEndpointReachableError",
    "NotAuthenticatedError",
    "Notifier",
    "PendingTransfer",
    "Severity",
    "SigningClient",
    "SigningError",
    "TimeoutConfig",
    "TransactionPendingError",
    "TransactionReceipt",
    "TransferError",
    "TransferTransaction",
    "ValidationError",
    "WalletError",
    "format_error_for_user",
    "get_logger",
    "get_user_friendly_error",
    "sanitize_message",
    "setup_logging",
]
