"""Account session feature for Sepolia Quick Wallet."""

from sepolia_wallet.features.account.service import (
    LOGOUT_PROMPT,
    SessionManager,
    WalletSession,
    normalize_private_key,
)

__all__ = ["SessionManager", "WalletSession", "normalize_private_key", "LOGOUT_PROMPT"]
