"""Balance monitoring feature for Sepolia Quick Wallet."""

from sepolia_wallet.features.balance.service import (
    BalanceMonitor,
    BalanceSample,
    format_amount,
)

__all__ = ["BalanceMonitor", "BalanceSample", "format_amount"]
