"""Transfer feature module for Sepolia Quick Wallet."""

from sepolia_wallet.features.transfer.service import (
    TransactionSubmitter,
    classify_send_failure,
    shorten_address,
)
from sepolia_wallet.features.transfer.validators import (
    TransferAmountValidator,
    TransferValidationResult,
    validate_transfer,
)

__all__ = [
    "TransactionSubmitter",
    "TransferAmountValidator",
    "TransferValidationResult",
    "classify_send_failure",
    "shorten_address",
    "validate_transfer",
]
