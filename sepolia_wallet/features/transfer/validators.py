"""Transfer input validation for Sepolia Quick Wallet."""

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Callable

ETHER_DECIMALS = 18

# Plain decimal notation only; "0,5" or "1_000" must not parse as 5 or 1000.
AMOUNT_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

MISSING_FIELDS = "missing fields"
INVALID_ADDRESS = "invalid address"
INVALID_AMOUNT = "invalid amount"
NON_POSITIVE_AMOUNT = "non-positive amount"
TOO_MANY_DECIMALS = "too many decimal places"

USER_MESSAGES = {
    MISSING_FIELDS: "Please enter both recipient address and amount",
    INVALID_ADDRESS: "Invalid recipient address",
    INVALID_AMOUNT: "Amount must be a valid number",
    NON_POSITIVE_AMOUNT: "Amount must be greater than 0",
    TOO_MANY_DECIMALS: f"Amount supports at most {ETHER_DECIMALS} decimal places",
}


@dataclass
class TransferValidationResult:
    is_valid: bool
    error_code: str | None = None
    normalized_value: Any = None

    @property
    def error_message(self) -> str | None:
        if self.error_code is None:
            return None
        return USER_MESSAGES.get(self.error_code, self.error_code)


class TransferAmountValidator:
    """Validator for ether amounts typed as decimal strings."""

    @staticmethod
    def parse_human_amount(value: str) -> TransferValidationResult:
        raw_amount = value.strip()
        if not AMOUNT_PATTERN.fullmatch(raw_amount):
            return TransferValidationResult(is_valid=False, error_code=INVALID_AMOUNT)

        try:
            amount_decimal = Decimal(raw_amount)
        except (InvalidOperation, ValueError):
            return TransferValidationResult(is_valid=False, error_code=INVALID_AMOUNT)

        if amount_decimal <= 0:
            return TransferValidationResult(
                is_valid=False, error_code=NON_POSITIVE_AMOUNT
            )

        return TransferValidationResult(is_valid=True, normalized_value=amount_decimal)

    @staticmethod
    def validate_decimal_places(
        amount: Decimal, decimals: int = ETHER_DECIMALS
    ) -> TransferValidationResult:
        exponent = amount.normalize().as_tuple().exponent
        decimal_places = max(0, -exponent) if isinstance(exponent, int) else 0
        if decimal_places > decimals:
            return TransferValidationResult(is_valid=False, error_code=TOO_MANY_DECIMALS)
        return TransferValidationResult(is_valid=True, normalized_value=amount)


def validate_transfer(
    recipient: str,
    amount: str,
    is_valid_address: Callable[[str], bool],
) -> TransferValidationResult:
    """Check a transfer request before any network call.

    Returns the parsed ``Decimal`` amount as ``normalized_value`` on success.
    """
    if not recipient or not amount:
        return TransferValidationResult(is_valid=False, error_code=MISSING_FIELDS)

    if not is_valid_address(recipient):
        return TransferValidationResult(is_valid=False, error_code=INVALID_ADDRESS)

    parsed = TransferAmountValidator.parse_human_amount(amount)
    if not parsed.is_valid:
        return parsed

    return TransferAmountValidator.validate_decimal_places(parsed.normalized_value)
