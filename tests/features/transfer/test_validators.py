"""Tests for transfer input validation."""

from decimal import Decimal

import pytest
from eth_utils import is_address

from sepolia_wallet.features.transfer.validators import (
    INVALID_ADDRESS,
    INVALID_AMOUNT,
    MISSING_FIELDS,
    NON_POSITIVE_AMOUNT,
    TOO_MANY_DECIMALS,
    TransferAmountValidator,
    TransferValidationResult,
    validate_transfer,
)
from tests.fakes import RECIPIENT


@pytest.mark.unit
class TestParseHumanAmount:
    def test_plain_decimal(self):
        result = TransferAmountValidator.parse_human_amount("0.01")
        assert result.is_valid
        assert result.normalized_value == Decimal("0.01")

    @pytest.mark.parametrize("value", ["1e-3", ".5", "2.", " 0.5 "])
    def test_other_decimal_notations(self, value):
        assert TransferAmountValidator.parse_human_amount(value).is_valid

    @pytest.mark.parametrize("value", ["0,5", "1,5", "1,000.5", "1 000", "0_5"])
    def test_separators_are_rejected(self, value):
        result = TransferAmountValidator.parse_human_amount(value)
        assert not result.is_valid
        assert result.error_code == INVALID_AMOUNT

    @pytest.mark.parametrize("value", ["abc", "1.2.3", "", "NaN", "Infinity", "0x10"])
    def test_not_a_number(self, value):
        result = TransferAmountValidator.parse_human_amount(value)
        assert not result.is_valid
        assert result.error_code == INVALID_AMOUNT

    @pytest.mark.parametrize("value", ["0", "-1", "0.000"])
    def test_non_positive(self, value):
        result = TransferAmountValidator.parse_human_amount(value)
        assert result.error_code == NON_POSITIVE_AMOUNT


@pytest.mark.unit
class TestDecimalPlaces:
    def test_eighteen_places_allowed(self):
        result = TransferAmountValidator.validate_decimal_places(
            Decimal("0.000000000000000001")
        )
        assert result.is_valid

    def test_nineteen_places_rejected(self):
        result = TransferAmountValidator.validate_decimal_places(
            Decimal("0.0000000000000000001")
        )
        assert result.error_code == TOO_MANY_DECIMALS

    def test_trailing_zeros_do_not_count(self):
        result = TransferAmountValidator.validate_decimal_places(
            Decimal("1.00000000000000000000")
        )
        assert result.is_valid


@pytest.mark.unit
class TestValidateTransfer:
    def test_valid(self):
        result = validate_transfer(RECIPIENT, "0.5", is_address)
        assert result.is_valid
        assert result.normalized_value == Decimal("0.5")
        assert result.error_message is None

    @pytest.mark.parametrize("recipient,amount", [("", "1"), (RECIPIENT, ""), ("", "")])
    def test_missing_fields(self, recipient, amount):
        result = validate_transfer(recipient, amount, is_address)
        assert result.error_code == MISSING_FIELDS
        assert result.error_message == "Please enter both recipient address and amount"

    def test_invalid_address(self):
        result = validate_transfer("0x1234", "1", is_address)
        assert result.error_code == INVALID_ADDRESS
        assert result.error_message == "Invalid recipient address"

    def test_address_checked_before_amount(self):
        result = validate_transfer("nope", "abc", is_address)
        assert result.error_code == INVALID_ADDRESS

    def test_non_positive_message(self):
        result = validate_transfer(RECIPIENT, "0", is_address)
        assert result.error_message == "Amount must be greater than 0"


def test_unknown_error_code_falls_back_to_code():
    result = TransferValidationResult(is_valid=False, error_code="something odd")
    assert result.error_message == "something odd"
