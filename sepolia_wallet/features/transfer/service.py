"""Transfer business logic service for Sepolia Quick Wallet."""

from __future__ import annotations

import asyncio
from decimal import Decimal

from sepolia_wallet.config import CURRENCY_SYMBOL, DEFAULT_CONFIG, WalletConfig
from sepolia_wallet.features.balance.service import BalanceMonitor
from sepolia_wallet.features.transfer.validators import validate_transfer
from sepolia_wallet.shared.errors import (
    BroadcastError,
    InsufficientFundsError,
    TransactionPendingError,
    TransferError,
    ValidationError,
)
from sepolia_wallet.shared.logging import get_logger
from sepolia_wallet.shared.models import Account, PendingTransfer, TransferTransaction
from sepolia_wallet.shared.protocols import Notifier, Severity, SigningClient

logger = get_logger(__name__)

PROGRESS_DURATION_MS = 3000
SUCCESS_DURATION_MS = 8000
FAILURE_DURATION_MS = 6000
VALIDATION_DURATION_MS = 5000


def shorten_address(address: str) -> str:
    return f"{address[:6]}...{address[-4:]}"


def classify_send_failure(error: Exception) -> TransferError:
    if isinstance(error, TransactionPendingError):
        return error
    message = str(error)
    if "insufficient funds" in message.lower():
        return InsufficientFundsError(message)
    return BroadcastError(message)


class TransactionSubmitter:
    """Validates, builds, signs and broadcasts plain value transfers."""

    def __init__(
        self,
        notifier: Notifier,
        monitor: BalanceMonitor,
        config: WalletConfig | None = None,
    ):
        self.notifier = notifier
        self.monitor = monitor
        self.config = config or DEFAULT_CONFIG

    def validate(
        self, client: SigningClient, transfer: PendingTransfer
    ) -> Decimal:
        result = validate_transfer(
            transfer.recipient.strip(),
            transfer.amount.strip(),
            client.is_valid_address,
        )
        if not result.is_valid:
            message = result.error_message or "Invalid transfer"
            logger.warning("Transfer rejected: %s", result.error_code)
            self.notifier.notify("Error", message, Severity.ERROR, VALIDATION_DURATION_MS)
            raise ValidationError(result.error_code or message)
        return result.normalized_value

    async def send(
        self, client: SigningClient, account: Account, transfer: PendingTransfer
    ) -> str:
        amount = self.validate(client, transfer)
        generation = self.monitor.generation
        recipient = transfer.recipient.strip()
        amount_text = transfer.amount.strip()
        log = logger.with_context(sender=account.address, recipient=recipient)

        try:
            self.notifier.notify(
                "Info", "Preparing transaction...", Severity.INFO, PROGRESS_DURATION_MS
            )
            gas_price = await asyncio.to_thread(client.get_fee_rate)
            nonce = await asyncio.to_thread(client.get_nonce, account.address)

            tx = TransferTransaction(
                sender=account.address,
                recipient=recipient,
                value=client.to_base_unit(amount),
                gas=self.config.transfer_gas_limit,
                gas_price=gas_price,
                nonce=nonce,
                chain_id=self.config.chain_id,
            )
            signed = client.sign_transaction(tx, account.private_key)

            self.notifier.notify(
                "Info", "Sending transaction...", Severity.INFO, PROGRESS_DURATION_MS
            )
            receipt = await asyncio.to_thread(client.broadcast, signed)
        except Exception as e:
            failure = classify_send_failure(e)
            log.error("Transfer failed (%s): %s", type(failure).__name__, e)
            if isinstance(failure, InsufficientFundsError):
                message = "Insufficient funds for transaction"
            elif isinstance(failure, TransactionPendingError):
                log.warning(
                    "Transaction still pending: %s",
                    self.config.explorer_url(failure.tx_hash),
                )
                message = (
                    f"Transaction {failure.tx_hash} was sent but is not confirmed "
                    "yet. It may still confirm; check the explorer before "
                    "sending again."
                )
            else:
                message = f"Transaction failed: {failure.message}"
            self.notifier.notify("Error", message, Severity.ERROR, FAILURE_DURATION_MS)
            if failure is e:
                raise
            raise failure from e

        log.info(
            "Sent %s %s, nonce %d: %s",
            amount_text,
            CURRENCY_SYMBOL,
            nonce,
            self.config.explorer_url(receipt.tx_hash),
        )
        self.notifier.notify(
            "🎉 Transaction Successful!",
            f"Sent {amount_text} {CURRENCY_SYMBOL} to {shorten_address(recipient)}",
            Severity.SUCCESS,
            SUCCESS_DURATION_MS,
        )
        transfer.clear()
        self.monitor.refresh_later(
            client,
            account,
            self.config.post_send_refresh_delay_seconds,
            generation=generation,
        )
        return receipt.tx_hash
