"""Sepolia JSON-RPC client with local key handling and signing via eth-account."""

from __future__ import annotations

import logging
import time
from decimal import Decimal

from eth_account import Account as EthAccount
from eth_utils import (
    from_wei,
    is_address,
    is_checksum_address,
    to_checksum_address,
    to_hex,
    to_wei,
)

from sepolia_wallet.config import DEFAULT_CONFIG, WalletConfig
from sepolia_wallet.shared.errors import InvalidKeyFormatError, TransactionPendingError
from sepolia_wallet.shared.models import Account, TransactionReceipt, TransferTransaction
from sepolia_wallet.shared.network import NetworkClient

logger = logging.getLogger(__name__)


def _hex_to_int(value: str | int | None, field: str) -> int:
    if value is None:
        raise ValueError(f"Node returned no {field}")
    if isinstance(value, int):
        return value
    return int(value, 16)


def is_valid_address(value: str) -> bool:
    """Hex address check; mixed-case input must also carry a valid checksum."""
    if not value or not is_address(value):
        return False
    digits = value[2:] if value[:2].lower() == "0x" else value
    if digits == digits.lower() or digits == digits.upper():
        return True
    return is_checksum_address(value)


class EthereumClient:
    """Handle to one Sepolia RPC endpoint.

    Key generation, key parsing and signing happen locally through eth-account;
    everything else is a JSON-RPC call on ``node_url``.
    """

    def __init__(self, node_url: str, config: WalletConfig | None = None):
        self.config = config or DEFAULT_CONFIG
        self.node_url = node_url
        self._network_client = NetworkClient(
            node_url=node_url,
            timeout_config=self.config.timeout_config,
        )

    def __repr__(self) -> str:
        return f"EthereumClient({self.node_url!r})"

    def generate_account(self) -> Account:
        local = EthAccount.create()
        logger.info("New account generated: %s", local.address)
        return Account(address=local.address, private_key=to_hex(local.key))

    def import_from_key(self, key: str) -> Account:
        try:
            local = EthAccount.from_key(key)
        except Exception as e:
            raise InvalidKeyFormatError(f"Invalid private key: {e}") from e
        logger.info("Account imported: %s", local.address)
        return Account(address=local.address, private_key=to_hex(local.key))

    def close(self) -> None:
        self._network_client.close()

    def is_valid_address(self, value: str) -> bool:
        return is_valid_address(value)

    def get_block_height(self) -> int:
        return _hex_to_int(
            self._network_client.call("eth_blockNumber", context="Liveness check"),
            "block height",
        )

    def get_balance(self, address: str) -> int:
        result = self._network_client.call(
            "eth_getBalance", [address, "latest"], context="Fetch balance"
        )
        return _hex_to_int(result, "balance")

    def to_display_unit(self, base_units: int) -> Decimal:
        return Decimal(from_wei(base_units, "ether"))

    def to_base_unit(self, amount: Decimal) -> int:
        return int(to_wei(amount, "ether"))

    def get_fee_rate(self) -> int:
        return _hex_to_int(
            self._network_client.call("eth_gasPrice", context="Fetch gas price"),
            "gas price",
        )

    def get_nonce(self, address: str) -> int:
        return _hex_to_int(
            self._network_client.call(
                "eth_getTransactionCount",
                [address, "pending"],
                context="Fetch nonce",
            ),
            "nonce",
        )

    def sign_transaction(self, tx: TransferTransaction, private_key: str) -> str:
        tx_dict = tx.to_dict()
        tx_dict.pop("from")
        tx_dict["to"] = to_checksum_address(tx.recipient)
        signed = EthAccount.sign_transaction(tx_dict, private_key)
        return to_hex(signed.raw_transaction)

    def broadcast(self, signed_tx: str) -> TransactionReceipt:
        tx_hash = self._network_client.call(
            "eth_sendRawTransaction", [signed_tx], context="Broadcast transaction"
        )
        logger.info("Transaction announced: %s", self.config.explorer_url(tx_hash))
        return self.wait_for_receipt(tx_hash)

    def wait_for_receipt(
        self,
        tx_hash: str,
        timeout_seconds: float | None = None,
        poll_interval_seconds: float | None = None,
    ) -> TransactionReceipt:
        if timeout_seconds is None:
            timeout_seconds = self.config.receipt_timeout_seconds
        if poll_interval_seconds is None:
            poll_interval_seconds = self.config.receipt_poll_interval_seconds
        deadline = time.monotonic() + timeout_seconds

        while time.monotonic() < deadline:
            receipt = self._network_client.call(
                "eth_getTransactionReceipt", [tx_hash], context="Fetch receipt"
            )
            if receipt:
                succeeded = _hex_to_int(receipt.get("status", "0x1"), "status") == 1
                if not succeeded:
                    raise RuntimeError(f"Transaction {tx_hash} was reverted")
                return TransactionReceipt(
                    tx_hash=tx_hash,
                    block_number=_hex_to_int(receipt.get("blockNumber"), "block number"),
                )
            time.sleep(poll_interval_seconds)

        raise TransactionPendingError(
            f"Transaction {tx_hash} was not mined within {timeout_seconds:g} seconds",
            tx_hash=tx_hash,
        )
