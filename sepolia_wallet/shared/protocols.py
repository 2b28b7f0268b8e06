"""Collaborator interfaces the wallet core depends on."""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Awaitable, Protocol, Union

from sepolia_wallet.shared.models import Account, TransactionReceipt, TransferTransaction


class Severity(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


class Notifier(Protocol):
    def notify(
        self, title: str, message: str, severity: Severity, duration_ms: int
    ) -> None: ...


class Confirmer(Protocol):
    def confirm(self, message: str) -> Union[bool, Awaitable[bool]]: ...


class SigningClient(Protocol):
    """Ledger client bound to one RPC endpoint.

    Network methods block; the core runs them off the event loop.
    """

    node_url: str

    def generate_account(self) -> Account: ...
    def import_from_key(self, key: str) -> Account: ...
    def is_valid_address(self, value: str) -> bool: ...
    def get_balance(self, address: str) -> int: ...
    def to_display_unit(self, base_units: int) -> Decimal: ...
    def to_base_unit(self, amount: Decimal) -> int: ...
    def get_fee_rate(self) -> int: ...
    def get_nonce(self, address: str) -> int: ...
    def sign_transaction(self, tx: TransferTransaction, private_key: str) -> str: ...
    def broadcast(self, signed_tx: str) -> TransactionReceipt: ...
    def get_block_height(self) -> int: ...
    def close(self) -> None: ...
