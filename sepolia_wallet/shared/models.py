"""Plain data types shared across the wallet features."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Account:
    address: str
    private_key: str = field(repr=False)


@dataclass(frozen=True)
class TransferTransaction:
    sender: str
    recipient: str
    value: int
    gas: int
    gas_price: int
    nonce: int
    chain_id: int

    def to_dict(self) -> dict:
        return {
            "from": self.sender,
            "to": self.recipient,
            "value": self.value,
            "gas": self.gas,
            "gasPrice": self.gas_price,
            "nonce": self.nonce,
            "chainId": self.chain_id,
        }


@dataclass(frozen=True)
class TransactionReceipt:
    tx_hash: str
    block_number: int | None = None


@dataclass
class PendingTransfer:
    """Recipient and amount as typed by the user, kept until a send succeeds."""

    recipient: str = ""
    amount: str = ""

    def clear(self) -> None:
        self.recipient = ""
        self.amount = ""
