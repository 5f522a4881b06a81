"""Records exchanged with the ElectrumX server and the responses built from them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class HistoryEntry:
    """One transaction in a script hash's history."""

    tx_hash: str
    height: int

    def to_dict(self) -> dict[str, Any]:
        return {"tx_hash": self.tx_hash, "height": self.height}


@dataclass
class Utxo:
    """An unspent transaction output; ``value`` is in satoshis."""

    tx_hash: str
    tx_pos: int
    height: int
    value: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "tx_hash": self.tx_hash,
            "tx_pos": self.tx_pos,
            "height": self.height,
            "value": self.value,
        }


@dataclass
class HistoryItem:
    """One entry of an address's transaction history."""

    balance_change: str
    tx_hash: str
    sender_addresses: list[str] = field(default_factory=list)
    recipient_addresses: list[str] = field(default_factory=list)
    fee: str = ""
    time_stamp: int = 0
    utc_time: str = ""
    tx_type: str = ""

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "balance_change": self.balance_change,
            # The misspelt key is part of the published response format.
            "banlance_change": self.balance_change,
            "tx_hash": self.tx_hash,
            "sender_addresses": list(self.sender_addresses),
            "recipient_addresses": list(self.recipient_addresses),
            "fee": self.fee,
        }
        if self.time_stamp:
            result["time_stamp"] = self.time_stamp
        result["utc_time"] = self.utc_time
        if self.tx_type:
            result["tx_type"] = self.tx_type
        return result


@dataclass
class AddressHistoryResponse:
    """History of an address together with its script hash."""

    address: str
    script: str
    history_count: int
    result: list[HistoryItem] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "address": self.address,
            "script": self.script,
            "history_count": self.history_count,
            "result": [item.to_dict() for item in self.result],
        }


@dataclass
class BalanceResponse:
    """Balance as reported by ElectrumX, in satoshis."""

    confirmed: int
    unconfirmed: int


@dataclass
class AddressBalanceResponse:
    """Balance of an address: the total and its confirmed and unconfirmed parts."""

    balance: int
    confirmed: int
    unconfirmed: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "balance": self.balance,
            "confirmed": self.confirmed,
            "unconfirmed": self.unconfirmed,
        }


@dataclass
class FrozenBalanceResponse:
    """Frozen balance of an address, in satoshis."""

    frozen: int

    def to_dict(self) -> dict[str, Any]:
        return {"frozen_balance": self.frozen}