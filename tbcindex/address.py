"""Requests and responses of the address endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .electrumx import Utxo
from .encoding import AddressType, validate_wif_address


@dataclass
class AddressUnspentRequest:
    """Request for the unspent outputs of a wallet address."""

    address: str

    def validate(self) -> AddressType:
        """Raise EncodingError for a malformed address; return its type otherwise."""
        return validate_wif_address(self.address)


@dataclass
class AddressUnspentResponse:
    """Unspent outputs of an address."""

    utxos: list[Utxo] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"utxos": [utxo.to_dict() for utxo in self.utxos]}