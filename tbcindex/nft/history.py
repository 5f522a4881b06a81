"""NFT errors and the NFT transaction history of an address."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..encoding import address_to_nft_script_hash

_MAX_PAGE_SIZE = 100
_EMPTY_ADDRESS = 10001
_INVALID_PAGE = 10002
_INVALID_SIZE = 10003


class NftError(ValueError):
    """An NFT request error with a numeric code."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message}


def validate_nft_history(address: str, page: int, size: int) -> None:
    """Raise NftError unless address is given, page >= 0 and 1 <= size <= 100."""
    if not address:
        raise NftError(_EMPTY_ADDRESS, "address must not be empty")
    if page < 0:
        raise NftError(_INVALID_PAGE, "page must not be negative")
    if size <= 0 or size > _MAX_PAGE_SIZE:
        raise NftError(_INVALID_SIZE, "page size must be between 1 and 100")


@dataclass
class NftHistoryItem:
    """One NFT transaction in an address's history."""

    txid: str = ""
    collection_id: str = ""
    collection_index: int = 0
    collection_name: str = ""
    nft_contract_id: str = ""
    nft_name: str = ""
    nft_symbol: str = ""
    nft_description: str = ""
    sender_addresses: list[str] = field(default_factory=list)
    recipient_addresses: list[str] = field(default_factory=list)
    time_stamp: Optional[int] = None
    utc_time: str = ""
    nft_icon: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "txid": self.txid,
            "collection_id": self.collection_id,
            "collection_index": self.collection_index,
            "collection_name": self.collection_name,
            "nft_contract_id": self.nft_contract_id,
            "nft_name": self.nft_name,
            "nft_symbol": self.nft_symbol,
            "nft_description": self.nft_description,
            "sender_addresses": list(self.sender_addresses),
            "recipient_addresses": list(self.recipient_addresses),
            "time_stamp": self.time_stamp,
            "utc_time": self.utc_time,
            "nft_icon": self.nft_icon,
        }


@dataclass
class NftHistoryRequest:
    """Paged request for an address's NFT history."""

    address: str
    page: int = 0
    size: int = 0

    def validate(self) -> None:
        """Raise NftError for an invalid parameter."""
        validate_nft_history(self.address, self.page, self.size)


@dataclass
class NftHistoryResponse:
    """NFT history of an address together with its script hash."""

    address: str
    script_hash: str
    history_count: int
    result: list[NftHistoryItem] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "address": self.address,
            "script_hash": self.script_hash,
            "history_count": self.history_count,
            "result": [item.to_dict() for item in self.result],
        }


@dataclass
class AddressToNftScriptHashRequest:
    """An address and whether its collection or current NFT script is meant."""

    address: str
    collection: bool = False

    def script_hash(self) -> str:
        """The NFT script hash of the address; raises EncodingError if it is bad."""
        return address_to_nft_script_hash(self.address, self.collection)