"""Rows of the indexer's database tables."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, ClassVar, Optional, Union

_PK = {"primary_key": True}


@dataclass
class FtBalance:
    """Balance of one token held under one combine script."""

    table_name: ClassVar[str] = "TBC20721.ft_balance"

    ft_holder_combine_script: str = field(metadata=_PK)
    ft_contract_id: str = field(metadata=_PK)
    ft_balance: int = 0


@dataclass
class FtTokens:
    """A fungible token and its metadata."""

    table_name: ClassVar[str] = "TBC20721.ft_tokens"

    ft_contract_id: str = field(metadata=_PK)
    ft_code_script: str = ""
    ft_tape_script: str = ""
    ft_supply: int = 0
    ft_decimal: int = 0
    ft_name: str = ""
    ft_symbol: str = ""
    ft_description: str = ""
    ft_origin_utxo: str = ""
    ft_creator_combine_script: str = ""
    ft_holders_count: int = 0
    ft_icon_url: str = ""
    ft_create_timestamp: int = 0
    ft_token_price: float = 0.0


@dataclass
class FtTxHistory:
    """One token transaction seen by an address; ``id`` is assigned by the database."""

    table_name: ClassVar[str] = "TBC20721.ft_tx_history"

    txid: str
    id: Optional[int] = field(default=None, metadata=_PK)
    ft_contract_id: str = ""
    holder_address: str = ""
    script_hash: str = ""
    ft_balance_change: int = 0
    tx_fee: float = 0.0
    sender_addresses: str = ""
    recipient_addresses: str = ""
    time_stamp: int = 0
    utc_time: str = ""
    confirmed: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None


@dataclass
class FtTxoSet:
    """A token output, spent or unspent."""

    table_name: ClassVar[str] = "TBC20721.ft_txo_set"

    utxo_txid: str = field(metadata=_PK)
    utxo_vout: int = field(metadata=_PK)
    ft_holder_combine_script: str = ""
    ft_contract_id: str = ""
    utxo_balance: int = 0
    ft_balance: int = 0
    if_spend: bool = False


@dataclass
class NftCollections:
    """An NFT collection."""

    table_name: ClassVar[str] = "TBC20721.nft_collections"

    collection_id: str = field(metadata=_PK)
    collection_name: str = ""
    collection_creator_address: str = ""
    collection_creator_script_hash: str = ""
    collection_symbol: str = ""
    collection_attributes: str = ""
    collection_description: str = ""
    collection_supply: int = 0
    collection_create_timestamp: int = 0
    collection_icon: str = ""


@dataclass
class NftUtxoSet:
    """The current output of an NFT."""

    table_name: ClassVar[str] = "TBC20721.nft_utxo_set"

    nft_contract_id: str = field(metadata=_PK)
    collection_id: str = ""
    collection_index: int = 0
    collection_name: str = ""
    nft_utxo_id: str = ""
    nft_code_balance: int = 0
    nft_p2pkh_balance: int = 0
    nft_name: str = ""
    nft_symbol: str = ""
    nft_attributes: str = ""
    nft_description: str = ""
    nft_transfer_time_count: int = 0
    nft_holder_address: str = ""
    nft_holder_script_hash: str = ""
    nft_create_timestamp: int = 0
    nft_last_transfer_timestamp: int = 0
    nft_icon: str = ""


TableRecord = Union[FtBalance, FtTokens, FtTxHistory, FtTxoSet, NftCollections, NftUtxoSet]
_TABLES = (FtBalance, FtTokens, FtTxHistory, FtTxoSet, NftCollections, NftUtxoSet)


def _check(record: Any) -> None:
    if not isinstance(record, _TABLES):
        raise TypeError(f"not a table record: {type(record).__name__}")


def table_row(record: TableRecord) -> dict[str, Any]:
    """Column name to value for every column of ``record``."""
    _check(record)
    return {item.name: getattr(record, item.name) for item in fields(record)}


def primary_key(record: TableRecord) -> tuple[Any, ...]:
    """Values of the primary-key columns of ``record``, in column order."""
    _check(record)
    return tuple(
        getattr(record, item.name)
        for item in fields(record)
        if item.metadata.get("primary_key")
    )