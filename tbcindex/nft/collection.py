"""NFT collections and the checks on collection queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .history import NftError

_MAX_PAGE_SIZE = 100
_EMPTY_COLLECTION_ADDRESS = 20001
_INVALID_COLLECTION_PAGE = 20002
_INVALID_COLLECTION_SIZE = 20003
_EMPTY_COLLECTION_ID = 20004


@dataclass
class CollectionItem:
    """Summary of an NFT collection."""

    collection_id: str = ""
    collection_name: str = ""
    collection_creator: str = ""
    collection_symbol: str = ""
    collection_attributes: str = ""
    collection_description: str = ""
    collection_supply: int = 0
    collection_create_timestamp: int = 0
    collection_icon: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "collectionId": self.collection_id,
            "collectionName": self.collection_name,
            "collectionCreator": self.collection_creator,
            "collectionSymbol": self.collection_symbol,
            "collectionAttributes": self.collection_attributes,
            "collectionDescription": self.collection_description,
            "collectionSupply": self.collection_supply,
            "collectionCreateTimestamp": self.collection_create_timestamp,
            "collectionIcon": self.collection_icon,
        }


@dataclass
class CollectionDetailResponse:
    """Full details of an NFT collection."""

    collection_id: str = ""
    collection_name: str = ""
    collection_creator: str = ""
    collection_creator_scripthash: str = ""
    collection_symbol: str = ""
    collection_attributes: str = ""
    collection_description: str = ""
    collection_supply: int = 0
    collection_create_timestamp: int = 0
    collection_icon: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "collectionId": self.collection_id,
            "collectionName": self.collection_name,
            "collectionCreator": self.collection_creator,
            "collectionCreatorScripthash": self.collection_creator_scripthash,
            "collectionSymbol": self.collection_symbol,
            "collectionAttributes": self.collection_attributes,
            "collectionDescription": self.collection_description,
            "collectionSupply": self.collection_supply,
            "collectionCreateTimestamp": self.collection_create_timestamp,
            "collectionIcon": self.collection_icon,
        }


@dataclass
class CollectionListResponse:
    """A page of collections with the total count."""

    collection_count: int = 0
    collection_list: list[CollectionItem] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "collectionCount": self.collection_count,
            "collectionList": [item.to_dict() for item in self.collection_list],
        }


def _check_page(page: int, size: int) -> None:
    if page < 0:
        raise NftError(_INVALID_COLLECTION_PAGE, "collection page must not be negative")
    if size <= 0 or size > _MAX_PAGE_SIZE:
        raise NftError(_INVALID_COLLECTION_SIZE, "collection page size must be between 1 and 100")


def validate_collection_query_by_address(address: str, page: int, size: int) -> None:
    """Raise NftError for an invalid query of an address's collections."""
    if not address:
        raise NftError(_EMPTY_COLLECTION_ADDRESS, "collection query address must not be empty")
    _check_page(page, size)


def validate_collections_page_size(page: int, size: int) -> None:
    """Raise NftError for invalid paging of all collections."""
    _check_page(page, size)


def validate_detail_collection_info(collection_id: str) -> None:
    """Raise NftError for an empty collection id."""
    if not collection_id:
        raise NftError(_EMPTY_COLLECTION_ID, "collection id must not be empty")


@dataclass
class CollectionQueryParams:
    """Paged query of the collections created by an address."""

    address: str
    page: int = 0
    size: int = 0

    def validate(self) -> None:
        """Raise NftError for an invalid parameter."""
        validate_collection_query_by_address(self.address, self.page, self.size)