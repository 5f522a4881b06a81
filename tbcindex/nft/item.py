"""NFT items, NFT lists and the checks on NFT queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .history import NftError

MAX_PAGE_SIZE = 100

_EMPTY_ADDRESS = 10001
_INVALID_PAGE = 10002
_INVALID_SIZE = 10003
_EMPTY_SCRIPT_HASH = 10004
_EMPTY_COLLECTION_ID = 10005
_REQUEST_EMPTY_CONTRACT_LIST = 10006
_REQUEST_TOO_MANY_CONTRACTS = 10007
_EMPTY_CONTRACT_LIST = 10008
_TOO_MANY_CONTRACTS = 10009


def _check_paging(page: int, size: int) -> None:
    if page < 0:
        raise NftError(_INVALID_PAGE, "page must not be negative")
    if size <= 0 or size > MAX_PAGE_SIZE:
        raise NftError(_INVALID_SIZE, "page size must be between 1 and 100")


def _check_address(address: str) -> None:
    if not address:
        raise NftError(_EMPTY_ADDRESS, "address must not be empty")


def _check_script_hash(script_hash: str) -> None:
    if not script_hash:
        raise NftError(_EMPTY_SCRIPT_HASH, "script hash must not be empty")


def _check_collection_id(collection_id: str) -> None:
    if not collection_id:
        raise NftError(_EMPTY_COLLECTION_ID, "collection id must not be empty")


@dataclass
class NftItem:
    """A single NFT together with some details of its collection."""

    collection_id: str = ""
    collection_index: int = 0
    collection_name: str = ""
    collection_icon: str = ""
    collection_description: str = ""
    nft_contract_id: str = ""
    nft_utxo_id: str = ""
    nft_code_balance: int = 0
    nft_p2pkh_balance: int = 0
    nft_name: str = ""
    nft_symbol: str = ""
    nft_attributes: str = ""
    nft_description: str = ""
    nft_transfer_time_count: int = 0
    nft_holder: str = ""
    nft_create_timestamp: int = 0
    nft_icon: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "collectionId": self.collection_id,
            "collectionIndex": self.collection_index,
            "collectionName": self.collection_name,
            "collectionIcon": self.collection_icon,
            "collectionDescription": self.collection_description,
            "nftContractId": self.nft_contract_id,
            "nftUtxoId": self.nft_utxo_id,
            "nftCodeBalance": self.nft_code_balance,
            "nftP2pkhBalance": self.nft_p2pkh_balance,
            "nftName": self.nft_name,
            "nftSymbol": self.nft_symbol,
            "nftAttributes": self.nft_attributes,
            "nftDescription": self.nft_description,
            "nftTransferTimeCount": self.nft_transfer_time_count,
            "nftHolder": self.nft_holder,
            "nftCreateTimestamp": self.nft_create_timestamp,
            "nftIcon": self.nft_icon,
        }


@dataclass
class NftListResponse:
    """A page of NFTs with the total count."""

    nft_total_count: int = 0
    nft_list: list[NftItem] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "nftTotalCount": self.nft_total_count,
            "nftList": [item.to_dict() for item in self.nft_list],
        }


@dataclass
class NftInfoListResponse:
    """NFTs looked up by contract id."""

    nft_info_list: list[NftItem] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"nftInfoList": [item.to_dict() for item in self.nft_info_list]}


@dataclass
class NftsByAddressRequest:
    """Paged request for the NFTs held by an address."""

    address: str
    page: int = 0
    size: int = 0
    if_extra_collection_info: bool = False

    def validate(self) -> None:
        """Raise NftError for an invalid parameter."""
        _check_address(self.address)
        _check_paging(self.page, self.size)


@dataclass
class NftsByScriptHashRequest:
    """Paged request for the NFTs held under a script hash."""

    script_hash: str
    page: int = 0
    size: int = 0

    def validate(self) -> None:
        """Raise NftError for an invalid parameter."""
        _check_script_hash(self.script_hash)
        _check_paging(self.page, self.size)


@dataclass
class NftsByCollectionIdRequest:
    """Paged request for the NFTs of a collection."""

    collection_id: str
    page: int = 0
    size: int = 0

    def validate(self) -> None:
        """Raise NftError for an invalid parameter."""
        _check_collection_id(self.collection_id)
        _check_paging(self.page, self.size)


@dataclass
class CollectionsByAddressRequest:
    """Paged request for the collections of an address."""

    address: str
    page: int = 0
    size: int = 0

    def validate(self) -> None:
        """Raise NftError for an invalid parameter."""
        _check_address(self.address)
        _check_paging(self.page, self.size)


@dataclass
class CollectionsPageRequest:
    """Paged request for all collections."""

    page: int = 0
    size: int = 0

    def validate(self) -> None:
        """Raise NftError for an invalid parameter."""
        _check_paging(self.page, self.size)


@dataclass
class NftsByContractIdsRequest:
    """Request for NFTs by a list of contract ids."""

    contract_list: list[str] = field(default_factory=list)
    if_icon_needed: bool = False

    def validate(self) -> None:
        """Raise NftError for an empty or oversized contract list."""
        if not self.contract_list:
            raise NftError(_REQUEST_EMPTY_CONTRACT_LIST, "contract id list must not be empty")
        if len(self.contract_list) > MAX_PAGE_SIZE:
            raise NftError(
                _REQUEST_TOO_MANY_CONTRACTS, "contract id list must not exceed 100 entries"
            )


@dataclass
class DetailCollectionInfoRequest:
    """Request for the details of a collection."""

    collection_id: str

    def validate(self) -> None:
        """Raise NftError for an empty collection id."""
        _check_collection_id(self.collection_id)


def validate_get_nfts_by_contract_ids(contract_list: list[str], if_icon_needed: bool) -> None:
    """Raise NftError for an empty or oversized contract list."""
    if not contract_list:
        raise NftError(_EMPTY_CONTRACT_LIST, "contract id list must not be empty")
    if len(contract_list) > MAX_PAGE_SIZE:
        raise NftError(_TOO_MANY_CONTRACTS, "contract id list must not exceed 100 entries")


def validate_get_nft_by_address_page_size(
    address: str, page: int, size: int, if_extra_collection_info: bool
) -> None:
    """Raise NftError for an invalid query of an address's NFTs."""
    _check_address(address)
    _check_paging(page, size)


def validate_get_nft_by_script_hash_page_size(script_hash: str, page: int, size: int) -> None:
    """Raise NftError for an invalid query of a script hash's NFTs."""
    _check_script_hash(script_hash)
    _check_paging(page, size)


def validate_get_nft_by_collection_id_page_size(collection_id: str, page: int, size: int) -> None:
    """Raise NftError for an invalid query of a collection's NFTs."""
    _check_collection_id(collection_id)
    _check_paging(page, size)