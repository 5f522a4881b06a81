"""Block and chain information returned by the node."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


class BlockError(ValueError):
    """Raised for an invalid block query parameter."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass
class BlockHeader:
    """Header fields of a block."""

    hash: str = ""
    confirmations: int = 0
    height: int = 0
    version: int = 0
    version_hex: str = ""
    merkle_root: str = ""
    num_tx: int = 0
    time: int = 0
    median_time: int = 0
    nonce: int = 0
    bits: str = ""
    difficulty: float = 0.0
    chain_work: str = ""
    previous_block_hash: str = ""
    next_block_hash: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "hash": self.hash,
            "confirmations": self.confirmations,
            "height": self.height,
            "version": self.version,
            "versionHex": self.version_hex,
            "merkleroot": self.merkle_root,
            "num_tx": self.num_tx,
            "time": self.time,
            "mediantime": self.median_time,
            "nonce": self.nonce,
            "bits": self.bits,
            "difficulty": self.difficulty,
            "chainwork": self.chain_work,
            "previousblockhash": self.previous_block_hash,
            "nextblockhash": self.next_block_hash,
        }


@dataclass
class BlockDetail(BlockHeader):
    """A block header together with its transaction ids and size."""

    tx: list[str] = field(default_factory=list)
    size: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "tx": list(self.tx), "size": self.size}


@dataclass
class ChainInfo:
    """Summary of the chain state."""

    best_block_hash: str = ""
    blocks: int = 0
    chain: str = ""
    chain_work: str = ""
    difficulty: float = 0.0
    headers: int = 0
    median_time: int = 0
    pruned: bool = False
    verification_progress: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "bestblockhash": self.best_block_hash,
            "blocks": self.blocks,
            "chain": self.chain,
            "chainwork": self.chain_work,
            "difficulty": self.difficulty,
            "headers": self.headers,
            "mediantime": self.median_time,
            "pruned": self.pruned,
            "verificationprogress": self.verification_progress,
        }


def validate_block_height(height: int) -> None:
    """Raise BlockError for a negative height."""
    if height < 0:
        raise BlockError("block height must be greater than or equal to 0")


def validate_block_hash(block_hash: str) -> None:
    """Raise BlockError for an empty hash."""
    if not block_hash:
        raise BlockError("block hash must not be empty")