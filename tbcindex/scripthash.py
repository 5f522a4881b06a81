"""Validation of ElectrumX script hashes."""

from __future__ import annotations

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def validate_script_hash(script_hash: str) -> None:
    """Raise ValueError unless ``script_hash`` is 64 hex characters."""
    if len(script_hash.encode()) != 64:
        raise ValueError("script hash must be 64 characters long")
    if not all(char in _HEX_DIGITS for char in script_hash):
        raise ValueError("script hash must contain only hex characters")