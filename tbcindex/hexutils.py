"""Small helpers for hex strings found in scripts and transactions."""

from __future__ import annotations

import re

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_SIGNED_HEX = re.compile(r"[+-]?[0-9a-fA-F]+")
_HEX = re.compile(r"[0-9a-fA-F]+")


def _parse_int64(text: str) -> int:
    if not _SIGNED_HEX.fullmatch(text):
        raise ValueError(f"invalid hex integer {text!r}")
    value = int(text, 16)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"hex integer {text!r} out of 64-bit range")
    return value


def _pairs(text: str) -> list[str]:
    return [text[i:i + 2] for i in range(0, len(text), 2)]


def reverse_hex_to_int(hex_str: str) -> int:
    """Read a little-endian hex string as a signed 64-bit integer.

    With an odd length the first character is dropped.
    """
    if not hex_str:
        raise ValueError("empty hex string")
    swapped = "".join(hex_str[i:i + 2] for i in range(len(hex_str) - 2, -1, -2))
    return _parse_int64(swapped)


def hex_to_string(hex_str: str) -> str:
    """Decode hex into text."""
    if len(hex_str) % 2 or (hex_str and not _HEX.fullmatch(hex_str)):
        raise ValueError(f"invalid hex string {hex_str!r}")
    return bytes.fromhex(hex_str).decode("utf-8", errors="replace")


def reverse_hex_string(hex_str: str, start: int, end: int) -> str:
    """Reverse the byte order of ``hex_str[start:end]``; '' for a bad range."""
    if start < 0 or end > len(hex_str) or start >= end:
        return ""
    return "".join(reversed(_pairs(hex_str[start:end])))


def hex_to_int(hex_str: str) -> int:
    """Parse a big-endian hex string as a signed 64-bit integer."""
    if not hex_str:
        raise ValueError("empty hex string")
    return _parse_int64(hex_str)


def validate_hex_string(hex_str: str) -> None:
    """Raise ValueError unless ``hex_str`` is non-empty, even-length hex."""
    if not hex_str:
        raise ValueError("hex string must not be empty")
    if len(hex_str) % 2:
        raise ValueError("hex string length must be even")
    if not _HEX.fullmatch(hex_str):
        raise ValueError("string contains non-hex characters")