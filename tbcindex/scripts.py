"""Multisig address, pool balance and script payload helpers."""

from __future__ import annotations

import json
import re
from typing import Any, NamedTuple

from .encoding import EncodingError, base58check_decode, base58check_encode, hash160

_CHECKMULTISIG = "OP_CHECKMULTISIG"
_MAX_PUBKEYS = 15
_PUBKEY_HEX_LEN = 66
_PUBKEY_HEX_LENGTHS = (66, 130)
_UINT32_MAX = 0xFFFFFFFF
_UINT64_MAX = (1 << 64) - 1
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_HEX = re.compile(r"[0-9a-fA-F]*")
_DIGITS = frozenset("0123456789")
_LEADING_INT = {
    10: re.compile(r"\s*([+-]?[0-9_]+)"),
    16: re.compile(r"\s*([+-]?[0-9a-fA-F_]+)"),
}


class PoolBalance(NamedTuple):
    """Balances packed into a pool's tape script."""

    ft_lp_balance: int
    ft_a_balance: int
    tbc_balance: int


def _scan_int64(token: str, base: int) -> int:
    """Read the leading integer of ``token``; 0 if there is none or it overflows."""
    match = _LEADING_INT[base].match(token)
    if not match or "_" in match.group(1):
        return 0
    value = int(match.group(1), base)
    return value if _INT64_MIN <= value <= _INT64_MAX else 0


def _reverse_pairs(text: str) -> str:
    return "".join(reversed([text[i:i + 2] for i in range(0, len(text), 2)]))


def _decode_hex(text: str, what: str) -> bytes:
    if len(text) % 2 or not _HEX.fullmatch(text):
        raise EncodingError(f"invalid {what}: {text!r}")
    return bytes.fromhex(text)


def _signature_counts(version: int) -> tuple[int, int]:
    needed = (version >> 4) & 0x0F
    total = version & 0x0F
    if needed <= 0 or total <= 0 or needed > total:
        raise EncodingError(
            f"invalid signature configuration: needed {needed}, total {total}"
        )
    return needed, total


def _check_pubkey_counts(needed: int, total: int) -> None:
    if needed <= 0 or total <= 0 or needed > total or total > _MAX_PUBKEYS:
        raise EncodingError(
            f"invalid public key configuration: needed {needed}, total {total}"
        )


def _decode_ms_address(ms_address: str) -> tuple[bytes, int]:
    if not ms_address:
        raise EncodingError("multisig address must not be empty")
    try:
        return base58check_decode(ms_address)
    except EncodingError as exc:
        raise EncodingError(f"invalid multisig address {ms_address!r}: {exc}") from exc


def _ms_address(pubkeys: bytes, needed: int, total: int) -> str:
    return base58check_encode(hash160(pubkeys), (needed << 4) | (total & 0x0F))


def ms_address_to_ms_script(ms_address: str) -> str:
    """Describe the multisig script behind a multisig address."""
    payload, version = _decode_ms_address(ms_address)
    needed, total = _signature_counts(version)
    return f"{needed} PUB_KEYS {payload.hex()} CHECK_MULTISIG {total}"


def verify_ms_address(ms_address: str) -> None:
    """Raise EncodingError unless ``ms_address`` is a valid multisig address."""
    _, version = _decode_ms_address(ms_address)
    _signature_counts(version)


def is_ms_address(ms_address: str) -> bool:
    """Whether ``ms_address`` is a valid multisig address."""
    try:
        verify_ms_address(ms_address)
    except EncodingError:
        return False
    return True


def digital_asm_to_hex(asm: str) -> str:
    """Turn a decimal ASM token into little-endian hex.

    Tokens that are not decimal, or whose value does not fit in four
    bytes, come back unchanged.
    """
    if all(char in _DIGITS for char in asm):
        value = int(asm) if asm else 0
        if value > _UINT64_MAX:
            value = 0
        if value <= _UINT32_MAX:
            hex_value = format(value, "x")
            if len(hex_value) % 2:
                hex_value = "0" + hex_value
            return _reverse_pairs(hex_value)
    return asm


def get_pool_balance(tape_asm: str) -> PoolBalance:
    """Read the LP, token A and TBC balances from a pool's tape ASM."""
    if not tape_asm:
        raise EncodingError("tape_asm must not be empty")
    parts = tape_asm.split(" ")
    if len(parts) < 4:
        raise EncodingError(f"invalid tape_asm format: {tape_asm}")
    complex_balance = parts[3]
    if len(complex_balance) < 48:
        raise EncodingError(f"complex balance too short: {complex_balance}")
    return PoolBalance(
        *(
            _scan_int64(_reverse_pairs(complex_balance[start:start + 16]), 16)
            for start in (0, 16, 32)
        )
    )


def p2ms_unlock_script_to_address(unlock_script: str) -> str:
    """Multisig address of the public keys in a P2MS unlocking script."""
    if not unlock_script:
        raise EncodingError("unlock script must not be empty")
    parts = unlock_script.split(" ")
    if len(parts) < 3:
        raise EncodingError(f"invalid unlock script format: {unlock_script!r}")
    if parts[0] != "0":
        raise EncodingError("invalid unlock script: must start with '0'")
    pubkeys_hex = parts[-1]
    needed = len(parts) - 2
    total = len(pubkeys_hex) // _PUBKEY_HEX_LEN
    _check_pubkey_counts(needed, total)
    pubkeys = _decode_hex(pubkeys_hex, "public key hex data")
    return _ms_address(pubkeys, needed, total)


def p2ms_script_to_ms_address(script: str) -> str:
    """Multisig address of a P2MS locking script."""
    if not script:
        raise EncodingError("script must not be empty")
    parts = script.split(" ")
    if len(parts) < 3:
        raise EncodingError(f"invalid script format: {script!r}")
    try:
        check_index = parts.index(_CHECKMULTISIG)
    except ValueError:
        raise EncodingError(f"invalid multisig script: missing {_CHECKMULTISIG}") from None
    if check_index == 0:
        raise EncodingError(f"invalid multisig script: nothing before {_CHECKMULTISIG}")
    needed = _scan_int64(parts[0], 10)
    total = _scan_int64(parts[check_index - 1], 10)
    _check_pubkey_counts(needed, total)
    pubkeys = [
        part for part in parts[1:check_index - 1] if len(part) in _PUBKEY_HEX_LENGTHS
    ]
    if len(pubkeys) != total:
        raise EncodingError(
            f"public key count mismatch: found {len(pubkeys)}, expected {total}"
        )
    return _ms_address(_decode_hex("".join(pubkeys), "public key hex data"), needed, total)


def hex_to_json(hex_str: str) -> dict[str, Any] | None:
    """Decode hex-encoded JSON holding an object; ``null`` gives None."""
    raw = _decode_hex(hex_str, "hex string")
    try:
        result = json.loads(raw.decode("utf-8", errors="replace"))
    except json.JSONDecodeError as exc:
        raise EncodingError(f"invalid JSON payload: {exc}") from exc
    if result is None or isinstance(result, dict):
        return result
    raise EncodingError("JSON payload is not an object")