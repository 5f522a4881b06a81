"""Base58Check, hashing and address conversion helpers."""

from __future__ import annotations

import enum
import hashlib
import re

from Crypto.Hash import RIPEMD160

ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_INDEX = {char: value for value, char in enumerate(ALPHABET)}
_HEX = re.compile(r"[0-9a-fA-F]*")

_P2PKH_WIF = re.compile(r"1[a-km-zA-HJ-NP-Z1-9]{25,34}")
_P2SH_WIF = re.compile(r"3[a-km-zA-HJ-NP-Z1-9]{25,34}")
_P2PKH = re.compile(r"[13][a-km-zA-HJ-NP-Z1-9]{25,34}")
_P2SH = re.compile(r"2[a-km-zA-HJ-NP-Z1-9]{25,34}")
_BECH32 = re.compile(r"(bc1|tb1)[a-zA-HJ-NP-Z0-9]{25,90}")

_P2PKH_PREFIX = b"\x76\xa9\x14"
_P2PKH_SUFFIX = b"\x88\xac"
_NFT_RETURN = b"\x6a\x0d"
_NFT_COLLECTION_TAG = b"V0 Mint NHold"
_NFT_CURRENT_TAG = b"V0 Curr NHold"
_POOL_PREFIX = "Pool_or_ms_hash_"


class EncodingError(ValueError):
    """Raised when an address, script or encoded value is malformed."""


class AddressType(enum.IntEnum):
    INVALID = 0
    P2PKH = 1
    P2SH = 2


def _unhex(text: str, what: str = "hex string") -> bytes:
    if len(text) % 2 or not _HEX.fullmatch(text):
        raise EncodingError(f"invalid {what} {text!r}")
    return bytes.fromhex(text)


def _sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def _sha256_reversed_hex(data: bytes) -> str:
    return _sha256(data)[::-1].hex()


def _checksum(data: bytes) -> bytes:
    return _sha256(_sha256(data))[:4]


def base58_encode(data: bytes) -> str:
    """Encode bytes in Base58, keeping leading zero bytes as '1'."""
    number = int.from_bytes(data, "big")
    digits = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(ALPHABET[remainder])
    padding = len(data) - len(data.lstrip(b"\x00"))
    return "1" * padding + "".join(reversed(digits))


def base58_decode(text: str) -> bytes:
    """Decode a Base58 string."""
    number = 0
    for char in text:
        try:
            number = number * 58 + _INDEX[char]
        except KeyError:
            raise EncodingError(f"invalid base58 character {char!r}") from None
    padding = len(text) - len(text.lstrip("1"))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big")
    return b"\x00" * padding + body


def base58check_encode(payload: bytes, version: int) -> str:
    """Prefix ``payload`` with a version byte and append a checksum."""
    if not 0 <= version <= 0xFF:
        raise EncodingError(f"version byte out of range: {version}")
    data = bytes([version]) + bytes(payload)
    return base58_encode(data + _checksum(data))


def base58check_decode(text: str) -> tuple[bytes, int]:
    """Return ``(payload, version)`` of a Base58Check string."""
    raw = base58_decode(text)
    if len(raw) < 5:
        raise EncodingError("invalid format: version and/or checksum bytes missing")
    data, checksum = raw[:-4], raw[-4:]
    if _checksum(data) != checksum:
        raise EncodingError("checksum error")
    return data[1:], data[0]


def hash160(data: bytes) -> bytes:
    """RIPEMD160 of SHA256."""
    return RIPEMD160.new(_sha256(data)).digest()


def address_to_public_key_hash(address: str) -> str:
    """Decode an address and return its payload as hex."""
    try:
        payload, _version = base58check_decode(address)
    except EncodingError as exc:
        raise EncodingError(f"invalid address {address!r}: {exc}") from exc
    return payload.hex()


def str_to_sha256(value: str) -> str:
    """SHA256 of hex-encoded bytes, returned byte-reversed as hex."""
    if not value:
        raise EncodingError("input string must not be empty")
    return _sha256_reversed_hex(_unhex(value))


def hex_to_sha256_reversed(value: str) -> str:
    """SHA256 of hex-encoded bytes, returned byte-reversed as hex."""
    return _sha256_reversed_hex(_unhex(value))


def combine_script_to_address(combine_script: str) -> str:
    """Turn a combine script into a plain address or a pool/multisig label."""
    if not combine_script:
        raise EncodingError("combine script must not be empty")
    if len(combine_script) < 2:
        raise EncodingError(f"invalid combine script {combine_script!r}: too short")
    if combine_script.endswith("00"):
        pub_key_hash = _unhex(combine_script[:-2], "public key hash")
        return base58check_encode(pub_key_hash, 0x00)
    return _POOL_PREFIX + combine_script


def address_to_script_hash(address: str) -> str:
    """ElectrumX script hash of the P2PKH script for ``address``."""
    pub_key_hash = bytes.fromhex(address_to_public_key_hash(address))
    return _sha256_reversed_hex(_P2PKH_PREFIX + pub_key_hash + _P2PKH_SUFFIX)


def address_to_nft_script_hash(address: str, is_collection: bool) -> str:
    """Script hash of the NFT holding script for ``address``."""
    if not address:
        raise EncodingError("address must not be empty")
    pub_key_hash = bytes.fromhex(address_to_public_key_hash(address))
    tag = _NFT_COLLECTION_TAG if is_collection else _NFT_CURRENT_TAG
    script = _P2PKH_PREFIX + pub_key_hash + _P2PKH_SUFFIX + _NFT_RETURN + tag
    return _sha256_reversed_hex(script)


def compressed_pubkey_to_legacy_address(pubkey_hex: str) -> str:
    """Legacy address of a 33-byte compressed public key."""
    if len(pubkey_hex) != 66:
        raise EncodingError("compressed public key must be 66 hex characters")
    return base58check_encode(hash160(_unhex(pubkey_hex, "public key")), 0x00)


def validate_wif_address(address: str) -> AddressType:
    """Classify an address as P2PKH or P2SH; raise if it is neither."""
    if not address:
        raise EncodingError("address must not be empty")
    if not 26 <= len(address.encode()) <= 35:
        raise EncodingError("invalid address length")
    if _P2PKH_WIF.fullmatch(address):
        return AddressType.P2PKH
    if _P2SH_WIF.fullmatch(address):
        return AddressType.P2SH
    raise EncodingError("invalid address format")


def validate_address(address: str) -> None:
    """Check the textual format of a P2PKH, P2SH or Bech32 address."""
    if not address:
        raise EncodingError("address must not be empty")
    if any(p.fullmatch(address) for p in (_P2PKH, _P2SH, _BECH32)):
        return
    raise EncodingError("invalid address format")