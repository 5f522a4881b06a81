import json

import pytest

from tbcindex.encoding import EncodingError, base58check_decode, base58check_encode, hash160
from tbcindex.scripts import (
    PoolBalance,
    digital_asm_to_hex,
    get_pool_balance,
    hex_to_json,
    is_ms_address,
    ms_address_to_ms_script,
    p2ms_script_to_ms_address,
    p2ms_unlock_script_to_address,
    verify_ms_address,
)

PUBKEYS = ["02" + f"{i:02x}" * 32 for i in (1, 2, 3)]


def _le(value):
    return value.to_bytes(8, "little").hex()


def test_ms_address_to_ms_script_round_trip():
    payload = bytes(range(20))
    address = base58check_encode(payload, (2 << 4) | 3)
    assert ms_address_to_ms_script(address) == f"2 PUB_KEYS {payload.hex()} CHECK_MULTISIG 3"
    assert is_ms_address(address) is True


@pytest.mark.parametrize("version", [0x00, 0x32, 0x20, 0x03])
def test_bad_signature_configuration(version):
    address = base58check_encode(bytes(20), version)
    with pytest.raises(EncodingError):
        verify_ms_address(address)
    with pytest.raises(EncodingError):
        ms_address_to_ms_script(address)
    assert is_ms_address(address) is False


def test_empty_or_garbled_ms_address():
    with pytest.raises(EncodingError):
        verify_ms_address("")
    assert is_ms_address("0OIl") is False


@pytest.mark.parametrize("value", [0, 1, 255, 256, 65535, 4294967295])
def test_digital_asm_to_hex_is_little_endian(value):
    result = digital_asm_to_hex(str(value))
    assert len(result) % 2 == 0
    assert int.from_bytes(bytes.fromhex(result), "little") == value


@pytest.mark.parametrize("asm", ["OP_DUP", "-5", "4294967296", "12ab"])
def test_digital_asm_to_hex_passes_through(asm):
    assert digital_asm_to_hex(asm) == asm


def test_digital_asm_to_hex_empty():
    assert digital_asm_to_hex("") == "00"


def test_get_pool_balance_round_trip():
    tape = "OP_FALSE OP_RETURN x " + _le(5) + _le(70000) + _le(123456789) + "ff"
    assert get_pool_balance(tape) == PoolBalance(5, 70000, 123456789)
    lp, a, tbc = get_pool_balance(tape)
    assert (lp, a, tbc) == (5, 70000, 123456789)


def test_get_pool_balance_overflow_reads_zero():
    tape = "a b c " + "ff" * 8 + _le(1) + _le(2)
    assert get_pool_balance(tape) == PoolBalance(0, 1, 2)


@pytest.mark.parametrize("tape", ["", "a b c", "a b c " + "00" * 23])
def test_get_pool_balance_errors(tape):
    with pytest.raises(EncodingError):
        get_pool_balance(tape)


def test_p2ms_unlock_script_to_address():
    keys = "".join(PUBKEYS)
    address = p2ms_unlock_script_to_address(f"0 sig1 sig2 {keys}")
    payload, version = base58check_decode(address)
    assert payload == hash160(bytes.fromhex(keys))
    assert (version >> 4, version & 0x0F) == (2, 3)


def test_p2ms_script_matches_unlock_script():
    keys = "".join(PUBKEYS)
    script = f"2 {PUBKEYS[0]} {PUBKEYS[1]} {PUBKEYS[2]} 3 OP_CHECKMULTISIG"
    assert p2ms_script_to_ms_address(script) == p2ms_unlock_script_to_address(
        f"0 sig1 sig2 {keys}"
    )


@pytest.mark.parametrize(
    "script",
    [
        "",
        "0 sig",
        "1 sig " + "".join(PUBKEYS),
        "0 s1 s2 s3 " + "".join(PUBKEYS[:2]),
        "0 sig " + PUBKEYS[0] * 16,
        "0 sig " + "zz" * 33,
    ],
)
def test_p2ms_unlock_script_errors(script):
    with pytest.raises(EncodingError):
        p2ms_unlock_script_to_address(script)


@pytest.mark.parametrize(
    "script",
    [
        "",
        "2 a",
        f"2 {PUBKEYS[0]} {PUBKEYS[1]} 2",
        f"2 {PUBKEYS[0]} {PUBKEYS[1]} 3 OP_CHECKMULTISIG",
        f"OP_2 {PUBKEYS[0]} {PUBKEYS[1]} 2 OP_CHECKMULTISIG",
        "OP_CHECKMULTISIG a b",
    ],
)
def test_p2ms_script_errors(script):
    with pytest.raises(EncodingError):
        p2ms_script_to_ms_address(script)


def test_hex_to_json_round_trip():
    document = {"name": "coin", "supply": 10, "tags": ["a"]}
    assert hex_to_json(json.dumps(document).encode().hex()) == document


def test_hex_to_json_null():
    assert hex_to_json(b"null".hex()) is None


@pytest.mark.parametrize("text", ["zz", "abc", "", b"[1]".hex(), b"{bad".hex()])
def test_hex_to_json_errors(text):
    with pytest.raises(EncodingError):
        hex_to_json(text)