import pytest

from tbcindex.encoding import (
    AddressType,
    EncodingError,
    address_to_nft_script_hash,
    address_to_public_key_hash,
    address_to_script_hash,
    base58_decode,
    base58_encode,
    base58check_decode,
    base58check_encode,
    combine_script_to_address,
    compressed_pubkey_to_legacy_address,
    hash160,
    hex_to_sha256_reversed,
    str_to_sha256,
    validate_address,
    validate_wif_address,
)

PKH = bytes(range(20))


def _address(pkh=PKH):
    return base58check_encode(pkh, 0)


@pytest.mark.parametrize("data", [b"", b"\x00\x00\x01\x02", b"hello", bytes(range(40))])
def test_base58_round_trip(data):
    assert base58_decode(base58_encode(data)) == data


def test_base58_leading_zeros_become_ones():
    encoded = base58_encode(b"\x00\x00\xff")
    assert encoded.startswith("11")
    assert not encoded[2:].startswith("1")


@pytest.mark.parametrize("text", ["0", "O", "I", "l", "abc!"])
def test_base58_decode_rejects_bad_characters(text):
    with pytest.raises(EncodingError):
        base58_decode(text)


def test_base58check_known_zero_hash_address():
    assert base58check_encode(bytes(20), 0) == "1111111111111111111114oLvT2"


@pytest.mark.parametrize("version", [0, 5, 0x23, 255])
def test_base58check_round_trip(version):
    assert base58check_decode(base58check_encode(b"payload", version)) == (b"payload", version)


def test_base58check_rejects_bad_version():
    with pytest.raises(EncodingError):
        base58check_encode(b"x", 256)


def test_base58check_detects_tampering():
    encoded = base58check_encode(b"abc", 5)
    tampered = encoded[:-1] + ("2" if encoded[-1] != "2" else "3")
    with pytest.raises(EncodingError):
        base58check_decode(tampered)


def test_base58check_too_short():
    with pytest.raises(EncodingError):
        base58check_decode("1111")


def test_hash160_of_empty_input():
    assert hash160(b"") == bytes.fromhex("b472a266d0bd89c13706a4132ccfb16f7c3b9fcb")


def test_hex_to_sha256_reversed_empty_input():
    result = hex_to_sha256_reversed("")
    assert bytes.fromhex(result)[::-1].hex() == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_str_to_sha256_matches_reversed_variant():
    assert str_to_sha256("deadbeef") == hex_to_sha256_reversed("deadbeef")
    assert len(str_to_sha256("00")) == 64


@pytest.mark.parametrize("value", ["", "zz", "abc"])
def test_str_to_sha256_errors(value):
    with pytest.raises(EncodingError):
        str_to_sha256(value)


def test_hex_to_sha256_reversed_rejects_whitespace():
    with pytest.raises(EncodingError):
        hex_to_sha256_reversed("00 11")


def test_address_to_public_key_hash_round_trip():
    assert address_to_public_key_hash(_address()) == PKH.hex()


def test_address_to_public_key_hash_invalid():
    with pytest.raises(EncodingError):
        address_to_public_key_hash("not-an-address")


def test_combine_script_plain_address():
    address = combine_script_to_address(PKH.hex() + "00")
    assert address == _address()
    assert address_to_public_key_hash(address) == PKH.hex()


def test_combine_script_pool_label():
    script = PKH.hex() + "01"
    assert combine_script_to_address(script) == "Pool_or_ms_hash_" + script


@pytest.mark.parametrize("script", ["", "0", "zz00"])
def test_combine_script_errors(script):
    with pytest.raises(EncodingError):
        combine_script_to_address(script)


def test_address_to_script_hash_uses_p2pkh_script():
    expected = hex_to_sha256_reversed("76a914" + PKH.hex() + "88ac")
    assert address_to_script_hash(_address()) == expected


def test_nft_script_hash_depends_on_collection_flag():
    address = _address()
    collection = address_to_nft_script_hash(address, True)
    current = address_to_nft_script_hash(address, False)
    assert collection != current
    base = "76a914" + PKH.hex() + "88ac6a0d"
    assert collection == hex_to_sha256_reversed(base + b"V0 Mint NHold".hex())
    assert current == hex_to_sha256_reversed(base + b"V0 Curr NHold".hex())


def test_nft_script_hash_empty_address():
    with pytest.raises(EncodingError):
        address_to_nft_script_hash("", True)


def test_compressed_pubkey_to_legacy_address():
    pubkey = "02" + "ab" * 32
    address = compressed_pubkey_to_legacy_address(pubkey)
    assert base58check_decode(address) == (hash160(bytes.fromhex(pubkey)), 0)


@pytest.mark.parametrize("pubkey", ["02ab", "zz" * 33])
def test_compressed_pubkey_errors(pubkey):
    with pytest.raises(EncodingError):
        compressed_pubkey_to_legacy_address(pubkey)


def test_validate_wif_address_kinds():
    assert validate_wif_address(_address()) is AddressType.P2PKH
    assert validate_wif_address("3" + "a" * 30) is AddressType.P2SH


@pytest.mark.parametrize(
    "address", ["", "1abc", "1" + "a" * 40, "4" + "a" * 30, "1" + "l" * 30, "1" + "0" * 30]
)
def test_validate_wif_address_errors(address):
    with pytest.raises(EncodingError):
        validate_wif_address(address)


@pytest.mark.parametrize("address", ["2" + "a" * 30, "bc1" + "q" * 30, "tb1" + "q" * 30])
def test_validate_address_accepts(address):
    assert validate_address(address) is None
    assert validate_address(_address()) is None


@pytest.mark.parametrize("address", ["", "x" * 30, "bc1short", "5" + "a" * 30])
def test_validate_address_rejects(address):
    with pytest.raises(EncodingError):
        validate_address(address)