# tbcindex

Building blocks for an HTTP API that serves indexed data from the TBC
blockchain: addresses, blocks, NFTs, ElectrumX lookups and exchange rates.

## What is in the package

- `tbcindex.encoding`: Base58 and Base58Check (`base58_encode`,
  `base58_decode`, `base58check_encode`, `base58check_decode`), `hash160`,
  address to public-key-hash and script-hash conversion
  (`address_to_public_key_hash`, `address_to_script_hash`,
  `address_to_nft_script_hash`), `combine_script_to_address`,
  `compressed_pubkey_to_legacy_address`, and the address format checks
  `validate_wif_address` (returns an `AddressType`) and `validate_address`.
  Malformed input raises `EncodingError`, a `ValueError`.
- `tbcindex.scripts`: multisig addresses (`ms_address_to_ms_script`,
  `verify_ms_address`, `is_ms_address`, `p2ms_unlock_script_to_address`,
  `p2ms_script_to_ms_address`), `digital_asm_to_hex`, `get_pool_balance`
  (returns a `PoolBalance` named tuple) and `hex_to_json`.
- `tbcindex.hexutils`: little- and big-endian hex integers, byte-order
  reversal, hex-to-text decoding and `validate_hex_string`.
- `tbcindex.scripthash.validate_script_hash`: checks for 64 hex characters.
- `tbcindex.response`: the envelope `APIResponse` with `to_dict()`,
  `success_response`, `error_response` and the `ResponseCode` enum.
- `tbcindex.address`, `tbcindex.block`, `tbcindex.electrumx`,
  `tbcindex.transaction`, `tbcindex.exchange`: request and response models
  with `to_dict()` for JSON output; `parse_transaction`, `parse_ticker_info`
  and `parse_ticker_price` build models from decoded JSON documents.
- `tbcindex.nft.history`, `tbcindex.nft.collection`, `tbcindex.nft.item`:
  NFT and collection models; their `validate()` methods and `validate_*`
  functions raise `NftError`, which carries a numeric `code`.
- `tbcindex.config.config_from_mapping`: builds a `TBCConfig` from a nested
  mapping such as a parsed YAML file; keys match case-insensitively.
- `tbcindex.tables`: dataclasses for the database rows, with `table_row`
  and `primary_key`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

Round-trip a payload through Base58Check and classify an address:

```python
from tbcindex.encoding import (
    AddressType, base58check_decode, base58check_encode, validate_wif_address,
)

address = base58check_encode(bytes(20), 0x00)
assert base58check_decode(address) == (bytes(20), 0)
assert validate_wif_address(address) is AddressType.P2PKH
```

Check a request and wrap the reply:

```python
from tbcindex.nft.history import NftError, NftHistoryRequest
from tbcindex.response import ResponseCode, error_response, success_response

request = NftHistoryRequest(address=address, page=0, size=500)
try:
    request.validate()
except NftError as exc:
    body = error_response(ResponseCode.INVALID_PARAMS, str(exc)).to_dict()
else:
    body = success_response({"address": request.address}).to_dict()
```

Read the pool balances carried in a tape script:

```python
from tbcindex.scripts import get_pool_balance

balance = get_pool_balance(tape_asm)
print(balance.ft_lp_balance, balance.ft_a_balance, balance.tbc_balance)
```

Load the configuration:

```python
from tbcindex.config import config_from_mapping

config = config_from_mapping({"server": {"host": "localhost", "port": "8080"}})
assert config.server.port == 8080
```

## What the package does not do

- It runs no HTTP server and defines no routes; it provides the models and
  checks a server would use.
- It opens no database connection and no ElectrumX or node connection;
  `tbcindex.tables` only describes rows.
- It has no fungible-token request or response models; the `tbcindex.ft`
  subpackage is empty.