from datetime import datetime

import pytest

from tbcindex.tables import (
    FtBalance,
    FtTokens,
    FtTxHistory,
    FtTxoSet,
    NftCollections,
    NftUtxoSet,
    primary_key,
    table_row,
)


@pytest.mark.parametrize(
    "cls, name",
    [
        (FtBalance, "TBC20721.ft_balance"),
        (FtTokens, "TBC20721.ft_tokens"),
        (FtTxHistory, "TBC20721.ft_tx_history"),
        (FtTxoSet, "TBC20721.ft_txo_set"),
        (NftCollections, "TBC20721.nft_collections"),
        (NftUtxoSet, "TBC20721.nft_utxo_set"),
    ],
)
def test_table_names(cls, name):
    assert cls.table_name == name


def test_ft_balance_row_and_key():
    record = FtBalance(ft_holder_combine_script="ab" * 21, ft_contract_id="cd" * 32, ft_balance=500)
    row = table_row(record)
    assert row == {
        "ft_holder_combine_script": "ab" * 21,
        "ft_contract_id": "cd" * 32,
        "ft_balance": 500,
    }
    assert primary_key(record) == ("ab" * 21, "cd" * 32)


def test_txo_set_composite_key():
    record = FtTxoSet(utxo_txid="ef" * 32, utxo_vout=3, ft_balance=7, if_spend=True)
    assert primary_key(record) == ("ef" * 32, 3)
    row = table_row(record)
    assert row["if_spend"] is True
    assert row["ft_balance"] == 7
    assert "table_name" not in row


def test_tx_history_defaults_and_key():
    record = FtTxHistory(txid="aa" * 32)
    assert primary_key(record) == (None,)
    row = table_row(record)
    assert row["confirmed"] is False
    assert row["txid"] == "aa" * 32
    assert row["deleted_at"] is None


def test_tx_history_columns():
    stamp = datetime(2024, 1, 2, 3, 4, 5)
    record = FtTxHistory(txid="bb" * 32, id=9, created_at=stamp, updated_at=stamp)
    row = table_row(record)
    assert set(row) == {
        "id", "txid", "ft_contract_id", "holder_address", "script_hash",
        "ft_balance_change", "tx_fee", "sender_addresses", "recipient_addresses",
        "time_stamp", "utc_time", "confirmed", "created_at", "updated_at", "deleted_at",
    }
    assert row["created_at"] == stamp
    assert primary_key(record) == (9,)


def test_tokens_single_key_and_values():
    record = FtTokens(ft_contract_id="11" * 32, ft_name="Coin", ft_decimal=6)
    assert primary_key(record) == ("11" * 32,)
    row = table_row(record)
    assert row["ft_name"] == "Coin"
    assert row["ft_decimal"] == 6
    assert row["ft_token_price"] == 0.0


def test_nft_tables_keys():
    collection = NftCollections(collection_id="22" * 32, collection_supply=10)
    nft = NftUtxoSet(nft_contract_id="33" * 32, collection_id="22" * 32, collection_index=4)
    assert primary_key(collection) == ("22" * 32,)
    assert primary_key(nft) == ("33" * 32,)
    assert table_row(nft)["collection_index"] == 4
    assert table_row(collection)["collection_supply"] == 10


def test_row_reflects_every_field_once():
    record = NftUtxoSet(nft_contract_id="44" * 32)
    row = table_row(record)
    assert len(row) == 17
    assert row["nft_contract_id"] == "44" * 32


@pytest.mark.parametrize("bad", [object(), {"ft_contract_id": "x"}, None])
def test_non_records_rejected(bad):
    with pytest.raises(TypeError):
        table_row(bad)
    with pytest.raises(TypeError):
        primary_key(bad)