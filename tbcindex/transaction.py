"""Decoded transactions as returned by the node."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass
class ScriptSig:
    """Unlocking script of an input."""

    asm: str = ""
    hex: str = ""


@dataclass
class ScriptPubKey:
    """Locking script of an output."""

    asm: str = ""
    hex: str = ""
    req_sigs: int = 0
    type: str = ""
    addresses: list[str] = field(default_factory=list)


@dataclass
class VinItem:
    """A transaction input."""

    txid: str = ""
    vout: int = 0
    script_sig: ScriptSig = field(default_factory=ScriptSig)
    sequence: int = 0


@dataclass
class VoutItem:
    """A transaction output; ``value`` is in coins."""

    value: float = 0.0
    n: int = 0
    script_pub_key: ScriptPubKey = field(default_factory=ScriptPubKey)


@dataclass
class TransactionResponse:
    """A decoded transaction."""

    txid: str = ""
    hash: str = ""
    version: int = 0
    size: int = 0
    vsize: int = 0
    weight: int = 0
    lock_time: int = 0
    vin: list[VinItem] = field(default_factory=list)
    vout: list[VoutItem] = field(default_factory=list)
    hex: str = ""
    blockhash: str = ""
    confirmations: int = 0
    time: int = 0
    blocktime: int = 0

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "txid": self.txid,
            "hash": self.hash,
            "version": self.version,
            "size": self.size,
            "vsize": self.vsize,
            "weight": self.weight,
            "locktime": self.lock_time,
            "vin": [_vin_dict(item) for item in self.vin],
            "vout": [_vout_dict(item) for item in self.vout],
            "hex": self.hex,
        }
        optional = {
            "blockhash": self.blockhash,
            "confirmations": self.confirmations,
            "time": self.time,
            "blocktime": self.blocktime,
        }
        result.update((key, value) for key, value in optional.items() if value)
        return result


def _script_pub_key_dict(script: ScriptPubKey) -> dict[str, Any]:
    result: dict[str, Any] = {"asm": script.asm, "hex": script.hex}
    if script.req_sigs:
        result["reqSigs"] = script.req_sigs
    result["type"] = script.type
    if script.addresses:
        result["addresses"] = list(script.addresses)
    return result


def _vin_dict(item: VinItem) -> dict[str, Any]:
    return {
        "txid": item.txid,
        "vout": item.vout,
        "scriptSig": {"asm": item.script_sig.asm, "hex": item.script_sig.hex},
        "sequence": item.sequence,
    }


def _vout_dict(item: VoutItem) -> dict[str, Any]:
    return {
        "value": item.value,
        "n": item.n,
        "scriptPubKey": _script_pub_key_dict(item.script_pub_key),
    }


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be a mapping")
    return data


def _list(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"field {key!r} must be a list")
    return value


def _get(data: Mapping[str, Any], key: str, kind: type, default: Any) -> Any:
    value = data.get(key)
    if value is None:
        return default
    if isinstance(value, bool):
        raise ValueError(f"field {key!r} must be of type {kind.__name__}")
    if kind is float and isinstance(value, (int, float)):
        return float(value)
    if kind is int and isinstance(value, int):
        return value
    if kind is str and isinstance(value, str):
        return value
    raise ValueError(f"field {key!r} must be of type {kind.__name__}")


def _parse_vin(raw: Any) -> VinItem:
    data = _mapping(raw, "input")
    sig = _mapping(data.get("scriptSig"), "scriptSig")
    return VinItem(
        txid=_get(data, "txid", str, ""),
        vout=_get(data, "vout", int, 0),
        script_sig=ScriptSig(asm=_get(sig, "asm", str, ""), hex=_get(sig, "hex", str, "")),
        sequence=_get(data, "sequence", int, 0),
    )


def _parse_vout(raw: Any) -> VoutItem:
    data = _mapping(raw, "output")
    script = _mapping(data.get("scriptPubKey"), "scriptPubKey")
    addresses = _list(script, "addresses")
    if not all(isinstance(address, str) for address in addresses):
        raise ValueError("field 'addresses' must hold strings")
    return VoutItem(
        value=_get(data, "value", float, 0.0),
        n=_get(data, "n", int, 0),
        script_pub_key=ScriptPubKey(
            asm=_get(script, "asm", str, ""),
            hex=_get(script, "hex", str, ""),
            req_sigs=_get(script, "reqSigs", int, 0),
            type=_get(script, "type", str, ""),
            addresses=list(addresses),
        ),
    )


def parse_transaction(data: Mapping[str, Any]) -> TransactionResponse:
    """Build a TransactionResponse from a decoded transaction document."""
    if not isinstance(data, Mapping):
        raise ValueError("transaction must be a mapping")
    return TransactionResponse(
        txid=_get(data, "txid", str, ""),
        hash=_get(data, "hash", str, ""),
        version=_get(data, "version", int, 0),
        size=_get(data, "size", int, 0),
        vsize=_get(data, "vsize", int, 0),
        weight=_get(data, "weight", int, 0),
        lock_time=_get(data, "locktime", int, 0),
        vin=[_parse_vin(item) for item in _list(data, "vin")],
        vout=[_parse_vout(item) for item in _list(data, "vout")],
        hex=_get(data, "hex", str, ""),
        blockhash=_get(data, "blockhash", str, ""),
        confirmations=_get(data, "confirmations", int, 0),
        time=_get(data, "time", int, 0),
        blocktime=_get(data, "blocktime", int, 0),
    )