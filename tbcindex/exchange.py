"""Market data from exchanges and the exchange-rate response."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


class ExchangeType(str, enum.Enum):
    """Exchanges that prices can be taken from."""

    MEXC = "mexc"


@dataclass
class TickerInfo:
    """24-hour market statistics of a symbol."""

    symbol: str = ""
    price_change: str = ""
    price_percent: str = ""
    last_price: str = ""
    open_price: str = ""
    high_price: str = ""
    low_price: str = ""
    volume: str = ""
    quote_volume: str = ""
    open_time: int = 0
    close_time: int = 0
    count: int = 0


@dataclass
class TickerPrice:
    """Current price of a symbol."""

    symbol: str = ""
    price: str = ""


@dataclass
class ExchangeRateResponse:
    """Exchange rate of TBC; empty fields are left out of the output."""

    currency: str = "USD"
    rate: float = 0.0
    time: int = 0
    change_percent: str = ""

    def to_dict(self) -> dict[str, Any]:
        values = {
            "currency": self.currency,
            "rate": self.rate,
            "time": self.time,
            "change_percent": self.change_percent,
        }
        return {key: value for key, value in values.items() if value}


def _get(data: Mapping[str, Any], key: str, kind: type, default: Any) -> Any:
    value = data.get(key)
    if value is None:
        return default
    if kind is int and isinstance(value, int) and not isinstance(value, bool):
        return value
    if kind is str and isinstance(value, str):
        return value
    raise ValueError(f"field {key!r} must be of type {kind.__name__}")


def _mapping(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError("ticker data must be a mapping")
    return data


def parse_ticker_info(data: Mapping[str, Any]) -> TickerInfo:
    """Build TickerInfo from a decoded 24-hour ticker document."""
    data = _mapping(data)
    return TickerInfo(
        symbol=_get(data, "symbol", str, ""),
        price_change=_get(data, "priceChange", str, ""),
        price_percent=_get(data, "priceChangePercent", str, ""),
        last_price=_get(data, "lastPrice", str, ""),
        open_price=_get(data, "openPrice", str, ""),
        high_price=_get(data, "highPrice", str, ""),
        low_price=_get(data, "lowPrice", str, ""),
        volume=_get(data, "volume", str, ""),
        quote_volume=_get(data, "quoteVolume", str, ""),
        open_time=_get(data, "openTime", int, 0),
        close_time=_get(data, "closeTime", int, 0),
        count=_get(data, "count", int, 0),
    )


def parse_ticker_price(data: Mapping[str, Any]) -> TickerPrice:
    """Build TickerPrice from a decoded price document."""
    data = _mapping(data)
    return TickerPrice(
        symbol=_get(data, "symbol", str, ""),
        price=_get(data, "price", str, ""),
    )