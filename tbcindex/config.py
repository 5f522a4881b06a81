"""Service configuration read from a nested mapping."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any, TypeVar


def _key(name: str, default: Any) -> Any:
    return field(default=default, metadata={"key": name})


@dataclass
class ServerConfig:
    """Where the HTTP server listens."""

    name: str = ""
    host: str = ""
    port: int = 0


@dataclass
class LogConfig:
    """Log file location and level."""

    path: str = ""
    level: str = ""


@dataclass
class DBConfig:
    """Database connection settings."""

    host: str = ""
    port: int = 0
    username: str = ""
    password: str = ""
    database: str = ""
    charset: str = ""
    max_idle_conns: int = _key("maxidleconns", 0)
    max_open_conns: int = _key("maxopenconns", 0)


@dataclass
class TBCNodeConfig:
    """Settings of the node's RPC client."""

    url: str = ""
    user: str = ""
    password: str = ""
    timeout: int = 0


@dataclass
class ElectrumXConfig:
    """Settings of the ElectrumX RPC client."""

    host: str = ""
    port: int = 0
    timeout: int = 0
    retry_count: int = 0
    use_tls: bool = False
    protocol: str = ""
    max_idle_conns: int = _key("maxidleconns", 0)
    max_open_conns: int = _key("maxopenconns", 0)


@dataclass
class TBCConfig:
    """The whole service configuration."""

    server: ServerConfig = field(default_factory=ServerConfig)
    log: LogConfig = field(default_factory=LogConfig)
    db: DBConfig = field(default_factory=DBConfig)
    tbc_node: TBCNodeConfig = field(default_factory=TBCNodeConfig, metadata={"key": "tbcnode"})
    electrumx: ElectrumXConfig = field(default_factory=ElectrumXConfig)


_T = TypeVar("_T")
_TRUE = frozenset({"true", "1", "yes", "on"})
_FALSE = frozenset({"false", "0", "no", "off", ""})


def _coerce(default: Any, value: Any, where: str) -> Any:
    if isinstance(default, bool):
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().lower() in _TRUE | _FALSE:
            return value.strip().lower() in _TRUE
        raise ValueError(f"{where}: expected a boolean, got {value!r}")
    if isinstance(default, int):
        if isinstance(value, bool):
            raise ValueError(f"{where}: expected an integer, got {value!r}")
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                raise ValueError(f"{where}: expected an integer, got {value!r}") from None
        raise ValueError(f"{where}: expected an integer, got {value!r}")
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise ValueError(f"{where}: expected a string, got {value!r}")


def _lowered(data: Any, where: str) -> dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"{where}: expected a mapping")
    return {str(key).lower(): value for key, value in data.items()}


def _section(cls: type[_T], data: Any, where: str) -> _T:
    values = _lowered(data, where)
    kwargs = {}
    for item in fields(cls):  # type: ignore[arg-type]
        key = item.metadata.get("key", item.name)
        value = values.get(key)
        if value is not None:
            kwargs[item.name] = _coerce(item.default, value, f"{where}.{key}")
    return cls(**kwargs)


def config_from_mapping(data: Mapping[str, Any]) -> TBCConfig:
    """Build the configuration from a mapping such as a parsed YAML file.

    Keys are matched case-insensitively; missing keys keep their defaults.
    """
    top = _lowered(data, "config")
    sections = {}
    for item in fields(TBCConfig):
        key = item.metadata.get("key", item.name)
        section_cls = type(item.default_factory())  # type: ignore[misc]
        sections[item.name] = _section(section_cls, top.get(key), key)
    return TBCConfig(**sections)