"""Uniform API response envelope and status codes."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any


class ResponseCode(enum.IntEnum):
    """Status codes carried in the response envelope."""

    SUCCESS = 200
    INVALID_PARAMS = 400
    NOT_FOUND = 404
    SERVER_ERROR = 500


def _plain(value: Any) -> Any:
    """Turn nested response objects into JSON-ready values."""
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


@dataclass
class APIResponse:
    """The envelope every endpoint answers with."""

    code: int
    message: str
    data: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": int(self.code),
            "message": self.message,
            "data": _plain(self.data),
        }


def success_response(data: Any) -> APIResponse:
    """Build a successful response around ``data``."""
    return APIResponse(code=ResponseCode.SUCCESS, message="success", data=data)


def error_response(code: int, message: str) -> APIResponse:
    """Build an error response with no data."""
    return APIResponse(code=code, message=message, data=None)