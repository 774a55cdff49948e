"""Results of RPC calls and their HTTP representation."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any, Optional, Union


def _to_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


@dataclass(frozen=True)
class RpcError:
    """A single error that occurred while running an RPC command."""

    message: Optional[str] = None
    details: Optional[str] = None
    exit_code: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        """Return the error as a JSON-ready mapping."""
        return {
            "message": self.message,
            "details": self.details,
            "exit_code": self.exit_code,
        }


@dataclass(frozen=True)
class Errors:
    """A list of errors together with the HTTP status to report."""

    errors: tuple[RpcError, ...] = field(default_factory=tuple)
    status: HTTPStatus = HTTPStatus.BAD_REQUEST

    @classmethod
    def from_message(
        cls, message: str, status: HTTPStatus = HTTPStatus.BAD_REQUEST
    ) -> "Errors":
        """Build a single error from a message."""
        return cls((RpcError(message),), status)

    def __add__(self, other: "Errors") -> "Errors":
        if not isinstance(other, Errors):
            return NotImplemented
        return Errors(self.errors + other.errors, self.status)


@dataclass(frozen=True)
class Success:
    """A successful RPC call carrying JSON-serializable data."""

    value: Any = None

    def __add__(self, other: "RpcResult") -> "RpcResult":
        if isinstance(other, Failure):
            return other
        if isinstance(other, Success):
            return Success()
        return NotImplemented

    def to_response(self) -> tuple[HTTPStatus, str]:
        """Return the HTTP status and JSON body."""
        try:
            return HTTPStatus.OK, _to_json(self.value)
        except (TypeError, ValueError):
            return HTTPStatus.INTERNAL_SERVER_ERROR, "Cannot serialize message."


@dataclass(frozen=True)
class Failure:
    """A failed RPC call."""

    errors: Errors

    def __add__(self, other: "RpcResult") -> "RpcResult":
        if isinstance(other, Failure):
            return Failure(self.errors + other.errors)
        if isinstance(other, Success):
            return self
        return NotImplemented

    def to_response(self) -> tuple[HTTPStatus, str]:
        """Return the HTTP status and JSON list of errors."""
        try:
            body = _to_json([error.to_dict() for error in self.errors.errors])
        except (TypeError, ValueError):
            return HTTPStatus.INTERNAL_SERVER_ERROR, "Cannot serialize message."
        return self.errors.status, body


RpcResult = Union[Success, Failure]


def failure(message: Any) -> Failure:
    """Build a failure from a message or an exception."""
    return Failure(Errors.from_message(str(message)))