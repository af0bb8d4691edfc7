from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from .http_adapters import adapt_http_error


@dataclass(frozen=True)
class ResponseWrapped:
    """Error carrying its HTTP response, e.g. ``{"response": {"status": 401}}``."""

    status: Any
    data: Any = None


@dataclass(frozen=True)
class DirectPayload:
    """Error exposing ``status`` and ``data`` at the top level."""

    status: Any
    data: Any = None


ErrorPayload = Union[ResponseWrapped, DirectPayload]


@dataclass(frozen=True)
class SingleError:
    message: Any

    def first(self) -> Any:
        return self.message


@dataclass(frozen=True)
class MultipleErrors:
    messages: tuple[Any, ...]

    def first(self) -> Any:
        return self.messages[0] if self.messages else None


FieldErrors = Union[SingleError, MultipleErrors]


def read_key(value: Any, key: str) -> Any:
    """Read ``key`` from a mapping or an attribute from any other object."""
    if value is None:
        return None
    if isinstance(value, Mapping):
        return value.get(key)
    return getattr(value, key, None)


def has_key(value: Any, key: str) -> bool:
    if value is None:
        return False
    if isinstance(value, Mapping):
        return key in value
    return hasattr(value, key)


def is_present(value: Any) -> bool:
    """Falsy scalars count as absent; any mapping or object, even empty, is present."""
    if value is None or value is False:
        return False
    if isinstance(value, (int, float, str)):
        return bool(value)
    return True


def resolve_payload(value: Any) -> ErrorPayload:
    adapted = adapt_http_error(value)
    if adapted is not None:
        status, data = adapted
        return ResponseWrapped(status=status, data=data)

    response = read_key(value, "response")
    if is_present(response):
        return ResponseWrapped(status=read_key(response, "status"), data=read_key(response, "data"))
    return DirectPayload(status=read_key(value, "status"), data=read_key(value, "data"))


def field_errors(value: Any) -> FieldErrors:
    if isinstance(value, (list, tuple)):
        return MultipleErrors(messages=tuple(value))
    return SingleError(message=value)
