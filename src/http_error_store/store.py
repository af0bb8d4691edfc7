from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from typing import TYPE_CHECKING, Any

from .exceptions import InvalidPayloadError
from .messages import MessageCatalog
from .payloads import field_errors, has_key, read_key, resolve_payload

if TYPE_CHECKING:
    from .config import StoreConfig

logger = logging.getLogger(__name__)

VALIDATION_STATUS = 422


class ErrorStore:
    """Current error state of a form or request flow.

    ``errors`` holds whatever was last set: usually a field -> message(s)
    mapping, or the raw error object handed to ``set_all`` until ``parse``
    unwraps its validation body.
    """

    def __init__(
        self,
        custom_messages: Mapping[object, str] | None = None,
        custom_general_message: str | None = None,
    ) -> None:
        self.errors: Any = {}
        self.catalog = MessageCatalog(custom_messages, custom_general_message)

    @classmethod
    def from_config(cls, config: StoreConfig) -> ErrorStore:
        return cls(config.messages or None, config.general_message)

    def set_all(self, errors: Any) -> ErrorStore:
        self.errors = {} if errors is None else errors
        return self

    def set_validation(self, payload: Any) -> None:
        if not has_key(payload, "errors"):
            raise InvalidPayloadError("Validation payload has no 'errors' entry", payload=payload)
        errors = read_key(payload, "errors")
        self.errors = {} if errors is None else errors

    def parse(self) -> dict[str, Any]:
        """Resolve the stored error into ``{"status": ..., "message": ...}``.

        A 422 replaces ``errors`` with the per-field validation messages.
        """
        payload = resolve_payload(self.errors)
        status = payload.status
        is_validation = status == VALIDATION_STATUS

        if is_validation:
            if has_key(payload.data, "errors"):
                self.set_validation(payload.data)
            else:
                logger.warning("validation_payload_missing_errors", extra={"status": status})

        logger.debug(
            "error_payload_parsed",
            extra={"status": status, "validation": is_validation, "payload_kind": type(payload).__name__},
        )
        return {
            "status": status,
            "message": self.catalog.lookup(status),
        }

    def set_and_parse(self, errors: Any) -> dict[str, Any]:
        self.set_all(errors)
        return self.parse()

    def add(self, errors: Mapping[str, Any]) -> None:
        self.errors = {**self._fields(), **errors}

    def any(self) -> bool:
        return len(self._fields()) > 0

    def has(self, field: str) -> bool:
        return field in self._fields()

    def get(self, field: str | None = None) -> Any:
        if field and self.has(field):
            return self._fields()[field]
        return self.errors

    def get_first(self, field: str | None = None) -> Any:
        if not field:
            return None
        if not self.has(field):
            return None
        return field_errors(self._fields()[field]).first()

    def clear(self, field: str | None = None) -> None:
        if field:
            if isinstance(self.errors, MutableMapping):
                self.errors.pop(field, None)
            elif field in self._fields():
                self._remove_field(field)
            return

        self.errors = {}

    def _remove_field(self, field: str) -> None:
        if not isinstance(self.errors, Mapping):
            try:
                delattr(self.errors, field)
                return
            except AttributeError:
                pass
        # read-only mappings and frozen objects are replaced by a plain dict copy
        self.errors = {key: value for key, value in self._fields().items() if key != field}

    def _fields(self) -> Mapping[str, Any]:
        if isinstance(self.errors, Mapping):
            return self.errors
        # Objects stored via set_all expose their instance attributes.
        return getattr(self.errors, "__dict__", {})

    def __repr__(self) -> str:
        return f"ErrorStore(errors={self.errors!r}, catalog={self.catalog!r})"
