from .config import ConfigError, StoreConfig, load_config
from .exceptions import InvalidPayloadError
from .messages import DEFAULT_ERROR_MESSAGES, DEFAULT_GENERAL_ERROR_MESSAGE, MessageCatalog
from .payloads import (
    DirectPayload,
    ErrorPayload,
    FieldErrors,
    MultipleErrors,
    ResponseWrapped,
    SingleError,
    field_errors,
    resolve_payload,
)
from .store import ErrorStore

__all__ = [
    "ConfigError",
    "DEFAULT_ERROR_MESSAGES",
    "DEFAULT_GENERAL_ERROR_MESSAGE",
    "DirectPayload",
    "ErrorPayload",
    "ErrorStore",
    "FieldErrors",
    "InvalidPayloadError",
    "MessageCatalog",
    "MultipleErrors",
    "ResponseWrapped",
    "SingleError",
    "StoreConfig",
    "field_errors",
    "load_config",
    "resolve_payload",
]
