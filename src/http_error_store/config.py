from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError, field_validator

logger = logging.getLogger(__name__)

ENV_PREFIX = "HTTP_ERRORS_"
MESSAGE_OVERRIDE_PREFIX = f"{ENV_PREFIX}MESSAGE_"


class ConfigError(ValueError):
    pass


class MessagesFile(BaseModel):
    messages: dict[int, str] = {}
    general_message: str | None = None

    @field_validator("messages")
    @classmethod
    def _check_statuses(cls, value: dict[int, str]) -> dict[int, str]:
        invalid = sorted(status for status in value if not 100 <= status <= 599)
        if invalid:
            raise ValueError(f"expected statuses between 100 and 599, got {invalid}")
        return value


@dataclass(frozen=True)
class StoreConfig:
    messages: dict[int, str] = field(default_factory=dict)
    general_message: str | None = None


def _read_messages_file(path: str) -> MessagesFile:
    file_path = Path(path)
    try:
        raw = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Invalid {ENV_PREFIX}MESSAGES_FILE: cannot read {path!r}") from exc
    try:
        return MessagesFile.model_validate(json.loads(raw))
    except (ValueError, ValidationError) as exc:
        raise ConfigError(f"Invalid {ENV_PREFIX}MESSAGES_FILE: {path!r} is not a valid messages document") from exc


def _read_status_overrides() -> dict[int, str]:
    overrides: dict[int, str] = {}
    for name, value in os.environ.items():
        if not name.startswith(MESSAGE_OVERRIDE_PREFIX):
            continue
        suffix = name[len(MESSAGE_OVERRIDE_PREFIX):]
        try:
            status = int(suffix)
        except ValueError as exc:
            raise ConfigError(f"Invalid {name}: expected an HTTP status suffix, got {suffix!r}") from exc
        if not 100 <= status <= 599:
            raise ConfigError(f"Invalid {name}: expected a status between 100 and 599, got {status}")
        if not value.strip():
            raise ConfigError(f"Invalid {name}: message cannot be empty")
        overrides[status] = value.strip()
    return overrides


def load_config(env_file: str | None = None) -> StoreConfig:
    """Load message overrides from environment with optional .env override."""
    load_dotenv(env_file)

    messages: dict[int, str] = {}
    general_message: str | None = None
    source = "defaults"

    messages_file = (os.getenv(f"{ENV_PREFIX}MESSAGES_FILE") or "").strip()
    if messages_file:
        document = _read_messages_file(messages_file)
        messages.update(document.messages)
        general_message = document.general_message
        source = messages_file

    overrides = _read_status_overrides()
    if overrides:
        messages.update(overrides)
        source = "environment" if source == "defaults" else f"{source}+environment"

    env_general = (os.getenv(f"{ENV_PREFIX}GENERAL_MESSAGE") or "").strip()
    if env_general:
        general_message = env_general

    logger.debug("error_messages_loaded", extra={"source": source, "entries": len(messages)})
    return StoreConfig(messages=messages, general_message=general_message or None)
