from __future__ import annotations

from dataclasses import dataclass


@dataclass
class InvalidPayloadError(ValueError):
    """Validation payload does not carry an ``errors`` entry."""

    message: str
    payload: object | None = None

    def __str__(self) -> str:
        return self.message
