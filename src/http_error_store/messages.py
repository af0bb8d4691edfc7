from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

DEFAULT_ERROR_MESSAGES: Mapping[int, str] = MappingProxyType(
    {
        401: "Not Authenticated: Sorry, you have to be logged in to access this!",
        403: "Not Authorized: Sorry, you can't access this!",
        404: (
            "Not Found: We couldn't find what you're looking for. "
            "Please refresh and try again, or contact the support team."
        ),
        422: "Validation Error",
        500: "Server Error: Please contact the support team.",
    }
)

DEFAULT_GENERAL_ERROR_MESSAGE = "Error: Please refresh and try again, or contact the support team."


class MessageCatalog:
    """Status code to display message table with a general fallback."""

    def __init__(
        self,
        messages: Mapping[object, str] | None = None,
        general_message: str | None = None,
    ) -> None:
        self.messages: Mapping[object, str] = (
            MappingProxyType(dict(messages)) if messages else DEFAULT_ERROR_MESSAGES
        )
        self.general_message: str = general_message or DEFAULT_GENERAL_ERROR_MESSAGE

    def lookup(self, status: object | None = None) -> str:
        """Return the message for ``status``, or the general message."""
        if status:
            try:
                message = self.messages.get(status)
            except TypeError:
                message = None
            if message:
                return message
        return self.general_message

    def __repr__(self) -> str:
        return f"MessageCatalog(statuses={sorted(map(str, self.messages))}, general_message={self.general_message!r})"
