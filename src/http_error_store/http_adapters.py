"""Adapters turning live httpx / requests objects into ``(status, data)`` pairs."""

from __future__ import annotations

from typing import Any

import httpx
import requests


def adapt_http_error(value: Any) -> tuple[int, Any] | None:
    """Return ``(status_code, body)`` for HTTP library objects, ``None`` otherwise.

    Accepts the responses themselves and the exceptions raised by
    ``raise_for_status()``. The body is the decoded JSON document, or ``None``
    when the response carries no JSON.
    """
    if isinstance(value, httpx.HTTPStatusError):
        return _from_httpx_response(value.response)
    if isinstance(value, httpx.Response):
        return _from_httpx_response(value)
    if isinstance(value, requests.HTTPError):
        if value.response is None:
            return None
        return _from_requests_response(value.response)
    if isinstance(value, requests.Response):
        return _from_requests_response(value)
    return None


def _from_httpx_response(response: httpx.Response) -> tuple[int, Any]:
    try:
        payload = response.json()
    except (ValueError, httpx.ResponseNotRead):
        payload = None
    return response.status_code, payload


def _from_requests_response(response: requests.Response) -> tuple[int, Any]:
    try:
        payload = response.json()
    except ValueError:
        payload = None
    return response.status_code, payload
