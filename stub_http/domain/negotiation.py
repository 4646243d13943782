from __future__ import annotations

from collections.abc import Iterable, Mapping

__all__ = ["DEFAULT_CONTENT_TYPE", "POWERED_BY", "negotiate_headers"]

DEFAULT_CONTENT_TYPE = "application/json"
POWERED_BY = "stub-http test server"
_WILDCARD = "*/*"


def _first(value: str | Iterable[str]) -> str | None:
    if isinstance(value, str):
        return value
    return next(iter(value), None)


def negotiate_headers(request_headers: Mapping[str, str | Iterable[str]]) -> dict[str, str]:
    """Build the default response headers for a request.

    Only `Accept` (matched case-insensitively) has an effect: its first value
    replaces the JSON content type verbatim unless it is empty or "*/*".
    """
    headers = {
        "Content-Type": DEFAULT_CONTENT_TYPE,
        "X-Powered-By": POWERED_BY,
    }
    for name, value in request_headers.items():
        if name.lower() != "accept":
            continue
        accept = _first(value)
        if accept and accept != _WILDCARD:
            headers["Content-Type"] = accept
    return headers
