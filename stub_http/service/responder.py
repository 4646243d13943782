"""Turn an incoming request into a fixture-backed response.

The responder holds nothing but the base directory, so one instance is
shared by every request the server handles.
"""
from __future__ import annotations

import os
from pathlib import Path

from ..api.models import IncomingRequest, NotFoundBody, OutgoingResponse
from ..domain.negotiation import negotiate_headers
from ..domain.paths import resolve
from ..logging_conf import get_logger

logger = get_logger("stub_http.responder")


def text_length(content: bytes) -> int:
    """Length of `content` as UTF-8 text; each undecodable sequence counts as one character."""
    return len(content.decode("utf-8", errors="replace"))


def read_fixture(path: str) -> bytes | None:
    """Return the bytes of a readable regular file, or None."""
    p = Path(path)
    if not p.is_file() or not os.access(p, os.R_OK):
        return None
    try:
        return p.read_bytes()
    except OSError:
        return None


class Responder:
    def __init__(self, base_dir: str | os.PathLike[str]) -> None:
        self.base_dir = os.fspath(base_dir)

    def fixture_path(self, url_path: str) -> str:
        return resolve(url_path, self.base_dir)

    def handle(self, request: IncomingRequest) -> OutgoingResponse:
        """Answer `request` with its fixture file or a JSON 404."""
        logger.info(
            "request.received",
            extra={
                "event": "request_received",
                "method": request.method,
                "path": request.path,
                "query": request.query_params,
                "headers": request.headers,
                "server": request.server_params,
            },
        )

        path = self.fixture_path(request.path)
        headers = negotiate_headers(request.headers)
        content = read_fixture(path)

        if content is None:
            logger.error(
                "file.not_found",
                extra={"event": "file_not_found", "url": request.path, "fixture": path},
            )
            logger.warning("response.not_found", extra={"event": "response_not_found"})
            body = NotFoundBody.for_path(path).model_dump_json().encode("utf-8")
            return OutgoingResponse(status=404, headers=headers, body=body)

        # Character count, not byte count: non-ASCII fixtures get a value
        # shorter than the body, which uvicorn refuses to send. Kept as is.
        headers["Content-Length"] = str(text_length(content))
        logger.info("response.sent", extra={"event": "response_sent", "headers": headers})
        return OutgoingResponse(status=200, headers=headers, body=content)
