from __future__ import annotations

from fastapi import Request, Response

from ..service.responder import Responder
from .models import IncomingRequest, OutgoingResponse

# Registered without a method filter: TRACE, CONNECT and extension methods
# reach the responder like GET does.
FIXTURE_ROUTE = "/{full_path:path}"


def raw_path(request: Request) -> str:
    """The path exactly as sent on the request line, percent-escapes intact."""
    raw = request.scope.get("raw_path")
    if not raw:
        return request.url.path
    return raw.decode("latin-1").partition("?")[0]


def to_incoming(request: Request) -> IncomingRequest:
    """Copy the request line, query and headers out of the Starlette request."""
    query: dict[str, list[str]] = {}
    for key, value in request.query_params.multi_items():
        query.setdefault(key, []).append(value)
    headers: dict[str, list[str]] = {}
    for key, value in request.headers.items():
        headers.setdefault(key, []).append(value)
    server_params = {
        "scheme": request.url.scheme,
        "http_version": request.scope.get("http_version"),
        "server": request.scope.get("server"),
        "client": request.scope.get("client"),
    }
    return IncomingRequest(
        path=raw_path(request),
        method=request.method,
        query_params=query,
        headers=headers,
        server_params=server_params,
    )


def to_response(outgoing: OutgoingResponse) -> Response:
    return Response(
        content=outgoing.body,
        status_code=outgoing.status,
        headers=outgoing.headers,
    )


async def serve_fixture(request: Request) -> Response:
    """Answer any method on any path from the fixture directory.

    The responder runs inline on the event loop: it never awaits, so requests
    are resolved in the order the server hands them over.
    """
    responder: Responder = request.app.state.responder
    return to_response(responder.handle(to_incoming(request)))
