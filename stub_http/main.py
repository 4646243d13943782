"""FastAPI app factory: one catch-all route backed by a Responder."""
from __future__ import annotations

import time
from collections.abc import Callable

from fastapi import FastAPI, Request, Response

from stub_http import __version__
from stub_http.api import FIXTURE_ROUTE, serve_fixture
from stub_http.logging_conf import get_logger
from stub_http.service.responder import Responder

logger = get_logger("stub_http")


def create_app(responder: Responder) -> FastAPI:
    # No docs/openapi routes: every path belongs to the fixture directory.
    app = FastAPI(
        title="stub-http",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.responder = responder

    @app.middleware("http")
    async def request_timer(request: Request, call_next: Callable[[Request], Response]):
        """Log failures and the elapsed time of every request.

        Response headers are left untouched; they are fully decided by the
        responder.
        """
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:  # Log and re-raise to let Starlette answer 500
            logger.exception(
                "request.error",
                extra={
                    "event": "request_error",
                    "path": request.url.path,
                    "method": request.method,
                },
            )
            raise exc
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000.0

        logger.debug(
            "request.end",
            extra={
                "event": "request_end",
                "path": request.url.path,
                "status_code": response.status_code,
                "elapsed_ms": round(elapsed_ms, 2),
            },
        )
        return response

    # Plain Starlette route: no method list, so every method is dispatched.
    app.add_route(FIXTURE_ROUTE, serve_fixture, include_in_schema=False)

    return app
