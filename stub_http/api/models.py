from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel

NOT_FOUND_HINT = (
    "You must name your mock-files as strings from your request url, "
    "with change all '/' symbols to dashes"
)


@dataclass(frozen=True)
class IncomingRequest:
    """The parts of an HTTP request that the responder looks at."""

    path: str
    method: str = "GET"
    query_params: dict[str, list[str]] = field(default_factory=dict)
    headers: dict[str, list[str]] = field(default_factory=dict)
    server_params: dict[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class OutgoingResponse:
    """Status, headers and body handed back to the HTTP layer."""

    status: int
    headers: dict[str, str]
    body: bytes


class NotFoundBody(BaseModel):
    """JSON payload sent when no fixture file matches the request."""
    result: str

    @classmethod
    def for_path(cls, path: str) -> NotFoundBody:
        return cls(result=f"File {path} not found\n{NOT_FOUND_HINT}\n")
