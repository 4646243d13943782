from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Probe:
    """Outcome of requesting one URL path from the stub server."""

    path: str
    status: int
    content_type: str | None
    elapsed_ms: float


class SmokeError(RuntimeError):
    """Raised when the smoke flow cannot proceed (e.g., server never answers)."""


class ProbeError(SmokeError):
    """Raised when a single probe fails at the transport level after retries."""
