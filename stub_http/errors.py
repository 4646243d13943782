from __future__ import annotations


class StubServerError(RuntimeError):
    """Base class for failures that stop the stub server from serving."""


class StartupError(StubServerError):
    """Raised when the data directory is missing or unreadable at startup."""
