"""Runtime configuration for the stub server.

Values come from the command line first, then STUB_* environment variables,
then the defaults below. The config is built once and handed to the
lifecycle explicitly; nothing reads it from a global afterwards.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_DATA_DIR = "responses"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080


def _default_project_root() -> Path:
    return Path(os.getenv("STUB_PROJECT_ROOT") or Path.cwd())


@dataclass(frozen=True)
class ServerConfig:
    """Where to find fixtures and where to listen."""

    data_dir: str = DEFAULT_DATA_DIR
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    project_root: Path = field(default_factory=_default_project_root)
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if not 0 <= self.port <= 65535:
            raise ValueError(f"port must be between 0 and 65535, got {self.port}")

    @classmethod
    def from_env(cls, **overrides) -> ServerConfig:
        """Build a config from STUB_* env vars; keyword overrides win when not None."""
        values = {
            "data_dir": os.getenv("STUB_DATA_DIR", DEFAULT_DATA_DIR),
            "host": os.getenv("STUB_HOST", DEFAULT_HOST),
            "port": int(os.getenv("STUB_PORT", str(DEFAULT_PORT))),
            "log_level": os.getenv("LOG_LEVEL", "INFO").upper(),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def data_path(self) -> Path:
        """Absolute data directory; relative values are joined to the project root."""
        path = Path(self.data_dir)
        if not path.is_absolute():
            path = Path(self.project_root) / path
        return path
