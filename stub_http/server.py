"""Lifecycle of the listening process.

IDLE -> VALIDATING -> LISTENING -> STOPPING -> STOPPED

uvicorn owns sockets, HTTP parsing and the event loop. This module validates
the fixture directory, wires the responder in, and turns SIGINT/SIGTERM into
a stop flag that uvicorn's main loop polls.
"""
from __future__ import annotations

import asyncio
import contextlib
import os
import signal
import threading
from collections.abc import Callable, Generator
from datetime import UTC, datetime
from enum import Enum
from pathlib import Path
from types import FrameType

import uvicorn

from .config import ServerConfig
from .errors import StartupError
from .logging_conf import get_logger
from .main import create_app
from .service.responder import Responder

logger = get_logger("stub_http.server")

HANDLED_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class LifecycleState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    LISTENING = "listening"
    STOPPING = "stopping"
    STOPPED = "stopped"


def _now() -> str:
    return datetime.now(UTC).isoformat(timespec="seconds")


class _StubUvicornServer(uvicorn.Server):
    """uvicorn server whose signals and startup are reported to the lifecycle.

    uvicorn's own capture_signals() re-raises the captured signal after
    shutdown, which would turn a SIGTERM into a non-zero exit. Here the
    previous handlers are restored and nothing is re-raised.
    """

    def __init__(
        self,
        config: uvicorn.Config,
        on_signal: Callable[[int, FrameType | None], None],
        on_started: Callable[[], None],
    ) -> None:
        super().__init__(config)
        self._on_signal = on_signal
        self._on_started = on_started

    @contextlib.contextmanager
    def capture_signals(self) -> Generator[None, None, None]:
        # Signals can only be listened to from the main thread.
        if threading.current_thread() is not threading.main_thread():
            yield
            return
        original = {sig: signal.signal(sig, self._on_signal) for sig in HANDLED_SIGNALS}
        try:
            yield
        finally:
            for sig, handler in original.items():
                signal.signal(sig, handler)

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        if self.started:
            self._on_started()


class ServerLifecycle:
    """Validate, listen, stop. One instance per process run."""

    def __init__(self, config: ServerConfig) -> None:
        self.config = config
        self.state = LifecycleState.IDLE
        self.base_dir: Path | None = None
        self.server: uvicorn.Server | None = None

    def _transition(self, state: LifecycleState) -> None:
        logger.debug(
            "lifecycle.transition",
            extra={"event": "lifecycle_transition", "from": self.state.value, "to": state.value},
        )
        self.state = state

    def validate(self) -> Path:
        """Resolve the data directory and check it can be served from.

        Raises:
            StartupError: if the directory does not exist or is not readable.
        """
        self._transition(LifecycleState.VALIDATING)
        path = Path(os.path.abspath(self.config.data_path()))
        if not path.is_dir() or not os.access(path, os.R_OK):
            logger.error("startup.failed", extra={"event": "startup_failed", "data_dir": str(path)})
            self._transition(LifecycleState.STOPPED)
            raise StartupError(f"Cannot read {path}, exiting")
        self.base_dir = path
        return path

    def build_server(self, base_dir: Path) -> uvicorn.Server:
        app = create_app(Responder(base_dir))
        config = uvicorn.Config(
            app,
            host=self.config.host,
            port=self.config.port,
            log_config=None,
            log_level=self.config.log_level.lower(),
            access_log=False,
            server_header=False,
            lifespan="off",
        )
        return _StubUvicornServer(config, on_signal=self._handle_signal, on_started=self._on_started)

    def run(self) -> int:
        """Serve until stopped; returns the process exit code."""
        base_dir = self.validate()
        self.server = self.build_server(base_dir)
        asyncio.run(self.server.serve())
        self._transition(LifecycleState.STOPPED)
        logger.info("server.stopped", extra={"event": "server_stopped", "stopped_at": _now()})
        return 0

    def stop(self) -> None:
        """Ask the run-loop to stop accepting work and unwind."""
        if self.state is LifecycleState.LISTENING:
            self._transition(LifecycleState.STOPPING)
        if self.server is not None:
            self.server.should_exit = True

    def _on_started(self) -> None:
        self._transition(LifecycleState.LISTENING)
        logger.info(
            "server.started",
            extra={
                "event": "server_started",
                "host": self.config.host,
                "port": self.config.port,
                "data_dir": str(self.base_dir),
                "started_at": _now(),
            },
        )

    def _handle_signal(self, sig: int, frame: FrameType | None) -> None:
        logger.info("server.signal", extra={"event": "server_signal", "signal": signal.Signals(sig).name})
        # A second Ctrl+C skips waiting for open connections.
        if self.state is LifecycleState.STOPPING and sig == signal.SIGINT and self.server is not None:
            self.server.force_exit = True
            return
        self.stop()
