"""JSON-lines logging for the stub server and the smoke runner.

A test suite running against the stub usually wants to know which fixture a
request was looking for; `file.not_found` records carry the URL and the
resolved fixture path as top-level keys, so one `jq` filter over stdout
answers that. uvicorn's own loggers are folded into the same stream.
"""
from __future__ import annotations

import json
import logging
import os
import sys
from datetime import UTC, datetime
from logging import Handler, LogRecord
from typing import Any

_DEFAULT_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Keys present on a bare record; whatever else a record has came from `extra`.
_RECORD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "color_message"}

_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "uvicorn.asgi")


def _jsonable(value: Any) -> Any:
    # ASGI scopes hand over tuples of (host, port) and raw bytes.
    if isinstance(value, bytes):
        return value.decode("latin-1")
    return str(value)


class JsonFormatter(logging.Formatter):
    """One JSON object per record: ts, level, logger, message, then extras.

    Extras never overwrite the four base keys; a request header called
    `level` stays inside the `headers` mapping where it belongs.
    """

    def format(self, record: LogRecord) -> str:  # type: ignore[override]
        payload: dict[str, Any] = {
            "ts": datetime.now(UTC).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
        }
        if isinstance(record.msg, dict):
            payload.update(record.msg)
        else:
            payload["message"] = record.getMessage()

        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRS:
                payload.setdefault(key, value)

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=_jsonable)


def _make_stream_handler(level: int) -> Handler:
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(JsonFormatter())
    return handler


def _fold_server_loggers(level: int) -> None:
    """Drop uvicorn's handlers so its records reach the root JSON handler."""
    for name in _SERVER_LOGGERS:
        lg = logging.getLogger(name)
        lg.setLevel(level)
        lg.propagate = True
        for h in list(lg.handlers):
            lg.removeHandler(h)


def setup_logging(level: str | int = _DEFAULT_LEVEL) -> None:
    """Attach the JSON handler to the root logger once per process.

    A second call (tests, the runner importing server modules) is a no-op.
    """
    root = logging.getLogger()
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    if root.handlers:
        return

    root.setLevel(level)
    root.addHandler(_make_stream_handler(level))
    _fold_server_loggers(level)


def get_logger(name: str | None = None) -> logging.Logger:
    return logging.getLogger(name if name else "stub_http")
