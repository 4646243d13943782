from __future__ import annotations

import asyncio
import time
from collections.abc import Iterable

import httpx

from runner.types import Probe, ProbeError, SmokeError
from stub_http.logging_conf import get_logger

logger = get_logger("runner.client")


async def wait_for_server(base_url: str, timeout_s: float = 20.0) -> None:
    """Poll the stub until it answers any HTTP response or raise after a timeout.

    The stub has no health route, so a 404 for "/" counts as ready.
    """
    deadline = time.monotonic() + timeout_s
    async with httpx.AsyncClient(base_url=base_url, timeout=5.0) as client:
        while time.monotonic() < deadline:
            try:
                r = await client.get("/")
            except httpx.TransportError:
                await asyncio.sleep(0.25)
                continue
            logger.info("server.ready", extra={"event": "server_ready", "status_code": r.status_code})
            return
    raise SmokeError("Stub server did not answer within timeout")


async def probe_one(
    client: httpx.AsyncClient, path: str, *, accept: str | None = None, retries: int = 2
) -> Probe:
    """Request one path and record status, content type and latency, with retry.

    - Only transport errors are retried; a 404 is a valid answer
    - Logs retry attempts with the probed path
    """
    headers = {"Accept": accept} if accept else {}
    last_err: Exception | None = None
    for attempt in range(retries):
        start = time.perf_counter()
        try:
            r = await client.get(path, headers=headers)
        except httpx.TransportError as e:  # pragma: no cover - network flakiness
            last_err = e
            logger.warning(
                "probe.retry",
                extra={
                    "event": "probe_retry",
                    "path": path,
                    "attempt": attempt + 1,
                    "error": str(e),
                },
            )
            continue
        return Probe(
            path=path,
            status=r.status_code,
            content_type=r.headers.get("content-type"),
            elapsed_ms=(time.perf_counter() - start) * 1000.0,
        )
    raise ProbeError(f"probe failed for {path}: {last_err}")


async def probe_all(
    base_url: str, paths: Iterable[str], *, accept: str | None = None
) -> list[Probe]:
    """Probe paths concurrently; transport failures are logged and dropped."""
    paths = list(paths)
    async with httpx.AsyncClient(base_url=base_url, timeout=10.0) as client:
        tasks = [probe_one(client, p, accept=accept) for p in paths]
        results = await asyncio.gather(*tasks, return_exceptions=True)
    probes: list[Probe] = []
    for path, res in zip(paths, results):
        if isinstance(res, Exception):
            logger.error("probe.failed", extra={"event": "probe_failed", "path": path, "error": str(res)})
            continue
        probes.append(res)
    return probes
