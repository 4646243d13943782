#!/usr/bin/env python3
"""Smoke runner for a running stub server.

Steps:
- wait until the server answers HTTP at all
- request every given URL path concurrently
- emit a compact summary and exit non-zero if any path has no fixture
"""
from __future__ import annotations

import asyncio
import sys

from runner.cli import parse_args
from runner.client import probe_all, wait_for_server
from runner.utils import summarize
from stub_http.logging_conf import get_logger, setup_logging

logger = get_logger("runner")


async def run_smoke(
    *, base_url: str, paths: list[str], accept: str | None = None, timeout_s: float = 20.0
) -> int:
    await wait_for_server(base_url, timeout_s=timeout_s)
    probes = await probe_all(base_url, paths, accept=accept)
    summary, exit_code = summarize(paths, probes)
    logger.info("runner.summary", extra=summary)
    return exit_code


def main(argv: list[str] | None = None) -> None:
    setup_logging()
    args = parse_args(sys.argv[1:] if argv is None else argv)
    code = asyncio.run(
        run_smoke(
            base_url=args.base_url,
            paths=args.paths,
            accept=args.accept,
            timeout_s=args.timeout,
        )
    )
    raise SystemExit(code)


if __name__ == "__main__":
    main()
