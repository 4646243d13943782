#!/usr/bin/env python3
"""Seed a data directory with example fixtures, or print fixture names.

    python tools/fixtures.py                   # writes ./responses/*
    python tools/fixtures.py --name /api/users/42 /feed.xml
"""
from __future__ import annotations

import argparse
import json
from pathlib import Path

from stub_http.domain.paths import resolve

ROOT = Path(__file__).resolve().parents[1]
DEFAULT_DIR = ROOT / "responses"

# URL path -> body the stub should answer with.
EXAMPLES: dict[str, bytes] = {
    "/api/users": json.dumps([{"id": 1, "name": "alice"}, {"id": 2, "name": "bob"}]).encode(),
    "/api/users/1": json.dumps({"id": 1, "name": "alice"}).encode(),
    "/api/v2/orders/latest": json.dumps({"id": "o-1001", "total": 42.5}).encode(),
    "/health": b'{"ok": true}',
    "/feed.xml": b'<?xml version="1.0"?><rss version="2.0"><channel/></rss>',
    "/pages/about.html": b"<!doctype html><title>about</title><p>stub</p>",
}


def seed(target: Path) -> list[Path]:
    """Write every example fixture under `target` and return the created files."""
    target.mkdir(parents=True, exist_ok=True)
    created = []
    for url_path, body in EXAMPLES.items():
        path = Path(resolve(url_path, str(target)))
        path.write_bytes(body)
        created.append(path)
    return created


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--dir", type=Path, default=DEFAULT_DIR)
    parser.add_argument("--name", nargs="+", metavar="URL_PATH", help="print fixture names and exit")
    args = parser.parse_args(argv)

    if args.name:
        for url_path in args.name:
            print(f"{url_path} -> {resolve(url_path, str(args.dir))}")
        return

    created = seed(args.dir)
    print("Created fixtures:")
    for c in created:
        print(" -", c)


if __name__ == "__main__":
    main()
