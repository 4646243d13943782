from __future__ import annotations

import argparse
import os


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse CLI arguments for the smoke runner."""
    parser = argparse.ArgumentParser(description="Probe URL paths against a running stub server")
    parser.add_argument("paths", nargs="+", help="URL paths expected to have fixture files")
    parser.add_argument("--base-url", default=os.getenv("BASE_URL", "http://127.0.0.1:8080"))
    parser.add_argument("--accept", default=None, help="Accept header sent with every probe")
    parser.add_argument("--timeout", type=float, default=20.0)
    return parser.parse_args(argv)
