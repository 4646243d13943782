from __future__ import annotations

import argparse
import sys

from .config import ServerConfig
from .logging_conf import setup_logging
from .server import ServerLifecycle


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse CLI arguments for the stub server."""
    parser = argparse.ArgumentParser(
        prog="stub-http",
        description="Simple web-server answering every request with a fixture file",
    )
    parser.add_argument(
        "data_dir",
        metavar="data-dir",
        nargs="?",
        default=None,
        help="Directory with files for responses (default: responses)",
    )
    parser.add_argument("-p", "--port", type=int, default=None, help="Port for listening (default: 8080)")
    parser.add_argument("--host", default=None, help="Interface for listening (default: 0.0.0.0)")
    parser.add_argument("--log-level", default=None, dest="log_level")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> ServerConfig:
    return ServerConfig.from_env(
        data_dir=args.data_dir,
        host=args.host,
        port=args.port,
        log_level=args.log_level.upper() if args.log_level else None,
    )


def main(argv: list[str] | None = None) -> None:
    config = build_config(parse_args(sys.argv[1:] if argv is None else argv))
    setup_logging(config.log_level)
    raise SystemExit(ServerLifecycle(config).run())


if __name__ == "__main__":
    main()
