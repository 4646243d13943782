"""
Entry point for running the stub server as a Python module.

Usage:
    python -m stub_http [data-dir] [--port PORT] [--host HOST]
"""

from .cli import main

if __name__ == "__main__":
    main()
