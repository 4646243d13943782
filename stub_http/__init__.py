"""Stub HTTP server answering requests from pre-placed fixture files."""
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("stub-http")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"
