"""Pure request-resolution helpers: fixture paths and header negotiation.

These modules are intentionally free of FastAPI/HTTP concerns so they can be
unit-tested and reused by both the server and the fixture tooling.
"""
__all__ = ["paths", "negotiation"]
