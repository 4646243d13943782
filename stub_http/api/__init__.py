from .routes import FIXTURE_ROUTE, serve_fixture

__all__ = ["FIXTURE_ROUTE", "serve_fixture"]
