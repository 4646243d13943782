"""
Shared pytest fixtures for the stub server test suite.
"""
import pytest
from fastapi.testclient import TestClient

from stub_http.main import create_app
from stub_http.service.responder import Responder

TEST_CONTENT = "Test content"


# ── Fixture directories ─────────────────────────────────────────────────────

@pytest.fixture
def data_dir(tmp_path):
    """Empty directory playing the role of `responses/`."""
    d = tmp_path / "responses"
    d.mkdir()
    return d


@pytest.fixture
def test_content_file(data_dir):
    """Fixture answering `/test/content`."""
    path = data_dir / "test-content.json"
    path.write_text(TEST_CONTENT)
    return path


# ── Application ─────────────────────────────────────────────────────────────

@pytest.fixture
def responder(data_dir):
    return Responder(data_dir)


@pytest.fixture
def client(responder):
    """HTTP client talking to the app in-process."""
    with TestClient(create_app(responder)) as c:
        yield c
