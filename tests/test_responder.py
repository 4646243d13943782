"""
Unit tests for service/responder.py

Found and not-found handling, Content-Length and logging.
"""
import json
import logging

from stub_http.api.models import NOT_FOUND_HINT, IncomingRequest
from stub_http.service.responder import Responder, text_length
from tests.conftest import TEST_CONTENT


# ── Found ───────────────────────────────────────────────────────────────────

def test_found_file_round_trip(responder, test_content_file):
    response = responder.handle(IncomingRequest(path="/test/content"))
    assert response.status == 200
    assert response.body == TEST_CONTENT.encode()
    assert response.headers["Content-Length"] == str(len(TEST_CONTENT))
    assert response.headers["Content-Type"] == "application/json"


def test_relative_request_path(responder, test_content_file):
    response = responder.handle(IncomingRequest(path="test/content"))
    assert response.status == 200


def test_json_fixture_served_unchanged(responder, data_dir):
    content = json.dumps({"foo": "bar", "valid": True})
    (data_dir / "test-content.json").write_text(content)
    response = responder.handle(IncomingRequest(path="/test/content"))
    assert response.status == 200
    assert response.body.decode() == content


def test_content_length_counts_characters(responder, data_dir):
    (data_dir / "greeting.json").write_text('"héllo wörld"', encoding="utf-8")
    response = responder.handle(IncomingRequest(path="/greeting"))
    assert response.headers["Content-Length"] == "13"
    assert len(response.body) == 15


def test_text_length_tolerates_binary():
    assert text_length(b"\x89PNG") == 4
    assert text_length(b"") == 0


def test_accept_header_applied_to_found_file(responder, data_dir):
    (data_dir / "feed.xml").write_text("<rss/>")
    response = responder.handle(IncomingRequest(path="/feed.xml", headers={"accept": ["application/rss+xml"]}))
    assert response.status == 200
    assert response.headers["Content-Type"] == "application/rss+xml"


# ── Not found ───────────────────────────────────────────────────────────────

def test_missing_file_returns_404(responder, data_dir):
    response = responder.handle(IncomingRequest(path="/test/content/does/not/exists"))
    assert response.status == 404
    result = json.loads(response.body)["result"]
    expected_path = f"{data_dir}/test-content-does-not-exists.json"
    assert result == f"File {expected_path} not found\n{NOT_FOUND_HINT}\n"


def test_missing_file_has_no_content_length(responder):
    response = responder.handle(IncomingRequest(path="/nothing/here.json"))
    assert "Content-Length" not in response.headers
    assert response.headers["Content-Type"] == "application/json"


def test_directory_is_not_a_fixture(responder, data_dir):
    (data_dir / "dir.json").mkdir()
    assert responder.handle(IncomingRequest(path="/dir")).status == 404


def test_not_found_body_stays_json_when_accept_differs(responder):
    response = responder.handle(IncomingRequest(path="/page.html", headers={"Accept": ["text/html"]}))
    assert response.status == 404
    assert response.headers["Content-Type"] == "text/html"
    assert "result" in json.loads(response.body)


def test_not_found_body_escapes_quotes(data_dir):
    odd = data_dir / 'we"ird'
    odd.mkdir()
    response = Responder(odd).handle(IncomingRequest(path="/x"))
    assert str(odd) in json.loads(response.body)["result"]


# ── Logging ─────────────────────────────────────────────────────────────────

def test_not_found_logs_error_with_paths(responder, caplog):
    with caplog.at_level(logging.INFO, logger="stub_http"):
        responder.handle(IncomingRequest(path="/missing"))
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert errors and errors[0].url == "/missing"
    assert errors[0].fixture.endswith("/missing.json")
    assert any(r.levelno == logging.WARNING for r in caplog.records)


def test_request_received_logged(responder, test_content_file, caplog):
    request = IncomingRequest(path="/test/content", query_params={"q": ["1"]})
    with caplog.at_level(logging.INFO, logger="stub_http"):
        responder.handle(request)
    messages = [r.getMessage() for r in caplog.records]
    assert "request.received" in messages
    assert "response.sent" in messages
