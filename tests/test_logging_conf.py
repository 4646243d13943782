"""
Unit tests for logging_conf.py
"""
import json
import logging

from stub_http.logging_conf import JsonFormatter


def _format(msg, **extra):
    record = logging.makeLogRecord({"name": "stub_http.responder", "levelname": "ERROR", "msg": msg, **extra})
    return json.loads(JsonFormatter().format(record))


def test_base_keys_present():
    payload = _format("file.not_found")
    assert payload["message"] == "file.not_found"
    assert payload["level"] == "ERROR"
    assert payload["logger"] == "stub_http.responder"
    assert "ts" in payload


def test_extras_become_top_level_keys():
    payload = _format("file.not_found", url="/missing", fixture="/srv/missing.json")
    assert payload["url"] == "/missing"
    assert payload["fixture"] == "/srv/missing.json"
    assert "lineno" not in payload


def test_extras_do_not_overwrite_base_keys():
    payload = _format("request.received", logger="spoofed")
    assert payload["logger"] == "stub_http.responder"


def test_scope_values_serialized():
    payload = _format("request.received", server=("127.0.0.1", 8080), raw=b"/a%20b")
    assert payload["server"] == ["127.0.0.1", 8080]
    assert payload["raw"] == "/a%20b"


def test_dict_message_merged():
    payload = _format({"event": "summary", "found_count": 2})
    assert payload["found_count"] == 2
    assert "message" not in payload
