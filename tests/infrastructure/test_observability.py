"""Structured Logging — JSONFormatter output shape."""

import json
import logging

from cashcard.infrastructure.observability import JSONFormatter


def _record(**extra):
    record = logging.LogRecord(
        "cashcard.test", logging.INFO, __file__, 1, "Created card %s", (7,), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_core_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "INFO"
    assert out["logger"] == "cashcard.test"
    assert out["message"] == "Created card 7"
    assert "timestamp" in out


def test_json_formatter_surfaces_known_extras_only():
    out = json.loads(JSONFormatter().format(
        _record(card_id=7, owner="sarah1", password="secret"),
    ))
    assert out["card_id"] == 7
    assert out["owner"] == "sarah1"
    assert "password" not in out
