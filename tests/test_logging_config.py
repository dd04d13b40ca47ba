"""Tests for the JSON log formatter."""

import json
import logging

from validator_shared.logging_config import JSONFormatter


def _record(**extra):
    record = logging.LogRecord("validator_core.aggregator", logging.INFO, __file__, 1, "built %d", (2,), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    def test_basic_fields(self):
        entry = json.loads(JSONFormatter().format(_record()))
        assert entry["level"] == "INFO"
        assert entry["logger"] == "validator_core.aggregator"
        assert entry["message"] == "built 2"
        assert "unit_code" not in entry

    def test_structured_extras(self):
        entry = json.loads(JSONFormatter().format(_record(unit_code="MARN008", latency_ms=12.5)))
        assert entry["unit_code"] == "MARN008"
        assert entry["latency_ms"] == 12.5
