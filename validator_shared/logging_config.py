"""Logging configuration: single-line JSON in containers, plain text locally.

``LOG_FORMAT=text`` switches to a human-readable format for local runs.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone

# Structured extras passed via ``logger.info(..., extra={...})``
EXTRA_FIELDS = ("latency_ms", "unit_code", "source", "coverage_pct")

TEXT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


class JSONFormatter(logging.Formatter):
    """Outputs log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[0] is not None:
            log_entry["exception"] = self.formatException(record.exc_info)
        log_entry.update(
            {key: getattr(record, key) for key in EXTRA_FIELDS if hasattr(record, key)}
        )
        return json.dumps(log_entry, default=str)


def setup_logging() -> None:
    """Configure the root logger from LOG_LEVEL and LOG_FORMAT."""
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    handler = logging.StreamHandler(sys.stdout)
    if os.getenv("LOG_FORMAT", "json").lower() == "text":
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    else:
        handler.setFormatter(JSONFormatter())
    logging.basicConfig(level=level, handlers=[handler], force=True)
