"""
Logging Setup (Structured JSON)

The service logs one JSON object per line on the "medroute" logger.
Library modules only call logging.getLogger(__name__); handlers are
installed here, by the service, never by the library.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

# Extra fields copied into the JSON entry when present on the record
EXTRA_FIELDS = (
    "request_id",
    "issue_type",
    "urgency",
    "primary_agency",
    "recommendation_hash",
    "error_code",
    "duration_ms",
)


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in EXTRA_FIELDS:
            if hasattr(record, name):
                log_entry[name] = getattr(record, name)
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, ensure_ascii=False)


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Install the JSON handler on the "medroute" logger.

    Idempotent: calling it again only updates the level.
    """
    logger = logging.getLogger("medroute")
    logger.setLevel(level)
    if not any(isinstance(h.formatter, JSONFormatter) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(JSONFormatter())
        logger.addHandler(handler)
    return logger
