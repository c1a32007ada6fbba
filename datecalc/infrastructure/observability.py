"""
Structured Logging: JSON formatter and root-logger setup for datecalc.

Invariants:
    - Every record carries timestamp, level, logger name and message
    - Calendar context (operation, input_text, year, month, work_days_count)
      is copied into the JSON object when the record has it
    - setup_logging owns at most one root handler: a repeated call replaces it
"""

import json
import logging
from datetime import datetime, timezone
from typing import Final

from datecalc.config import get_settings

CONTEXT_FIELDS: Final[tuple[str, ...]] = (
    "operation",
    "input_text",
    "year",
    "month",
    "work_days_count",
)

# Имя root-handler'а, установленного setup_logging
HANDLER_NAME: Final[str] = "datecalc"

TEXT_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, record.__dict__[key])
            for key in CONTEXT_FIELDS
            if record.__dict__.get(key) is not None
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def setup_logging(level: str | None = None, fmt: str | None = None) -> logging.Handler:
    """
    Install the datecalc handler on the root logger.

    Unspecified arguments come from Settings (DATECALC_LOG_LEVEL,
    DATECALC_LOG_FORMAT). Unknown level names fall back to INFO.
    """
    settings = get_settings()
    fmt = fmt or settings.log_format
    level_name = (level or settings.log_level).upper()

    for existing in list(logging.root.handlers):
        if existing.get_name() == HANDLER_NAME:
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT))

    logging.root.addHandler(handler)
    resolved = logging.getLevelName(level_name)
    logging.root.setLevel(resolved if isinstance(resolved, int) else logging.INFO)
    return handler
