"""
Process-wide logging setup.

Lambda ships log lines to CloudWatch as-is, so records are written to stdout
as one JSON object per line by default (LOG_JSON=false switches to plain text).
Modules log through ``logging.getLogger(__name__)`` or ``get_logger``.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Optional

from intercom_sink.config import get_settings

# Attributes every LogRecord has; anything else came in through ``extra=``
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """One JSON object per record, including any ``extra`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        log_record = {
            "level": record.levelname,
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRS and not key.startswith("_"):
                log_record[key] = value
        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log_record, default=str)


def _get_formatter(log_json: bool) -> logging.Formatter:
    if log_json:
        return JsonFormatter()
    return logging.Formatter("[%(asctime)s] %(levelname)s in %(name)s: %(message)s")


class LoggingConfig:
    """Install a single stdout handler on the root logger."""

    def __init__(
        self, level: Optional[str] = None, log_json: Optional[bool] = None
    ) -> None:
        settings = get_settings()
        self.level = (level or settings.log_level).upper()
        self.log_json = settings.log_json if log_json is None else log_json

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(_get_formatter(self.log_json))
        # force=True drops handlers pre-installed by the Lambda runtime
        logging.basicConfig(level=self.level, handlers=[handler], force=True)
        logging.getLogger("botocore").setLevel(logging.WARNING)


def get_logger(name: str = "intercom_sink") -> logging.Logger:
    """Return a named logger (configure once with ``LoggingConfig``)."""
    return logging.getLogger(name)
