"""Client Logging — structured records for backend calls, wired from Settings.

Invariants:
    - Every record carries timestamp, level, logger, message
    - Request context (operation, error_code, status_code, method, path) appears only when set
    - configure_logging() is idempotent: calling it again replaces the handler it installed,
      handlers added by the embedding UI are left alone

Design Decisions:
    - The client never configures logging on import; the UI calls configure_logging() once
      at startup, driven by EXAM_CLIENT_LOG_LEVEL / EXAM_CLIENT_LOG_FORMAT
"""

import json
import logging
from datetime import datetime, timezone

from exam_client.config import Settings, get_settings

CONTEXT_FIELDS = ("operation", "error_code", "status_code", "method", "path")
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s — %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per line; request context lifted out of `extra`."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (name, getattr(record, name))
            for name in CONTEXT_FIELDS
            if getattr(record, name, None) is not None
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


_installed: logging.Handler | None = None


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install (or replace) the client's root handler. Returns the handler."""
    global _installed
    root = logging.getLogger()
    if _installed is not None:
        root.removeHandler(_installed)

    handler = logging.StreamHandler()
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT),
    )
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    _installed = handler
    return handler


def configure_logging(settings: Settings | None = None) -> logging.Handler:
    """Apply Settings.log_level / Settings.log_format."""
    settings = settings or get_settings()
    return setup_logging(settings.log_level, settings.log_format)
