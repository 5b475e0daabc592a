"""Structured logging for the storefront.

Log lines carry the browsing session ID plus whichever storefront fields
(cart line, catalogue, storage key, search term) the caller passed via
``extra=``. Output is one JSON object per line, or a plain text format
for local development.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Union

from .session_id import NO_SESSION_ID, get_session_id

# Fields copied from `extra=` into the JSON line
CONTEXT_FIELDS = ("line_id", "catalogue_id", "storage_key", "term", "result_count")

TEXT_FORMAT = "%(asctime)s - %(levelname)s - %(session_id)s - %(name)s - %(message)s"

# Marks handlers installed by configure_logging so reconfiguring replaces only them
_HANDLER_MARKER = "_storefront_handler"


class SessionIDFilter(logging.Filter):
    """Stamp session_id on every record passing the handler."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.session_id = get_session_id()
        return True


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "session_id": getattr(record, "session_id", NO_SESSION_ID),
            "message": record.getMessage(),
        }

        for key in CONTEXT_FIELDS:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        if record.exc_info:
            log_data["error"] = str(record.exc_info[1])
            log_data["traceback"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def _resolve_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def configure_logging(level: Union[str, int] = "INFO", json_format: bool = True) -> None:
    """Install the storefront handler on the root logger.

    Calling it again replaces the previously installed storefront handler;
    handlers added by others (e.g. a test runner) are left alone.

    Args:
        level: Log level name or number
        json_format: JSON lines if True, TEXT_FORMAT otherwise

    Raises:
        ValueError: If the level name is unknown
    """
    resolved = _resolve_level(level)
    root_logger = logging.getLogger()
    root_logger.setLevel(resolved)

    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(resolved)
    handler.setFormatter(JSONFormatter() if json_format else logging.Formatter(TEXT_FORMAT))
    handler.addFilter(SessionIDFilter())
    setattr(handler, _HANDLER_MARKER, True)
    root_logger.addHandler(handler)

    # Per-request lines from the HTTP client are noise at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
