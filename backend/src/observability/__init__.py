"""Observability module for the storefront.

Provides structured logging with browsing session correlation.
"""

from .logging_config import configure_logging, JSONFormatter, SessionIDFilter
from .session_id import (
    session_id_var,
    get_session_id,
    set_session_id,
    generate_session_id,
    session_scope,
)

__all__ = [
    # Logging
    "configure_logging",
    "JSONFormatter",
    "SessionIDFilter",
    # Session ID
    "session_id_var",
    "get_session_id",
    "set_session_id",
    "generate_session_id",
    "session_scope",
]
