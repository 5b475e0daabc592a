"""Browsing session ID for log correlation.

One storefront session (cart, remembered contact, searches) shares one id.
The id also namespaces shared key-value state, see storefront.factory.
"""

import uuid
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import Iterator, Optional

NO_SESSION_ID = "no-session-id"

session_id_var: ContextVar[Optional[str]] = ContextVar("session_id", default=None)


def generate_session_id() -> str:
    return uuid.uuid4().hex


def get_session_id() -> str:
    """Current session ID, or "no-session-id" outside a session."""
    return session_id_var.get() or NO_SESSION_ID


def set_session_id(session_id: Optional[str]) -> Token:
    """Bind session_id to the current context.

    Returns:
        Token for session_id_var.reset()
    """
    return session_id_var.set(session_id)


@contextmanager
def session_scope(session_id: Optional[str] = None) -> Iterator[str]:
    """Run a block under a session ID (a fresh one if none is given).

    Example:
        with session_scope() as session_id:
            storefront.cart.add(record)
    """
    session_id = session_id or generate_session_id()
    token = session_id_var.set(session_id)
    try:
        yield session_id
    finally:
        session_id_var.reset(token)
