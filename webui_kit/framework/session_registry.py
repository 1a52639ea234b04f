"""
================================================================================
Default Session Registry
================================================================================

Per-thread default session used by controls and pages constructed without an
explicit session. Each thread (e.g. each parallel test worker) has its own
value, so concurrent runs do not interfere.

Controls and pages only read it through get_default_session(); test fixtures
own its lifecycle.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Generator, Optional

from loguru import logger

from webui_kit.exceptions import ConfigurationError
from .session import SessionContext


_local = threading.local()


def _current() -> Optional[SessionContext]:
    return getattr(_local, "session", None)


def get_default_session() -> SessionContext:
    """
    Returns the default session of the calling thread.

    Raises:
        ConfigurationError: When no default session has been set
    """
    session = _current()
    if session is None:
        raise ConfigurationError(
            "The default session is not set. Use set_default_session_if_not_set() "
            "(or pass a session explicitly) before using any Web UI controls or pages."
        )
    return session


def has_default_session() -> bool:
    return _current() is not None


def set_default_session(session: SessionContext) -> None:
    """Sets (or replaces) the default session of the calling thread."""
    _local.session = session
    logger.debug(f"Default session set: {type(session).__name__}")


def set_default_session_if_not_set(session: SessionContext) -> None:
    """Sets the default session of the calling thread unless one is already set."""
    if _current() is None:
        set_default_session(session)


def clear_default_session() -> None:
    _local.session = None


@contextmanager
def default_session(session: SessionContext) -> Generator[SessionContext, None, None]:
    """
    Temporarily installs ``session`` as the default, restoring the previous one.

    Usage:
        with default_session(PlaywrightSession(page)):
            LoginPage().wait_until_available()
    """
    previous = _current()
    _local.session = session
    try:
        yield session
    finally:
        _local.session = previous


__all__ = [
    "get_default_session",
    "has_default_session",
    "set_default_session",
    "set_default_session_if_not_set",
    "clear_default_session",
    "default_session",
]
