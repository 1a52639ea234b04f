"""
================================================================================
Web UI Exceptions
================================================================================

Failure categories raised by controls, pages and the wait engine.

    WebUIError
      ConfigurationError        missing locator/session, bad settings
        UnsupportedActionError  action not offered by the control kind
      ElementLookupError        transient lookup failure (retried while waiting)
        NoSuchElementError
        StaleElementError
      ElementNotFoundError      control could not be resolved in time
      WaitTimeoutError          explicit wait did not reach the desired state

================================================================================
"""

from __future__ import annotations

import traceback
from typing import Any, Optional


class WebUIError(Exception):
    """Base exception for the framework."""
    pass


class ConfigurationError(WebUIError):
    """Raised when a locator, session or setting required by an operation is missing."""
    pass


class UnsupportedActionError(ConfigurationError):
    """Raised when an action is invoked on a control kind that does not offer it."""

    def __init__(self, action: str, control_name: str):
        self.action = action
        self.control_name = control_name
        super().__init__(f"{control_name} does not support '{action}'.")


class ElementLookupError(WebUIError):
    """Transient lookup failure; the wait engine treats it as "not yet"."""
    pass


class NoSuchElementError(ElementLookupError):
    """Raised by a session when no element matches a locator right now."""

    def __init__(self, message: str, locator: Any = None):
        self.locator = locator
        super().__init__(message)


class StaleElementError(ElementLookupError):
    """Raised when a resolved element is no longer attached to the document."""
    pass


class ElementNotFoundError(WebUIError):
    """
    Raised when a control cannot be resolved within its implicit wait timeout.

    Covers both "absent" and "present but hidden" (for controls that must be
    visible), so call sites only need one failure branch.

    Attributes:
        control_name: Display name of the control, e.g. ``Button(id=login)``
        locator: The control's locator
        timeout: Seconds waited before giving up
    """

    def __init__(
        self,
        control_name: str,
        locator: Any,
        timeout: float,
        details: Optional[str] = None,
    ):
        self.control_name = control_name
        self.locator = locator
        self.timeout = timeout
        self.details = details
        super().__init__(self.__str__())

    def __str__(self) -> str:
        message = (
            f"Could not find {self.control_name} "
            f"(locator '{self.locator}') within {self.timeout}s"
        )
        if self.details:
            message += f": {self.details}"
        return message


class WaitTimeoutError(WebUIError):
    """
    Raised when a wait does not reach its condition before the deadline.

    Attributes:
        original_exception: Transient error raised by the final evaluation,
            or None when it completed with a falsy result
        description: What was being waited for
        timeout: The timeout value in seconds
        attempt_count: Number of evaluations made
        elapsed_time: Actual elapsed time in seconds
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.original_exception: Optional[BaseException] = None
        self.description: Optional[str] = None
        self.timeout: Optional[float] = None
        self.attempt_count: Optional[int] = None
        self.elapsed_time: Optional[float] = None

    def __str__(self) -> str:
        base_msg = super().__str__()

        details = []
        if self.original_exception is not None:
            details.append(f"Last error: {type(self.original_exception).__name__}")
        if self.attempt_count is not None:
            details.append(f"Attempts: {self.attempt_count}")
        if self.elapsed_time is not None:
            details.append(f"Elapsed: {self.elapsed_time:.2f}s")

        if details:
            return f"{base_msg} [{', '.join(details)}]"
        return base_msg

    def get_traceback_str(self) -> str:
        """Formatted traceback of the last swallowed error, or an empty string."""
        if self.original_exception is None:
            return ""
        return "".join(traceback.format_exception(
            type(self.original_exception),
            self.original_exception,
            self.original_exception.__traceback__,
        ))


__all__ = [
    "WebUIError",
    "ConfigurationError",
    "UnsupportedActionError",
    "ElementLookupError",
    "NoSuchElementError",
    "StaleElementError",
    "ElementNotFoundError",
    "WaitTimeoutError",
]
