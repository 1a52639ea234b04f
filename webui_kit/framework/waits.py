"""
================================================================================
Wait Engine
================================================================================

Condition polling against a browser session.

    poll_until       generic primitive: evaluate, sleep a fixed interval, repeat
    await_condition  poll_until over a session-aware condition
    conditions       element_exists, element_is_visible,
                     invisibility_of_element_located, element_to_be_clickable
    wait_for_page_load  document.readyState based page-load wait

Timing rules:
    - The condition is evaluated immediately; an already-satisfied condition
      returns without sleeping.
    - A timeout of 0 evaluates exactly once.
    - The last sleep is clipped to the deadline, so a condition that never
      holds fails no earlier than the timeout and no later than one poll
      interval after it.
    - Transient lookup errors (ElementLookupError) mean "not yet". The error
      raised by the final evaluation, if any, is attached to the
      WaitTimeoutError as ``original_exception``.

Usage:
    >>> button = await_condition(
    ...     session,
    ...     element_to_be_clickable(By.id("login")),
    ...     timeout=5,
    ...     message="Waiting for Button(id=login) to become clickable.",
    ... )

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import time
from datetime import timedelta
from typing import Any, Callable, Optional, Tuple, Type, TypeVar, Union

from loguru import logger

from webui_kit.common.global_config import get_settings

from webui_kit.exceptions import ElementLookupError, WaitTimeoutError
from .locator import Locator
from .session import SessionContext


T = TypeVar("T")

Timeout = Union[int, float, timedelta]
Condition = Callable[[SessionContext], Any]

TRANSIENT_ERRORS: Tuple[Type[BaseException], ...] = (ElementLookupError,)

READY_STATES = ("complete", "loaded")
INTERACTIVE_STATE = "interactive"


def _now() -> float:
    """Monotonic time source for deterministic timeout calculations."""
    return time.monotonic()


def _sleep(seconds: float) -> None:
    time.sleep(seconds)


def to_seconds(timeout: Timeout) -> float:
    """
    Normalize a timeout to float seconds.

    Raises:
        ValueError: For negative durations
    """
    if isinstance(timeout, timedelta):
        seconds = timeout.total_seconds()
    else:
        seconds = float(timeout)
    if seconds < 0:
        raise ValueError(f"Timeout must be >= 0, got {seconds}s")
    return seconds


def poll_until(
    predicate: Callable[[], T],
    timeout: Timeout,
    interval: Optional[Timeout] = None,
    description: str = "condition",
    ignored_exceptions: Tuple[Type[BaseException], ...] = TRANSIENT_ERRORS,
) -> T:
    """
    Evaluate ``predicate`` until it returns a truthy value or the timeout expires.

    Args:
        predicate: Zero-argument callable; a truthy result ends the wait
        timeout: Seconds (or timedelta) to keep polling; 0 means one evaluation
        interval: Seconds between evaluations; defaults to the configured poll interval
        description: Message for the timeout error
        ignored_exceptions: Errors treated as "not yet" instead of propagating

    Returns:
        The truthy value returned by the last evaluation

    Raises:
        WaitTimeoutError: When the deadline passes without success
    """
    timeout_s = to_seconds(timeout)
    interval_s = get_settings().poll_interval if interval is None else to_seconds(interval)
    if interval_s <= 0:
        raise ValueError("Poll interval must be > 0")

    start_time = _now()
    deadline = start_time + timeout_s
    last_exception: Optional[BaseException] = None
    attempt_count = 0

    while True:
        attempt_count += 1
        try:
            result = predicate()
            last_exception = None
            if result:
                if attempt_count > 1:
                    logger.debug(
                        f"Wait successful after {attempt_count} attempts "
                        f"({_now() - start_time:.2f}s): {description}"
                    )
                return result
        except ignored_exceptions as e:
            last_exception = e

        remaining = deadline - _now()
        if remaining <= 0:
            break
        _sleep(min(interval_s, remaining))

    elapsed = _now() - start_time
    logger.debug(
        f"Timeout after {elapsed:.2f}s ({attempt_count} attempts): {description}"
    )

    error = WaitTimeoutError(f"Timed out after {timeout_s}s: {description}")
    error.original_exception = last_exception
    error.description = description
    error.timeout = timeout_s
    error.attempt_count = attempt_count
    error.elapsed_time = elapsed
    raise error


def await_condition(
    session: SessionContext,
    condition: Condition,
    timeout: Timeout,
    message: str,
    poll_interval: Optional[Timeout] = None,
) -> Any:
    """
    Wait until ``condition(session)`` yields a satisfying value.

    Args:
        session: Session the condition is evaluated against
        condition: Callable taking the session; truthy result = satisfied
        timeout: Seconds (or timedelta) to wait; 0 means check once
        message: Names the control/page and the awaited state
        poll_interval: Override for the configured poll interval

    Returns:
        The satisfying value (e.g. the located element)

    Raises:
        WaitTimeoutError: Carrying ``message`` when the deadline passes
    """
    return poll_until(
        lambda: condition(session),
        timeout=timeout,
        interval=poll_interval,
        description=message,
    )


# =============================================================================
# Conditions
# =============================================================================

def element_exists(locator: Locator) -> Condition:
    """Element is present in the document; yields the element."""
    def _condition(session: SessionContext) -> Any:
        return session.find_element(locator)
    return _condition


def element_is_visible(locator: Locator) -> Condition:
    """Element is present and displayed; yields the element."""
    def _condition(session: SessionContext) -> Any:
        element = session.find_element(locator)
        return element if session.is_displayed(element) else None
    return _condition


def invisibility_of_element_located(locator: Locator) -> Condition:
    """Element is absent, detached or hidden; yields True."""
    def _condition(session: SessionContext) -> bool:
        try:
            element = session.find_element(locator)
            return not session.is_displayed(element)
        except ElementLookupError:
            return True
    return _condition


def element_to_be_clickable(locator: Locator) -> Condition:
    """Element is displayed and enabled; yields the element."""
    def _condition(session: SessionContext) -> Any:
        element = session.find_element(locator)
        if session.is_displayed(element) and session.is_enabled(element):
            return element
        return None
    return _condition


# =============================================================================
# Page Load
# =============================================================================

def wait_for_page_load(
    session: SessionContext,
    timeout: Timeout,
    page_title: str = "",
) -> None:
    """
    Wait until the document is fully loaded (and titled ``page_title``, if given).

    Pages that never leave the ``interactive`` state are accepted once the
    timeout expires, since their controls are usually usable already.

    Raises:
        WaitTimeoutError: When the document is still loading at the deadline
    """
    def _loaded() -> bool:
        if session.ready_state().lower() not in READY_STATES:
            return False
        return not page_title or session.title() == page_title

    description = "Waiting for page load"
    if page_title:
        description += f" (title '{page_title}')"

    try:
        poll_until(_loaded, timeout=timeout, description=description)
    except WaitTimeoutError as e:
        if session.ready_state().lower() == INTERACTIVE_STATE:
            logger.warning("Page stayed interactive past the load timeout; continuing")
            return
        error = WaitTimeoutError(f"Page load timed out after {e.timeout}s")
        error.description = e.description
        error.timeout = e.timeout
        error.attempt_count = e.attempt_count
        error.elapsed_time = e.elapsed_time
        raise error from e


__all__ = [
    "poll_until",
    "await_condition",
    "to_seconds",
    "element_exists",
    "element_is_visible",
    "invisibility_of_element_located",
    "element_to_be_clickable",
    "wait_for_page_load",
    "TRANSIENT_ERRORS",
]
