"""
================================================================================
Control
================================================================================

A named, located, possibly-not-yet-rendered piece of UI.

A Control wraps a Locator and re-resolves its element on every interaction;
the resolved element is never stored, so a re-rendered node is always picked
up fresh. What a control can do is described by its ControlKind (display name
+ capability flags); the interactions themselves live in element_actions.

Usage:
    >>> login = button(By.id("login"))
    >>> login.is_visible(timeout=2)
    True
    >>> click(login)            # from element_actions
    >>> login.name
    'Button(id=login)'

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Flag, auto
from typing import Any, Optional, Union

from loguru import logger

from webui_kit.common.global_config import get_settings

from webui_kit.exceptions import (
    ConfigurationError,
    ElementLookupError,
    ElementNotFoundError,
    NoSuchElementError,
    WaitTimeoutError,
)
from .locator import Locator
from .session import SessionContext
from .session_registry import get_default_session
from .waits import (
    Timeout,
    await_condition,
    element_exists,
    element_is_visible,
    element_to_be_clickable,
    invisibility_of_element_located,
    to_seconds,
)


class Capability(Flag):
    """Interaction capabilities a control kind offers."""
    NONE = 0
    CLICKABLE = auto()
    TOGGLED = auto()
    TEXTUAL = auto()
    EDITABLE = auto()
    SELECTABLE = auto()


@dataclass(frozen=True)
class ControlKind:
    """
    Identity of a control type.

    Attributes:
        display_name: Used in control names and failure messages
        capabilities: Actions element_actions allows on this kind
    """
    display_name: str
    capabilities: Capability = Capability.NONE

    def supports(self, capability: Capability) -> bool:
        return capability in self.capabilities


GENERIC = ControlKind("Control")
BUTTON = ControlKind("Button", Capability.CLICKABLE | Capability.TEXTUAL)
CHECK_BOX = ControlKind("CheckBox", Capability.CLICKABLE | Capability.TOGGLED)
RADIO_BUTTON = ControlKind("RadioButton", Capability.CLICKABLE | Capability.TOGGLED)
TEXT_FIELD = ControlKind(
    "TextField", Capability.CLICKABLE | Capability.TEXTUAL | Capability.EDITABLE
)
SELECT_BOX = ControlKind("SelectBox", Capability.SELECTABLE)
LABEL = ControlKind("Label", Capability.CLICKABLE | Capability.TEXTUAL)
TEXT_LINK = ControlKind("TextLink", Capability.CLICKABLE | Capability.TEXTUAL)
TEXT = ControlKind("TextControl", Capability.TEXTUAL)


class Control:
    """
    Lazily resolved UI control.

    Query methods (exists*, is_visible*, is_not_visible, is_clickable*) never
    raise for missing elements or timeouts; they return False. resolve() and
    the wait_until_* methods raise. A missing session or locator always raises
    ConfigurationError.
    """

    def __init__(
        self,
        locator: Union[Locator, str],
        session: Optional[SessionContext] = None,
        kind: ControlKind = GENERIC,
        expect_visible: bool = True,
        implicit_wait_timeout: Optional[Timeout] = None,
    ):
        """
        Args:
            locator: How to find the element; strings are parsed with Locator.parse
            session: Session to use; the thread's default session when None
            kind: Control kind (name + capabilities)
            expect_visible: Whether the element must be visible, not just present,
                to be resolved
            implicit_wait_timeout: Seconds resolve() waits; library default when None

        Raises:
            ConfigurationError: If ``locator`` is None
        """
        if locator is None:
            raise ConfigurationError("The locator given to the UI control is None.")
        if isinstance(locator, str):
            locator = Locator.parse(locator)

        self._locator = locator
        self._session = session
        self.kind = kind
        self.expect_visible = expect_visible
        if implicit_wait_timeout is None:
            implicit_wait_timeout = get_settings().default_implicit_wait_timeout
        self.implicit_wait_timeout = implicit_wait_timeout

    @property
    def locator(self) -> Locator:
        return self._locator

    @property
    def implicit_wait_timeout(self) -> float:
        return self._implicit_wait_timeout

    @implicit_wait_timeout.setter
    def implicit_wait_timeout(self, value: Timeout) -> None:
        self._implicit_wait_timeout = to_seconds(value)

    @property
    def session(self) -> SessionContext:
        """The bound session, or the calling thread's default session."""
        if self._session is not None:
            return self._session
        return get_default_session()

    @property
    def name(self) -> str:
        """Display name, e.g. ``Button(id=login)``."""
        return f"{self.kind.display_name}({self._locator})"

    def supports(self, capability: Capability) -> bool:
        return self.kind.supports(capability)

    def __repr__(self) -> str:
        return f"<{self.name}>"

    def _timeout(self, timeout: Optional[Timeout]) -> float:
        return self._implicit_wait_timeout if timeout is None else to_seconds(timeout)

    # =========================================================================
    # Element Resolution
    # =========================================================================

    def resolve_now(self) -> Any:
        """
        Look the element up once, without waiting.

        Raises:
            NoSuchElementError: If absent, or hidden while visibility is expected
        """
        session = self.session
        element = session.find_element(self._locator)
        if self.expect_visible and not session.is_displayed(element):
            raise NoSuchElementError(
                f"{self.name} exists in the document but is not visible.",
                locator=self._locator,
            )
        return element

    def resolve(self, timeout: Optional[Timeout] = None) -> Any:
        """
        Resolve the live element, waiting up to the implicit wait timeout.

        The returned handle is only valid for the caller's immediate use.

        Raises:
            ElementNotFoundError: If the element is absent (or hidden, when
                visibility is expected) after the timeout
        """
        wait_timeout = self._timeout(timeout)
        try:
            if self.expect_visible:
                return self.wait_until_visible(wait_timeout)
            return self.wait_until_exists(wait_timeout)
        except WaitTimeoutError as e:
            details = None
            # no lookup error on the final attempt: found, but hidden
            if self.expect_visible and e.original_exception is None:
                details = "present in the document but not visible"
            error = ElementNotFoundError(self.name, self._locator, wait_timeout, details)
            logger.error(str(error))
            raise error from e

    # =========================================================================
    # Presence
    # =========================================================================

    def exists_now(self) -> bool:
        """Whether the element is present in the document right now."""
        try:
            self.session.find_element(self._locator)
            return True
        except ElementLookupError:
            return False

    def exists(self, timeout: Optional[Timeout] = None) -> bool:
        """Whether the element is present, waiting up to ``timeout``."""
        try:
            self.wait_until_exists(self._timeout(timeout))
            return True
        except WaitTimeoutError:
            return False

    def wait_until_exists(self, timeout: Optional[Timeout] = None) -> Any:
        """
        Raises:
            WaitTimeoutError: If the element is still absent after ``timeout``
        """
        return await_condition(
            self.session,
            element_exists(self._locator),
            self._timeout(timeout),
            f"Waiting for {self.name} to exist.",
        )

    # =========================================================================
    # Visibility
    # =========================================================================

    def is_visible_now(self) -> bool:
        """Whether the element is present and visible right now."""
        try:
            session = self.session
            return session.is_displayed(session.find_element(self._locator))
        except ElementLookupError:
            return False

    def is_visible(self, timeout: Optional[Timeout] = None) -> bool:
        """Whether the element is visible, waiting up to ``timeout``."""
        try:
            self.wait_until_visible(self._timeout(timeout))
            return True
        except WaitTimeoutError:
            return False

    def is_not_visible(self, timeout: Optional[Timeout] = None) -> bool:
        """Whether the element is absent or hidden, waiting up to ``timeout``."""
        try:
            self.wait_until_not_visible(self._timeout(timeout))
            return True
        except WaitTimeoutError:
            return False

    def wait_until_visible(self, timeout: Optional[Timeout] = None) -> Any:
        """
        Raises:
            WaitTimeoutError: If the element is not visible after ``timeout``
        """
        return await_condition(
            self.session,
            element_is_visible(self._locator),
            self._timeout(timeout),
            f"Waiting for {self.name} to become visible.",
        )

    def wait_until_not_visible(self, timeout: Optional[Timeout] = None) -> bool:
        """
        Raises:
            WaitTimeoutError: If the element is still visible after ``timeout``
        """
        return await_condition(
            self.session,
            invisibility_of_element_located(self._locator),
            self._timeout(timeout),
            f"Waiting for {self.name} to become not visible.",
        )

    # =========================================================================
    # Clickability
    # =========================================================================

    def is_clickable_now(self) -> bool:
        """Whether the element is visible and enabled right now."""
        try:
            session = self.session
            element = session.find_element(self._locator)
            return session.is_displayed(element) and session.is_enabled(element)
        except ElementLookupError:
            return False

    def is_not_clickable_now(self) -> bool:
        """Whether the element is absent, hidden or disabled right now."""
        return not self.is_clickable_now()

    def is_clickable(self, timeout: Optional[Timeout] = None) -> bool:
        """Whether the element is visible and enabled, waiting up to ``timeout``."""
        try:
            self.wait_until_clickable(self._timeout(timeout))
            return True
        except WaitTimeoutError:
            return False

    def wait_until_clickable(self, timeout: Optional[Timeout] = None) -> Any:
        """
        Raises:
            WaitTimeoutError: If the element is not clickable after ``timeout``
        """
        return await_condition(
            self.session,
            element_to_be_clickable(self._locator),
            self._timeout(timeout),
            f"Waiting for {self.name} to become clickable.",
        )


# =============================================================================
# Factories
# =============================================================================

def button(locator: Union[Locator, str], session: Optional[SessionContext] = None, **kwargs: Any) -> Control:
    return Control(locator, session, kind=BUTTON, **kwargs)


def check_box(locator: Union[Locator, str], session: Optional[SessionContext] = None, **kwargs: Any) -> Control:
    return Control(locator, session, kind=CHECK_BOX, **kwargs)


def radio_button(locator: Union[Locator, str], session: Optional[SessionContext] = None, **kwargs: Any) -> Control:
    return Control(locator, session, kind=RADIO_BUTTON, **kwargs)


def text_field(locator: Union[Locator, str], session: Optional[SessionContext] = None, **kwargs: Any) -> Control:
    return Control(locator, session, kind=TEXT_FIELD, **kwargs)


def select_box(locator: Union[Locator, str], session: Optional[SessionContext] = None, **kwargs: Any) -> Control:
    return Control(locator, session, kind=SELECT_BOX, **kwargs)


def label(locator: Union[Locator, str], session: Optional[SessionContext] = None, **kwargs: Any) -> Control:
    return Control(locator, session, kind=LABEL, **kwargs)


def text_link(locator: Union[Locator, str], session: Optional[SessionContext] = None, **kwargs: Any) -> Control:
    return Control(locator, session, kind=TEXT_LINK, **kwargs)


def text_control(locator: Union[Locator, str], session: Optional[SessionContext] = None, **kwargs: Any) -> Control:
    return Control(locator, session, kind=TEXT, **kwargs)


__all__ = [
    "Capability",
    "ControlKind",
    "Control",
    "GENERIC",
    "BUTTON",
    "CHECK_BOX",
    "RADIO_BUTTON",
    "TEXT_FIELD",
    "SELECT_BOX",
    "LABEL",
    "TEXT_LINK",
    "TEXT",
    "button",
    "check_box",
    "radio_button",
    "text_field",
    "select_box",
    "label",
    "text_link",
    "text_control",
]
