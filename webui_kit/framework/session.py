"""
================================================================================
Session Context
================================================================================

The capability surface controls, pages and waits need from a browser session:

    find_element(locator)  -> live element handle, or NoSuchElementError
    is_displayed(element)  -> bool
    is_enabled(element)    -> bool

plus a few page-level helpers (goto, ready_state, title, screenshot) used by
BaseApp and failure capture.

PlaywrightSession implements the surface on top of the Playwright sync API.
Resolved elements are Playwright ElementHandles and are only valid for the
call that obtained them.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from loguru import logger
from playwright.sync_api import ElementHandle, Page
from playwright.sync_api import Error as PlaywrightError

from webui_kit.exceptions import ConfigurationError, NoSuchElementError, StaleElementError
from .locator import Locator


# Playwright error messages meaning the document changed under the lookup;
# anything else (e.g. a selector syntax error) is a locator problem.
CONTEXT_LOSS_MESSAGES = (
    "Execution context was destroyed",
    "Cannot find context with specified id",
    "Frame was detached",
    "Target closed",
    "Target page, context or browser has been closed",
    "Element is not attached to the DOM",
)


def is_context_loss(error: PlaywrightError) -> bool:
    """Whether ``error`` comes from navigation or a detached/closed target."""
    message = error.message or ""
    return any(text in message for text in CONTEXT_LOSS_MESSAGES)


class SessionContext(ABC):
    """
    Abstract browser session used by controls and pages.

    Any driver that can find an element by locator and report whether it is
    displayed/enabled satisfies this interface.
    """

    @abstractmethod
    def find_element(self, locator: Locator) -> Any:
        """
        Find the first element matching ``locator`` right now.

        Raises:
            NoSuchElementError: When nothing matches
        """

    @abstractmethod
    def is_displayed(self, element: Any) -> bool:
        """
        Whether ``element`` is rendered visibly.

        Raises:
            StaleElementError: When the element is no longer usable
        """

    @abstractmethod
    def is_enabled(self, element: Any) -> bool:
        """
        Whether ``element`` accepts interaction.

        Raises:
            StaleElementError: When the element is no longer usable
        """

    def goto(self, url: str) -> None:
        raise NotImplementedError(f"{type(self).__name__} cannot navigate")

    def ready_state(self) -> str:
        """Value of ``document.readyState``."""
        raise NotImplementedError(f"{type(self).__name__} cannot read the document state")

    def title(self) -> str:
        raise NotImplementedError(f"{type(self).__name__} cannot read the page title")

    def screenshot(self) -> bytes:
        """PNG bytes of the current viewport."""
        raise NotImplementedError(f"{type(self).__name__} cannot take screenshots")


class PlaywrightSession(SessionContext):
    """
    Session backed by a Playwright (sync API) Page.

    Usage:
        with sync_playwright() as p:
            browser = p.chromium.launch()
            session = PlaywrightSession(browser.new_page())
            set_default_session_if_not_set(session)
    """

    def __init__(self, page: Page):
        """
        Args:
            page: Playwright sync Page object; its lifecycle stays with the caller
        """
        self.page = page

    def find_element(self, locator: Locator) -> ElementHandle:
        try:
            handle = self.page.query_selector(locator.selector)
        except PlaywrightError as e:
            if is_context_loss(e):
                raise StaleElementError(
                    f"Lookup of '{locator}' failed: {e.message}"
                ) from e
            raise ConfigurationError(
                f"Playwright rejected locator '{locator}' (selector {locator.selector!r}): {e.message}"
            ) from e

        if handle is None:
            raise NoSuchElementError(f"No element matches '{locator}'", locator=locator)
        return handle

    def is_displayed(self, element: ElementHandle) -> bool:
        try:
            return element.is_visible()
        except PlaywrightError as e:
            raise StaleElementError(f"Element is no longer usable: {e.message}") from e

    def is_enabled(self, element: ElementHandle) -> bool:
        try:
            return element.is_enabled()
        except PlaywrightError as e:
            raise StaleElementError(f"Element is no longer usable: {e.message}") from e

    def goto(self, url: str) -> None:
        logger.debug(f"Navigating to: {url}")
        self.page.goto(url)

    def ready_state(self) -> str:
        try:
            return str(self.page.evaluate("document.readyState"))
        except PlaywrightError as e:
            # Execution context destroyed mid-navigation: state unknown for now.
            logger.debug(f"Could not read document.readyState: {e.message}")
            return ""

    def title(self) -> str:
        return self.page.title()

    def screenshot(self) -> bytes:
        return self.page.screenshot()

    @property
    def url(self) -> Optional[str]:
        return self.page.url


__all__ = [
    "SessionContext",
    "PlaywrightSession",
]
