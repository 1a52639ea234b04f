"""
================================================================================
Base Page Object
================================================================================

Foundation classes for Page Object Model implementation.

Provides:
    - BasePage: availability derived from one indicating control
    - Fluent wait_until_available / wait_until_not_available
    - Failure capture for Allure reports
    - BaseApp: groups the pages of one web application around a session

Usage:
    class DashboardPage(BasePage):
        INDICATING_LOCATOR = By.id("dashboard-header")

        def __init__(self, session=None):
            super().__init__(session=session)
            self.logout = button(By.id("logout"), session)

    DashboardPage().wait_until_available().logout ...

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Optional, TypeVar, Union

import allure
from loguru import logger
from playwright.sync_api import Error as PlaywrightError

from webui_kit.common.global_config import get_settings

from webui_kit.exceptions import ConfigurationError, WaitTimeoutError
from .locator import Locator
from .session import SessionContext
from .session_registry import get_default_session
from .waits import (
    Timeout,
    await_condition,
    element_is_visible,
    invisibility_of_element_located,
    to_seconds,
    wait_for_page_load,
)


P = TypeVar("P", bound="BasePage")


class BasePage:
    """
    Base class for all page objects.

    A page has no state of its own: it is available exactly when the element
    at its indicating locator is visible. Set the locator as the
    INDICATING_LOCATOR class attribute, pass it to the constructor or assign
    ``indicating_locator`` later (e.g. in a subclass constructor).
    """

    # Override in subclasses
    INDICATING_LOCATOR: Optional[Locator] = None

    def __init__(
        self,
        indicating_locator: Union[Locator, str, None] = None,
        session: Optional[SessionContext] = None,
        page_loading_timeout: Optional[Timeout] = None,
        closing_timeout: Optional[Timeout] = None,
    ):
        """
        Initialize page object.

        Args:
            indicating_locator: Locator of the control whose visibility means
                "page available"; defaults to INDICATING_LOCATOR
            session: Session to use; the thread's default session when None
            page_loading_timeout: Default wait for availability (seconds)
            closing_timeout: Default wait for unavailability (seconds)
        """
        settings = get_settings()
        self.indicating_locator = indicating_locator or self.INDICATING_LOCATOR
        self._session = session
        self.page_loading_timeout = (
            settings.default_page_loading_timeout
            if page_loading_timeout is None else page_loading_timeout
        )
        self.closing_timeout = (
            settings.default_closing_timeout
            if closing_timeout is None else closing_timeout
        )

    @property
    def indicating_locator(self) -> Optional[Locator]:
        return self._indicating_locator

    @indicating_locator.setter
    def indicating_locator(self, value: Union[Locator, str, None]) -> None:
        if isinstance(value, str):
            value = Locator.parse(value)
        self._indicating_locator = value

    @property
    def page_loading_timeout(self) -> float:
        return self._page_loading_timeout

    @page_loading_timeout.setter
    def page_loading_timeout(self, value: Timeout) -> None:
        self._page_loading_timeout = to_seconds(value)

    @property
    def closing_timeout(self) -> float:
        return self._closing_timeout

    @closing_timeout.setter
    def closing_timeout(self, value: Timeout) -> None:
        self._closing_timeout = to_seconds(value)

    @property
    def session(self) -> SessionContext:
        """The bound session, or the calling thread's default session."""
        if self._session is not None:
            return self._session
        return get_default_session()

    @property
    def name(self) -> str:
        return type(self).__name__

    def __repr__(self) -> str:
        return f"<{self.name} indicating={self._indicating_locator}>"

    def _require_indicating_locator(self) -> Locator:
        if self._indicating_locator is None:
            raise ConfigurationError(
                f"The indicating locator of {self.name} is not set. "
                f"Set it (preferably in the page class constructor) before using this page."
            )
        return self._indicating_locator

    def _await_available(self, timeout: Optional[Timeout]) -> None:
        locator = self._require_indicating_locator()
        await_condition(
            self.session,
            element_is_visible(locator),
            self.page_loading_timeout if timeout is None else timeout,
            f"Waiting for {self.name} to become available (visible).",
        )

    def _await_not_available(self, timeout: Optional[Timeout]) -> None:
        locator = self._require_indicating_locator()
        await_condition(
            self.session,
            invisibility_of_element_located(locator),
            self.closing_timeout if timeout is None else timeout,
            f"Waiting for {self.name} to become unavailable (invisible).",
        )

    # =========================================================================
    # Availability
    # =========================================================================

    def is_available(self, timeout: Optional[Timeout] = None) -> bool:
        """
        Whether the page becomes available within ``timeout``.

        Args:
            timeout: Seconds to wait; defaults to page_loading_timeout
        """
        try:
            self._await_available(timeout)
            return True
        except WaitTimeoutError:
            return False

    def is_not_available(self, timeout: Optional[Timeout] = None) -> bool:
        """
        Whether the page becomes unavailable within ``timeout``.

        Args:
            timeout: Seconds to wait; defaults to closing_timeout
        """
        try:
            self._await_not_available(timeout)
            return True
        except WaitTimeoutError:
            return False

    def wait_until_available(self: P, timeout: Optional[Timeout] = None) -> P:
        """
        Wait for the page to become available.

        Returns:
            This page, for chaining

        Raises:
            WaitTimeoutError: If the indicating control is not visible in time
            ConfigurationError: If the indicating locator is not set
        """
        with allure.step(f"Wait until {self.name} is available"):
            self._await_available(timeout)
        logger.debug(f"Page available: {self.name}")
        return self

    def wait_until_not_available(self: P, timeout: Optional[Timeout] = None) -> P:
        """
        Wait for the page (or dialog) to close.

        Returns:
            This page, for chaining

        Raises:
            WaitTimeoutError: If the indicating control is still visible in time
            ConfigurationError: If the indicating locator is not set
        """
        with allure.step(f"Wait until {self.name} is not available"):
            self._await_not_available(timeout)
        logger.debug(f"Page closed: {self.name}")
        return self

    # =========================================================================
    # Debug Utilities
    # =========================================================================

    def capture_failure(self, test_name: str) -> None:
        """
        Attach debugging information for a failed test to the Allure report.

        Saves:
            - Screenshot (when the session can take one; a closed page only
              logs a warning)
            - Page name and indicating locator
        """
        with allure.step("Capture failure details"):
            try:
                png = self.session.screenshot()
            except NotImplementedError:
                png = None
            except PlaywrightError as e:
                logger.warning(f"Failed to capture screenshot for {self.name}: {e.message}")
                png = None

            if png:
                allure.attach(
                    png,
                    name=f"failure_{test_name}",
                    attachment_type=allure.attachment_type.PNG,
                )

            allure.attach(
                f"{self.name} (indicating locator: {self._indicating_locator})",
                name="Page",
                attachment_type=allure.attachment_type.TEXT,
            )


class BaseApp:
    """
    Groups the pages of one web application around a session.

    BaseApp never launches or closes browsers; the session's owner does.
    """

    def __init__(
        self,
        session: Optional[SessionContext] = None,
        starting_url: Optional[str] = None,
    ):
        """
        Args:
            session: Session to use; the thread's default session when None
            starting_url: Navigated to immediately when given
        """
        self._session = session
        if starting_url and starting_url.strip():
            self.navigate_to(starting_url)

    @property
    def session(self) -> SessionContext:
        if self._session is not None:
            return self._session
        return get_default_session()

    @property
    def name(self) -> str:
        return type(self).__name__

    def navigate_to(self, url: str) -> None:
        with allure.step(f"Navigate to {url}"):
            self.session.goto(url)

    def wait_for_page_load(self, timeout: Optional[Timeout] = None, page_title: str = "") -> None:
        """
        Wait for the current document to finish loading.

        Args:
            timeout: Seconds to wait; defaults to the library page-loading timeout
            page_title: Expected document title, if any
        """
        if timeout is None:
            timeout = get_settings().default_page_loading_timeout
        wait_for_page_load(self.session, timeout, page_title)


__all__ = [
    "BasePage",
    "BaseApp",
]
