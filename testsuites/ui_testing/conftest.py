"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures driving a real headless Chromium through the Playwright sync API.

Key Features:
- Session-scoped browser, skipped when Chromium is not installed
- Fresh browser context per test
- PlaywrightSession installed as the thread's default session
- Screenshot capture on failure

================================================================================
"""

from typing import Generator

import allure
import pytest
from loguru import logger
from playwright.sync_api import Browser, BrowserContext, Page, sync_playwright
from playwright.sync_api import Error as PlaywrightError

from webui_kit.common.global_config import configure
from webui_kit.framework.session import PlaywrightSession
from webui_kit.framework.session_registry import default_session


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def browser() -> Generator[Browser, None, None]:
    """
    Session-scoped browser fixture.

    Provides a single headless Chromium for all UI tests, reducing browser
    launch overhead.
    """
    with sync_playwright() as playwright:
        try:
            browser = playwright.chromium.launch(headless=True)
        except PlaywrightError as e:
            pytest.skip(f"Chromium is not available: {e.message}")
        yield browser
        browser.close()


@pytest.fixture(scope="function")
def context(browser: Browser) -> Generator[BrowserContext, None, None]:
    """Function-scoped browser context fixture providing isolation."""
    context = browser.new_context(viewport={"width": 1280, "height": 800})
    yield context
    context.close()


@pytest.fixture(scope="function")
def page(context: BrowserContext) -> Generator[Page, None, None]:
    page = context.new_page()
    yield page
    page.close()


@pytest.fixture
def web_session(page: Page) -> Generator[PlaywrightSession, None, None]:
    """
    PlaywrightSession over the test's page, installed as the default session.

    Timing defaults are shortened so negative cases fail fast.
    """
    configure(
        default_implicit_wait_timeout=2.0,
        default_page_loading_timeout=5.0,
        default_closing_timeout=2.0,
        poll_interval=0.05,
    )
    session = PlaywrightSession(page)
    with default_session(session):
        yield session


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Hook to capture screenshots on test failure.

    Takes a screenshot when a UI test fails and attaches it to the Allure
    report.
    """
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        session = getattr(item, "funcargs", {}).get("web_session")
        if session is not None:
            try:
                allure.attach(
                    session.screenshot(),
                    name="failure_screenshot",
                    attachment_type=allure.attachment_type.PNG,
                )
            except PlaywrightError as e:
                # Log but don't fail if screenshot capture fails
                logger.warning(f"Failed to capture screenshot on failure: {e.message}")
