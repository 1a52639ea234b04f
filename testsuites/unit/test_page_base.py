from unittest.mock import patch

import allure
import pytest
from playwright.sync_api import Error as PlaywrightError

from webui_kit.common.global_config import configure
from webui_kit.exceptions import ConfigurationError, WaitTimeoutError
from webui_kit.framework.control import button
from webui_kit.framework.locator import By
from webui_kit.framework.page_base import BaseApp, BasePage
from webui_kit.framework.session_registry import default_session

from testsuites.unit.fakes import FakeElement


class DashboardPage(BasePage):
    INDICATING_LOCATOR = By.id("dashboard-header")

    def __init__(self, session=None):
        super().__init__(session=session)
        self.logout = button(By.id("logout"), session)


class UnconfiguredPage(BasePage):
    pass


@allure.epic("Pages")
@allure.feature("Availability")
class TestAvailability:

    @pytest.mark.P0
    def test_available_page_needs_no_polling(self, session, clock):
        session.add("id=dashboard-header")

        assert DashboardPage(session).is_available() is True
        assert clock.sleeps == []

    @pytest.mark.P0
    def test_header_hidden_for_two_seconds(self, session, clock):
        session.add("id=dashboard-header", FakeElement(visible=False))
        session.show("id=dashboard-header", at=2.0)
        page = DashboardPage(session)

        assert page.is_available(timeout=1) is False
        assert page.wait_until_available(timeout=5) is page
        assert clock.now == 2.0

    @pytest.mark.P0
    def test_availability_depends_only_on_indicating_control(self, session, clock):
        session.add("id=dashboard-header")
        session.add("id=logout")
        page = DashboardPage(session)

        session.hide("id=logout")
        assert page.is_available(timeout=0) is True

        session.show("id=logout")
        session.hide("id=dashboard-header")
        assert page.is_available(timeout=0) is False

    def test_page_holds_no_state_between_calls(self, session, clock):
        session.add("id=dashboard-header")
        page = DashboardPage(session)
        assert page.is_available(timeout=0) is True

        session.remove("id=dashboard-header")
        assert page.is_available(timeout=0) is False

    def test_is_not_available_after_close(self, session, clock):
        session.add("id=dashboard-header")
        session.remove("id=dashboard-header", at=1.0)
        page = DashboardPage(session)

        assert page.is_not_available(timeout=0) is False
        assert page.is_not_available(timeout=2) is True
        assert clock.now == 1.0

    def test_wait_until_not_available_is_fluent(self, session, clock):
        page = DashboardPage(session)
        assert page.wait_until_not_available() is page

    def test_wait_until_available_raises_with_page_name(self, session, clock):
        with pytest.raises(WaitTimeoutError, match="Waiting for DashboardPage to become available"):
            DashboardPage(session).wait_until_available(timeout=1)

    def test_wait_until_not_available_raises_with_page_name(self, session, clock):
        session.add("id=dashboard-header")
        with pytest.raises(WaitTimeoutError, match="Waiting for DashboardPage to become unavailable"):
            DashboardPage(session).wait_until_not_available(timeout=1)

    def test_default_timeouts_come_from_settings(self, session, clock):
        configure(default_page_loading_timeout=4, default_closing_timeout=2)
        page = DashboardPage(session)
        assert page.page_loading_timeout == 4.0
        assert page.closing_timeout == 2.0

        assert page.is_available() is False
        assert clock.now == 4.0

    def test_uses_default_session_when_unbound(self, session, clock):
        session.add("id=dashboard-header")

        with default_session(session):
            assert DashboardPage().is_available() is True


@allure.epic("Pages")
@allure.feature("Indicating Locator")
class TestIndicatingLocator:

    @pytest.mark.P0
    def test_missing_indicating_locator_fails_without_waiting(self, session, clock):
        page = UnconfiguredPage(session=session)

        for call in (page.is_available, page.is_not_available, page.wait_until_available, page.wait_until_not_available):
            with pytest.raises(ConfigurationError, match="indicating locator of UnconfiguredPage"):
                call()
        assert clock.sleeps == []

    def test_locator_passed_to_constructor(self, session, clock):
        session.add("id=dialog")
        assert BasePage("id=dialog", session=session).is_available(timeout=0) is True

    def test_locator_assigned_later(self, session, clock):
        session.add("css=.modal")
        page = UnconfiguredPage(session=session)

        page.indicating_locator = By.css(".modal")

        assert page.is_available(timeout=0) is True

    def test_missing_session_is_a_configuration_error(self, clock):
        with pytest.raises(ConfigurationError, match="default session"):
            DashboardPage().is_available()


@allure.epic("Pages")
@allure.feature("Failure Capture")
class TestCaptureFailure:

    def test_attaches_screenshot_and_page_name(self, session):
        page = DashboardPage(session)

        with patch("allure.attach") as attach:
            page.capture_failure("test_login")

        names = [c.kwargs["name"] for c in attach.call_args_list]
        assert names == ["failure_test_login", "Page"]
        assert attach.call_args_list[0].args[0] == session.png

    def test_skips_screenshot_when_unavailable(self, session):
        session.png = None

        with patch("allure.attach") as attach:
            DashboardPage(session).capture_failure("test_login")

        assert [c.kwargs["name"] for c in attach.call_args_list] == ["Page"]

    def test_closed_page_still_attaches_page_name(self, session, monkeypatch):
        def screenshot():
            raise PlaywrightError("Target page, context or browser has been closed")

        monkeypatch.setattr(session, "screenshot", screenshot)

        with patch("allure.attach") as attach:
            DashboardPage(session).capture_failure("test_login")

        assert [c.kwargs["name"] for c in attach.call_args_list] == ["Page"]


@allure.epic("Pages")
@allure.feature("Application")
class TestBaseApp:

    def test_navigates_to_starting_url(self, session):
        BaseApp(session, starting_url="http://localhost:3000/login")
        assert session.visited == ["http://localhost:3000/login"]

    def test_blank_starting_url_is_ignored(self, session):
        BaseApp(session, starting_url="  ")
        assert session.visited == []

    def test_wait_for_page_load(self, session, clock):
        session.document_state = "loading"
        session.at(1.0, lambda: setattr(session, "document_state", "complete"))

        BaseApp(session).wait_for_page_load()

        assert clock.now == 1.0

    def test_missing_session(self):
        with pytest.raises(ConfigurationError):
            BaseApp().navigate_to("http://localhost:3000")
