"""
================================================================================
Generic Login Page Object
================================================================================

Login page built from caller-supplied locators, for applications whose login
form is a username field, a password field, a log-in button and an optional
"remember me" check box.

Usage:
    login_page = GenericLoginPage(
        By.id("username"),
        By.id("password"),
        By.css("button[type=submit]"),
        remember_me_locator=By.name("remember"),
    )
    login_page.wait_until_available().log_in_as("demo_user", "demo_password")

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Optional, Union

import allure
from loguru import logger

from webui_kit.framework.control import button, check_box, text_field
from webui_kit.framework.element_actions import check, click, enter_text, uncheck
from webui_kit.exceptions import ConfigurationError
from webui_kit.framework.locator import Locator
from webui_kit.framework.page_base import BasePage
from webui_kit.framework.session import SessionContext


LocatorLike = Union[Locator, str]


class GenericLoginPage(BasePage):
    """Login page; available while the username field is visible."""

    def __init__(
        self,
        username_locator: LocatorLike,
        password_locator: LocatorLike,
        login_button_locator: LocatorLike,
        remember_me_locator: Optional[LocatorLike] = None,
        session: Optional[SessionContext] = None,
    ):
        """
        Args:
            username_locator: Username (or email) input
            password_locator: Password input
            login_button_locator: Button that submits the form
            remember_me_locator: Optional "remember me" check box
            session: Session to use; the thread's default session when None

        Raises:
            ConfigurationError: If a required locator is None
        """
        for arg_name, value in (
            ("username_locator", username_locator),
            ("password_locator", password_locator),
            ("login_button_locator", login_button_locator),
        ):
            if value is None:
                raise ConfigurationError(f"{arg_name} of {type(self).__name__} is None.")

        super().__init__(indicating_locator=username_locator, session=session)

        self.username = text_field(username_locator, session)
        self.password = text_field(password_locator, session)
        self.log_in = button(login_button_locator, session)
        self.remember_me = (
            check_box(remember_me_locator, session)
            if remember_me_locator is not None else None
        )

    @allure.step("Log in as {username}")
    def log_in_as(self, username: str, password: str, remember_me: bool = False) -> "GenericLoginPage":
        """
        Fill in the credentials and submit the form.

        The remember-me box is only touched when the page has one.

        Returns:
            This page, for chaining (e.g. ``.wait_until_not_available()``)
        """
        enter_text(self.username, username)
        enter_text(self.password, password)

        if self.remember_me is not None:
            if remember_me:
                check(self.remember_me)
            else:
                uncheck(self.remember_me)

        click(self.log_in)
        logger.info(f"Submitted login form as: {username}")
        return self


__all__ = ["GenericLoginPage"]
