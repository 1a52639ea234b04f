"""
================================================================================
Web UI Framework
================================================================================

Playwright-based page/control abstraction with explicit waits.

Components:
    - locator: Locator and By strategies
    - session: SessionContext and PlaywrightSession
    - session_registry: per-thread default session
    - waits: condition polling and page-load waits
    - control: lazily resolved controls and their kinds
    - element_actions: click / type / check / select interactions
    - page_base: BasePage and BaseApp

Author: Automation Team
License: MIT
================================================================================
"""

from webui_kit.exceptions import (
    ConfigurationError,
    ElementLookupError,
    ElementNotFoundError,
    NoSuchElementError,
    StaleElementError,
    UnsupportedActionError,
    WaitTimeoutError,
    WebUIError,
)
from .locator import By, Locator
from .session import PlaywrightSession, SessionContext
from .session_registry import (
    clear_default_session,
    default_session,
    get_default_session,
    has_default_session,
    set_default_session,
    set_default_session_if_not_set,
)
from .waits import await_condition, poll_until, wait_for_page_load
from .control import (
    Capability,
    Control,
    ControlKind,
    button,
    check_box,
    label,
    radio_button,
    select_box,
    text_control,
    text_field,
    text_link,
)
from .page_base import BaseApp, BasePage

__all__ = [
    "WebUIError",
    "ConfigurationError",
    "UnsupportedActionError",
    "ElementLookupError",
    "NoSuchElementError",
    "StaleElementError",
    "ElementNotFoundError",
    "WaitTimeoutError",
    "By",
    "Locator",
    "SessionContext",
    "PlaywrightSession",
    "get_default_session",
    "has_default_session",
    "set_default_session",
    "set_default_session_if_not_set",
    "clear_default_session",
    "default_session",
    "await_condition",
    "poll_until",
    "wait_for_page_load",
    "Capability",
    "Control",
    "ControlKind",
    "button",
    "check_box",
    "label",
    "radio_button",
    "select_box",
    "text_control",
    "text_field",
    "text_link",
    "BasePage",
    "BaseApp",
]
