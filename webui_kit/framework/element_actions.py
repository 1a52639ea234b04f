# ================================================================================
# Element Actions Module
# ================================================================================
#
# Interactions with controls, one free function per capability.
#
# Every action resolves the control afresh (possibly waiting up to the
# control's implicit wait timeout), performs a single call on the live
# element and lets the handle go. Actions not offered by the control's kind
# raise UnsupportedActionError before any lookup happens.
#
#   CLICKABLE   click, double_click
#   TEXTUAL     text_of
#   EDITABLE    enter_text, append_text, submit, value_of
#   TOGGLED     check, uncheck, is_checked
#   SELECTABLE  select_option, selected_value
#
# Usage:
#   enter_text(login_page.username, "demo_user")
#   check(login_page.remember_me)
#   click(login_page.log_in)
#
# ================================================================================

from typing import List, Optional

import allure
from loguru import logger

from .control import RADIO_BUTTON, Capability, Control
from webui_kit.exceptions import UnsupportedActionError


def _require(control: Control, capability: Capability, action: str) -> None:
    if not control.supports(capability):
        raise UnsupportedActionError(action, control.name)


# =============================================================================
# CLICKABLE
# =============================================================================

def click(control: Control) -> None:
    """Click the control once it is resolvable."""
    _require(control, Capability.CLICKABLE, "click")
    with allure.step(f"Click {control.name}"):
        control.resolve().click()
    logger.debug(f"Clicked: {control.name}")


def double_click(control: Control) -> None:
    _require(control, Capability.CLICKABLE, "double_click")
    with allure.step(f"Double-click {control.name}"):
        control.resolve().dblclick()
    logger.debug(f"Double-clicked: {control.name}")


# =============================================================================
# TEXTUAL
# =============================================================================

def text_of(control: Control) -> str:
    """
    Visible text of the control.

    Editable controls return their current value. Controls without visible
    text (e.g. ``<input type="submit" value="Log in">``) fall back to the
    ``value`` attribute.
    """
    _require(control, Capability.TEXTUAL, "text_of")
    element = control.resolve()
    if control.supports(Capability.EDITABLE):
        return element.input_value()

    text = element.inner_text()
    if not text:
        text = element.get_attribute("value") or ""
    return text


# =============================================================================
# EDITABLE
# =============================================================================

def enter_text(control: Control, text: str) -> None:
    """Replace the control's content with ``text``."""
    _require(control, Capability.EDITABLE, "enter_text")
    with allure.step(f"Enter text into {control.name}"):
        control.resolve().fill(text)
    logger.debug(f"Entered {len(text)} characters into: {control.name}")


def append_text(control: Control, text: str) -> None:
    """Add ``text`` after the control's current content."""
    _require(control, Capability.EDITABLE, "append_text")
    with allure.step(f"Append text to {control.name}"):
        element = control.resolve()
        element.fill(element.input_value() + text)
    logger.debug(f"Appended {len(text)} characters to: {control.name}")


def submit(control: Control) -> None:
    """Submit the form containing the control."""
    _require(control, Capability.EDITABLE, "submit")
    with allure.step(f"Submit {control.name}"):
        control.resolve().press("Enter")
    logger.debug(f"Submitted: {control.name}")


def value_of(control: Control) -> str:
    _require(control, Capability.EDITABLE, "value_of")
    return control.resolve().input_value()


# =============================================================================
# TOGGLED
# =============================================================================

def check(control: Control) -> None:
    """Check the control; no-op when already checked."""
    _require(control, Capability.TOGGLED, "check")
    with allure.step(f"Check {control.name}"):
        element = control.resolve()
        if not element.is_checked():
            element.click()
    logger.debug(f"Checked: {control.name}")


def uncheck(control: Control) -> None:
    """Uncheck the control; no-op when already unchecked."""
    _require(control, Capability.TOGGLED, "uncheck")
    if control.kind == RADIO_BUTTON:
        raise UnsupportedActionError("uncheck", control.name)
    with allure.step(f"Uncheck {control.name}"):
        element = control.resolve()
        if element.is_checked():
            element.click()
    logger.debug(f"Unchecked: {control.name}")


def is_checked(control: Control) -> bool:
    _require(control, Capability.TOGGLED, "is_checked")
    return control.resolve().is_checked()


# =============================================================================
# SELECTABLE
# =============================================================================

def select_option(
    control: Control,
    value: Optional[str] = None,
    label: Optional[str] = None,
    index: Optional[int] = None,
) -> List[str]:
    """
    Select one option by value, label or index.

    Returns:
        Values of the selected options

    Raises:
        ValueError: Unless exactly one of value/label/index is given
    """
    _require(control, Capability.SELECTABLE, "select_option")
    given = {k: v for k, v in (("value", value), ("label", label), ("index", index)) if v is not None}
    if len(given) != 1:
        raise ValueError("Pass exactly one of value, label or index")

    with allure.step(f"Select {given} in {control.name}"):
        selected = control.resolve().select_option(**given)
    logger.debug(f"Selected {given} in: {control.name}")
    return selected


def selected_value(control: Control) -> str:
    _require(control, Capability.SELECTABLE, "selected_value")
    return control.resolve().input_value()


__all__ = [
    "click",
    "double_click",
    "text_of",
    "enter_text",
    "append_text",
    "submit",
    "value_of",
    "check",
    "uncheck",
    "is_checked",
    "select_option",
    "selected_value",
]
