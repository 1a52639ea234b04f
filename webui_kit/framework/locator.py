"""
================================================================================
Locator
================================================================================

Declarative "how to find this element" descriptors.

A Locator is an immutable (strategy, value) pair. Two locators are equal iff
both parts match, so locators can be compared, hashed and used as dict keys.
The Playwright selector string is derived on demand.

Usage:
    >>> By.id("username")
    Locator(strategy='id', value='username')
    >>> str(By.css("button[type='submit']"))
    "css=button[type='submit']"
    >>> Locator.parse("xpath=//h1")
    Locator(strategy='xpath', value='//h1')

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Callable, Dict


ID = "id"
CSS = "css"
XPATH = "xpath"
NAME = "name"
TEXT = "text"
LINK_TEXT = "link_text"
TAG_NAME = "tag_name"
CLASS_NAME = "class_name"
TEST_ID = "test_id"

STRATEGIES = (ID, CSS, XPATH, NAME, TEXT, LINK_TEXT, TAG_NAME, CLASS_NAME, TEST_ID)


def _quoted(value: str) -> str:
    return json.dumps(value)


# strategy -> Playwright selector template
_SELECTOR_BUILDERS: Dict[str, Callable[[str], str]] = {
    ID: lambda v: f"id={v}",
    CSS: lambda v: f"css={v}",
    XPATH: lambda v: f"xpath={v}",
    NAME: lambda v: f"css=[name={_quoted(v)}]",
    TEXT: lambda v: f"text={v}",
    LINK_TEXT: lambda v: f"css=a:text-is({_quoted(v)})",
    TAG_NAME: lambda v: f"css={v}",
    CLASS_NAME: lambda v: f"css=.{v}",
    TEST_ID: lambda v: f"css=[data-testid={_quoted(v)}]",
}


@dataclass(frozen=True)
class Locator:
    """
    Immutable element locator.

    Attributes:
        strategy: One of ``STRATEGIES``
        value: Strategy-specific value (id, selector expression, text, ...)
    """
    strategy: str
    value: str

    def __post_init__(self) -> None:
        if self.strategy not in STRATEGIES:
            raise ValueError(
                f"Unknown locator strategy '{self.strategy}'. "
                f"Use one of: {', '.join(STRATEGIES)}"
            )
        if not self.value:
            raise ValueError(f"Locator value for strategy '{self.strategy}' is empty")

    def __str__(self) -> str:
        return f"{self.strategy}={self.value}"

    @property
    def selector(self) -> str:
        """Playwright selector string for this locator."""
        return _SELECTOR_BUILDERS[self.strategy](self.value)

    @classmethod
    def parse(cls, text: str) -> "Locator":
        """
        Build a locator from its string form.

        ``"id=username"`` -> ``Locator("id", "username")``. Strings without a
        known ``strategy=`` prefix are treated as CSS selectors.
        """
        strategy, sep, value = text.partition("=")
        if sep and strategy in STRATEGIES:
            return cls(strategy, value)
        return cls(CSS, text)


class By:
    """Factory shortcuts for the supported strategies."""

    @staticmethod
    def id(value: str) -> Locator:
        return Locator(ID, value)

    @staticmethod
    def css(value: str) -> Locator:
        return Locator(CSS, value)

    @staticmethod
    def xpath(value: str) -> Locator:
        return Locator(XPATH, value)

    @staticmethod
    def name(value: str) -> Locator:
        return Locator(NAME, value)

    @staticmethod
    def text(value: str) -> Locator:
        return Locator(TEXT, value)

    @staticmethod
    def link_text(value: str) -> Locator:
        return Locator(LINK_TEXT, value)

    @staticmethod
    def tag_name(value: str) -> Locator:
        return Locator(TAG_NAME, value)

    @staticmethod
    def class_name(value: str) -> Locator:
        return Locator(CLASS_NAME, value)

    @staticmethod
    def test_id(value: str) -> Locator:
        return Locator(TEST_ID, value)


__all__ = [
    "Locator",
    "By",
    "STRATEGIES",
]
