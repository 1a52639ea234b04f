"""
================================================================================
In-Memory Test Doubles
================================================================================

FakeClock, FakeElement and FakeSession let the wait engine, controls and pages
run deterministically without a browser:

    - FakeClock replaces the wait engine's time source and sleep; sleeping
      advances the clock instantly.
    - FakeSession holds a tiny "DOM" (locator -> element) and a timeline of
      scheduled changes applied once the clock passes their time.
    - FakeElement mimics the parts of a Playwright ElementHandle the element
      actions use.

================================================================================
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from webui_kit.exceptions import NoSuchElementError, StaleElementError
from webui_kit.framework.locator import Locator
from webui_kit.framework.session import SessionContext


class FakeClock:
    """Manually driven monotonic clock."""

    def __init__(self, start: float = 0.0):
        self.now = start
        self.sleeps: List[float] = []

    def time(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeElement:
    """Element handle double with the Playwright ElementHandle method names."""

    def __init__(
        self,
        visible: bool = True,
        enabled: bool = True,
        text: str = "",
        value: str = "",
        checked: bool = False,
        toggle: Optional[str] = None,
        attributes: Optional[Dict[str, str]] = None,
        options: Sequence[Tuple[str, str]] = (),
    ):
        """
        Args:
            toggle: "checkbox" or "radio" for elements a click checks
            options: (value, label) pairs of a select element
        """
        self.visible = visible
        self.enabled = enabled
        self.text = text
        self.value = value
        self.checked = checked
        self.toggle = toggle
        self.attributes = dict(attributes or {})
        self.options = list(options)
        self.clicks = 0
        self.double_clicks = 0
        self.pressed: List[str] = []

    def click(self) -> None:
        self.clicks += 1
        if self.toggle == "checkbox":
            self.checked = not self.checked
        elif self.toggle == "radio":
            self.checked = True

    def dblclick(self) -> None:
        self.double_clicks += 1

    def fill(self, value: str) -> None:
        self.value = value

    def press(self, key: str) -> None:
        self.pressed.append(key)

    def inner_text(self) -> str:
        return self.text

    def input_value(self) -> str:
        return self.value

    def get_attribute(self, name: str) -> Optional[str]:
        return self.attributes.get(name)

    def is_checked(self) -> bool:
        return self.checked

    def select_option(
        self,
        value: Optional[str] = None,
        label: Optional[str] = None,
        index: Optional[int] = None,
    ) -> List[str]:
        if index is not None:
            chosen = self.options[index][0]
        else:
            chosen = next(v for v, l in self.options if v == value or l == label)
        self.value = chosen
        return [chosen]


LocatorLike = Union[Locator, str]


def _key(locator: LocatorLike) -> Locator:
    return Locator.parse(locator) if isinstance(locator, str) else locator


class FakeSession(SessionContext):
    """
    Session over an in-memory DOM.

    Usage:
        session = FakeSession(clock)
        session.add("id=username", at=1.0)       # inserted after 1s
        session.hide("id=header", at=0.0)
        session.show("id=header", at=2.0)
    """

    def __init__(self, clock: Optional[FakeClock] = None):
        self.clock = clock
        self.elements: Dict[Locator, FakeElement] = {}
        self.lookups = 0
        self.stale_lookups = 0
        self.visited: List[str] = []
        self.document_state = "complete"
        self.page_title = ""
        self.png: Optional[bytes] = b"\x89PNG fake"
        self._events: List[Tuple[float, int, Callable[[], None]]] = []

    # =========================================================================
    # DOM Scripting
    # =========================================================================

    def at(self, when: float, action: Callable[[], None]) -> None:
        """Schedule ``action`` to run once the clock reaches ``when``."""
        self._events.append((when, len(self._events), action))
        self._events.sort(key=lambda event: (event[0], event[1]))

    def add(self, locator: LocatorLike, element: Optional[FakeElement] = None, at: float = 0.0) -> FakeElement:
        element = element or FakeElement()
        key = _key(locator)

        def _insert() -> None:
            self.elements[key] = element

        self._schedule(at, _insert)
        return element

    def remove(self, locator: LocatorLike, at: float = 0.0) -> None:
        key = _key(locator)
        self._schedule(at, lambda: self.elements.pop(key, None))

    def hide(self, locator: LocatorLike, at: float = 0.0) -> None:
        key = _key(locator)
        self._schedule(at, lambda: setattr(self.elements[key], "visible", False))

    def show(self, locator: LocatorLike, at: float = 0.0) -> None:
        key = _key(locator)
        self._schedule(at, lambda: setattr(self.elements[key], "visible", True))

    def _schedule(self, when: float, action: Callable[[], None]) -> None:
        if when <= self._time():
            action()
        else:
            self.at(when, action)

    def _time(self) -> float:
        return self.clock.time() if self.clock else 0.0

    def _apply_due_events(self) -> None:
        now = self._time()
        while self._events and self._events[0][0] <= now:
            _, _, action = self._events.pop(0)
            action()

    # =========================================================================
    # SessionContext
    # =========================================================================

    def find_element(self, locator: Locator) -> FakeElement:
        self._apply_due_events()
        self.lookups += 1
        if self.stale_lookups > 0:
            self.stale_lookups -= 1
            raise StaleElementError(f"Execution context destroyed while looking up '{locator}'")

        element = self.elements.get(locator)
        if element is None:
            raise NoSuchElementError(f"No element matches '{locator}'", locator=locator)
        return element

    def is_displayed(self, element: FakeElement) -> bool:
        self._apply_due_events()
        return element.visible

    def is_enabled(self, element: FakeElement) -> bool:
        self._apply_due_events()
        return element.enabled

    def goto(self, url: str) -> None:
        self.visited.append(url)

    def ready_state(self) -> str:
        self._apply_due_events()
        return self.document_state

    def title(self) -> str:
        return self.page_title

    def screenshot(self) -> bytes:
        return self.png
