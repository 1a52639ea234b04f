"""
================================================================================
Unit Test Configuration
================================================================================

Fixtures for tests that run against the in-memory fake session:

- clock: FakeClock patched into the wait engine
- session: FakeSession driven by that clock
- settings: fixed timing defaults, independent of config files and env vars

================================================================================
"""

import pytest

from webui_kit.common.global_config import configure
from webui_kit.framework import waits

from testsuites.unit.fakes import FakeClock, FakeSession


@pytest.fixture
def clock(monkeypatch) -> FakeClock:
    """Deterministic time source; sleeping advances it instantly."""
    fake = FakeClock()
    monkeypatch.setattr(waits, "_now", fake.time)
    monkeypatch.setattr(waits, "_sleep", fake.sleep)
    return fake


@pytest.fixture
def session(clock: FakeClock) -> FakeSession:
    return FakeSession(clock)


@pytest.fixture(autouse=True)
def settings():
    """Pin the library defaults used in timing assertions."""
    return configure(
        default_implicit_wait_timeout=3.0,
        default_page_loading_timeout=30.0,
        default_closing_timeout=3.0,
        poll_interval=0.5,
    )
