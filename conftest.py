"""
Repository-level pytest configuration.

Points the library at the repository's configuration file unless the caller
(or CI) already chose one, so test runs do not depend on the working directory.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _config_env_defaults(project_root: Path) -> Generator[None, None, None]:
    """Set configuration environment defaults if not already provided."""
    defaults = {
        "WEBUI_CONFIG": str(project_root / "config" / "webui.yaml"),
    }

    for k, v in defaults.items():
        os.environ.setdefault(k, v)

    yield
