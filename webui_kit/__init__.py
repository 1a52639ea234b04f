"""
webui_kit: page objects, lazily resolved controls and explicit waits for
Playwright-driven web UI tests.
"""

__version__ = "1.0.0"
