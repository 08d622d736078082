"""Browsing session interface and its Playwright implementation."""

from siteverify.browser.playwright_session import PlaywrightSession
from siteverify.browser.session import ElementState, LoadState, Session

__all__ = ["ElementState", "LoadState", "PlaywrightSession", "Session"]
