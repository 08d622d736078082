"""Playwright E2E fixtures for the live homepage.

This module provides fixtures for:
- Browser context setup with the configured viewport
- A HomePage already navigated to the base URL with consent cleared

Usage:
    @pytest.mark.e2e
    def test_hero(home):
        assert home.is_hero_heading_visible()

Configuration (environment or .env):
    BASE_URL, VIEWPORT_WIDTH, VIEWPORT_HEIGHT, HEADED=1, SLOW_MO=<ms>
"""

import os
from collections.abc import Generator
from typing import Any

import pytest
from playwright.sync_api import Page

from siteverify.browser.playwright_session import PlaywrightSession
from siteverify.config.logging import configure_logging
from siteverify.config.settings import Settings, get_settings
from siteverify.pages.home import HomePage

# =============================================================================
# pytest-playwright Configuration
# =============================================================================


@pytest.fixture(scope="session")
def harness_settings() -> Settings:
    settings = get_settings()
    configure_logging(settings)
    return settings


@pytest.fixture(scope="session")
def browser_context_args(
    browser_context_args: dict[str, Any], harness_settings: Settings
) -> dict[str, Any]:
    """Configure a fresh context per test with the configured viewport."""
    return {
        **browser_context_args,
        "viewport": {
            "width": harness_settings.viewport_width,
            "height": harness_settings.viewport_height,
        },
        "ignore_https_errors": True,
        "storage_state": None,
    }


@pytest.fixture(scope="session")
def browser_type_launch_args(browser_type_launch_args: dict[str, Any]) -> dict[str, Any]:
    """Configure browser launch arguments."""
    return {
        **browser_type_launch_args,
        "headless": os.environ.get("HEADED", "0") != "1",
        "slow_mo": int(os.environ.get("SLOW_MO", "0")),
    }


# =============================================================================
# Page Objects
# =============================================================================


@pytest.fixture
def home(page: Page, harness_settings: Settings) -> Generator[HomePage, None, None]:
    """Open the homepage and dismiss the cookie dialog.

    This fixture:
    1. Wraps the pytest-playwright page in a PlaywrightSession
    2. Navigates to BASE_URL
    3. Accepts the consent dialog if it shows
    4. Yields the HomePage
    """
    page.set_default_navigation_timeout(harness_settings.navigation_timeout_ms)

    home_page = HomePage(PlaywrightSession(page), harness_settings)
    home_page.navigate_home()

    yield home_page
