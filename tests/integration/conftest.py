"""Integration fixtures: a real browser against a locally routed fake site.

Every request to SITE_ORIGIN is answered from static pages through
`page.route`, so these tests need an installed Chromium but no network.
"""

from typing import Any

import pytest
from playwright.sync_api import Page

from siteverify.browser.playwright_session import PlaywrightSession
from siteverify.config.settings import Settings
from siteverify.pages.home import HomePage
from tests.support.routed_site import (
    BROKEN_SITE_PAGES,
    HOME_URL,
    SITE_ORIGIN,
    SITE_PAGES,
    router,
)


@pytest.fixture(scope="session")
def browser_context_args(browser_context_args: dict[str, Any]) -> dict[str, Any]:
    return {**browser_context_args, "viewport": {"width": 1280, "height": 720}}


@pytest.fixture
def site_settings() -> Settings:
    """Short budgets; everything is served locally."""
    return Settings(
        base_url=HOME_URL,
        navigation_timeout_ms=10_000,
        network_idle_timeout_ms=2_000,
        visibility_timeout_ms=2_000,
        animation_timeout_ms=100,
        mobile_max_width=1023,
        cta_pattern_timeout_ms=1_000,
    )


@pytest.fixture
def routed_page(page: Page) -> Page:
    page.route(f"{SITE_ORIGIN}/**", router(SITE_PAGES))
    return page


@pytest.fixture
def broken_routed_page(page: Page) -> Page:
    page.route(f"{SITE_ORIGIN}/**", router(BROKEN_SITE_PAGES))
    return page


@pytest.fixture
def routed_home(routed_page: Page, site_settings: Settings) -> HomePage:
    return HomePage(PlaywrightSession(routed_page), site_settings)
