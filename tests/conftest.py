"""Shared pytest fixtures for siteverify tests.

This module provides fixtures for:
- Deterministic settings and timeout tables
- An in-memory session with a virtual clock
- The verification policies wired against that session

Usage:
    def test_something(fake_session, probe):
        fake_session.add("#hero", text="Hi")
        assert probe.is_visible(QueryDescriptor("#hero"))
"""

import os
from collections.abc import Generator

import pytest

from siteverify.config.settings import Settings, TimeoutConfig, get_settings
from siteverify.constants import homepage
from siteverify.pages.home import HomePage
from siteverify.verification.consent import ConsentGate
from siteverify.verification.selectors import SelectorResolver
from siteverify.verification.visibility import VisibilityProbe
from tests.support.fakes import FakeSession

BASE_URL = "https://example.com/en/"

# =============================================================================
# Environment Configuration
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment() -> Generator[None, None, None]:
    """Pin environment-driven settings for the test run.

    Existing variables win, so a developer can still point the e2e suite at
    another deployment.
    """
    original_env = os.environ.copy()

    os.environ.setdefault("LOG_LEVEL", "DEBUG")

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

    os.environ.clear()
    os.environ.update(original_env)


# =============================================================================
# Settings
# =============================================================================


@pytest.fixture
def settings() -> Settings:
    """Settings with explicit values so a local .env cannot leak in."""
    return Settings(
        base_url=BASE_URL,
        debug=False,
        navigation_timeout_ms=30_000,
        network_idle_timeout_ms=5_000,
        visibility_timeout_ms=10_000,
        animation_timeout_ms=1_000,
        mobile_max_width=1023,
        cta_pattern_timeout_ms=5_000,
    )


@pytest.fixture
def timeouts(settings: Settings) -> TimeoutConfig:
    return settings.timeout_config()


# =============================================================================
# Session and policies
# =============================================================================


@pytest.fixture
def fake_session() -> FakeSession:
    """Desktop-sized in-memory session parked on the homepage."""
    return FakeSession(url=BASE_URL, viewport_width=1280, title="Home")


@pytest.fixture
def resolver(settings: Settings) -> SelectorResolver:
    return SelectorResolver(settings.mobile_max_width)


@pytest.fixture
def probe(fake_session: FakeSession, timeouts: TimeoutConfig) -> VisibilityProbe:
    return VisibilityProbe(fake_session, timeouts)


@pytest.fixture
def consent_gate(
    fake_session: FakeSession, resolver: SelectorResolver, timeouts: TimeoutConfig
) -> ConsentGate:
    return ConsentGate(fake_session, resolver, timeouts)


@pytest.fixture
def consent_dialog(fake_session: FakeSession) -> FakeSession:
    """Show the consent dialog; accepting hides it 200ms later."""
    fake_session.add(homepage.CONSENT_DIALOG)
    fake_session.add(
        homepage.CONSENT_ACCEPT_ALL,
        on_click=lambda s: s.hide_later(homepage.CONSENT_DIALOG, 200),
    )
    return fake_session


@pytest.fixture
def home_page(fake_session: FakeSession, settings: Settings) -> HomePage:
    return HomePage(fake_session, settings)
