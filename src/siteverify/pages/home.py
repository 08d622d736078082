"""Homepage page object.

Read-only checks return booleans or strings instead of raising for "not
visible yet", which keeps test assertions to a single `assert`.

Usage:
    session = PlaywrightSession(page)
    home = HomePage(session)
    home.navigate_home()
    assert home.is_hero_heading_visible()
    assert home.click_primary_cta()
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urljoin

import structlog

from siteverify.config.settings import Settings, get_settings
from siteverify.constants import homepage
from siteverify.verification.consent import ConsentGate
from siteverify.verification.models import (
    ConsentState,
    ElementName,
    NavigationPlan,
    NavigationRule,
    ViewportClass,
)
from siteverify.verification.navigation import NavigationConfirmer
from siteverify.verification.selectors import SelectorResolver
from siteverify.verification.visibility import VisibilityProbe

if TYPE_CHECKING:
    from siteverify.browser.session import Session

log = structlog.get_logger(__name__)


def primary_cta_plan(base_url: str, timeout_ms: float) -> NavigationPlan:
    """Navigation plan for the primary call-to-action.

    Exact target first, then the trailing-slash glob, then the bare glob,
    then a "solutions" substring check.
    """
    rules = [NavigationRule.exact(urljoin(base_url, homepage.PRIMARY_CTA_PATH), timeout_ms)]
    rules.extend(NavigationRule.glob(pattern, timeout_ms) for pattern in homepage.PRIMARY_CTA_GLOBS)
    return NavigationPlan(rules=tuple(rules), fallback_substring=homepage.PRIMARY_CTA_FALLBACK)


class HomePage:
    """Page object for the marketing homepage."""

    def __init__(self, session: Session, settings: Settings | None = None) -> None:
        self.session = session
        self.settings = settings or get_settings()
        self.timeouts = self.settings.timeout_config()

        self.resolver = SelectorResolver(self.settings.mobile_max_width)
        self.probe = VisibilityProbe(session, self.timeouts)
        self.consent = ConsentGate(session, self.resolver, self.timeouts)
        self.navigation = NavigationConfirmer(session, self.consent)
        self.cta_plan = primary_cta_plan(
            self.settings.base_url, self.settings.cta_pattern_timeout_ms
        )

    # -------------------------------------------------------------------------
    # Navigation and page state
    # -------------------------------------------------------------------------

    def navigate_home(self) -> None:
        """Open the homepage and clear the consent dialog.

        Raises:
            NavigationError: If the homepage cannot be loaded.
            ConsentDismissalError: If the consent dialog cannot be dismissed.
        """
        url = self.settings.base_url
        self.session.goto(url, self.timeouts.navigation)
        if not self.session.wait_for_load_state("networkidle", self.timeouts.network_idle):
            log.warning("network_idle_not_reached", url=url, timeout_ms=self.timeouts.network_idle)
        self.consent.dismiss_if_present()
        log.info("homepage_loaded", url=self.session.url)

    def wait_for_page_load(self) -> bool:
        """Wait for the load event, then network idle."""
        if not self.session.wait_for_load_state("load", self.timeouts.navigation):
            return False
        return self.session.wait_for_load_state("networkidle", self.timeouts.network_idle)

    def wait_for_navigation(self) -> bool:
        """Wait for network idle after a navigation."""
        return self.session.wait_for_load_state("networkidle", self.timeouts.network_idle)

    def wait_for_animation(self) -> None:
        self.session.pause(self.timeouts.animation)

    def viewport_class(self) -> ViewportClass:
        return self.resolver.viewport_class(self.session.viewport_width())

    def is_mobile_viewport(self) -> bool:
        return self.viewport_class() is ViewportClass.MOBILE

    def accept_consent_if_present(self) -> ConsentState:
        return self.consent.dismiss_if_present()

    def has_title(self, expected: str) -> bool:
        return self.session.title() == expected

    # -------------------------------------------------------------------------
    # Read-only checks
    # -------------------------------------------------------------------------

    def is_element_visible(self, name: ElementName | str) -> bool:
        """Check any named element for the current viewport.

        Raises:
            UnknownElementError: If name is not a known element.
        """
        descriptor = self.resolver.resolve(name, self.viewport_class())
        return self.probe.is_visible(descriptor)

    def is_hero_heading_visible(self) -> bool:
        return self.is_element_visible(ElementName.HERO_HEADING)

    def is_navigation_menu_visible(self) -> bool:
        return self.is_element_visible(ElementName.NAVIGATION_MENU)

    def is_solutions_section_visible(self) -> bool:
        return self.is_element_visible(ElementName.SOLUTIONS_SECTION)

    def are_footer_links_visible(self) -> bool:
        return self.is_element_visible(ElementName.FOOTER_LINKS)

    def is_imprint_link_visible(self) -> bool:
        return self.is_element_visible(ElementName.IMPRINT_LINK)

    def is_compliance_link_visible(self) -> bool:
        return self.is_element_visible(ElementName.COMPLIANCE_LINK)

    def is_footer_link_visible(self, text: str) -> bool:
        """Check a footer link by its exact text."""
        descriptor = self.resolver.resolve(
            ElementName.FOOTER_LINK, self.viewport_class(), text=text
        )
        return self.probe.is_visible(descriptor)

    def get_hero_text(self) -> str:
        descriptor = self.resolver.resolve(ElementName.HERO_HEADING, self.viewport_class())
        return self.probe.get_text(descriptor)

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def click_primary_cta(self) -> bool:
        """Click the primary call-to-action and confirm it navigated.

        The control is resolved after the consent gate runs, against the
        viewport as it is at click time.
        """

        def trigger() -> None:
            descriptor = self.resolver.resolve(ElementName.PRIMARY_CTA, self.viewport_class())
            self.session.click(descriptor, self.timeouts.visibility)

        result = self.navigation.confirm(trigger, self.cta_plan)
        if not result.confirmed:
            log.warning(
                "primary_cta_navigation_unconfirmed", url=result.final_url, error=result.error
            )
        return result.confirmed

    click_solutions = click_primary_cta
