"""Session implementation backed by a Playwright sync `Page`.

Playwright exceptions stop here: bounded waits become booleans, and failures
that matter to the caller become siteverify exceptions.
"""

from __future__ import annotations

from collections.abc import Callable

import structlog
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page

from siteverify.browser.session import ElementState, LoadState
from siteverify.core.exceptions import ActuationError, NavigationError
from siteverify.verification.models import MatchKind, NavigationRule, QueryDescriptor

log = structlog.get_logger(__name__)


class PlaywrightSession:
    """Adapter from the Session protocol to a Playwright page.

    The page is owned by the caller. Locators are rebuilt from the descriptor
    on every call, so nothing is cached between queries.

    Example:
        def test_home(page: Page) -> None:
            session = PlaywrightSession(page)
            home = HomePage(session)
            home.navigate_home()
    """

    def __init__(self, page: Page) -> None:
        self.page = page

    def _locate(self, descriptor: QueryDescriptor) -> Locator:
        locator = self.page.locator(descriptor.selector)
        return locator.first if descriptor.first else locator

    @property
    def url(self) -> str:
        return self.page.url

    def title(self) -> str:
        return self.page.title()

    def viewport_width(self) -> int | None:
        viewport = self.page.viewport_size
        return viewport["width"] if viewport else None

    def goto(self, url: str, timeout_ms: float) -> None:
        try:
            self.page.goto(url, timeout=timeout_ms)
        except PlaywrightError as e:
            log.error("page_load_failed", url=url, error=str(e))
            raise NavigationError(url, str(e)) from e

    def wait_for_load_state(self, state: LoadState, timeout_ms: float) -> bool:
        try:
            self.page.wait_for_load_state(state, timeout=timeout_ms)
        except PlaywrightError as e:
            log.debug("load_state_not_reached", state=state, timeout_ms=timeout_ms, error=str(e))
            return False
        return True

    def is_visible(self, descriptor: QueryDescriptor) -> bool:
        try:
            return self._locate(descriptor).is_visible()
        except PlaywrightError as e:
            # Strict-mode violations land here
            log.debug("visibility_check_failed", selector=str(descriptor), error=str(e))
            return False

    def wait_for_state(
        self,
        descriptor: QueryDescriptor,
        state: ElementState,
        timeout_ms: float,
    ) -> bool:
        try:
            self._locate(descriptor).wait_for(state=state, timeout=timeout_ms)
        except PlaywrightError as e:
            log.debug(
                "element_state_not_reached",
                selector=str(descriptor),
                state=state,
                timeout_ms=timeout_ms,
                error=str(e),
            )
            return False
        return True

    def text_contents(self, descriptor: QueryDescriptor) -> list[str]:
        try:
            return self._locate(descriptor).all_text_contents()
        except PlaywrightError as e:
            log.debug("text_read_failed", selector=str(descriptor), error=str(e))
            return []

    def click(self, descriptor: QueryDescriptor, timeout_ms: float) -> None:
        try:
            self._locate(descriptor).click(timeout=timeout_ms)
        except PlaywrightError as e:
            raise ActuationError(str(descriptor), str(e)) from e

    def wait_for_url(self, rule: NavigationRule) -> bool:
        # Playwright parses glob strings itself; exact rules must not be globbed
        if rule.kind is MatchKind.GLOB:
            target: str | Callable[[str], bool] = rule.pattern
        else:
            target = lambda url: url == rule.pattern  # noqa: E731
        try:
            self.page.wait_for_url(target, timeout=rule.timeout_ms)
        except PlaywrightError as e:
            log.debug(
                "url_not_reached", pattern=rule.pattern, timeout_ms=rule.timeout_ms, error=str(e)
            )
            return False
        return True

    def pause(self, timeout_ms: float) -> None:
        self.page.wait_for_timeout(timeout_ms)
