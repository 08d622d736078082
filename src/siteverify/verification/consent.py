"""Cookie consent dialog dismissal."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from siteverify.config.settings import TimeoutConfig
from siteverify.core.exceptions import ActuationError, ConsentDismissalError
from siteverify.verification.models import ConsentState, ElementName, ViewportClass
from siteverify.verification.selectors import SelectorResolver

if TYPE_CHECKING:
    from siteverify.browser.session import Session

log = structlog.get_logger(__name__)


class ConsentGate:
    """Dismisses the consent dialog if it is showing.

    Safe to call before every interaction: when the dialog is not visible the
    call returns without touching the page, so a second call after a
    successful dismissal never clicks again.

    Example:
        gate = ConsentGate(session, resolver, timeouts)
        gate.dismiss_if_present()
        gate.dismiss_if_present()  # no-op
    """

    def __init__(
        self,
        session: Session,
        resolver: SelectorResolver,
        timeouts: TimeoutConfig,
    ) -> None:
        self.session = session
        self.timeouts = timeouts
        # Consent selectors do not depend on the viewport
        self.dialog = resolver.resolve(ElementName.CONSENT_DIALOG, ViewportClass.DESKTOP)
        self.accept = resolver.resolve(ElementName.CONSENT_ACCEPT, ViewportClass.DESKTOP)
        self.state = ConsentState.NOT_CHECKED

    def dismiss_if_present(self) -> ConsentState:
        """Accept all cookies if the dialog is visible right now.

        Returns:
            The gate state after the call.

        Raises:
            ConsentDismissalError: If the dialog is showing but cannot be
                dismissed.
        """
        if not self.session.is_visible(self.dialog):
            if self.state is not ConsentState.DISMISSED:
                self.state = ConsentState.ABSENT_OR_ALREADY_DISMISSED
            return self.state

        log.info("consent_dialog_detected", selector=str(self.dialog))

        try:
            self.session.click(self.accept, self.timeouts.visibility)
        except ActuationError as e:
            log.error("consent_accept_failed", selector=e.selector, error=str(e))
            raise ConsentDismissalError(f"Could not accept consent dialog: {e}") from e

        if not self.session.wait_for_state(self.dialog, "hidden", self.timeouts.visibility):
            log.error("consent_dialog_still_visible", timeout_ms=self.timeouts.visibility)
            raise ConsentDismissalError(
                f"Consent dialog still visible after {self.timeouts.visibility:.0f}ms"
            )

        self.state = ConsentState.DISMISSED
        log.info("consent_dialog_dismissed")
        return self.state
