"""Click-then-confirm navigation.

Navigation URLs drift between environments (trailing slash, locale prefix,
CDN redirects), so a plan lists rules from strictest to loosest. Each rule gets
its own short wait; the first one to match wins. When all of them time out,
a case-insensitive substring check on the final URL decides.

    IDLE -> TRIGGERED -> CHECKING_PATTERN* -> CONFIRMED
                                           -> CHECKING_FALLBACK -> CONFIRMED | NOT_CONFIRMED

A failed trigger goes straight to NOT_CONFIRMED. Nothing re-enters TRIGGERED;
retrying means calling confirm() again with a fresh trigger.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import structlog

from siteverify.core.exceptions import InvalidPatternError, UsageError
from siteverify.verification.consent import ConsentGate
from siteverify.verification.models import NavigationPlan, NavigationResult, NavigationState

if TYPE_CHECKING:
    from siteverify.browser.session import Session

log = structlog.get_logger(__name__)


class NavigationConfirmer:
    """Confirms that a triggering action led to an expected location."""

    def __init__(self, session: Session, consent_gate: ConsentGate) -> None:
        self.session = session
        self.consent_gate = consent_gate

    def confirm(self, trigger: Callable[[], None], plan: NavigationPlan) -> NavigationResult:
        """Run the trigger and check the resulting location against the plan.

        Args:
            trigger: Action expected to cause navigation, usually a click.
            plan: Ordered rules plus the substring fallback.

        Returns:
            NavigationResult in a terminal state.

        Raises:
            InvalidPatternError: If plan is not a NavigationPlan.
            ConsentDismissalError: If the consent dialog blocks the page.
        """
        if not isinstance(plan, NavigationPlan):
            raise InvalidPatternError(f"Expected a NavigationPlan, got {type(plan).__name__}")

        self.consent_gate.dismiss_if_present()

        try:
            trigger()
        except UsageError:
            raise
        except Exception as e:
            log.warning(
                "navigation_trigger_failed",
                state=NavigationState.NOT_CONFIRMED.value,
                error=str(e),
            )
            return NavigationResult(
                state=NavigationState.NOT_CONFIRMED,
                final_url=self.session.url,
                error=str(e),
            )

        log.debug("navigation_triggered", state=NavigationState.TRIGGERED.value)

        for index, rule in enumerate(plan.rules):
            log.debug(
                "navigation_rule_checking",
                state=NavigationState.CHECKING_PATTERN.value,
                index=index,
                pattern=rule.pattern,
                timeout_ms=rule.timeout_ms,
            )
            if self.session.wait_for_url(rule):
                url = self.session.url
                log.info("navigation_rule_matched", index=index, pattern=rule.pattern, url=url)
                return NavigationResult(
                    state=NavigationState.CONFIRMED,
                    final_url=url,
                    matched_rule=rule,
                )

        final_url = self.session.url
        found = plan.fallback_substring.lower() in final_url.lower()
        log.info(
            "navigation_fallback_checked",
            state=NavigationState.CHECKING_FALLBACK.value,
            substring=plan.fallback_substring,
            url=final_url,
            confirmed=found,
        )
        return NavigationResult(
            state=NavigationState.CONFIRMED if found else NavigationState.NOT_CONFIRMED,
            final_url=final_url,
            via_fallback=found,
        )

    def confirm_navigation(self, trigger: Callable[[], None], plan: NavigationPlan) -> bool:
        """Boolean form of confirm()."""
        return self.confirm(trigger, plan).confirmed
