"""Bounded visibility checks that answer with a boolean."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from siteverify.config.settings import TimeoutConfig
from siteverify.verification.models import QueryDescriptor

if TYPE_CHECKING:
    from siteverify.browser.session import Session

log = structlog.get_logger(__name__)


class VisibilityProbe:
    """Polls a descriptor until visible or the timeout elapses.

    The session's own polling is the only retry: each check is a single
    bounded wait. "Not found" and "not ready yet" both come back as False,
    since callers only assert presence.
    """

    def __init__(self, session: Session, timeouts: TimeoutConfig) -> None:
        self.session = session
        self.timeouts = timeouts

    def _budget(self, timeout_ms: float | None) -> float:
        if timeout_ms is None:
            return self.timeouts.visibility
        if timeout_ms <= 0:
            raise ValueError(f"timeout_ms must be positive, got {timeout_ms}")
        return timeout_ms

    def is_visible(self, descriptor: QueryDescriptor, timeout_ms: float | None = None) -> bool:
        """Wait up to timeout_ms for the element to be attached and visible.

        Args:
            descriptor: Element query.
            timeout_ms: Wait budget, defaults to the visibility timeout.

        Returns:
            True if the element became visible in time, False otherwise.
        """
        budget = self._budget(timeout_ms)
        visible = self.session.wait_for_state(descriptor, "visible", budget)
        log.debug("visibility_probed", selector=str(descriptor), visible=visible, timeout_ms=budget)
        return visible

    def is_hidden(self, descriptor: QueryDescriptor, timeout_ms: float | None = None) -> bool:
        """Wait up to timeout_ms for the element to be hidden or detached."""
        budget = self._budget(timeout_ms)
        return self.session.wait_for_state(descriptor, "hidden", budget)

    def get_text(self, descriptor: QueryDescriptor) -> str:
        """Text of the element as it is right now, or "" if it is not attached.

        Does not wait. Check is_visible first when an empty string must be told
        apart from "not rendered yet".
        """
        texts = self.session.text_contents(descriptor)
        return texts[0] if texts else ""
