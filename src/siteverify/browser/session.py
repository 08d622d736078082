"""Browsing session capability interface.

The verification policies only talk to this protocol. Sessions are created and
closed by the caller (normally a pytest-playwright fixture); the harness never
manages their lifecycle. All durations are milliseconds.
"""

from __future__ import annotations

from typing import Literal, Protocol

from siteverify.verification.models import NavigationRule, QueryDescriptor

LoadState = Literal["load", "domcontentloaded", "networkidle"]
ElementState = Literal["attached", "detached", "visible", "hidden"]


class Session(Protocol):
    """Protocol for a single-owner browsing context."""

    @property
    def url(self) -> str:
        """Current location."""
        ...

    def title(self) -> str:
        """Current document title."""
        ...

    def viewport_width(self) -> int | None:
        """Viewport width in px, or None when the context has no fixed viewport."""
        ...

    def goto(self, url: str, timeout_ms: float) -> None:
        """Load a URL.

        Raises:
            NavigationError: If the page cannot be loaded.
        """
        ...

    def wait_for_load_state(self, state: LoadState, timeout_ms: float) -> bool:
        """Wait for a load state; False if it was not reached in time."""
        ...

    def is_visible(self, descriptor: QueryDescriptor) -> bool:
        """Check visibility right now, without waiting."""
        ...

    def wait_for_state(
        self,
        descriptor: QueryDescriptor,
        state: ElementState,
        timeout_ms: float,
    ) -> bool:
        """Wait for an element state; False on timeout or resolution error."""
        ...

    def text_contents(self, descriptor: QueryDescriptor) -> list[str]:
        """Text of every element currently matching, without waiting."""
        ...

    def click(self, descriptor: QueryDescriptor, timeout_ms: float) -> None:
        """Click an element.

        Raises:
            ActuationError: If the element cannot be clicked in time.
        """
        ...

    def wait_for_url(self, rule: NavigationRule) -> bool:
        """Wait up to rule.timeout_ms for the location to match rule.

        Glob patterns follow Playwright's URL glob syntax. Returns False on
        timeout.
        """
        ...

    def pause(self, timeout_ms: float) -> None:
        """Block for a fixed duration."""
        ...
