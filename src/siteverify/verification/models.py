"""Value types shared by the verification policies.

Everything here is immutable: descriptors, rules and plans are read-only values
passed into components, never handles into live browser state.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from siteverify.core.exceptions import InvalidPatternError


@dataclass(frozen=True)
class QueryDescriptor:
    """Deferred element query, re-resolved against the document on every use.

    Attributes:
        selector: Playwright selector string.
        first: Narrow a multi-match query to its first match.
    """

    selector: str
    first: bool = False

    def __str__(self) -> str:
        return f"{self.selector} >> nth=0" if self.first else self.selector


class ElementName(str, Enum):
    """Semantic names of the homepage elements the harness knows about."""

    HERO_HEADING = "hero_heading"
    NAVIGATION_MENU = "navigation_menu"
    FOOTER_LINKS = "footer_links"
    FOOTER_LINK = "footer_link"
    IMPRINT_LINK = "imprint_link"
    COMPLIANCE_LINK = "compliance_link"
    PRIMARY_CTA = "primary_cta"
    SOLUTIONS_SECTION = "solutions_section"
    CONSENT_DIALOG = "consent_dialog"
    CONSENT_ACCEPT = "consent_accept"


class ViewportClass(str, Enum):
    """Layout bucket derived from the current viewport width."""

    MOBILE = "mobile"
    DESKTOP = "desktop"


class ConsentState(str, Enum):
    """What the consent gate last observed for its session."""

    NOT_CHECKED = "not_checked"
    DISMISSED = "dismissed"
    ABSENT_OR_ALREADY_DISMISSED = "absent_or_already_dismissed"


class MatchKind(str, Enum):
    """How a navigation rule compares against the current URL."""

    EXACT = "exact"
    GLOB = "glob"


@dataclass(frozen=True)
class NavigationRule:
    """One URL expectation with its own wait budget.

    Exact rules compare the whole URL string. Glob rules are handed to the
    session unchanged and use Playwright's URL glob syntax (`**`, `*`,
    `{a,b}`), so the browser engine decides what matches.
    """

    pattern: str
    timeout_ms: float
    kind: MatchKind = MatchKind.EXACT

    def __post_init__(self) -> None:
        if not isinstance(self.pattern, str) or not self.pattern:
            raise InvalidPatternError("Navigation rule pattern must be a non-empty string")
        if self.timeout_ms <= 0:
            raise InvalidPatternError(
                f"Navigation rule timeout must be positive, got {self.timeout_ms}"
            )

    @classmethod
    def exact(cls, url: str, timeout_ms: float) -> NavigationRule:
        return cls(pattern=url, timeout_ms=timeout_ms, kind=MatchKind.EXACT)

    @classmethod
    def glob(cls, pattern: str, timeout_ms: float) -> NavigationRule:
        return cls(pattern=pattern, timeout_ms=timeout_ms, kind=MatchKind.GLOB)


@dataclass(frozen=True)
class NavigationPlan:
    """Ordered rules tried first-match-wins, then a substring fallback.

    Attributes:
        rules: Rules in evaluation order.
        fallback_substring: Checked case-insensitively against the final URL
            once every rule has timed out.
    """

    rules: tuple[NavigationRule, ...]
    fallback_substring: str

    def __post_init__(self) -> None:
        rules = tuple(self.rules)
        object.__setattr__(self, "rules", rules)

        if not rules:
            raise InvalidPatternError("Navigation plan needs at least one rule")
        for rule in rules:
            if not isinstance(rule, NavigationRule):
                raise InvalidPatternError(f"Not a navigation rule: {rule!r}")
        if not self.fallback_substring:
            raise InvalidPatternError("Navigation plan fallback substring must not be empty")

    @property
    def total_timeout_ms(self) -> float:
        """Upper bound on time spent waiting for the location to match."""
        return sum(rule.timeout_ms for rule in self.rules)


class NavigationState(str, Enum):
    """Navigation confirmation progress."""

    IDLE = "idle"
    TRIGGERED = "triggered"
    CHECKING_PATTERN = "checking_pattern"
    CHECKING_FALLBACK = "checking_fallback"
    CONFIRMED = "confirmed"
    NOT_CONFIRMED = "not_confirmed"


@dataclass(frozen=True)
class NavigationResult:
    """Terminal outcome of one navigation confirmation."""

    state: NavigationState
    final_url: str
    matched_rule: NavigationRule | None = None
    via_fallback: bool = False
    error: str | None = None

    @property
    def confirmed(self) -> bool:
        return self.state is NavigationState.CONFIRMED
