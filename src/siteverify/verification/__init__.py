"""Verification policies: selector resolution, visibility, consent, navigation.

Usage:
    from siteverify.verification import NavigationPlan, NavigationRule

    plan = NavigationPlan(
        rules=(NavigationRule.glob("**/solutions/", 5_000),),
        fallback_substring="solutions",
    )
"""

from siteverify.verification.consent import ConsentGate
from siteverify.verification.models import (
    ConsentState,
    ElementName,
    MatchKind,
    NavigationPlan,
    NavigationResult,
    NavigationRule,
    NavigationState,
    QueryDescriptor,
    ViewportClass,
)
from siteverify.verification.navigation import NavigationConfirmer
from siteverify.verification.selectors import SelectorResolver, classify_viewport
from siteverify.verification.visibility import VisibilityProbe

__all__ = [
    "ConsentGate",
    "ConsentState",
    "ElementName",
    "MatchKind",
    "NavigationConfirmer",
    "NavigationPlan",
    "NavigationResult",
    "NavigationRule",
    "NavigationState",
    "QueryDescriptor",
    "SelectorResolver",
    "ViewportClass",
    "VisibilityProbe",
    "classify_viewport",
]
