"""Core error taxonomy."""

from siteverify.core.exceptions import (
    ActuationError,
    ConfigurationError,
    ConsentDismissalError,
    InvalidPatternError,
    InvalidViewportError,
    NavigationError,
    SessionError,
    SiteVerifyError,
    UnknownElementError,
    UsageError,
)

__all__ = [
    "ActuationError",
    "ConfigurationError",
    "ConsentDismissalError",
    "InvalidPatternError",
    "InvalidViewportError",
    "NavigationError",
    "SessionError",
    "SiteVerifyError",
    "UnknownElementError",
    "UsageError",
]
