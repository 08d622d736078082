"""siteverify exception hierarchy.

Timeouts are not exceptions here: the visibility probe and the navigation
confirmer answer "did it happen" with a boolean. Exceptions are reserved for
programmer errors and for failures that leave the session unusable.
"""


class SiteVerifyError(Exception):
    """Base exception for all siteverify errors."""

    pass


class ConfigurationError(SiteVerifyError):
    """Raised when configuration is invalid or missing.

    Example:
        raise ConfigurationError("BASE_URL must be an absolute URL")
    """

    pass


class UsageError(SiteVerifyError):
    """Raised for programmer errors in how the harness is called.

    Never caught inside the harness. A test that triggers one is broken,
    not flaky.
    """

    pass


class UnknownElementError(UsageError):
    """Raised when an element name has no selector.

    Example:
        raise UnknownElementError("pricing_table")
    """

    def __init__(self, name: str, message: str | None = None) -> None:
        self.name = name
        super().__init__(message or f"Unknown element name: {name!r}")


class InvalidPatternError(UsageError):
    """Raised when a navigation rule or plan is malformed.

    Example:
        raise InvalidPatternError("Navigation plan needs at least one rule")
    """

    pass


class InvalidViewportError(UsageError):
    """Raised when a viewport class is neither mobile nor desktop.

    Attributes:
        value: The rejected value.
    """

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Unknown viewport class: {value!r}")


class SessionError(SiteVerifyError):
    """Base for failures reported by the browsing session."""

    pass


class NavigationError(SessionError):
    """Raised when the session cannot load a URL.

    Attributes:
        url: The URL that failed to load.
    """

    def __init__(self, url: str, message: str) -> None:
        self.url = url
        super().__init__(f"{url}: {message}")


class ActuationError(SessionError):
    """Raised when a click target cannot be actuated.

    Attributes:
        selector: Selector of the element that could not be clicked.
    """

    def __init__(self, selector: str, message: str) -> None:
        self.selector = selector
        super().__init__(f"{selector}: {message}")


class ConsentDismissalError(SessionError):
    """Raised when the consent dialog is present but cannot be dismissed.

    Every later interaction in the session would be blocked by the dialog,
    so this always propagates to the caller.
    """

    pass
