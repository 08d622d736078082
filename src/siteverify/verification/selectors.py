"""Element name to selector resolution.

Most elements have one selector. The primary call-to-action does not: the
site ships a desktop anchor and a separate mobile button and hides one of them
per breakpoint, so picking the wrong one yields a query that never becomes
visible.
"""

from __future__ import annotations

from siteverify.constants import homepage
from siteverify.core.exceptions import InvalidViewportError, UnknownElementError
from siteverify.verification.models import ElementName, QueryDescriptor, ViewportClass

DEFAULT_MOBILE_MAX_WIDTH = 1023

_FIXED_DESCRIPTORS: dict[ElementName, QueryDescriptor] = {
    ElementName.HERO_HEADING: QueryDescriptor(homepage.HERO_HEADING),
    ElementName.NAVIGATION_MENU: QueryDescriptor(homepage.NAVIGATION_MENU, first=True),
    ElementName.FOOTER_LINKS: QueryDescriptor(homepage.FOOTER_LINKS, first=True),
    ElementName.IMPRINT_LINK: QueryDescriptor(
        homepage.FOOTER_LINK_TEMPLATE.format(text=homepage.IMPRINT_LINK_TEXT)
    ),
    ElementName.COMPLIANCE_LINK: QueryDescriptor(
        homepage.FOOTER_LINK_TEMPLATE.format(text=homepage.COMPLIANCE_LINK_TEXT)
    ),
    ElementName.SOLUTIONS_SECTION: QueryDescriptor(homepage.SOLUTIONS_SECTION, first=True),
    ElementName.CONSENT_DIALOG: QueryDescriptor(homepage.CONSENT_DIALOG),
    ElementName.CONSENT_ACCEPT: QueryDescriptor(homepage.CONSENT_ACCEPT_ALL),
}

_CTA_DESCRIPTORS: dict[ViewportClass, QueryDescriptor] = {
    ViewportClass.DESKTOP: QueryDescriptor(homepage.PRIMARY_CTA_DESKTOP, first=True),
    ViewportClass.MOBILE: QueryDescriptor(homepage.PRIMARY_CTA_MOBILE, first=True),
}


def to_element_name(name: ElementName | str) -> ElementName:
    """Coerce a string to an ElementName.

    Raises:
        UnknownElementError: If the name is not a known element.
    """
    if isinstance(name, ElementName):
        return name
    try:
        return ElementName(name)
    except ValueError as e:
        raise UnknownElementError(str(name)) from e


def to_viewport_class(viewport: ViewportClass | str) -> ViewportClass:
    """Coerce a string to a ViewportClass.

    Raises:
        InvalidViewportError: If the value is not a known viewport class.
    """
    if isinstance(viewport, ViewportClass):
        return viewport
    try:
        return ViewportClass(viewport)
    except ValueError as e:
        raise InvalidViewportError(viewport) from e


def classify_viewport(
    width: int | None, mobile_max_width: int = DEFAULT_MOBILE_MAX_WIDTH
) -> ViewportClass:
    """Bucket a viewport width.

    Args:
        width: Viewport width in px. None means the context has no fixed
            viewport and renders like a desktop window.
        mobile_max_width: Widest viewport still treated as mobile.

    Returns:
        ViewportClass.MOBILE if width <= mobile_max_width, else DESKTOP.
    """
    if width is None:
        return ViewportClass.DESKTOP
    return ViewportClass.MOBILE if width <= mobile_max_width else ViewportClass.DESKTOP


class SelectorResolver:
    """Maps semantic element names to query descriptors.

    Pure: the caller reads the viewport and passes the class in.
    """

    def __init__(self, mobile_max_width: int = DEFAULT_MOBILE_MAX_WIDTH) -> None:
        self.mobile_max_width = mobile_max_width

    def viewport_class(self, width: int | None) -> ViewportClass:
        return classify_viewport(width, self.mobile_max_width)

    def resolve(
        self,
        name: ElementName | str,
        viewport: ViewportClass | str,
        text: str | None = None,
    ) -> QueryDescriptor:
        """Resolve an element name for a viewport class.

        Args:
            name: Element to resolve.
            viewport: Current viewport class.
            text: Link text, required for ElementName.FOOTER_LINK only.

        Raises:
            UnknownElementError: For unknown names, or a footer link without text.
            InvalidViewportError: For a primary CTA lookup with an unknown viewport.
        """
        element = to_element_name(name)

        if element is ElementName.PRIMARY_CTA:
            return _CTA_DESCRIPTORS[to_viewport_class(viewport)]

        if element is ElementName.FOOTER_LINK:
            if not text:
                raise UnknownElementError(element.value, "Footer link lookup needs link text")
            return QueryDescriptor(homepage.FOOTER_LINK_TEMPLATE.format(text=text))

        try:
            return _FIXED_DESCRIPTORS[element]
        except KeyError as e:
            raise UnknownElementError(element.value) from e
