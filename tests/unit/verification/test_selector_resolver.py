"""Tests for element name resolution and viewport classification."""

import pytest

from siteverify.constants import homepage
from siteverify.core.exceptions import InvalidViewportError, UnknownElementError, UsageError
from siteverify.verification.models import ElementName, QueryDescriptor, ViewportClass
from siteverify.verification.selectors import SelectorResolver, classify_viewport


class TestClassifyViewport:
    """Tests for classify_viewport."""

    @pytest.mark.parametrize("width", [320, 768, 1023])
    def test_narrow_widths_are_mobile(self, width: int) -> None:
        assert classify_viewport(width) is ViewportClass.MOBILE

    @pytest.mark.parametrize("width", [1024, 1280, 1920])
    def test_wide_widths_are_desktop(self, width: int) -> None:
        assert classify_viewport(width) is ViewportClass.DESKTOP

    def test_no_fixed_viewport_is_desktop(self) -> None:
        """Should treat a context without a viewport as a desktop window."""
        assert classify_viewport(None) is ViewportClass.DESKTOP

    def test_custom_breakpoint(self) -> None:
        assert classify_viewport(800, mobile_max_width=767) is ViewportClass.DESKTOP
        assert classify_viewport(767, mobile_max_width=767) is ViewportClass.MOBILE


class TestSelectorResolver:
    """Tests for SelectorResolver.resolve."""

    def test_primary_cta_differs_per_viewport(self, resolver: SelectorResolver) -> None:
        """
        Given: The primary call-to-action
        When: Resolved for mobile and for desktop
        Then: Two different descriptors come back
        """
        mobile = resolver.resolve(ElementName.PRIMARY_CTA, ViewportClass.MOBILE)
        desktop = resolver.resolve(ElementName.PRIMARY_CTA, ViewportClass.DESKTOP)

        assert mobile != desktop
        assert mobile.selector == homepage.PRIMARY_CTA_MOBILE
        assert desktop.selector == homepage.PRIMARY_CTA_DESKTOP

    @pytest.mark.parametrize(
        "name",
        [
            ElementName.HERO_HEADING,
            ElementName.NAVIGATION_MENU,
            ElementName.FOOTER_LINKS,
            ElementName.SOLUTIONS_SECTION,
            ElementName.CONSENT_DIALOG,
        ],
    )
    def test_fixed_elements_ignore_viewport(
        self, resolver: SelectorResolver, name: ElementName
    ) -> None:
        assert resolver.resolve(name, ViewportClass.MOBILE) == resolver.resolve(
            name, ViewportClass.DESKTOP
        )

    def test_hero_heading_selector(self, resolver: SelectorResolver) -> None:
        descriptor = resolver.resolve(ElementName.HERO_HEADING, ViewportClass.DESKTOP)

        assert descriptor == QueryDescriptor(homepage.HERO_HEADING)

    def test_accepts_string_names(self, resolver: SelectorResolver) -> None:
        assert resolver.resolve("hero_heading", ViewportClass.DESKTOP) == resolver.resolve(
            ElementName.HERO_HEADING, ViewportClass.DESKTOP
        )

    def test_footer_link_uses_text(self, resolver: SelectorResolver) -> None:
        descriptor = resolver.resolve(ElementName.FOOTER_LINK, ViewportClass.DESKTOP, text="Imprint")

        assert descriptor.selector == 'footer >> text="Imprint"'
        assert descriptor == resolver.resolve(ElementName.IMPRINT_LINK, ViewportClass.DESKTOP)

    def test_footer_link_without_text_fails_fast(self, resolver: SelectorResolver) -> None:
        with pytest.raises(UnknownElementError):
            resolver.resolve(ElementName.FOOTER_LINK, ViewportClass.DESKTOP)

    def test_unknown_name_fails_fast(self, resolver: SelectorResolver) -> None:
        """Should raise instead of returning an empty descriptor."""
        with pytest.raises(UnknownElementError, match="pricing_table") as exc_info:
            resolver.resolve("pricing_table", ViewportClass.DESKTOP)

        assert isinstance(exc_info.value, UsageError)
        assert exc_info.value.name == "pricing_table"

    def test_primary_cta_accepts_string_viewport(self, resolver: SelectorResolver) -> None:
        assert resolver.resolve(ElementName.PRIMARY_CTA, "mobile") == resolver.resolve(
            ElementName.PRIMARY_CTA, ViewportClass.MOBILE
        )

    @pytest.mark.parametrize("viewport", ["tablet", None, 1280])
    def test_primary_cta_unknown_viewport_fails_fast(
        self, resolver: SelectorResolver, viewport: object
    ) -> None:
        """Should raise a harness error, not a bare KeyError."""
        with pytest.raises(InvalidViewportError, match="Unknown viewport class") as exc_info:
            resolver.resolve(ElementName.PRIMARY_CTA, viewport)  # type: ignore[arg-type]

        assert isinstance(exc_info.value, UsageError)
        assert exc_info.value.value == viewport

    def test_viewport_class_uses_configured_breakpoint(self) -> None:
        resolver = SelectorResolver(mobile_max_width=767)

        assert resolver.viewport_class(768) is ViewportClass.DESKTOP
        assert resolver.viewport_class(767) is ViewportClass.MOBILE
