"""Selectors and navigation targets for the LucaNet homepage."""

from typing import Final

# Hero and page chrome
HERO_HEADING: Final[str] = "div.hero-advanced__headline.hero-advanced__headline--default"
NAVIGATION_MENU: Final[str] = "nav"
FOOTER_LINKS: Final[str] = "footer a"
FOOTER_LINK_TEMPLATE: Final[str] = 'footer >> text="{text}"'

IMPRINT_LINK_TEXT: Final[str] = "Imprint"
COMPLIANCE_LINK_TEXT: Final[str] = "Compliance"

# The site renders two distinct "Solutions" controls and hides one per breakpoint
PRIMARY_CTA_DESKTOP: Final[str] = (
    'a.main-navigation__item.main-navigation__item--desktop:has-text("Solutions")'
)
PRIMARY_CTA_MOBILE: Final[str] = (
    'button.main-navigation__item.main-navigation__item--mobile:has-text("Solutions")'
)

SOLUTIONS_SECTION: Final[str] = ", ".join(
    [
        "section.solutions-section",
        "div.solutions-section",
        'section[data-section="solutions"]',
        "#solutions-section",
        "main.solutions-page",
    ]
)

# Cookiebot consent dialog
CONSENT_DIALOG: Final[str] = "#CybotCookiebotDialog"
CONSENT_ACCEPT_ALL: Final[str] = "#CybotCookiebotDialogBodyLevelButtonLevelOptinAllowAll"

# Primary call-to-action navigation target, relative to the base URL
PRIMARY_CTA_PATH: Final[str] = "solutions/"
PRIMARY_CTA_GLOBS: Final[tuple[str, ...]] = ("**/solutions/", "**/solutions")
PRIMARY_CTA_FALLBACK: Final[str] = "solutions"
