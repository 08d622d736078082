"""Page objects."""

from siteverify.pages.home import HomePage, primary_cta_plan

__all__ = ["HomePage", "primary_cta_plan"]
