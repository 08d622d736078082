"""Site-specific constants."""
