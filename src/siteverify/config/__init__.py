"""Configuration module for siteverify.

Usage:
    from siteverify.config import get_settings

    settings = get_settings()  # Cached singleton
    timeouts = settings.timeout_config()

Note:
    Use `get_settings()` to get the cached instance at runtime rather than
    importing a module-level instance, so tests can patch the environment
    and clear the cache.
"""

from siteverify.config.settings import Settings, TimeoutConfig, get_settings

__all__ = ["Settings", "TimeoutConfig", "get_settings"]
