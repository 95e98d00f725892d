"""Configuration package."""
from helium_nodes.config.settings import DEFAULT_BASE_URL, Settings, get_settings, reset_settings

__all__ = ["DEFAULT_BASE_URL", "get_settings", "reset_settings", "Settings"]
