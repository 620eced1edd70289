"""Configuration package for runtime settings and startup validation."""

from .settings import ServiceSettings, SettingsLoadError, config_load_settings, config_parse_settings

__all__ = ["ServiceSettings", "SettingsLoadError", "config_load_settings", "config_parse_settings"]
