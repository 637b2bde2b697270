"""Configuration package."""

from updater.config.settings import ENV_OVERRIDES, load_settings, read_yaml_settings

__all__ = ["ENV_OVERRIDES", "load_settings", "read_yaml_settings"]
