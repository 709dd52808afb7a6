"""Config settings – env-based configuration."""
from viewcache.config.settings.base import CacheSettings, Settings
from viewcache.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["CacheSettings", "EnvSettingsLoader", "Settings", "SettingsLoader"]
