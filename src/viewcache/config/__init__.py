"""Config – 12-factor settings for the store and the invalidation sweep."""

from viewcache.config.settings import CacheSettings, EnvSettingsLoader, Settings, SettingsLoader
from viewcache.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "CacheSettings",
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
