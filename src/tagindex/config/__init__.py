"""Configuration for site builds."""

from tagindex.config.exceptions import ConfigError, ConfigLoadError, ConfigValidationError
from tagindex.config.loader import ConfigLoader, load_site_config
from tagindex.config.settings import DefaultsRule, DefaultsScope, SiteConfig

__all__ = [
    "ConfigError",
    "ConfigLoadError",
    "ConfigLoader",
    "ConfigValidationError",
    "DefaultsRule",
    "DefaultsScope",
    "SiteConfig",
    "load_site_config",
]
