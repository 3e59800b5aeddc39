"""Site configuration helpers."""

from .site_config import (
    ConfigurationError,
    SiteConfiguration,
    load_site_configuration,
    parse_site_configuration,
    site_root,
)

__all__ = [
    "ConfigurationError",
    "SiteConfiguration",
    "load_site_configuration",
    "parse_site_configuration",
    "site_root",
]
