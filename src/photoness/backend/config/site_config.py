"""Configuration loader wrapping the site schema models."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .schema import ConfigurationError, MarkupSettings, SiteConfiguration

CONFIG_DIRECTORY = Path(__file__).resolve().parent / "data"
SITE_CONFIG_FILE = CONFIG_DIRECTORY / "site.yaml"

# Static pages and catalogues bundled with the package.
DEFAULT_SITE_ROOT = Path(__file__).resolve().parents[2] / "site"


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must define a mapping at the top level")
    return data


def parse_site_configuration(raw_config: dict[str, Any]) -> SiteConfiguration:
    """Validate a raw mapping against the site schema."""

    try:
        return SiteConfiguration.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigurationError(f"Site configuration validation failed: {error}") from error


@lru_cache(maxsize=1)
def load_site_configuration() -> SiteConfiguration:
    """Load and cache the bundled site configuration."""

    if not SITE_CONFIG_FILE.exists():
        raise FileNotFoundError("Site configuration not found")

    return parse_site_configuration(_load_yaml(SITE_CONFIG_FILE))


def site_root() -> Path:
    """Return the directory holding the pages and catalogues to serve."""

    override = os.getenv("PHOTONESS_SITE_ROOT")
    if override:
        return Path(override).expanduser().resolve()
    return DEFAULT_SITE_ROOT


__all__ = [
    "CONFIG_DIRECTORY",
    "ConfigurationError",
    "DEFAULT_SITE_ROOT",
    "MarkupSettings",
    "SITE_CONFIG_FILE",
    "SiteConfiguration",
    "load_site_configuration",
    "parse_site_configuration",
    "site_root",
]
