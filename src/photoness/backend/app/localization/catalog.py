"""Read the site's published translation catalogues from disk."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from photoness.backend.config import load_site_configuration, site_root
from photoness.i18n import CatalogFormatError, parse_catalog

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Catalogue:
    """Messages published for one locale."""

    locale: str
    messages: Mapping[str, str]


def available_locales() -> tuple[str, ...]:
    """Return the configured locales in switcher order."""

    return load_site_configuration().languages


def normalise_locale(locale: str | None) -> str:
    """Normalise a requested locale (``en-GB``, ``EN``) to a supported code."""

    languages = load_site_configuration().language_set()
    if not locale:
        return languages.default

    normalized = locale.strip().lower().split("-")[0]
    return languages.coerce(normalized)


def _catalogue_path(locale: str, root: Path | None = None) -> Path:
    configuration = load_site_configuration()
    base = root or site_root()
    return base / configuration.catalog_directory / f"{locale}.json"


def read_catalogue(locale: str, root: Path | None = None) -> Catalogue:
    """Load the catalogue for ``locale``; a missing file yields no messages.

    Bodies the translation runtime would reject raise :class:`CatalogFormatError`.
    """

    path = _catalogue_path(locale, root)
    if not path.is_file():
        _LOGGER.info("No catalogue published for %s at %s", locale, path)
        return Catalogue(locale=locale, messages={})

    with path.open("r", encoding="utf-8") as handle:
        try:
            payload: Any = json.load(handle)
        except ValueError as exc:
            raise CatalogFormatError(
                f"Catalogue {path.name} is not valid JSON: {exc}",
                code=locale,
                url=path.as_posix(),
            ) from exc

    messages = parse_catalog(payload, code=locale, url=path.as_posix())
    return Catalogue(locale=locale, messages=messages)


def load_translations(locale: str | None = None) -> dict[str, Any]:
    """Expose a catalogue payload for API consumers."""

    normalized = normalise_locale(locale)
    catalogue = read_catalogue(normalized)
    configuration = load_site_configuration()

    return {
        "locale": normalized,
        "default_locale": configuration.default_language,
        "available_locales": list(configuration.languages),
        "messages": dict(catalogue.messages),
    }


__all__ = [
    "Catalogue",
    "available_locales",
    "load_translations",
    "normalise_locale",
    "read_catalogue",
]
