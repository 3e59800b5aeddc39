"""Server-side access to the site's translation catalogues."""

from .catalog import (
    Catalogue,
    available_locales,
    load_translations,
    normalise_locale,
    read_catalogue,
)

__all__ = [
    "Catalogue",
    "available_locales",
    "load_translations",
    "normalise_locale",
    "read_catalogue",
]
