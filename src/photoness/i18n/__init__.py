"""Client-side translation runtime for the Photoness site."""

from .catalog import (
    CatalogError,
    CatalogFetchError,
    CatalogFormatError,
    CatalogLoader,
    CatalogResult,
    parse_catalog,
    resolve_base_path,
)
from .controller import EngineState, SwitchController
from .document import DEFAULT_MARKUP, DomApplier, MarkupContract, parse_document
from .engine import create_client, create_engine
from .languages import DEFAULT_LANGUAGE, DEFAULT_LANGUAGES, SUPPORTED_LANGUAGES, LanguageSet
from .preferences import (
    STORAGE_KEY,
    DisabledStorage,
    InMemoryStorage,
    PreferenceStore,
    SQLiteStorage,
    StorageUnavailableError,
)

__all__ = [
    "CatalogError",
    "CatalogFetchError",
    "CatalogFormatError",
    "CatalogLoader",
    "CatalogResult",
    "DEFAULT_LANGUAGE",
    "DEFAULT_LANGUAGES",
    "DEFAULT_MARKUP",
    "DisabledStorage",
    "DomApplier",
    "EngineState",
    "InMemoryStorage",
    "LanguageSet",
    "MarkupContract",
    "PreferenceStore",
    "SQLiteStorage",
    "STORAGE_KEY",
    "SUPPORTED_LANGUAGES",
    "StorageUnavailableError",
    "SwitchController",
    "create_client",
    "create_engine",
    "parse_catalog",
    "parse_document",
    "resolve_base_path",
]
