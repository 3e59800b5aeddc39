"""Assemble the translation runtime for one document."""

from __future__ import annotations

import logging

import httpx
from bs4 import BeautifulSoup

from .catalog import CATALOG_DIRECTORY, SCRIPT_PATH, CatalogLoader
from .controller import SwitchController
from .document import DEFAULT_MARKUP, DomApplier, MarkupContract
from .languages import DEFAULT_LANGUAGES, LanguageSet
from .preferences import STORAGE_KEY, PreferenceStore, Storage


def create_client(
    base_url: str = "",
    *,
    timeout: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Return the client used for catalogue requests.

    ``timeout=None`` waits for a response indefinitely.
    """

    return httpx.AsyncClient(
        base_url=base_url,
        timeout=timeout,
        transport=transport,
        headers={"Accept": "application/json"},
    )


def create_engine(
    document: BeautifulSoup,
    *,
    storage: Storage,
    client: httpx.AsyncClient,
    languages: LanguageSet = DEFAULT_LANGUAGES,
    markup: MarkupContract = DEFAULT_MARKUP,
    storage_key: str = STORAGE_KEY,
    script_path: str = SCRIPT_PATH,
    catalog_directory: str = CATALOG_DIRECTORY,
    page_url: str | None = None,
    logger: logging.Logger | None = None,
) -> SwitchController:
    """Wire store, loader and applier around the given collaborators."""

    store = PreferenceStore(storage, languages, key=storage_key, logger=logger)
    loader = CatalogLoader(
        client,
        document,
        page_url=page_url,
        script_path=script_path,
        catalog_directory=catalog_directory,
    )
    applier = DomApplier(document, markup)
    return SwitchController(store, loader, applier, logger=logger)


__all__ = ["create_client", "create_engine"]
