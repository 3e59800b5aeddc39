"""Locate and fetch per-language translation catalogues over HTTP."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Mapping

import httpx
from bs4 import BeautifulSoup

SCRIPT_PATH = "js/i18n.js"
CATALOG_DIRECTORY = "lang"

_LOGGER = logging.getLogger(__name__)


class CatalogError(Exception):
    """Base class for catalogue loading failures."""

    def __init__(self, message: str, *, code: str, url: str) -> None:
        super().__init__(message)
        self.code = code
        self.url = url


class CatalogFetchError(CatalogError):
    """The request failed or the server answered with a non-success status."""

    def __init__(
        self, message: str, *, code: str, url: str, status_code: int | None = None
    ) -> None:
        super().__init__(message, code=code, url=url)
        self.status_code = status_code


class CatalogFormatError(CatalogError):
    """The response body is not a flat JSON object of strings."""


@dataclass(frozen=True)
class CatalogResult:
    """Outcome of a single catalogue load."""

    code: str
    url: str
    catalog: Mapping[str, str] | None = None
    error: CatalogError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.catalog is not None


def resolve_base_path(document: BeautifulSoup, *, script_path: str = SCRIPT_PATH) -> str:
    """Derive the site root from the runtime's own ``<script src>`` reference.

    Pages nested below the site root reference the script relatively
    (``../js/i18n.js``) and sub-path deployments absolutely
    (``/studio/js/i18n.js``); stripping the script path yields the prefix that
    catalogue URLs must share.
    """

    script_name = script_path.rsplit("/", 1)[-1]
    for script in document.find_all("script", src=True):
        src = script["src"]
        if script_name in src:
            return re.sub(rf"{re.escape(script_path)}(\?.*)?$", "", src)
    return "/"


def parse_catalog(payload: Any, *, code: str, url: str) -> dict[str, str]:
    """Validate a decoded catalogue body as a flat mapping of strings."""

    if not isinstance(payload, dict):
        raise CatalogFormatError(
            f"Catalogue body must be a JSON object, got {type(payload).__name__}",
            code=code,
            url=url,
        )

    invalid = sorted(key for key, value in payload.items() if not isinstance(value, str))
    if invalid:
        raise CatalogFormatError(
            f"Catalogue values must be strings: {', '.join(invalid[:5])}",
            code=code,
            url=url,
        )

    return dict(payload)


class CatalogLoader:
    """Fetch translation catalogues relative to the deployment's base path."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        document: BeautifulSoup,
        *,
        page_url: str | None = None,
        script_path: str = SCRIPT_PATH,
        catalog_directory: str = CATALOG_DIRECTORY,
    ) -> None:
        self._client = client
        self._document = document
        self._page_url = page_url
        self._script_path = script_path
        self._catalog_directory = catalog_directory.strip("/")

    def resolve_base_path(self) -> str:
        return resolve_base_path(self._document, script_path=self._script_path)

    def catalog_url(self, code: str) -> str:
        url = f"{self.resolve_base_path()}{self._catalog_directory}/{code}.json"
        if self._page_url:
            return str(httpx.URL(self._page_url).join(url))
        return url

    async def load(self, code: str) -> CatalogResult:
        """Fetch the catalogue for ``code``.

        Never raises for network or payload problems; the failure is returned
        in :attr:`CatalogResult.error` instead. Overlapping calls are neither
        de-duplicated nor cancelled.
        """

        url = self.catalog_url(code)
        _LOGGER.debug("Requesting catalogue %s from %s", code, url)

        try:
            response = await self._client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            error = CatalogFetchError(
                f"Request for {url} failed: {exc}", code=code, url=url
            )
            return CatalogResult(code=code, url=url, error=error)

        if not response.is_success:
            error = CatalogFetchError(
                f"Request for {url} returned HTTP {response.status_code}",
                code=code,
                url=url,
                status_code=response.status_code,
            )
            return CatalogResult(code=code, url=url, error=error)

        try:
            catalog = parse_catalog(response.json(), code=code, url=url)
        except ValueError as exc:
            error = CatalogFormatError(
                f"Catalogue body is not valid JSON: {exc}", code=code, url=url
            )
            return CatalogResult(code=code, url=url, error=error)
        except CatalogFormatError as exc:
            return CatalogResult(code=code, url=url, error=exc)

        return CatalogResult(code=code, url=url, catalog=catalog)


__all__ = [
    "CATALOG_DIRECTORY",
    "CatalogError",
    "CatalogFetchError",
    "CatalogFormatError",
    "CatalogLoader",
    "CatalogResult",
    "SCRIPT_PATH",
    "parse_catalog",
    "resolve_base_path",
]
