"""Startup sequencing and language switching for a page."""

from __future__ import annotations

import logging
from enum import Enum

from bs4 import Tag

from .catalog import CatalogLoader, CatalogResult
from .document import DomApplier
from .languages import LanguageSet
from .preferences import PreferenceStore

_LOGGER = logging.getLogger(__name__)


class EngineState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    APPLIED = "applied"


class SwitchController:
    """Drive preference → catalogue → document updates for one page.

    Failed loads leave the document as it was and are reported only through
    the injected logger.
    """

    def __init__(
        self,
        store: PreferenceStore,
        loader: CatalogLoader,
        applier: DomApplier,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._store = store
        self._loader = loader
        self._applier = applier
        self._logger = logger or _LOGGER
        self._state = EngineState.IDLE
        self._current = store.languages.default

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def current(self) -> str:
        return self._current

    @property
    def languages(self) -> LanguageSet:
        return self._store.languages

    @property
    def store(self) -> PreferenceStore:
        return self._store

    @property
    def loader(self) -> CatalogLoader:
        return self._loader

    @property
    def applier(self) -> DomApplier:
        return self._applier

    async def start(self) -> CatalogResult | None:
        """Restore the saved language; the default language needs no request."""

        code = self._store.get()
        self._current = code
        result = None
        if not self.languages.is_default(code):
            result = await self.switch_to(code)
        self._applier.mark_switch_controls(code, exclusive=False)
        return result

    async def switch_to(self, code: str) -> CatalogResult:
        """Switch the page to ``code``, coercing unsupported codes to the default."""

        code = self.languages.coerce(code)
        self._current = code
        self._store.set(code)
        self._applier.set_document_language(code)
        self._applier.mark_switch_controls(code)
        return await self._load_and_apply(code)

    async def handle_activation(self, target: Tag) -> CatalogResult | None:
        """Dispatch an activation on ``target`` to the enclosing switch control.

        Activations outside any switch control are ignored.
        """

        control = self._closest_switch_control(target)
        if control is None:
            return None
        return await self.switch_to(control.get(self._applier.markup.switch_attribute, ""))

    def _closest_switch_control(self, target: Tag) -> Tag | None:
        attribute = self._applier.markup.switch_attribute
        if target.has_attr(attribute):
            return target
        return target.find_parent(attrs={attribute: True})

    async def _load_and_apply(self, code: str) -> CatalogResult:
        self._state = EngineState.LOADING
        result = await self._loader.load(code)

        if not result.ok:
            self._state = EngineState.IDLE
            self._logger.warning(
                "Catalogue for %s not applied: %s", result.code, result.error
            )
            return result

        self._applier.apply(result.catalog or {})
        self._state = EngineState.APPLIED
        self._logger.debug("Applied catalogue %s from %s", result.code, result.url)
        return result


__all__ = ["EngineState", "SwitchController"]
