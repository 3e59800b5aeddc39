"""Persistence of the visitor's language preference.

Storage is best-effort: a profile may have storage disabled or restricted, in
which case every read behaves as "nothing saved" and writes are dropped.
"""

from __future__ import annotations

import logging
import os
import sqlite3
from threading import Lock
from typing import Protocol

from .languages import DEFAULT_LANGUAGES, LanguageSet

STORAGE_KEY = "photoness_lang"

_LOGGER = logging.getLogger(__name__)


class StorageUnavailableError(RuntimeError):
    """Raised by storage handles when reads or writes cannot be served."""


class Storage(Protocol):
    """Minimal key/value interface shared by the storage handles."""

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...


class InMemoryStorage:
    """Thread-safe in-memory key/value storage."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})
        self._lock = Lock()

    def get_item(self, key: str) -> str | None:
        with self._lock:
            return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        with self._lock:
            self._items[key] = value


class DisabledStorage:
    """Storage handle for profiles where persistence is switched off."""

    def get_item(self, key: str) -> str | None:
        raise StorageUnavailableError("Storage is disabled")

    def set_item(self, key: str, value: str) -> None:
        raise StorageUnavailableError("Storage is disabled")


class SQLiteStorage:
    """SQLite-backed key/value storage that survives process restarts."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = str(path)
        self._lock = Lock()
        self._initialise()

    def _connect(self) -> sqlite3.Connection:
        try:
            return sqlite3.connect(self._path, check_same_thread=False)
        except sqlite3.Error as error:
            raise StorageUnavailableError(str(error)) from error

    def _initialise(self) -> None:
        with self._lock:
            connection = self._connect()
            try:
                with connection:
                    connection.execute(
                        """
                        CREATE TABLE IF NOT EXISTS preferences (
                            key TEXT PRIMARY KEY,
                            value TEXT NOT NULL
                        )
                        """
                    )
            except sqlite3.Error as error:
                raise StorageUnavailableError(str(error)) from error
            finally:
                connection.close()

    def get_item(self, key: str) -> str | None:
        with self._lock:
            connection = self._connect()
            try:
                row = connection.execute(
                    "SELECT value FROM preferences WHERE key = ?",
                    (key,),
                ).fetchone()
            except sqlite3.Error as error:
                raise StorageUnavailableError(str(error)) from error
            finally:
                connection.close()
        return None if row is None else str(row[0])

    def set_item(self, key: str, value: str) -> None:
        with self._lock:
            connection = self._connect()
            try:
                with connection:
                    connection.execute(
                        "INSERT INTO preferences (key, value) VALUES (?, ?)"
                        " ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                        (key, value),
                    )
            except sqlite3.Error as error:
                raise StorageUnavailableError(str(error)) from error
            finally:
                connection.close()


class PreferenceStore:
    """Read and write the persisted language choice."""

    def __init__(
        self,
        storage: Storage,
        languages: LanguageSet = DEFAULT_LANGUAGES,
        *,
        key: str = STORAGE_KEY,
        logger: logging.Logger | None = None,
    ) -> None:
        self._storage = storage
        self._languages = languages
        self._key = key
        self._logger = logger or _LOGGER

    @property
    def key(self) -> str:
        return self._key

    @property
    def languages(self) -> LanguageSet:
        return self._languages

    def get(self) -> str:
        """Return the saved language, or the default when nothing usable is stored."""

        try:
            saved = self._storage.get_item(self._key)
        except StorageUnavailableError as error:
            self._logger.debug("Language preference unreadable: %s", error)
            return self._languages.default
        return self._languages.coerce(saved)

    def set(self, code: str) -> None:
        """Persist ``code``; failures are dropped so the switch still proceeds."""

        value = self._languages.coerce(code)
        try:
            self._storage.set_item(self._key, value)
        except StorageUnavailableError as error:
            self._logger.debug("Language preference not saved: %s", error)


__all__ = [
    "DisabledStorage",
    "InMemoryStorage",
    "PreferenceStore",
    "SQLiteStorage",
    "STORAGE_KEY",
    "Storage",
    "StorageUnavailableError",
]
