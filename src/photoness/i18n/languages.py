"""Supported language codes and coercion helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

SUPPORTED_LANGUAGES: tuple[str, ...] = ("es", "en", "de", "fr")
DEFAULT_LANGUAGE = "es"


@dataclass(frozen=True)
class LanguageSet:
    """Closed set of language codes with one designated default."""

    codes: tuple[str, ...]
    default: str

    def __post_init__(self) -> None:
        if not self.codes:
            raise ValueError("At least one language code must be supported")
        if self.default not in self.codes:
            raise ValueError(
                f"Default language {self.default!r} is not one of {list(self.codes)}"
            )

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code in self.codes

    def __iter__(self) -> Iterator[str]:
        return iter(self.codes)

    def coerce(self, code: object) -> str:
        """Return ``code`` when supported, otherwise the default code."""

        return code if code in self else self.default  # type: ignore[return-value]

    def is_default(self, code: str) -> bool:
        return code == self.default


DEFAULT_LANGUAGES = LanguageSet(codes=SUPPORTED_LANGUAGES, default=DEFAULT_LANGUAGE)


__all__ = [
    "DEFAULT_LANGUAGE",
    "DEFAULT_LANGUAGES",
    "LanguageSet",
    "SUPPORTED_LANGUAGES",
]
