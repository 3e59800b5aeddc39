"""Pydantic models describing the site configuration schema."""

from __future__ import annotations

import re
from typing import Any, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing_extensions import Self

from photoness.i18n.document import MarkupContract
from photoness.i18n.languages import LanguageSet

_CODE_PATTERN = re.compile(r"^[a-z]{2,3}$")


class ConfigurationError(ValueError):
    """Raised when configuration values violate schema expectations."""


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class MarkupSettings(ImmutableModel):
    """Attribute and class names the runtime looks for in page markup."""

    content_attribute: str = "data-i18n"
    placeholder_attribute: str = "data-i18n-placeholder"
    title_attribute: str = "data-i18n-title"
    switch_attribute: str = "data-lang"
    active_class: str = "lang-active"
    description_key: str = "meta.description"

    @model_validator(mode="after")
    def _validate_attributes(self) -> Self:
        attributes = [
            self.content_attribute,
            self.placeholder_attribute,
            self.title_attribute,
            self.switch_attribute,
        ]
        if any(not name.strip() for name in attributes):
            raise ConfigurationError("Markup attribute names must not be empty")
        if len(set(attributes)) != len(attributes):
            raise ConfigurationError("Markup attribute names must be distinct")
        if not self.active_class.strip() or " " in self.active_class:
            raise ConfigurationError("The active class must be a single class name")
        return self

    def to_contract(self) -> MarkupContract:
        return MarkupContract(
            content_attribute=self.content_attribute,
            placeholder_attribute=self.placeholder_attribute,
            title_attribute=self.title_attribute,
            switch_attribute=self.switch_attribute,
            active_class=self.active_class,
            description_key=self.description_key,
        )


class SiteConfiguration(ImmutableModel):
    """Top-level settings shared by the server and the translation runtime."""

    languages: tuple[str, ...]
    default_language: str
    storage_key: str = "photoness_lang"
    script_path: str = "js/i18n.js"
    catalog_directory: str = "lang"
    request_timeout: float | None = Field(default=None, gt=0)
    markup: MarkupSettings = Field(default_factory=MarkupSettings)

    @field_validator("languages", mode="before")
    @classmethod
    def _coerce_languages(cls, value: Any) -> Sequence[str]:
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        if isinstance(value, (list, tuple)):
            return [str(item) for item in value]
        raise ConfigurationError("Languages must be provided as a list of codes")

    @model_validator(mode="after")
    def _validate_languages(self) -> Self:
        if not self.languages:
            raise ConfigurationError("At least one language must be configured")
        invalid = [code for code in self.languages if not _CODE_PATTERN.match(code)]
        if invalid:
            raise ConfigurationError(
                f"Language codes must be lowercase ISO 639 codes: {invalid}"
            )
        if len(set(self.languages)) != len(self.languages):
            raise ConfigurationError("Language codes must be unique")
        if self.default_language not in self.languages:
            raise ConfigurationError(
                f"Default language {self.default_language!r} is not a configured language"
            )
        if not self.storage_key.strip():
            raise ConfigurationError("The storage key must not be empty")
        return self

    def language_set(self) -> LanguageSet:
        return LanguageSet(codes=self.languages, default=self.default_language)

    def markup_contract(self) -> MarkupContract:
        return self.markup.to_contract()

    def engine_options(self) -> dict[str, Any]:
        """Keyword arguments for :func:`photoness.i18n.create_engine`."""

        return {
            "languages": self.language_set(),
            "markup": self.markup_contract(),
            "storage_key": self.storage_key,
            "script_path": self.script_path,
            "catalog_directory": self.catalog_directory,
        }

    @property
    def translated_languages(self) -> tuple[str, ...]:
        """Languages served from catalogues rather than the authored markup."""

        return tuple(code for code in self.languages if code != self.default_language)


__all__ = [
    "ConfigurationError",
    "ImmutableModel",
    "MarkupSettings",
    "SiteConfiguration",
]
