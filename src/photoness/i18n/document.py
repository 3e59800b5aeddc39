"""Write translated strings into a parsed HTML document.

Catalogue values are inserted as markup, not escaped text, so authors can keep
inline tags such as ``<br>`` or ``<strong>`` in translations. Catalogues must
therefore come from maintainer-authored static files; never apply a catalogue
assembled from untrusted input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from bs4 import BeautifulSoup, Tag

DESCRIPTION_KEY = "meta.description"


@dataclass(frozen=True)
class MarkupContract:
    """Attribute and class names recognised in page markup."""

    content_attribute: str = "data-i18n"
    placeholder_attribute: str = "data-i18n-placeholder"
    title_attribute: str = "data-i18n-title"
    switch_attribute: str = "data-lang"
    active_class: str = "lang-active"
    description_key: str = DESCRIPTION_KEY


DEFAULT_MARKUP = MarkupContract()


def parse_document(html: str) -> BeautifulSoup:
    """Parse page markup with the builder used throughout the runtime."""

    return BeautifulSoup(html, "html.parser")


class DomApplier:
    """Apply a translation catalogue to the flagged elements of a document."""

    def __init__(self, document: BeautifulSoup, markup: MarkupContract = DEFAULT_MARKUP) -> None:
        self._document = document
        self._markup = markup

    @property
    def document(self) -> BeautifulSoup:
        return self._document

    @property
    def markup(self) -> MarkupContract:
        return self._markup

    def apply(self, catalog: Mapping[str, str]) -> None:
        """Replace text, placeholders, title and description from ``catalog``.

        Keys missing from the catalogue leave the authored content in place.
        """

        markup = self._markup

        for element in self._document.find_all(attrs={markup.content_attribute: True}):
            key = element.get(markup.content_attribute)
            if key in catalog:
                self._replace_content(element, catalog[key])

        for element in self._document.find_all(attrs={markup.placeholder_attribute: True}):
            key = element.get(markup.placeholder_attribute)
            if key in catalog:
                element["placeholder"] = catalog[key]

        title_element = self._document.find(attrs={markup.title_attribute: True})
        if title_element is not None:
            key = title_element.get(markup.title_attribute)
            if key in catalog:
                self._set_title(catalog[key])

        description = self._document.find("meta", attrs={"name": "description"})
        if description is not None and catalog.get(markup.description_key):
            description["content"] = catalog[markup.description_key]

    def set_document_language(self, code: str) -> None:
        root = self._document.find("html")
        if root is not None:
            root["lang"] = code

    def mark_switch_controls(self, code: str, *, exclusive: bool = True) -> None:
        """Flag the controls for ``code`` as active.

        With ``exclusive`` every other control loses the active class.
        """

        markup = self._markup
        for control in self.switch_controls():
            classes = list(control.get("class") or [])
            if control.get(markup.switch_attribute) == code:
                if markup.active_class not in classes:
                    classes.append(markup.active_class)
            elif exclusive:
                classes = [name for name in classes if name != markup.active_class]
            else:
                continue

            if classes:
                control["class"] = classes
            elif control.has_attr("class"):
                del control["class"]

    def switch_controls(self) -> list[Tag]:
        return self._document.find_all(attrs={self._markup.switch_attribute: True})

    def active_codes(self) -> list[str]:
        """Return the codes of controls currently carrying the active class."""

        markup = self._markup
        return [
            control[markup.switch_attribute]
            for control in self.switch_controls()
            if markup.active_class in (control.get("class") or [])
        ]

    def _replace_content(self, element: Tag, value: str) -> None:
        element.clear()
        fragment = BeautifulSoup(value, "html.parser")
        for child in list(fragment.contents):
            element.append(child.extract())

    def _set_title(self, value: str) -> None:
        title = self._document.find("title")
        if title is None:
            head = self._document.find("head")
            if head is None:
                return
            title = self._document.new_tag("title")
            head.append(title)
        title.string = value


__all__ = [
    "DEFAULT_MARKUP",
    "DESCRIPTION_KEY",
    "DomApplier",
    "MarkupContract",
    "parse_document",
]
