"""Server-rendered previews of site pages in a chosen language.

The preview runs the same document applier as the browser runtime, so a page
fetched here matches what a visitor sees after switching languages.
"""

from __future__ import annotations

import logging
from pathlib import Path

from flask import Blueprint, request
from werkzeug.security import safe_join

from photoness.backend.app.http import problem_response
from photoness.backend.app.localization import read_catalogue
from photoness.backend.config import load_site_configuration, site_root
from photoness.i18n import DomApplier, InMemoryStorage, PreferenceStore, parse_document

blueprint = Blueprint("pages", __name__, url_prefix="/api/v1/pages")

logger = logging.getLogger(__name__)


def _resolve_page(root: Path, page: str) -> Path | None:
    if not page.endswith(".html"):
        page = f"{page.rstrip('/')}/index.html" if page.endswith("/") else f"{page}.html"

    joined = safe_join(str(root), page)
    if joined is None:
        return None

    path = Path(joined)
    return path if path.is_file() else None


def _requested_language(store: PreferenceStore) -> str:
    """Prefer an explicit ``?lang=``; otherwise fall back to the saved cookie."""

    explicit = request.args.get("lang")
    if explicit is not None:
        return store.languages.coerce(explicit)
    return store.get()


@blueprint.get("/<path:page>")
def render_page(page: str):
    """Return ``page`` with its translatable surfaces rewritten."""

    configuration = load_site_configuration()
    root = site_root()

    path = _resolve_page(root, page)
    if path is None:
        return problem_response(
            "not_found", status=404, message=f"Page {page!r} not found"
        )

    store = PreferenceStore(
        InMemoryStorage(dict(request.cookies)),
        configuration.language_set(),
        key=configuration.storage_key,
    )
    code = _requested_language(store)

    document = parse_document(path.read_text(encoding="utf-8"))
    applier = DomApplier(document, configuration.markup_contract())
    if not store.languages.is_default(code):
        catalogue = read_catalogue(code, root)
        if not catalogue.messages:
            logger.warning("Rendering %s without messages for %s", page, code)
        applier.apply(catalogue.messages)
    applier.set_document_language(code)
    applier.mark_switch_controls(code)

    return (
        str(document),
        200,
        {"Content-Type": "text/html; charset=utf-8", "Content-Language": code},
    )
