"""Serve the published catalogues through the JSON API."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, jsonify, request

from photoness.backend.app.localization import load_translations

blueprint = Blueprint("translations", __name__, url_prefix="/api/v1/translations")


def _catalogue_response(locale_hint: str | None) -> tuple[Any, int, dict[str, str]]:
    payload = load_translations(locale_hint)
    return jsonify(payload), 200, {"Content-Language": payload["locale"]}


@blueprint.get("/")
def get_negotiated_translations():
    """Pick the locale from ``?locale=`` or the ``Accept-Language`` header."""

    locale_hint = request.args.get("locale") or request.accept_languages.best
    return _catalogue_response(locale_hint)


@blueprint.get("/<locale>")
def get_locale_translations(locale: str):
    """Unsupported slugs resolve to the default locale."""

    return _catalogue_response(locale)
