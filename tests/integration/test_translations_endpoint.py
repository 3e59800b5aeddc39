"""Integration tests for the translations API."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from flask.testing import FlaskClient

CATALOGUES = Path(__file__).resolve().parents[2] / "src" / "photoness" / "site" / "lang"


def _catalogue(locale: str) -> dict[str, str]:
    return json.loads(CATALOGUES.joinpath(f"{locale}.json").read_text(encoding="utf-8"))


def test_translations_endpoint_returns_default_catalogue(client: FlaskClient) -> None:
    response = client.get("/api/v1/translations/")

    assert response.status_code == 200
    payload = response.get_json()
    assert payload["locale"] == "es"
    assert payload["default_locale"] == "es"
    assert payload["available_locales"] == ["es", "en", "de", "fr"]
    assert payload["messages"] == _catalogue("es")
    assert response.headers["Content-Language"] == "es"


def test_translations_endpoint_respects_locale_path(client: FlaskClient) -> None:
    response = client.get("/api/v1/translations/de")

    payload = response.get_json()
    assert payload["locale"] == "de"
    assert payload["messages"]["nav.contact"] == _catalogue("de")["nav.contact"]


@pytest.mark.parametrize(("slug", "expected"), [("EN", "en"), ("fr-CA", "fr"), ("it", "es")])
def test_translations_endpoint_normalises_slugs(
    client: FlaskClient, slug: str, expected: str
) -> None:
    response = client.get(f"/api/v1/translations/{slug}")

    assert response.get_json()["locale"] == expected


def test_translations_endpoint_negotiates_accept_language(client: FlaskClient) -> None:
    response = client.get(
        "/api/v1/translations/",
        headers={"Accept-Language": "de-DE,de;q=0.9,en;q=0.5"},
    )

    assert response.get_json()["locale"] == "de"


def test_query_parameter_overrides_accept_language(client: FlaskClient) -> None:
    response = client.get(
        "/api/v1/translations/?locale=fr",
        headers={"Accept-Language": "de"},
    )

    assert response.get_json()["locale"] == "fr"


def test_translations_endpoint_does_not_stringify_invalid_values(client_factory) -> None:
    client, _ = client_factory(
        {
            "index.html": "<html></html>",
            "lang/en.json": json.dumps({"greeting": "Hello", "count": 3}),
        }
    )

    response = client.get("/api/v1/translations/en")

    assert response.status_code == 500
    assert response.get_json()["error"] == "catalogue_error"
