"""Tests for the YAML site configuration and deployment validator."""

from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest

from photoness.backend.config import (
    ConfigurationError,
    load_site_configuration,
    parse_site_configuration,
)
from photoness.backend.config.validator import main, validate_site_root
from photoness.i18n import (
    DEFAULT_LANGUAGES,
    DEFAULT_MARKUP,
    InMemoryStorage,
    create_client,
    create_engine,
    parse_document,
)


def test_bundled_configuration_matches_runtime_defaults() -> None:
    configuration = load_site_configuration()

    assert configuration.language_set() == DEFAULT_LANGUAGES
    assert configuration.markup_contract() == DEFAULT_MARKUP
    assert configuration.storage_key == "photoness_lang"
    assert configuration.request_timeout is None
    assert configuration.translated_languages == ("en", "de", "fr")


def test_languages_accept_comma_separated_string() -> None:
    configuration = parse_site_configuration({"languages": "es, en", "default_language": "en"})

    assert configuration.languages == ("es", "en")


@pytest.mark.parametrize(
    "raw",
    [
        {"languages": [], "default_language": "es"},
        {"languages": ["es", "en"], "default_language": "de"},
        {"languages": ["es", "es"], "default_language": "es"},
        {"languages": ["ES"], "default_language": "ES"},
        {"languages": ["es"], "default_language": "es", "unknown": True},
        {"languages": ["es"], "default_language": "es", "request_timeout": 0},
        {
            "languages": ["es"],
            "default_language": "es",
            "markup": {"content_attribute": "data-x", "placeholder_attribute": "data-x"},
        },
        {
            "languages": ["es"],
            "default_language": "es",
            "markup": {"active_class": "is active"},
        },
    ],
)
def test_invalid_configurations_are_rejected(raw: dict) -> None:
    with pytest.raises(ConfigurationError):
        parse_site_configuration(raw)


def test_bundled_site_root_is_deployable() -> None:
    configuration = load_site_configuration()
    site_root = Path(__file__).resolve().parents[2] / "src" / "photoness" / "site"

    assert validate_site_root(configuration, site_root) == []


def test_validator_reports_missing_catalogues(tmp_path: Path) -> None:
    (tmp_path / "index.html").write_text("<html></html>", encoding="utf-8")
    (tmp_path / "lang").mkdir()
    (tmp_path / "lang" / "en.json").write_text(json.dumps({}), encoding="utf-8")

    errors = validate_site_root(load_site_configuration(), tmp_path)

    assert any("'de'" in error for error in errors)
    assert any("'fr'" in error for error in errors)
    assert not any("'en'" in error for error in errors)


def test_validator_cli_exit_codes(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(tmp_path)]) == 1
    assert "index.html is missing" in capsys.readouterr().out

    assert main([str(tmp_path / "absent")]) == 1
    assert "not a directory" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_engine_built_from_configuration_switches_language() -> None:
    configuration = load_site_configuration()
    document = parse_document(
        '<html lang="es"><body><p data-i18n="nav.home">Inicio</p>'
        '<a data-lang="es">ES</a><a data-lang="en">EN</a>'
        '<script src="/studio/js/i18n.js"></script></body></html>'
    )
    requested: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(request.url.path)
        return httpx.Response(200, json={"nav.home": "Home"})

    client = create_client(
        "https://photoness.test",
        timeout=configuration.request_timeout,
        transport=httpx.MockTransport(handler),
    )
    engine = create_engine(
        document, storage=InMemoryStorage(), client=client, **configuration.engine_options()
    )

    async with client:
        await engine.switch_to("en")

    assert requested == ["/studio/lang/en.json"]
    assert document.p.get_text() == "Home"
    assert client.timeout.read is None
