"""Test configuration utilities and shared fixtures."""

import sys
from pathlib import Path

# Ensure the ``src`` directory is importable when tests are executed without an
# editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402
from bs4 import BeautifulSoup  # noqa: E402
from flask import Flask  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402

from photoness.backend.app import create_app  # noqa: E402
from photoness.i18n import parse_document  # noqa: E402

SAMPLE_PAGE = """<!DOCTYPE html>
<html lang="es">
<head>
  <title data-i18n-title="home.title">Estudio</title>
  <meta name="description" content="Estudio de fotografía">
</head>
<body>
  <nav>
    <a href="#" data-lang="es">ES</a>
    <a href="#" data-lang="en"><span class="flag">EN</span></a>
    <a href="#" data-lang="de">DE</a>
  </nav>
  <h1 data-i18n="a.b">Hola autor</h1>
  <p data-i18n="missing.key">Texto original</p>
  <p data-i18n="home.lead">Retratos</p>
  <input name="email" placeholder="Correo" data-i18n-placeholder="form.email">
  <p class="plain">Sin marcar</p>
  <script src="js/i18n.js"></script>
</body>
</html>
"""


@pytest.fixture()
def app() -> Flask:
    """Return a configured Flask application for integration tests."""

    application = create_app()
    application.config.update(TESTING=True)
    return application


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Provide a test client bound to the configured Flask app."""

    return app.test_client()


@pytest.fixture()
def client_factory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Build a client serving a throwaway site made of the given files."""

    def build(files: dict[str, str]) -> tuple[FlaskClient, Path]:
        root = tmp_path / "site"
        for relative, content in files.items():
            target = root / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")

        monkeypatch.setenv("PHOTONESS_SITE_ROOT", str(root))
        application = create_app()
        application.config.update(TESTING=True)
        return application.test_client(), root

    return build


@pytest.fixture()
def sample_page() -> str:
    """Raw markup of a page carrying every recognised markup flag."""

    return SAMPLE_PAGE


@pytest.fixture()
def document(sample_page: str) -> BeautifulSoup:
    return parse_document(sample_page)
