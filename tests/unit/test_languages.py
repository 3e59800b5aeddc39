import pytest

from photoness.i18n.languages import DEFAULT_LANGUAGES, LanguageSet


def test_default_set_matches_site_languages() -> None:
    assert DEFAULT_LANGUAGES.codes == ("es", "en", "de", "fr")
    assert DEFAULT_LANGUAGES.default == "es"


@pytest.mark.parametrize("value", ["it", "EN", "", None, 42, "en-GB"])
def test_coerce_replaces_foreign_values_with_default(value: object) -> None:
    assert DEFAULT_LANGUAGES.coerce(value) == "es"


def test_coerce_keeps_supported_codes() -> None:
    assert [DEFAULT_LANGUAGES.coerce(code) for code in DEFAULT_LANGUAGES] == [
        "es",
        "en",
        "de",
        "fr",
    ]


def test_default_must_be_a_member() -> None:
    with pytest.raises(ValueError):
        LanguageSet(codes=("en", "de"), default="es")

    with pytest.raises(ValueError):
        LanguageSet(codes=(), default="es")
