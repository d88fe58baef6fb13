"""Tests for the public package surface."""

import keytranslate
from keytranslate.locale_utils import get_babel_locale, normalize_locale


class TestPublicApi:
    """Top-level exports."""

    def test_all_exports_resolve(self) -> None:
        for name in keytranslate.__all__:
            assert hasattr(keytranslate, name), name

    def test_version_is_string(self) -> None:
        assert isinstance(keytranslate.__version__, str)
        assert keytranslate.__version__

    def test_translator_and_aliases_compose(self) -> None:
        table = keytranslate.resolve_aliases(
            {"brand": "Acme", "welcome": {"1": "One {{brand}} store", "n": "{n} {{brand}} stores"}}
        )
        t = keytranslate.make_translator(table)
        assert t("welcome", 1) == "One Acme store"
        assert t("welcome", 3) == "3 Acme stores"


class TestLocaleUtils:
    """Locale normalization for Babel."""

    def test_normalize(self) -> None:
        assert normalize_locale("en-US") == "en_US"
        assert normalize_locale("pt_BR") == "pt_BR"

    def test_babel_locale_cached(self) -> None:
        assert get_babel_locale("de-DE") is get_babel_locale("de-DE")
        assert get_babel_locale("de-DE").territory == "DE"
