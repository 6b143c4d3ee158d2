from unittest.mock import MagicMock

from bgremover.i18n import DEFAULT_LANGUAGE, TRANSLATIONS, Translator


class TestTranslate:
    def test_translates_in_selected_language(self) -> None:
        translator = Translator(language="ar")

        assert translator.translate("error.invalid_type") == "يرجى اختيار ملف صورة صالح"

    def test_formats_arguments(self) -> None:
        translator = Translator(language="en")

        assert translator.translate("dialog.saved_message", path="/tmp/x.png") == "Saved to:\n/tmp/x.png"

    def test_unknown_key_returns_key(self) -> None:
        assert Translator(language="en").translate("missing.key") == "missing.key"

    def test_both_languages_define_the_same_keys(self) -> None:
        assert set(TRANSLATIONS["ar"]) == set(TRANSLATIONS["en"])


class TestSetLanguage:
    def test_notifies_listeners_on_change(self) -> None:
        translator = Translator(language="ar")
        listener = MagicMock()
        translator.register(listener)

        translator.set_language("en")

        listener.assert_called_once_with()
        assert translator.language == "en"

    def test_same_language_does_not_notify(self) -> None:
        translator = Translator(language="en")
        listener = MagicMock()
        translator.register(listener)

        translator.set_language("en")

        listener.assert_not_called()

    def test_unknown_language_falls_back_to_default(self) -> None:
        translator = Translator(language="en")

        translator.set_language("xx", notify=False)

        assert translator.language == DEFAULT_LANGUAGE


def test_language_names_are_localized() -> None:
    translator = Translator(language="en")

    assert translator.available_languages() == ["en", "ar"]
    assert translator.language_name("ar") == "Arabic"
    assert translator.language_name("fr") == "fr"
