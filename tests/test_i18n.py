from starlette.requests import Request

from findit.i18n import Translator, get_translator, load_catalog, resolve_locale


def make_request(headers: dict[str, str]) -> Request:
    raw = [(k.lower().encode(), v.encode()) for k, v in headers.items()]
    return Request({"type": "http", "headers": raw})


def test_translator_identity():
    translate = Translator("en")
    assert translate("Hello") == "Hello"
    assert translate("Line {lines}", lines="3") == "Line 3"


def test_translator_catalog():
    translate = Translator("de", {"Hello": "Hallo {name}"})
    assert translate("Hello", name="Welt") == "Hallo Welt"
    assert translate("Unknown") == "Unknown"


def test_resolve_locale_cookie():
    assert resolve_locale(make_request({"Cookie": "language=de"})) == "de"


def test_resolve_locale_cookie_region():
    assert resolve_locale(make_request({"Cookie": "language=de-DE"})) == "de"


def test_resolve_locale_accept_language():
    request = make_request({"Accept-Language": "fr-CH, fr;q=0.9, en;q=0.8"})
    assert resolve_locale(request) == "fr"


def test_resolve_locale_default():
    assert resolve_locale(make_request({})) == "en"


def test_resolve_locale_rejects_paths():
    assert resolve_locale(make_request({"Cookie": "language=../../etc"})) == "en"


def test_get_translator_loads_catalog():
    translate = get_translator(make_request({"Cookie": "language=de"}))
    assert translate.locale == "de"
    assert translate(
        "Try to identify any variables in the code that might contain arbitrary user input."
    ).startswith("Versuche")


def test_load_catalog_missing(tmp_path):
    assert load_catalog(str(tmp_path), "xx") == {}


def test_get_translator_regional_cookie():
    translate = get_translator(make_request({"Cookie": "language=de-DE"}))
    assert translate.locale == "de"
    assert translate(
        "Try to identify any variables in the code that might contain arbitrary user input."
    ).startswith("Versuche")
