"""Per-request translation of user-facing strings."""

import json
import logging
import re
from functools import lru_cache
from pathlib import Path

from fastapi import Request

from findit.config import settings

logger = logging.getLogger(__name__)

LOCALE_PATTERN = re.compile(r"^[A-Za-z]{2,3}([_-][A-Za-z0-9]{2,8})?$")


class Translator:
    def __init__(self, locale: str, catalog: dict[str, str] | None = None):
        self.locale = locale
        self.catalog = catalog or {}

    def __call__(self, text: str, **params) -> str:
        translated = self.catalog.get(text) or text
        if params:
            return translated.format(**params)
        return translated


@lru_cache(maxsize=None)
def load_catalog(i18n_dir: str, locale: str) -> dict[str, str]:
    path = Path(i18n_dir) / f"{locale}.json"
    if not path.exists():
        return {}
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        logger.warning(f"Ignoring invalid translation catalog {path}: {e}")
        return {}


def primary_language(tag: str) -> str:
    return tag.replace("_", "-").split("-")[0].lower()


def resolve_locale(request: Request) -> str:
    """Cookie first, then the first Accept-Language tag, then the default."""
    cookie = request.cookies.get("language")
    if cookie and LOCALE_PATTERN.match(cookie):
        return primary_language(cookie)

    accept = request.headers.get("accept-language", "")
    first = accept.split(",")[0].split(";")[0].strip()
    if first and LOCALE_PATTERN.match(first):
        return primary_language(first)

    return settings.default_locale


def get_translator(request: Request) -> Translator:
    locale = resolve_locale(request)
    return Translator(locale, load_catalog(settings.i18n_dir, locale))
