"""
Message translation for user-facing error bodies.

Messages are looked up by key (``forbidden``, ``authentication_required`` ...)
in per-language gettext catalogues under ``src/locales``. Compiled ``.mo``
files are optional: the ``.po`` sources are parsed at startup and consulted
whenever gettext has no entry for a key.
"""

import gettext
import os
from typing import Dict, Iterator, Optional, Tuple

from fastapi import Request

from src.core.config.settings import settings
from src.core.logging import logger

LOCALES_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "locales"))

DOMAIN = "messages"

_translations: Dict[str, gettext.NullTranslations] = {}
_po_catalogs: Dict[str, Dict[str, str]] = {}


def _unquote(value: str) -> str:
    return value.strip().strip('"')


def _parse_po_file(po_path: str) -> Dict[str, str]:
    """Read single-line ``msgid``/``msgstr`` pairs from a ``.po`` file.

    The header entry (empty msgid) is skipped; an empty msgstr maps the key
    to itself.
    """
    catalog: Dict[str, str] = {}
    msgid: Optional[str] = None
    with open(po_path, "r", encoding="utf-8") as po_file:
        for line in po_file:
            line = line.strip()
            if line.startswith("msgid "):
                msgid = _unquote(line[len("msgid "):])
            elif line.startswith("msgstr ") and msgid is not None:
                if msgid:
                    catalog[msgid] = _unquote(line[len("msgstr "):]) or msgid
                msgid = None
    return catalog


def setup_i18n() -> None:
    """Load the catalogue of every supported language.

    Raises:
        FileNotFoundError: If the locales directory is missing.
    """
    if not os.path.exists(LOCALES_PATH):
        raise FileNotFoundError(f"Locales directory not found: {LOCALES_PATH}")

    for lang in settings.SUPPORTED_LANGUAGES:
        _translations[lang] = gettext.translation(
            domain=DOMAIN, localedir=LOCALES_PATH, languages=[lang], fallback=True
        )
        po_path = os.path.join(LOCALES_PATH, lang, "LC_MESSAGES", f"{DOMAIN}.po")
        _po_catalogs[lang] = _parse_po_file(po_path) if os.path.exists(po_path) else {}
        logger.debug("i18n_language_loaded", language=lang, entries=len(_po_catalogs[lang]))


def get_translated_message(key: str, locale: str = settings.DEFAULT_LANGUAGE) -> str:
    """Translate ``key`` into ``locale``.

    Unknown locales use the default language; unknown keys are returned
    unchanged and logged.
    """
    if locale not in _translations:
        locale = settings.DEFAULT_LANGUAGE
    translation = _translations.get(locale)
    if translation is None:
        return key

    message = translation.gettext(key)
    if message == key:
        message = _po_catalogs.get(locale, {}).get(key, key)
    if message == key:
        logger.warning("translation_key_not_found", key=key, locale=locale)
    return message


def _accept_language(header: str) -> Iterator[Tuple[Tuple[float, int], str]]:
    for position, part in enumerate(header.split(",")):
        tag, _, params = part.strip().partition(";")
        quality = 1.0
        if params.strip().startswith("q="):
            try:
                quality = float(params.strip()[2:])
            except ValueError:
                quality = 0.0
        # Earlier entries win on equal quality.
        yield (-quality, position), tag.split("-")[0].lower()


def get_request_language(request: Request) -> str:
    """Pick the response language for ``request``.

    Order: the value resolved by the language middleware, the ``lang`` query
    parameter, the ``Accept-Language`` header, the default language.
    """
    resolved = getattr(request.state, "language", None)
    if resolved in settings.SUPPORTED_LANGUAGES:
        return resolved

    lang = request.query_params.get("lang")
    if lang in settings.SUPPORTED_LANGUAGES:
        return lang

    header = request.headers.get("Accept-Language", "")
    for _, candidate in sorted(_accept_language(header)):
        if candidate in settings.SUPPORTED_LANGUAGES:
            return candidate
    return settings.DEFAULT_LANGUAGE
