"""Course language mapping and detection.

Pages either declare their languages ("English, Français", "Langue :
Anglais") or say nothing, in which case the language of the course
description is detected statistically. Both paths map into the closed
``LanguageCode`` set; anything outside it is discarded.
"""

import logging
import re
from typing import List, Optional

from langdetect import DetectorFactory, detect_langs
from langdetect.lang_detect_exception import LangDetectException

from course_scraper.models.language import LanguageCode
from course_scraper.utils.text import dedupe_preserve_order

logger = logging.getLogger(__name__)

# Deterministic detection: the same brief always yields the same language
DetectorFactory.seed = 0

LANGUAGE_NAMES = {
    "english": LanguageCode.ENGLISH,
    "anglais": LanguageCode.ENGLISH,
    "inglés": LanguageCode.ENGLISH,
    "ingles": LanguageCode.ENGLISH,
    "englisch": LanguageCode.ENGLISH,
    "الإنجليزية": LanguageCode.ENGLISH,
    "french": LanguageCode.FRENCH,
    "français": LanguageCode.FRENCH,
    "francais": LanguageCode.FRENCH,
    "francés": LanguageCode.FRENCH,
    "französisch": LanguageCode.FRENCH,
    "الفرنسية": LanguageCode.FRENCH,
    "arabic": LanguageCode.ARABIC,
    "arabe": LanguageCode.ARABIC,
    "árabe": LanguageCode.ARABIC,
    "العربية": LanguageCode.ARABIC,
    "spanish": LanguageCode.SPANISH,
    "español": LanguageCode.SPANISH,
    "espagnol": LanguageCode.SPANISH,
    "german": LanguageCode.GERMAN,
    "deutsch": LanguageCode.GERMAN,
    "allemand": LanguageCode.GERMAN,
    "portuguese": LanguageCode.PORTUGUESE,
    "português": LanguageCode.PORTUGUESE,
    "portugais": LanguageCode.PORTUGUESE,
    "italian": LanguageCode.ITALIAN,
    "italiano": LanguageCode.ITALIAN,
    "italien": LanguageCode.ITALIAN,
}

ISO_CODES = {
    "en": LanguageCode.ENGLISH,
    "fr": LanguageCode.FRENCH,
    "ar": LanguageCode.ARABIC,
    "es": LanguageCode.SPANISH,
    "de": LanguageCode.GERMAN,
    "pt": LanguageCode.PORTUGUESE,
    "it": LanguageCode.ITALIAN,
}

_WORD = re.compile(r"\w+")


def parse_languages(text: Optional[str]) -> List[LanguageCode]:
    """Map language names declared on the page.

    Args:
        text: Structured language field, e.g. "English, Français"

    Returns:
        Known languages in order of appearance, without duplicates
    """
    if not text:
        return []
    found = (LANGUAGE_NAMES.get(word.lower()) for word in _WORD.findall(text))
    return dedupe_preserve_order(code for code in found if code is not None)


def detect_language(text: Optional[str]) -> List[LanguageCode]:
    """Detect the language of free text.

    Args:
        text: Prose such as a course description

    Returns:
        The top-ranked language when it is supported, otherwise empty
    """
    if not text or not text.strip():
        return []
    try:
        ranked = detect_langs(text)
    except LangDetectException as e:
        logger.debug(f"Language detection failed: {e}")
        return []
    if not ranked:
        return []
    code = ISO_CODES.get(ranked[0].lang)
    return [code] if code else []


def detect_languages(text: Optional[str]) -> List[LanguageCode]:
    """Explicit language names first, statistical detection otherwise."""
    return parse_languages(text) or detect_language(text)
