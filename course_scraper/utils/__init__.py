"""Field normalizers for scraped course data."""

from course_scraper.utils.duration import (
    EMPTY_DURATION,
    DurationSpec,
    compute_duration,
    hours_to_hhmm,
    minutes_to_hhmm,
    months_to_hhmm,
    parse_duration,
    weeks_to_hhmm,
)
from course_scraper.utils.languages import detect_language, detect_languages, parse_languages
from course_scraper.utils.text import clean_lines, clean_text, dedupe_preserve_order

__all__ = [
    "EMPTY_DURATION",
    "DurationSpec",
    "compute_duration",
    "hours_to_hhmm",
    "minutes_to_hhmm",
    "months_to_hhmm",
    "parse_duration",
    "weeks_to_hhmm",
    "detect_language",
    "detect_languages",
    "parse_languages",
    "clean_lines",
    "clean_text",
    "dedupe_preserve_order",
]
