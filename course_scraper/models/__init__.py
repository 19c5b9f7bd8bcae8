"""Data models for Course Scraper."""

from course_scraper.models.language import LanguageCode
from course_scraper.models.course import CourseRecord
from course_scraper.models.extraction import (
    Disclosure,
    FieldSpec,
    Layout,
    Locator,
    PlatformConfig,
    Strategy,
)
from course_scraper.models.result import ScrapeResult, ScrapeSummary

__all__ = [
    "LanguageCode",
    "CourseRecord",
    "Disclosure",
    "FieldSpec",
    "Layout",
    "Locator",
    "PlatformConfig",
    "Strategy",
    "ScrapeResult",
    "ScrapeSummary",
]
