"""Course Scraper - Extracts structured course metadata from e-learning platforms.

Each supported platform has an adapter that drives a headless browser over a
course page and normalizes what it reads into a ``CourseRecord``.

Usage:
    # CLI
    python -m course_scraper coursera https://www.coursera.org/learn/machine-learning
    course-scraper --list-platforms

    # Programmatic
    from course_scraper import scrape
    result = await scrape("Coursera", url)
    print(result.record.to_json(indent=2))
"""

from course_scraper.adapters import PlatformAdapter, available_platforms, resolve
from course_scraper.config import settings
from course_scraper.core import CourseScraper, scrape
from course_scraper.exceptions import (
    ScraperError,
    UnknownPlatformError,
    UrlNotFoundError,
    ScrapeTimeoutError,
    BrowserError,
    NavigationError,
    ExtractionError,
)
from course_scraper.models import (
    CourseRecord,
    LanguageCode,
    ScrapeResult,
    ScrapeSummary,
)

__version__ = "1.0.0"
__all__ = [
    # Main
    "CourseScraper",
    "scrape",
    "resolve",
    "available_platforms",
    "PlatformAdapter",
    "settings",
    # Exceptions
    "ScraperError",
    "UnknownPlatformError",
    "UrlNotFoundError",
    "ScrapeTimeoutError",
    "BrowserError",
    "NavigationError",
    "ExtractionError",
    # Models
    "CourseRecord",
    "LanguageCode",
    "ScrapeResult",
    "ScrapeSummary",
]
