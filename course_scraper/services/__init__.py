"""Services for Course Scraper."""

from course_scraper.services.browser_service import BrowserService, PageSession
from course_scraper.services.url_validator import UrlValidator, canonicalize_url

__all__ = [
    "BrowserService",
    "PageSession",
    "UrlValidator",
    "canonicalize_url",
]
