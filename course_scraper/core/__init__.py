"""Core scraper logic."""

from course_scraper.core.scraper import CourseScraper, scrape

__all__ = ["CourseScraper", "scrape"]
