"""Configuration module for Course Scraper."""

from course_scraper.config.settings import (
    Settings,
    settings,
    get_browser_settings,
    get_validator_settings,
    get_scraper_settings,
)

__all__ = [
    "Settings",
    "settings",
    "get_browser_settings",
    "get_validator_settings",
    "get_scraper_settings",
]
