"""Platform adapters and their registry."""

from course_scraper.adapters.base import PlatformAdapter
from course_scraper.adapters.opensap import OpenSapAdapter
from course_scraper.adapters.registry import (
    AdapterFactory,
    available_platforms,
    normalize_platform,
    resolve,
)

__all__ = [
    "PlatformAdapter",
    "OpenSapAdapter",
    "AdapterFactory",
    "available_platforms",
    "normalize_platform",
    "resolve",
]
