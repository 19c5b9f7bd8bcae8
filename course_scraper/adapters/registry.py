"""Platform name to adapter factory dispatch."""

import re
from functools import partial
from types import MappingProxyType
from typing import Callable, List

from course_scraper.adapters import (
    classcentral,
    coursera,
    edraak,
    edx,
    funmooc,
    futurelearn,
    openclassrooms,
    opensap,
    pluralsight,
    skillshop,
    udemy,
    unow,
)
from course_scraper.adapters.base import PlatformAdapter
from course_scraper.adapters.opensap import OpenSapAdapter
from course_scraper.exceptions import UnknownPlatformError

AdapterFactory = Callable[..., PlatformAdapter]

_REGISTRY = MappingProxyType({
    "coursera": (PlatformAdapter, coursera.CONFIG),
    "edx": (PlatformAdapter, edx.CONFIG),
    "openclassrooms": (PlatformAdapter, openclassrooms.CONFIG),
    "futurelearn": (PlatformAdapter, futurelearn.CONFIG),
    "udemy": (PlatformAdapter, udemy.CONFIG),
    "edraak": (PlatformAdapter, edraak.CONFIG),
    "funmooc": (PlatformAdapter, funmooc.CONFIG),
    "skillshop": (PlatformAdapter, skillshop.CONFIG),
    "unow": (PlatformAdapter, unow.CONFIG),
    "pluralsight": (PlatformAdapter, pluralsight.CONFIG),
    "opensap": (OpenSapAdapter, opensap.CONFIG),
    "classcentral": (PlatformAdapter, classcentral.CONFIG),
})


def normalize_platform(name: str) -> str:
    """Lowercase a platform name and drop everything but letters and digits."""
    return re.sub(r"[^a-z0-9]", "", (name or "").lower())


def resolve(platform: str) -> AdapterFactory:
    """Look up the adapter factory for a platform.

    Args:
        platform: Platform name, e.g. "Coursera" or "fun-mooc"

    Returns:
        Callable building the adapter; accepts ``browser_service`` and
        ``validator`` keyword arguments

    Raises:
        UnknownPlatformError: If no adapter is registered under that name
    """
    try:
        adapter_class, config = _REGISTRY[normalize_platform(platform)]
    except KeyError:
        raise UnknownPlatformError(platform) from None
    return partial(adapter_class, config)


def available_platforms() -> List[str]:
    """Registered platform identifiers."""
    return sorted(_REGISTRY)
