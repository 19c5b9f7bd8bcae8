"""Declarative extraction configuration for platform adapters.

A platform is described by a ``PlatformConfig``: one ``Layout`` per course
offering type (course, specialization, path, ...) and a list of URL rules
that pick the layout. Each layout maps a field name to a ``FieldSpec``
holding an ordered fallback chain of locators and the strategy used to
read them.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Union
from urllib.parse import urlparse

from course_scraper.exceptions import UnsupportedCourseTypeError
from course_scraper.models.language import LanguageCode

logger = logging.getLogger(__name__)


class Strategy(str, Enum):
    """How the locators of a field are read."""

    FIRST = "first"
    ALL = "all"
    LINES = "lines"
    OUTLINE = "outline"
    SUMMARY = "summary"


@dataclass(frozen=True)
class Locator:
    """XPath expression, optionally reading an attribute instead of text."""

    path: str
    attribute: Optional[str] = None


LocatorLike = Union[str, Locator]


def _as_locators(values) -> Tuple[Locator, ...]:
    return tuple(v if isinstance(v, Locator) else Locator(v) for v in values)


@dataclass(frozen=True)
class FieldSpec:
    """Extraction rule for one logical field.

    Attributes:
        locators: Fallback chain, tried in order until one yields content
        strategy: Single value, all values, rendered lines or an outline
        wait: Wait for the content to be injected after page load
        pattern: Keep only values matching this regex (group 1 if present)
        split_lines: Split each matched block into its lines
        limit: Cap on the instructors field, applied after deduplication
        items: Outline item locators, ``{index}`` is the 1-based section
        timeout: Mutation wait in milliseconds (defaults to settings)
    """

    locators: Tuple[Locator, ...]
    strategy: Strategy = Strategy.FIRST
    wait: bool = False
    pattern: Optional[str] = None
    split_lines: bool = False
    limit: Optional[int] = None
    items: Tuple[str, ...] = ()
    timeout: Optional[int] = None

    def __post_init__(self):
        object.__setattr__(self, "locators", _as_locators(self.locators))
        object.__setattr__(self, "items", tuple(self.items))
        if self.wait and any(loc.attribute for loc in self.locators):
            raise ValueError("Attribute locators cannot wait for mutations")


def first(*locators: LocatorLike, **options) -> FieldSpec:
    """Field read from the first matching element."""
    return FieldSpec(locators, Strategy.FIRST, **options)


def every(*locators: LocatorLike, **options) -> FieldSpec:
    """Field read from every matching element."""
    return FieldSpec(locators, Strategy.ALL, **options)


def lines(*locators: LocatorLike, **options) -> FieldSpec:
    """Field read as the rendered lines of the first matching element."""
    return FieldSpec(locators, Strategy.LINES, **options)


def outline(*locators: LocatorLike, items: Tuple[str, ...], **options) -> FieldSpec:
    """Two-level programme: section titles mapped to their items."""
    return FieldSpec(locators, Strategy.OUTLINE, items=items, **options)


def summary(*locators: LocatorLike, items: Tuple[str, ...], **options) -> FieldSpec:
    """Flat programme of "Section : item. item" entries."""
    return FieldSpec(locators, Strategy.SUMMARY, items=items, **options)


@dataclass(frozen=True)
class Disclosure:
    """Interactive element that must be clicked before some fields render."""

    trigger: str
    fields: Tuple[str, ...]


@dataclass(frozen=True)
class Layout:
    """Locator set for one course offering type."""

    name: str
    fields: Mapping[str, FieldSpec]
    disclosures: Tuple[Disclosure, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))
        object.__setattr__(self, "disclosures", tuple(self.disclosures))


@dataclass(frozen=True)
class PlatformConfig:
    """Everything that distinguishes one platform adapter from another.

    Attributes:
        name: Platform name reported in records
        layouts: Layouts keyed by course offering type
        variants: Ordered (URL path fragment, layout name) rules
        default_layout: Layout used when no rule matches
        organization: Fixed organization for single-vendor platforms
        languages: Fixed languages for single-language platforms
        detect_languages: Fall back to statistical detection on the brief
        check_url: Probe the URL before opening a browser
        user_agent: Send the configured user agent (bot mitigation)
        trim_brief_at_colon: Drop brief paragraphs from the first one ending with ":"
    """

    name: str
    layouts: Mapping[str, Layout]
    variants: Tuple[Tuple[str, str], ...] = ()
    default_layout: str = "course"
    organization: Optional[str] = None
    languages: Tuple[LanguageCode, ...] = ()
    detect_languages: bool = False
    check_url: bool = True
    user_agent: bool = False
    trim_brief_at_colon: bool = False

    def __post_init__(self):
        object.__setattr__(self, "layouts", MappingProxyType(dict(self.layouts)))
        object.__setattr__(self, "variants", tuple(self.variants))
        object.__setattr__(self, "languages", tuple(self.languages))
        if self.default_layout not in self.layouts:
            raise ValueError(f"{self.name}: default layout '{self.default_layout}' is not defined")

    def classify(self, url: str) -> str:
        """Return the course offering type for a URL.

        Only the URL path is inspected so tracking parameters such as
        ``?specialization=...`` do not change the layout.
        """
        path = urlparse(url).path.lower()
        for fragment, variant in self.variants:
            if fragment in path:
                return variant
        return self.default_layout

    def layout_for(self, url: str) -> Layout:
        """Select the layout for a URL, falling back to the default one."""
        variant = self.classify(url)
        layout = self.layouts.get(variant)
        if layout is None:
            logger.warning(str(UnsupportedCourseTypeError(self.name, variant)))
            layout = self.layouts[self.default_layout]
        return layout
