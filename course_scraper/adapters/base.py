"""Generic platform adapter driven by a ``PlatformConfig``."""

import asyncio
import logging
import re
from typing import Any, Dict, List, Optional

from course_scraper.config import get_browser_settings
from course_scraper.exceptions import (
    ExtractionTimeoutError,
    FieldExtractionError,
    UrlNotFoundError,
)
from course_scraper.models import (
    CourseRecord,
    FieldSpec,
    Layout,
    LanguageCode,
    Locator,
    PlatformConfig,
    Strategy,
)
from course_scraper.services import BrowserService, PageSession, UrlValidator, canonicalize_url
from course_scraper.utils import (
    clean_lines,
    clean_text,
    compute_duration,
    dedupe_preserve_order,
    detect_language,
    parse_languages,
)

logger = logging.getLogger(__name__)

RawFields = Dict[str, Any]


def as_list(value) -> List[str]:
    """Wrap a raw field value into a list of strings."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


class PlatformAdapter:
    """Scrapes one course page of a platform into a ``CourseRecord``.

    The adapter owns the lifecycle of a scrape: URL probe, scoped browser
    session, disclosure clicks, concurrent field extraction with fallback
    chains, normalization and record assembly. Platforms differ only by
    their ``PlatformConfig``; subclasses may override ``refine`` when a
    field has to be carved out of another one.
    """

    def __init__(
        self,
        config: PlatformConfig,
        browser_service: BrowserService = None,
        validator: UrlValidator = None,
    ):
        self.config = config
        self._browser = browser_service or BrowserService()
        self._validator = validator or UrlValidator()

    @property
    def name(self) -> str:
        """Platform name reported in records."""
        return self.config.name

    async def scrape(self, url: str) -> CourseRecord:
        """Scrape a course page.

        Args:
            url: Course page URL

        Returns:
            Normalized course record

        Raises:
            UrlNotFoundError: If the URL is not a live course page
            NavigationError: If the page could not be loaded
        """
        url = canonicalize_url(url)

        if self.config.check_url and not await self._validator.exists(url):
            raise UrlNotFoundError(url)

        layout = self.config.layout_for(url)
        user_agent = get_browser_settings().user_agent if self.config.user_agent else None

        logger.info(f"Scraping {self.name} {layout.name}: {url}")
        async with self._browser.session(url, user_agent=user_agent) as session:
            raw = await self.extract(session, layout)

        return self.assemble(url, self.refine(raw), layout)

    async def extract(self, session: PageSession, layout: Layout) -> RawFields:
        """Read every field of a layout from the page.

        Disclosures are clicked first, one after the other. Fields gated by
        a missing trigger are left out. The remaining fields are read
        concurrently, each one isolated from the failures of the others.
        """
        skipped = set()
        for disclosure in layout.disclosures:
            if await session.exists(disclosure.trigger):
                await session.click(disclosure.trigger)
            else:
                logger.info(f"{self.name}: no element at {disclosure.trigger}, skipping {', '.join(disclosure.fields)}")
                skipped.update(disclosure.fields)

        names = [name for name in layout.fields if name not in skipped]
        values = await asyncio.gather(
            *(self._extract_field(session, name, layout.fields[name]) for name in names)
        )
        return dict(zip(names, values))

    async def _extract_field(self, session: PageSession, name: str, spec: FieldSpec):
        try:
            if spec.strategy in (Strategy.OUTLINE, Strategy.SUMMARY):
                return await self._read_outline(session, spec)
            return await self._read_chain(session, spec)
        except Exception as e:
            logger.warning(f"{self.name}: {FieldExtractionError(name, e)}")
            return None

    async def _read_chain(self, session: PageSession, spec: FieldSpec, single: bool = None):
        """Try each locator in order until one yields content."""
        if single is None:
            single = spec.strategy is Strategy.FIRST

        for locator in spec.locators:
            try:
                values = await self._read(session, locator, spec, single)
            except ExtractionTimeoutError as e:
                logger.debug(f"{self.name}: {e}")
                continue

            values = self._filter(values, spec)
            if values:
                return values[0] if single else values

        return None if single else []

    async def _read(self, session: PageSession, locator: Locator, spec: FieldSpec, single: bool) -> List[str]:
        if spec.strategy is Strategy.LINES:
            return await session.lines_of(locator.path)

        if single:
            if locator.attribute:
                value = await session.attribute_of(locator.path, locator.attribute)
            elif spec.wait:
                value = await session.text_after_mutation(locator.path, spec.timeout)
            else:
                value = await session.text_of(locator.path)
            return [value] if value else []

        if locator.attribute:
            return await session.all_attributes_of(locator.path, locator.attribute)
        if spec.wait:
            return await session.all_text_after_mutation(locator.path, spec.timeout)
        return await session.all_text_of(locator.path)

    @staticmethod
    def _filter(values: List[str], spec: FieldSpec) -> List[str]:
        if spec.split_lines:
            values = [line for value in values for line in clean_lines(value)]

        if spec.pattern:
            matched = []
            for value in values:
                match = re.search(spec.pattern, value)
                if match:
                    matched.append(match.group(1) if match.groups() else value)
            values = matched

        return [value for value in values if value and value.strip()]

    async def _read_outline(self, session: PageSession, spec: FieldSpec):
        """Walk section titles and the items listed under each of them.

        Items are looked up by the section's position among all matched
        titles, blank ones included, so a blank title never shifts the
        items of the sections after it. Sections sharing a title are merged
        under its first occurrence.
        """
        titles = await self._read_titles(session, spec)
        sections = await asyncio.gather(
            *(self._read_items(session, spec, index) for index in range(1, len(titles) + 1))
        )

        entries = []
        for title, items in zip(titles, sections):
            title_lines = clean_lines(title or "")
            if title_lines:
                entries.append((title_lines[0], items))

        if spec.strategy is Strategy.OUTLINE:
            programme = {}
            for title, items in entries:
                programme.setdefault(title, []).extend(items)
            return programme

        summaries = []
        for title, items in entries:
            text = ". ".join(item.rstrip(".") for item in items)
            summaries.append(f"{title} : {text}" if text else title)
        return summaries

    async def _read_titles(self, session: PageSession, spec: FieldSpec) -> List[str]:
        """Unfiltered titles of the first locator that matches any text."""
        for locator in spec.locators:
            try:
                titles = await self._read(session, locator, spec, single=False)
            except ExtractionTimeoutError as e:
                logger.debug(f"{self.name}: {e}")
                continue
            if any(title and title.strip() for title in titles):
                return titles
        return []

    @staticmethod
    async def _read_items(session: PageSession, spec: FieldSpec, index: int) -> List[str]:
        for template in spec.items:
            texts = await session.all_text_of(template.replace("{index}", str(index)))
            items = [item for item in (clean_text(text) for text in texts) if item]
            if items:
                return items
        return []

    def refine(self, raw: RawFields) -> RawFields:
        """Hook for platforms whose fields are derived from other fields."""
        return raw

    def assemble(self, url: str, raw: RawFields, layout: Layout) -> CourseRecord:
        """Normalize raw fragments and build the record."""
        title = self._first_text(raw.get("title"))
        brief = self._brief(raw.get("brief"))

        return CourseRecord(
            title=title,
            platform=self.name,
            url=url,
            organization=self._organization(raw.get("organization")),
            brief=brief,
            programme=self._programme(raw.get("programme")),
            duration_minutes=self._duration(raw.get("duration"), raw.get("pace")),
            instructors=self._instructors(raw.get("instructors"), self._limit(layout, "instructors")),
            languages=self._languages(raw.get("languages"), brief or title),
        )

    @staticmethod
    def _limit(layout: Layout, name: str) -> Optional[int]:
        spec = layout.fields.get(name)
        return spec.limit if spec else None

    @staticmethod
    def _first_text(value) -> Optional[str]:
        for text in as_list(value):
            cleaned = clean_text(text)
            if cleaned:
                return cleaned
        return None

    def _organization(self, value) -> Optional[str]:
        if self.config.organization:
            return self.config.organization
        names = dedupe_preserve_order(name for name in (clean_text(v) for v in as_list(value)) if name)
        return ", ".join(names) or None

    def _brief(self, value) -> Optional[str]:
        paragraphs = as_list(value)
        if self.config.trim_brief_at_colon:
            for index, paragraph in enumerate(paragraphs):
                if paragraph.rstrip().endswith(":"):
                    paragraphs = paragraphs[:index]
                    break
        return clean_text(" ".join(paragraphs)) or None

    @staticmethod
    def _programme(value):
        if isinstance(value, dict):
            programme = {}
            for title, items in value.items():
                title = clean_text(title)
                if title:
                    programme.setdefault(title, []).extend(
                        item for item in (clean_text(v) for v in items) if item
                    )
            return programme
        return [item for item in (clean_text(v) for v in as_list(value)) if item]

    @staticmethod
    def _duration(duration, pace) -> Optional[str]:
        durations = as_list(duration)
        paces = as_list(pace)
        if not durations and not paces:
            return None
        text = " ".join(durations[:1] + paces[:1])
        return compute_duration(clean_text(text))

    @staticmethod
    def _instructors(value, limit: Optional[int]) -> List[str]:
        names = dedupe_preserve_order(name for name in (clean_text(v) for v in as_list(value)) if name)
        return names[:limit] if limit else names

    def _languages(self, value, fallback_text: Optional[str]) -> List[LanguageCode]:
        if self.config.languages:
            return list(self.config.languages)
        languages = parse_languages(" ".join(as_list(value)))
        if not languages and self.config.detect_languages:
            languages = detect_language(fallback_text)
        return languages
