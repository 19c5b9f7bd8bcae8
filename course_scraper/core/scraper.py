"""Main scraper orchestrator."""

import asyncio
import logging
from typing import Iterable, List, Optional, Tuple

from course_scraper.adapters import resolve
from course_scraper.config import get_scraper_settings
from course_scraper.exceptions import ScraperError, ScrapeTimeoutError, UrlNotFoundError
from course_scraper.models import ScrapeResult, ScrapeSummary
from course_scraper.services import BrowserService, UrlValidator, canonicalize_url

logger = logging.getLogger(__name__)


class CourseScraper:
    """Dispatches scrape calls to platform adapters."""

    def __init__(
        self,
        browser_service: BrowserService = None,
        validator: UrlValidator = None,
    ):
        self._browser = browser_service or BrowserService()
        self._validator = validator or UrlValidator()
        self._scraper_settings = get_scraper_settings()

    async def scrape(self, platform: str, url: str, timeout: Optional[float] = None) -> ScrapeResult:
        """Scrape a single course page.

        Args:
            platform: Platform name, e.g. "Coursera"
            url: Course page URL
            timeout: Budget for the whole call in seconds

        Returns:
            ScrapeResult holding either the record or the error
        """
        timeout = timeout if timeout is not None else self._scraper_settings.call_timeout
        result = ScrapeResult(platform=platform, url=canonicalize_url(url))

        try:
            adapter = resolve(platform)(browser_service=self._browser, validator=self._validator)
            result.platform = adapter.name
            if timeout:
                result.record = await asyncio.wait_for(adapter.scrape(url), timeout)
            else:
                result.record = await adapter.scrape(url)
        except UrlNotFoundError as e:
            logger.warning(str(e))
            result.error = e
        except ScraperError as e:
            logger.error(f"Scrape failed for {url}: {e}")
            result.error = e
        except asyncio.TimeoutError:
            logger.error(f"Scrape of {url} exceeded {timeout} s")
            result.error = ScrapeTimeoutError(f"Scrape of {url} exceeded {timeout} s")

        return result

    async def scrape_many(
        self,
        platform: str,
        urls: Iterable[str],
        timeout: Optional[float] = None,
    ) -> Tuple[List[ScrapeResult], ScrapeSummary]:
        """Scrape several pages of one platform, one after the other.

        Args:
            platform: Platform name
            urls: Course page URLs
            timeout: Budget for each call in seconds

        Returns:
            Results in input order and their summary
        """
        results = []
        summary = ScrapeSummary()

        for i, url in enumerate(urls, 1):
            logger.info(f"[{i}] {url}")
            result = await self.scrape(platform, url, timeout=timeout)
            results.append(result)
            summary.add_result(result)

        return results, summary


async def scrape(platform: str, url: str, timeout: Optional[float] = None) -> ScrapeResult:
    """Convenience function to scrape one course page.

    Args:
        platform: Platform name
        url: Course page URL
        timeout: Budget for the whole call in seconds

    Returns:
        ScrapeResult holding either the record or the error
    """
    scraper = CourseScraper()
    return await scraper.scrape(platform, url, timeout=timeout)
