"""Result models for scraping operations."""

from dataclasses import dataclass, field
from typing import List, Optional

from course_scraper.exceptions import ScraperError, UrlNotFoundError
from course_scraper.models.course import CourseRecord


@dataclass
class ScrapeResult:
    """Outcome of scraping a single course URL."""

    platform: str
    url: str
    record: Optional[CourseRecord] = None
    error: Optional[ScraperError] = None

    @property
    def success(self) -> bool:
        """Whether a record was produced."""
        return self.record is not None and self.error is None

    def to_dict(self) -> dict:
        """Convert to a JSON-compatible dictionary."""
        if self.success:
            return self.record.to_dict()
        return {
            "platform": self.platform,
            "url": self.url,
            "error": self.error.kind if self.error else "unknown",
            "message": str(self.error) if self.error else "",
        }


@dataclass
class ScrapeSummary:
    """Summary of a batch of scrape calls."""

    total_urls: int = 0
    successful: int = 0
    not_found: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)

    @property
    def failure_count(self) -> int:
        """Number of URLs without a record."""
        return len(self.not_found) + len(self.failed)

    def add_result(self, result: ScrapeResult):
        """Add a scrape result to summary."""
        self.total_urls += 1
        if result.success:
            self.successful += 1
        elif isinstance(result.error, UrlNotFoundError):
            self.not_found.append(result.url)
        else:
            self.failed.append(result.url)

    def format_summary(self) -> str:
        """Format summary as string."""
        lines = [
            "=" * 60,
            "SCRAPING COMPLETE",
            "=" * 60,
            f"Total URLs: {self.total_urls}",
            f"Successful: {self.successful}",
            f"Not found: {len(self.not_found)}",
            f"Failed: {len(self.failed)}",
            "=" * 60,
        ]

        if self.not_found:
            lines.append(f"\nURLs not found or no longer exist ({len(self.not_found)}):")
            for url in self.not_found[:10]:
                lines.append(f"  - {url}")
            if len(self.not_found) > 10:
                lines.append(f"  ... and {len(self.not_found) - 10} more")

        return "\n".join(lines)
