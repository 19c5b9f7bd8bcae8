"""Custom exceptions for Course Scraper."""


class ScraperError(Exception):
    """Base exception for all scraper errors."""

    kind = "scraper_error"


class UnknownPlatformError(ScraperError):
    """Requested platform has no registered adapter."""

    kind = "unknown_platform"

    def __init__(self, platform: str):
        self.platform = platform
        super().__init__(f"Unknown platform: {platform}")


class UrlNotFoundError(ScraperError):
    """URL does not resolve to a live, canonical course page."""

    kind = "url_not_found"

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"URL does not exist: {url}")


class ScrapeTimeoutError(ScraperError):
    """Whole scrape call exceeded the caller's time budget."""

    kind = "timeout"


class BrowserError(ScraperError):
    """Browser automation errors."""

    kind = "browser_error"


class NavigationError(BrowserError):
    """Page navigation failed."""

    kind = "navigation_error"


class ExtractionError(ScraperError):
    """Course data extraction failed."""

    kind = "extraction_error"


class FieldExtractionError(ExtractionError):
    """A single field could not be extracted."""

    def __init__(self, field: str, cause: BaseException):
        self.field = field
        self.cause = cause
        super().__init__(f"Failed to extract '{field}': {cause}")


class ExtractionTimeoutError(ExtractionError, TimeoutError):
    """Awaited DOM content never appeared."""

    def __init__(self, locator: str, timeout: int):
        self.locator = locator
        self.timeout = timeout
        super().__init__(f"No element matched {locator} within {timeout} ms")


class UnsupportedCourseTypeError(ExtractionError):
    """Layout variant has no configured locator set."""

    def __init__(self, platform: str, variant: str):
        self.platform = platform
        self.variant = variant
        super().__init__(f"{platform} has no layout for course type '{variant}'")
