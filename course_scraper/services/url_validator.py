"""URL existence probe used before opening a browser."""

import logging
from typing import Optional
from urllib.parse import unquote, urldefrag, urlparse

import httpx

from course_scraper.config import get_validator_settings

logger = logging.getLogger(__name__)


def canonicalize_url(url: str) -> str:
    """Strip the fragment and surrounding whitespace from a URL."""
    return urldefrag(url.strip()).url


def _same_path(requested: str, resolved: str) -> bool:
    # httpx reports the final path percent-decoded
    return requested.rstrip("/") == resolved.rstrip("/")


class UrlValidator:
    """Checks that a course URL is live and not redirected elsewhere.

    A course that was removed is usually redirected to a catalog or search
    page, so a successful response is only accepted when the final path is
    the requested one.
    """

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._settings = get_validator_settings()
        self._transport = transport

    async def exists(self, url: str) -> bool:
        """Check whether the URL resolves to a live page at the same path.

        Args:
            url: URL to probe

        Returns:
            True if the page exists, False otherwise (never raises)
        """
        try:
            url = canonicalize_url(url)
            requested_path = unquote(urlparse(url).path)
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=self._settings.timeout,
                follow_redirects=True,
                headers={"User-Agent": self._settings.user_agent},
            ) as client:
                response = await client.head(url)
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            logger.warning(f"Error checking URL {url}: {e}")
            return False

        if not response.is_success:
            logger.info(f"URL {url} answered {response.status_code}")
            return False

        if not _same_path(requested_path, response.url.path):
            logger.info(f"URL {url} redirected to {response.url}")
            return False

        return True
