"""Browser automation service: page access for platform adapters.

Every adapter reads rendered content through ``PageSession``, a small
vocabulary of XPath-based primitives evaluated inside the page. Locators
are evaluated with ``document.evaluate`` so text-node paths such as
``//li[3]/text()[2]`` work as well as element paths.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

from playwright.async_api import Browser, BrowserContext, Page, Playwright, async_playwright
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from playwright_stealth import Stealth

from course_scraper.config import get_browser_settings
from course_scraper.exceptions import BrowserError, ExtractionTimeoutError, NavigationError

logger = logging.getLogger(__name__)

_stealth = Stealth()

# JavaScript evaluation code, each function receives [xpath, ...args]
FIRST_TEXT_JS = """
([xpath]) => {
    const node = document.evaluate(
        xpath, document, null, XPathResult.FIRST_ORDERED_NODE_TYPE, null
    ).singleNodeValue;
    return node ? node.textContent.trim() : null;
}
"""

ALL_TEXT_JS = """
([xpath]) => {
    const snapshot = document.evaluate(
        xpath, document, null, XPathResult.ORDERED_NODE_SNAPSHOT_TYPE, null
    );
    const texts = [];
    for (let i = 0; i < snapshot.snapshotLength; i++) {
        texts.push(snapshot.snapshotItem(i).textContent.trim());
    }
    return texts;
}
"""

FIRST_ATTRIBUTE_JS = """
([xpath, name]) => {
    const node = document.evaluate(
        xpath, document, null, XPathResult.FIRST_ORDERED_NODE_TYPE, null
    ).singleNodeValue;
    return node && node.getAttribute ? node.getAttribute(name) : null;
}
"""

ALL_ATTRIBUTES_JS = """
([xpath, name]) => {
    const snapshot = document.evaluate(
        xpath, document, null, XPathResult.ORDERED_NODE_SNAPSHOT_TYPE, null
    );
    const values = [];
    for (let i = 0; i < snapshot.snapshotLength; i++) {
        const node = snapshot.snapshotItem(i);
        const value = node.getAttribute ? node.getAttribute(name) : null;
        if (value) values.push(value);
    }
    return values;
}
"""

INNER_TEXT_JS = """
([xpath]) => {
    const node = document.evaluate(
        xpath, document, null, XPathResult.FIRST_ORDERED_NODE_TYPE, null
    ).singleNodeValue;
    if (!node) return null;
    return node.innerText !== undefined ? node.innerText : node.textContent;
}
"""

COUNT_JS = """
([xpath]) => document.evaluate(
    xpath, document, null, XPathResult.ORDERED_NODE_SNAPSHOT_TYPE, null
).snapshotLength
"""

# Resolves with the matching texts as soon as the locator matches, either
# right away or on the first DOM mutation that makes it match; resolves
# with null once the timeout elapses.
MUTATION_TEXT_JS = """
([xpath, timeout]) => new Promise((resolve) => {
    const collect = () => {
        const snapshot = document.evaluate(
            xpath, document, null, XPathResult.ORDERED_NODE_SNAPSHOT_TYPE, null
        );
        const texts = [];
        for (let i = 0; i < snapshot.snapshotLength; i++) {
            texts.push(snapshot.snapshotItem(i).textContent.trim());
        }
        return texts;
    };

    const initial = collect();
    if (initial.length > 0) {
        resolve(initial);
        return;
    }

    let timer = null;
    const observer = new MutationObserver(() => {
        const texts = collect();
        if (texts.length > 0) {
            clearTimeout(timer);
            observer.disconnect();
            resolve(texts);
        }
    });
    observer.observe(document, { childList: true, subtree: true, characterData: true });
    timer = setTimeout(() => {
        observer.disconnect();
        resolve(null);
    }, timeout);
})
"""


class PageSession:
    """A navigated page plus the browser resources that back it."""

    def __init__(self, playwright: Playwright, click_timeout: int, mutation_timeout: int):
        self._playwright = playwright
        self.browser: Optional[Browser] = None
        self.context: Optional[BrowserContext] = None
        self.page: Optional[Page] = None
        self._click_timeout = click_timeout
        self._mutation_timeout = mutation_timeout
        self._closed = False

    @property
    def closed(self) -> bool:
        """Whether resources have been released."""
        return self._closed

    async def text_of(self, locator: str) -> Optional[str]:
        """Trimmed text of the first element matching the locator."""
        return await self.page.evaluate(FIRST_TEXT_JS, [locator])

    async def all_text_of(self, locator: str) -> List[str]:
        """Trimmed text of every matching element, in document order."""
        return await self.page.evaluate(ALL_TEXT_JS, [locator]) or []

    async def attribute_of(self, locator: str, name: str) -> Optional[str]:
        """Attribute value of the first matching element."""
        return await self.page.evaluate(FIRST_ATTRIBUTE_JS, [locator, name])

    async def all_attributes_of(self, locator: str, name: str) -> List[str]:
        """Attribute values of every matching element that has the attribute."""
        return await self.page.evaluate(ALL_ATTRIBUTES_JS, [locator, name]) or []

    async def lines_of(self, locator: str) -> List[str]:
        """Rendered text of the first matching element, split into non-empty lines."""
        text = await self.page.evaluate(INNER_TEXT_JS, [locator])
        if not text:
            return []
        return [line.strip() for line in text.split("\n") if line.strip()]

    async def all_text_after_mutation(self, locator: str, timeout: Optional[int] = None) -> List[str]:
        """Texts of the elements injected into the page after load.

        Args:
            locator: XPath of the awaited elements
            timeout: Maximum wait in milliseconds

        Raises:
            ExtractionTimeoutError: If nothing matched before the timeout
        """
        timeout = timeout or self._mutation_timeout
        texts = await self.page.evaluate(MUTATION_TEXT_JS, [locator, timeout])
        if texts is None:
            raise ExtractionTimeoutError(locator, timeout)
        return texts

    async def text_after_mutation(self, locator: str, timeout: Optional[int] = None) -> Optional[str]:
        """Text of the first element injected into the page after load."""
        texts = await self.all_text_after_mutation(locator, timeout)
        return texts[0] if texts else None

    async def exists(self, locator: str) -> bool:
        """Check whether any element matches, without raising."""
        try:
            return await self.page.evaluate(COUNT_JS, [locator]) > 0
        except PlaywrightError as e:
            logger.debug(f"Existence check failed for {locator}: {e}")
            return False

    async def click(self, locator: str):
        """Click the first matching element, logging when it is absent."""
        try:
            await self.page.locator(f"xpath={locator}").first.click(timeout=self._click_timeout)
        except PlaywrightError as e:
            logger.warning(f"Could not click {locator}: {e}")

    async def close(self):
        """Close page, context and browser and stop the driver."""
        if self._closed:
            return
        self._closed = True

        try:
            if self.context:
                await self.context.close()
            if self.browser:
                await self.browser.close()
        finally:
            await self._playwright.stop()

        self.page = None
        self.context = None
        self.browser = None
        logger.debug("Browser session closed")


class BrowserService:
    """Opens isolated browser sessions for scraping."""

    def __init__(self):
        self._settings = get_browser_settings()

    async def open(self, url: str, user_agent: Optional[str] = None) -> PageSession:
        """Launch a browser, open a page and navigate to the URL.

        Args:
            url: Page to load
            user_agent: User agent override for sites with bot mitigation

        Returns:
            Navigated PageSession; the caller must close it

        Raises:
            BrowserError: If the Playwright driver could not be started
            NavigationError: If the page could not be loaded
        """
        try:
            playwright = await async_playwright().start()
        except Exception as e:
            raise BrowserError(f"Could not start the browser driver: {e}") from e

        session = PageSession(
            playwright,
            click_timeout=self._settings.click_timeout,
            mutation_timeout=self._settings.mutation_timeout,
        )

        try:
            session.browser = await playwright.chromium.launch(
                headless=self._settings.headless,
                args=[
                    "--disable-blink-features=AutomationControlled",
                    "--disable-dev-shm-usage",
                    "--no-sandbox",
                    "--disable-setuid-sandbox",
                ]
            )
            session.context = await session.browser.new_context(
                viewport={
                    "width": self._settings.viewport_width,
                    "height": self._settings.viewport_height,
                },
                user_agent=user_agent,
            )
            session.page = await session.context.new_page()
            if self._settings.stealth:
                await _stealth.apply_stealth_async(session.page)
            session.page.set_default_navigation_timeout(self._settings.timeout)

            logger.info(f"Navigating to: {url}")
            await session.page.goto(url, wait_until=self._settings.wait_until)
        except PlaywrightTimeoutError as e:
            await session.close()
            raise NavigationError(f"Timed out loading {url}: {e}") from e
        except PlaywrightError as e:
            await session.close()
            raise NavigationError(f"Navigation failed: {e}") from e
        except BaseException:
            await session.close()
            raise

        return session

    @asynccontextmanager
    async def session(self, url: str, user_agent: Optional[str] = None) -> AsyncIterator[PageSession]:
        """Open a session that is closed on every exit path."""
        page_session = await self.open(url, user_agent=user_agent)
        try:
            yield page_session
        finally:
            await page_session.close()
