"""In-memory stand-ins for the browser and the URL probe."""

import asyncio
from contextlib import asynccontextmanager

from course_scraper.exceptions import ExtractionTimeoutError


class FakeSession:
    """Page session answering XPath lookups from canned data.

    Args:
        texts: XPath -> texts visible right after load
        attributes: (XPath, attribute) -> values
        blocks: XPath -> rendered multi-line text
        delayed: XPath -> texts injected later, only seen by mutation waits
        revealed: trigger XPath -> texts that appear once it is clicked
        failing: XPaths whose lookup raises
        delay: Seconds every lookup takes
    """

    def __init__(self, texts=None, attributes=None, blocks=None, delayed=None,
                 revealed=None, failing=(), delay=0):
        self.texts = dict(texts or {})
        self.attributes = dict(attributes or {})
        self.blocks = dict(blocks or {})
        self.delayed = dict(delayed or {})
        self.revealed = dict(revealed or {})
        self.failing = set(failing)
        self.delay = delay
        self.clicks = []
        self.closed = False

    async def _lookup(self, locator):
        if self.delay:
            await asyncio.sleep(self.delay)
        if locator in self.failing:
            raise RuntimeError(f"detached node at {locator}")
        return list(self.texts.get(locator, []))

    async def text_of(self, locator):
        texts = await self._lookup(locator)
        return texts[0] if texts else None

    async def all_text_of(self, locator):
        return await self._lookup(locator)

    async def attribute_of(self, locator, name):
        values = self.attributes.get((locator, name), [])
        return values[0] if values else None

    async def all_attributes_of(self, locator, name):
        return list(self.attributes.get((locator, name), []))

    async def lines_of(self, locator):
        block = self.blocks.get(locator)
        if not block:
            return []
        return [line.strip() for line in block.split("\n") if line.strip()]

    async def all_text_after_mutation(self, locator, timeout=None):
        texts = await self._lookup(locator) or list(self.delayed.get(locator, []))
        if not texts:
            raise ExtractionTimeoutError(locator, timeout or 10000)
        return texts

    async def text_after_mutation(self, locator, timeout=None):
        texts = await self.all_text_after_mutation(locator, timeout)
        return texts[0]

    async def exists(self, locator):
        return locator in self.texts or locator in self.revealed

    async def click(self, locator):
        self.clicks.append(locator)
        self.texts.update(self.revealed.get(locator, {}))

    async def close(self):
        self.closed = True


class FakeBrowser:
    """Browser service handing out one canned session."""

    def __init__(self, page=None, error=None):
        self.page = page or FakeSession()
        self.error = error
        self.opened = []
        self.closed = 0

    @asynccontextmanager
    async def session(self, url, user_agent=None):
        self.opened.append((url, user_agent))
        if self.error:
            raise self.error
        try:
            yield self.page
        finally:
            self.closed += 1
            await self.page.close()


class FakeValidator:
    """URL probe with a fixed answer."""

    def __init__(self, exists=True):
        self.answer = exists
        self.checked = []

    async def exists(self, url):
        self.checked.append(url)
        return self.answer
