import pytest
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from course_scraper.exceptions import BrowserError, ExtractionTimeoutError, NavigationError
from course_scraper.services import browser_service
from course_scraper.services.browser_service import BrowserService, PageSession


class FakeLocator:
    def __init__(self, error=None):
        self.error = error
        self.first = self
        self.clicked = False

    async def click(self, timeout=None):
        if self.error:
            raise self.error
        self.clicked = True


class FakePage:
    def __init__(self, goto_error=None, evaluate_result=None, evaluate_error=None, click_error=None):
        self.goto_error = goto_error
        self.evaluate_result = evaluate_result
        self.evaluate_error = evaluate_error
        self.locators = {}
        self.click_error = click_error
        self.visited = []
        self.navigation_timeout = None

    def set_default_navigation_timeout(self, timeout):
        self.navigation_timeout = timeout

    async def goto(self, url, wait_until=None):
        if self.goto_error:
            raise self.goto_error
        self.visited.append(url)

    async def evaluate(self, script, args):
        if self.evaluate_error:
            raise self.evaluate_error
        return self.evaluate_result

    def locator(self, selector):
        return self.locators.setdefault(selector, FakeLocator(self.click_error))


class FakeContext:
    def __init__(self, page):
        self.page = page
        self.closed = False
        self.options = {}

    async def new_page(self):
        return self.page

    async def close(self):
        self.closed = True


class FakeChromium:
    def __init__(self, page):
        self.page = page
        self.browser = None

    async def launch(self, headless=True, args=None):
        self.browser = FakeBrowserHandle(self.page)
        return self.browser


class FakeBrowserHandle:
    def __init__(self, page):
        self.context = FakeContext(page)
        self.closed = False

    async def new_context(self, **options):
        self.context.options = options
        return self.context

    async def close(self):
        self.closed = True


class FakePlaywright:
    def __init__(self, page):
        self.chromium = FakeChromium(page)
        self.stopped = False

    async def start(self):
        return self

    async def stop(self):
        self.stopped = True


class FakeStealth:
    def __init__(self):
        self.pages = []

    async def apply_stealth_async(self, page):
        self.pages.append(page)


@pytest.fixture
def driver(monkeypatch):
    """Install a fake Playwright driver and return a factory for it."""
    created = []

    def install(page):
        playwright = FakePlaywright(page)
        created.append(playwright)
        monkeypatch.setattr(browser_service, "async_playwright", lambda: playwright)
        return playwright

    monkeypatch.setattr(browser_service, "_stealth", FakeStealth())
    return install


@pytest.mark.asyncio
async def test_session_navigates_and_closes(driver):
    page = FakePage()
    playwright = driver(page)

    async with BrowserService().session("https://www.udemy.com/course/python/", user_agent="Agent/1.0") as session:
        assert page.visited == ["https://www.udemy.com/course/python/"]
        assert session.context.options["user_agent"] == "Agent/1.0"
        assert page.navigation_timeout == 60000
        assert browser_service._stealth.pages == [page]

    assert session.closed
    assert playwright.chromium.browser.closed
    assert playwright.chromium.browser.context.closed
    assert playwright.stopped


@pytest.mark.asyncio
async def test_session_closes_when_body_raises(driver):
    playwright = driver(FakePage())

    with pytest.raises(RuntimeError):
        async with BrowserService().session("https://www.edx.org/learn/python"):
            raise RuntimeError("extraction bug")

    assert playwright.stopped


@pytest.mark.asyncio
async def test_navigation_failure_is_wrapped_and_cleaned_up(driver):
    playwright = driver(FakePage(goto_error=PlaywrightError("net::ERR_NAME_NOT_RESOLVED")))

    with pytest.raises(NavigationError, match="ERR_NAME_NOT_RESOLVED"):
        await BrowserService().open("https://unreachable.example/course")

    assert playwright.chromium.browser.closed
    assert playwright.stopped


@pytest.mark.asyncio
async def test_navigation_timeout_is_wrapped(driver):
    driver(FakePage(goto_error=PlaywrightTimeoutError("Timeout 60000ms exceeded")))

    with pytest.raises(NavigationError, match="Timed out"):
        await BrowserService().open("https://slow.example/course")


@pytest.mark.asyncio
async def test_driver_start_failure_is_a_browser_error(monkeypatch):
    class BrokenDriver:
        async def start(self):
            raise PlaywrightError("Executable doesn't exist at /ms-playwright/chromium")

    monkeypatch.setattr(browser_service, "async_playwright", BrokenDriver)

    with pytest.raises(BrowserError, match="Could not start the browser driver"):
        await BrowserService().open("https://www.edx.org/learn/python")


@pytest.mark.asyncio
async def test_close_is_idempotent(driver):
    playwright = driver(FakePage())
    session = await BrowserService().open("https://www.edx.org/learn/python")

    await session.close()
    await session.close()

    assert session.closed
    assert playwright.stopped


@pytest.mark.asyncio
async def test_mutation_wait_timeout_raises():
    session = PageSession(FakePlaywright(None), click_timeout=100, mutation_timeout=500)
    session.page = FakePage(evaluate_result=None)

    with pytest.raises(ExtractionTimeoutError) as excinfo:
        await session.all_text_after_mutation("//span[@class='late']")

    assert isinstance(excinfo.value, TimeoutError)
    assert excinfo.value.timeout == 500


@pytest.mark.asyncio
async def test_all_text_of_defaults_to_empty_list():
    session = PageSession(FakePlaywright(None), click_timeout=100, mutation_timeout=500)
    session.page = FakePage(evaluate_result=None)

    assert await session.all_text_of("//li") == []
    assert await session.lines_of("//div") == []


@pytest.mark.asyncio
async def test_exists_never_raises():
    session = PageSession(FakePlaywright(None), click_timeout=100, mutation_timeout=500)
    session.page = FakePage(evaluate_error=PlaywrightError("Execution context was destroyed"))

    assert await session.exists("//button") is False


@pytest.mark.asyncio
async def test_click_on_missing_element_only_logs(caplog):
    session = PageSession(FakePlaywright(None), click_timeout=100, mutation_timeout=500)
    session.page = FakePage(click_error=PlaywrightTimeoutError("waiting for locator"))

    await session.click("//button[@id='more']")

    assert "Could not click" in caplog.text
