import asyncio

import pytest
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from feed_browser import ContentWaitTimeout, NavigationTimeout, PlaywrightFeedBrowser
from scraper_config import ScraperConfig


class TimingOutPage:
    async def goto(self, url, wait_until, timeout):
        raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded.")

    async def wait_for_selector(self, selector, timeout):
        raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded.")


def make_browser(page):
    browser = PlaywrightFeedBrowser()
    browser._page = page
    return browser


def test_from_config_uses_viewport_and_args():
    browser = PlaywrightFeedBrowser.from_config(ScraperConfig())
    assert browser.viewport == {"width": 1920, "height": 1080}
    assert browser.headless is False
    assert "--window-size=1920,1080" in browser.launch_args


def test_navigation_timeout_is_translated():
    browser = make_browser(TimingOutPage())
    with pytest.raises(NavigationTimeout) as excinfo:
        asyncio.run(browser.goto("https://example.test", "domcontentloaded", 10))
    assert isinstance(excinfo.value.__cause__, PlaywrightTimeoutError)


def test_content_wait_timeout_is_translated():
    browser = make_browser(TimingOutPage())
    with pytest.raises(ContentWaitTimeout):
        asyncio.run(browser.wait_for_selector("#content", 10))


def test_page_requires_launch():
    with pytest.raises(RuntimeError):
        PlaywrightFeedBrowser().page


def test_close_without_launch_is_a_no_op():
    asyncio.run(PlaywrightFeedBrowser().close())


class FailingCloseBrowser:
    async def close(self):
        raise RuntimeError("browser already gone")


class RecordingPlaywright:
    def __init__(self):
        self.stopped = False

    async def stop(self):
        self.stopped = True


def test_close_stops_driver_when_browser_close_fails():
    browser = PlaywrightFeedBrowser()
    driver = RecordingPlaywright()
    browser._browser = FailingCloseBrowser()
    browser._playwright = driver

    with pytest.raises(RuntimeError):
        asyncio.run(browser.close())

    assert driver.stopped
    assert browser._browser is None
    assert browser._playwright is None


def test_close_failure_does_not_hide_navigation_timeout(capsys):
    browser = make_browser(TimingOutPage())
    browser._browser = FailingCloseBrowser()
    browser._playwright = RecordingPlaywright()

    async def run():
        # Skip launch(); the fields above stand in for a live browser
        try:
            await browser.goto("https://example.test", "domcontentloaded", 10)
        except Exception as e:
            await browser.__aexit__(type(e), e, e.__traceback__)
            raise

    with pytest.raises(NavigationTimeout):
        asyncio.run(run())
    assert "Error closing browser: browser already gone" in capsys.readouterr().out
