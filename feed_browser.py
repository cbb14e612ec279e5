from typing import Any, List, Optional

from playwright.async_api import Browser, Page, Playwright, async_playwright
from playwright.async_api import TimeoutError as PlaywrightTimeoutError


class ScraperError(Exception):
    """Base class for failures raised while loading the feed page."""


class NavigationTimeout(ScraperError):
    """Page navigation exceeded its time bound. Fatal for the run."""


class ContentWaitTimeout(ScraperError):
    """The content marker never showed up. Loading continues without it."""


class FeedBrowser:
    """
    Minimal browser capability the scraper needs: launch, navigate, wait for a
    selector, run a script in the page, pause and close.

    Used as an async context manager so the browser is closed on every exit path.
    """

    async def launch(self) -> None:
        raise NotImplementedError

    async def goto(self, url: str, wait_until: str, timeout_ms: int) -> None:
        raise NotImplementedError

    async def wait_for_selector(self, selector: str, timeout_ms: int) -> None:
        raise NotImplementedError

    async def evaluate(self, script: str, arg: Any = None) -> Any:
        raise NotImplementedError

    async def wait_for_timeout(self, ms: int) -> None:
        raise NotImplementedError

    async def close(self) -> None:
        raise NotImplementedError

    async def __aenter__(self):
        await self.launch()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        try:
            await self.close()
        except Exception as close_error:
            if exc is None:
                raise
            # Keep the original failure; it carries the timeout classification
            print(f"Error closing browser: {close_error}")
        return False


class PlaywrightFeedBrowser(FeedBrowser):
    """FeedBrowser backed by a Playwright Chromium instance."""

    def __init__(
        self,
        headless: bool = False,
        viewport_width: int = 1920,
        viewport_height: int = 1080,
        launch_args: Optional[List[str]] = None,
    ):
        self.headless = headless
        self.viewport = {"width": viewport_width, "height": viewport_height}
        self.launch_args = list(launch_args or [])
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._page: Optional[Page] = None

    @classmethod
    def from_config(cls, config) -> "PlaywrightFeedBrowser":
        return cls(
            headless=config.headless,
            viewport_width=config.viewport_width,
            viewport_height=config.viewport_height,
            launch_args=config.launch_args,
        )

    @property
    def page(self) -> Page:
        if self._page is None:
            raise RuntimeError("Browser not launched; call launch() first")
        return self._page

    async def launch(self) -> None:
        self._playwright = await async_playwright().start()
        try:
            self._browser = await self._playwright.chromium.launch(
                headless=self.headless,
                args=self.launch_args,
            )
            print("Browser launched")
            self._page = await self._browser.new_page(viewport=self.viewport)
        except Exception:
            # __aexit__ is not called when __aenter__ fails
            await self.close()
            raise

    async def goto(self, url: str, wait_until: str, timeout_ms: int) -> None:
        try:
            await self.page.goto(url, wait_until=wait_until, timeout=timeout_ms)
        except PlaywrightTimeoutError as e:
            raise NavigationTimeout(
                f"Navigation timeout of {timeout_ms}ms exceeded for {url}"
            ) from e

    async def wait_for_selector(self, selector: str, timeout_ms: int) -> None:
        try:
            await self.page.wait_for_selector(selector, timeout=timeout_ms)
        except PlaywrightTimeoutError as e:
            raise ContentWaitTimeout(
                f"Timeout of {timeout_ms}ms exceeded waiting for {selector}"
            ) from e

    async def evaluate(self, script: str, arg: Any = None) -> Any:
        return await self.page.evaluate(script, arg)

    async def wait_for_timeout(self, ms: int) -> None:
        await self.page.wait_for_timeout(ms)

    async def close(self) -> None:
        # Safe to call more than once; the driver is stopped even if the browser close fails
        try:
            if self._browser is not None:
                await self._browser.close()
        finally:
            self._browser = None
            self._page = None
            if self._playwright is not None:
                playwright, self._playwright = self._playwright, None
                await playwright.stop()
