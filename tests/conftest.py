import pytest

from feed_browser import FeedBrowser
from scraper_config import ScraperConfig


class FakeFeedBrowser(FeedBrowser):
    """In-memory FeedBrowser that records every call instead of driving Chromium."""

    def __init__(self, items=None, goto_error=None, wait_error=None, extract_error=None):
        self.items = items if items is not None else []
        self.goto_error = goto_error
        self.wait_error = wait_error
        self.extract_error = extract_error
        self.calls = []
        self.scripts = []
        self.launched = False
        self.closed = False

    async def launch(self):
        self.launched = True
        self.calls.append(("launch",))

    async def goto(self, url, wait_until, timeout_ms):
        self.calls.append(("goto", url, wait_until, timeout_ms))
        if self.goto_error is not None:
            raise self.goto_error

    async def wait_for_selector(self, selector, timeout_ms):
        self.calls.append(("wait_for_selector", selector, timeout_ms))
        if self.wait_error is not None:
            raise self.wait_error

    async def evaluate(self, script, arg=None):
        self.scripts.append(script)
        if arg is None:
            self.calls.append(("scroll",))
            return None
        self.calls.append(("extract", arg))
        if self.extract_error is not None:
            raise self.extract_error
        return self.items

    async def wait_for_timeout(self, ms):
        self.calls.append(("pause", ms))

    async def close(self):
        self.closed = True
        self.calls.append(("close",))


def anchor(title, channel, url):
    return {"title": title, "channel": channel, "url": url}


@pytest.fixture
def config(tmp_path):
    return ScraperConfig(
        url="https://example.test/feed",
        output_file=str(tmp_path / "videos.csv"),
        navigation_timeout_ms=50,
        content_timeout_ms=50,
        warmup_ms=5,
        scroll_pause_ms=2,
        settle_ms=3,
    )
