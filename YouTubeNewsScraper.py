import asyncio
import sys
import time
from dataclasses import asdict
from typing import Callable, List, Optional

from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from csv_export import VideoRecord, save_to_csv
from DeDupping import remove_duplicates
from feed_browser import (
    ContentWaitTimeout,
    FeedBrowser,
    NavigationTimeout,
    PlaywrightFeedBrowser,
)
from log_helpers import log_gap, log_header, log_kv
from scraper_config import FeedSelectors, ScraperConfig

SLOW_CONNECTION_TIP = (
    "Tip: Your internet connection might be slow or YouTube is taking longer "
    "to respond than usual."
)

SCROLL_SCRIPT = "() => { window.scrollBy(0, window.innerHeight * 2); }"

# Returns one entry per matching anchor; null where the anchor has no known container
EXTRACT_SCRIPT = """
(sel) => {
    const anchors = document.querySelectorAll(sel.video_anchor);
    return Array.from(anchors).map(anchor => {
        const container = anchor.closest(sel.container);
        if (!container) return null;
        const title = container.querySelector(sel.title)?.textContent?.trim() || '';
        const channel = container.querySelector(sel.channel)?.textContent?.trim() || '';
        return { url: anchor.href, title: title, channel: channel };
    });
}
"""

BrowserFactory = Callable[[ScraperConfig], FeedBrowser]


def is_timeout_error(error: BaseException) -> bool:
    if isinstance(error, (NavigationTimeout, ContentWaitTimeout, PlaywrightTimeoutError)):
        return True
    return "timeout" in str(error).lower()


async def load_feed_page(browser: FeedBrowser, config: ScraperConfig) -> None:
    """
    Navigate to the feed, wait for the content marker and scroll a few times so
    lazily loaded videos get rendered.
    """
    print(f"Navigating to: {config.url}")
    await browser.goto(
        config.url,
        wait_until="domcontentloaded",
        timeout_ms=config.navigation_timeout_ms,
    )
    print("Initial page load complete, waiting for content...")

    marker = config.selectors.content_marker
    try:
        await browser.wait_for_selector(marker, config.content_timeout_ms)
        print("Main content container found")
    except ContentWaitTimeout:
        print(f"Timeout waiting for {marker}, but continuing...")

    # Give the page some time to render dynamic content
    await browser.wait_for_timeout(config.warmup_ms)

    print("Scrolling to load more content...")
    for i in range(config.scroll_cycles):
        await browser.evaluate(SCROLL_SCRIPT)
        await browser.wait_for_timeout(config.scroll_pause_ms)
        log_kv("[Scroll]", cycle=f"{i + 1}/{config.scroll_cycles}")

    await browser.wait_for_timeout(config.settle_ms)


async def extract_videos(browser: FeedBrowser, selectors: FeedSelectors) -> List[VideoRecord]:
    raw_items = await browser.evaluate(EXTRACT_SCRIPT, asdict(selectors)) or []

    videos: List[VideoRecord] = []
    skipped_no_container = 0
    skipped_incomplete = 0
    for item in raw_items:
        if not item:
            skipped_no_container += 1
            continue
        url = (item.get("url") or "").strip()
        title = (item.get("title") or "").strip()
        if not url or not title:
            skipped_incomplete += 1
            continue
        videos.append(VideoRecord(title=title, channel=(item.get("channel") or "").strip(), url=url))

    print(f"Found {len(videos)} videos")
    log_kv(
        "[Extract]",
        anchors=len(raw_items),
        kept=len(videos),
        skipped_no_container=skipped_no_container or None,
        skipped_incomplete=skipped_incomplete or None,
        selectors=selectors.version,
    )
    return videos


async def fetch_youtube_links(
    config: ScraperConfig, browser_factory: Optional[BrowserFactory] = None
) -> List[VideoRecord]:
    """Open a browser, load the feed and extract its videos. The browser is always closed."""
    browser_factory = browser_factory or PlaywrightFeedBrowser.from_config
    browser = browser_factory(config)
    try:
        async with browser:
            await load_feed_page(browser, config)
            return await extract_videos(browser, config.selectors)
    except Exception as e:
        print(f"Error: {e}")
        if is_timeout_error(e):
            print(SLOW_CONNECTION_TIP)
        raise


async def run_pipeline(
    config: ScraperConfig, browser_factory: Optional[BrowserFactory] = None
) -> List[VideoRecord]:
    videos = await fetch_youtube_links(config, browser_factory)
    save_to_csv(videos, config.output_file)
    log_gap()
    remove_duplicates(config.output_file)
    return videos


def main(
    config: Optional[ScraperConfig] = None,
    browser_factory: Optional[BrowserFactory] = None,
) -> int:
    config = config or ScraperConfig()
    log_header(f"Scraping {config.url}")

    session_start = time.time()
    try:
        videos = asyncio.run(run_pipeline(config, browser_factory))
    except Exception as e:
        print(f"Failed to fetch videos: {e}")
        return 1

    elapsed = time.time() - session_start
    log_kv("[Session]", videos=len(videos), output=config.output_file, elapsed_s=elapsed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
