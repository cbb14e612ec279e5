import os
from dataclasses import dataclass, field
from typing import List

# Inputs/Outputs
YOUTUBE_URL = "https://www.youtube.com/feed/news_destination/business"
OUTPUT_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "youtube_news_videos.csv")

# Browser behavior
HEADLESS = False  # Set to True to hide the browser window
VIEWPORT_WIDTH = 1920
VIEWPORT_HEIGHT = 1080
LAUNCH_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--window-size=1920,1080",
]

# Timing (milliseconds)
NAVIGATION_TIMEOUT_MS = 60000
CONTENT_TIMEOUT_MS = 60000
WARMUP_MS = 5000
SCROLL_CYCLES = 3
SCROLL_PAUSE_MS = 2000
SETTLE_MS = 2000


@dataclass(frozen=True)
class FeedSelectors:
    """
    DOM selectors for the feed page. These track YouTube's markup and will break
    when the layout changes; bump `version` when replacing them.
    """

    version: str = "2024-ytd"
    content_marker: str = "#content"
    video_anchor: str = 'a#thumbnail[href*="watch"]'
    container: str = "ytd-rich-item-renderer, ytd-video-renderer"
    title: str = "#video-title"
    channel: str = "#channel-name a, #text > a"


@dataclass
class ScraperConfig:
    url: str = YOUTUBE_URL
    output_file: str = OUTPUT_FILE
    headless: bool = HEADLESS
    viewport_width: int = VIEWPORT_WIDTH
    viewport_height: int = VIEWPORT_HEIGHT
    launch_args: List[str] = field(default_factory=lambda: list(LAUNCH_ARGS))
    navigation_timeout_ms: int = NAVIGATION_TIMEOUT_MS
    content_timeout_ms: int = CONTENT_TIMEOUT_MS
    warmup_ms: int = WARMUP_MS
    scroll_cycles: int = SCROLL_CYCLES
    scroll_pause_ms: int = SCROLL_PAUSE_MS
    settle_ms: int = SETTLE_MS
    selectors: FeedSelectors = field(default_factory=FeedSelectors)
