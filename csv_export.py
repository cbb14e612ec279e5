import csv
import os
from dataclasses import dataclass
from typing import Iterable

import pandas as pd

CSV_COLUMNS = ["Title", "Channel", "URL"]


@dataclass(frozen=True)
class VideoRecord:
    title: str
    channel: str
    url: str


def ensure_parent_dir(path: str) -> None:
    directory = os.path.dirname(os.path.abspath(path))
    if directory and not os.path.exists(directory):
        os.makedirs(directory, exist_ok=True)


def to_csv_text(videos: Iterable[VideoRecord]) -> str:
    """
    Render the header plus one fully quoted row per video, newline-joined with
    no trailing newline. Inner double quotes are doubled.
    """
    rows = pd.DataFrame(
        [(v.title or "", v.channel or "", v.url) for v in videos],
        columns=CSV_COLUMNS,
    )
    body = rows.to_csv(
        index=False,
        header=False,
        quoting=csv.QUOTE_ALL,
        lineterminator="\n",
    )
    lines = [",".join(CSV_COLUMNS)]
    if body:
        lines.append(body.rstrip("\n"))
    return "\n".join(lines)


def save_to_csv(videos: Iterable[VideoRecord], filename: str) -> str:
    """Overwrite `filename` with the CSV rendering of `videos`."""
    ensure_parent_dir(filename)
    csv_content = to_csv_text(videos)
    with open(filename, "w", encoding="utf-8", newline="") as f:
        f.write(csv_content)
    print(f"Results saved to {filename}")
    return filename


def load_videos(filename: str) -> pd.DataFrame:
    # Empty fields stay "" instead of NaN
    return pd.read_csv(filename, dtype=str, keep_default_na=False)
