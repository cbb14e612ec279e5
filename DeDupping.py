import os
from typing import NamedTuple

import pandas as pd

from scraper_config import OUTPUT_FILE

# CONFIGURABLE PATH VARIABLE
CSV_FILE_PATH = OUTPUT_FILE


class DedupResult(NamedTuple):
    original_count: int
    cleaned_count: int
    duplicates_removed: int


def remove_duplicates(file_path):
    """
    Loads a CSV file, removes duplicate data lines, and saves the cleaned data back to the file.

    Lines are compared as exact strings. The first line is the header and is always kept
    as-is; the remaining lines keep the order in which they first appear.
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File not found at {file_path}")

    print(f"Loading data from {file_path}...")
    with open(file_path, "r", encoding="utf-8", newline="") as f:
        lines = f.read().split("\n")

    header, data_lines = lines[0], lines[1:]

    original_count = len(data_lines)
    print(f"Original row count: {original_count}")

    # Remove duplicates
    unique_lines = pd.Series(data_lines, dtype=object).drop_duplicates(keep="first").tolist()

    cleaned_count = len(unique_lines)
    duplicates_removed = original_count - cleaned_count

    print(f"Cleaned row count: {cleaned_count}")
    print(f"Duplicates removed: {duplicates_removed}")

    print(f"Saving cleaned data to {file_path}...")
    with open(file_path, "w", encoding="utf-8", newline="") as f:
        f.write("\n".join([header] + unique_lines))
    print("Done.")

    return DedupResult(original_count, cleaned_count, duplicates_removed)


if __name__ == "__main__":
    remove_duplicates(CSV_FILE_PATH)
