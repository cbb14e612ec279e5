# ---- Console logging helpers ----
def log_header(title: str, width: int = 80):
    print("\n" + "=" * width)
    print(title)
    print("=" * width)


def format_value(value) -> str:
    # Durations and rates read better with one decimal
    if isinstance(value, float):
        return f"{value:.1f}"
    return str(value)


def log_kv(title: str, **kwargs):
    """Print `title key=value | key=value`, leaving out keys whose value is None."""
    kv = " | ".join(
        f"{k}={format_value(v)}" for k, v in kwargs.items() if v is not None
    )
    print(f"{title} {kv}".rstrip())


def log_gap(lines: int = 1):
    print("\n" * (max(1, lines) - 1))
