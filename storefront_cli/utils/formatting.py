"""
Helper functions for formatting data into human-readable strings.
"""

import math
from collections.abc import Iterable


def join_titles(titles: Iterable[str], placeholder: str) -> str:
    """Joins titles with commas, or returns `placeholder` if there are none."""
    joined = ", ".join(titles)
    return joined if joined else placeholder


def format_seconds(seconds: float) -> str:
    """Formats a duration in seconds to two decimals (e.g., '2.24')."""
    return f"{seconds:.2f}"


def format_minutes(seconds: float) -> str:
    """Formats a duration in seconds as minutes to two decimals (e.g., '1.67')."""
    return f"{seconds / 60.0:.2f}"


def format_price(price: float) -> str:
    """Formats a price with a dollar sign and two decimals (e.g., '$2.08')."""
    return f"${price:.2f}"


def format_size_mb(size_mb: float) -> str:
    """Formats megabytes into a human-readable size string (e.g., '1.5 GB')."""
    if size_mb <= 0:
        return "0 MB"
    units = ["MB", "GB", "TB"]
    i = 0
    while size_mb >= 1024 and i < len(units) - 1:
        size_mb /= 1024
        i += 1
    return f"{size_mb:.1f} {units[i]}"


def format_duration(seconds: float) -> str:
    """
    Formats a duration in seconds into a human-readable string (e.g., '2h 34m 12s').
    """
    if math.isinf(seconds):
        return "never (no bandwidth)"
    s = int(seconds)
    hours, remainder = divmod(s, 3600)
    minutes, secs = divmod(remainder, 60)
    parts = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    if secs > 0 or not parts:
        parts.append(f"{secs}s")
    return " ".join(parts)
