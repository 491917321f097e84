"""
Text processing utilities for formatting and display.
"""

from typing import List


def count_words(text: str) -> int:
    """
    Count whitespace-delimited words.

    Example:
        >>> count_words("  Led a team\\tof five  ")
        5
        >>> count_words("")
        0
    """
    return len(text.split())


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Args:
        text: Text to truncate
        max_len: Maximum length including ellipsis

    Returns:
        Original text if within max_len, otherwise truncated with "..."

    Example:
        >>> truncate_display("short", 10)
        "short"
        >>> truncate_display("this is a very long string", 10)
        "this is..."
    """
    return text if len(text) <= max_len else text[: max_len - 3] + "..."


def preview(text: str, length: int) -> str:
    """
    First `length` characters of stripped text followed by "...".

    Unlike truncate_display(), the ellipsis is always appended, so the
    preview reads as an excerpt even when the text is short.

    Example:
        >>> preview("- Built a thing", 7)
        "- Built..."
    """
    return text.strip()[:length] + "..."


def unique_in_order(items: List[str]) -> List[str]:
    """
    Deduplicate while keeping first-seen order.

    Example:
        >>> unique_in_order(["★", "●", "★"])
        ['★', '●']
    """
    return list(dict.fromkeys(items))
