"""Timestamp formatting utilities."""

from datetime import datetime


def now() -> str:
    """
    Current local time as a filesystem-safe string.

    Used to name per-session log directories (e.g., "analyze_20251114_123456").

    Returns:
        Timestamp formatted as YYYYMMDD_HHMMSS
    """
    return datetime.now().strftime("%Y%m%d_%H%M%S")
