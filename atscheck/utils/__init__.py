"""
Shared utilities for ATSCHECK.

Common functionality used across contexts:
- Text processing
- Report formatting
- Logging setup
"""

from atscheck.utils.text_processing import count_words, truncate_display
from atscheck.utils.timestamp import now

__all__ = ["count_words", "truncate_display", "now"]
