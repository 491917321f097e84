"""
Auto-fix transformers for ATS compliance issues.

Each transformer is a pure text -> text rewrite applied wherever its pattern
matches. They do not consult the analysis; an Issue's auto_fixable flag only
tells the caller that one of these rewrites addresses it.
"""

import re
from typing import List

from atscheck.contexts.analysis.defaults import DEFAULT_SCORING_CONFIG
from atscheck.contexts.analysis.patterns import (
    SYMBOL_REPLACEMENTS,
    BulletPatterns,
    LayoutPatterns,
)

MAX_BULLET_LENGTH = DEFAULT_SCORING_CONFIG.max_bullet_length


def _pipe_cells_to_bullet(match: re.Match) -> str:
    return f"• {match.group(1).strip()}: {match.group(2).strip()}"


def auto_fix_tables(text: str) -> str:
    """
    Rewrite pipe tables as bullets and collapse tab runs.

    Each non-overlapping "|A|B|" becomes "• A: B". Rows with three or more
    columns are not split per cell; the two-cell pattern simply matches again
    further along the row, so "|A|B|C|" becomes "• A: BC|".

    Example:
        >>> auto_fix_tables("| Python | Advanced |")
        '• Python: Advanced'
        >>> auto_fix_tables("Name\\t\\t\\tRole")
        'Name Role'
    """
    fixed = LayoutPatterns.PIPE_CELLS.sub(_pipe_cells_to_bullet, text)
    return LayoutPatterns.MULTIPLE_TABS.sub(" ", fixed)


def auto_fix_special_characters(text: str) -> str:
    """
    Replace decorative symbols and smart quotes with ATS-safe characters.

    Decorative bullets -> "•", arrows -> "-", check marks -> "[x]",
    cross marks -> "[ ]", smart quotes -> straight quotes.

    Example:
        >>> auto_fix_special_characters("★ Led → shipped ✓")
        '• Led - shipped [x]'
    """
    fixed = text
    for pattern, replacement in SYMBOL_REPLACEMENTS:
        fixed = pattern.sub(replacement, fixed)
    return fixed


def _split_bullet_line(line: str, max_length: int) -> str:
    bullet_match = BulletPatterns.BULLET_PREFIX.match(line)
    if not bullet_match or len(line) <= max_length:
        return line

    prefix = bullet_match.group(1)
    content = line[len(prefix) :]

    parts = BulletPatterns.CLAUSE_BOUNDARY.split(content)
    if len(parts) <= 1:
        return line

    # Greedy repack: start a new bullet when the next part would overflow
    rebuilt: List[str] = []
    current = ""
    for part in parts:
        if current and len(f"{current} {part}") > max_length - len(prefix):
            rebuilt.append(prefix + current.strip())
            current = part
        else:
            current = f"{current} {part}" if current else part
    if current:
        rebuilt.append(prefix + current.strip())

    return "\n".join(rebuilt)


def auto_fix_overlong_bullets(text: str, max_length: int = MAX_BULLET_LENGTH) -> str:
    """
    Split bullet lines longer than max_length into several bullets.

    The line is broken after ".", ";" or "," followed by whitespace and the
    pieces are greedily repacked under the original prefix (indentation,
    glyph and spacing preserved). A line with no such boundary is returned
    unchanged, as is every non-bullet line.

    Args:
        text: Resume text
        max_length: Longest acceptable bullet line, prefix included

    Returns:
        Text with overlong bullets split
    """
    return "\n".join(_split_bullet_line(line, max_length) for line in text.split("\n"))
