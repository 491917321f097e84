"""
Auto-fix orchestration.

Applies the transformers in a fixed order, each consuming the previous output:

1. Tables        (pipe rows become "•" bullets, tab runs collapse)
2. Characters    (decorative glyphs and smart quotes normalized)
3. Bullets       (overlong bullets split)

Glyph normalization runs before bullet splitting so the 180-character limit
is measured on the normalized line ("✓" becomes "[x]", which is longer).

Fixing never re-scores on its own; fix_and_rescore() is the explicit
before/after entry point.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from atscheck.contexts.analysis.defaults import ScoringConfig
from atscheck.contexts.analysis.issues import Analysis
from atscheck.contexts.analysis.scoring import run_ats_analysis
from atscheck.contexts.autofix.logger import log_fix_result, log_transformer_result
from atscheck.contexts.autofix.transformers import (
    auto_fix_overlong_bullets,
    auto_fix_special_characters,
    auto_fix_tables,
)

# (name, transformer), in application order
FIX_PIPELINE: Tuple[Tuple[str, Callable[[str], str]], ...] = (
    ("tables", auto_fix_tables),
    ("special_characters", auto_fix_special_characters),
    ("bullets", auto_fix_overlong_bullets),
)


@dataclass(frozen=True)
class FixResult:
    """
    Outcome of fixing a resume and scoring it before and after.

    Attributes:
        original_text: Text as supplied
        fixed_text: Text after auto_fix_all()
        before: Analysis of original_text
        after: Analysis of fixed_text
    """

    original_text: str
    fixed_text: str
    before: Analysis
    after: Analysis

    @property
    def changed(self) -> bool:
        return self.fixed_text != self.original_text

    @property
    def score_delta(self) -> int:
        return self.after.score - self.before.score


def auto_fix_all(text: str) -> str:
    """
    Apply all auto-fixes to text.

    Example:
        >>> auto_fix_all("| Tool | Level |\\n★ “Shipped” → prod")
        '• Tool: Level\\n• "Shipped" - prod'
    """
    fixed = text
    for name, transform in FIX_PIPELINE:
        result = transform(fixed)
        log_transformer_result(name, changed=result != fixed)
        fixed = result
    return fixed


def fix_and_rescore(text: str, config: Optional[ScoringConfig] = None) -> FixResult:
    """
    Fix a resume and analyze it before and after.

    Args:
        text: Plain resume text
        config: Scoring config for both analyses

    Returns:
        FixResult with both analyses and the fixed text
    """
    fixed_text = auto_fix_all(text)

    result = FixResult(
        original_text=text,
        fixed_text=fixed_text,
        before=run_ats_analysis(text, config),
        after=run_ats_analysis(fixed_text, config),
    )

    log_fix_result(result)

    return result
