"""
Autofix Context

Responsibilities:
- Mechanically rewrites resume text to resolve fixable ATS issues
- Applies transformers in a fixed order
- Compares scores before and after fixing on request

Owns: Text transformers, fix ordering
Never: Decides whether an issue exists (that is the analysis context's job)
"""

from atscheck.contexts.autofix.orchestrator import (
    FIX_PIPELINE,
    FixResult,
    auto_fix_all,
    fix_and_rescore,
)
from atscheck.contexts.autofix.transformers import (
    auto_fix_overlong_bullets,
    auto_fix_special_characters,
    auto_fix_tables,
)

__all__ = [
    # Orchestration
    "auto_fix_all",
    "fix_and_rescore",
    "FixResult",
    "FIX_PIPELINE",
    # Individual transformers
    "auto_fix_tables",
    "auto_fix_special_characters",
    "auto_fix_overlong_bullets",
]
