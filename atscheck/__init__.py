"""
ATSCHECK - Applicant Tracking System Compliance Heuristics for Every Candidate's Kit

A deterministic, rule-based analyzer that scores how well a plain-text resume
survives automated recruiting software and mechanically fixes the formatting
problems it finds.

Architecture:
- Analysis Context: Detectors, score aggregation, badge mapping
- Autofix Context: Text transformers and the fix orchestrator
- Intake Context: ATS platform detection for job postings
"""

from loguru import logger

from atscheck.contexts.analysis import (
    Analysis,
    Category,
    Issue,
    ScoreBadge,
    Severity,
    get_score_badge,
    run_ats_analysis,
)
from atscheck.contexts.autofix import (
    FixResult,
    auto_fix_all,
    auto_fix_overlong_bullets,
    auto_fix_special_characters,
    auto_fix_tables,
    fix_and_rescore,
)
from atscheck.contexts.intake import (
    ATSSystem,
    detect_ats,
    get_all_ats_systems,
    get_ats_tips,
)

__version__ = "0.1.0"

# Library stays silent unless a session logger is configured
logger.disable("atscheck")

__all__ = [
    # Analysis
    "run_ats_analysis",
    "get_score_badge",
    "Analysis",
    "Issue",
    "ScoreBadge",
    "Severity",
    "Category",
    # Autofix
    "auto_fix_all",
    "auto_fix_tables",
    "auto_fix_special_characters",
    "auto_fix_overlong_bullets",
    "fix_and_rescore",
    "FixResult",
    # Intake
    "detect_ats",
    "get_ats_tips",
    "get_all_ats_systems",
    "ATSSystem",
]
