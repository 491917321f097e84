"""
Analysis Context

Responsibilities:
- Scans plain resume text with independent, pure detectors
- Aggregates issues into a 0-100 score and a passed-checks list
- Maps scores to display badges
- Renders analyses as text reports

Owns: Detection rules, scoring weights, passed-check conditions
Never: Modifies resume text
"""

from atscheck.contexts.analysis.badge import ScoreBadge, get_score_badge
from atscheck.contexts.analysis.config_resolver import load_scoring_config
from atscheck.contexts.analysis.defaults import DEFAULT_SCORING_CONFIG, ScoringConfig
from atscheck.contexts.analysis.detectors import (
    DETECTORS,
    Detector,
    check_resume_length,
    detect_missing_contact_info,
    detect_missing_dates,
    detect_missing_sections,
    detect_overlong_bullets,
    detect_special_characters,
    detect_tables,
    detect_unusual_headings,
)
from atscheck.contexts.analysis.exceptions import InvalidScoringConfigError
from atscheck.contexts.analysis.issues import Analysis, Category, Issue, Severity
from atscheck.contexts.analysis.report import format_analysis_report
from atscheck.contexts.analysis.scoring import run_ats_analysis

__all__ = [
    # Orchestration
    "run_ats_analysis",
    "get_score_badge",
    "format_analysis_report",
    # Individual detectors
    "DETECTORS",
    "Detector",
    "detect_tables",
    "detect_unusual_headings",
    "detect_missing_dates",
    "detect_overlong_bullets",
    "detect_special_characters",
    "detect_missing_contact_info",
    "detect_missing_sections",
    "check_resume_length",
    # Configuration
    "ScoringConfig",
    "DEFAULT_SCORING_CONFIG",
    "load_scoring_config",
    "InvalidScoringConfigError",
    # Data structures
    "Analysis",
    "Issue",
    "Severity",
    "Category",
    "ScoreBadge",
]
