"""
Intake Context

Responsibilities:
- Identifies the applicant tracking system behind a job posting
- Supplies platform-specific formatting and keyword advice

Owns: Platform fingerprints and tips
Never: Scores or rewrites resume text
"""

from atscheck.contexts.intake.platform_detection import (
    ATSDetectionResult,
    ATSSystem,
    ATSTips,
    detect_ats,
    get_all_ats_systems,
    get_ats_tips,
)

__all__ = [
    "detect_ats",
    "get_ats_tips",
    "get_all_ats_systems",
    "ATSSystem",
    "ATSTips",
    "ATSDetectionResult",
]
