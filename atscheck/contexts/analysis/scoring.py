"""
Scoring aggregator for ATS compliance analysis.

Runs every detector over the resume text, concatenates their issues, turns
them into a 0-100 score and derives the passed-checks list.

Score: start at 100, subtract a penalty per issue by severity (error 15,
warning 8, info 3 by default), clamp to [0, 100] once at the end, never per
issue.

Passed checks are not simply "the detector found nothing". Each check has its
own condition; "Contact information found" only requires that no contact
*error* was raised, so a missing phone number (a warning) still passes it.
"""

from typing import Callable, Dict, List, Optional, Tuple

from atscheck.contexts.analysis.defaults import (
    DEFAULT_SCORING_CONFIG,
    MAX_SCORE,
    MIN_SCORE,
    ScoringConfig,
)
from atscheck.contexts.analysis.detectors import build_detectors
from atscheck.contexts.analysis.issues import Analysis, Issue, Severity
from atscheck.contexts.analysis.logger import (
    log_analysis_result,
    log_detector_result,
    log_short_circuit,
)


def _no_issues(issues: List[Issue]) -> bool:
    return not issues


def _no_errors(issues: List[Issue]) -> bool:
    return not any(issue.severity is Severity.ERROR for issue in issues)


# (check name, detector name, pass condition), in reporting order
PASSED_CHECKS: Tuple[Tuple[str, str, Callable[[List[Issue]], bool]], ...] = (
    ("No tables or complex layouts", "tables", _no_issues),
    ("Standard characters only", "special_characters", _no_issues),
    ("All standard sections present", "sections", _no_issues),
    ("Contact information found", "contact_info", _no_errors),
    ("Appropriate resume length", "length", _no_issues),
)


def compute_score(issues: List[Issue], config: ScoringConfig = DEFAULT_SCORING_CONFIG) -> int:
    """
    Turn an issue list into a 0-100 score.

    Example:
        >>> compute_score([])
        100
        >>> compute_score([Issue(Severity.WARNING, Category.CONTENT, "No phone", "Add one")])
        92
    """
    score = MAX_SCORE
    for issue in issues:
        score -= config.penalty_for(issue.severity)
    return max(MIN_SCORE, min(MAX_SCORE, score))


def determine_passed_checks(issues_by_detector: Dict[str, List[Issue]]) -> Tuple[str, ...]:
    """
    Evaluate the named confirmation checks against per-detector results.

    Args:
        issues_by_detector: Detector name -> issues it produced

    Returns:
        Names of the checks that passed, in PASSED_CHECKS order
    """
    return tuple(
        check_name
        for check_name, detector_name, passes in PASSED_CHECKS
        if passes(issues_by_detector.get(detector_name, []))
    )


def run_ats_analysis(text: Optional[str], config: Optional[ScoringConfig] = None) -> Analysis:
    """
    Run all ATS checks and return a complete analysis.

    Input that is missing or shorter than the minimum analyzable length (50
    characters by default) carries no information, so it yields an empty
    report with score 0 and no detector runs.

    Args:
        text: Plain resume text
        config: Scoring config (defaults to DEFAULT_SCORING_CONFIG)

    Returns:
        Analysis with score, issues in detector order, and passed checks

    Example:
        >>> analysis = run_ats_analysis(resume_text)
        >>> analysis.score, analysis.badge.label
        (89, 'Excellent')
    """
    config = config or DEFAULT_SCORING_CONFIG

    if not text or len(text) < config.min_text_length:
        log_short_circuit(len(text or ""), config.min_text_length)
        return Analysis(score=0, issues=(), passed_checks=())

    issues_by_detector = {}
    all_issues = []

    for detector in build_detectors(config):
        found = detector.detect(text)
        log_detector_result(detector.name, len(found))
        issues_by_detector[detector.name] = found
        all_issues.extend(found)

    analysis = Analysis(
        score=compute_score(all_issues, config),
        issues=tuple(all_issues),
        passed_checks=determine_passed_checks(issues_by_detector),
    )

    log_analysis_result(analysis, len(text))

    return analysis
