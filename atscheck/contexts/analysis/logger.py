"""
Analysis context logger.

Provides logging interface for analysis context with automatic [analyze] prefix.
All analysis modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from atscheck.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[analyze]"


def setup_analysis_logger(log_dir: Path, source: str = "stdin", verbose: bool = False) -> Path:
    """
    Setup logger for analysis context.

    Args:
        log_dir: Directory for this analysis session
        source: Where the resume text came from (file path or "stdin")
        verbose: Mirror DEBUG records (per-detector counts) to the console

    Returns:
        Path to log file

    Example:
        from atscheck.contexts.analysis.logger import setup_analysis_logger

        log_file = setup_analysis_logger(log_dir, source="resume.txt")
    """
    return _setup_logger(
        context_name="analyze",
        log_dir=log_dir,
        extra_provenance={"Input": source},
        console_level="DEBUG" if verbose else "INFO",
    )


# Wrapper functions with automatic [analyze] prefix


def _log_info(message: str) -> None:
    """Log info message with [analyze] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [analyze] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [analyze] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [analyze] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level analysis-specific logging helpers


def log_short_circuit(text_length: int, min_length: int) -> None:
    """Log that input was too short to analyze."""
    _log_debug(f"Input too short to analyze ({text_length} < {min_length} chars), returning empty report")


def log_detector_result(detector_name: str, issue_count: int) -> None:
    """Log the number of issues one detector produced."""
    _log_debug(f"  {detector_name}: {issue_count} issue(s)")


def log_analysis_result(analysis, text_length: int) -> None:
    """
    Log analysis summary.

    Args:
        analysis: Analysis from run_ats_analysis()
        text_length: Length of the analyzed text
    """
    _log_debug(
        f"Analyzed {text_length} chars: score {analysis.score}, "
        f"{len(analysis.issues)} issue(s), {len(analysis.passed_checks)} passed check(s)"
    )


def log_analysis_summary(analysis) -> None:
    """
    Log a session-level summary at INFO (used by the CLI).

    Args:
        analysis: Analysis from run_ats_analysis()
    """
    badge = analysis.badge
    if analysis.score >= 70:
        _log_success(f"ATS score {analysis.score}/100 ({badge.label})")
    else:
        _log_warning(f"ATS score {analysis.score}/100 ({badge.label})")

    for issue in analysis.issues:
        _log_debug(f"  [{issue.severity.value}/{issue.category.value}] {issue.description}")
    _log_info(f"{len(analysis.issues)} issue(s), {len(analysis.fixable_issues)} auto-fixable")
