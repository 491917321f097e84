"""
Intake context logger.

Provides logging interface for intake context with automatic [intake] prefix.
"""

from pathlib import Path

from loguru import logger

from atscheck.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[intake]"


def setup_intake_logger(log_dir: Path, verbose: bool = False) -> Path:
    """Setup logger for intake context. Returns path to log file."""
    return _setup_logger(
        context_name="intake", log_dir=log_dir, console_level="DEBUG" if verbose else "INFO"
    )


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_detection_result(result) -> None:
    """
    Log platform detection outcome.

    Args:
        result: ATSDetectionResult from detect_ats()
    """
    _log_debug(f"Detected {result.system.value} ({result.confidence} confidence)")
    for indicator in result.indicators:
        _log_debug(f"  {indicator}")
