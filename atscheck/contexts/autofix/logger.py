"""
Autofix context logger.

Provides logging interface for autofix context with automatic [autofix] prefix.
All autofix modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from atscheck.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[autofix]"


def setup_autofix_logger(log_dir: Path, source: str = "stdin", verbose: bool = False) -> Path:
    """
    Setup logger for autofix context.

    Args:
        log_dir: Directory for this autofix session
        source: Where the resume text came from (file path or "stdin")
        verbose: Mirror DEBUG records (per-transformer results) to the console

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="autofix",
        log_dir=log_dir,
        extra_provenance={"Input": source},
        console_level="DEBUG" if verbose else "INFO",
    )


def _log_info(message: str) -> None:
    """Log info message with [autofix] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [autofix] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [autofix] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_transformer_result(name: str, changed: bool) -> None:
    """Log whether one transformer rewrote anything."""
    _log_debug(f"  {name}: {'rewrote text' if changed else 'no change'}")


def log_fix_result(result) -> None:
    """
    Log before/after scores of a fix.

    Args:
        result: FixResult from fix_and_rescore()
    """
    if not result.changed:
        _log_info("Nothing to fix")
        return

    delta = result.score_delta
    message = f"Score {result.before.score} -> {result.after.score} ({delta:+d})"
    if delta > 0:
        _log_success(message)
    else:
        _log_info(message)
