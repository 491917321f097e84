"""
Session logging for ATSCHECK command-line runs.

The package logs through loguru but stays disabled until a session logger is
configured, so library callers see nothing. A session writes every record to
a per-run log file and mirrors INFO and above to stderr, keeping stdout free
for reports, JSON and fixed resume text.

Context-specific wrappers (with their "[context]" prefix) live in
contexts/{context}/logger.py.
"""

import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from atscheck.utils.timestamp import now

load_dotenv()

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<level>{level: <7}</level> | <level>{message}</level>"

# Console colors per level, on top of loguru's defaults
LEVEL_COLORS = {
    "DEBUG": "<dim>",
    "WARNING": "<yellow>",
    "ERROR": "<red>",
}


def session_log_dir(logs_path: Path, context_name: str) -> Path:
    """
    Directory for one logging session, e.g. outs/logs/analyze_20251114_123456.

    Args:
        logs_path: Root log directory (usually LOGS_PATH)
        context_name: Context identifier ("analyze", "autofix", "intake")
    """
    return logs_path / f"{context_name}_{now()}"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: dict = None,
    console_level: str = "INFO",
) -> Path:
    """
    Start a logging session for one context.

    Replaces any existing handlers, enables the atscheck namespace and writes
    a provenance header.

    Args:
        context_name: Context identifier; also the log file stem
        log_dir: Session directory (created if missing)
        extra_provenance: Additional key-value pairs for the provenance header
        console_level: Lowest level mirrored to stderr ("DEBUG" for verbose runs)

    Returns:
        Path to the session log file

    Example:
        from atscheck.utils.logger import session_log_dir, setup_logger

        log_file = setup_logger(
            context_name="analyze",
            log_dir=session_log_dir(Path("outs/logs"), "analyze"),
            extra_provenance={"Input": "resume.txt"},
        )
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.enable("atscheck")

    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_provenance(context_name, extra_provenance)

    return log_file


def log_provenance(context_name: str, extra_context: dict = None) -> None:
    """
    Log the header that identifies a session: context, command line, versions.

    Args:
        context_name: Context the session belongs to
        extra_context: Additional key-value pairs (input file, config path, ...)
    """
    from atscheck import __version__

    logger.debug("=" * 80)
    logger.info(f"Session: {context_name} (atscheck {__version__})")
    logger.debug(f"Command: {' '.join(sys.argv)}")
    logger.debug(f"Working directory: {Path.cwd()}")
    logger.debug(f"Python: {sys.version.split()[0]}")

    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")

    logger.debug("=" * 80)
