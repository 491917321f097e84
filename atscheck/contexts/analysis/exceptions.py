"""Custom exceptions for the analysis context."""

from pathlib import Path
from typing import Optional


class InvalidScoringConfigError(ValueError):
    """
    Exception raised when a scoring config override is malformed.

    Attributes:
        message: Error description
        config_path: YAML file the override came from, if any
        key: Offending key, if the problem is tied to one
    """

    def __init__(
        self,
        message: str,
        config_path: Optional[Path] = None,
        key: Optional[str] = None,
    ):
        self.message = message
        self.config_path = config_path
        self.key = key

        parts = [message]
        if key:
            parts.append(f"Key: {key}")
        if config_path:
            parts.append(f"Config: {config_path}")

        super().__init__("\n".join(parts))
