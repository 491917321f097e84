"""
Default scoring values for ATS compliance analysis.

Provides shared defaults used by:
- scoring.py (penalties and the minimum analyzable length)
- detectors.py (bullet, word-count and symbol thresholds)
- config_resolver.py (base layer that YAML overrides are merged onto)
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict

from atscheck.contexts.analysis.issues import Severity

# Points subtracted per issue, by severity
DEFAULT_PENALTIES = {
    "error": 15,
    "warning": 8,
    "info": 3,
}

# Detector thresholds
DEFAULT_THRESHOLDS = {
    "min_text_length": 50,
    "max_bullet_length": 180,
    "min_word_count": 150,
    "max_word_count": 1000,
    "max_special_symbols": 3,
}

MAX_SCORE = 100
MIN_SCORE = 0


@dataclass(frozen=True)
class ScoringConfig:
    """
    Penalty weights and detector thresholds for one analysis run.

    Attributes:
        error_penalty: Points lost per error
        warning_penalty: Points lost per warning
        info_penalty: Points lost per info
        min_text_length: Shorter input short-circuits to an empty report
        max_bullet_length: Bullet lines longer than this are flagged
        min_word_count: Fewer words is "too short"
        max_word_count: More words is "may be too long"
        max_special_symbols: More decorative symbols than this are flagged
    """

    error_penalty: int = DEFAULT_PENALTIES["error"]
    warning_penalty: int = DEFAULT_PENALTIES["warning"]
    info_penalty: int = DEFAULT_PENALTIES["info"]
    min_text_length: int = DEFAULT_THRESHOLDS["min_text_length"]
    max_bullet_length: int = DEFAULT_THRESHOLDS["max_bullet_length"]
    min_word_count: int = DEFAULT_THRESHOLDS["min_word_count"]
    max_word_count: int = DEFAULT_THRESHOLDS["max_word_count"]
    max_special_symbols: int = DEFAULT_THRESHOLDS["max_special_symbols"]

    def penalty_for(self, severity: Severity) -> int:
        return {
            Severity.ERROR: self.error_penalty,
            Severity.WARNING: self.warning_penalty,
            Severity.INFO: self.info_penalty,
        }[severity]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


DEFAULT_SCORING_CONFIG = ScoringConfig()
