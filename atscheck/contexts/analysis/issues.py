"""
Data model for ATS compliance reports.

Issues are created by detectors and never mutated; an Analysis is built once
per call by the scoring aggregator and handed to the caller as-is.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from atscheck.contexts.analysis.badge import ScoreBadge, get_score_badge


class Severity(Enum):
    """How much an issue costs the score."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class Category(Enum):
    """What part of the resume an issue concerns."""

    FORMAT = "format"
    CONTENT = "content"
    STRUCTURE = "structure"


@dataclass(frozen=True)
class Issue:
    """
    A single reported problem.

    Attributes:
        severity: Error, warning, or info
        category: Format, content, or structure
        description: What was found (e.g., "No email address found")
        remedy: What the candidate should do about it
        auto_fixable: Whether the autofix context can resolve it mechanically
        location_hint: Offending excerpt, when the detector can point at one
    """

    severity: Severity
    category: Category
    description: str
    remedy: str
    auto_fixable: bool = False
    location_hint: Optional[str] = None

    def to_dict(self) -> dict:
        data = {
            "severity": self.severity.value,
            "category": self.category.value,
            "description": self.description,
            "remedy": self.remedy,
            "auto_fixable": self.auto_fixable,
        }
        if self.location_hint is not None:
            data["location_hint"] = self.location_hint
        return data


@dataclass(frozen=True)
class Analysis:
    """
    Result of a full ATS compliance analysis.

    Attributes:
        score: Integer in [0, 100]
        issues: Issues in detector emission order (not sorted by severity)
        passed_checks: Names of the confirmation checks that passed
    """

    score: int
    issues: Tuple[Issue, ...] = field(default_factory=tuple)
    passed_checks: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def fixable_issues(self) -> List[Issue]:
        """Issues the autofix context can resolve."""
        return [issue for issue in self.issues if issue.auto_fixable]

    @property
    def badge(self) -> ScoreBadge:
        """Display tier for this score."""
        return get_score_badge(self.score)

    def issues_by_category(self) -> Dict[Category, List[Issue]]:
        """Group issues by category, keeping emission order within each group."""
        grouped = {category: [] for category in Category}
        for issue in self.issues:
            grouped[issue.category].append(issue)
        return grouped

    def issues_by_severity(self) -> Dict[Severity, List[Issue]]:
        """Group issues by severity, keeping emission order within each group."""
        grouped = {severity: [] for severity in Severity}
        for issue in self.issues:
            grouped[issue.severity].append(issue)
        return grouped

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "issues": [issue.to_dict() for issue in self.issues],
            "passed_checks": list(self.passed_checks),
        }
