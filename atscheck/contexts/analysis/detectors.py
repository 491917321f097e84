"""
ATS compliance detectors.

Each detector scans plain resume text for one category of problem and returns
the issues it found, in a fixed order. Detectors are pure and stateless, so a
single instance can be shared across calls and threads.

Detection capabilities:
- Table/Layout: pipe tables, tab-separated columns, space-aligned columns
- Heading-Style: creative section headings an ATS will not recognise
- Date-Presence: history sections without dates, positions without a date range
- Bullet-Length: bullet points long enough to be truncated
- Special-Character: decorative symbols and smart quotes
- Contact-Info: email, phone, LinkedIn
- Section-Presence: Experience, Education and Skills sections
- Length: word count outside the usual resume range

Detectors are held in a strategy table (see build_detectors()) so the scoring
aggregator iterates them instead of hard-coding call sites.
"""

from abc import ABC, abstractmethod
from functools import lru_cache
from typing import List, Tuple

from atscheck.contexts.analysis.defaults import DEFAULT_SCORING_CONFIG, ScoringConfig
from atscheck.contexts.analysis.issues import Category, Issue, Severity
from atscheck.contexts.analysis.patterns import (
    CREATIVE_HEADING_PATTERNS,
    DATE_PATTERNS,
    REQUIRED_SECTIONS,
    STANDARD_HEADINGS,
    BulletPatterns,
    ContactPatterns,
    HeadingPatterns,
    LayoutPatterns,
    PositionPatterns,
    SymbolPatterns,
)
from atscheck.utils.text_processing import count_words, preview, unique_in_order

# Headings are only judged on short, heading-shaped lines
MIN_HEADING_LENGTH = 3
MAX_HEADING_LENGTH = 49
MAX_CREATIVE_HEADING_LENGTH = 30

# Position lines inspected, and characters of context searched for a date
MAX_POSITIONS_CHECKED = 5
DATE_WINDOW = 100

# Characters kept in previews and location hints
PREVIEW_LENGTH = 50


class IssueTemplates:
    """Centralized issue descriptions and remedies (f-string style)."""

    # Table/Layout
    PIPE_TABLE = "Table formatting detected (pipe characters)"
    PIPE_TABLE_FIX = "Convert table to bullet points or plain text list"
    TAB_COLUMNS = "Multiple tab characters detected (possible table)"
    TAB_COLUMNS_FIX = "Use single spaces or line breaks instead of tabs"
    MULTI_COLUMN = "Multi-column layout detected"
    MULTI_COLUMN_FIX = "Use single-column layout for better ATS parsing"

    # Heading-Style
    CREATIVE_HEADING = 'Creative heading "{heading}" may confuse ATS'
    CREATIVE_HEADING_FIX = 'Use standard headings like "Experience", "Skills", "Education"'

    # Date-Presence
    NO_DATES = "No date patterns found in experience/education sections"
    NO_DATES_FIX = 'Add date ranges (e.g., "Jan 2020 - Present") to each position'
    POSITION_WITHOUT_DATE = "Position may be missing date range"
    POSITION_WITHOUT_DATE_FIX = "Ensure each role has start and end dates"

    # Bullet-Length
    OVERLONG_BULLETS = "{count} bullet point(s) exceed {limit} characters"
    OVERLONG_BULLETS_FIX = "Split long bullets into multiple shorter points for readability"

    # Special-Character
    SPECIAL_SYMBOLS = "Special symbols detected ({symbols})"
    SPECIAL_SYMBOLS_FIX = "Replace special symbols with standard bullets (• or -)"
    SMART_QUOTES = "Smart quotes detected"
    SMART_QUOTES_FIX = "Replace smart quotes with straight quotes for better compatibility"

    # Contact-Info
    NO_EMAIL = "No email address found"
    NO_EMAIL_FIX = "Add your email address in the contact section"
    NO_PHONE = "No phone number found"
    NO_PHONE_FIX = "Add your phone number in the contact section"
    NO_LINKEDIN = "No LinkedIn profile detected"
    NO_LINKEDIN_FIX = "Consider adding your LinkedIn URL"

    # Section-Presence
    MISSING_SECTIONS = "Missing standard sections: {sections}"
    MISSING_SECTIONS_FIX = "Include clearly labeled sections for Experience, Education, and Skills"

    # Length
    TOO_SHORT = "Resume appears too short ({count} words)"
    TOO_SHORT_FIX = "Aim for 300-700 words with detailed achievements"
    TOO_LONG = "Resume may be too long ({count} words)"
    TOO_LONG_FIX = "Consider condensing to 1-2 pages for most roles"


# =============================================================================
# Detector Base
# =============================================================================


class Detector(ABC):
    """Base class for a single-purpose resume scanner."""

    name: str = "detector"

    @abstractmethod
    def detect(self, text: str) -> List[Issue]:
        """Scan text and return issues in emission order."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


def _has_date(text: str) -> bool:
    return any(pattern.search(text) for pattern in DATE_PATTERNS)


# =============================================================================
# Detectors
# =============================================================================


class TableLayoutDetector(Detector):
    """Pipe tables, tab columns and space-aligned columns."""

    name = "tables"

    def detect(self, text: str) -> List[Issue]:
        issues = []

        if LayoutPatterns.PIPE_ROW.search(text):
            issues.append(
                Issue(
                    severity=Severity.ERROR,
                    category=Category.FORMAT,
                    description=IssueTemplates.PIPE_TABLE,
                    remedy=IssueTemplates.PIPE_TABLE_FIX,
                    auto_fixable=True,
                )
            )

        if LayoutPatterns.MULTIPLE_TABS.search(text):
            issues.append(
                Issue(
                    severity=Severity.WARNING,
                    category=Category.FORMAT,
                    description=IssueTemplates.TAB_COLUMNS,
                    remedy=IssueTemplates.TAB_COLUMNS_FIX,
                    auto_fixable=True,
                )
            )

        if LayoutPatterns.ALIGNED_COLUMN.search(text):
            issues.append(
                Issue(
                    severity=Severity.WARNING,
                    category=Category.FORMAT,
                    description=IssueTemplates.MULTI_COLUMN,
                    remedy=IssueTemplates.MULTI_COLUMN_FIX,
                    auto_fixable=False,
                )
            )

        return issues


class HeadingStyleDetector(Detector):
    """
    Creative section headings.

    A line is heading-shaped when it is short and either fully upper-case or
    Title Case. Heading-shaped lines that match a standard heading (substring
    in either direction, case-insensitive) are fine; the rest are only
    reported when they also match a known creative pattern, so ordinary short
    lines such as a name or a job title never fire.
    """

    name = "headings"

    def detect(self, text: str) -> List[Issue]:
        issues = []

        for line in text.split("\n"):
            heading = line.strip()
            if not MIN_HEADING_LENGTH <= len(heading) <= MAX_HEADING_LENGTH:
                continue
            if heading != heading.upper() and not HeadingPatterns.TITLE_CASE.match(heading):
                continue

            normalized = heading.lower()
            if any(std in normalized or normalized in std for std in STANDARD_HEADINGS):
                continue

            # Raw line length, leading indentation included
            if len(line) >= MAX_CREATIVE_HEADING_LENGTH:
                continue

            if any(pattern.search(line) for pattern in CREATIVE_HEADING_PATTERNS):
                issues.append(
                    Issue(
                        severity=Severity.WARNING,
                        category=Category.STRUCTURE,
                        description=IssueTemplates.CREATIVE_HEADING.format(heading=heading),
                        remedy=IssueTemplates.CREATIVE_HEADING_FIX,
                        auto_fixable=False,
                        location_hint=heading,
                    )
                )

        return issues


class DatePresenceDetector(Detector):
    """Missing dates, document-wide and next to individual positions."""

    name = "dates"

    def detect(self, text: str) -> List[Issue]:
        issues = []

        has_history = PositionPatterns.EXPERIENCE_KEYWORDS.search(
            text
        ) or PositionPatterns.EDUCATION_KEYWORDS.search(text)

        if has_history and not _has_date(text):
            issues.append(
                Issue(
                    severity=Severity.WARNING,
                    category=Category.CONTENT,
                    description=IssueTemplates.NO_DATES,
                    remedy=IssueTemplates.NO_DATES_FIX,
                    auto_fixable=False,
                )
            )

        positions = PositionPatterns.POSITION_LINE.findall(text)

        for position in positions[:MAX_POSITIONS_CHECKED]:
            # First occurrence, even if the match came from a later repeat
            index = text.find(position)
            window = text[max(0, index - DATE_WINDOW) : index + len(position) + DATE_WINDOW]

            if not _has_date(window):
                issues.append(
                    Issue(
                        severity=Severity.INFO,
                        category=Category.CONTENT,
                        description=IssueTemplates.POSITION_WITHOUT_DATE,
                        remedy=IssueTemplates.POSITION_WITHOUT_DATE_FIX,
                        auto_fixable=False,
                        location_hint=position[:PREVIEW_LENGTH],
                    )
                )
                # Report once
                break

        return issues


class BulletLengthDetector(Detector):
    """Bullet points long enough to be truncated."""

    name = "bullets"

    def __init__(self, max_length: int = DEFAULT_SCORING_CONFIG.max_bullet_length):
        self.max_length = max_length

    def detect(self, text: str) -> List[Issue]:
        bullets = BulletPatterns.BULLET_LINE.findall(text)
        overlong = [
            preview(bullet, PREVIEW_LENGTH)
            for bullet in bullets
            if len(bullet.strip()) > self.max_length
        ]

        if not overlong:
            return []

        return [
            Issue(
                severity=Severity.WARNING,
                category=Category.CONTENT,
                description=IssueTemplates.OVERLONG_BULLETS.format(
                    count=len(overlong), limit=self.max_length
                ),
                remedy=IssueTemplates.OVERLONG_BULLETS_FIX,
                auto_fixable=True,
                location_hint=overlong[0],
            )
        ]


class SpecialCharacterDetector(Detector):
    """Decorative symbols and smart quotes."""

    name = "special_characters"

    def __init__(self, max_symbols: int = DEFAULT_SCORING_CONFIG.max_special_symbols):
        self.max_symbols = max_symbols

    def detect(self, text: str) -> List[Issue]:
        issues = []

        symbols = SymbolPatterns.DECORATIVE.findall(text)
        if len(symbols) > self.max_symbols:
            issues.append(
                Issue(
                    severity=Severity.WARNING,
                    category=Category.FORMAT,
                    description=IssueTemplates.SPECIAL_SYMBOLS.format(
                        symbols=" ".join(unique_in_order(symbols))
                    ),
                    remedy=IssueTemplates.SPECIAL_SYMBOLS_FIX,
                    auto_fixable=True,
                )
            )

        if SymbolPatterns.SMART_QUOTES.search(text):
            issues.append(
                Issue(
                    severity=Severity.INFO,
                    category=Category.FORMAT,
                    description=IssueTemplates.SMART_QUOTES,
                    remedy=IssueTemplates.SMART_QUOTES_FIX,
                    auto_fixable=True,
                )
            )

        return issues


class ContactInfoDetector(Detector):
    """Email, phone and LinkedIn, each checked independently."""

    name = "contact_info"

    def detect(self, text: str) -> List[Issue]:
        issues = []

        if not ContactPatterns.EMAIL.search(text):
            issues.append(
                Issue(
                    severity=Severity.ERROR,
                    category=Category.CONTENT,
                    description=IssueTemplates.NO_EMAIL,
                    remedy=IssueTemplates.NO_EMAIL_FIX,
                )
            )

        if not ContactPatterns.PHONE.search(text):
            issues.append(
                Issue(
                    severity=Severity.WARNING,
                    category=Category.CONTENT,
                    description=IssueTemplates.NO_PHONE,
                    remedy=IssueTemplates.NO_PHONE_FIX,
                )
            )

        if not ContactPatterns.LINKEDIN.search(text):
            issues.append(
                Issue(
                    severity=Severity.INFO,
                    category=Category.CONTENT,
                    description=IssueTemplates.NO_LINKEDIN,
                    remedy=IssueTemplates.NO_LINKEDIN_FIX,
                )
            )

        return issues


class SectionPresenceDetector(Detector):
    """Experience, Education and Skills sections, reported together."""

    name = "sections"

    def detect(self, text: str) -> List[Issue]:
        upper_text = text.upper()

        missing = [
            section_name
            for section_name, keywords in REQUIRED_SECTIONS
            if not any(keyword in upper_text for keyword in keywords)
        ]

        if not missing:
            return []

        return [
            Issue(
                severity=Severity.WARNING,
                category=Category.STRUCTURE,
                description=IssueTemplates.MISSING_SECTIONS.format(sections=", ".join(missing)),
                remedy=IssueTemplates.MISSING_SECTIONS_FIX,
            )
        ]


class LengthDetector(Detector):
    """Word count outside the usual resume range."""

    name = "length"

    def __init__(
        self,
        min_words: int = DEFAULT_SCORING_CONFIG.min_word_count,
        max_words: int = DEFAULT_SCORING_CONFIG.max_word_count,
    ):
        self.min_words = min_words
        self.max_words = max_words

    def detect(self, text: str) -> List[Issue]:
        word_count = count_words(text)

        if word_count < self.min_words:
            return [
                Issue(
                    severity=Severity.WARNING,
                    category=Category.CONTENT,
                    description=IssueTemplates.TOO_SHORT.format(count=word_count),
                    remedy=IssueTemplates.TOO_SHORT_FIX,
                )
            ]
        if word_count > self.max_words:
            return [
                Issue(
                    severity=Severity.INFO,
                    category=Category.CONTENT,
                    description=IssueTemplates.TOO_LONG.format(count=word_count),
                    remedy=IssueTemplates.TOO_LONG_FIX,
                )
            ]
        return []


# =============================================================================
# Strategy Table
# =============================================================================


# Bounded: one entry per distinct ScoringConfig
BUILD_CACHE_SIZE = 32


@lru_cache(maxsize=BUILD_CACHE_SIZE)
def build_detectors(config: ScoringConfig = DEFAULT_SCORING_CONFIG) -> Tuple[Detector, ...]:
    """
    Build the detector sequence for a scoring config, in aggregation order.

    Cached per config; detectors are stateless so instances are shared.
    """
    return (
        TableLayoutDetector(),
        HeadingStyleDetector(),
        DatePresenceDetector(),
        BulletLengthDetector(max_length=config.max_bullet_length),
        SpecialCharacterDetector(max_symbols=config.max_special_symbols),
        ContactInfoDetector(),
        SectionPresenceDetector(),
        LengthDetector(min_words=config.min_word_count, max_words=config.max_word_count),
    )


DETECTORS = build_detectors(DEFAULT_SCORING_CONFIG)


# =============================================================================
# Function Interface
# =============================================================================


def detect_tables(text: str) -> List[Issue]:
    """Detect table-like formatting that ATS parsers cannot read."""
    return DETECTORS[0].detect(text)


def detect_unusual_headings(text: str) -> List[Issue]:
    """Detect creative section headings."""
    return DETECTORS[1].detect(text)


def detect_missing_dates(text: str) -> List[Issue]:
    """Detect missing dates in experience/education content."""
    return DETECTORS[2].detect(text)


def detect_overlong_bullets(text: str) -> List[Issue]:
    """Detect bullet points that may get truncated."""
    return DETECTORS[3].detect(text)


def detect_special_characters(text: str) -> List[Issue]:
    """Detect decorative symbols and smart quotes."""
    return DETECTORS[4].detect(text)


def detect_missing_contact_info(text: str) -> List[Issue]:
    """Detect missing email, phone and LinkedIn."""
    return DETECTORS[5].detect(text)


def detect_missing_sections(text: str) -> List[Issue]:
    """Detect missing Experience, Education and Skills sections."""
    return DETECTORS[6].detect(text)


def check_resume_length(text: str) -> List[Issue]:
    """Flag resumes that are too short or too long."""
    return DETECTORS[7].detect(text)
