"""
Reusable patterns and constants for ATS compliance detection.

This module provides the fixed rule tables (standard headings, creative
heading patterns, symbol classes, section keywords) used by the detectors
and the autofix transformers.

Pattern classes follow the convention:
- Dataclasses with frozen=True for immutability
- Class-level compiled patterns, built once at import
- Convenience tuples for iteration
"""

import re
from dataclasses import dataclass

# =============================================================================
# HEADING CONSTANTS
# =============================================================================

STANDARD_HEADINGS = (
    "experience",
    "work experience",
    "professional experience",
    "employment",
    "education",
    "academic",
    "qualifications",
    "skills",
    "technical skills",
    "core competencies",
    "competencies",
    "summary",
    "professional summary",
    "objective",
    "profile",
    "certifications",
    "licenses",
    "credentials",
    "projects",
    "achievements",
    "accomplishments",
    "awards",
    "honors",
    "publications",
    "languages",
)


@dataclass(frozen=True)
class HeadingPatterns:
    """
    Patterns for spotting heading lines and creative (non-standard) headings.
    """

    # Every word capitalized, letters only - e.g., "Work Experience"
    TITLE_CASE: re.Pattern = re.compile(r"^[A-Z][a-z]+(\s+[A-Z][a-z]+)*$")

    WHAT_IVE_DONE: re.Pattern = re.compile(r"what i.?ve done", re.IGNORECASE)
    MY_JOURNEY: re.Pattern = re.compile(r"my journey", re.IGNORECASE)
    CAREER_STORY: re.Pattern = re.compile(r"career story", re.IGNORECASE)
    WHERE_IVE_BEEN: re.Pattern = re.compile(r"where i.?ve been", re.IGNORECASE)
    EXPERTISE: re.Pattern = re.compile(r"expertise", re.IGNORECASE)
    TOOLBOX: re.Pattern = re.compile(r"toolbox", re.IGNORECASE)
    SUPERPOWERS: re.Pattern = re.compile(r"superpowers", re.IGNORECASE)


CREATIVE_HEADING_PATTERNS = (
    HeadingPatterns.WHAT_IVE_DONE,
    HeadingPatterns.MY_JOURNEY,
    HeadingPatterns.CAREER_STORY,
    HeadingPatterns.WHERE_IVE_BEEN,
    HeadingPatterns.EXPERTISE,
    HeadingPatterns.TOOLBOX,
    HeadingPatterns.SUPERPOWERS,
)


# =============================================================================
# LAYOUT PATTERNS
# =============================================================================


@dataclass(frozen=True)
class LayoutPatterns:
    """
    Patterns for table and multi-column formatting that linear parsers lose.
    """

    # Three pipes on one line - e.g., "| Skill | Level |"
    PIPE_ROW: re.Pattern = re.compile(r"\|.*\|.*\|")

    # Two-column pipe cell pair, captured for rewriting
    PIPE_CELLS: re.Pattern = re.compile(r"\|([^|]+)\|([^|]+)\|")

    MULTIPLE_TABS: re.Pattern = re.compile(r"\t{2,}")

    # Text pushed right by a long whitespace run (column alignment)
    ALIGNED_COLUMN: re.Pattern = re.compile(r"\s{10,}[A-Za-z]")


# =============================================================================
# DATE PATTERNS
# =============================================================================


@dataclass(frozen=True)
class DatePatterns:
    """
    Regex patterns for dates as they appear next to positions and degrees.
    """

    # Year only - e.g., "2020"
    YEAR: re.Pattern = re.compile(r"\b(19|20)\d{2}\b", re.ASCII)

    # Month Year - e.g., "Jan 2020", "September. 2019"
    MONTH_YEAR: re.Pattern = re.compile(
        r"\b(Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]*\.?\s*(19|20)\d{2}\b",
        re.IGNORECASE | re.ASCII,
    )

    # MM/YYYY - e.g., "03/2021"
    NUMERIC_MONTH_YEAR: re.Pattern = re.compile(r"\b\d{1,2}/\d{4}\b", re.ASCII)

    PRESENT: re.Pattern = re.compile(r"\bPresent\b", re.IGNORECASE)
    CURRENT: re.Pattern = re.compile(r"\bCurrent\b", re.IGNORECASE)


DATE_PATTERNS = (
    DatePatterns.YEAR,
    DatePatterns.MONTH_YEAR,
    DatePatterns.NUMERIC_MONTH_YEAR,
    DatePatterns.PRESENT,
    DatePatterns.CURRENT,
)


@dataclass(frozen=True)
class PositionPatterns:
    """
    Patterns for history sections and "Title at Company" lines.
    """

    EXPERIENCE_KEYWORDS: re.Pattern = re.compile(
        r"experience|employment|work history", re.IGNORECASE
    )
    EDUCATION_KEYWORDS: re.Pattern = re.compile(r"education|academic|degree", re.IGNORECASE)

    # Loose "Title at Company" / "Title @ Company" / "Title, Company" shape
    POSITION_LINE: re.Pattern = re.compile(
        r"^[\w\s]+(?:at|@|,)\s*[\w\s]+$", re.MULTILINE | re.ASCII
    )


# =============================================================================
# BULLET PATTERNS
# =============================================================================

BULLET_GLYPHS = "•\\-*‣◦⁃"


@dataclass(frozen=True)
class BulletPatterns:
    """
    Patterns for bullet-prefixed lines.
    """

    # Whole bullet line, used for length detection
    BULLET_LINE: re.Pattern = re.compile(rf"^\s*[{BULLET_GLYPHS}]\s*.+$", re.MULTILINE)

    # Leading whitespace + glyph + spacing, captured as a reusable prefix
    BULLET_PREFIX: re.Pattern = re.compile(rf"^(\s*[{BULLET_GLYPHS}]\s*)")

    # Split point after sentence or clause punctuation
    CLAUSE_BOUNDARY: re.Pattern = re.compile(r"(?<=[.;,])\s+")


# =============================================================================
# SYMBOL PATTERNS
# =============================================================================


@dataclass(frozen=True)
class SymbolPatterns:
    """
    Character classes for decorative symbols and typographic quotes.

    The replacement classes are disjoint, so normalization order does not matter.
    """

    # Everything the special-character detector counts
    DECORATIVE: re.Pattern = re.compile(r"[★☆●◆■□▪▫→←↑↓⚫⚪✓✗✔✘♦♢⬤◯]")

    DECORATIVE_BULLETS: re.Pattern = re.compile(r"[★☆●◆■□▪▫⬤◯⚫⚪♦♢]")
    ARROWS: re.Pattern = re.compile(r"[→←↑↓]")
    CHECK_MARKS: re.Pattern = re.compile(r"[✓✔]")
    CROSS_MARKS: re.Pattern = re.compile(r"[✗✘]")

    SMART_QUOTES: re.Pattern = re.compile("[“”‘’]")
    SMART_DOUBLE_QUOTES: re.Pattern = re.compile("[“”]")
    SMART_SINGLE_QUOTES: re.Pattern = re.compile("[‘’]")


# Replacement table applied by the special-character normalizer
SYMBOL_REPLACEMENTS = (
    (SymbolPatterns.DECORATIVE_BULLETS, "•"),
    (SymbolPatterns.ARROWS, "-"),
    (SymbolPatterns.CHECK_MARKS, "[x]"),
    (SymbolPatterns.CROSS_MARKS, "[ ]"),
    (SymbolPatterns.SMART_DOUBLE_QUOTES, '"'),
    (SymbolPatterns.SMART_SINGLE_QUOTES, "'"),
)


# =============================================================================
# CONTACT PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ContactPatterns:
    """
    Regex patterns for contact details in a resume header.

    Digit and word classes are ASCII-only, so full-width digits never form a
    phone number.
    """

    EMAIL: re.Pattern = re.compile(r"[\w.-]+@[\w.-]+\.\w+", re.ASCII)

    # US-style number - e.g., "(555) 123-4567", "555.123.4567"
    PHONE: re.Pattern = re.compile(r"\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}", re.ASCII)

    LINKEDIN: re.Pattern = re.compile(r"linkedin", re.IGNORECASE)


# =============================================================================
# SECTION KEYWORDS
# =============================================================================

# Section display name -> upper-case substrings that satisfy it
REQUIRED_SECTIONS = (
    ("Experience/Work History", ("EXPERIENCE", "WORK HISTORY", "EMPLOYMENT")),
    ("Education", ("EDUCATION", "DEGREE", "UNIVERSITY", "COLLEGE")),
    ("Skills", ("SKILLS", "TECHNICAL", "COMPETENC")),
)
