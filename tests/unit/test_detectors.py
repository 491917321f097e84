"""
Unit tests for the individual ATS detectors.

Each detector is exercised through its function interface on small, targeted
inputs so that only the behaviour under test can fire.
"""

import pytest

from atscheck.contexts.analysis import (
    Category,
    Severity,
    check_resume_length,
    detect_missing_contact_info,
    detect_missing_dates,
    detect_missing_sections,
    detect_overlong_bullets,
    detect_special_characters,
    detect_tables,
    detect_unusual_headings,
)
from atscheck.contexts.analysis.detectors import (
    BUILD_CACHE_SIZE,
    DETECTORS,
    BulletLengthDetector,
    Detector,
    LengthDetector,
    build_detectors,
)
from atscheck.contexts.analysis.defaults import DEFAULT_SCORING_CONFIG, ScoringConfig


def _descriptions(issues):
    return [issue.description for issue in issues]


@pytest.mark.unit
class TestTableLayoutDetector:
    """Pipe tables, tab columns and space-aligned columns."""

    def test_pipe_row_is_an_error(self):
        issues = detect_tables("A|B|C|")
        assert len(issues) == 1
        assert issues[0].severity is Severity.ERROR
        assert issues[0].category is Category.FORMAT
        assert issues[0].description == "Table formatting detected (pipe characters)"
        assert issues[0].auto_fixable

    def test_two_pipes_are_not_a_table(self):
        """A pipe row needs three pipes on one line."""
        assert detect_tables("A|B|C") == []

    def test_pipes_on_different_lines_do_not_count(self):
        assert detect_tables("A|B\nC|D\nE|F") == []

    def test_multiple_tabs_is_a_warning(self):
        issues = detect_tables("Python\t\tAdvanced")
        assert _descriptions(issues) == ["Multiple tab characters detected (possible table)"]
        assert issues[0].severity is Severity.WARNING
        assert issues[0].auto_fixable

    def test_single_tab_is_fine(self):
        assert detect_tables("Python\tAdvanced") == []

    def test_aligned_columns_are_not_auto_fixable(self):
        issues = detect_tables("Python" + " " * 12 + "Advanced")
        assert _descriptions(issues) == ["Multi-column layout detected"]
        assert not issues[0].auto_fixable

    def test_all_three_fire_in_order(self):
        text = "| Skill | Level |\nPython\t\tGo\nLeft" + " " * 10 + "Right"
        assert _descriptions(detect_tables(text)) == [
            "Table formatting detected (pipe characters)",
            "Multiple tab characters detected (possible table)",
            "Multi-column layout detected",
        ]


@pytest.mark.unit
class TestHeadingStyleDetector:
    """Creative section headings."""

    def test_creative_upper_case_heading(self):
        issues = detect_unusual_headings("MY JOURNEY\nStarted out in retail.")
        assert len(issues) == 1
        assert issues[0].description == 'Creative heading "MY JOURNEY" may confuse ATS'
        assert issues[0].category is Category.STRUCTURE
        assert issues[0].location_hint == "MY JOURNEY"

    def test_creative_title_case_heading(self):
        issues = detect_unusual_headings("Technical Expertise\nPython and SQL.")
        assert _descriptions(issues) == ['Creative heading "Technical Expertise" may confuse ATS']

    def test_apostrophe_variants(self):
        text = "WHAT I'VE DONE\nWhere Ive Been"
        assert len(detect_unusual_headings(text)) == 2

    def test_standard_headings_pass(self):
        text = "WORK EXPERIENCE\nEducation\nTECHNICAL SKILLS\nProfessional Summary"
        assert detect_unusual_headings(text) == []

    def test_standard_heading_wins_over_creative_word(self):
        """A standard heading inside the line wins over a creative word."""
        assert detect_unusual_headings("KEY SKILLS AND TOOLBOX") == []

    def test_unknown_but_not_creative_heading_is_ignored(self):
        assert detect_unusual_headings("JANE DOE\nVolunteering") == []

    def test_lowercase_lines_are_not_headings(self):
        assert detect_unusual_headings("my journey so far") == []

    def test_long_raw_line_is_ignored(self):
        line = "My Toolbox Of Many Useful Things"
        assert len(line) >= 30
        assert detect_unusual_headings(line) == []

    def test_indentation_counts_toward_raw_length(self):
        """Stripped heading is short, but the raw line is not."""
        assert detect_unusual_headings(" " * 25 + "MY JOURNEY") == []

    def test_one_issue_per_heading(self):
        text = "MY JOURNEY\nstuff\nMY TOOLBOX\nmore stuff"
        assert len(detect_unusual_headings(text)) == 2


@pytest.mark.unit
class TestDatePresenceDetector:
    """Document-wide and per-position date checks."""

    def test_history_without_dates(self):
        issues = detect_missing_dates("EXPERIENCE\nBuilt things for customers.")
        assert _descriptions(issues) == [
            "No date patterns found in experience/education sections"
        ]
        assert issues[0].severity is Severity.WARNING

    def test_history_with_dates(self):
        assert detect_missing_dates("EXPERIENCE\nBuilt things (Jan 2020 - Present).") == []

    def test_present_alone_counts_as_a_date(self):
        assert detect_missing_dates("Education: in progress, present.") == []

    def test_no_history_keywords_means_no_document_warning(self):
        assert detect_missing_dates("Built things for customers.") == []

    def test_position_without_nearby_date(self):
        issues = detect_missing_dates("Software Engineer at Initech\nShipped features.")
        assert _descriptions(issues) == ["Position may be missing date range"]
        assert issues[0].severity is Severity.INFO
        assert issues[0].location_hint == "Software Engineer at Initech"

    def test_position_with_nearby_date(self):
        assert detect_missing_dates("Software Engineer at Initech\n2019 - 2021") == []

    def test_position_issue_reported_once(self):
        text = "Software Engineer at Initech\nShipped.\nAnalyst at Globex\nReported."
        assert len(detect_missing_dates(text)) == 1

    def test_date_outside_window_does_not_count(self):
        text = "Software Engineer at Initech\n" + "." * 150 + "\n2019"
        assert _descriptions(detect_missing_dates(text)) == ["Position may be missing date range"]

    def test_both_issues_together(self):
        text = "EXPERIENCE\n.\nSoftware Engineer at Initech\nShipped features."
        assert [issue.severity for issue in detect_missing_dates(text)] == [
            Severity.WARNING,
            Severity.INFO,
        ]


@pytest.mark.unit
class TestBulletLengthDetector:
    """Bullets long enough to be truncated."""

    def test_short_bullets_pass(self):
        assert detect_overlong_bullets("- Led a team\n• Shipped a product") == []

    def test_overlong_bullets_are_counted(self):
        long_bullet = "- " + "word " * 40
        text = f"{long_bullet}\n- short\n• {'x' * 200}"
        issues = detect_overlong_bullets(text)
        assert len(issues) == 1
        assert issues[0].description == "2 bullet point(s) exceed 180 characters"
        assert issues[0].auto_fixable

    def test_location_hint_is_preview_of_first(self):
        text = "- " + "a" * 200
        issues = detect_overlong_bullets(text)
        assert issues[0].location_hint == "- " + "a" * 48 + "..."

    def test_exactly_at_limit_passes(self):
        assert detect_overlong_bullets("- " + "a" * 178) == []

    def test_non_bullet_long_line_ignored(self):
        assert detect_overlong_bullets("A" * 300) == []

    def test_indented_unicode_glyph(self):
        assert len(detect_overlong_bullets("   ◦ " + "a" * 200)) == 1

    def test_custom_limit(self):
        detector = BulletLengthDetector(max_length=20)
        issues = detector.detect("- " + "a" * 30)
        assert issues[0].description == "1 bullet point(s) exceed 20 characters"


@pytest.mark.unit
class TestSpecialCharacterDetector:
    """Decorative symbols and smart quotes."""

    def test_three_symbols_are_tolerated(self):
        assert detect_special_characters("★ one ● two ◆ three") == []

    def test_more_than_three_symbols(self):
        issues = detect_special_characters("★★★★★")
        assert _descriptions(issues) == ["Special symbols detected (★)"]
        assert issues[0].severity is Severity.WARNING
        assert issues[0].auto_fixable

    def test_symbols_listed_unique_in_order(self):
        issues = detect_special_characters("● a ★ b ● c → d")
        assert issues[0].description == "Special symbols detected (● ★ →)"

    def test_smart_quotes_are_info(self):
        issues = detect_special_characters("Led the “core” team")
        assert _descriptions(issues) == ["Smart quotes detected"]
        assert issues[0].severity is Severity.INFO

    def test_single_smart_quote(self):
        assert len(detect_special_characters("Jane’s resume")) == 1

    def test_plain_text_passes(self):
        assert detect_special_characters('Plain "quotes" and - dashes') == []


@pytest.mark.unit
class TestContactInfoDetector:
    """Email, phone and LinkedIn checks."""

    def test_all_missing(self):
        issues = detect_missing_contact_info("Nothing to see here")
        assert _descriptions(issues) == [
            "No email address found",
            "No phone number found",
            "No LinkedIn profile detected",
        ]
        assert [issue.severity for issue in issues] == [
            Severity.ERROR,
            Severity.WARNING,
            Severity.INFO,
        ]
        assert not any(issue.auto_fixable for issue in issues)

    def test_all_present(self):
        text = "jane@example.com 555-123-4567 linkedin.com/in/jane"
        assert detect_missing_contact_info(text) == []

    @pytest.mark.parametrize(
        "phone", ["(555) 123-4567", "555.123.4567", "555 123 4567", "5551234567"]
    )
    def test_phone_formats(self, phone):
        text = f"jane@example.com {phone} LinkedIn"
        assert detect_missing_contact_info(text) == []

    def test_linkedin_is_case_insensitive(self):
        issues = detect_missing_contact_info("jane@example.com 555-123-4567 LINKEDIN")
        assert issues == []

    def test_email_only(self):
        issues = detect_missing_contact_info("jane@example.com")
        assert _descriptions(issues) == ["No phone number found", "No LinkedIn profile detected"]


@pytest.mark.unit
class TestSectionPresenceDetector:
    """Experience, Education and Skills sections."""

    def test_all_sections_present(self):
        assert detect_missing_sections("Work History\nDegree\nCore Competencies") == []

    def test_missing_sections_reported_together(self):
        issues = detect_missing_sections("Nothing relevant")
        assert len(issues) == 1
        assert issues[0].description == (
            "Missing standard sections: Experience/Work History, Education, Skills"
        )
        assert issues[0].category is Category.STRUCTURE

    def test_one_missing(self):
        issues = detect_missing_sections("Experience and skills")
        assert _descriptions(issues) == ["Missing standard sections: Education"]

    def test_keywords_match_anywhere(self):
        """Section keywords are substrings of the upper-cased text."""
        assert detect_missing_sections("employment; college; technical") == []


@pytest.mark.unit
class TestLengthDetector:
    """Word count bounds."""

    def test_too_short(self):
        issues = check_resume_length("word " * 149)
        assert _descriptions(issues) == ["Resume appears too short (149 words)"]
        assert issues[0].severity is Severity.WARNING

    @pytest.mark.parametrize("count", [150, 500, 1000])
    def test_in_range(self, count):
        assert check_resume_length("word " * count) == []

    def test_too_long(self):
        issues = check_resume_length("word " * 1001)
        assert _descriptions(issues) == ["Resume may be too long (1001 words)"]
        assert issues[0].severity is Severity.INFO

    def test_words_split_on_any_whitespace(self):
        detector = LengthDetector(min_words=3, max_words=5)
        assert detector.detect("one\ttwo\nthree") == []


@pytest.mark.unit
class TestDetectorTable:
    """Strategy table construction."""

    def test_detector_order(self):
        assert [detector.name for detector in DETECTORS] == [
            "tables",
            "headings",
            "dates",
            "bullets",
            "special_characters",
            "contact_info",
            "sections",
            "length",
        ]

    def test_default_table_is_cached(self):
        assert build_detectors(DEFAULT_SCORING_CONFIG) is DETECTORS

    def test_thresholds_flow_from_config(self):
        config = ScoringConfig(max_bullet_length=100, min_word_count=10, max_word_count=20)
        detectors = {detector.name: detector for detector in build_detectors(config)}
        assert detectors["bullets"].max_length == 100
        assert detectors["length"].min_words == 10
        assert detectors["length"].max_words == 20

    def test_detectors_are_pure(self):
        text = "MY JOURNEY\n| a | b |\n★★★★"
        for detector in DETECTORS:
            assert detector.detect(text) == detector.detect(text)


@pytest.mark.unit
class TestAsciiOnlyClasses:
    """Digit and word classes ignore non-ASCII look-alikes."""

    def test_full_width_digits_are_not_a_phone(self):
        issues = detect_missing_contact_info("x@y.com linkedin ５５５１２３４５６７")
        assert _descriptions(issues) == ["No phone number found"]

    def test_accented_email_without_ascii_run_is_missing(self):
        issues = detect_missing_contact_info("ñ@é.ü 555-123-4567 linkedin")
        assert _descriptions(issues) == ["No email address found"]

    def test_full_width_year_is_not_a_date(self):
        issues = detect_missing_dates("EXPERIENCE\nBuilt things (２０２０).")
        assert _descriptions(issues) == [
            "No date patterns found in experience/education sections"
        ]

    def test_non_ascii_position_line_is_not_checked(self):
        """Word characters outside ASCII break the position shape."""
        assert detect_missing_dates("Ingeniera at Compañía\nShipped features.") == []


@pytest.mark.unit
class TestDetectorBase:
    """Detector contract."""

    def test_base_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            Detector()

    def test_subclass_must_implement_detect(self):
        class ForgetfulDetector(Detector):
            name = "forgetful"

        with pytest.raises(TypeError):
            ForgetfulDetector()

    def test_build_cache_is_bounded(self):
        assert build_detectors.cache_info().maxsize == BUILD_CACHE_SIZE
