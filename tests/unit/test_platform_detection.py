"""
Unit tests for ATS platform detection and tips.
"""

import pytest

from atscheck.contexts.intake import (
    ATSSystem,
    detect_ats,
    get_all_ats_systems,
    get_ats_tips,
)
from atscheck.contexts.intake.platform_detection import load_platform_profiles


@pytest.mark.unit
class TestDetectAts:
    """URL and text fingerprints."""

    @pytest.mark.parametrize(
        "url, system",
        [
            ("https://acme.wd5.myworkdayjobs.com/careers/job/123", ATSSystem.WORKDAY),
            ("https://boards.greenhouse.io/acme/jobs/42", ATSSystem.GREENHOUSE),
            ("https://jobs.lever.co/acme/abc-123", ATSSystem.LEVER),
            ("https://careers-acme.icims.com/jobs/1", ATSSystem.ICIMS),
            ("https://acme.taleo.net/careersection/jobdetail.ftl", ATSSystem.TALEO),
            ("https://jobs.sap.com/job/Berlin", ATSSystem.SUCCESSFACTORS),
            ("https://jobs.smartrecruiters.com/Acme/123", ATSSystem.SMARTRECRUITERS),
            ("https://jobs.jobvite.com/acme/job/o1", ATSSystem.JOBVITE),
            ("https://acme.bamboohr.com/jobs/view.php?id=7", ATSSystem.BAMBOOHR),
        ],
    )
    def test_url_match_is_high_confidence(self, url, system):
        result = detect_ats(job_url=url)
        assert result.system is system
        assert result.confidence == "high"
        assert result.indicators == [f"URL matches {system.value} pattern"]

    def test_text_match_is_medium_confidence(self):
        result = detect_ats(job_text="Apply through our Greenhouse portal.")
        assert result.system is ATSSystem.GREENHOUSE
        assert result.confidence == "medium"
        assert result.indicators == ["Job posting mentions greenhouse"]

    def test_url_wins_over_text(self):
        result = detect_ats(
            job_url="https://boards.greenhouse.io/acme/jobs/42",
            job_text="Powered by Workday",
        )
        assert result.system is ATSSystem.GREENHOUSE

    def test_unrecognised_url_falls_back_to_text(self):
        result = detect_ats(job_url="https://example.com/careers", job_text="Apply via Workday")
        assert result.system is ATSSystem.WORKDAY
        assert result.confidence == "medium"

    @pytest.mark.parametrize(
        "kwargs", [{}, {"job_url": "https://example.com/careers"}, {"job_text": "We are hiring."}]
    )
    def test_nothing_matches(self, kwargs):
        result = detect_ats(**kwargs)
        assert result.system is ATSSystem.UNKNOWN
        assert result.confidence == "low"
        assert result.indicators == ["No ATS indicators found - using safe defaults"]


@pytest.mark.unit
class TestAtsTips:
    """Platform tips lookup."""

    def test_tips_by_enum(self):
        tips = get_ats_tips(ATSSystem.TALEO)
        assert tips.name == "Oracle Taleo"
        assert tips.tips
        assert tips.format_advice
        assert tips.avoid_list
        assert tips.keyword_advice

    def test_tips_by_string(self):
        assert get_ats_tips("successfactors").name == "SAP SuccessFactors"

    def test_unknown_string_falls_back(self):
        assert get_ats_tips("not-a-platform") == get_ats_tips(ATSSystem.UNKNOWN)

    def test_every_platform_has_tips(self):
        for system in ATSSystem:
            assert get_ats_tips(system).tips


@pytest.mark.unit
class TestPlatformProfiles:
    """Loading the platforms YAML."""

    def test_all_systems_listed(self):
        systems = get_all_ats_systems()
        assert [system for system, _ in systems] == list(ATSSystem)
        assert systems[-1] == (ATSSystem.UNKNOWN, "Unknown / Other")
        assert (ATSSystem.ICIMS, "iCIMS") in systems

    def test_unknown_platform_key_is_rejected(self, tmp_path):
        config_path = tmp_path / "platforms.yaml"
        config_path.write_text(
            "myspace:\n"
            "  name: MySpace\n"
            "  description: Not an ATS\n"
            "  url_patterns: []\n"
            "  text_patterns: []\n"
            "  tips: []\n"
            "  format_advice: []\n"
            "  keyword_advice: none\n"
            "  avoid_list: []\n"
        )
        with pytest.raises(ValueError, match="Unknown ATS platform 'myspace'"):
            load_platform_profiles(config_path)

    def test_profiles_are_cached(self):
        assert load_platform_profiles() is load_platform_profiles()
