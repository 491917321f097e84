"""
ATS platform detection for job postings.

Guesses which applicant tracking system a posting is served through, from its
URL (high confidence) or its text (medium confidence), and returns
platform-specific formatting tips. Platform patterns and tips live in
configs/ats_platforms.yaml and are loaded once.

Examples:
    >>> detect_ats(job_url="https://acme.wd5.myworkdayjobs.com/careers/job/123")
    ATSDetectionResult(system=<ATSSystem.WORKDAY: 'workday'>, confidence='high', ...)
    >>> get_ats_tips(ATSSystem.TALEO).name
    'Oracle Taleo'
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from omegaconf import OmegaConf

from atscheck.contexts.intake.logger import log_detection_result

ATS_PLATFORMS_PATH = Path(__file__).resolve().parents[2] / "configs" / "ats_platforms.yaml"


class ATSSystem(Enum):
    """Applicant tracking systems with known fingerprints."""

    WORKDAY = "workday"
    GREENHOUSE = "greenhouse"
    LEVER = "lever"
    ICIMS = "icims"
    TALEO = "taleo"
    SUCCESSFACTORS = "successfactors"
    SMARTRECRUITERS = "smartrecruiters"
    JOBVITE = "jobvite"
    BAMBOOHR = "bamboohr"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ATSTips:
    """Optimization advice for one platform."""

    name: str
    description: str
    tips: Tuple[str, ...]
    format_advice: Tuple[str, ...]
    keyword_advice: str
    avoid_list: Tuple[str, ...]


@dataclass(frozen=True)
class PlatformProfile:
    """Compiled fingerprints and tips for one platform."""

    system: ATSSystem
    url_patterns: Tuple[re.Pattern, ...]
    text_patterns: Tuple[re.Pattern, ...]
    tips: ATSTips


@dataclass
class ATSDetectionResult:
    """
    Result of platform detection.

    Attributes:
        system: Detected platform (UNKNOWN when nothing matched)
        confidence: "high" (URL match), "medium" (text match) or "low"
        indicators: Human-readable reasons for the decision
    """

    system: ATSSystem
    confidence: str
    indicators: List[str] = field(default_factory=list)


@lru_cache(maxsize=None)
def load_platform_profiles(config_path: Path = ATS_PLATFORMS_PATH) -> Dict[ATSSystem, PlatformProfile]:
    """
    Load platform fingerprints and tips from YAML.

    Args:
        config_path: Path to the platforms YAML (defaults to the packaged file)

    Returns:
        Dict mapping ATSSystem to its profile, in file order

    Raises:
        ValueError: If the file names a platform that is not an ATSSystem
    """
    raw = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)

    profiles = {}
    for key, entry in raw.items():
        try:
            system = ATSSystem(key)
        except ValueError:
            available = [s.value for s in ATSSystem]
            raise ValueError(
                f"Unknown ATS platform '{key}'. Available platforms: {available}"
            ) from None

        profiles[system] = PlatformProfile(
            system=system,
            url_patterns=tuple(re.compile(p, re.IGNORECASE) for p in entry["url_patterns"]),
            text_patterns=tuple(re.compile(p, re.IGNORECASE) for p in entry["text_patterns"]),
            tips=ATSTips(
                name=entry["name"],
                description=entry["description"],
                tips=tuple(entry["tips"]),
                format_advice=tuple(entry["format_advice"]),
                keyword_advice=entry["keyword_advice"],
                avoid_list=tuple(entry["avoid_list"]),
            ),
        )

    return profiles


def detect_ats(job_url: Optional[str] = None, job_text: Optional[str] = None) -> ATSDetectionResult:
    """
    Detect which ATS a job posting likely uses.

    URL fingerprints are checked first for every platform, then text mentions.
    The first match wins, in platform order.

    Args:
        job_url: Posting or application URL
        job_text: Posting body

    Returns:
        ATSDetectionResult (UNKNOWN with low confidence when nothing matched)
    """
    profiles = load_platform_profiles()

    if job_url:
        for system, profile in profiles.items():
            if any(pattern.search(job_url) for pattern in profile.url_patterns):
                result = ATSDetectionResult(
                    system=system,
                    confidence="high",
                    indicators=[f"URL matches {system.value} pattern"],
                )
                log_detection_result(result)
                return result

    if job_text:
        for system, profile in profiles.items():
            if any(pattern.search(job_text) for pattern in profile.text_patterns):
                result = ATSDetectionResult(
                    system=system,
                    confidence="medium",
                    indicators=[f"Job posting mentions {system.value}"],
                )
                log_detection_result(result)
                return result

    result = ATSDetectionResult(
        system=ATSSystem.UNKNOWN,
        confidence="low",
        indicators=["No ATS indicators found - using safe defaults"],
    )
    log_detection_result(result)
    return result


def get_ats_tips(system) -> ATSTips:
    """
    Optimization tips for a platform.

    Args:
        system: ATSSystem or its string value; anything unrecognised falls back to UNKNOWN

    Returns:
        ATSTips for the platform
    """
    profiles = load_platform_profiles()

    if not isinstance(system, ATSSystem):
        try:
            system = ATSSystem(system)
        except ValueError:
            system = ATSSystem.UNKNOWN

    profile = profiles.get(system) or profiles[ATSSystem.UNKNOWN]
    return profile.tips


def get_all_ats_systems() -> List[Tuple[ATSSystem, str]]:
    """
    All platforms with display names, for manual selection.

    The fallback entry is labelled "Unknown / Other".
    """
    profiles = load_platform_profiles()
    return [
        (system, "Unknown / Other" if system is ATSSystem.UNKNOWN else profile.tips.name)
        for system, profile in profiles.items()
    ]
