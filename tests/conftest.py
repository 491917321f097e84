"""Shared resume fixtures."""

from pathlib import Path

import pytest

FIXTURES_PATH = Path(__file__).parent / "fixtures"

CONTACT_LINE = "Email: jane.doe@example.com - Phone: (555) 123-4567 - linkedin.com/in/janedoe"


@pytest.fixture
def clean_resume() -> str:
    """Resume that passes every check (score 100)."""
    return (FIXTURES_PATH / "clean_resume.txt").read_text(encoding="utf-8")


@pytest.fixture
def email_only_resume(clean_resume) -> str:
    """Clean resume with the phone number and LinkedIn URL removed."""
    assert CONTACT_LINE in clean_resume
    return clean_resume.replace(CONTACT_LINE, "Email: jane.doe@example.com")


@pytest.fixture
def messy_resume() -> str:
    """Resume with tables, tabs, decorative symbols, smart quotes and creative headings."""
    return (FIXTURES_PATH / "messy_resume.txt").read_text(encoding="utf-8")
