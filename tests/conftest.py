"""Pytest fixtures for LegitMate tests."""
import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from legitmate.models import JobInput


# =============================================================================
# JOB FIXTURES
# =============================================================================


@pytest.fixture
def scam_job():
    """A posting full of raw-text red flags."""
    return JobInput(
        title="",
        company="",
        description="Immediate joining, no experience needed, urgent telegram contact, $5000 weekly",
    )


@pytest.fixture
def legit_job():
    """An ordinary engineering posting."""
    return JobInput(
        title="",
        company="Acme Corp",
        description="We are hiring a backend engineer with 3+ years experience in distributed systems",
    )


@pytest.fixture
def detailed_job():
    """A long posting with trustworthy indicators."""
    description = (
        "We offer a competitive benefits package and clear career growth. "
        + "You will design and operate distributed systems with a friendly team. " * 5
    )
    return JobInput(
        title="Backend Engineer",
        company="Acme Corp",
        description=description,
        location="Berlin",
        department="Platform",
    )


# =============================================================================
# BACKEND RESPONSE FIXTURES
# =============================================================================


@pytest.fixture
def hosted_payload():
    """A response in the hosted service's native shape."""
    return {
        "result": "legit",
        "confidence": 72,
        "keywords": ["benefits package"],
        "title": "Backend Engineer",
        "company": "Acme Corp",
        "riskFactors": [],
        "trustworthyIndicators": ["Company name provided"],
        "analysisComment": "This appears to be a legitimate opportunity with 1 positive indicators.",
    }


@pytest.fixture
def custom_payload():
    """A response from a user-run prediction API."""
    return {
        "verdict": "Fake",
        "confidence": 0.93,
        "keywords": ["telegram", "upfront fee"],
    }
