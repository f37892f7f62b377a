"""Shared test fixtures."""

from __future__ import annotations

from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest

from rezzy.models.cover_letter import CoverLetterPayload
from rezzy.models.resume import ResumeDocument


@pytest.fixture
def sample_resume_data() -> dict:
    return {
        "basics": {
            "name": "Jane Doe",
            "label": "Backend Engineer",
            "email": "jane@example.com",
            "phone": "555-0100",
            "url": "https://jane.dev",
            "summary": "Backend engineer focused on APIs & data pipelines.",
            "location": {"city": "Portland", "region": "OR"},
            "profiles": [
                {"network": "GitHub", "username": "janedoe", "url": "https://github.com/janedoe"},
                {"network": "LinkedIn", "username": "janedoe", "url": "https://linkedin.com/in/janedoe"},
            ],
        },
        "work": [
            {
                "name": "Acme Corp",
                "position": "Senior Engineer",
                "location": "Remote",
                "startDate": "2021-03",
                "endDate": "Present",
                "summary": "Led the payments platform team.",
                "highlights": [
                    "Cut p99 latency by 40%",
                    "Migrated billing to event sourcing",
                ],
            },
            {
                "name": "Initech",
                "position": "Engineer",
                "startDate": "2018-01",
                "endDate": "2021-02",
                "highlights": ["Built the TPS report service"],
            },
        ],
        "education": [
            {
                "institution": "State University",
                "area": "Computer Science",
                "studyType": "Bachelor",
                "startDate": "2014",
                "endDate": "2018",
            }
        ],
        "certificates": [
            {"name": "AWS Solutions Architect", "date": "2022-05", "issuer": "Amazon"},
        ],
        "skills": [
            {"name": "Languages", "keywords": ["Python", "Go", "SQL"]},
            {"name": "Infrastructure", "keywords": ["Kubernetes", "Terraform"]},
        ],
        "interests": [
            {"name": "Distributed Systems"},
            {"name": "API Design"},
            {"name": "Observability"},
        ],
    }


@pytest.fixture
def sample_resume(sample_resume_data) -> ResumeDocument:
    return ResumeDocument.model_validate(sample_resume_data)


@pytest.fixture
def minimal_resume() -> ResumeDocument:
    return ResumeDocument.model_validate({"basics": {"name": "Jane Doe"}})


@pytest.fixture
def sample_letter() -> CoverLetterPayload:
    return CoverLetterPayload(
        greeting="Dear Hiring Manager,",
        company_street_address="1 Market St",
        company_city="San Francisco",
        company_state="CA",
        company_zip_code="94105",
        letter_body="I would love to bring my payments experience to your team.",
    )


@pytest.fixture
def placeholder_letter() -> CoverLetterPayload:
    return CoverLetterPayload(
        greeting="Dear Hiring Team,",
        company_street_address="[COMPANY ADDRESS]",
        company_city="[CITY]",
        company_state="[STATE]",
        company_zip_code="[ZIP CODE]",
        letter_body="Thank you for considering my application.",
    )


@pytest.fixture
def letter_date() -> date:
    return date(2024, 3, 5)


@pytest.fixture
def sample_jd_text() -> str:
    return """Senior Backend Engineer

Responsibilities:
- Design and operate payment APIs
- Own reliability of the billing pipeline

Requirements:
- 5+ years of Python or Go
- Experience with Kubernetes
"""


@pytest.fixture
def mock_provider(sample_resume, sample_letter) -> MagicMock:
    """A provider whose async operations return the sample fixtures."""
    provider = MagicMock()
    provider.name = "mock"
    provider.generate_cover_letter = AsyncMock(return_value=sample_letter)
    provider.process_document = AsyncMock(return_value=sample_resume)
    provider.aclose = AsyncMock()
    # no token accounting unless a test adds it
    del provider.get_token_summary
    return provider
