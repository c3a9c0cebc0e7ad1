"""
Pytest configuration and shared fixtures.
"""

import os
from datetime import datetime, timezone
from pathlib import Path

import pytest

os.environ.setdefault("LOG_TO_FILE", "false")
os.environ["JOBMATCH_HOME"] = str(Path(__file__).resolve().parent.parent)

from jobmatch.models import Job, MatchingConfig, Resume, UserPreferences, UserProfile  # noqa: E402

CONFIG_ENV_KEYS = [
    "MATCH_THRESHOLD", "REQUIRED_SKILLS_WEIGHT", "PREFERRED_SKILLS_WEIGHT",
    "EXPERIENCE_WEIGHT", "EXPERIENCE_BUFFER_YEARS", "RESUME_PATH",
    "JOBS_URL", "JOBS_API_KEY", "JOBS_PATH", "WRITE_REPORT",
    "SMTP_HOST", "SMTP_PORT", "SMTP_USER", "SMTP_PASSWORD", "FROM_EMAIL", "TO_EMAIL",
    "CHECK_INTERVAL_MINUTES",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Environment without any jobmatch overrides."""
    for key in CONFIG_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.fixture
def config() -> MatchingConfig:
    """Default weights 70/20/10, buffer 1, threshold 50."""
    return MatchingConfig(
        threshold=50,
        required_skills_weight=70,
        preferred_skills_weight=20,
        experience_weight=10,
        experience_buffer_years=1,
    )


@pytest.fixture
def resume() -> Resume:
    """Mid-level developer with five skills and a 5-year ceiling."""
    return Resume(
        user_id="test-user-123",
        profile=UserProfile(name="Test User", email="test@example.com", years_of_experience=3),
        skills=["React", "TypeScript", "Node.js", "PostgreSQL", "Git"],
        preferences=UserPreferences(min_years_required=0, max_years_required=5, min_skill_match=2),
    )


@pytest.fixture
def make_job():
    """Factory for jobs with sensible defaults."""
    counter = [0]

    def _make(
        required=(),
        preferred=(),
        years=3,
        job_id=None,
        title="Developer",
        company="TechCorp",
        posted_at="2025-11-24T10:00:00+00:00",
    ) -> Job:
        counter[0] += 1
        return Job(
            id=job_id or f"job-{counter[0]}",
            title=title,
            company=company,
            posted_at=datetime.fromisoformat(posted_at).astimezone(timezone.utc),
            years_experience_required=years,
            required_skills=list(required),
            preferred_skills=list(preferred),
            location="Remote",
            salary="$90k-$110k",
        )

    return _make


@pytest.fixture
def job_record() -> dict:
    """Job record as stored in the JSON data files."""
    return {
        "id": "job-1",
        "title": "Frontend Developer",
        "company": "TechCorp",
        "postedAt": "2025-11-24T10:00:00Z",
        "yearsExperienceRequired": 3,
        "requiredSkills": ["React", "TypeScript", "Git"],
        "preferredSkills": ["Node.js"],
        "location": "Remote",
        "salary": "$90k-$110k",
    }


@pytest.fixture
def resume_record() -> dict:
    """Resume record as stored in the profile file."""
    return {
        "userId": "test-user-123",
        "profile": {"name": "Test User", "email": "test@example.com", "yearsOfExperience": 3},
        "skills": ["React", "TypeScript", "Node.js", "PostgreSQL", "Git"],
        "preferences": {"minYearsRequired": 0, "maxYearsRequired": 5, "minSkillMatch": 2},
    }
