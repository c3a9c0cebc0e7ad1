"""
Tests for record parsing and serialization.
"""

from datetime import datetime, timezone

import pytest

from jobmatch.models import Job, LoadError, Match, MatchingConfig, MatchScore, Resume, parse_timestamp


class TestJobFromDict:
    """Test job parsing."""

    def test_camel_case_record(self, job_record):
        job = Job.from_dict(job_record)

        assert job.id == "job-1"
        assert job.years_experience_required == 3
        assert job.required_skills == ["React", "TypeScript", "Git"]
        assert job.posted_at == datetime(2025, 11, 24, 10, 0, tzinfo=timezone.utc)

    def test_snake_case_record(self, job_record):
        record = {
            "id": "job-2",
            "title": "Dev",
            "company": "Acme",
            "posted_at": "2025-11-24T10:00:00+00:00",
            "years_experience_required": 2,
            "required_skills": ["Go"],
        }
        job = Job.from_dict(record)

        assert job.required_skills == ["Go"]
        assert job.preferred_skills == []
        assert job.location == ""

    def test_missing_required_field(self, job_record):
        del job_record["title"]
        with pytest.raises(LoadError, match="title"):
            Job.from_dict(job_record)

    def test_negative_experience_rejected(self, job_record):
        job_record["yearsExperienceRequired"] = -1
        with pytest.raises(LoadError):
            Job.from_dict(job_record)

    def test_non_numeric_experience_rejected(self, job_record):
        job_record["yearsExperienceRequired"] = "lots"
        with pytest.raises(LoadError):
            Job.from_dict(job_record)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), "nan", "-inf"])
    def test_non_finite_experience_rejected(self, job_record, value):
        job_record["yearsExperienceRequired"] = value
        with pytest.raises(LoadError, match="finite"):
            Job.from_dict(job_record)

    def test_skills_must_be_a_list(self, job_record):
        job_record["requiredSkills"] = "React"
        with pytest.raises(LoadError):
            Job.from_dict(job_record)

    def test_not_an_object(self):
        with pytest.raises(LoadError):
            Job.from_dict(["job"])

    def test_to_dict_uses_record_field_names(self, job_record):
        data = Job.from_dict(job_record).to_dict()
        assert data["requiredSkills"] == job_record["requiredSkills"]
        assert data["postedAt"] == "2025-11-24T10:00:00+00:00"


class TestResumeFromDict:
    """Test resume parsing."""

    def test_full_record(self, resume_record):
        resume = Resume.from_dict(resume_record)

        assert resume.user_id == "test-user-123"
        assert resume.profile.years_of_experience == 3
        assert resume.preferences.max_years_required == 5
        assert resume.preferences.min_skill_match == 2

    def test_optional_preferences(self, resume_record):
        resume_record["preferences"] = {"minSkillMatch": 1}
        resume = Resume.from_dict(resume_record)

        assert resume.preferences.min_years_required is None
        assert resume.preferences.max_years_required is None

    def test_missing_preferences_use_defaults(self, resume_record):
        del resume_record["preferences"]
        assert Resume.from_dict(resume_record).preferences.min_skill_match == 0

    @pytest.mark.parametrize("value", [float("inf"), "inf", "nan"])
    def test_non_finite_skill_match_rejected(self, resume_record, value):
        resume_record["preferences"]["minSkillMatch"] = value
        with pytest.raises(LoadError, match="minSkillMatch"):
            Resume.from_dict(resume_record)

    def test_nan_experience_rejected(self, resume_record):
        resume_record["profile"]["yearsOfExperience"] = float("nan")
        with pytest.raises(LoadError, match="yearsOfExperience"):
            Resume.from_dict(resume_record)

    def test_missing_profile(self, resume_record):
        del resume_record["profile"]
        with pytest.raises(LoadError, match="profile"):
            Resume.from_dict(resume_record)

    def test_empty_document(self):
        with pytest.raises(LoadError):
            Resume.from_dict(None)


class TestParseTimestamp:
    """Test timestamp parsing."""

    def test_z_suffix(self):
        assert parse_timestamp("2025-01-01T00:00:00Z").tzinfo is not None

    def test_naive_assumed_utc(self):
        assert parse_timestamp("2025-01-01T00:00:00").tzinfo == timezone.utc

    def test_invalid(self):
        with pytest.raises(LoadError):
            parse_timestamp("yesterday")


class TestMatchingConfig:
    """Test config record."""

    def test_defaults(self):
        config = MatchingConfig()
        assert (config.threshold, config.total_weight, config.experience_buffer_years) == (50, 100, 1)

    def test_frozen(self):
        config = MatchingConfig()
        with pytest.raises(AttributeError):
            config.threshold = 10


class TestMatchToDict:
    """Test match serialization."""

    def test_nested_record(self, make_job):
        stamp = datetime(2025, 11, 24, 10, 30, tzinfo=timezone.utc)
        match = Match(
            job=make_job(required=["React"], job_id="job-9"),
            score=MatchScore(total=86.7, required_skills_score=70, preferred_skills_score=6.7, experience_score=10),
            matching_required_skills=["React"],
            matching_preferred_skills=[],
            reason="Excellent match",
            matched_at=stamp,
        )
        data = match.to_dict()

        assert data["job"]["id"] == "job-9"
        assert data["score"] == {
            "total": 86.7,
            "requiredSkillsScore": 70,
            "preferredSkillsScore": 6.7,
            "experienceScore": 10,
        }
        assert data["matchingRequiredSkills"] == ["React"]
        assert data["matchedAt"] == "2025-11-24T10:30:00+00:00"
