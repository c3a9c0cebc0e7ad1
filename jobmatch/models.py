"""Data models for jobs, resumes and matches."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

_MISSING = object()


class LoadError(Exception):
    """Job or resume data could not be loaded or parsed."""


def _pick(data: dict, *keys: str, default: Any = _MISSING) -> Any:
    """First present key among camelCase / snake_case spellings."""
    for key in keys:
        if key in data:
            return data[key]
    if default is _MISSING:
        raise LoadError(f"Missing required field: {keys[0]}")
    return default


def _number(value: Any, name: str) -> float:
    if isinstance(value, bool):
        raise LoadError(f"Field '{name}' must be a number, got {value!r}")
    if not isinstance(value, (int, float)):
        try:
            value = float(value)
        except (TypeError, ValueError):
            raise LoadError(f"Field '{name}' must be a number, got {value!r}") from None
    if isinstance(value, float) and not math.isfinite(value):
        raise LoadError(f"Field '{name}' must be a finite number, got {value!r}")
    if value < 0:
        raise LoadError(f"Field '{name}' must be non-negative, got {value!r}")
    return value


def _str_list(value: Any, name: str) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise LoadError(f"Field '{name}' must be a list of strings")
    return [str(v) for v in value]


def parse_timestamp(value: Any) -> datetime:
    """ISO 8601 string (``Z`` suffix allowed) or datetime → aware datetime."""
    if isinstance(value, datetime):
        ts = value
    else:
        try:
            ts = datetime.fromisoformat(str(value).strip().replace("Z", "+00:00"))
        except ValueError:
            raise LoadError(f"Invalid timestamp: {value!r}") from None
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts


@dataclass
class Job:
    id: str
    title: str
    company: str
    posted_at: datetime
    years_experience_required: float
    required_skills: list[str] = field(default_factory=list)
    preferred_skills: list[str] = field(default_factory=list)
    location: str = ""
    salary: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> Job:
        if not isinstance(data, dict):
            raise LoadError(f"Job record must be an object, got {type(data).__name__}")
        return cls(
            id=str(_pick(data, "id")),
            title=str(_pick(data, "title")),
            company=str(_pick(data, "company")),
            posted_at=parse_timestamp(_pick(data, "postedAt", "posted_at")),
            years_experience_required=_number(
                _pick(data, "yearsExperienceRequired", "years_experience_required"),
                "yearsExperienceRequired",
            ),
            required_skills=_str_list(
                _pick(data, "requiredSkills", "required_skills", default=[]),
                "requiredSkills",
            ),
            preferred_skills=_str_list(
                _pick(data, "preferredSkills", "preferred_skills", default=[]),
                "preferredSkills",
            ),
            location=str(_pick(data, "location", default="") or ""),
            salary=str(_pick(data, "salary", default="") or ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "company": self.company,
            "postedAt": self.posted_at.isoformat(),
            "yearsExperienceRequired": self.years_experience_required,
            "requiredSkills": list(self.required_skills),
            "preferredSkills": list(self.preferred_skills),
            "location": self.location,
            "salary": self.salary,
        }


@dataclass
class UserProfile:
    name: str
    email: str
    years_of_experience: float


@dataclass
class UserPreferences:
    # min_years_required and min_skill_match are carried but not enforced
    # by the matcher.
    min_years_required: float | None = None
    max_years_required: float | None = None
    min_skill_match: int = 0


@dataclass
class Resume:
    user_id: str
    profile: UserProfile
    skills: list[str] = field(default_factory=list)
    preferences: UserPreferences = field(default_factory=UserPreferences)

    @classmethod
    def from_dict(cls, data: dict) -> Resume:
        if not isinstance(data, dict):
            raise LoadError("Resume must be an object")
        prof = _pick(data, "profile")
        if not isinstance(prof, dict):
            raise LoadError("Field 'profile' must be an object")
        prefs = _pick(data, "preferences", default={}) or {}
        if not isinstance(prefs, dict):
            raise LoadError("Field 'preferences' must be an object")

        min_years = _pick(prefs, "minYearsRequired", "min_years_required", default=None)
        max_years = _pick(prefs, "maxYearsRequired", "max_years_required", default=None)
        min_skill = _pick(prefs, "minSkillMatch", "min_skill_match", default=0)

        return cls(
            user_id=str(_pick(data, "userId", "user_id")),
            profile=UserProfile(
                name=str(_pick(prof, "name")),
                email=str(_pick(prof, "email")),
                years_of_experience=_number(
                    _pick(prof, "yearsOfExperience", "years_of_experience"),
                    "yearsOfExperience",
                ),
            ),
            skills=_str_list(_pick(data, "skills", default=[]), "skills"),
            preferences=UserPreferences(
                min_years_required=None if min_years is None else _number(min_years, "minYearsRequired"),
                max_years_required=None if max_years is None else _number(max_years, "maxYearsRequired"),
                min_skill_match=int(_number(min_skill, "minSkillMatch")),
            ),
        )


@dataclass
class MatchScore:
    total: float
    required_skills_score: float
    preferred_skills_score: float
    experience_score: float

    def to_dict(self) -> dict[str, float]:
        return {
            "total": self.total,
            "requiredSkillsScore": self.required_skills_score,
            "preferredSkillsScore": self.preferred_skills_score,
            "experienceScore": self.experience_score,
        }


@dataclass
class Match:
    job: Job
    score: MatchScore
    matching_required_skills: list[str]
    matching_preferred_skills: list[str]
    reason: str
    matched_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "job": self.job.to_dict(),
            "score": self.score.to_dict(),
            "matchingRequiredSkills": list(self.matching_required_skills),
            "matchingPreferredSkills": list(self.matching_preferred_skills),
            "reason": self.reason,
            "matchedAt": self.matched_at.isoformat(),
        }


@dataclass(frozen=True)
class MatchingConfig:
    threshold: float = 50
    required_skills_weight: float = 70
    preferred_skills_weight: float = 20
    experience_weight: float = 10
    experience_buffer_years: float = 1

    @property
    def total_weight(self) -> float:
        return (
            self.required_skills_weight
            + self.preferred_skills_weight
            + self.experience_weight
        )
