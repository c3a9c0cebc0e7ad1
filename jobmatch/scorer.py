"""Score a job against a resume: required skills, preferred skills, experience."""
from __future__ import annotations

import math
from typing import Iterable

from jobmatch.models import Job, MatchingConfig, MatchScore, Resume


def _normalize(s: str) -> str:
    return (s or "").lower()


def normalize_skills(skills: Iterable[str]) -> frozenset[str]:
    """Case-insensitive lookup set for a resume's skills."""
    return frozenset(_normalize(s) for s in skills)


def round_tenth(value: float) -> float:
    """Round half-up to one decimal place."""
    return math.floor(value * 10 + 0.5) / 10


def skill_score(skill_set: frozenset[str], job_skills: list[str], weight: float) -> float:
    # No listed skills earns nothing, not the full weight.
    if not job_skills:
        return 0.0
    matched = sum(1 for s in job_skills if _normalize(s) in skill_set)
    return matched / len(job_skills) * weight


def experience_score(
    user_years: float, required_years: float, weight: float, buffer_years: float
) -> float:
    """Full weight when the requirement is met, linear falloff inside the buffer.

    One year short with a one-year buffer earns half the weight; anything
    beyond the buffer earns nothing.
    """
    diff = required_years - user_years
    if diff <= 0:
        return float(weight)
    if diff <= buffer_years:
        ratio = 1 - diff / (buffer_years + 1)
        return ratio * weight
    return 0.0


def calculate_score(
    job: Job,
    resume: Resume,
    config: MatchingConfig,
    *,
    skill_set: frozenset[str] | None = None,
) -> MatchScore:
    if skill_set is None:
        skill_set = normalize_skills(resume.skills)

    required = round_tenth(
        skill_score(skill_set, job.required_skills, config.required_skills_weight)
    )
    preferred = round_tenth(
        skill_score(skill_set, job.preferred_skills, config.preferred_skills_weight)
    )
    experience = round_tenth(
        experience_score(
            resume.profile.years_of_experience,
            job.years_experience_required,
            config.experience_weight,
            config.experience_buffer_years,
        )
    )

    # Components are rounded first, then the sum is rounded again.
    return MatchScore(
        total=round_tenth(required + preferred + experience),
        required_skills_score=required,
        preferred_skills_score=preferred,
        experience_score=experience,
    )
