"""Apply the scorer across jobs, filter, explain and rank the matches."""
from __future__ import annotations

from datetime import datetime, timezone

from jobmatch.log import get_logger
from jobmatch.models import Job, Match, MatchingConfig, MatchScore, Resume
from jobmatch.scorer import calculate_score, normalize_skills

log = get_logger(__name__)

REASON_SEPARATOR = " • "

EXCELLENT_SCORE = 80
STRONG_SCORE = 65


def _fmt_years(years: float) -> str:
    return f"{years:g}"


def matching_skills(skill_set: frozenset[str], job_skills: list[str]) -> list[str]:
    """Job skills the resume has, in the job's order and casing."""
    return [s for s in job_skills if s.lower() in skill_set]


def exceeds_max_years(job: Job, resume: Resume) -> bool:
    max_years = resume.preferences.max_years_required
    return max_years is not None and job.years_experience_required > max_years


def build_reason(
    job: Job,
    resume: Resume,
    score: MatchScore,
    matching_required: list[str],
    matching_preferred: list[str],
) -> str:
    reasons: list[str] = []

    matched, needed = len(matching_required), len(job.required_skills)
    if matched == needed:
        reasons.append(f"Perfect skill match ({matched}/{needed} required skills)")
    else:
        reasons.append(f"Strong skill match ({matched}/{needed} required skills)")

    if matching_preferred:
        reasons.append(f"{len(matching_preferred)} preferred skills")

    required_years = _fmt_years(job.years_experience_required)
    if resume.profile.years_of_experience >= job.years_experience_required:
        reasons.append(f"Experience requirement met ({required_years}+ years)")
    else:
        reasons.append(f"Close to experience requirement (need {required_years} years)")

    if score.total >= EXCELLENT_SCORE:
        reasons.insert(0, "Excellent match")
    elif score.total >= STRONG_SCORE:
        reasons.insert(0, "Strong match")
    else:
        reasons.insert(0, "Good match")

    return REASON_SEPARATOR.join(reasons)


def find_matches(jobs: list[Job], resume: Resume, config: MatchingConfig) -> list[Match]:
    """Jobs clearing the threshold, highest score first.

    Ties keep their input order. ``min_years_required`` and
    ``min_skill_match`` are not applied here; only ``max_years_required``
    excludes jobs before scoring.
    """
    skill_set = normalize_skills(resume.skills)
    matches: list[Match] = []
    skipped = 0

    for job in jobs:
        if exceeds_max_years(job, resume):
            skipped += 1
            log.debug(
                "Skipping %s: requires %s years (max %s)",
                job.id, job.years_experience_required,
                resume.preferences.max_years_required,
            )
            continue

        score = calculate_score(job, resume, config, skill_set=skill_set)
        if score.total < config.threshold:
            log.debug("Job %s scored %.1f, below threshold %s", job.id, score.total, config.threshold)
            continue

        required = matching_skills(skill_set, job.required_skills)
        preferred = matching_skills(skill_set, job.preferred_skills)
        matches.append(
            Match(
                job=job,
                score=score,
                matching_required_skills=required,
                matching_preferred_skills=preferred,
                reason=build_reason(job, resume, score, required, preferred),
                matched_at=datetime.now(timezone.utc),
            )
        )

    # list.sort is stable, so equal totals stay in input order
    matches.sort(key=lambda m: m.score.total, reverse=True)
    log.info(
        "Scored %d jobs → %d at or above %s (%d over max years)",
        len(jobs) - skipped, len(matches), config.threshold, skipped,
    )
    return matches
