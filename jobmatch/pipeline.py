"""
One matching pass.

Runs: load jobs → load resume → find matches → notify.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from jobmatch.config import get_env, get_matching_config, load_resume
from jobmatch.log import get_logger
from jobmatch.matcher import find_matches
from jobmatch.models import Job, Match, MatchingConfig, Resume
from jobmatch.notifiers import Notifier, get_notifiers
from jobmatch.sources import JobSource, get_job_source

log = get_logger(__name__)


def _notify_all(notifiers: list[Notifier], matches: list[Match], resume: Resume) -> int:
    """Deliver to every notifier; returns how many failed."""
    failed = 0
    for notifier in notifiers:
        name = notifier.__class__.__name__
        try:
            notifier.notify(matches, resume)
        except Exception as exc:
            failed += 1
            log.error("[%s] notification FAILED: %s", name, exc)
    return failed


def run_check(
    *,
    source: JobSource | None = None,
    resume: Resume | None = None,
    notifiers: list[Notifier] | None = None,
    config: MatchingConfig | None = None,
) -> dict[str, Any]:
    """Full pass. Load failures propagate before any matching happens."""
    source = source or get_job_source(get_env)
    notifiers = get_notifiers(get_env) if notifiers is None else notifiers
    config = config or get_matching_config()

    log.info("Step 1 of 4: fetching job postings (%s)", source.__class__.__name__)
    jobs = source.fetch_jobs()

    log.info("Step 2 of 4: loading resume")
    if resume is None:
        resume = load_resume()

    log.info("Step 3 of 4: matching %d jobs for %s", len(jobs), resume.user_id)
    matches = find_matches(jobs, resume, config)

    log.info("Step 4 of 4: notifying %d channel(s)", len(notifiers))
    failed = _notify_all(notifiers, matches, resume)

    log.info(
        "Check complete — jobs=%d, matches=%d, notify_failures=%d",
        len(jobs), len(matches), failed,
    )
    return {
        "jobs_checked": len(jobs),
        "matches_found": len(matches),
        "top_score": matches[0].score.total if matches else None,
        "user_email": resume.profile.email,
        "notify_failures": failed,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


def match_job(
    job: Job,
    resume: Resume,
    notifiers: list[Notifier],
    config: MatchingConfig | None = None,
) -> dict[str, Any]:
    """Score a single newly arrived job; notify only when it matched."""
    config = config or get_matching_config()
    matches = find_matches([job], resume, config)
    if not matches:
        return {"matched": False, "user_id": resume.user_id}

    match = matches[0]
    log.info("Match found for %s! Score: %.1f", job.id, match.score.total)
    _notify_all(notifiers, [match], resume)
    return {"matched": True, "score": match.score.total, "user_id": resume.user_id}


def source_and_match(
    *,
    source: JobSource | None = None,
    resume: Resume | None = None,
    notifiers: list[Notifier] | None = None,
    config: MatchingConfig | None = None,
    since: datetime | str | None = None,
) -> dict[str, Any]:
    """Per-arrival flow: each fetched job is matched and notified on its own."""
    source = source or get_job_source(get_env)
    notifiers = get_notifiers(get_env) if notifiers is None else notifiers
    config = config or get_matching_config()

    jobs = source.fetch_jobs() if since is None else source.fetch_jobs_since(since)
    if resume is None:
        resume = load_resume()
    log.info("Sourced %d jobs, matching each against %s", len(jobs), resume.user_id)

    matched = sum(1 for job in jobs if match_job(job, resume, notifiers, config)["matched"])
    return {"jobs_found": len(jobs), "matched": matched, "user_id": resume.user_id}
