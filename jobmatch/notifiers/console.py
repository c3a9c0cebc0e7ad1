"""Print matches to a terminal."""
from __future__ import annotations

import sys
from typing import TextIO

from jobmatch.log import get_logger
from jobmatch.models import Match, Resume
from jobmatch.notifiers.base import Notifier

log = get_logger(__name__)

_RULE = "=" * 80


def format_match(index: int, match: Match) -> list[str]:
    job, score = match.job, match.score
    lines = [
        f"{index}. {job.title} @ {job.company}",
        f"   Location: {job.location or '—'} | Salary: {job.salary or '—'}",
        f"   Score: {score.total:.1f}/100 "
        f"(required {score.required_skills_score:.1f}, "
        f"preferred {score.preferred_skills_score:.1f}, "
        f"experience {score.experience_score:.1f})",
    ]
    if match.matching_required_skills:
        lines.append(f"   Required skills: {', '.join(match.matching_required_skills)}")
    if match.matching_preferred_skills:
        lines.append(f"   Preferred skills: {', '.join(match.matching_preferred_skills)}")
    lines.append(f"   Why: {match.reason}")
    return lines


class ConsoleNotifier(Notifier):
    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream

    def notify(self, matches: list[Match], resume: Resume) -> None:
        out = self.stream or sys.stdout
        lines = [
            _RULE,
            f"Job matches for {resume.profile.name} <{resume.profile.email}>",
            _RULE,
        ]
        if not matches:
            lines.append("No new job matches found. We'll keep looking!")
        else:
            noun = "job" if len(matches) == 1 else "jobs"
            lines.append(f"Found {len(matches)} {noun} matching your profile:")
            for i, m in enumerate(matches, 1):
                lines.append("")
                lines.extend(format_match(i, m))
        lines.append(_RULE)
        print("\n".join(lines), file=out)
        log.debug("Printed %d matches for %s", len(matches), resume.user_id)
