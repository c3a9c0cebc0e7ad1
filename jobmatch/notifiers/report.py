"""Markdown report of a matching pass."""
from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from jobmatch.config import REPORTS_DIR
from jobmatch.log import get_logger
from jobmatch.models import Match, Resume
from jobmatch.notifiers.base import Notifier

log = get_logger(__name__)

TOP_N = 15


def _clip(text: str, width: int) -> str:
    return text[:width] + ("…" if len(text) > width else "")


def build_match_report(matches: list[Match], resume: Resume) -> str:
    date = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")
    lines: list[str] = [f"# Job Match Report — {date}", ""]
    lines.append(f"For **{resume.profile.name}** ({resume.profile.email})")
    lines.append("")

    if not matches:
        lines.append("No new job matches found.")
        lines.append("")
        return "\n".join(lines)

    top = matches[:TOP_N]
    lines.append(f"**{len(matches)}** matching jobs")
    lines.append("")
    lines.append("## Top Matches")
    lines.append("")
    for m in top:
        s = m.score
        lines.append(f"### {m.job.title} @ {m.job.company}")
        lines.append(
            f"- **Score:** {s.total:.1f} — required {s.required_skills_score:.1f}"
            f" | preferred {s.preferred_skills_score:.1f} | experience {s.experience_score:.1f}"
        )
        lines.append(f"- **Location:** {m.job.location}")
        if m.job.salary:
            lines.append(f"- **Salary:** {m.job.salary}")
        if m.matching_required_skills:
            lines.append(f"- **Required skills:** {', '.join(m.matching_required_skills)}")
        if m.matching_preferred_skills:
            lines.append(f"- **Preferred skills:** {', '.join(m.matching_preferred_skills)}")
        lines.append(f"- **Why:** {m.reason}")
        lines.append("")

    lines.append("---")
    lines.append("")
    lines.append("## Quick Reference")
    lines.append("")
    lines.append("| # | Role | Company | Location | Score |")
    lines.append("|--:|------|---------|----------|------:|")
    for i, m in enumerate(top, 1):
        loc = m.job.location.split(",")[0][:18]
        lines.append(
            f"| {i} | {_clip(m.job.title, 40)} | {_clip(m.job.company, 22)} | {loc} | {m.score.total:.1f} |"
        )
    lines.append("")

    log.info("Built match report: %d matches", len(matches))
    return "\n".join(lines)


def write_report(content: str, reports_dir: Path | None = None) -> Path:
    reports_dir = reports_dir or REPORTS_DIR
    reports_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now(timezone.utc).strftime("%Y-%m-%d_%H%M%S")
    path = reports_dir / f"matches_{stamp}.md"
    path.write_text(content, encoding="utf-8")
    log.info("Report written → %s", path)
    return path


def write_matches_json(matches: list[Match], resume: Resume, path: Path) -> Path:
    """Machine-readable copy of the matches, next to the Markdown report."""
    payload = {
        "userId": resume.user_id,
        "generatedAt": datetime.now(timezone.utc).isoformat(),
        "matches": [m.to_dict() for m in matches],
    }
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return path


class ReportNotifier(Notifier):
    def __init__(self, reports_dir: Path | None = None) -> None:
        self.reports_dir = reports_dir
        self.last_path: Path | None = None

    def notify(self, matches: list[Match], resume: Resume) -> None:
        self.last_path = write_report(build_match_report(matches, resume), self.reports_dir)
        write_matches_json(matches, resume, self.last_path.with_suffix(".json"))
