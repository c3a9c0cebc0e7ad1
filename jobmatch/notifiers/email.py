"""Send the match report by email (HTML-formatted)."""
from __future__ import annotations

import html
import re
import smtplib
from datetime import datetime, timezone
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Callable

from jobmatch.log import get_logger
from jobmatch.models import Match, Resume
from jobmatch.notifiers.base import Notifier, NotifyError
from jobmatch.notifiers.report import build_match_report
from jobmatch.retry import retry

log = get_logger(__name__)


def _inline(text: str) -> str:
    """Escape the text, then convert inline markdown (bold, italic, code) to HTML."""
    text = html.escape(text, quote=False)
    text = re.sub(r'\*\*(.+?)\*\*', r'<strong>\1</strong>', text)
    text = re.sub(r'(?<!\w)_(.+?)_(?!\w)', r'<em>\1</em>', text)
    text = re.sub(
        r'`(.+?)`',
        r'<code style="background:#f0f0f0;padding:1px 4px;border-radius:3px">\1</code>',
        text,
    )
    return text


def md_to_html(md: str) -> str:
    """Lightweight markdown-to-HTML for the report email."""
    html_parts: list[str] = []
    in_table = False

    for line in md.split("\n"):
        stripped = line.strip()

        if in_table and not (stripped.startswith("|") and stripped.endswith("|")):
            html_parts.append("</table>")
            in_table = False

        if not stripped:
            html_parts.append("<br>")
            continue

        heading = re.match(r"^(#{1,3}) (.*)$", stripped)
        if heading:
            level = len(heading.group(1))
            html_parts.append(f"<h{level}>{_inline(heading.group(2))}</h{level}>")
            continue

        if stripped == "---":
            html_parts.append('<hr style="border:none;border-top:1px solid #e0e0e0;margin:16px 0">')
            continue

        if stripped.startswith("|") and stripped.endswith("|"):
            cells = [c.strip() for c in stripped.split("|")[1:-1]]
            if all(set(c) <= {"-", " ", ":"} for c in cells):
                continue
            tag = "td" if in_table else "th"
            if not in_table:
                html_parts.append('<table style="border-collapse:collapse;width:100%;font-size:13px">')
                in_table = True
            html_parts.append("<tr>" + "".join(
                f'<{tag} style="border:1px solid #ddd;padding:5px 8px">{_inline(c)}</{tag}>' for c in cells
            ) + "</tr>")
            continue

        if stripped.startswith("- "):
            html_parts.append(f'<div style="margin:2px 0 2px 16px">• {_inline(stripped[2:])}</div>')
            continue

        html_parts.append(f"<p style='margin:4px 0'>{_inline(stripped)}</p>")

    if in_table:
        html_parts.append("</table>")

    return "\n".join(html_parts)


@retry(max_attempts=3, base_delay=3.0, retryable=(smtplib.SMTPException, OSError))
def _smtp_send(
    host: str, port: int, user: str, password: str,
    from_addr: str, to_addr: str, msg: MIMEMultipart,
) -> None:
    with smtplib.SMTP(host, port) as server:
        server.starttls()
        server.login(user, password)
        server.sendmail(from_addr, [to_addr], msg.as_string())


class EmailNotifier(Notifier):
    def __init__(self, env_getter: Callable[[str], str]) -> None:
        self.host = env_getter("SMTP_HOST")
        self.user = env_getter("SMTP_USER")
        self.password = env_getter("SMTP_PASSWORD")
        self.from_addr = env_getter("FROM_EMAIL") or self.user
        self.to_addr = env_getter("TO_EMAIL")
        try:
            self.port = int(env_getter("SMTP_PORT") or 587)
        except ValueError:
            self.port = 587

    @property
    def configured(self) -> bool:
        return all([self.host, self.user, self.password])

    def send(self, body: str, to_addr: str, subject: str | None = None) -> tuple[bool, str]:
        if not self.configured or not to_addr:
            return False, "SMTP not configured (set SMTP_HOST, SMTP_USER, SMTP_PASSWORD in .env)"

        if not subject:
            subject = f"Job Matches – {datetime.now(timezone.utc).strftime('%Y-%m-%d')}"

        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = self.from_addr
        msg["To"] = to_addr
        msg.attach(MIMEText(body, "plain", "utf-8"))
        msg.attach(MIMEText(md_to_html(body), "html", "utf-8"))

        try:
            _smtp_send(self.host, self.port, self.user, self.password, self.from_addr, to_addr, msg)
        except (smtplib.SMTPException, OSError) as e:
            log.error("Email failed: %s", e)
            return False, str(e)[:150]
        log.info("Email sent to %s", to_addr)
        return True, "Email sent"

    def notify(self, matches: list[Match], resume: Resume) -> None:
        to_addr = self.to_addr or resume.profile.email
        noun = "match" if len(matches) == 1 else "matches"
        ok, msg = self.send(
            build_match_report(matches, resume),
            to_addr,
            subject=f"{len(matches)} new job {noun} for {resume.profile.name}",
        )
        if not ok:
            log.warning("Email notification not delivered: %s", msg)
            raise NotifyError(msg)
