from .base import Notifier, NotifyError
from .console import ConsoleNotifier
from .email import EmailNotifier
from .report import ReportNotifier, build_match_report, write_report

from jobmatch.log import get_logger

log = get_logger(__name__)

__all__ = [
    "Notifier", "NotifyError", "ConsoleNotifier", "EmailNotifier", "ReportNotifier",
    "build_match_report", "write_report", "get_notifiers",
]


def get_notifiers(env_getter) -> list[Notifier]:
    notifiers: list[Notifier] = [ConsoleNotifier()]

    if env_getter("WRITE_REPORT").lower() in ("1", "true", "yes"):
        notifiers.append(ReportNotifier())
        log.info("Registered notifier: Markdown report")

    email = EmailNotifier(env_getter)
    if email.configured:
        notifiers.append(email)
        log.info("Registered notifier: email via %s", email.host)

    return notifiers
