from __future__ import annotations

from abc import ABC, abstractmethod

from jobmatch.models import Match, Resume


class NotifyError(Exception):
    """A channel could not deliver the notification."""


class Notifier(ABC):
    @abstractmethod
    def notify(self, matches: list[Match], resume: Resume) -> None:
        pass
