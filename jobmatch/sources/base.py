from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from jobmatch.models import Job, LoadError, parse_timestamp


class JobSource(ABC):
    @abstractmethod
    def fetch_jobs(self) -> list[Job]:
        pass

    def fetch_jobs_since(self, since: datetime | str) -> list[Job]:
        """Jobs posted strictly after ``since``."""
        cutoff = parse_timestamp(since)
        return [j for j in self.fetch_jobs() if j.posted_at > cutoff]


def parse_jobs(payload: object, origin: str) -> list[Job]:
    """Deserialize a list of job records; any bad record fails the whole load."""
    if isinstance(payload, dict) and "jobs" in payload:
        payload = payload["jobs"]
    if not isinstance(payload, list):
        raise LoadError(f"Job data from {origin} is not a list")
    jobs: list[Job] = []
    for i, record in enumerate(payload):
        try:
            jobs.append(Job.from_dict(record))
        except LoadError as exc:
            raise LoadError(f"Job #{i} from {origin}: {exc}") from exc
    return jobs
