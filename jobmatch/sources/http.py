"""Job postings fetched from a JSON endpoint.

The endpoint returns either a list of job records or ``{"jobs": [...]}``,
using the same field names as the data files.
"""
from __future__ import annotations

import requests

from jobmatch.log import get_logger
from jobmatch.models import Job, LoadError
from jobmatch.retry import retry
from jobmatch.sources.base import JobSource, parse_jobs

log = get_logger(__name__)


class HttpJobSource(JobSource):
    def __init__(self, url: str, api_key: str = "", timeout: float = 15) -> None:
        self.url = url
        self.api_key = api_key
        self.timeout = timeout

    @retry(max_attempts=3, base_delay=2.0, retryable=(requests.ConnectionError, requests.Timeout))
    def _get(self) -> requests.Response:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return requests.get(self.url, headers=headers, timeout=self.timeout)

    def fetch_jobs(self) -> list[Job]:
        try:
            r = self._get()
            r.raise_for_status()
            payload = r.json()
        except requests.RequestException as exc:
            raise LoadError(f"Unable to fetch jobs from {self.url}: {exc}") from exc
        except ValueError as exc:
            raise LoadError(f"Invalid JSON from {self.url}: {exc}") from exc
        jobs = parse_jobs(payload, self.url)
        log.info("Fetched %d job postings from %s", len(jobs), self.url)
        return jobs
