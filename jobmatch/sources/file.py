"""Job postings read from a local JSON or YAML file."""
from __future__ import annotations

from pathlib import Path

from jobmatch.config import read_data_file
from jobmatch.log import get_logger
from jobmatch.models import Job
from jobmatch.sources.base import JobSource, parse_jobs

log = get_logger(__name__)


class FileJobSource(JobSource):
    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def fetch_jobs(self) -> list[Job]:
        log.info("Loading jobs from %s", self.path)
        jobs = parse_jobs(read_data_file(self.path), str(self.path))
        log.info("Loaded %d job postings", len(jobs))
        return jobs
