from pathlib import Path

from .base import JobSource, parse_jobs
from .file import FileJobSource
from .http import HttpJobSource
from .mock import MockSource

from jobmatch.config import JOBS_PATH
from jobmatch.log import get_logger

log = get_logger(__name__)

__all__ = [
    "JobSource", "FileJobSource", "HttpJobSource", "MockSource",
    "parse_jobs", "get_job_source",
]


def get_job_source(env_getter) -> JobSource:
    url = env_getter("JOBS_URL")
    if url:
        log.info("Using job source: %s", url)
        return HttpJobSource(url, api_key=env_getter("JOBS_API_KEY"))

    path = env_getter("JOBS_PATH")
    if path:
        # An explicit path must exist; a missing file is a load failure.
        log.info("Using job file: %s", path)
        return FileJobSource(Path(path))

    if JOBS_PATH.exists():
        log.info("Using job file: %s", JOBS_PATH)
        return FileJobSource(JOBS_PATH)

    log.info("No job source configured — using MockSource")
    return MockSource()
