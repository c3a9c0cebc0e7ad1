"""
Run the job check on a fixed cadence.

Usage:
  - Single pass (e.g. from cron): python -m jobmatch.scheduler --once
  - Per-arrival flow, matching each new job separately: add --per-job
  - Debug logging: add --verbose
  - Or keep this running: python -m jobmatch.scheduler
      Interval comes from CHECK_INTERVAL_MINUTES (default 2).
"""
from __future__ import annotations

import math
import sys
import time
from datetime import datetime, timezone
from typing import Any

from jobmatch.config import ensure_dirs, get_env
from jobmatch.log import configure, get_logger
from jobmatch.models import LoadError
from jobmatch.pipeline import run_check, source_and_match
from jobmatch.retry import retry

log = get_logger(__name__)

DEFAULT_INTERVAL_MINUTES = 2.0


def interval_seconds() -> float:
    raw = get_env("CHECK_INTERVAL_MINUTES")
    try:
        minutes = float(raw) if raw else DEFAULT_INTERVAL_MINUTES
        if not math.isfinite(minutes):
            raise ValueError(raw)
    except ValueError:
        log.warning("Ignoring CHECK_INTERVAL_MINUTES=%r, using %s", raw, DEFAULT_INTERVAL_MINUTES)
        minutes = DEFAULT_INTERVAL_MINUTES
    return max(minutes, 0.1) * 60


@retry(max_attempts=3, base_delay=1.0, max_delay=10.0, backoff_factor=2.0,
       retryable=(LoadError, OSError))
def run_once(**kwargs: Any) -> dict[str, Any]:
    return run_check(**kwargs)


@retry(max_attempts=3, base_delay=1.0, max_delay=10.0, backoff_factor=2.0,
       retryable=(LoadError, OSError))
def run_per_job(since: datetime | None = None, **kwargs: Any) -> dict[str, Any]:
    return source_and_match(since=since, **kwargs)


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    per_job = "--per-job" in argv
    if "--verbose" in argv:
        configure("DEBUG")
    ensure_dirs()

    if "--once" in argv:
        try:
            result = run_per_job() if per_job else run_once()
        except (LoadError, OSError) as exc:
            log.error("Job check failed: %s", exc)
            return 1
        log.info("Result: %s", result)
        return 0

    wait = interval_seconds()
    log.info("Scheduler: checking every %.1f minutes%s", wait / 60, " (per job)" if per_job else "")
    last_run: datetime | None = None
    while True:
        started = datetime.now(timezone.utc)
        try:
            if per_job:
                run_per_job(since=last_run)
            else:
                run_once()
            last_run = started
        except (LoadError, OSError) as exc:
            log.error("Job check failed, will retry next cycle: %s", exc)
        time.sleep(wait)


if __name__ == "__main__":
    sys.exit(main())
