#!/usr/bin/env python3
"""Entry point to run one job check by hand."""
from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from jobmatch.log import get_logger
from jobmatch.models import LoadError

log = get_logger(__name__)


if __name__ == "__main__":
    from jobmatch.pipeline import run_check

    try:
        result = run_check()
    except LoadError as exc:
        log.error("Job check failed: %s", exc)
        sys.exit(1)
    log.info("Job check completed.")
    log.info("  Jobs checked: %d", result["jobs_checked"])
    log.info("  Matches found: %d", result["matches_found"])
    log.info("  Notified: %s", result["user_email"])
