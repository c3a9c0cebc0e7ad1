"""Centralized logging configuration — stdlib only.

Console output always goes to stdout. A daily file under ``logs/`` (relative
to ``JOBMATCH_HOME`` or the working directory) is added unless
``LOG_TO_FILE`` is false; an unwritable log directory is ignored.
"""
from __future__ import annotations

import logging
import os
import sys
from datetime import datetime
from pathlib import Path

_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"
_DATE_FMT = "%Y-%m-%d %H:%M:%S"
_configured = False


def _truthy(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes")


def home_dir() -> Path:
    """Base directory for config, data, reports and logs."""
    return Path(os.environ.get("JOBMATCH_HOME", "").strip() or Path.cwd()).resolve()


def get_logger(name: str) -> logging.Logger:
    """Return a named logger; configures root handlers on first call."""
    if not _configured:
        configure()
    return logging.getLogger(name)


def configure(
    level: str | None = None,
    *,
    to_file: bool | None = None,
    log_dir: Path | None = None,
) -> None:
    """Install the jobmatch handlers on the root logger once.

    Arguments override ``LOG_LEVEL`` / ``LOG_TO_FILE``. A second call only
    adjusts the level.
    """
    global _configured
    level_name = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    numeric = getattr(logging, level_name, logging.INFO)

    root = logging.getLogger()
    root.setLevel(numeric)
    already = _configured or bool(root.handlers)
    _configured = True
    if already:
        return

    formatter = logging.Formatter(_FORMAT, datefmt=_DATE_FMT)
    console = logging.StreamHandler(sys.stdout)
    console.setLevel(numeric)
    console.setFormatter(formatter)
    root.addHandler(console)

    if to_file is None:
        to_file = _truthy(os.environ.get("LOG_TO_FILE", "true"))
    if not to_file:
        return
    log_dir = log_dir or home_dir() / "logs"
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(
            log_dir / f"jobmatch_{datetime.now().strftime('%Y-%m-%d')}.log",
            encoding="utf-8",
        )
    except OSError:
        return
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(formatter)
    root.addHandler(fh)
