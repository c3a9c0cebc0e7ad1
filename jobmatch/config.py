"""Load matching configuration, resume and env settings."""
from __future__ import annotations

import json
import math
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import find_dotenv, load_dotenv

from jobmatch.log import get_logger, home_dir
from jobmatch.models import LoadError, MatchingConfig, Resume

log = get_logger(__name__)

load_dotenv(find_dotenv(usecwd=True))

# config/, data/ and reports/ live under JOBMATCH_HOME, or the working directory
ROOT_DIR: Path = home_dir()
CONFIG_DIR: Path = ROOT_DIR / "config"
DATA_DIR: Path = ROOT_DIR / "data"
REPORTS_DIR: Path = ROOT_DIR / "reports"
RESUME_PATH: Path = CONFIG_DIR / "resume.yaml"
JOBS_PATH: Path = DATA_DIR / "job-postings.json"

# env var → (MatchingConfig field, default)
_CONFIG_ENV: dict[str, tuple[str, float]] = {
    "MATCH_THRESHOLD": ("threshold", 50),
    "REQUIRED_SKILLS_WEIGHT": ("required_skills_weight", 70),
    "PREFERRED_SKILLS_WEIGHT": ("preferred_skills_weight", 20),
    "EXPERIENCE_WEIGHT": ("experience_weight", 10),
    "EXPERIENCE_BUFFER_YEARS": ("experience_buffer_years", 1),
}

_matching_config: MatchingConfig | None = None


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def ensure_dirs() -> None:
    for d in (DATA_DIR, REPORTS_DIR):
        d.mkdir(parents=True, exist_ok=True)


def _env_number(key: str, default: float) -> float:
    raw = get_env(key)
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        log.warning("Ignoring %s=%r (not a number), using %s", key, raw, default)
        return default
    if not math.isfinite(value):
        log.warning("Ignoring %s=%r (not finite), using %s", key, raw, default)
        return default
    if value < 0:
        log.warning("Ignoring %s=%r (negative), using %s", key, raw, default)
        return default
    return int(value) if value.is_integer() else value


def load_matching_config() -> MatchingConfig:
    """Defaults overridden by environment variables."""
    values = {name: _env_number(key, default) for key, (name, default) in _CONFIG_ENV.items()}
    config = MatchingConfig(**values)

    if config.total_weight != 100:
        log.warning(
            "Weights don't add up to 100 (current: %s). This may cause scoring issues.",
            config.total_weight,
        )
    log.debug("Matching config: %s", config)
    return config


def get_matching_config() -> MatchingConfig:
    """Process-wide config, built once on first use."""
    global _matching_config
    if _matching_config is None:
        _matching_config = load_matching_config()
    return _matching_config


def read_data_file(path: Path) -> Any:
    """Parse a JSON or YAML file chosen by suffix."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() in (".yaml", ".yml"):
                return yaml.safe_load(f)
            return json.load(f)
    except FileNotFoundError:
        raise LoadError(f"File not found: {path}") from None
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as exc:
        raise LoadError(f"Failed to read {path}: {exc}") from exc


def load_resume(path: Path | str | None = None) -> Resume:
    if path is None:
        path = get_env("RESUME_PATH") or RESUME_PATH
    path = Path(path)
    resume = Resume.from_dict(read_data_file(path))
    log.info(
        "Loaded resume for %s (%d skills, %s years)",
        resume.profile.name, len(resume.skills), resume.profile.years_of_experience,
    )
    return resume
