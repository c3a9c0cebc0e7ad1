"""Score job postings against a candidate resume and report the matches."""

from .matcher import find_matches
from .models import Job, LoadError, Match, MatchingConfig, MatchScore, Resume
from .scorer import calculate_score

__all__ = [
    "find_matches", "calculate_score",
    "Job", "Resume", "Match", "MatchScore", "MatchingConfig", "LoadError",
]
__version__ = "1.0.0"
