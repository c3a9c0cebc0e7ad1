"""Built-in sample postings for demo runs when no job source is configured."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone

from jobmatch.log import get_logger
from jobmatch.models import Job
from jobmatch.sources.base import JobSource

log = get_logger(__name__)

_SAMPLES: list[dict] = [
    {
        "id": "mock-1",
        "title": "Frontend Developer",
        "company": "TechCorp",
        "years": 3,
        "required": ["React", "TypeScript", "Git"],
        "preferred": ["Node.js", "GraphQL"],
        "location": "Remote",
        "salary": "$90k-$110k",
    },
    {
        "id": "mock-2",
        "title": "Full Stack Engineer",
        "company": "WebCorp",
        "years": 4,
        "required": ["TypeScript", "Node.js", "PostgreSQL"],
        "preferred": ["AWS", "Docker"],
        "location": "New York, NY",
        "salary": "$110k-$130k",
    },
    {
        "id": "mock-3",
        "title": "Data Engineer",
        "company": "DataCorp",
        "years": 2,
        "required": ["Python", "Airflow", "SQL"],
        "preferred": ["Spark"],
        "location": "Austin, TX",
        "salary": "$95k-$120k",
    },
    {
        "id": "mock-4",
        "title": "Staff Platform Engineer",
        "company": "BigTech",
        "years": 10,
        "required": ["Go", "Kubernetes"],
        "preferred": ["Terraform"],
        "location": "San Francisco, CA",
        "salary": "$220k-$260k",
    },
]


class MockSource(JobSource):
    def fetch_jobs(self) -> list[Job]:
        log.info("MockSource generating sample jobs")
        now = datetime.now(timezone.utc)
        return [
            Job(
                id=s["id"],
                title=s["title"],
                company=s["company"],
                posted_at=now - timedelta(hours=i + 1),
                years_experience_required=s["years"],
                required_skills=list(s["required"]),
                preferred_skills=list(s["preferred"]),
                location=s["location"],
                salary=s["salary"],
            )
            for i, s in enumerate(_SAMPLES)
        ]
