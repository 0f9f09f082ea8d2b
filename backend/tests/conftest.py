from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from gavel.exceptions import JobStoreError
from gavel.main import app
from gavel.schemas.job import JobOut
from gavel.services.job_store import JobStore, get_job_store


SAMPLE_ROWS: list[dict[str, Any]] = [
    {
        "id": 1,
        "job_title": "Corporate Attorney",
        "Company": "Baker & Lane LLP",
        "job_location": "Los Angeles, California",
        "job_type": "Full-Time",
        "job_category": "Lawyer",
        "whitelist_matches": "attorney",
        "job_details_url": "https://jobs.example.com/corporate-attorney",
        "job_description_summary": "litigation support for corporate clients",
        "Timestamp": "2024-05-03T10:00:00+00:00",
    },
    {
        "id": 2,
        "job_title": "Legal Secretary",
        "Company": "Smith Legal",
        "job_location": "New York, New York",
        "job_type": "Full Time",
        "job_category": "Support",
        "whitelist_matches": "legal",
        "job_details_url": "https://jobs.example.com/legal-secretary",
        "job_description_summary": "Supports attorneys with scheduling",
        "Timestamp": "2024-05-02T10:00:00+00:00",
    },
    {
        "id": 3,
        "job_title": "Compliance Counsel",
        "Company": None,
        "job_location": "Toronto, Ontario",
        "job_type": "Contract",
        "job_category": " Counsel ",
        "whitelist_matches": "counsel",
        "job_details_url": None,
        "job_description_summary": None,
        "Timestamp": None,
    },
    {
        "id": 4,
        "job_title": "Marketing Manager",
        "Company": "Acme",
        "job_location": "Austin, Texas",
        "job_type": "Full Time",
        "job_category": "Marketing",
        "whitelist_matches": "manager",
        "job_details_url": "https://jobs.example.com/marketing",
        "job_description_summary": "Brand campaigns",
        "Timestamp": "2024-04-30T10:00:00+00:00",
    },
    {
        "id": 5,
        "job_title": "Litigation Paralegal",
        "Company": "Harbor Law Group",
        "job_location": "Chicago, Illinois",
        "job_type": "Part-Time",
        "job_category": "Paralegal",
        "whitelist_matches": "litigation",
        "job_details_url": "https://jobs.example.com/paralegal",
        "job_description_summary": "Document review",
        "Timestamp": "2024-04-29T10:00:00+00:00",
    },
]


class FakeJobStore(JobStore):
    backend = "fake"

    def __init__(self, rows: list[dict[str, Any]] | None = None, error: str | None = None) -> None:
        self.rows = list(rows or [])
        self.error = error
        self.calls = 0

    def fetch_jobs(self) -> list[JobOut]:
        self.calls += 1
        if self.error is not None:
            raise JobStoreError(self.error)
        return [JobOut.model_validate(row) for row in self.rows]


@pytest.fixture
def fake_store() -> FakeJobStore:
    return FakeJobStore(SAMPLE_ROWS)


@pytest.fixture
def client(fake_store: FakeJobStore):
    app.dependency_overrides[get_job_store] = lambda: fake_store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
