from __future__ import annotations

from fastapi import Query

from gavel.schemas.job import JobFilters


def get_job_filters(
    search: str | None = Query(default=None),
    location: str | None = Query(default=None),
    country: str | None = Query(default=None),
    region: str | None = Query(default=None),
    city: str | None = Query(default=None),
    job_type: str | None = Query(default=None),
    category: str | None = Query(default=None),
) -> JobFilters:
    return JobFilters(
        search=search,
        location=location,
        country=country,
        region=region,
        city=city,
        job_type=job_type,
        category=category,
    )
