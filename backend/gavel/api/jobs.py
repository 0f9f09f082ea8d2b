from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from gavel.api.dependencies import get_job_filters
from gavel.schemas.job import JobFilters, JobListResponse, PageVariant
from gavel.services.job_filters import apply_filters, unique_categories
from gavel.services.job_store import JobStore, get_job_store


router = APIRouter()


@router.get("", response_model=JobListResponse)
def list_jobs(
    variant: PageVariant = Query(default=PageVariant.states),
    filters: JobFilters = Depends(get_job_filters),
    store: JobStore = Depends(get_job_store),
) -> JobListResponse:
    jobs = store.fetch_jobs()
    filtered = apply_filters(jobs, filters, variant)
    return JobListResponse(total=len(filtered), jobs=filtered, categories=unique_categories(jobs))


@router.get("/categories", response_model=list[str])
def list_categories(store: JobStore = Depends(get_job_store)) -> list[str]:
    return unique_categories(store.fetch_jobs())
