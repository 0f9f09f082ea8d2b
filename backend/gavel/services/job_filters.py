from __future__ import annotations

from collections.abc import Iterable, Sequence

from gavel.config import settings
from gavel.schemas.job import JobFilters, JobOut, PageVariant
from gavel.services.locations import LocationSelection


def normalize(value: str | None) -> str:
    return (value or "").lower().replace("-", " ").strip()


def _searchable_fields(job: JobOut) -> tuple[str | None, ...]:
    return (
        job.job_title,
        job.company,
        job.job_location,
        job.job_type,
        job.job_category,
        job.job_description_summary,
    )


def matches_search(job: JobOut, term: str | None) -> bool:
    needle = (term or "").lower()
    if not needle:
        return True
    return any(needle in value.lower() for value in _searchable_fields(job) if value)


def matches_location(job: JobOut, location: str | None) -> bool:
    wanted = (location or "").lower()
    if not wanted:
        return True
    return bool(job.job_location) and wanted in job.job_location.lower()


def matches_region(job: JobOut, selection: LocationSelection) -> bool:
    if selection.is_empty():
        return True
    haystack = normalize(job.job_location)
    if not haystack:
        return False
    return any(normalize(name) in haystack for name in selection.candidate_names())


def matches_job_type(job: JobOut, job_type: str | None) -> bool:
    wanted = normalize(job_type)
    if not wanted:
        return True
    return bool(job.job_type) and wanted in normalize(job.job_type)


def matches_category(job: JobOut, category: str | None) -> bool:
    wanted = (category or "").strip().lower()
    if not wanted:
        return True
    return bool(job.job_category) and job.job_category.strip().lower() == wanted


def passes_keyword_gate(
    job: JobOut,
    legal_keywords: Sequence[str] | None = None,
    blacklist_keywords: Sequence[str] | None = None,
) -> bool:
    legal = settings.legal_keywords if legal_keywords is None else legal_keywords
    blacklist = settings.blacklist_keywords if blacklist_keywords is None else blacklist_keywords
    text = f"{job.job_title or ''} {job.job_description_summary or ''}".lower()
    if not any(keyword in text for keyword in legal):
        return False
    return not any(keyword in text for keyword in blacklist)


def apply_filters(
    jobs: Iterable[JobOut],
    filters: JobFilters,
    variant: PageVariant = PageVariant.states,
    legal_keywords: Sequence[str] | None = None,
    blacklist_keywords: Sequence[str] | None = None,
) -> list[JobOut]:
    selection = LocationSelection(filters.country, filters.region, filters.city).resolve()

    filtered: list[JobOut] = []
    for job in jobs:
        if not matches_search(job, filters.search):
            continue
        if variant is PageVariant.regions:
            if not matches_region(job, selection):
                continue
        elif not matches_location(job, filters.location):
            continue
        if not matches_job_type(job, filters.job_type):
            continue
        if not matches_category(job, filters.category):
            continue
        if variant.keyword_gate and not passes_keyword_gate(job, legal_keywords, blacklist_keywords):
            continue
        filtered.append(job)
    return filtered


def unique_categories(jobs: Iterable[JobOut]) -> list[str]:
    categories = {(job.job_category or "").strip() for job in jobs}
    categories.discard("")
    return sorted(categories)
