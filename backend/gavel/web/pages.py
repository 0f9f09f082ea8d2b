from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from gavel.api.dependencies import get_job_filters
from gavel.config import settings
from gavel.exceptions import JobStoreError
from gavel.schemas.job import JobFilters, PageVariant
from gavel.services.job_filters import apply_filters, unique_categories
from gavel.services.job_store import JobStore, get_job_store
from gavel.services.locations import (
    JOB_TYPE_OPTIONS,
    MINIMAL_CATEGORIES,
    MINIMAL_LOCATIONS,
    REGION_CATALOG,
    US_STATES,
    LocationSelection,
    cities_for,
    regions_for,
)

logger = logging.getLogger(__name__)

NOT_PROVIDED = "Not provided"
LINK_SCHEMES = ("http", "https")

router = APIRouter()
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[1] / "templates"))


def or_not_provided(value: Any) -> Any:
    if value is None or (isinstance(value, str) and not value.strip()):
        return NOT_PROVIDED
    return value


def posted_on(value: datetime | None) -> str:
    if value is None:
        return "Unknown"
    return f"{value.month}/{value.day}/{value.year}"


def external_url(value: str | None) -> str | None:
    """Return ``value`` only when it is an absolute http(s) link."""
    if not value:
        return None
    parsed = urlparse(value.strip())
    if parsed.scheme.lower() not in LINK_SCHEMES or not parsed.netloc:
        return None
    return value.strip()


templates.env.filters["or_not_provided"] = or_not_provided
templates.env.filters["posted_on"] = posted_on
templates.env.filters["external_url"] = external_url


def _render_listing(request: Request, variant: PageVariant, filters: JobFilters, store: JobStore) -> HTMLResponse:
    error_message = ""
    jobs = []
    try:
        jobs = store.fetch_jobs()
    except JobStoreError as exc:
        logger.warning("Rendering %s page without jobs: %s", variant.value, exc.message)
        error_message = exc.message

    context: dict[str, Any] = {
        "app_name": settings.app_name,
        "variant": variant,
        "filters": filters,
        "jobs": apply_filters(jobs, filters, variant),
        "error_message": error_message,
        "job_type_options": JOB_TYPE_OPTIONS,
        "categories": unique_categories(jobs),
    }
    if variant is PageVariant.regions:
        selection = LocationSelection(filters.country, filters.region, filters.city).resolve()
        context.update(
            selection=selection,
            countries=list(REGION_CATALOG),
            regions=regions_for(selection.country),
            cities=cities_for(selection.country, selection.region),
        )
    elif variant is PageVariant.states:
        context["location_options"] = US_STATES
    else:
        context["location_options"] = MINIMAL_LOCATIONS
        context["categories"] = list(MINIMAL_CATEGORIES)

    return templates.TemplateResponse(request, "listing.html", context)


@router.get("/", response_class=HTMLResponse)
def job_board(
    request: Request,
    filters: JobFilters = Depends(get_job_filters),
    store: JobStore = Depends(get_job_store),
) -> HTMLResponse:
    return _render_listing(request, PageVariant.states, filters, store)


@router.get("/regions", response_class=HTMLResponse)
def job_board_by_region(
    request: Request,
    filters: JobFilters = Depends(get_job_filters),
    store: JobStore = Depends(get_job_store),
) -> HTMLResponse:
    return _render_listing(request, PageVariant.regions, filters, store)


@router.get("/minimal", response_class=HTMLResponse)
def job_board_minimal(
    request: Request,
    filters: JobFilters = Depends(get_job_filters),
    store: JobStore = Depends(get_job_store),
) -> HTMLResponse:
    return _render_listing(request, PageVariant.minimal, filters, store)


@router.get("/about", response_class=HTMLResponse)
def about(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(request, "about.html", {"app_name": settings.app_name})


@router.get("/contact", response_class=HTMLResponse)
def contact(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "contact.html",
        {"app_name": settings.app_name, "contact_email": settings.contact_email},
    )
