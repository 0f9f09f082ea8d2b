from __future__ import annotations

from fastapi import APIRouter, HTTPException

from gavel.schemas.job import JobTypeOption, LocationCatalogOut
from gavel.services.locations import JOB_TYPE_OPTIONS, REGION_CATALOG, US_STATES, cities_for, regions_for


router = APIRouter()


@router.get("", response_model=LocationCatalogOut)
def location_catalog() -> LocationCatalogOut:
    return LocationCatalogOut(
        states=list(US_STATES),
        countries={
            country: {region: list(cities) for region, cities in regions.items()}
            for country, regions in REGION_CATALOG.items()
        },
        job_types=[JobTypeOption(value=value, label=label) for value, label in JOB_TYPE_OPTIONS],
    )


@router.get("/{country}", response_model=list[str])
def country_regions(country: str) -> list[str]:
    if country not in REGION_CATALOG:
        raise HTTPException(status_code=404, detail="Country not found")
    return regions_for(country)


@router.get("/{country}/{region}", response_model=list[str])
def region_cities(country: str, region: str) -> list[str]:
    if region not in REGION_CATALOG.get(country, {}):
        raise HTTPException(status_code=404, detail="Region not found")
    return cities_for(country, region)
