from gavel.schemas.job import (
    JobFilters,
    JobListResponse,
    JobOut,
    JobTypeOption,
    LocationCatalogOut,
    PageVariant,
)

__all__ = [
    "JobOut",
    "JobFilters",
    "JobListResponse",
    "JobTypeOption",
    "LocationCatalogOut",
    "PageVariant",
]
