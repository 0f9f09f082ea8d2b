from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import AliasChoices, BaseModel, Field, ValidationError, field_validator


class PageVariant(str, Enum):
    states = "states"
    regions = "regions"
    minimal = "minimal"

    @property
    def keyword_gate(self) -> bool:
        return self is not PageVariant.regions


class JobOut(BaseModel):
    id: int
    job_title: str
    company: str | None = Field(
        default=None,
        validation_alias=AliasChoices("Company", "company"),
        serialization_alias="Company",
    )
    job_location: str | None = None
    job_type: str | None = None
    job_category: str | None = None
    whitelist_matches: str | None = None
    blacklist_matches: str | None = None
    job_details_url: str | None = None
    job_description_summary: str | None = None
    job_posted_date: str | None = None
    timestamp: datetime | None = Field(
        default=None,
        validation_alias=AliasChoices("Timestamp", "timestamp"),
        serialization_alias="Timestamp",
    )

    class Config:
        from_attributes = True

    @field_validator("timestamp", mode="wrap")
    @classmethod
    def _lenient_timestamp(cls, value, handler):
        # unparseable text reads as unknown
        try:
            return handler(value)
        except ValidationError:
            return None


class JobFilters(BaseModel):
    search: str = ""
    location: str = ""
    country: str = ""
    region: str = ""
    city: str = ""
    job_type: str = ""
    category: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return "" if value is None else value

    # search is matched as typed; option values are trimmed.
    @field_validator("location", "country", "region", "city", "job_type", "category")
    @classmethod
    def _strip(cls, value: str) -> str:
        return value.strip()


class JobListResponse(BaseModel):
    total: int
    jobs: list[JobOut]
    categories: list[str]


class JobTypeOption(BaseModel):
    value: str
    label: str


class LocationCatalogOut(BaseModel):
    states: list[str]
    countries: dict[str, dict[str, list[str]]]
    job_types: list[JobTypeOption]
