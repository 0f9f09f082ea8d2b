from __future__ import annotations

from gavel.schemas.job import JobFilters, JobOut, PageVariant
from gavel.services.job_filters import (
    apply_filters,
    matches_category,
    matches_job_type,
    matches_location,
    matches_region,
    matches_search,
    normalize,
    passes_keyword_gate,
    unique_categories,
)
from gavel.services.locations import LocationSelection


def _job(
    *,
    job_id: int = 1,
    title: str = "Corporate Attorney",
    company: str | None = "Baker & Lane LLP",
    location: str | None = "California",
    job_type: str | None = "Full Time",
    category: str | None = "Lawyer",
    description: str | None = "litigation support",
) -> JobOut:
    return JobOut(
        id=job_id,
        job_title=title,
        Company=company,
        job_location=location,
        job_type=job_type,
        job_category=category,
        whitelist_matches="attorney",
        job_description_summary=description,
    )


def test_normalize_lowercases_and_replaces_hyphens():
    assert normalize("  Full-Time ") == "full time"
    assert normalize(None) == ""


def test_search_matches_any_of_the_six_fields_case_insensitive():
    job = _job()
    assert matches_search(job, "")
    assert matches_search(job, "ATTORNEY")
    assert matches_search(job, "baker")
    assert matches_search(job, "califor")
    assert matches_search(job, "full time")
    assert matches_search(job, "lawyer")
    assert matches_search(job, "Litigation")
    assert not matches_search(job, "paralegal")


def test_search_skips_missing_fields():
    job = _job(company=None, description=None)
    assert matches_search(job, "attorney")
    assert not matches_search(job, "baker")


def test_location_filter_is_case_insensitive_substring():
    job = _job(location="San Francisco, California")
    assert matches_location(job, "")
    assert matches_location(job, "California")
    assert matches_location(job, "california")
    assert not matches_location(job, "Texas")
    assert not matches_location(_job(location=None), "California")


def test_job_type_filter_normalizes_hyphens():
    assert matches_job_type(_job(job_type="Full Time"), "full-time")
    assert matches_job_type(_job(job_type="full-time"), "Full Time")
    assert matches_job_type(_job(job_type="Part Time Contract"), "part time contract")
    assert not matches_job_type(_job(job_type="Contract"), "full-time")
    assert not matches_job_type(_job(job_type=None), "contract")
    assert matches_job_type(_job(job_type=None), "")


def test_category_filter_is_exact_and_case_insensitive():
    job = _job(category="Lawyer")
    assert matches_category(job, "lawyer")
    assert matches_category(job, "LAWYER")
    assert not matches_category(job, "Law")
    assert not matches_category(job, "Counsel")
    assert not matches_category(_job(category=None), "Lawyer")


def test_keyword_gate_requires_legal_keyword_and_no_blacklisted_keyword():
    assert passes_keyword_gate(_job(title="Corporate Attorney", description=None))
    assert passes_keyword_gate(_job(title="Associate", description="Join our law firm"))
    assert not passes_keyword_gate(_job(title="Legal Secretary", description=None))
    assert not passes_keyword_gate(_job(title="Marketing Manager", description="Brand campaigns"))
    assert not passes_keyword_gate(_job(title="Litigation Paralegal", description=None))
    assert not passes_keyword_gate(_job(title="Counsel", description="Executive assistant duties"))


def test_keyword_gate_accepts_custom_lists():
    job = _job(title="Tax Advisor", description="Prepare filings")
    assert not passes_keyword_gate(job)
    assert passes_keyword_gate(job, legal_keywords=["tax"], blacklist_keywords=[])
    assert not passes_keyword_gate(job, legal_keywords=["tax"], blacklist_keywords=["filings"])


def test_region_filter_uses_most_specific_level():
    job = _job(location="Los Angeles, CA")
    assert matches_region(job, LocationSelection())
    assert matches_region(job, LocationSelection("United States"))
    assert matches_region(job, LocationSelection("United States", "California"))
    assert matches_region(job, LocationSelection("United States", "California", "Los Angeles"))
    assert not matches_region(job, LocationSelection("United States", "California", "San Diego"))
    assert not matches_region(job, LocationSelection("Canada"))
    assert not matches_region(_job(location=None), LocationSelection("Canada"))


def test_region_filter_normalizes_hyphens_and_case():
    job = _job(location="NEW-YORK CITY")
    assert matches_region(job, LocationSelection("United States", "New York", "New York City"))


def test_pipeline_example_from_listing_page():
    job = _job()
    filters = JobFilters(search="attorney", category="Lawyer", location="California")
    assert apply_filters([job], filters) == [job]

    hidden = JobFilters(search="attorney", category="Counsel", location="California")
    assert apply_filters([job], hidden) == []


def test_pipeline_never_shows_blacklisted_titles_in_gated_variants():
    secretary = _job(job_id=2, title="Legal Secretary", description=None)
    for variant in (PageVariant.states, PageVariant.minimal):
        assert apply_filters([secretary], JobFilters(), variant) == []
    assert apply_filters([secretary], JobFilters(), PageVariant.regions) == [secretary]


def test_pipeline_preserves_order_and_ands_filters():
    jobs = [
        _job(job_id=1, title="Trial Attorney", location="Austin, Texas", job_type="Full-Time"),
        _job(job_id=2, title="Patent Counsel", location="Dallas, Texas", job_type="Contract"),
        _job(job_id=3, title="Court Clerk", location="Houston, Texas", job_type="Full Time"),
        _job(job_id=4, title="Litigation Attorney", location="Miami, Florida", job_type="Full Time"),
    ]
    result = apply_filters(jobs, JobFilters(location="texas", job_type="full-time"))
    assert [job.id for job in result] == [1, 3]


def test_regions_variant_ignores_flat_location_and_resolves_selection():
    jobs = [
        _job(job_id=1, location="Toronto, Ontario"),
        _job(job_id=2, location="Vancouver, British Columbia"),
        _job(job_id=3, location="Boston, Massachusetts"),
    ]
    filters = JobFilters(location="Massachusetts", country="Canada", region="Ontario")
    result = apply_filters(jobs, filters, PageVariant.regions)
    assert [job.id for job in result] == [1]

    stale_region = JobFilters(country="Canada", region="California")
    result = apply_filters(jobs, stale_region, PageVariant.regions)
    assert [job.id for job in result] == [1, 2]


def test_unique_categories_trims_dedupes_and_sorts():
    jobs = [
        _job(category="Lawyer"),
        _job(category=" Counsel "),
        _job(category="Lawyer"),
        _job(category=""),
        _job(category=None),
        _job(category="Compliance"),
    ]
    assert unique_categories(jobs) == ["Compliance", "Counsel", "Lawyer"]


def test_filter_state_keeps_search_as_typed_and_trims_options():
    filters = JobFilters(search=" attorney ", location=" Texas ", category=None)
    assert filters.search == " attorney "
    assert filters.location == "Texas"
    assert filters.category == ""
    assert not matches_search(_job(title="Attorney", description=None), filters.search)
