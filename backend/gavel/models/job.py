from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, String, Text

from gavel.database import Base

# Columns selected by every listing query, in store naming.
JOB_COLUMNS = (
    "id",
    "job_title",
    "Company",
    "job_location",
    "job_type",
    "job_category",
    "whitelist_matches",
    "blacklist_matches",
    "job_details_url",
    "job_description_summary",
    "job_posted_date",
    "Timestamp",
)


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True)
    job_title = Column(String(500), nullable=False)
    company = Column("Company", String(255))
    job_location = Column(String(255))
    job_type = Column(String(100))
    job_category = Column(String(255))
    whitelist_matches = Column(Text)
    blacklist_matches = Column(Text)
    job_details_url = Column(String(1000))
    job_description_summary = Column(Text)
    job_posted_date = Column(String(100))
    timestamp = Column("Timestamp", DateTime(timezone=True))
