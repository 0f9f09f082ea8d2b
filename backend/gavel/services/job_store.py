from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

import httpx
from postgrest.exceptions import APIError
from pydantic import ValidationError
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from supabase import Client, SupabaseException, create_client

from gavel.config import settings
from gavel.database import create_job_engine, create_session_factory
from gavel.exceptions import JobStoreError
from gavel.models.job import JOB_COLUMNS, Job
from gavel.schemas.job import JobOut

logger = logging.getLogger(__name__)

JOBS_TABLE = "jobs"
ORDER_COLUMN = "Timestamp"


def _validate_rows(rows) -> list[JobOut]:
    try:
        return [JobOut.model_validate(row) for row in rows]
    except ValidationError as exc:
        logger.error("Job rows failed validation: %s", exc)
        raise JobStoreError(f"Invalid job row: {exc.errors()[0]['msg']}") from exc


class JobStore:
    """Read-only access to the ``jobs`` table.

    Implementations return only rows whose ``whitelist_matches`` is set and
    non-empty, newest ``Timestamp`` first, and raise :class:`JobStoreError`
    with the provider's message when the read fails.
    """

    backend = "base"

    def fetch_jobs(self) -> list[JobOut]:
        raise NotImplementedError


class SupabaseJobStore(JobStore):
    backend = "supabase"

    def __init__(self, url: str = "", key: str = "", client: Client | Any | None = None) -> None:
        self.url = url
        self.key = key
        self._client = client

    def _get_client(self) -> Client | Any:
        if self._client is None:
            if not self.url or not self.key:
                raise JobStoreError("Supabase credentials are not configured")
            try:
                self._client = create_client(self.url, self.key)
            except SupabaseException as exc:
                logger.error("Supabase client setup failed: %s", exc.message)
                raise JobStoreError(exc.message) from exc
        return self._client

    def fetch_jobs(self) -> list[JobOut]:
        client = self._get_client()
        try:
            response = (
                client.table(JOBS_TABLE)
                .select(", ".join(JOB_COLUMNS))
                .not_.is_("whitelist_matches", "null")
                .neq("whitelist_matches", "")
                .order(ORDER_COLUMN, desc=True)
                .execute()
            )
        except APIError as exc:
            logger.error("Supabase query failed: %s", exc.message)
            raise JobStoreError(exc.message) from exc
        except httpx.HTTPError as exc:
            logger.error("Supabase request failed: %s", exc)
            raise JobStoreError(str(exc)) from exc

        jobs = _validate_rows(response.data or [])
        logger.info("Fetched %d jobs", len(jobs), extra={"backend": self.backend})
        return jobs


class SqlJobStore(JobStore):
    backend = "sql"

    def __init__(self, database_url: str | None = None, engine: Engine | None = None) -> None:
        if engine is None and not database_url:
            raise ValueError("database_url or engine is required")
        self.database_url = database_url
        self.engine = engine
        self._session_factory = create_session_factory(engine) if engine is not None else None

    def _get_session_factory(self):
        if self._session_factory is None:
            self.engine = create_job_engine(self.database_url)
            self._session_factory = create_session_factory(self.engine)
        return self._session_factory

    def fetch_jobs(self) -> list[JobOut]:
        try:
            with self._get_session_factory()() as db:
                rows = (
                    db.query(Job)
                    .filter(Job.whitelist_matches.isnot(None), Job.whitelist_matches != "")
                    .order_by(Job.timestamp.desc())
                    .all()
                )
                jobs = _validate_rows(rows)
        except SQLAlchemyError as exc:
            message = str(getattr(exc, "orig", None) or exc)
            logger.error("Job query failed: %s", message)
            raise JobStoreError(message) from exc

        logger.info("Fetched %d jobs", len(jobs), extra={"backend": self.backend})
        return jobs


@lru_cache
def get_job_store() -> JobStore:
    if settings.job_store == "sql":
        return SqlJobStore(settings.database_url)
    if settings.job_store == "supabase":
        return SupabaseJobStore(settings.supabase_url, settings.supabase_key)
    raise ValueError(f"Unknown JOB_STORE backend: {settings.job_store}")
