from __future__ import annotations

import os
from dataclasses import dataclass, field

DEFAULT_LEGAL_KEYWORDS = (
    "attorney",
    "lawyer",
    "legal",
    "counsel",
    "litigation",
    "law firm",
    "paralegal",
    "esquire",
    "prosecution",
    "defense",
    "trial",
    "court",
    "judicial",
    "compliance",
    "regulatory",
    "civil",
    "criminal",
    "intellectual property",
    "legal research",
    "legal advisor",
)

DEFAULT_BLACKLIST_KEYWORDS = (
    "secretary",
    "paralegal",
    "assistant",
    "therapist",
    "counselor",
    "conseling",
)


def _csv_env(name: str, default: tuple[str, ...], lower: bool = False) -> tuple[str, ...]:
    raw = os.getenv(name)
    if raw is None:
        return default
    values = [part.strip() for part in raw.split(",") if part.strip()]
    if lower:
        values = [value.lower() for value in values]
    return tuple(values)


@dataclass
class Settings:
    app_name: str = os.getenv("APP_NAME", "Gavel")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    job_store: str = os.getenv("JOB_STORE", "supabase").strip().lower()
    supabase_url: str = os.getenv("SUPABASE_URL", "")
    supabase_key: str = os.getenv("SUPABASE_KEY", "")
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./db/jobs.db")
    contact_email: str = os.getenv("CONTACT_EMAIL", "info@gaveljobs.com")
    cors_origins: tuple[str, ...] = field(
        default_factory=lambda: _csv_env(
            "CORS_ORIGINS",
            ("http://localhost", "http://localhost:8000", "http://127.0.0.1:8000"),
        )
    )
    legal_keywords: tuple[str, ...] = field(
        default_factory=lambda: _csv_env("GAVEL_LEGAL_KEYWORDS", DEFAULT_LEGAL_KEYWORDS, lower=True)
    )
    blacklist_keywords: tuple[str, ...] = field(
        default_factory=lambda: _csv_env("GAVEL_BLACKLIST_KEYWORDS", DEFAULT_BLACKLIST_KEYWORDS, lower=True)
    )


settings = Settings()
