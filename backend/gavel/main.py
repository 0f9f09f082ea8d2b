from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from gavel import __version__
from gavel.api import jobs, locations
from gavel.config import settings
from gavel.exceptions import JobStoreError
from gavel.logging_config import setup_logging
from gavel.web import pages


setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name, version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.exception_handler(JobStoreError)
async def job_store_error_handler(request: Request, exc: JobStoreError) -> JSONResponse:
    logger.warning("Job fetch failed", extra={"path": request.url.path, "code": exc.error_code})
    return JSONResponse(status_code=502, content={"detail": exc.message, "error_code": exc.error_code})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


app.include_router(jobs.router, prefix="/api/jobs", tags=["jobs"])
app.include_router(locations.router, prefix="/api/locations", tags=["locations"])
app.include_router(pages.router, tags=["pages"])

static_dir = Path(__file__).resolve().parent / "static"
app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")
