from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware

from jobfeed.api.deps import feed_pipeline, get_config
from jobfeed.api.envelope import (
    error_response,
    feed_error_body,
    job_body,
    jobs_count_body,
    jobs_page_body,
    success_response,
)
from jobfeed.config import FeedConfig
from jobfeed.core.paginate import parse_positive_int
from jobfeed.errors import FeedError, RecordNotFound
from jobfeed.pipeline import FeedPipeline

# -------------------------
# FastAPI setup
# -------------------------
app = FastAPI(title="Job Feed API", version="0.1.0")
LOGGER = logging.getLogger(__name__)

# CORS (open; auth and cookies live in front of this service)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(FeedError)
async def feed_error_handler(request: Request, exc: FeedError):
    if not isinstance(exc, RecordNotFound):
        LOGGER.error("request path=%s error=%s", request.url.path, exc.message)
    return error_response(feed_error_body(exc))


# -------------------------
# Routes
# -------------------------
@app.get("/", tags=["meta"])
async def root():
    return {"message": "Job Feed API is running"}


@app.get("/healthz", tags=["meta"])
async def healthz():
    return {"status": "ok"}


@app.get("/api/jobs", tags=["data"])
def get_jobs(
    page: Optional[str] = Query(None, description="1-based page number"),
    limit: Optional[str] = Query(None, description="Jobs per page"),
    pipeline: FeedPipeline = Depends(feed_pipeline),
    config: FeedConfig = Depends(get_config),
):
    """Paginated listings. Always succeeds; check ``debug.status`` for fallback data."""
    page_n = parse_positive_int(page, config.default_page)
    limit_n = parse_positive_int(limit, config.default_limit)

    outcome, window = pipeline.list_jobs(page_n, limit_n)
    return success_response(jobs_page_body(outcome, window))


# Registered before /api/jobs/{job_id} so "count" is not read as an id.
@app.get("/api/jobs/count", tags=["data"])
def get_jobs_count(pipeline: FeedPipeline = Depends(feed_pipeline)):
    return success_response(jobs_count_body(pipeline.count_jobs()))


@app.get("/api/jobs/{job_id}", tags=["data"])
def get_job_detail(job_id: str, pipeline: FeedPipeline = Depends(feed_pipeline)):
    return success_response(job_body(pipeline.get_job(job_id)))
