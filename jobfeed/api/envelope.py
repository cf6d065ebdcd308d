"""Success ``{message, data}`` and error ``{statusCode, message, errors}`` envelopes.

The ``*_body`` builders return plain dicts so the API and the CLI print the
same payloads.
"""
from __future__ import annotations

from typing import Any, Optional

from fastapi.responses import JSONResponse

from jobfeed.core.normalize import Listing
from jobfeed.core.paginate import Page
from jobfeed.errors import FeedError, RecordNotFound
from jobfeed.pipeline import FeedOutcome


def success_body(message: str, data: Any) -> dict[str, Any]:
    return {"message": message, "data": data}


def error_body(status_code: int, message: str, errors: Optional[list[str]] = None) -> dict[str, Any]:
    return {"statusCode": status_code, "message": message, "errors": errors or []}


def jobs_page_body(outcome: FeedOutcome, window: Page[Listing]) -> dict[str, Any]:
    if outcome.is_fallback:
        message = "Using fallback data due to XML parsing issue"
    else:
        message = f"Found {len(outcome.listings)} jobs from XML feed"
    return success_body(
        message,
        {
            "jobs": [job.model_dump() for job in window.items],
            "pagination": window.metadata(),
            "debug": outcome.diagnostics(),
        },
    )


def jobs_count_body(outcome: FeedOutcome) -> dict[str, Any]:
    data = {
        "totalJobs": len(outcome.listings),
        "lastUpdated": outcome.fetched_at.isoformat(),
        "feedType": "XML",
        "status": outcome.status,
    }
    if outcome.reason:
        data["error"] = outcome.reason
    return success_body("Jobs count fetched from XML", data)


def job_body(job: Listing) -> dict[str, Any]:
    return success_body("Job details fetched successfully", {"job": job.model_dump()})


def feed_error_body(exc: FeedError) -> dict[str, Any]:
    if isinstance(exc, RecordNotFound):
        return error_body(exc.status_code, exc.message)
    return error_body(exc.status_code, "Failed to fetch job details", [exc.message])


def success_response(body: dict[str, Any], status_code: int = 200) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body)


def error_response(body: dict[str, Any]) -> JSONResponse:
    return JSONResponse(status_code=body["statusCode"], content=body)
