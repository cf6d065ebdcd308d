"""Fetch -> parse -> extract -> normalize, with placeholder substitution.

List and count never fail. Records recovered by the pattern scan are tagged
``status="degraded"``; upstream outages, unreadable XML and empty feeds turn
into a one-listing placeholder set tagged ``status="fallback"``.
Single-record lookup surfaces its errors instead.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Literal, Optional

from jobfeed.config import FeedConfig
from jobfeed.core.extract import (
    STATIC_RECORDS,
    STRUCTURAL_STRATEGIES,
    Extraction,
    extract_jobs_via_pattern,
    extract_records,
)
from jobfeed.core.ids import decode_id, encode_id
from jobfeed.core.normalize import FALLBACK_SOURCE, Listing, normalize_record
from jobfeed.core.paginate import Page, paginate
from jobfeed.core.parse import parse_document
from jobfeed.errors import EmptyResultSet, MalformedDocument, RecordNotFound, UpstreamUnavailable
from jobfeed.fetch import Fetcher, RawFeedDocument

LOGGER = logging.getLogger(__name__)

Status = Literal["fresh", "degraded", "fallback"]

FALLBACK_ID = "jobdiva-fallback-0"


def placeholder_listings() -> list[Listing]:
    return [
        normalize_record(record, FALLBACK_ID, source=FALLBACK_SOURCE)
        for record in STATIC_RECORDS
    ]


@dataclass
class FeedOutcome:
    status: Status
    listings: list[Listing]
    reason: Optional[str] = None
    document_length: int = 0
    strategy: Optional[str] = None
    raw_count: int = 0
    fetched_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_fallback(self) -> bool:
        return self.status == "fallback"

    def diagnostics(self) -> dict[str, Any]:
        debug: dict[str, Any] = {
            "xmlLength": self.document_length,
            "structureFound": "yes" if self.raw_count > 0 else "no",
            "rawCount": self.raw_count,
            "strategy": self.strategy,
            "status": self.status,
        }
        if self.reason:
            debug["error"] = self.reason
        return debug


class FeedPipeline:
    def __init__(self, config: FeedConfig, fetcher: Fetcher | None = None):
        self.config = config
        self.fetcher = fetcher or Fetcher(timeout=config.request_timeout)

    # -- stages -----------------------------------------------------------
    def fetch(self) -> RawFeedDocument:
        return self.fetcher.get(self.config.feed_url)

    def extract(self, document: RawFeedDocument) -> Extraction:
        """Parse and run the strategy chain.

        Text that is not well-formed XML still gets the pattern scan; the parse
        error is only raised when that scan finds nothing either.
        """
        try:
            tree = parse_document(document.text, max_depth=self.config.max_document_depth)
        except MalformedDocument as exc:
            records = extract_jobs_via_pattern(document.text, self.config.pattern_record_cap)
            if not records:
                raise
            LOGGER.warning("extract strategy=pattern parse-error=%s records=%s", exc.message, len(records))
            return Extraction(records=records, strategy="pattern", reason=exc.message)
        return extract_records(
            tree,
            document.text,
            max_depth=self.config.max_search_depth,
            pattern_cap=self.config.pattern_record_cap,
        )

    def normalize(self, records: list[Any], *, now: datetime | None = None) -> list[Listing]:
        stamp = int((now or datetime.now(timezone.utc)).timestamp() * 1000)
        return [
            normalize_record(record, encode_id(record, index, timestamp_ms=stamp), now=now)
            for index, record in enumerate(records)
        ]

    # -- supervised run ---------------------------------------------------
    def run(self) -> FeedOutcome:
        """Run the whole pipeline; always returns at least one listing."""
        document: RawFeedDocument | None = None
        try:
            document = self.fetch()
            extraction = self.extract(document)
            if extraction.is_static:
                raise EmptyResultSet("No jobs found in XML feed")
        except (UpstreamUnavailable, MalformedDocument, EmptyResultSet) as exc:
            LOGGER.warning("pipeline status=fallback error=%s", exc.message)
            return FeedOutcome(
                status="fallback",
                listings=placeholder_listings(),
                reason=exc.message,
                document_length=document.length if document else 0,
                strategy="static",
            )

        status: Status = "fresh" if extraction.strategy in STRUCTURAL_STRATEGIES else "degraded"
        reason = None
        if status == "degraded":
            reason = extraction.reason or f"Structural extraction found no jobs; used {extraction.strategy} scan"
        listings = self.normalize(extraction.records)
        LOGGER.info(
            "pipeline status=%s strategy=%s records=%s",
            status,
            extraction.strategy,
            len(listings),
        )
        return FeedOutcome(
            status=status,
            listings=listings,
            reason=reason,
            document_length=document.length,
            strategy=extraction.strategy,
            raw_count=len(extraction.records),
        )

    # -- operations -------------------------------------------------------
    def list_jobs(self, page: int, limit: int) -> tuple[FeedOutcome, Page[Listing]]:
        outcome = self.run()
        return outcome, paginate(outcome.listings, page, limit)

    def count_jobs(self) -> FeedOutcome:
        return self.run()

    def get_job(self, external_id: str) -> Listing:
        """Resolve one listing by external id against a fresh fetch.

        Fetch and parse errors propagate; a feed with no extractable records
        is treated as not containing the id.
        """
        extraction = self.extract(self.fetch())
        if extraction.is_static:
            raise RecordNotFound(f"Job not found with ID: {external_id}")
        record = decode_id(external_id, extraction.records)
        LOGGER.info("lookup id=%s strategy=%s", external_id, extraction.strategy)
        return normalize_record(record, external_id)


__all__ = ["FeedPipeline", "FeedOutcome", "placeholder_listings", "FALLBACK_ID"]
