from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel

from jobfeed.core.parse import TEXT_KEY

FEED_SOURCE = "JobDiva XML Feed"
FALLBACK_SOURCE = "Fallback Data"

DEFAULT_TITLE = "Position Available"
DEFAULT_COMPANY = "AppSixer LLC"
DEFAULT_LOCATION = "Remote"
DEFAULT_DESCRIPTION = "Job opportunity available"
DEFAULT_TYPE = "Contract"
DEFAULT_SALARY = "Negotiable"

DESCRIPTION_MAX_CHARS = 150
TRUNCATION_MARKER = "..."
HTML_ENTITIES = re.compile(r"&middot;|&amp;|&lt;|&gt;|&quot;|&#39;")


class Listing(BaseModel):
    id: str
    title: str
    company: str
    location: str
    description: str
    postedDate: str
    applyLink: str
    salary: str
    type: str
    source: str
    rawId: Optional[str] = None
    jobNumber: Optional[str] = None


def field_text(record: Any, *keys: str) -> Optional[str]:
    """Return the first non-blank text among ``keys`` of a raw record."""
    if not isinstance(record, dict):
        return None
    for key in keys:
        value = record.get(key)
        if isinstance(value, list):
            value = value[0] if value else None
        if isinstance(value, dict):
            value = value.get(TEXT_KEY)
        if value is None:
            continue
        text = str(value).strip()
        if text:
            return text
    return None


def raw_primary_key(record: Any) -> Optional[str]:
    return field_text(record, "jobdivaid", "ID")


def format_location(record: Any) -> str:
    city = field_text(record, "city")
    state = field_text(record, "state_abbr")
    if city and state:
        return f"{city}, {state}"
    return city or state or field_text(record, "state") or DEFAULT_LOCATION


def clean_description(text: str) -> str:
    """Blank out common HTML entities and cut to the preview length."""
    return HTML_ENTITIES.sub(" ", text)[:DESCRIPTION_MAX_CHARS] + TRUNCATION_MARKER


def normalize_record(
    record: Any,
    listing_id: str,
    *,
    source: str = FEED_SOURCE,
    now: datetime | None = None,
) -> Listing:
    """Map one raw feed record onto :class:`Listing`; missing fields get defaults."""
    description = field_text(record, "jobdescription_400char", "description") or DEFAULT_DESCRIPTION
    posted = field_text(record, "issuedate", "date")
    if posted is None:
        posted = (now or datetime.now(timezone.utc)).isoformat()
    return Listing(
        id=listing_id,
        title=field_text(record, "title") or DEFAULT_TITLE,
        company=field_text(record, "company") or DEFAULT_COMPANY,
        location=format_location(record),
        description=clean_description(description),
        postedDate=posted,
        applyLink=field_text(record, "portal_url") or "#",
        salary=DEFAULT_SALARY,
        type=field_text(record, "positiontype") or DEFAULT_TYPE,
        source=source,
        rawId=raw_primary_key(record),
        jobNumber=field_text(record, "jobdiva_no"),
    )
