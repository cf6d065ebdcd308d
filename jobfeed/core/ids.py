"""External identifiers: ``jobdiva-<rawKeyOrTimestamp>-<index>``.

An id points at a position in one extraction result. The raw key is tried
first when decoding; the index is only a fallback, so ids survive reordering
of the feed as long as the raw key is present.
"""
from __future__ import annotations

import re
import time
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from jobfeed.core.normalize import raw_primary_key
from jobfeed.errors import RecordNotFound

ID_TAG = "jobdiva"
ID_PATTERN = re.compile(rf"^{ID_TAG}-(?P<key>.+)-(?P<index>[0-9]{{1,9}})$")


@dataclass(frozen=True)
class ExternalId:
    key: str
    index: int

    def __str__(self) -> str:
        return f"{ID_TAG}-{self.key}-{self.index}"


def _now_ms() -> int:
    return int(time.time() * 1000)


def encode_id(record: Any, index: int, *, timestamp_ms: Optional[int] = None) -> str:
    key = raw_primary_key(record)
    if key is None:
        key = str(timestamp_ms if timestamp_ms is not None else _now_ms())
    return str(ExternalId(key=key, index=index))


def parse_id(external_id: str) -> ExternalId:
    m = ID_PATTERN.match(external_id or "")
    if not m:
        raise RecordNotFound(f"Job not found with ID: {external_id}")
    return ExternalId(key=m.group("key"), index=int(m.group("index")))


def decode_id(external_id: str, records: Sequence[Any]) -> Any:
    """Find the record ``external_id`` refers to within ``records``."""
    parsed = parse_id(external_id)
    for record in records:
        if raw_primary_key(record) == parsed.key:
            return record
    if parsed.index < len(records):
        return records[parsed.index]
    raise RecordNotFound(f"Job not found with ID: {external_id}")
