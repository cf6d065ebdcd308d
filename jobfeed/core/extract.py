"""Locate the job record nodes inside a parsed feed.

The feed's nesting is not contractually fixed, so strategies are tried in
order and the first non-empty result wins:

    primary    outertag -> jobs -> job
    secondary  jobs -> job
    direct     job
    recursive  depth-first search for a titled list or a ``*job*`` list
    pattern    regex scan of the raw text
    static     one placeholder record
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Optional

from jobfeed.core.parse import ParsedTree

LOGGER = logging.getLogger(__name__)

RawRecord = dict[str, Any]

PRIMARY_PATH = ("outertag", "jobs", "job")
SECONDARY_PATH = ("jobs", "job")
DIRECT_PATH = ("job",)

STRUCTURAL_STRATEGIES = ("primary", "secondary", "direct", "recursive")

JOB_BLOCK = re.compile(r"<job(?:\s[^>]*)?>([\s\S]*?)</job>", re.I)
CDATA = re.compile(r"<!\[CDATA\[([\s\S]*?)\]\]>")
PATTERN_FIELDS = (
    "ID",
    "jobdivaid",
    "jobdiva_no",
    "title",
    "company",
    "city",
    "state_abbr",
    "jobdescription_400char",
    "issuedate",
    "portal_url",
    "positiontype",
)

STATIC_RECORDS: tuple[RawRecord, ...] = (
    {
        "jobdivaid": "27142402",
        "jobdiva_no": "26-00066",
        "title": "Kofax Developer- GDOL",
        "company": "AppSixer LLC",
        "city": "Atlanta",
        "state_abbr": "GA",
        "jobdescription_400char": (
            "C2C - DO NOT APPLY FOR THIS JOB Job Summary: "
            "Kofax developer with 8+ years of experience"
        ),
        "issuedate": "2026-01-16 17:30:05.0",
        "portal_url": "#",
    },
)


@dataclass
class Extraction:
    records: list[RawRecord]
    strategy: str
    reason: Optional[str] = None

    @property
    def is_static(self) -> bool:
        return self.strategy == "static"


def _as_records(value: Any) -> list[RawRecord]:
    # A lone record is allowed to omit the list wrapper.
    if isinstance(value, dict):
        return [value]
    if isinstance(value, list):
        return [v for v in value if isinstance(v, dict)]
    return []


def _at_path(tree: Any, path: tuple[str, ...]) -> list[RawRecord]:
    node = tree
    for key in path:
        if not isinstance(node, dict) or key not in node:
            return []
        node = node[key]
    return _as_records(node)


def _looks_like_record_list(value: Any) -> bool:
    return (
        isinstance(value, list)
        and len(value) > 0
        and isinstance(value[0], dict)
        and bool(value[0].get("title"))
    )


def find_jobs_recursive(tree: Any, max_depth: int = 32) -> Optional[list]:
    """Depth-first search for the first list of job records.

    Children are visited in document order. A child matches when its key
    contains "job" and its value is a list holding at least one mapping, or
    when it is a list whose first element has a title. Nodes deeper than ``max_depth`` are not expanded.
    """
    stack: list[tuple[Optional[str], Any, str, int]] = [(None, tree, "root", 0)]
    while stack:
        key, node, path, depth = stack.pop()
        if key is not None and "job" in key.lower() and isinstance(node, list) and _as_records(node):
            LOGGER.debug("extract recursive match=job-key key=%s path=%s", key, path)
            return node
        if _looks_like_record_list(node):
            LOGGER.debug("extract recursive match=titled-list path=%s", path)
            return node
        if depth >= max_depth:
            LOGGER.debug("extract recursive depth-limit path=%s", path)
            continue
        if isinstance(node, dict):
            children = [(str(k), v) for k, v in node.items()]
        elif isinstance(node, list):
            children = [(str(i), v) for i, v in enumerate(node)]
        else:
            continue
        for child_key, child in reversed(children):
            stack.append((child_key, child, f"{path}.{child_key}", depth + 1))
    return None


def _extract_value(block: str, tag: str) -> Optional[str]:
    m = re.search(rf"<{tag}>([\s\S]*?)</{tag}>", block, re.I)
    if not m:
        return None
    value = CDATA.sub(r"\1", m.group(1).strip())
    return value or None


def extract_jobs_via_pattern(xml_text: str, cap: int = 20) -> list[RawRecord]:
    """Scan raw text for ``<job>`` blocks; keep up to ``cap`` records that have a title."""
    jobs: list[RawRecord] = []
    for match in JOB_BLOCK.finditer(xml_text or ""):
        if len(jobs) >= cap:
            break
        block = match.group(1)
        job = {field: _extract_value(block, field) for field in PATTERN_FIELDS}
        if job["title"]:
            jobs.append(job)
    LOGGER.info("extract pattern records=%s cap=%s", len(jobs), cap)
    return jobs


def extract_records(
    tree: ParsedTree,
    xml_text: str = "",
    *,
    max_depth: int = 32,
    pattern_cap: int = 20,
) -> Extraction:
    """Run the strategy chain; never returns an empty record list."""
    strategies: list[tuple[str, Callable[[], list[RawRecord]]]] = [
        ("primary", lambda: _at_path(tree, PRIMARY_PATH)),
        ("secondary", lambda: _at_path(tree, SECONDARY_PATH)),
        ("direct", lambda: _at_path(tree, DIRECT_PATH)),
        ("recursive", lambda: _as_records(find_jobs_recursive(tree, max_depth))),
        ("pattern", lambda: extract_jobs_via_pattern(xml_text, pattern_cap)),
    ]
    for name, strategy in strategies:
        records = strategy()
        if records:
            LOGGER.info("extract strategy=%s records=%s", name, len(records))
            return Extraction(records=list(records), strategy=name)
        LOGGER.debug("extract strategy=%s records=0", name)

    LOGGER.warning("extract strategy=static reason=no-records")
    return Extraction(records=[dict(r) for r in STATIC_RECORDS], strategy="static")
