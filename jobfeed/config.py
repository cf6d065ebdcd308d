"""Runtime configuration for the feed pipeline.

Environment variables (optional)
--------------------------------
JOBFEED_FEED_URL          upstream XML feed URL
JOBFEED_REQUEST_TIMEOUT   seconds per upstream request (float, default 20)
JOBFEED_PATTERN_CAP       max records accepted by the pattern scan (default 20)
JOBFEED_MAX_SEARCH_DEPTH  depth bound for the structural search (default 32)
JOBFEED_MAX_DOC_DEPTH     nesting limit when parsing the feed (default 64)
JOBFEED_DEFAULT_LIMIT     page size when none is requested (default 8)
JOBFEED_LOG_LEVEL         logging level for the CLI (default INFO)

JOBFEED_DOTENV (path to .env, default ".env")
    Variables from this file are loaded before the environment is read.
"""
from __future__ import annotations

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

DEFAULT_FEED_URL = (
    "https://www2.jobdiva.com/employers/connect/listofportaljobs.jsp"
    "?a=nojdnwqfm92yb6tqpj7w2z2oljbwm70b97mhxwp693m08ft0e6v4o9v0113cjvr6"
)


class FeedConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    feed_url: str = DEFAULT_FEED_URL
    request_timeout: float = 20.0
    pattern_record_cap: int = 20
    max_search_depth: int = 32
    max_document_depth: int = 64
    default_page: int = 1
    default_limit: int = 8
    log_level: str = "INFO"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    try:
        return float(raw) if raw else default
    except ValueError:
        return default


def load_config() -> FeedConfig:
    """Build a :class:`FeedConfig` from the environment (and ``.env`` if present)."""
    load_dotenv(dotenv_path=os.getenv("JOBFEED_DOTENV", ".env"))
    return FeedConfig(
        feed_url=os.getenv("JOBFEED_FEED_URL") or DEFAULT_FEED_URL,
        request_timeout=_env_float("JOBFEED_REQUEST_TIMEOUT", 20.0),
        pattern_record_cap=_env_int("JOBFEED_PATTERN_CAP", 20),
        max_search_depth=_env_int("JOBFEED_MAX_SEARCH_DEPTH", 32),
        max_document_depth=_env_int("JOBFEED_MAX_DOC_DEPTH", 64),
        default_limit=_env_int("JOBFEED_DEFAULT_LIMIT", 8),
        log_level=os.getenv("JOBFEED_LOG_LEVEL", "INFO").upper(),
    )
