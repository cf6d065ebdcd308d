# jobfeed/cli.py
from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime
from typing import Optional, Sequence

from jobfeed.api.envelope import feed_error_body, job_body, jobs_count_body, jobs_page_body
from jobfeed.config import load_config
from jobfeed.core.paginate import parse_positive_int
from jobfeed.errors import FeedError
from jobfeed.pipeline import FeedPipeline


def _json_default(o):
    if isinstance(o, datetime):
        return o.isoformat()
    return str(o)


def _emit(payload: dict) -> None:
    print(json.dumps(payload, indent=2, default=_json_default))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Console entry point: ``jobfeed list|show|count``."""
    parser = argparse.ArgumentParser(description="Job Feed")
    parser.add_argument("--url", help="Override the upstream feed URL")
    sub = parser.add_subparsers(dest="command", required=True)

    p_list = sub.add_parser("list", help="Print one page of listings")
    p_list.add_argument("--page", default=None, help="1-based page number")
    p_list.add_argument("--limit", default=None, help="Listings per page")

    p_show = sub.add_parser("show", help="Print one listing by external id")
    p_show.add_argument("job_id")

    sub.add_parser("count", help="Print the total number of listings")

    args = parser.parse_args(argv)

    config = load_config()
    if args.url:
        config = config.model_copy(update={"feed_url": args.url})
    logging.basicConfig(level=getattr(logging, config.log_level, logging.INFO))
    pipeline = FeedPipeline(config)

    if args.command == "list":
        page = parse_positive_int(args.page, config.default_page)
        limit = parse_positive_int(args.limit, config.default_limit)
        outcome, window = pipeline.list_jobs(page, limit)
        _emit(jobs_page_body(outcome, window))
        return 0

    if args.command == "count":
        _emit(jobs_count_body(pipeline.count_jobs()))
        return 0

    try:
        job = pipeline.get_job(args.job_id)
    except FeedError as exc:
        _emit(feed_error_body(exc))
        return 1
    _emit(job_body(job))
    return 0


if __name__ == "__main__":
    # When executed as `python -m jobfeed.cli ...`
    sys.exit(main())
