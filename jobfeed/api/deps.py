from __future__ import annotations

from functools import lru_cache

from jobfeed.config import FeedConfig, load_config
from jobfeed.pipeline import FeedPipeline


@lru_cache
def get_config() -> FeedConfig:
    return load_config()


def feed_pipeline() -> FeedPipeline:
    """FastAPI dependency: a fresh pipeline per request.

    Usage in route handlers:
        def handler(pipeline: FeedPipeline = Depends(feed_pipeline)):
            ...
    """
    return FeedPipeline(get_config())


__all__ = ["feed_pipeline", "get_config"]
