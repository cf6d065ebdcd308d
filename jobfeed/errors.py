from __future__ import annotations


class FeedError(Exception):
    """Base class for request-scoped pipeline failures."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UpstreamUnavailable(FeedError):
    """Network failure or non-2xx response from the feed host."""

    status_code = 502


class MalformedDocument(FeedError):
    """The feed text is not well-formed XML."""

    status_code = 502


class EmptyResultSet(FeedError):
    """Every extraction strategy came back empty."""

    status_code = 404


class RecordNotFound(FeedError):
    status_code = 404


__all__ = [
    "FeedError",
    "UpstreamUnavailable",
    "MalformedDocument",
    "EmptyResultSet",
    "RecordNotFound",
]
