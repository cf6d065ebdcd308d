from __future__ import annotations

import logging
from dataclasses import dataclass

import requests

from jobfeed.errors import UpstreamUnavailable

LOGGER = logging.getLogger(__name__)

DEFAULT_UA = "JobFeed/0.1 (+https://example.com/jobfeed; contact=you@example.com)"


@dataclass(frozen=True)
class RawFeedDocument:
    url: str
    status: int
    text: str

    @property
    def length(self) -> int:
        return len(self.text)


class Fetcher:
    def __init__(self, timeout: float = 20.0, ua: str = DEFAULT_UA):
        self.timeout = timeout
        self.ua = ua

    def get(self, url: str) -> RawFeedDocument:
        """Fetch ``url`` once; raise :class:`UpstreamUnavailable` on any failure."""
        headers = {"User-Agent": self.ua, "Accept": "application/xml,text/xml;q=0.9,*/*;q=0.8"}
        LOGGER.info("feed fetch url=%s", url)
        try:
            r = requests.get(url, headers=headers, timeout=self.timeout)
        except requests.RequestException as exc:
            raise UpstreamUnavailable(f"Feed request failed: {exc}") from exc
        if not 200 <= r.status_code < 300:
            raise UpstreamUnavailable(f"HTTP error! status: {r.status_code}")
        doc = RawFeedDocument(url=url, status=r.status_code, text=r.text or "")
        LOGGER.info("feed received status=%s length=%s", doc.status, doc.length)
        return doc
