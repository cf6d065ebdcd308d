import unittest
from unittest import mock

import requests

from jobfeed.errors import UpstreamUnavailable
from jobfeed.fetch import Fetcher


def _response(status: int, text: str = "") -> mock.Mock:
    resp = mock.Mock()
    resp.status_code = status
    resp.text = text
    return resp


class FetcherTests(unittest.TestCase):
    def test_returns_document_on_2xx(self):
        with mock.patch("jobfeed.fetch.requests.get", return_value=_response(200, "<outertag/>")) as get:
            doc = Fetcher(timeout=5).get("https://feed.test/jobs")
        self.assertEqual(doc.text, "<outertag/>")
        self.assertEqual(doc.status, 200)
        self.assertEqual(doc.length, 11)
        self.assertEqual(get.call_args.kwargs["timeout"], 5)

    def test_non_2xx_raises(self):
        with mock.patch("jobfeed.fetch.requests.get", return_value=_response(500)):
            with self.assertRaises(UpstreamUnavailable) as ctx:
                Fetcher().get("https://feed.test/jobs")
        self.assertIn("HTTP error", ctx.exception.message)
        self.assertIn("500", ctx.exception.message)

    def test_network_error_raises(self):
        with mock.patch("jobfeed.fetch.requests.get", side_effect=requests.ConnectionError("reset")):
            with self.assertRaises(UpstreamUnavailable):
                Fetcher().get("https://feed.test/jobs")


if __name__ == "__main__":
    unittest.main()
