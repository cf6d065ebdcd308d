"""Job feed service: fetch, extract, normalize and serve a JobDiva XML feed."""

__version__ = "0.1.0"
