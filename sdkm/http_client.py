"""HTTP client with a request timeout and a bounded number of redirects."""

from __future__ import annotations

import logging

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0
MAX_REDIRECT = 10


class HTTPClient:
    """Performs GET requests, following at most MAX_REDIRECT - 1 redirects."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.timeout = timeout
        self._session = requests.Session()
        # A request chain may hold at most MAX_REDIRECT requests in total.
        self._session.max_redirects = MAX_REDIRECT - 1

    def __repr__(self) -> str:
        return f"HTTPClient(timeout={self.timeout!r})"

    def __enter__(self) -> HTTPClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Release pooled connections."""
        self._session.close()

    def get(self, url: str) -> requests.Response:
        """Fetch a URL; raises requests.TooManyRedirects on a long chain."""
        response = self._session.get(url, timeout=self.timeout)
        if response.history:
            origin = response.history[0].url
            for hop in response.history[1:] + [response]:
                logger.debug("'%s' redirect to '%s'...", origin, hop.url)
        return response