"""HTTP source for repository listing endpoints."""

from __future__ import annotations

import logging

import httpx

from ghclone.errors import FetchError
from ghclone.sources.base import JsonSource

logger = logging.getLogger(__name__)


def _user_agent() -> str:
    from ghclone import __version__

    return f"ghclone/{__version__}"


class UrlSource(JsonSource):
    """Fetches a JSON document with a single GET request.

    No retries and no pagination: whatever the first response holds is
    the whole listing.
    """

    def __init__(
        self,
        url: str,
        client: httpx.Client | None = None,
        timeout: float = 30.0,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None

    @property
    def location(self) -> str:
        return self.url

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "User-Agent": _user_agent(),
        }

    @property
    def client(self) -> httpx.Client:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                timeout=self.timeout,
                headers=self.headers,
                follow_redirects=True,
            )
            self._owns_client = True
        return self._client

    def close(self) -> None:
        """Close the HTTP client if this source created it."""
        if self._client and self._owns_client:
            self._client.close()
            self._client = None

    def read(self) -> str:
        logger.debug(f"GET {self.url}")
        try:
            response = self.client.get(self.url, headers=self.headers)
        except httpx.HTTPError as e:
            raise FetchError(self.url, None, str(e) or type(e).__name__) from e
        finally:
            self.close()

        if not response.is_success:
            status_line = f"{response.status_code} {response.reason_phrase}".strip()
            raise FetchError(self.url, response.status_code, status_line)

        return response.text
