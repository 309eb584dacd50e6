"""Transport layer between the client and Last.fm."""

import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx

from lastfm_client.core.config import Settings, get_settings
from lastfm_client.core.exceptions import ApiError

logger = logging.getLogger(__name__)


class Connection(ABC):
    """Carries prepared parameter sets to Last.fm and fetches web pages."""

    @abstractmethod
    def call(self, method: str, params: dict[str, Any], request_method: str = "GET") -> dict[str, Any]:
        """Execute an API method and return the decoded JSON body.

        Raises:
            ApiError: If Last.fm reports an error or cannot be reached.
        """

    @abstractmethod
    def get_page_body(self, url: str, params: dict[str, Any] | None = None) -> str:
        """Fetch a web page, returning an empty string on failure."""


class HttpConnection(Connection):
    """Connection backed by a synchronous ``httpx.Client``."""

    def __init__(self, settings: Settings | None = None, client: httpx.Client | None = None):
        """Initialize the connection.

        Args:
            settings: Client settings; defaults to the environment settings.
            client: Preconfigured HTTP client, mostly useful in tests.
        """
        self.settings = settings or get_settings()
        self._client = client

    def _get_client(self) -> httpx.Client:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                timeout=self.settings.http_timeout_seconds,
                headers={"User-Agent": self.settings.user_agent},
                follow_redirects=True,
            )
        return self._client

    def close(self) -> None:
        """Close HTTP client."""
        if self._client:
            self._client.close()
            self._client = None

    def __enter__(self) -> "HttpConnection":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def call(self, method: str, params: dict[str, Any], request_method: str = "GET") -> dict[str, Any]:
        client = self._get_client()
        request_params = {**params, "format": "json"}

        logger.debug(f"Calling {method} via {request_method}")

        try:
            if request_method.upper() == "POST":
                response = client.post(self.settings.lastfm_api_url, data=request_params)
            else:
                response = client.get(self.settings.lastfm_api_url, params=request_params)
        except httpx.HTTPError as e:
            raise ApiError(f"Failed to connect: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise ApiError(f"Invalid response for {method}: HTTP {response.status_code}", response.status_code) from e

        # Last.fm returns errors in the response body
        if isinstance(data, dict) and "error" in data:
            message = str(data.get("message", "Unknown error"))
            try:
                code = int(data["error"])
            except (TypeError, ValueError) as e:
                raise ApiError(f"{message} (unrecognized error code {data['error']!r})", response.status_code) from e
            raise ApiError(message, code)

        if response.status_code != 200:
            raise ApiError(f"API error: HTTP {response.status_code}", response.status_code)

        if not isinstance(data, dict):
            raise ApiError(f"Unexpected response for {method}")

        return data

    def get_page_body(self, url: str, params: dict[str, Any] | None = None) -> str:
        client = self._get_client()

        try:
            response = client.get(url, params=params or None)
        except httpx.HTTPError as e:
            logger.warning(f"Failed to fetch {url}: {e}")
            return ""

        if response.status_code != 200:
            logger.warning(f"Failed to fetch {url}: HTTP {response.status_code}")
            return ""

        return response.text
