"""Last.fm API client: parameter preparation, signing and error mapping."""

import logging
from typing import Any

from lastfm_client.client.connection import Connection, HttpConnection
from lastfm_client.client.params import encode_utf8, filter_null
from lastfm_client.client.signing import sign_params
from lastfm_client.core.config import Settings, get_settings
from lastfm_client.core.exceptions import ApiError, NotFoundError
from lastfm_client.core.session import Session

logger = logging.getLogger(__name__)

# Last.fm error code for "Invalid parameters", returned for unknown entities.
NOT_FOUND_CODE = 6


class ApiClient:
    """Client for Last.fm API."""

    def __init__(self, connection: Connection, api_key: str, shared_secret: str):
        self.connection = connection
        self._api_key = api_key
        self._shared_secret = shared_secret

    @classmethod
    def from_settings(cls, settings: Settings | None = None, connection: Connection | None = None) -> "ApiClient":
        """Create a client from configured credentials."""
        settings = settings or get_settings()
        return cls(
            connection or HttpConnection(settings),
            settings.lastfm_api_key,
            settings.lastfm_shared_secret,
        )

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def shared_secret(self) -> str:
        return self._shared_secret

    def signed_call(
        self,
        method: str,
        params: dict[str, Any] | None = None,
        session: Session | None = None,
        request_method: str = "GET",
    ) -> dict[str, Any]:
        """Make an authenticated API request.

        Args:
            method: Last.fm method name, e.g. ``album.addTags``.
            params: Method parameters; None values are dropped.
            session: User session whose key is sent as ``sk``.
            request_method: HTTP verb, ``GET`` or ``POST``.

        Returns:
            The decoded response body.

        Raises:
            NotFoundError: If no entity matched the request.
            ApiError: For any other upstream failure.
        """
        call_params: dict[str, Any] = {
            "method": method,
            "api_key": self._api_key,
        }

        if session is not None:
            call_params["sk"] = session.key

        request_params = encode_utf8(filter_null({**call_params, **(params or {})}))
        request_params["api_sig"] = sign_params(request_params, self._shared_secret)

        return self._call(method, request_params, request_method)

    def unsigned_call(
        self,
        method: str,
        params: dict[str, Any] | None = None,
        request_method: str = "GET",
    ) -> dict[str, Any]:
        """Make a public API request without session or signature."""
        call_params: dict[str, Any] = {
            "method": method,
            "api_key": self._api_key,
        }

        request_params = encode_utf8(filter_null({**call_params, **(params or {})}))

        return self._call(method, request_params, request_method)

    def _call(self, method: str, params: dict[str, Any], request_method: str) -> dict[str, Any]:
        try:
            return self.connection.call(method, params, request_method)
        except ApiError as e:
            if e.code == NOT_FOUND_CODE:
                logger.warning(f"{method}: no entity found ({e})")
                raise NotFoundError("No entity was found for your request.", e.code) from e
            raise
