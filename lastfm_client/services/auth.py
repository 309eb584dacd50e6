"""Authentication flow for Last.fm web applications."""

import logging
from urllib.parse import urlencode

from lastfm_client.client.api_client import ApiClient
from lastfm_client.core.config import Settings, get_settings
from lastfm_client.core.exceptions import ApiError
from lastfm_client.core.session import Session
from lastfm_client.services.base import AbstractService

logger = logging.getLogger(__name__)


class AuthService(AbstractService):
    """Service for ``auth.*`` methods.

    The web flow is: send the user to :meth:`get_auth_url`, receive a token
    on the callback URL, then exchange it with :meth:`create_session`.
    """

    def __init__(self, client: ApiClient, settings: Settings | None = None):
        super().__init__(client)
        self.settings = settings or get_settings()

    def get_token(self) -> str:
        """Fetch an unauthorized request token."""
        response = self.client.signed_call("auth.getToken")

        token = response.get("token")
        if not token:
            raise ApiError("No token returned")

        return str(token)

    def create_session(self, token: str) -> Session:
        """Exchange an authorized token for a session.

        Raises:
            ApiError: If the token was not authorized or has expired.
        """
        response = self.client.signed_call("auth.getSession", {"token": token})

        session = Session.from_api(response.get("session") or {})
        logger.info(f"Created Last.fm session for {session.name}")
        return session

    def get_auth_url(self, callback_url: str) -> str:
        """Build the URL the user has to visit to grant access."""
        query = urlencode({"api_key": self.client.api_key, "cb": callback_url})
        return f"{self.settings.lastfm_auth_url}?{query}"
