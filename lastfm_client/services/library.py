"""User library."""

from lastfm_client.core.models import Artist
from lastfm_client.services.base import AbstractService


class LibraryService(AbstractService):
    """Service for ``library.*`` methods."""

    def get_artists(self, username: str, limit: int = 50, page: int = 1) -> list[Artist]:
        """Get all artists in a user's library with play counts."""
        response = self.client.unsigned_call(
            "library.getArtists",
            {"user": username, "limit": limit, "page": page},
        )

        return self._map_response(response, Artist.from_api, "artists", "artist")
