"""Country charts."""

from lastfm_client.core.models import Artist, Song
from lastfm_client.services.base import AbstractService


class GeoService(AbstractService):
    """Service for ``geo.*`` methods.

    Countries are given by their ISO 3166-1 name, e.g. ``"Germany"``.
    """

    def get_top_artists(self, country: str, limit: int = 50, page: int = 1) -> list[Artist]:
        response = self.client.unsigned_call(
            "geo.getTopArtists",
            {"country": country, "limit": limit, "page": page},
        )

        return self._map_response(response, Artist.from_api, "topartists", "artist")

    def get_top_tracks(
        self,
        country: str,
        location: str | None = None,
        limit: int = 50,
        page: int = 1,
    ) -> list[Song]:
        """Get the most popular tracks of a country, optionally of one metro area."""
        response = self.client.unsigned_call(
            "geo.getTopTracks",
            {"country": country, "location": location, "limit": limit, "page": page},
        )

        return self._map_response(response, Song.from_api, "tracks", "track")
