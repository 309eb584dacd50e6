"""Global charts."""

from lastfm_client.core.models import Artist, Song, Tag
from lastfm_client.services.base import AbstractService


class ChartService(AbstractService):
    """Service for ``chart.*`` methods."""

    def get_top_artists(self, limit: int = 50, page: int = 1) -> list[Artist]:
        response = self.client.unsigned_call("chart.getTopArtists", {"limit": limit, "page": page})

        return self._map_response(response, Artist.from_api, "artists", "artist")

    def get_top_tags(self, limit: int = 50, page: int = 1) -> list[Tag]:
        response = self.client.unsigned_call("chart.getTopTags", {"limit": limit, "page": page})

        return self._map_response(response, Tag.from_api, "tags", "tag")

    def get_top_tracks(self, limit: int = 50, page: int = 1) -> list[Song]:
        response = self.client.unsigned_call("chart.getTopTracks", {"limit": limit, "page": page})

        return self._map_response(response, Song.from_api, "tracks", "track")
