"""Tag methods of the Last.fm API."""

from lastfm_client.core.models import Album, Artist, Chart, Song, Tag, TagInfo
from lastfm_client.services.base import AbstractService


class TagService(AbstractService):
    """Service for ``tag.*`` methods."""

    def get_info(self, tag: str, lang: str | None = None) -> TagInfo:
        """Get the metadata of a tag, with the wiki in ``lang`` if available."""
        response = self.client.unsigned_call("tag.getInfo", {"tag": tag, "lang": lang})

        return TagInfo.from_api(response.get("tag") or {})

    def get_similar(self, tag: str) -> list[Tag]:
        response = self.client.unsigned_call("tag.getSimilar", {"tag": tag})

        return self._map_response(response, Tag.from_api, "similartags", "tag")

    def get_top_albums(self, tag: str, limit: int = 50, page: int = 1) -> list[Album]:
        response = self.client.unsigned_call(
            "tag.getTopAlbums",
            {"tag": tag, "limit": limit, "page": page},
        )

        return self._map_response(response, Album.from_api, "albums", "album")

    def get_top_artists(self, tag: str, limit: int = 50, page: int = 1) -> list[Artist]:
        response = self.client.unsigned_call(
            "tag.getTopArtists",
            {"tag": tag, "limit": limit, "page": page},
        )

        return self._map_response(response, Artist.from_api, "topartists", "artist")

    def get_top_tags(self) -> list[Tag]:
        """Get the most used tags on Last.fm."""
        response = self.client.unsigned_call("tag.getTopTags")

        return self._map_response(response, Tag.from_api, "toptags", "tag")

    def get_top_tracks(self, tag: str, limit: int = 50, page: int = 1) -> list[Song]:
        response = self.client.unsigned_call(
            "tag.getTopTracks",
            {"tag": tag, "limit": limit, "page": page},
        )

        return self._map_response(response, Song.from_api, "tracks", "track")

    def get_weekly_chart_list(self, tag: str) -> list[Chart]:
        response = self.client.unsigned_call("tag.getWeeklyChartList", {"tag": tag})

        return self._map_response(response, Chart.from_api, "weeklychartlist", "chart")
