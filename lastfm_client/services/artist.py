"""Artist methods of the Last.fm API."""

from collections.abc import Sequence

from lastfm_client.builders.artist import (
    ArtistInfoBuilder,
    ArtistSimilarBuilder,
    ArtistTagsBuilder,
    ArtistTopAlbumsBuilder,
    ArtistTopTagsBuilder,
    ArtistTopTracksBuilder,
)
from lastfm_client.core.models import Album, Artist, ArtistInfo, Song, Tag
from lastfm_client.core.session import Session
from lastfm_client.services.base import AbstractService, validate_tags
from lastfm_client.utils.api_helper import get_nested


class ArtistService(AbstractService):
    """Service for ``artist.*`` methods."""

    def add_tags(self, session: Session, artist: str, tags: Sequence[str]) -> None:
        """Tag an artist with up to 10 user supplied tags."""
        validate_tags(tags)

        self.client.signed_call(
            "artist.addTags",
            {"artist": artist, "tags": ",".join(tags)},
            session,
            "POST",
        )

    def get_correction(self, artist: str) -> Artist | None:
        """Get the canonical spelling of an artist name, if Last.fm knows one."""
        response = self.client.unsigned_call("artist.getCorrection", {"artist": artist})

        corrected = get_nested(response, "corrections", "correction", "artist")

        if not corrected:
            return None

        return Artist.from_api(corrected)

    def get_info(self, builder: ArtistInfoBuilder) -> ArtistInfo:
        """Get the metadata of an artist, including the biography."""
        response = self.client.unsigned_call("artist.getInfo", builder.get_query())

        return ArtistInfo.from_api(response.get("artist") or {})

    def get_similar(self, builder: ArtistSimilarBuilder) -> list[Artist]:
        response = self.client.unsigned_call("artist.getSimilar", builder.get_query())

        return self._map_response(response, Artist.from_api, "similarartists", "artist")

    def get_tags(self, builder: ArtistTagsBuilder) -> list[Tag]:
        response = self.client.unsigned_call("artist.getTags", builder.get_query())

        return self._map_response(response, Tag.from_api, "tags", "tag")

    def get_top_albums(self, builder: ArtistTopAlbumsBuilder) -> list[Album]:
        response = self.client.unsigned_call("artist.getTopAlbums", builder.get_query())

        return self._map_response(response, Album.from_api, "topalbums", "album")

    def get_top_tags(self, builder: ArtistTopTagsBuilder) -> list[Tag]:
        response = self.client.unsigned_call("artist.getTopTags", builder.get_query())

        return self._map_response(response, Tag.from_api, "toptags", "tag")

    def get_top_tracks(self, builder: ArtistTopTracksBuilder) -> list[Song]:
        response = self.client.unsigned_call("artist.getTopTracks", builder.get_query())

        return self._map_response(response, Song.from_api, "toptracks", "track")

    def remove_tag(self, session: Session, artist: str, tag: str) -> None:
        """Remove a user's tag from an artist."""
        self.client.signed_call(
            "artist.removeTag",
            {"artist": artist, "tag": tag},
            session,
            "POST",
        )

    def search(self, artist: str, limit: int = 50, page: int = 1) -> list[Artist]:
        """Search for an artist by name."""
        response = self.client.unsigned_call(
            "artist.search",
            {"artist": artist, "limit": limit, "page": page},
        )

        return self._map_response(response, Artist.from_api, "results", "artistmatches", "artist")
