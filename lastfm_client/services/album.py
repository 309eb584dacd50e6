"""Album methods of the Last.fm API."""

from collections.abc import Sequence

from lastfm_client.builders.album import AlbumInfoBuilder, AlbumTagsBuilder, AlbumTopTagsBuilder
from lastfm_client.core.models import Album, AlbumInfo, Tag
from lastfm_client.core.session import Session
from lastfm_client.services.base import AbstractService, validate_tags


class AlbumService(AbstractService):
    """Service for ``album.*`` methods."""

    def add_tags(self, session: Session, artist: str, album: str, tags: Sequence[str]) -> None:
        """Tag an album with up to 10 user supplied tags.

        Raises:
            InvalidArgumentError: If the tag list is empty, too long or holds
                a non-string value.
        """
        validate_tags(tags)

        self.client.signed_call(
            "album.addTags",
            {"artist": artist, "album": album, "tags": ",".join(tags)},
            session,
            "POST",
        )

    def get_info(self, builder: AlbumInfoBuilder) -> AlbumInfo:
        """Get the metadata and tracklist of an album."""
        response = self.client.unsigned_call("album.getInfo", builder.get_query())

        return AlbumInfo.from_api(response.get("album") or {})

    def get_tags(self, builder: AlbumTagsBuilder) -> list[Tag]:
        """Get the tags applied by a user to an album."""
        response = self.client.unsigned_call("album.getTags", builder.get_query())

        return self._map_response(response, Tag.from_api, "tags", "tag")

    def get_top_tags(self, builder: AlbumTopTagsBuilder) -> list[Tag]:
        """Get the top tags for an album, ordered by popularity."""
        response = self.client.unsigned_call("album.getTopTags", builder.get_query())

        return self._map_response(response, Tag.from_api, "toptags", "tag")

    def remove_tag(self, session: Session, artist: str, album: str, tag: str) -> None:
        """Remove a user's tag from an album."""
        self.client.signed_call(
            "album.removeTag",
            {"artist": artist, "album": album, "tag": tag},
            session,
            "POST",
        )

    def search(self, album: str, limit: int = 50, page: int = 1) -> list[Album]:
        """Search for an album by name."""
        response = self.client.unsigned_call(
            "album.search",
            {"album": album, "limit": limit, "page": page},
        )

        return self._map_response(response, Album.from_api, "results", "albummatches", "album")
