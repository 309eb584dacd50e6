"""Query builders for album methods."""

from typing import Self

from lastfm_client.builders.base import AutocorrectMixin, QueryBuilder


class _AlbumBuilder(AutocorrectMixin, QueryBuilder):
    @classmethod
    def for_album(cls, artist: str, album: str) -> Self:
        """Identify the album by artist and album name."""
        builder = cls()
        builder._query["artist"] = artist
        builder._query["album"] = album
        return builder

    @classmethod
    def for_mbid(cls, mbid: str) -> Self:
        """Identify the album by MusicBrainz id."""
        builder = cls()
        builder._query["mbid"] = mbid
        return builder


class AlbumInfoBuilder(_AlbumBuilder):
    """Parameters for ``album.getInfo``."""

    def for_username(self, name: str) -> "AlbumInfoBuilder":
        """Include the user's playcount for this album."""
        self._query["username"] = name
        return self

    def language(self, lang: str) -> "AlbumInfoBuilder":
        """Return the biography in an ISO 639 alpha-2 language."""
        self._query["lang"] = lang
        return self


class AlbumTagsBuilder(_AlbumBuilder):
    """Parameters for ``album.getTags``."""

    def for_username(self, name: str) -> "AlbumTagsBuilder":
        """Return the tags this user applied."""
        self._query["user"] = name
        return self


class AlbumTopTagsBuilder(_AlbumBuilder):
    """Parameters for ``album.getTopTags``."""
