"""Query builders for artist methods."""

from typing import Self

from lastfm_client.builders.base import AutocorrectMixin, PagingMixin, QueryBuilder


class _ArtistBuilder(AutocorrectMixin, QueryBuilder):
    @classmethod
    def for_artist(cls, artist: str) -> Self:
        """Identify the artist by name."""
        builder = cls()
        builder._query["artist"] = artist
        return builder

    @classmethod
    def for_mbid(cls, mbid: str) -> Self:
        """Identify the artist by MusicBrainz id."""
        builder = cls()
        builder._query["mbid"] = mbid
        return builder


class ArtistInfoBuilder(_ArtistBuilder):
    """Parameters for ``artist.getInfo``."""

    def for_username(self, name: str) -> "ArtistInfoBuilder":
        self._query["username"] = name
        return self

    def language(self, lang: str) -> "ArtistInfoBuilder":
        self._query["lang"] = lang
        return self


class ArtistTagsBuilder(_ArtistBuilder):
    """Parameters for ``artist.getTags``."""

    def for_username(self, name: str) -> "ArtistTagsBuilder":
        self._query["user"] = name
        return self


class ArtistTopTagsBuilder(_ArtistBuilder):
    """Parameters for ``artist.getTopTags``."""


class ArtistTopAlbumsBuilder(PagingMixin, _ArtistBuilder):
    """Parameters for ``artist.getTopAlbums``."""


class ArtistTopTracksBuilder(PagingMixin, _ArtistBuilder):
    """Parameters for ``artist.getTopTracks``."""


class ArtistSimilarBuilder(_ArtistBuilder):
    """Parameters for ``artist.getSimilar``."""

    def limit(self, limit: int) -> "ArtistSimilarBuilder":
        self._query["limit"] = int(limit)
        return self
