"""Query builders for track methods."""

from typing import Self

from lastfm_client.builders.base import AutocorrectMixin, QueryBuilder


class _TrackBuilder(AutocorrectMixin, QueryBuilder):
    @classmethod
    def for_track(cls, artist: str, track: str) -> Self:
        """Identify the track by artist and track name."""
        builder = cls()
        builder._query["artist"] = artist
        builder._query["track"] = track
        return builder

    @classmethod
    def for_mbid(cls, mbid: str) -> Self:
        """Identify the track by MusicBrainz id."""
        builder = cls()
        builder._query["mbid"] = mbid
        return builder


class TrackInfoBuilder(_TrackBuilder):
    """Parameters for ``track.getInfo``."""

    def for_username(self, name: str) -> "TrackInfoBuilder":
        """Include the user's playcount and loved state."""
        self._query["username"] = name
        return self


class TrackTagsBuilder(_TrackBuilder):
    """Parameters for ``track.getTags``."""

    def for_username(self, name: str) -> "TrackTagsBuilder":
        self._query["user"] = name
        return self


class TrackTopTagsBuilder(_TrackBuilder):
    """Parameters for ``track.getTopTags``."""


class TrackSimilarBuilder(_TrackBuilder):
    """Parameters for ``track.getSimilar``."""

    def limit(self, limit: int) -> "TrackSimilarBuilder":
        self._query["limit"] = int(limit)
        return self
