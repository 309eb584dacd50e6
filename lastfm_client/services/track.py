"""Track methods of the Last.fm API."""

from collections.abc import Sequence

from lastfm_client.builders.scrobble import ScrobbleBuilder
from lastfm_client.builders.track import (
    TrackInfoBuilder,
    TrackSimilarBuilder,
    TrackTagsBuilder,
    TrackTopTagsBuilder,
)
from lastfm_client.core.exceptions import InvalidArgumentError
from lastfm_client.core.models import NowPlaying, Song, SongInfo, Tag
from lastfm_client.core.session import Session
from lastfm_client.services.base import AbstractService, validate_tags
from lastfm_client.utils.api_helper import get_nested


class TrackService(AbstractService):
    """Service for ``track.*`` methods."""

    def add_tags(self, session: Session, artist: str, track: str, tags: Sequence[str]) -> None:
        """Tag a track with up to 10 user supplied tags."""
        validate_tags(tags)

        self.client.signed_call(
            "track.addTags",
            {"artist": artist, "track": track, "tags": ",".join(tags)},
            session,
            "POST",
        )

    def get_correction(self, artist: str, track: str) -> Song | None:
        """Get the canonical spelling of a track, if Last.fm knows one."""
        response = self.client.unsigned_call(
            "track.getCorrection",
            {"artist": artist, "track": track},
        )

        corrected = get_nested(response, "corrections", "correction", "track")

        if not corrected:
            return None

        return Song.from_api(corrected)

    def get_info(self, builder: TrackInfoBuilder) -> SongInfo:
        response = self.client.unsigned_call("track.getInfo", builder.get_query())

        return SongInfo.from_api(response.get("track") or {})

    def get_similar(self, builder: TrackSimilarBuilder) -> list[Song]:
        response = self.client.unsigned_call("track.getSimilar", builder.get_query())

        return self._map_response(response, Song.from_api, "similartracks", "track")

    def get_tags(self, builder: TrackTagsBuilder) -> list[Tag]:
        response = self.client.unsigned_call("track.getTags", builder.get_query())

        return self._map_response(response, Tag.from_api, "tags", "tag")

    def get_top_tags(self, builder: TrackTopTagsBuilder) -> list[Tag]:
        response = self.client.unsigned_call("track.getTopTags", builder.get_query())

        return self._map_response(response, Tag.from_api, "toptags", "tag")

    def love(self, session: Session, artist: str, track: str) -> None:
        """Mark a track as loved by the session user."""
        self.client.signed_call(
            "track.love",
            {"artist": artist, "track": track},
            session,
            "POST",
        )

    def unlove(self, session: Session, artist: str, track: str) -> None:
        self.client.signed_call(
            "track.unlove",
            {"artist": artist, "track": track},
            session,
            "POST",
        )

    def remove_tag(self, session: Session, artist: str, track: str, tag: str) -> None:
        self.client.signed_call(
            "track.removeTag",
            {"artist": artist, "track": track, "tag": tag},
            session,
            "POST",
        )

    def scrobble(self, session: Session, builder: ScrobbleBuilder) -> None:
        """Submit a batch of plays.

        Raises:
            InvalidArgumentError: If the batch is empty.
        """
        if len(builder) == 0:
            raise InvalidArgumentError("No tracks added")

        self.client.signed_call("track.scrobble", builder.get_query(), session, "POST")

    def search(self, track: str, artist: str | None = None, limit: int = 50, page: int = 1) -> list[Song]:
        """Search for a track by name, optionally narrowed by artist."""
        response = self.client.unsigned_call(
            "track.search",
            {"track": track, "artist": artist, "limit": limit, "page": page},
        )

        return self._map_response(response, Song.from_api, "results", "trackmatches", "track")

    def update_now_playing(self, session: Session, now_playing: NowPlaying) -> None:
        """Tell Last.fm which track the user has started listening to."""
        self.client.signed_call(
            "track.updateNowPlaying",
            now_playing.to_query(),
            session,
            "POST",
        )
