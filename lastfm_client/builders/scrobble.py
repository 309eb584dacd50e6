"""Batch builder for ``track.scrobble``."""

from datetime import datetime
from typing import Any

from lastfm_client.builders.base import QueryBuilder
from lastfm_client.core.exceptions import InvalidArgumentError

MAX_SCROBBLES = 50


class ScrobbleBuilder(QueryBuilder):
    """Collects up to 50 plays as indexed parameters (``artist[0]``, ...)."""

    def __init__(self) -> None:
        super().__init__()
        self._count = 0

    @classmethod
    def create(cls) -> "ScrobbleBuilder":
        return cls()

    def add_track(
        self,
        artist: str,
        track: str,
        timestamp: datetime | int,
        album: str | None = None,
        album_artist: str | None = None,
        track_number: int | None = None,
        duration: int | None = None,
        mbid: str | None = None,
        chosen_by_user: bool | None = None,
    ) -> "ScrobbleBuilder":
        """Append a play.

        Raises:
            InvalidArgumentError: If the batch already holds 50 plays.
        """
        if self._count >= MAX_SCROBBLES:
            raise InvalidArgumentError(f"A maximum of {MAX_SCROBBLES} scrobbles is allowed")

        if isinstance(timestamp, datetime):
            timestamp = int(timestamp.timestamp())

        fields: dict[str, Any] = {
            "artist": artist,
            "track": track,
            "timestamp": timestamp,
            "album": album,
            "albumArtist": album_artist,
            "trackNumber": track_number,
            "duration": duration,
            "mbid": mbid,
            "chosenByUser": None if chosen_by_user is None else int(chosen_by_user),
        }

        for name, value in fields.items():
            if value is not None:
                self._query[f"{name}[{self._count}]"] = value

        self._count += 1
        return self

    def __len__(self) -> int:
        return self._count
