"""User profile, history and chart methods."""

from datetime import datetime
from typing import Literal

from lastfm_client.core.models import Album, Artist, Chart, Period, Song, Tag, User
from lastfm_client.services.base import AbstractService, to_timestamp

TaggingType = Literal["artist", "album", "track"]

_TAGGED_ITEM_PATHS: dict[str, tuple[str, ...]] = {
    "artist": ("taggings", "artists", "artist"),
    "album": ("taggings", "albums", "album"),
    "track": ("taggings", "tracks", "track"),
}


class UserService(AbstractService):
    """Service for ``user.*`` methods."""

    def get_artist_tracks(
        self,
        username: str,
        artist: str,
        start: datetime | None = None,
        end: datetime | None = None,
        page: int = 1,
    ) -> list[Song]:
        """Get the tracks of an artist scrobbled by a user, with scrobble time."""
        response = self.client.unsigned_call(
            "user.getArtistTracks",
            {
                "user": username,
                "artist": artist,
                "startTimestamp": to_timestamp(start),
                "endTimestamp": to_timestamp(end),
                "page": page,
            },
        )

        return self._map_response(response, Song.from_api, "artisttracks", "track")

    def get_friends(self, username: str, recent_tracks: bool = False, limit: int = 50, page: int = 1) -> list[User]:
        response = self.client.unsigned_call(
            "user.getFriends",
            {"user": username, "recenttracks": int(recent_tracks), "limit": limit, "page": page},
        )

        return self._map_response(response, User.from_api, "friends", "user")

    def get_info(self, username: str) -> User:
        """Get a user's profile.

        Raises:
            NotFoundError: If the user does not exist.
        """
        response = self.client.unsigned_call("user.getInfo", {"user": username})

        return User.from_api(response.get("user") or {})

    def get_loved_tracks(self, username: str, limit: int = 50, page: int = 1) -> list[Song]:
        response = self.client.unsigned_call(
            "user.getLovedTracks",
            {"user": username, "limit": limit, "page": page},
        )

        return self._map_response(response, Song.from_api, "lovedtracks", "track")

    def get_personal_tags(
        self,
        username: str,
        tag: str,
        tagging_type: TaggingType,
        limit: int = 50,
        page: int = 1,
    ) -> list[Artist] | list[Album] | list[Song]:
        """Get the items a user has tagged with ``tag``.

        Args:
            username: Last.fm username
            tag: The user's tag
            tagging_type: artist | album | track
            limit: Number of results per page
            page: Page number
        """
        response = self.client.unsigned_call(
            "user.getPersonalTags",
            {"user": username, "tag": tag, "taggingtype": tagging_type, "limit": limit, "page": page},
        )

        factory = {"artist": Artist.from_api, "album": Album.from_api, "track": Song.from_api}[tagging_type]

        return self._map_response(response, factory, *_TAGGED_ITEM_PATHS[tagging_type])

    def get_recent_tracks(
        self,
        username: str,
        start: datetime | None = None,
        end: datetime | None = None,
        extended: bool = False,
        limit: int = 50,
        page: int = 1,
    ) -> list[Song]:
        """Get recently scrobbled tracks; a track playing now is flagged ``now_playing``."""
        response = self.client.unsigned_call(
            "user.getRecentTracks",
            {
                "user": username,
                "limit": limit,
                "page": page,
                "extended": int(extended),
                "from": to_timestamp(start),
                "to": to_timestamp(end),
            },
        )

        return self._map_response(response, Song.from_api, "recenttracks", "track")

    def get_top_albums(self, username: str, period: Period = "overall", limit: int = 50, page: int = 1) -> list[Album]:
        """Get the top albums of a user.

        Args:
            username: Last.fm username
            period: overall | 7day | 1month | 3month | 6month | 12month
            limit: Number of results per page
            page: Page number
        """
        response = self.client.unsigned_call(
            "user.getTopAlbums",
            {"user": username, "period": period, "limit": limit, "page": page},
        )

        return self._map_response(response, Album.from_api, "topalbums", "album")

    def get_top_artists(self, username: str, period: Period = "overall", limit: int = 50, page: int = 1) -> list[Artist]:
        response = self.client.unsigned_call(
            "user.getTopArtists",
            {"user": username, "period": period, "limit": limit, "page": page},
        )

        return self._map_response(response, Artist.from_api, "topartists", "artist")

    def get_top_tags(self, username: str, limit: int = 50) -> list[Tag]:
        response = self.client.unsigned_call("user.getTopTags", {"user": username, "limit": limit})

        return self._map_response(response, Tag.from_api, "toptags", "tag")

    def get_top_tracks(self, username: str, period: Period = "overall", limit: int = 50, page: int = 1) -> list[Song]:
        response = self.client.unsigned_call(
            "user.getTopTracks",
            {"user": username, "period": period, "limit": limit, "page": page},
        )

        return self._map_response(response, Song.from_api, "toptracks", "track")

    def get_weekly_album_chart(
        self,
        username: str,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[Album]:
        """Get an album chart for a date range; the most recent week if none is given."""
        response = self.client.unsigned_call(
            "user.getWeeklyAlbumChart",
            {"user": username, "from": to_timestamp(start), "to": to_timestamp(end)},
        )

        return self._map_response(response, Album.from_api, "weeklyalbumchart", "album")

    def get_weekly_artist_chart(
        self,
        username: str,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[Artist]:
        response = self.client.unsigned_call(
            "user.getWeeklyArtistChart",
            {"user": username, "from": to_timestamp(start), "to": to_timestamp(end)},
        )

        return self._map_response(response, Artist.from_api, "weeklyartistchart", "artist")

    def get_weekly_chart_list(self, username: str) -> list[Chart]:
        """Get the date ranges for which weekly charts exist."""
        response = self.client.unsigned_call("user.getWeeklyChartList", {"user": username})

        return self._map_response(response, Chart.from_api, "weeklychartlist", "chart")

    def get_weekly_track_chart(
        self,
        username: str,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[Song]:
        response = self.client.unsigned_call(
            "user.getWeeklyTrackChart",
            {"user": username, "from": to_timestamp(start), "to": to_timestamp(end)},
        )

        return self._map_response(response, Song.from_api, "weeklytrackchart", "track")
