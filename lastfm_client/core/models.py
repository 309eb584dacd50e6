"""Data models mapped from Last.fm API responses and crawled pages.

Every model is immutable. ``from_api`` factories tolerate missing optional
keys but let pydantic reject a fragment that lacks a required one (for
example a user without a name).
"""

from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

from lastfm_client.utils.api_helper import get_nested, map_list

Period = Literal["overall", "7day", "1month", "3month", "6month", "12month"]


def _optional_int(value: Any) -> int | None:
    """Coerce an API number, treating empty and zero values as absent."""
    if not value:
        return None
    # Numbers arrive as strings, so "0" only shows up as zero after conversion.
    return int(value) or None


def _count(value: Any) -> int:
    """Coerce an API counter that defaults to zero."""
    if not value:
        return 0
    return int(value)


def _optional_str(value: Any) -> str | None:
    if value in (None, ""):
        return None
    return str(value)


def _artist_name(value: Any) -> str | None:
    """Artist references are either a plain name or a nested object."""
    if isinstance(value, dict):
        return _optional_str(value.get("name") or value.get("#text"))
    return _optional_str(value)


def _timestamp(value: Any) -> datetime | None:
    if not value:
        return None
    return datetime.fromtimestamp(int(value), tz=timezone.utc)


def _images(data: dict[str, Any]) -> tuple["Image", ...]:
    raw = data.get("image")
    if not raw:
        return ()
    return tuple(image for image in map_list(Image.from_api, raw) if image is not None)


def _tags(data: dict[str, Any], *path: str) -> tuple["Tag", ...]:
    raw = get_nested(data, *path)
    if not raw:
        return ()
    return tuple(map_list(Tag.from_api, raw))


class LastFmModel(BaseModel):
    """Base for immutable response models."""

    model_config = ConfigDict(frozen=True)


class Image(LastFmModel):
    """Image reference."""

    url: str
    size: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any] | str) -> "Image | None":
        """Parse an image entry; entries without a URL are dropped."""
        if isinstance(data, str):
            return cls(url=data) if data else None

        url = data.get("#text") or data.get("url")
        if not url:
            return None
        return cls(url=url, size=_optional_str(data.get("size")))


class Tag(LastFmModel):
    """Tag attached to an album, artist or track."""

    name: str
    count: int | None = None
    url: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Tag":
        return cls(
            name=data.get("name"),
            count=_optional_int(data.get("count")),
            url=_optional_str(data.get("url")),
        )


class TagInfo(LastFmModel):
    """Extended tag metadata."""

    name: str
    total: int = 0
    reach: int = 0
    summary: str | None = None
    content: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "TagInfo":
        return cls(
            name=data.get("name"),
            total=_count(data.get("total")),
            reach=_count(data.get("reach")),
            summary=_optional_str(get_nested(data, "wiki", "summary")),
            content=_optional_str(get_nested(data, "wiki", "content")),
        )


class Artist(LastFmModel):
    """Artist as listed in search results and charts."""

    name: str
    mbid: str | None = None
    url: str | None = None
    images: tuple[Image, ...] = ()
    playcount: int = 0
    listeners: int = 0

    @classmethod
    def from_api(cls, data: dict[str, Any] | str) -> "Artist":
        if isinstance(data, str):
            return cls(name=data)

        return cls(
            name=_artist_name(data),
            mbid=_optional_str(data.get("mbid")),
            url=_optional_str(data.get("url")),
            images=_images(data),
            playcount=_count(data.get("playcount")),
            listeners=_count(data.get("listeners")),
        )


class ArtistInfo(LastFmModel):
    """Full artist profile from ``artist.getInfo``."""

    name: str
    mbid: str | None = None
    url: str | None = None
    images: tuple[Image, ...] = ()
    playcount: int = 0
    listeners: int = 0
    tags: tuple[Tag, ...] = ()
    bio: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "ArtistInfo":
        return cls(
            name=data.get("name"),
            mbid=_optional_str(data.get("mbid")),
            url=_optional_str(data.get("url")),
            images=_images(data),
            playcount=_count(get_nested(data, "stats", "playcount")),
            listeners=_count(get_nested(data, "stats", "listeners")),
            tags=_tags(data, "tags", "tag"),
            bio=_optional_str(get_nested(data, "bio", "content")),
        )


class Album(LastFmModel):
    """Album as listed in search results and charts."""

    name: str
    artist: str | None = None
    mbid: str | None = None
    url: str | None = None
    images: tuple[Image, ...] = ()
    playcount: int = 0

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Album":
        return cls(
            name=data.get("name") or data.get("#text"),
            artist=_artist_name(data.get("artist")),
            mbid=_optional_str(data.get("mbid")),
            url=_optional_str(data.get("url")),
            images=_images(data),
            playcount=_count(data.get("playcount")),
        )


class Song(LastFmModel):
    """Track as listed in search results, charts and scrobble history."""

    name: str
    artist: str | None = None
    album: str | None = None
    mbid: str | None = None
    url: str | None = None
    duration: int | None = None
    playcount: int = 0
    listeners: int = 0
    images: tuple[Image, ...] = ()
    date: datetime | None = None
    now_playing: bool = False

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Song":
        return cls(
            name=data.get("name"),
            artist=_artist_name(data.get("artist")),
            album=_artist_name(data.get("album")),
            mbid=_optional_str(data.get("mbid")),
            url=_optional_str(data.get("url")),
            duration=_optional_int(data.get("duration")),
            playcount=_count(data.get("playcount")),
            listeners=_count(data.get("listeners")),
            images=_images(data),
            date=_timestamp(get_nested(data, "date", "uts")),
            now_playing=get_nested(data, "@attr", "nowplaying") == "true",
        )


class AlbumInfo(LastFmModel):
    """Full album record from ``album.getInfo``."""

    name: str
    artist: str | None = None
    mbid: str | None = None
    url: str | None = None
    images: tuple[Image, ...] = ()
    listeners: int = 0
    playcount: int = 0
    tracks: tuple[Song, ...] = ()
    tags: tuple[Tag, ...] = ()
    wiki: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "AlbumInfo":
        raw_tracks = get_nested(data, "tracks", "track")

        return cls(
            name=data.get("name"),
            artist=_artist_name(data.get("artist")),
            mbid=_optional_str(data.get("mbid")),
            url=_optional_str(data.get("url")),
            images=_images(data),
            listeners=_count(data.get("listeners")),
            playcount=_count(data.get("playcount")),
            tracks=tuple(map_list(Song.from_api, raw_tracks)) if raw_tracks else (),
            tags=_tags(data, "tags", "tag"),
            wiki=_optional_str(get_nested(data, "wiki", "content")),
        )


class SongInfo(LastFmModel):
    """Full track record from ``track.getInfo``."""

    name: str
    artist: Artist | None = None
    album: Album | None = None
    mbid: str | None = None
    url: str | None = None
    duration: int | None = None
    listeners: int = 0
    playcount: int = 0
    user_playcount: int | None = None
    loved: bool = False
    top_tags: tuple[Tag, ...] = ()
    wiki: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "SongInfo":
        artist = data.get("artist")
        album = data.get("album")

        return cls(
            name=data.get("name"),
            artist=Artist.from_api(artist) if artist else None,
            album=Album.from_api({"name": album.get("title"), **album}) if album else None,
            mbid=_optional_str(data.get("mbid")),
            url=_optional_str(data.get("url")),
            duration=_optional_int(data.get("duration")),
            listeners=_count(data.get("listeners")),
            playcount=_count(data.get("playcount")),
            user_playcount=_optional_int(data.get("userplaycount")),
            loved=str(data.get("userloved", "0")) == "1",
            top_tags=_tags(data, "toptags", "tag"),
            wiki=_optional_str(get_nested(data, "wiki", "content")),
        )


class User(LastFmModel):
    """Last.fm user profile."""

    name: str
    real_name: str | None = None
    country: str | None = None
    age: int | None = None
    gender: str | None = None
    playcount: int = 0
    url: str | None = None
    images: tuple[Image, ...] = ()
    registered: datetime | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "User":
        registered = data.get("registered")
        if isinstance(registered, dict):
            registered = registered.get("unixtime") or registered.get("#text")

        return cls(
            name=data.get("name"),
            real_name=_optional_str(data.get("realname")),
            country=_optional_str(data.get("country")),
            age=_optional_int(data.get("age")),
            gender=_optional_str(data.get("gender")),
            playcount=_count(data.get("playcount")),
            url=_optional_str(data.get("url")),
            images=_images(data),
            registered=_timestamp(registered),
        )


class Chart(LastFmModel):
    """Weekly chart date range."""

    start: datetime
    end: datetime

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Chart":
        return cls(
            start=_timestamp(data.get("from")),
            end=_timestamp(data.get("to")),
        )


class NowPlaying(LastFmModel):
    """Track a user has started listening to."""

    artist: str
    track: str
    album: str | None = None
    album_artist: str | None = None
    track_number: int | None = None
    duration: int | None = None
    mbid: str | None = None
    context: str | None = None

    def to_query(self) -> dict[str, Any]:
        """Build the ``track.updateNowPlaying`` parameters."""
        return {
            "artist": self.artist,
            "track": self.track,
            "album": self.album,
            "albumArtist": self.album_artist,
            "trackNumber": self.track_number,
            "duration": self.duration,
            "mbid": self.mbid,
            "context": self.context,
        }


class VenueAddress(LastFmModel):
    """Postal address of a venue."""

    street: str | None = None
    postal_code: str | None = None
    city: str | None = None
    country: str | None = None


class Venue(LastFmModel):
    """Concert venue."""

    name: str
    url: str | None = None
    website: str | None = None
    address: VenueAddress | None = None


class Event(LastFmModel):
    """Concert or festival listed on a page."""

    id: int
    name: str
    event_date: datetime
    url: str
    venue: Venue | None = None


class EventInfo(LastFmModel):
    """Full event details from an event page."""

    id: int
    name: str
    description: str | None = None
    artists: tuple[Artist, ...] = ()
    venue: Venue | None = None
    start_date: datetime | None = None
    url: str
    image: Image | None = None
    tickets: tuple[str, ...] = ()
