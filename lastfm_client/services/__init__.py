"""Last.fm API services, one per resource family."""

from lastfm_client.services.album import AlbumService
from lastfm_client.services.artist import ArtistService
from lastfm_client.services.auth import AuthService
from lastfm_client.services.chart import ChartService
from lastfm_client.services.geo import GeoService
from lastfm_client.services.library import LibraryService
from lastfm_client.services.tag import TagService
from lastfm_client.services.track import TrackService
from lastfm_client.services.user import UserService

__all__ = [
    "AlbumService",
    "ArtistService",
    "AuthService",
    "ChartService",
    "GeoService",
    "LibraryService",
    "TagService",
    "TrackService",
    "UserService",
]
