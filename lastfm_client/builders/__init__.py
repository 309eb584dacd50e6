"""Fluent parameter builders for Last.fm methods."""

from lastfm_client.builders.album import AlbumInfoBuilder, AlbumTagsBuilder, AlbumTopTagsBuilder
from lastfm_client.builders.artist import (
    ArtistInfoBuilder,
    ArtistSimilarBuilder,
    ArtistTagsBuilder,
    ArtistTopAlbumsBuilder,
    ArtistTopTagsBuilder,
    ArtistTopTracksBuilder,
)
from lastfm_client.builders.scrobble import ScrobbleBuilder
from lastfm_client.builders.track import (
    TrackInfoBuilder,
    TrackSimilarBuilder,
    TrackTagsBuilder,
    TrackTopTagsBuilder,
)

__all__ = [
    "AlbumInfoBuilder",
    "AlbumTagsBuilder",
    "AlbumTopTagsBuilder",
    "ArtistInfoBuilder",
    "ArtistSimilarBuilder",
    "ArtistTagsBuilder",
    "ArtistTopAlbumsBuilder",
    "ArtistTopTagsBuilder",
    "ArtistTopTracksBuilder",
    "ScrobbleBuilder",
    "TrackInfoBuilder",
    "TrackSimilarBuilder",
    "TrackTagsBuilder",
    "TrackTopTagsBuilder",
]
