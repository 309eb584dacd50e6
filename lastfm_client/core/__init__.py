"""Core modules for the Last.fm client."""

from lastfm_client.core.config import Settings, get_settings
from lastfm_client.core.session import Session

__all__ = [
    "Settings",
    "get_settings",
    "Session",
]
