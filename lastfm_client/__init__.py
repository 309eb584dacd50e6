"""Last.fm API client."""

from lastfm_client.client.api_client import ApiClient
from lastfm_client.client.connection import Connection, HttpConnection
from lastfm_client.core.exceptions import (
    ApiError,
    CrawlError,
    InvalidArgumentError,
    LastFmError,
    NotFoundError,
)
from lastfm_client.core.session import Session

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ApiClient",
    "Connection",
    "HttpConnection",
    "Session",
    "LastFmError",
    "InvalidArgumentError",
    "ApiError",
    "NotFoundError",
    "CrawlError",
]
