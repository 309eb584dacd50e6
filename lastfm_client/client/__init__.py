"""HTTP client layer for the Last.fm API."""

from lastfm_client.client.api_client import NOT_FOUND_CODE, ApiClient
from lastfm_client.client.connection import Connection, HttpConnection
from lastfm_client.client.params import encode_utf8, filter_null
from lastfm_client.client.signing import sign_params

__all__ = [
    "ApiClient",
    "NOT_FOUND_CODE",
    "Connection",
    "HttpConnection",
    "encode_utf8",
    "filter_null",
    "sign_params",
]
