"""Utility modules for the Last.fm client."""

from lastfm_client.utils.api_helper import get_nested, map_list

__all__ = ["map_list", "get_nested"]
