"""Shared plumbing for Last.fm services."""

from collections.abc import Callable, Sequence
from datetime import datetime
from typing import Any, TypeVar

from lastfm_client.client.api_client import ApiClient
from lastfm_client.core.exceptions import InvalidArgumentError
from lastfm_client.utils.api_helper import get_nested, map_list

T = TypeVar("T")

MAX_TAGS = 10


def validate_tags(tags: Sequence[Any]) -> None:
    """Check a tag list before it is sent to an ``addTags`` method.

    Raises:
        InvalidArgumentError: If no tags, more than 10 tags, or a non-string
            tag is given.
    """
    if len(tags) == 0:
        raise InvalidArgumentError("No tags given")

    if len(tags) > MAX_TAGS:
        raise InvalidArgumentError(f"A maximum of {MAX_TAGS} tags is allowed")

    for tag in tags:
        if not isinstance(tag, str):
            raise InvalidArgumentError("Invalid tag given")


def to_timestamp(value: datetime | None) -> int | None:
    """Convert an optional datetime to a unix timestamp."""
    if value is None:
        return None
    return int(value.timestamp())


class AbstractService:
    """Base class holding the API client."""

    def __init__(self, client: ApiClient):
        self.client = client

    @staticmethod
    def _map_response(response: dict[str, Any], factory: Callable[[Any], T], *path: str) -> list[T]:
        """Map the collection at ``path``; an absent collection is empty."""
        data = get_nested(response, *path)

        if data is None:
            return []

        return map_list(factory, data)
