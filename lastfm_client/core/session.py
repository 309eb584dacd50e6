"""Authenticated Last.fm session."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class Session(BaseModel):
    """Credential attached to signed calls.

    Only ``key`` is sent to the API; ``name`` and ``subscriber`` are kept for
    the caller's convenience.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    key: str
    subscriber: int | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Session":
        """Build a session from an ``auth.getSession`` response fragment."""
        subscriber = data.get("subscriber")

        return cls(
            name=data.get("name"),
            key=data.get("key"),
            subscriber=int(subscriber) if subscriber not in (None, "") else None,
        )
