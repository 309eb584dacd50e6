"""Shared behaviour for query builders."""

from typing import Any, Self


class QueryBuilder:
    """Accumulates query parameters for a single API call.

    Instances come from the classmethod factories of subclasses, which fix
    how the entity is identified. Setters return the builder for chaining.
    """

    def __init__(self) -> None:
        self._query: dict[str, Any] = {}

    def get_query(self) -> dict[str, Any]:
        """Return the accumulated parameters."""
        return self._query

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._query!r})"


class AutocorrectMixin:
    """Adds the ``autocorrect`` flag shared by most read methods."""

    _query: dict[str, Any]

    def autocorrect(self, autocorrect: bool) -> Self:
        """Let Last.fm correct misspelled names."""
        self._query["autocorrect"] = 1 if autocorrect else 0
        return self


class PagingMixin:
    """Adds ``limit`` and ``page`` setters."""

    _query: dict[str, Any]

    def limit(self, limit: int) -> Self:
        self._query["limit"] = int(limit)
        return self

    def page(self, page: int) -> Self:
        self._query["page"] = int(page)
        return self
