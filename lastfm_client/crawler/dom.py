"""Minimal DOM access for crawled pages."""

from collections.abc import Iterator

from bs4 import BeautifulSoup, Tag


class NodeSet:
    """An ordered set of HTML elements selected from a page.

    Reads (``attr``, ``text``, ``html``) look at the first element only, so a
    selector that matches nothing behaves like a missing value.
    """

    def __init__(self, nodes: list[Tag]):
        self._nodes = nodes

    @classmethod
    def from_html(cls, html: str) -> "NodeSet":
        """Parse a document, returning a set holding its root."""
        soup = BeautifulSoup(html, "html.parser")
        return cls([soup])

    def select(self, selector: str) -> "NodeSet":
        """Select descendants of every element, in document order, without duplicates."""
        found: list[Tag] = []
        seen: set[int] = set()

        for node in self._nodes:
            for match in node.select(selector):
                if id(match) not in seen:
                    seen.add(id(match))
                    found.append(match)

        return NodeSet(found)

    def first(self) -> "NodeSet":
        return NodeSet(self._nodes[:1])

    def attr(self, name: str) -> str | None:
        if not self._nodes:
            return None

        value = self._nodes[0].get(name)

        # Multi-valued attributes like class come back as lists.
        if isinstance(value, list):
            return " ".join(value)
        return value

    def text(self) -> str:
        if not self._nodes:
            return ""
        return self._nodes[0].get_text()

    def html(self) -> str:
        """Inner HTML of the first element."""
        if not self._nodes:
            return ""
        return self._nodes[0].decode_contents()

    def count(self) -> int:
        return len(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator["NodeSet"]:
        for node in self._nodes:
            yield NodeSet([node])

    def __repr__(self) -> str:
        return f"NodeSet(count={len(self._nodes)})"
