"""Base crawler with field extraction helpers for Last.fm pages."""

import logging
import re
from datetime import datetime
from html import unescape
from typing import Any

from pydantic import TypeAdapter, ValidationError

from lastfm_client.client.connection import Connection
from lastfm_client.core.exceptions import CrawlError
from lastfm_client.core.models import Event, Image, Venue, VenueAddress
from lastfm_client.crawler.dom import NodeSet

logger = logging.getLogger(__name__)

_datetime_adapter = TypeAdapter(datetime)

_TAG_RE = re.compile(r"<[^>]*>")
_EVENT_ID_RE = re.compile(r".*/(\d+)")


def parse_datetime(value: str | None) -> datetime:
    """Parse an ISO 8601 or unix timestamp string.

    Raises:
        ValueError: If the value is missing or not a date.
    """
    if value is None:
        raise ValueError("No date given")

    try:
        return _datetime_adapter.validate_python(value.strip())
    except ValidationError as e:
        raise ValueError(f"Invalid date: {value!r}") from e


def strip_tags(content: str) -> str:
    return _TAG_RE.sub("", content)


class AbstractCrawler:
    """Fetches Last.fm pages and turns DOM fragments into models."""

    URL_PREFIX = "http://last.fm"

    NEWLINE = "\n"

    def __init__(self, connection: Connection):
        self.connection = connection

    def crawl(self, url: str, params: dict[str, Any] | None = None) -> NodeSet | None:
        """Fetch and parse a page; None if the page could not be fetched."""
        content = self.connection.get_page_body(url, params or {})

        if not content:
            logger.debug(f"No content for {url}")
            return None

        return NodeSet.from_html(content)

    def parse_event(self, node: NodeSet, event_date: datetime | None = None) -> Event:
        """Parse an entry of an event listing.

        Args:
            node: The ``.events-list-item`` element.
            event_date: Date taken from the surrounding listing; read from the
                entry's ``time`` element when omitted.

        Raises:
            CrawlError: If the event link, id or date cannot be read.
        """
        event_node = node.select(".events-list-item-event--title a")

        url = self.parse_url(event_node)

        if url is None:
            raise CrawlError("Error parsing event id.")

        match = _EVENT_ID_RE.match(url)
        event_id = int(match.group(1)) if match else 0

        if event_id == 0:
            raise CrawlError("Error parsing event id.")

        if event_date is None:
            try:
                event_date = parse_datetime(node.select("time").attr("datetime"))
            except ValueError as e:
                raise CrawlError("Error reading event date") from e

        venue = self.parse_venue(node.select(".events-list-item-venue"))

        return Event(
            id=event_id,
            name=self.parse_string(event_node) or "",
            event_date=event_date,
            url=url,
            venue=venue,
        )

    def parse_venue(self, node: NodeSet) -> Venue | None:
        """Parse the venue block of a listing entry; some events have none."""
        title = self.parse_string(node.select(".events-list-item-venue--title"))

        if title is None:
            return None

        city = self.parse_string(node.select(".events-list-item-venue--city"))
        country = self.parse_string(node.select(".events-list-item-venue--country"))

        return Venue(
            name=title,
            address=VenueAddress(city=city, country=country),
        )

    def parse_url(self, node: NodeSet, attr: str = "href") -> str | None:
        """Read a link attribute, making site-relative URLs absolute."""
        if node.count() == 0:
            return None

        url = node.attr(attr)

        if not url:
            return None

        if url.startswith("/"):
            return self.URL_PREFIX + url

        return url

    def parse_image(self, node: NodeSet) -> Image | None:
        src = self.parse_url(node, "src")

        if not src:
            return None

        return Image(url=src)

    def parse_string(self, node: NodeSet, multiline: bool = False) -> str | None:
        """Read the text of a node, preferring a ``content`` attribute.

        With ``multiline`` paragraphs and line breaks become newlines.
        """
        if node.count() == 0:
            return None

        content = node.attr("content")

        if content is None and multiline:
            content = node.html()
            content = re.sub(r"<p[^>]*?>", "", content)
            content = content.replace("</p>", self.NEWLINE)
            content = re.sub(r"<br\s?/?>", self.NEWLINE, content, flags=re.IGNORECASE)
            # Unescape last so escaped brackets are not taken for tags.
            return unescape(strip_tags(content)).strip()

        if content is None:
            return node.text().strip()

        return strip_tags(content).strip()

    def parse_date(self, node: NodeSet) -> datetime | None:
        """Parse a date node.

        Raises:
            CrawlError: If the node holds text that is not a date.
        """
        content = self.parse_string(node)

        if content is None:
            return None

        try:
            return parse_datetime(content)
        except ValueError as e:
            raise CrawlError(f"Error reading date {content!r}") from e

    def parse_pages(self, node: NodeSet) -> int:
        """Read the highest page number of a paginated listing, at least 1."""
        pages = 1

        for page_node in node.select(".pagination .pagination-page"):
            text = self.parse_string(page_node)
            if text and text.isdigit():
                pages = max(pages, int(text))

        return pages
