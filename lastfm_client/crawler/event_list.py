"""Crawler for the event listing around a location."""

from datetime import datetime

from lastfm_client.core.exceptions import CrawlError
from lastfm_client.core.models import Event
from lastfm_client.crawler.base import AbstractCrawler, parse_datetime
from lastfm_client.crawler.dom import NodeSet


class EventListCrawler(AbstractCrawler):
    """Lists upcoming events near a coordinate, grouped by day."""

    BASE_URL = "https://www.last.fm/events"

    def get_events(self, lat: float, lng: float, radius: int = 100, page: int = 1) -> list[Event] | None:
        """Get one page of events near a location.

        Args:
            lat: Latitude
            lng: Longitude
            radius: Search radius in km
            page: Page number

        Returns:
            The events, or None if the page could not be fetched.
        """
        node = self._crawl_list(lat, lng, radius, page)

        if node is None:
            return None

        events: list[Event] = []

        for day_node in node.select(".page-content section"):
            heading = day_node.select(".group-heading time")

            if heading.count() == 0:
                continue

            try:
                day = parse_datetime(heading.attr("datetime"))
            except ValueError as e:
                raise CrawlError("Error reading event date") from e

            events.extend(self._parse_day(day_node, day))

        return events

    def get_pages(self, lat: float, lng: float, radius: int = 100) -> int:
        """Get the number of listing pages for a location."""
        node = self._crawl_list(lat, lng, radius, 1)

        if node is None:
            return 0

        return self.parse_pages(node)

    def _crawl_list(self, lat: float, lng: float, radius: int, page: int) -> NodeSet | None:
        return self.crawl(
            self.BASE_URL,
            {
                "location_0": lat,
                "location_1": lng,
                "radius": radius,
                "page": page,
            },
        )

    def _parse_day(self, day_node: NodeSet, day: datetime) -> list[Event]:
        return [self.parse_event(event_node, day) for event_node in day_node.select(".events-list-item")]
