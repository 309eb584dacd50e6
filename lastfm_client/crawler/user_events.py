"""Crawler for the events a user attended."""

from lastfm_client.core.models import Event
from lastfm_client.crawler.base import AbstractCrawler


class UserEventCrawler(AbstractCrawler):
    """Reads a user's past events, which are only listed per year on the website."""

    BASE_URL = "https://www.last.fm/user/"

    def get_events(self, username: str, year: int, page: int = 1) -> list[Event] | None:
        """Get one page of events a user attended in a year.

        Returns:
            The events, or None if the page could not be fetched.
        """
        node = self.crawl(self._year_url(username, year), {"page": page})

        if node is None:
            return None

        return [self.parse_event(event_node) for event_node in node.select(".events-list-item")]

    def get_years(self, username: str) -> list[int]:
        """Get the years with attended events, newest first."""
        node = self.crawl(f"{self.BASE_URL}{username}/events")

        if node is None:
            return []

        years: set[int] = set()

        for link in node.select(".content-top-lower-row .secondary-nav-item-link"):
            text = self.parse_string(link)
            if text and text.isdigit():
                years.add(int(text))

        return sorted(years, reverse=True)

    def get_year_pages(self, username: str, year: int) -> int:
        """Get the number of event pages for a year, 0 if none could be fetched."""
        node = self.crawl(self._year_url(username, year))

        if node is None:
            return 0

        return self.parse_pages(node)

    def _year_url(self, username: str, year: int) -> str:
        return f"{self.BASE_URL}{username}/events/{year}"
