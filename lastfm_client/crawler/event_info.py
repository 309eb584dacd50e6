"""Crawler for single event pages."""

from lastfm_client.core.exceptions import CrawlError
from lastfm_client.core.models import Artist, EventInfo, Venue, VenueAddress
from lastfm_client.crawler.base import AbstractCrawler
from lastfm_client.crawler.dom import NodeSet


class EventInfoCrawler(AbstractCrawler):
    """Reads line-up, venue and tickets of an event, which the API no longer serves."""

    BASE_URL = "https://www.last.fm/event/"

    def get_event_info(self, event_id: int) -> EventInfo | None:
        """Get all information about an event.

        Returns:
            The event, or None if the page could not be fetched.

        Raises:
            CrawlError: If the page has no event title.
        """
        node = self.crawl(f"{self.BASE_URL}{event_id}")

        if node is None:
            return None

        name = self.parse_string(node.select("h1.header-title"))

        if name is None:
            raise CrawlError(f"Error parsing event {event_id}")

        return EventInfo(
            id=event_id,
            name=name,
            description=self.parse_string(node.select('.event-description [itemprop="description"]'), multiline=True),
            artists=tuple(self._parse_artists(node)),
            venue=self._parse_venue_details(node.select(".event-detail-address")),
            start_date=self.parse_date(node.select('[itemprop="startDate"]')),
            url=f"{self.BASE_URL}{event_id}",
            image=self.parse_image(node.select(".event-poster-preview img")),
            tickets=tuple(self._parse_tickets(node)),
        )

    def _parse_artists(self, node: NodeSet) -> list[Artist]:
        artists = []

        for artist_node in node.select(".grid-items-section .grid-items-item"):
            name = self.parse_string(artist_node.select(".link-block-target"))

            if name is None:
                continue

            image = self.parse_image(artist_node.select(".grid-items-cover-image-image img"))

            artists.append(
                Artist(
                    name=name,
                    url=self.parse_url(artist_node.select(".link-block-target")),
                    images=(image,) if image else (),
                )
            )

        return artists

    def _parse_venue_details(self, node: NodeSet) -> Venue | None:
        name = self.parse_string(node.select('[itemprop="name"]'))

        if name is None:
            return None

        return Venue(
            name=name,
            url=self.parse_url(node.select('[itemprop="url"]')),
            website=self.parse_url(node.select(".event-detail-web a")),
            address=VenueAddress(
                street=self.parse_string(node.select('[itemprop="streetAddress"]')),
                postal_code=self.parse_string(node.select('[itemprop="postalCode"]')),
                city=self.parse_string(node.select('[itemprop="addressLocality"]')),
                country=self.parse_string(node.select('[itemprop="addressCountry"]')),
            ),
        )

    def _parse_tickets(self, node: NodeSet) -> list[str]:
        tickets = []

        for ticket_node in node.select(".event-ticket-list a"):
            url = self.parse_url(ticket_node)
            if url:
                tickets.append(url)

        return tickets
