"""Tests for AbstractCrawler field extraction."""

from datetime import datetime
from unittest.mock import MagicMock

import pytest

from lastfm_client.core.exceptions import CrawlError
from lastfm_client.core.models import Image, Venue, VenueAddress
from lastfm_client.crawler.base import AbstractCrawler
from lastfm_client.crawler.dom import NodeSet

EVENT_HTML = """
<ul>
  <li class="events-list-item">
    <time datetime="2016-03-12T20:00:00">12 Mar</time>
    <div class="events-list-item-event--title"><a href="/event/4123+Cher+at+Arena">Cher Live</a></div>
    <div class="events-list-item-venue">
      <div class="events-list-item-venue--title">Arena</div>
      <div class="events-list-item-venue--city">Berlin</div>
      <div class="events-list-item-venue--country">Germany</div>
    </div>
  </li>
</ul>
"""


@pytest.fixture
def crawler(mock_connection: MagicMock) -> AbstractCrawler:
    return AbstractCrawler(mock_connection)


def node(html: str, selector: str) -> NodeSet:
    return NodeSet.from_html(html).select(selector)


class TestCrawl:
    """Tests for crawl."""

    def test_empty_page_returns_none(self, crawler: AbstractCrawler, mock_connection: MagicMock) -> None:
        assert crawler.crawl("https://www.last.fm/event/1") is None
        mock_connection.get_page_body.assert_called_once_with("https://www.last.fm/event/1", {})

    def test_parses_page(self, crawler: AbstractCrawler, mock_connection: MagicMock) -> None:
        mock_connection.get_page_body.return_value = "<h1>Title</h1>"

        doc = crawler.crawl("https://www.last.fm/events", {"page": 2})

        assert doc is not None
        assert doc.select("h1").text() == "Title"
        mock_connection.get_page_body.assert_called_once_with("https://www.last.fm/events", {"page": 2})


class TestParseUrl:
    """Tests for parse_url and parse_image."""

    def test_relative_url_made_absolute(self, crawler: AbstractCrawler) -> None:
        assert crawler.parse_url(node('<a href="/events/1">x</a>', "a")) == "http://last.fm/events/1"

    def test_absolute_url_unchanged(self, crawler: AbstractCrawler) -> None:
        assert crawler.parse_url(node('<a href="https://x.org/a">x</a>', "a")) == "https://x.org/a"

    def test_empty_node_set(self, crawler: AbstractCrawler) -> None:
        assert crawler.parse_url(node("<p>x</p>", "a")) is None

    def test_missing_attribute(self, crawler: AbstractCrawler) -> None:
        assert crawler.parse_url(node("<a>x</a>", "a")) is None

    def test_parse_image(self, crawler: AbstractCrawler) -> None:
        image = crawler.parse_image(node('<img src="/i/cher.png">', "img"))

        assert image == Image(url="http://last.fm/i/cher.png")

    def test_parse_image_without_src(self, crawler: AbstractCrawler) -> None:
        assert crawler.parse_image(node("<img>", "img")) is None


class TestParseString:
    """Tests for parse_string and parse_date."""

    def test_empty_node_set(self, crawler: AbstractCrawler) -> None:
        assert crawler.parse_string(node("<p>x</p>", "span")) is None

    def test_plain_text_trimmed(self, crawler: AbstractCrawler) -> None:
        assert crawler.parse_string(node("<span>  Cher <b>Live</b>\n</span>", "span")) == "Cher Live"

    def test_prefers_content_attribute(self, crawler: AbstractCrawler) -> None:
        html = '<meta itemprop="name" content="  Arena <i>Berlin</i> ">'

        assert crawler.parse_string(node(html, "meta")) == "Arena Berlin"

    def test_multiline(self, crawler: AbstractCrawler) -> None:
        """Test paragraphs and line breaks become newlines."""
        html = '<div class="d"><p class="x">First &amp; one</p><p>Second<br/>line</p></div>'

        assert crawler.parse_string(node(html, ".d"), multiline=True) == "First & one\nSecond\nline"

    def test_multiline_keeps_escaped_brackets(self, crawler: AbstractCrawler) -> None:
        """Test escaped angle brackets survive as text."""
        html = '<div id="d"><p>I &lt;3 this &gt; that</p><p>b</p></div>'

        assert crawler.parse_string(node(html, "#d"), multiline=True) == "I <3 this > that\nb"

    def test_plain_text_keeps_escaped_brackets(self, crawler: AbstractCrawler) -> None:
        assert crawler.parse_string(node("<span>a &lt;b&gt; c</span>", "span")) == "a <b> c"

    def test_parse_date(self, crawler: AbstractCrawler) -> None:
        html = '<time itemprop="startDate" content="2016-03-12T20:00:00">Sat</time>'

        assert crawler.parse_date(node(html, "time")) == datetime(2016, 3, 12, 20, 0)

    def test_parse_date_absent(self, crawler: AbstractCrawler) -> None:
        assert crawler.parse_date(node("<p></p>", "time")) is None

    def test_parse_date_invalid(self, crawler: AbstractCrawler) -> None:
        with pytest.raises(CrawlError):
            crawler.parse_date(node("<time>someday</time>", "time"))


class TestParseVenue:
    """Tests for parse_venue."""

    def test_venue(self, crawler: AbstractCrawler) -> None:
        venue = crawler.parse_venue(node(EVENT_HTML, ".events-list-item-venue"))

        assert venue == Venue(name="Arena", address=VenueAddress(city="Berlin", country="Germany"))

    def test_no_title_means_no_venue(self, crawler: AbstractCrawler) -> None:
        html = '<div class="events-list-item-venue"><div class="events-list-item-venue--city">Berlin</div></div>'

        assert crawler.parse_venue(node(html, ".events-list-item-venue")) is None


class TestParseEvent:
    """Tests for parse_event."""

    def test_event(self, crawler: AbstractCrawler) -> None:
        event = crawler.parse_event(node(EVENT_HTML, ".events-list-item"))

        assert event.id == 4123
        assert event.name == "Cher Live"
        assert event.url == "http://last.fm/event/4123+Cher+at+Arena"
        assert event.event_date == datetime(2016, 3, 12, 20, 0)
        assert event.venue is not None
        assert event.venue.name == "Arena"

    def test_supplied_datetime_wins(self, crawler: AbstractCrawler) -> None:
        day = datetime(2020, 1, 1)

        assert crawler.parse_event(node(EVENT_HTML, ".events-list-item"), day).event_date == day

    def test_link_without_href(self, crawler: AbstractCrawler) -> None:
        html = '<li class="e"><div class="events-list-item-event--title"><a>Cher</a></div></li>'

        with pytest.raises(CrawlError):
            crawler.parse_event(node(html, ".e"), datetime(2020, 1, 1))

    def test_non_numeric_id(self, crawler: AbstractCrawler) -> None:
        html = '<li class="e"><div class="events-list-item-event--title"><a href="/e/abc">Cher</a></div></li>'

        with pytest.raises(CrawlError):
            crawler.parse_event(node(html, ".e"), datetime(2020, 1, 1))

    def test_zero_id(self, crawler: AbstractCrawler) -> None:
        html = '<li class="e"><div class="events-list-item-event--title"><a href="/event/0">Cher</a></div></li>'

        with pytest.raises(CrawlError):
            crawler.parse_event(node(html, ".e"), datetime(2020, 1, 1))

    def test_missing_date(self, crawler: AbstractCrawler) -> None:
        html = '<li class="e"><div class="events-list-item-event--title"><a href="/event/1">Cher</a></div></li>'

        with pytest.raises(CrawlError) as exc_info:
            crawler.parse_event(node(html, ".e"))

        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_invalid_date(self, crawler: AbstractCrawler) -> None:
        html = (
            '<li class="e"><time datetime="soon"></time>'
            '<div class="events-list-item-event--title"><a href="/event/1">Cher</a></div></li>'
        )

        with pytest.raises(CrawlError):
            crawler.parse_event(node(html, ".e"))

    def test_event_without_venue(self, crawler: AbstractCrawler) -> None:
        html = '<li class="e"><div class="events-list-item-event--title"><a href="/event/7">Cher</a></div></li>'

        event = crawler.parse_event(node(html, ".e"), datetime(2020, 1, 1))

        assert event.venue is None
