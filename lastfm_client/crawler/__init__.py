"""Crawlers for Last.fm data that is only published on the website."""

from lastfm_client.crawler.base import AbstractCrawler
from lastfm_client.crawler.dom import NodeSet
from lastfm_client.crawler.event_info import EventInfoCrawler
from lastfm_client.crawler.event_list import EventListCrawler
from lastfm_client.crawler.user_events import UserEventCrawler

__all__ = [
    "AbstractCrawler",
    "NodeSet",
    "EventInfoCrawler",
    "EventListCrawler",
    "UserEventCrawler",
]
