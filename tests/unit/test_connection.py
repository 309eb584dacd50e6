"""Tests for the HTTP connection."""

from urllib.parse import parse_qs

import httpx
import pytest

from lastfm_client.client.connection import HttpConnection
from lastfm_client.core.config import Settings
from lastfm_client.core.exceptions import ApiError


@pytest.fixture
def settings() -> Settings:
    return Settings(lastfm_api_url="https://api.test/2.0/", user_agent="test-agent")


def make_connection(settings: Settings, handler) -> HttpConnection:
    """Create a connection whose requests are answered by ``handler``."""
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return HttpConnection(settings, client=client)


class TestCall:
    """Tests for call."""

    def test_get_sends_query_with_json_format(self, settings: Settings) -> None:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"album": {"name": "Believe"}})

        connection = make_connection(settings, handler)
        result = connection.call("album.getInfo", {"method": "album.getInfo", "album": "Believe"})

        assert result == {"album": {"name": "Believe"}}
        assert requests[0].method == "GET"
        assert requests[0].url.params["format"] == "json"
        assert requests[0].url.params["album"] == "Believe"

    def test_post_sends_form_body(self, settings: Settings) -> None:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={})

        connection = make_connection(settings, handler)
        connection.call("track.love", {"artist": "Cher", "track": "Believe"}, "POST")

        body = parse_qs(requests[0].content.decode())
        assert requests[0].method == "POST"
        assert body["artist"] == ["Cher"]
        assert body["format"] == ["json"]

    def test_error_body_raises_api_error_with_code(self, settings: Settings) -> None:
        """Test Last.fm error payloads carry their numeric code."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json={"error": 6, "message": "Album not found"})

        connection = make_connection(settings, handler)

        with pytest.raises(ApiError) as exc_info:
            connection.call("album.getInfo", {})

        assert exc_info.value.code == 6
        assert "Album not found" in str(exc_info.value)

    def test_error_body_with_non_numeric_code(self, settings: Settings) -> None:
        """Test an unreadable error code still raises ApiError."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, json={"error": "oops", "message": "Backend failure"})

        connection = make_connection(settings, handler)

        with pytest.raises(ApiError) as exc_info:
            connection.call("album.getInfo", {})

        assert exc_info.value.code == 500
        assert "Backend failure" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_http_error_without_json(self, settings: Settings) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503, text="Service unavailable")

        connection = make_connection(settings, handler)

        with pytest.raises(ApiError) as exc_info:
            connection.call("album.getInfo", {})

        assert exc_info.value.code == 503

    def test_transport_error(self, settings: Settings) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("boom")

        connection = make_connection(settings, handler)

        with pytest.raises(ApiError) as exc_info:
            connection.call("album.getInfo", {})

        assert exc_info.value.code == 0
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


class TestGetPageBody:
    """Tests for get_page_body."""

    def test_returns_body(self, settings: Settings) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.params["page"] == "2"
            return httpx.Response(200, text="<html></html>")

        connection = make_connection(settings, handler)

        assert connection.get_page_body("https://www.last.fm/events", {"page": 2}) == "<html></html>"

    def test_non_200_returns_empty(self, settings: Settings) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, text="missing")

        connection = make_connection(settings, handler)

        assert connection.get_page_body("https://www.last.fm/event/1") == ""

    def test_transport_error_returns_empty(self, settings: Settings) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("boom")

        connection = make_connection(settings, handler)

        assert connection.get_page_body("https://www.last.fm/event/1") == ""


class TestLifecycle:
    """Tests for client creation and closing."""

    def test_creates_client_lazily(self, settings: Settings) -> None:
        connection = HttpConnection(settings)
        client = connection._get_client()

        assert client.headers["User-Agent"] == "test-agent"
        assert connection._get_client() is client
        connection.close()

    def test_context_manager_closes(self, settings: Settings) -> None:
        with HttpConnection(settings) as connection:
            connection._get_client()

        assert connection._client is None
