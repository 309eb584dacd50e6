"""Tests for Session."""

import pytest
from pydantic import ValidationError

from lastfm_client.core.session import Session


class TestSession:
    """Tests for Session."""

    def test_get_name_and_key(self) -> None:
        session = Session(name="Username", key="key")

        assert session.name == "Username"
        assert session.key == "key"
        assert session.subscriber is None

    def test_subscriber(self) -> None:
        assert Session(name="Username", key="key", subscriber=32).subscriber == 32

    def test_is_immutable(self) -> None:
        session = Session(name="Username", key="key")

        with pytest.raises(ValidationError):
            session.key = "other"

    def test_from_api(self) -> None:
        session = Session.from_api({"name": "rj", "key": "d580d57f32848f5dcf574d1ce18d78b2", "subscriber": "0"})

        assert session.name == "rj"
        assert session.key == "d580d57f32848f5dcf574d1ce18d78b2"
        assert session.subscriber == 0

    def test_from_api_requires_key(self) -> None:
        with pytest.raises(ValidationError):
            Session.from_api({"name": "rj"})
