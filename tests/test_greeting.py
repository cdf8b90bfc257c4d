"""Tests for the greeting page."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from bounded.config import GreetingConfig
from bounded.errors import GreetingError
from bounded.greeting import (
    GreetingPage,
    ScopedConfigReader,
    ScopedConfigStore,
    build_greeting_page,
)

MESSAGE_PATH = "greeting/settings/message"


class FailingReader:
    """Reader whose backend is unavailable."""

    def get_value(self, path: str, scope: str) -> str | None:
        raise ConnectionError("config backend down")


@pytest.fixture
def store() -> ScopedConfigStore:
    """Provide a store with store and default scopes."""
    return ScopedConfigStore(
        {
            "store": {MESSAGE_PATH: "Welcome to the store"},
            "default": {MESSAGE_PATH: "Hello", "other/path": "x"},
        }
    )


class TestScopedConfigStore:
    """Test the in-memory store."""

    def test_scope_value(self, store: ScopedConfigStore) -> None:
        """Test lookup in the requested scope."""
        assert store.get_value(MESSAGE_PATH, "store") == "Welcome to the store"

    def test_default_fallback(self, store: ScopedConfigStore) -> None:
        """Test fallback to the default scope."""
        assert store.get_value(MESSAGE_PATH, "website") == "Hello"
        assert store.get_value("other/path", "store") == "x"

    def test_missing(self, store: ScopedConfigStore) -> None:
        """Test that missing paths return None."""
        assert store.get_value("missing", "store") is None

    def test_set_value(self) -> None:
        """Test storing values."""
        store = ScopedConfigStore()
        store.set_value(MESSAGE_PATH, "Hi")
        store.set_value(MESSAGE_PATH, "Ahoj", scope="store")
        assert store.get_value(MESSAGE_PATH, "store") == "Ahoj"
        assert store.get_value(MESSAGE_PATH, "website") == "Hi"

    def test_copies_input(self) -> None:
        """Test that the store does not share the caller's mapping."""
        values = {"store": {MESSAGE_PATH: "Hi"}}
        store = ScopedConfigStore(values)
        values["store"][MESSAGE_PATH] = "changed"
        assert store.get_value(MESSAGE_PATH, "store") == "Hi"

    def test_is_reader(self, store: ScopedConfigStore) -> None:
        """Test that the store satisfies the reader protocol."""
        assert isinstance(store, ScopedConfigReader)


class TestGreetingPage:
    """Test the page model."""

    def test_render(self) -> None:
        """Test rendering title and regions."""
        page = GreetingPage(title="Greeting Message", regions={"greeting.block": "Hi"})
        assert page.render("{title}: {greeting.block}") == "Greeting Message: Hi"

    def test_frozen(self) -> None:
        """Test that pages are immutable."""
        page = GreetingPage(title="t")
        with pytest.raises(ValidationError):
            page.title = "other"  # type: ignore[misc]


class TestBuildGreetingPage:
    """Test building the greeting page."""

    def test_defaults(self, store: ScopedConfigStore) -> None:
        """Test the page built with default configuration."""
        page = build_greeting_page(store)
        assert page.title == "Greeting Message"
        assert page.regions == {"greeting.block": "Welcome to the store"}

    def test_custom_config(self, store: ScopedConfigStore) -> None:
        """Test a custom scope, title and block."""
        config = GreetingConfig(scope="website", title="Hi there", block="main")
        page = build_greeting_page(store, config=config)
        assert page.title == "Hi there"
        assert page.regions == {"main": "Hello"}

    def test_logs_message(
        self, store: ScopedConfigStore, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that the loaded message is logged."""
        with caplog.at_level(logging.INFO, logger="bounded"):
            build_greeting_page(store)
        assert "Greeting message loaded: Welcome to the store" in caplog.text

    def test_uses_given_logger(
        self, store: ScopedConfigStore, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that an explicit logger receives the messages."""
        logger = logging.getLogger("shop.greeting")
        with caplog.at_level(logging.INFO, logger="shop.greeting"):
            build_greeting_page(store, logger)
        assert [r.name for r in caplog.records] == ["shop.greeting"]

    def test_missing_message(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that a missing message is an error."""
        with caplog.at_level(logging.ERROR, logger="bounded"):
            with pytest.raises(GreetingError, match="Unable to load greeting message"):
                build_greeting_page(ScopedConfigStore())
        assert "Error loading greeting message" in caplog.text

    def test_reader_failure(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that reader errors are logged and chained."""
        with caplog.at_level(logging.ERROR, logger="bounded"):
            with pytest.raises(GreetingError) as exc_info:
                build_greeting_page(FailingReader())
        assert isinstance(exc_info.value.__cause__, ConnectionError)
        assert "config backend down" in caplog.text
