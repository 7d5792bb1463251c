"""Tests for config module."""
import pytest

from bookmark_search.config import Config, HighlightConfig, get_config, reset_config


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


class TestConfig:
    def test_default_values(self):
        config = Config()
        assert config.highlight.mark_open == "<mark>"
        assert config.highlight.mark_close == "</mark>"
        assert config.highlight.escape_html is True
        assert config.highlight.max_results == 20
        assert config.bookmarks_path is None
        assert config.chrome_profile == "Default"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("BOOKMARKS_MARK_OPEN", "[[")
        monkeypatch.setenv("BOOKMARKS_MARK_CLOSE", "]]")
        monkeypatch.setenv("BOOKMARKS_MAX_RESULTS", "5")
        monkeypatch.setenv("BOOKMARKS_FILE", "/tmp/Bookmarks")

        config = Config.from_env()
        assert config.highlight.mark_open == "[["
        assert config.highlight.mark_close == "]]"
        assert config.highlight.max_results == 5
        assert str(config.bookmarks_path) == "/tmp/Bookmarks"

    @pytest.mark.parametrize("value,expected", [
        ("0", False), ("false", False), ("no", False),
        ("1", True), ("TRUE", True), ("yes", True),
    ])
    def test_escape_html_from_env(self, monkeypatch, value, expected):
        monkeypatch.setenv("BOOKMARKS_ESCAPE_HTML", value)
        assert HighlightConfig.from_env().escape_html is expected

    def test_chrome_profile_from_env(self, monkeypatch):
        monkeypatch.setenv("BOOKMARKS_CHROME_PROFILE", "Profile 1")
        config = Config.from_env()
        assert config.chrome_profile == "Profile 1"

    def test_bookmarks_path_default(self, monkeypatch):
        monkeypatch.delenv("BOOKMARKS_FILE", raising=False)
        assert Config.from_env().bookmarks_path is None

    def test_get_config_is_cached(self, monkeypatch):
        monkeypatch.setenv("BOOKMARKS_MAX_RESULTS", "3")
        first = get_config()
        monkeypatch.setenv("BOOKMARKS_MAX_RESULTS", "7")
        assert get_config() is first
        assert get_config().highlight.max_results == 3

    def test_reset_config_rereads_env(self, monkeypatch):
        monkeypatch.setenv("BOOKMARKS_MAX_RESULTS", "3")
        get_config()
        reset_config()
        monkeypatch.setenv("BOOKMARKS_MAX_RESULTS", "7")
        assert get_config().highlight.max_results == 7
