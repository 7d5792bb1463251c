"""Configuration for the bookmark search MCP server."""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class HighlightConfig:
    """Configuration for rendering highlighted bookmark text."""
    mark_open: str = "<mark>"
    mark_close: str = "</mark>"
    escape_html: bool = True  # Escape bookmark text before inserting markers
    max_results: int = 20  # Max bookmarks returned by highlight_bookmarks

    @classmethod
    def from_env(cls) -> "HighlightConfig":
        """Create config from environment variables."""
        return cls(
            mark_open=os.environ.get("BOOKMARKS_MARK_OPEN", "<mark>"),
            mark_close=os.environ.get("BOOKMARKS_MARK_CLOSE", "</mark>"),
            escape_html=_env_bool("BOOKMARKS_ESCAPE_HTML", True),
            max_results=int(os.environ.get("BOOKMARKS_MAX_RESULTS", "20")),
        )


@dataclass
class Config:
    """Main configuration for the bookmark search MCP server."""
    highlight: HighlightConfig = field(default_factory=HighlightConfig)
    chrome_profile: str = "Default"  # Chrome profile name
    bookmarks_path: Optional[Path] = None  # None = Chrome default location

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment variables."""
        path_str = os.environ.get("BOOKMARKS_FILE")
        bookmarks_path = Path(path_str) if path_str else None

        return cls(
            highlight=HighlightConfig.from_env(),
            chrome_profile=os.environ.get("BOOKMARKS_CHROME_PROFILE", "Default"),
            bookmarks_path=bookmarks_path,
        )


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global config instance.

    Returns:
        Config loaded from environment
    """
    global _config

    if _config is None:
        _config = Config.from_env()

    return _config


def reset_config() -> None:
    """Drop the global config so the next get_config() re-reads the environment."""
    global _config
    _config = None
