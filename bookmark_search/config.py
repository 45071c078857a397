"""Configuration for the bookmark search MCP server."""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass
class SearchConfig:
    """Configuration for search results and highlighting."""
    result_limit: int = 10  # Max bookmarks returned per search

    # Markers wrapped around highlighted text in rendered titles
    highlight_open: str = "**"
    highlight_close: str = "**"

    @classmethod
    def from_env(cls) -> "SearchConfig":
        """Create config from environment variables."""
        return cls(
            result_limit=int(os.environ.get("BOOKMARKS_RESULT_LIMIT", "10")),
            highlight_open=os.environ.get("BOOKMARKS_HIGHLIGHT_OPEN", "**"),
            highlight_close=os.environ.get("BOOKMARKS_HIGHLIGHT_CLOSE", "**"),
        )


@dataclass
class Config:
    """Main configuration for the bookmark search MCP server."""
    search: SearchConfig = field(default_factory=SearchConfig.from_env)
    bookmarks_path: Optional[Path] = None  # None = Chrome default location
    chrome_profile: str = "Default"  # Chrome profile name

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment variables."""
        path_str = os.environ.get("BOOKMARKS_FILE")
        bookmarks_path = Path(path_str) if path_str else None

        return cls(
            search=SearchConfig.from_env(),
            bookmarks_path=bookmarks_path,
            chrome_profile=os.environ.get("BOOKMARKS_CHROME_PROFILE", "Default"),
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
