"""MCP server exposing bookmark search and highlighting."""
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from bookmark_search.bookmarks_reader import read_chrome_bookmarks
from bookmark_search.config import get_config
from bookmark_search.highlight import highlight, render_segments
from bookmark_search.models import Bookmark
from bookmark_search.search import FuzzySearchEngine, SearchEngine


# Global state
_bookmarks_cache: Optional[list] = None
_search_engine: SearchEngine = FuzzySearchEngine()


def load_bookmarks(bookmarks_path: Optional[Path] = None) -> list:
    """Load bookmarks, using cache if available.

    Args:
        bookmarks_path: Optional path to bookmarks file (defaults to config)

    Returns:
        List of bookmarks
    """
    global _bookmarks_cache

    if _bookmarks_cache is None:
        config = get_config()
        path = bookmarks_path or config.bookmarks_path
        try:
            raw = read_chrome_bookmarks(path, profile=config.chrome_profile)
            _bookmarks_cache = [Bookmark.from_dict(item) for item in raw]
        except FileNotFoundError as e:
            print(f"Warning: Could not find bookmarks file: {e}", file=sys.stderr)
            _bookmarks_cache = []
        except (OSError, json.JSONDecodeError) as e:
            print(f"Error loading bookmarks: {e}", file=sys.stderr)
            _bookmarks_cache = []

    return _bookmarks_cache


def format_result(bookmark: Bookmark, query: str) -> Dict[str, Any]:
    """Serialize a bookmark for output, adding its title with matches marked."""
    config = get_config().search
    segments = highlight(bookmark.title, query)
    return {
        **bookmark.to_dict(),
        "title_highlighted": render_segments(
            segments, config.highlight_open, config.highlight_close
        ),
    }


async def search_bookmarks_tool(
    query: str,
    limit: Optional[int] = None,
    tags: Optional[List[str]] = None,
) -> list[TextContent]:
    """Tool handler for search_bookmarks.

    Args:
        query: Search query string (empty lists bookmarks in stored order)
        limit: Maximum number of results (defaults to config)
        tags: Only return bookmarks in all of these folders

    Returns:
        List of TextContent with bookmark results
    """
    if limit is not None and (not isinstance(limit, int) or isinstance(limit, bool)):
        return [TextContent(
            type="text",
            text="Error: 'limit' parameter must be an integer"
        )]

    if tags is not None and (
        not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags)
    ):
        return [TextContent(
            type="text",
            text="Error: 'tags' parameter must be a list of strings"
        )]

    bookmarks = load_bookmarks()

    if not bookmarks:
        return [TextContent(
            type="text",
            text="No bookmarks available. Please ensure Chrome bookmarks file exists."
        )]

    if limit is None:
        limit = get_config().search.result_limit

    results = _search_engine.search(query, bookmarks, limit=limit, tags_filter=tags)

    if not results:
        return [TextContent(
            type="text",
            text=f"No bookmarks found matching query: {query}"
        )]

    formatted = [format_result(bookmark, query) for bookmark in results]

    return [TextContent(
        type="text",
        text=json.dumps(formatted, indent=2, ensure_ascii=False)
    )]


async def highlight_text_tool(text: str, query: str) -> list[TextContent]:
    """Tool handler for highlight_text.

    Args:
        text: Text to highlight
        query: Search query string

    Returns:
        List of TextContent with the segment list as JSON
    """
    segments = highlight(text, query)
    return [TextContent(
        type="text",
        text=json.dumps([s.to_dict() for s in segments], indent=2, ensure_ascii=False)
    )]


def create_server() -> Server:
    """Create and configure the MCP server.

    Returns:
        Configured Server instance
    """
    server = Server("bookmark-search")

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """List available tools."""
        return [
            Tool(
                name="search_bookmarks",
                description=(
                    "Search bookmarks by title, URL and folder tags with fuzzy matching. "
                    "Returns ranked bookmarks with the matched part of the title marked."
                ),
                inputSchema={
                    "type": "object",
                    "properties": {
                        "query": {
                            "type": "string",
                            "description": "Search query to find relevant bookmarks"
                        },
                        "limit": {
                            "type": "integer",
                            "description": "Maximum number of results"
                        },
                        "tags": {
                            "type": "array",
                            "items": {"type": "string"},
                            "description": "Only return bookmarks in all of these folders"
                        }
                    },
                    "required": ["query"]
                }
            ),
            Tool(
                name="highlight_text",
                description="Split a text into highlighted and plain segments for a search query.",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "text": {
                            "type": "string",
                            "description": "Text to highlight"
                        },
                        "query": {
                            "type": "string",
                            "description": "Search query"
                        }
                    },
                    "required": ["text", "query"]
                }
            ),
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: Any) -> list[TextContent]:
        """Handle tool calls."""
        arguments = arguments or {}
        if name == "search_bookmarks":
            query = arguments.get("query")
            if not isinstance(query, str):
                return [TextContent(
                    type="text",
                    text="Error: 'query' parameter is required"
                )]
            return await search_bookmarks_tool(
                query,
                limit=arguments.get("limit"),
                tags=arguments.get("tags"),
            )
        elif name == "highlight_text":
            text = arguments.get("text")
            query = arguments.get("query")
            if not isinstance(text, str) or not isinstance(query, str):
                return [TextContent(
                    type="text",
                    text="Error: 'text' and 'query' parameters are required"
                )]
            return await highlight_text_tool(text, query)
        else:
            raise ValueError(f"Unknown tool: {name}")

    return server


async def main():
    """Main entry point for the MCP server."""
    server = create_server()

    async with stdio_server() as (read_stream, write_stream):
        initialization_options = server.create_initialization_options()
        await server.run(read_stream, write_stream, initialization_options)
