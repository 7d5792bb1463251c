"""MCP server exposing search term extraction and highlighting for bookmarks."""
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from bookmark_search.bookmarks_reader import read_chrome_bookmarks
from bookmark_search.config import get_config
from bookmark_search.highlight import has_match, highlight_segments, render_marked
from bookmark_search.search_terms import extract_search_terms, format_search_help


SERVER_NAME = "bookmark-search"

# Bookmark fields rendered with highlights, in display order
HIGHLIGHT_FIELDS = ("title", "url", "folder")

# Global state
_bookmarks_cache: Optional[list] = None


def load_bookmarks(bookmarks_path: Optional[Path] = None) -> list:
    """Load bookmarks, using cache if available.

    Args:
        bookmarks_path: Optional path to bookmarks file (defaults to config)

    Returns:
        List of bookmarks, empty if the file is missing or malformed
    """
    global _bookmarks_cache

    if _bookmarks_cache is None:
        config = get_config()
        path = bookmarks_path or config.bookmarks_path
        try:
            _bookmarks_cache = read_chrome_bookmarks(path, profile=config.chrome_profile)
            print(f"Loaded {len(_bookmarks_cache)} bookmarks", file=sys.stderr)
        except FileNotFoundError as e:
            print(f"Warning: Could not find bookmarks file: {e}", file=sys.stderr)
            _bookmarks_cache = []
        except (OSError, ValueError) as e:
            print(f"Error loading bookmarks: {e}", file=sys.stderr)
            _bookmarks_cache = []

    return _bookmarks_cache


def clear_bookmarks_cache() -> None:
    """Forget loaded bookmarks so the next call re-reads the file."""
    global _bookmarks_cache
    _bookmarks_cache = None


def highlight_bookmark(bookmark: Dict[str, str], terms: List[str]) -> Optional[Dict[str, str]]:
    """Render a bookmark's display fields with highlighted terms.

    Args:
        bookmark: Bookmark with 'title', 'url' and 'folder'
        terms: Terms to highlight

    Returns:
        Bookmark plus ``<field>_marked`` entries, or None if nothing matched
    """
    highlight = get_config().highlight
    result = {"id": bookmark.get("id", "")}
    matched = False

    for name in HIGHLIGHT_FIELDS:
        text = bookmark.get(name, "")
        segments = highlight_segments(text, terms)
        matched = matched or has_match(segments)
        result[name] = text
        result[f"{name}_marked"] = render_marked(
            segments,
            open_tag=highlight.mark_open,
            close_tag=highlight.mark_close,
            escape=highlight.escape_html,
        )

    return result if matched else None


def _text(text: str) -> List[TextContent]:
    return [TextContent(type="text", text=text)]


async def extract_search_terms_tool(query: str) -> List[TextContent]:
    """Tool handler for extract_search_terms."""
    return _text(json.dumps(extract_search_terms(query), ensure_ascii=False))


async def highlight_text_tool(text: str, query: str) -> List[TextContent]:
    """Tool handler for highlight_text."""
    segments = highlight_segments(text, extract_search_terms(query))
    return _text(json.dumps([s.to_dict() for s in segments], ensure_ascii=False, indent=2))


async def highlight_bookmarks_tool(query: str) -> List[TextContent]:
    """Tool handler for highlight_bookmarks.

    Args:
        query: Search query string

    Returns:
        List of TextContent with highlighted bookmarks as JSON
    """
    bookmarks = load_bookmarks()

    if not bookmarks:
        return _text("No bookmarks available. Please ensure Chrome bookmarks file exists.")

    terms = extract_search_terms(query)
    if not terms:
        return _text(f"No search terms found in query: {query}")

    limit = get_config().highlight.max_results
    results = []
    for bookmark in bookmarks:
        if len(results) >= limit:
            break
        highlighted = highlight_bookmark(bookmark, terms)
        if highlighted is not None:
            results.append(highlighted)

    if not results:
        return _text(f"No bookmarks found matching query: {query}")

    return _text(json.dumps(results, ensure_ascii=False, indent=2))


async def search_syntax_help_tool() -> List[TextContent]:
    """Tool handler for search_syntax_help."""
    return _text(format_search_help())


def _query_schema(description: str) -> Dict[str, Any]:
    return {"type": "string", "description": description}


def create_server() -> Server:
    """Create and configure the MCP server.

    Returns:
        Configured Server instance
    """
    server = Server(SERVER_NAME)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """List available tools."""
        return [
            Tool(
                name="extract_search_terms",
                description="Extract the literal terms of a bookmark search query. Plain words are kept, field:value tokens contribute their value.",
                inputSchema={
                    "type": "object",
                    "properties": {"query": _query_schema("Search query, e.g. 'folder:\"My Projects\" react'")},
                    "required": ["query"],
                },
            ),
            Tool(
                name="highlight_text",
                description="Split a text into matching and non-matching segments for the terms of a search query.",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "text": {"type": "string", "description": "Text to highlight"},
                        "query": _query_schema("Search query whose terms are highlighted"),
                    },
                    "required": ["text", "query"],
                },
            ),
            Tool(
                name="highlight_bookmarks",
                description="Return bookmarks whose title, URL or folder contain the terms of a search query, with matches wrapped in highlight markers.",
                inputSchema={
                    "type": "object",
                    "properties": {"query": _query_schema("Search query to highlight in bookmarks")},
                    "required": ["query"],
                },
            ),
            Tool(
                name="search_syntax_help",
                description="Describe the field:value search syntax.",
                inputSchema={"type": "object", "properties": {}},
            ),
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: Any) -> list[TextContent]:
        """Handle tool calls."""
        arguments = arguments or {}
        if name == "extract_search_terms":
            return await extract_search_terms_tool(arguments.get("query", ""))
        elif name == "highlight_text":
            return await highlight_text_tool(arguments.get("text", ""), arguments.get("query", ""))
        elif name == "highlight_bookmarks":
            query = arguments.get("query", "")
            if not query:
                return _text("Error: 'query' parameter is required")
            return await highlight_bookmarks_tool(query)
        elif name == "search_syntax_help":
            return await search_syntax_help_tool()
        else:
            raise ValueError(f"Unknown tool: {name}")

    return server


async def main():
    """Main entry point for the MCP server."""
    server = create_server()

    async with stdio_server() as (read_stream, write_stream):
        initialization_options = server.create_initialization_options()
        await server.run(read_stream, write_stream, initialization_options)
