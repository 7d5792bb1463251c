"""Main entry point for the bookmark search MCP server."""
import asyncio

from bookmark_search.server import main as serve


def main() -> None:
    asyncio.run(serve())


if __name__ == "__main__":
    main()
