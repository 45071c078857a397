"""Main entry point for the bookmark search MCP server."""
import asyncio

from bookmark_search.server import main


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
