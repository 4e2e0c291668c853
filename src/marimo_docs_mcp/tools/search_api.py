"""Documentation Search Tool - Substring search across marimo element docs."""

from fastmcp import FastMCP

from marimo_docs_mcp.dispatcher import dispatch
from marimo_docs_mcp.formatting import render_payload
from marimo_docs_mcp.utils import ApiSearchQuery


def register(mcp: FastMCP) -> None:
    """Register search_api tool with the MCP server."""

    @mcp.tool()
    async def search_api(query: ApiSearchQuery) -> str:
        """Search API documentation.

        Fetches every known element page in turn and returns the records that
        contain the query (case-insensitive). Elements whose page could not be
        fetched are listed under summary.skipped.

        This scans the whole documentation site sequentially, so the first
        call is slow; later calls are served from the in-memory cache.

        Related tools:
        - get_element_api: Full documentation for one known element
        """
        return render_payload(await dispatch("search_api", {"query": query}))
