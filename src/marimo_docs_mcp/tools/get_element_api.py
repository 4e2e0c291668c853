"""Element Documentation Tool - Fetch one marimo element's API page."""

from fastmcp import FastMCP

from marimo_docs_mcp.dispatcher import dispatch
from marimo_docs_mcp.formatting import render_payload
from marimo_docs_mcp.utils import ElementName


def register(mcp: FastMCP) -> None:
    """Register get_element_api tool with the MCP server."""

    @mcp.tool()
    async def get_element_api(element: ElementName) -> str:
        """Get API documentation for a specific UI element.

        Returns title, description, parameter table and code examples
        extracted from the element's page on docs.marimo.io.

        When to use:
        - You know the element name (e.g., "slider", "dropdown", "accordion")
        - An unknown name returns the available elements grouped by section

        Related tools:
        - search_api: Find elements whose docs mention a keyword
        """
        return render_payload(await dispatch("get_element_api", {"element": element}))
