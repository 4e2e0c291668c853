"""marimo docs MCP tool implementations."""

from . import get_element_api, search_api

__all__ = [
    "get_element_api",
    "search_api",
]
