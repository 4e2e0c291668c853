"""marimo documentation retrieval: fetch, extract, cache and search.

Usage:
    from marimo_docs_mcp.docs import get_docs_fetcher, search_docs

    fetcher = await get_docs_fetcher()
    doc = await fetcher.fetch("slider")
    outcome = await search_docs(fetcher, "slider")
"""

from marimo_docs_mcp.docs.cache import DocCache
from marimo_docs_mcp.docs.extractor import extract_api_doc, parse_parameters
from marimo_docs_mcp.docs.fetcher import (
    DocsFetcher,
    build_url,
    close_docs_fetcher,
    get_docs_fetcher,
)
from marimo_docs_mcp.docs.models import ApiDoc, Parameter, SearchOutcome, SkippedElement
from marimo_docs_mcp.docs.search import search_docs

__all__ = [
    "ApiDoc",
    "DocCache",
    "DocsFetcher",
    "Parameter",
    "SearchOutcome",
    "SkippedElement",
    "build_url",
    "close_docs_fetcher",
    "extract_api_doc",
    "get_docs_fetcher",
    "parse_parameters",
    "search_docs",
]
