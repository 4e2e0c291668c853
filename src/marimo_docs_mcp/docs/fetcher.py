"""HTTP fetch path: element name -> documentation page -> ApiDoc."""

import asyncio
import logging
import re
from typing import Optional

import httpx

from marimo_docs_mcp.config import get_docs_config
from marimo_docs_mcp.docs.cache import DocCache
from marimo_docs_mcp.docs.extractor import extract_api_doc
from marimo_docs_mcp.docs.models import ApiDoc
from marimo_docs_mcp.endpoints import DEFAULT_ENDPOINT_TABLE, EndpointTable
from marimo_docs_mcp.errors import FetchFailure, UnknownElement

logger = logging.getLogger("marimo-docs-mcp.fetcher")

# The docs origin rejects default client signatures, so requests look like a browser.
REQUEST_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "User-Agent": "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36",
    "Accept-Language": "en-US,en;q=0.5",
}

_DUPLICATE_SLASHES = re.compile(r"([^:]/)/+")


def build_url(base_url: str, path: str) -> str:
    """Join base URL and path, collapsing repeated slashes outside ``://``.

    Example:
        >>> build_url("https://docs.marimo.io/api/", "/inputs/slider/")
        'https://docs.marimo.io/api/inputs/slider/'
    """
    return _DUPLICATE_SLASHES.sub(r"\1", f"{base_url}{path}")


def _summarize_fetch_error(exc: Exception) -> str:
    if isinstance(exc, httpx.TimeoutException):
        return "request timed out"
    if isinstance(exc, httpx.HTTPStatusError):
        return f"HTTP {exc.response.status_code} from documentation site"
    if isinstance(exc, httpx.ConnectError):
        return "cannot connect to documentation site"
    text = str(exc).strip()
    if not text:
        return type(exc).__name__
    return text.splitlines()[0]


class DocsFetcher:
    """Resolves element names and fetches their documentation pages.

    One GET per uncached element, no retries. Every failure after name
    resolution is re-raised as ``FetchFailure``.
    """

    def __init__(
        self,
        base_url: str,
        request_timeout_s: float,
        cache: DocCache,
        table: EndpointTable = DEFAULT_ENDPOINT_TABLE,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url
        self.request_timeout_s = request_timeout_s
        self.cache = cache
        self.table = table
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def url_for(self, element: str) -> str:
        path = self.table.resolve(element)
        if path is None:
            raise UnknownElement(element, self.table.sections())
        return build_url(self.base_url, path)

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                headers=REQUEST_HEADERS,
                timeout=self.request_timeout_s,
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    async def aclose(self) -> None:
        client = self._client
        self._client = None
        if client is not None:
            await client.aclose()

    async def fetch(self, element: str) -> ApiDoc:
        url = self.url_for(element)

        cached = self.cache.get(element)
        if cached is not None:
            logger.debug("Cache hit for %s", element)
            return cached

        logger.info("Fetching documentation for %s from %s", element, url)
        try:
            response = await self._get_client().get(url)
            response.raise_for_status()
        except Exception as exc:
            logger.warning("Error fetching documentation for %s: %s", element, exc)
            raise FetchFailure(element, _summarize_fetch_error(exc)) from exc

        if not response.text:
            logger.warning("Empty response for %s from %s", element, url)
            raise FetchFailure(element, "empty response from documentation site")

        try:
            doc = extract_api_doc(response.text)
        except Exception as exc:
            logger.warning("Error parsing documentation for %s: %s", element, exc)
            raise FetchFailure(element, f"could not parse page: {_summarize_fetch_error(exc)}") from exc

        self.cache.put(element, doc)
        return doc


_fetcher: DocsFetcher | None = None
_fetcher_lock = asyncio.Lock()


async def get_docs_fetcher() -> DocsFetcher:
    """Return the global fetcher instance with lazy initialization."""
    global _fetcher
    async with _fetcher_lock:
        if _fetcher is None:
            config = get_docs_config()
            _fetcher = DocsFetcher(
                base_url=config.base_url,
                request_timeout_s=config.request_timeout_s,
                cache=DocCache(config.cache_ttl_s),
            )
        return _fetcher


async def close_docs_fetcher() -> None:
    """Close the global fetcher's HTTP client."""
    global _fetcher
    async with _fetcher_lock:
        if _fetcher is None:
            return
        fetcher = _fetcher
        _fetcher = None
    await fetcher.aclose()
