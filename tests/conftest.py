"""Shared fixtures: an in-memory docs site served through httpx.MockTransport."""

import httpx
import pytest

from marimo_docs_mcp.docs import DocCache, DocsFetcher
from marimo_docs_mcp.endpoints import EndpointTable

BASE_URL = "https://x/api"

CONNECT_ERROR = object()
READ_TIMEOUT = object()


class FakeDocsSite:
    """Maps absolute URLs to page HTML, a status code, CONNECT_ERROR or READ_TIMEOUT."""

    def __init__(self) -> None:
        self.pages: dict = {}
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        page = self.pages.get(str(request.url))
        if page is None:
            return httpx.Response(404, text="not found")
        if page is CONNECT_ERROR:
            raise httpx.ConnectError("Connection refused", request=request)
        if page is READ_TIMEOUT:
            raise httpx.ReadTimeout("Read timed out", request=request)
        if isinstance(page, int):
            return httpx.Response(page, text="error")
        return httpx.Response(200, text=page)

    @property
    def urls(self) -> list[str]:
        return [str(request.url) for request in self.requests]


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture()
def docs_site() -> FakeDocsSite:
    return FakeDocsSite()


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
async def make_fetcher(docs_site):
    """Factory for fetchers wired to ``docs_site``; caching is off unless ttl_s > 0."""
    created: list[DocsFetcher] = []

    def factory(endpoints, base_url=BASE_URL, ttl_s=0, clock=None) -> DocsFetcher:
        cache = DocCache(ttl_s) if clock is None else DocCache(ttl_s, clock=clock)
        fetcher = DocsFetcher(
            base_url=base_url,
            request_timeout_s=5.0,
            cache=cache,
            table=EndpointTable(endpoints),
            transport=httpx.MockTransport(docs_site.handler),
        )
        created.append(fetcher)
        return fetcher

    yield factory

    for fetcher in created:
        await fetcher.aclose()
