"""Substring search over every documented element."""

import logging

from marimo_docs_mcp.docs.fetcher import DocsFetcher
from marimo_docs_mcp.docs.models import SearchOutcome, SkippedElement
from marimo_docs_mcp.errors import DocsError

logger = logging.getLogger("marimo-docs-mcp.search")


async def search_docs(fetcher: DocsFetcher, query: str) -> SearchOutcome:
    """Fetch every element in table order and keep those mentioning ``query``.

    Matching is a case-insensitive substring test against the record's
    compact JSON form. Fetches run one at a time; an element that fails is
    logged, recorded in ``skipped`` and the scan continues.
    """
    needle = query.lower()
    outcome = SearchOutcome(query=query)

    for element in fetcher.table.names():
        outcome.scanned += 1
        try:
            doc = await fetcher.fetch(element)
        except DocsError as exc:
            reason = exc.details.get("reason") or exc.message
            logger.warning("Error searching %s: %s", element, reason)
            outcome.skipped.append(SkippedElement(element=element, reason=str(reason)))
            continue

        if needle in doc.to_search_text().lower():
            outcome.matches.append(doc)

    logger.info(
        "Search %r matched %d of %d elements (%d skipped)",
        query,
        len(outcome.matches),
        outcome.scanned,
        len(outcome.skipped),
    )
    return outcome
