"""Payload rendering and error envelope helpers for MCP tool outputs."""

from __future__ import annotations

import json
from typing import Any

from marimo_docs_mcp.contracts import build_error
from marimo_docs_mcp.docs.models import SearchOutcome
from marimo_docs_mcp.errors import DocsError


def render_payload(payload: dict[str, Any]) -> str:
    """Pretty-print an envelope as the tool's single text content item."""
    return json.dumps(payload, indent=2, ensure_ascii=False)


def build_docs_error(exc: DocsError) -> dict[str, Any]:
    """Build a unified error envelope from a documentation error."""
    details: dict[str, Any] = {"kind": exc.kind}
    details.update(exc.details)
    return build_error(exc.code, exc.message, details)


def search_summary(outcome: SearchOutcome) -> dict[str, Any]:
    return {
        "query": outcome.query,
        "count": len(outcome.matches),
        "scanned": outcome.scanned,
        "skipped": [{"element": s.element, "reason": s.reason} for s in outcome.skipped],
    }
