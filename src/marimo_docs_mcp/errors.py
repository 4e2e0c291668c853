"""Error taxonomy for documentation lookups.

Each error carries a stable ``code`` (used as the envelope error code) and
the protocol-level ``kind`` it is reported as. Callers branch on these, not
on message text.
"""

from __future__ import annotations

from typing import Any


class DocsError(Exception):
    """Base class for failures surfaced to tool callers."""

    code = "docs_error"
    kind = "InternalError"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidParams(DocsError):
    """Missing or malformed caller input."""

    code = "invalid_params"
    kind = "InvalidParams"


class UnknownElement(InvalidParams):
    """Element name is not in the endpoint table."""

    code = "unknown_element"

    def __init__(self, element: str, available: dict[str, list[str]]) -> None:
        listing = "\n".join(f"{section}: {', '.join(names)}" for section, names in available.items())
        super().__init__(
            f"Unknown element: {element}\n\nAvailable elements by section:\n{listing}",
            {"element": element, "available_elements": available},
        )
        self.element = element
        self.available = available


class MethodNotFound(DocsError):
    """Operation name is not one of the exposed tools."""

    code = "method_not_found"
    kind = "MethodNotFound"


class InternalError(DocsError):
    code = "internal_error"
    kind = "InternalError"


class FetchFailure(InternalError):
    """Request, response or extraction failure while fetching one element."""

    def __init__(self, element: str, reason: str) -> None:
        super().__init__(
            f"Failed to fetch documentation for {element}",
            {"element": element, "reason": reason},
        )
        self.element = element
        self.reason = reason
