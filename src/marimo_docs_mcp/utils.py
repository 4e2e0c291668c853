"""Argument types for marimo docs MCP tools."""

from typing import Annotated

from pydantic import Field


# Element names are matched exactly, so no stripping or case folding here.
# Empty values are rejected by the dispatcher, which reports InvalidParams.
ElementName = Annotated[
    str,
    Field(
        ...,
        description=(
            'The UI element to get documentation for (e.g., "slider"). '
            "Exact, case-sensitive name such as 'dropdown', 'accordion', 'image'."
        ),
    ),
]

ApiSearchQuery = Annotated[
    str,
    Field(
        ...,
        description=(
            "Search query. Matched case-insensitively as a substring against every "
            "element's extracted documentation. Examples: 'slider', 'on_change'."
        ),
    ),
]
