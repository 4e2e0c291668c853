"""Data models for extracted marimo documentation.

``ApiDoc`` is the uniform record returned for every documentation page. It is
a pydantic model so tool payloads and the search text form share one
serialization.
"""

from dataclasses import dataclass, field
import json
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Parameter(BaseModel):
    """One row of a documentation parameter table."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    required: bool = False


class ApiDoc(BaseModel):
    """Structured documentation for one element page.

    Attributes:
        title: Text of the first ``h1`` in the content region
        description: Non-empty paragraphs joined by a blank line
        parameters: Rows of the first parameter table, in document order
        examples: Code block texts, in document order

    Empty values mean the page did not contain the structure, not an error.
    """

    model_config = ConfigDict(frozen=True)

    title: str = ""
    description: str = ""
    parameters: List[Parameter] = Field(default_factory=list)
    examples: List[str] = Field(default_factory=list)

    def to_search_text(self) -> str:
        """Compact JSON form of the record, used for substring search.

        Example:
            >>> ApiDoc(title="Slider").to_search_text()
            '{"title":"Slider","description":"","parameters":[],"examples":[]}'
        """
        return json.dumps(self.model_dump(), separators=(",", ":"), ensure_ascii=False)


@dataclass
class SkippedElement:
    element: str
    reason: str


@dataclass
class SearchOutcome:
    """Result of a full search pass over the endpoint table.

    Attributes:
        query: The query as given by the caller
        matches: Documents whose search text contains the query
        scanned: Number of elements attempted
        skipped: Elements whose fetch failed, with the failure reason
    """

    query: str
    matches: List[ApiDoc] = field(default_factory=list)
    scanned: int = 0
    skipped: List[SkippedElement] = field(default_factory=list)
