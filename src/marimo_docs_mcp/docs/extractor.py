"""HTML -> ApiDoc extraction for marimo documentation pages.

marimo docs are built with mkdocs-material: page content lives under
``.md-content`` and mkdocstrings renders member tables under
``.doc-children``. Extraction is best-effort; missing structures degrade to
empty values and never raise.
"""

from bs4 import BeautifulSoup
from bs4.element import Tag

from marimo_docs_mcp.docs.models import ApiDoc, Parameter

CONTENT_SELECTOR = ".md-content"
PARAMETERS_SELECTOR = f"{CONTENT_SELECTOR} .doc-children"
REQUIRED_MARKER = "required"


def _texts(soup: BeautifulSoup, selector: str) -> list[str]:
    texts = (node.get_text().strip() for node in soup.select(selector))
    return [text for text in texts if text]


def parse_parameters(section: Tag) -> list[Parameter]:
    """Parse every table row under ``section`` into a Parameter.

    Rows with fewer than two cells are skipped. A parameter is required only
    when a third cell mentions "required" (case-sensitive).
    """
    parameters: list[Parameter] = []
    for row in section.find_all("tr"):
        cells = row.find_all("td")
        if len(cells) < 2:
            continue
        parameters.append(
            Parameter(
                name=cells[0].get_text().strip(),
                description=cells[1].get_text().strip(),
                required=len(cells) > 2 and REQUIRED_MARKER in cells[2].get_text(),
            )
        )
    return parameters


def extract_api_doc(html: str) -> ApiDoc:
    """Extract title, description, parameters and examples from a page."""
    soup = BeautifulSoup(html, "html.parser")

    heading = soup.select_one(f"{CONTENT_SELECTOR} h1")
    title = heading.get_text().strip() if heading is not None else ""

    description = "\n\n".join(_texts(soup, f"{CONTENT_SELECTOR} p"))

    doc_children = soup.select_one(PARAMETERS_SELECTOR)
    parameters = parse_parameters(doc_children) if doc_children is not None else []

    examples = _texts(soup, f"{CONTENT_SELECTOR} pre code")

    return ApiDoc(
        title=title,
        description=description,
        parameters=parameters,
        examples=examples,
    )
