"""Tests for HTML -> ApiDoc extraction."""

from bs4 import BeautifulSoup

from marimo_docs_mcp.docs import ApiDoc, Parameter, extract_api_doc, parse_parameters

SLIDER_PAGE = """
<html><body>
<nav><h1>marimo</h1><p>Navigation text</p></nav>
<div class="md-content">
  <h1> Slider </h1>
  <h1>Second heading</h1>
  <p>A numeric slider.</p>
  <p>   </p>
  <p>Use <code>on_change</code> to react to updates.</p>
  <div class="doc-children">
    <table>
      <tr><th>Name</th><th>Description</th></tr>
      <tr><td>start</td><td>Minimum value</td><td>required</td></tr>
      <tr><td>stop</td><td>Maximum value</td><td>Required</td></tr>
      <tr><td>step</td><td>Increment</td></tr>
      <tr><td>orphan</td></tr>
    </table>
  </div>
  <div class="doc-children">
    <table><tr><td>ignored</td><td>second block</td></tr></table>
  </div>
  <pre><code>slider = mo.ui.slider(1, 10)</code></pre>
  <pre><code>   </code></pre>
  <pre><code>
slider.value
</code></pre>
</div>
<pre><code>outside content</code></pre>
</body></html>
"""


def test_extracts_title_from_first_heading_in_content() -> None:
    assert extract_api_doc(SLIDER_PAGE).title == "Slider"


def test_description_joins_non_empty_paragraphs() -> None:
    doc = extract_api_doc(SLIDER_PAGE)

    assert doc.description == "A numeric slider.\n\nUse on_change to react to updates."
    assert "Navigation text" not in doc.description


def test_parameters_from_first_doc_children_block_only() -> None:
    doc = extract_api_doc(SLIDER_PAGE)

    assert doc.parameters == [
        Parameter(name="start", description="Minimum value", required=True),
        Parameter(name="stop", description="Maximum value", required=False),
        Parameter(name="step", description="Increment", required=False),
    ]


def test_examples_keep_document_order_and_drop_empty_blocks() -> None:
    doc = extract_api_doc(SLIDER_PAGE)

    assert doc.examples == ["slider = mo.ui.slider(1, 10)", "slider.value"]


def test_minimal_page() -> None:
    html = '<div class="md-content"><h1>Slider</h1><p>A slider.</p></div>'

    assert extract_api_doc(html) == ApiDoc(
        title="Slider",
        description="A slider.",
        parameters=[],
        examples=[],
    )


def test_missing_content_container_degrades_to_empty_doc() -> None:
    html = "<html><body><h1>Slider</h1><p>A slider.</p><pre><code>x</code></pre></body></html>"

    doc = extract_api_doc(html)

    assert doc.model_dump() == {"title": "", "description": "", "parameters": [], "examples": []}


def test_malformed_markup_does_not_raise() -> None:
    doc = extract_api_doc('<div class="md-content"><h1>Broken<p>text<table><tr><td>a')

    assert doc.title.startswith("Broken")


def test_extraction_is_repeatable() -> None:
    assert extract_api_doc(SLIDER_PAGE) == extract_api_doc(SLIDER_PAGE)


def test_parse_parameters_row_rules() -> None:
    section = BeautifulSoup(
        "<table>"
        "<tr><td>n</td><td>d</td></tr>"
        "<tr><td>n</td><td>d</td><td>required</td></tr>"
        "<tr><td>only</td></tr>"
        "<tr><td>n</td><td>d</td><td>optional, not required here</td></tr>"
        "</table>",
        "html.parser",
    )

    assert parse_parameters(section) == [
        Parameter(name="n", description="d", required=False),
        Parameter(name="n", description="d", required=True),
        Parameter(name="n", description="d", required=True),
    ]


def test_search_text_is_compact_json() -> None:
    doc = ApiDoc(title="Slider", parameters=[Parameter(name="n", description="d")])

    assert doc.to_search_text() == (
        '{"title":"Slider","description":"",'
        '"parameters":[{"name":"n","description":"d","required":false}],"examples":[]}'
    )
