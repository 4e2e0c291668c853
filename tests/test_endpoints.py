"""Tests for the endpoint table and URL construction."""

import pytest

from marimo_docs_mcp.docs import build_url
from marimo_docs_mcp.endpoints import DEFAULT_ENDPOINT_TABLE, EndpointTable, section_of


def test_resolve_is_exact_and_case_sensitive() -> None:
    assert DEFAULT_ENDPOINT_TABLE.resolve("slider") == "/inputs/slider/"
    assert DEFAULT_ENDPOINT_TABLE.resolve("Slider") is None
    assert DEFAULT_ENDPOINT_TABLE.resolve(" slider") is None
    assert DEFAULT_ENDPOINT_TABLE.resolve("slider ") is None


def test_default_table_covers_all_sections() -> None:
    sections = DEFAULT_ENDPOINT_TABLE.sections()

    assert list(sections)[:3] == ["inputs", "layouts", "media"]
    assert "slider" in sections["inputs"]
    assert sections["layouts"][0] == "accordion"
    assert sections["markdown"] == ["markdown"]
    assert sum(len(names) for names in sections.values()) == len(DEFAULT_ENDPOINT_TABLE)


def test_sections_keep_table_order_and_other_bucket() -> None:
    table = EndpointTable(
        {
            "b": "/media/b/",
            "a": "/inputs/a/",
            "c": "/media/c/",
            "root": "/",
            "bare": "bare",
        }
    )

    assert table.sections() == {
        "media": ["b", "c"],
        "inputs": ["a"],
        "other": ["root", "bare"],
    }
    assert table.names() == ["b", "a", "c", "root", "bare"]


def test_section_of() -> None:
    assert section_of("/inputs/slider/") == "inputs"
    assert section_of("/markdown/") == "markdown"
    assert section_of("//double/") == "other"


def test_table_is_read_only() -> None:
    source = {"slider": "/inputs/slider/"}
    table = EndpointTable(source)
    source["dropdown"] = "/inputs/dropdown/"

    assert "dropdown" not in table
    with pytest.raises(TypeError):
        table.endpoints["dropdown"] = "/inputs/dropdown/"  # type: ignore[index]


@pytest.mark.parametrize(
    ("base_url", "path", "expected"),
    [
        ("https://x/api", "/inputs/slider/", "https://x/api/inputs/slider/"),
        ("https://x/api/", "/inputs/slider/", "https://x/api/inputs/slider/"),
        ("https://x/api//", "//inputs///slider/", "https://x/api/inputs/slider/"),
        ("http://docs.marimo.io/api", "/markdown/", "http://docs.marimo.io/api/markdown/"),
    ],
)
def test_build_url_collapses_duplicate_slashes(base_url: str, path: str, expected: str) -> None:
    assert build_url(base_url, path) == expected
