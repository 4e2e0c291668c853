"""Static element name -> documentation path table for docs.marimo.io/api.

Paths are relative to the configured base URL. The first path segment is the
element's section (inputs, layouts, media, ...); top-level pages such as
``/markdown/`` form a section of their own.
"""

from types import MappingProxyType
from typing import Iterator, Mapping

OTHER_SECTION = "other"

MARIMO_ENDPOINTS: Mapping[str, str] = MappingProxyType(
    {
        # Inputs
        "array": "/inputs/array/",
        "anywidget": "/inputs/anywidget/",
        "batch": "/inputs/batch/",
        "button": "/inputs/button/",
        "chat": "/inputs/chat/",
        "checkbox": "/inputs/checkbox/",
        "code_editor": "/inputs/code_editor/",
        "data_explorer": "/inputs/data_explorer/",
        "dataframe": "/inputs/dataframe/",
        "dates": "/inputs/dates/",
        "dictionary": "/inputs/dictionary/",
        "dropdown": "/inputs/dropdown/",
        "file": "/inputs/file/",
        "file_browser": "/inputs/file_browser/",
        "form": "/inputs/form/",
        "microphone": "/inputs/microphone/",
        "multiselect": "/inputs/multiselect/",
        "nav_menu": "/inputs/nav_menu/",
        "number": "/inputs/number/",
        "radio": "/inputs/radio/",
        "range_slider": "/inputs/range_slider/",
        "refresh": "/inputs/refresh/",
        "run_button": "/inputs/run_button/",
        "slider": "/inputs/slider/",
        "switch": "/inputs/switch/",
        "table": "/inputs/table/",
        "tabs": "/inputs/tabs/",
        "text": "/inputs/text/",
        "text_area": "/inputs/text_area/",
        # Layouts
        "accordion": "/layouts/accordion/",
        "callout": "/layouts/callout/",
        "carousel": "/layouts/carousel/",
        "justify": "/layouts/justify/",
        "lazy": "/layouts/lazy/",
        "plain": "/layouts/plain/",
        "routes": "/layouts/routes/",
        "sidebar": "/layouts/sidebar/",
        "stacks": "/layouts/stacks/",
        "tree": "/layouts/tree/",
        # Media
        "audio": "/media/audio/",
        "download": "/media/download/",
        "image": "/media/image/",
        "pdf": "/media/pdf/",
        "plain_text": "/media/plain_text/",
        "video": "/media/video/",
        # Core features
        "markdown": "/markdown/",
        "control_flow": "/control_flow/",
        "plotting": "/plotting/",
        "status": "/status/",
        "outputs": "/outputs/",
        "diagrams": "/diagrams/",
        "html": "/html/",
        "query_params": "/query_params/",
        "cli_args": "/cli_args/",
        "caching": "/caching/",
        "state": "/state/",
        "app": "/app/",
        "cell": "/cell/",
        "miscellaneous": "/miscellaneous/",
    }
)


def section_of(path: str) -> str:
    """Return the section of an endpoint path ("/inputs/slider/" -> "inputs")."""
    parts = path.split("/")
    if len(parts) > 1 and parts[1]:
        return parts[1]
    return OTHER_SECTION


class EndpointTable:
    """Read-only lookup of element names to documentation paths.

    Lookup is exact and case-sensitive: callers must pass the key as listed.
    """

    def __init__(self, endpoints: Mapping[str, str]) -> None:
        self._endpoints: Mapping[str, str] = MappingProxyType(dict(endpoints))

    @property
    def endpoints(self) -> Mapping[str, str]:
        return self._endpoints

    def resolve(self, name: str) -> str | None:
        return self._endpoints.get(name)

    def names(self) -> list[str]:
        return list(self._endpoints)

    def sections(self) -> dict[str, list[str]]:
        """Group names by section, both in table order.

        Example:
            >>> EndpointTable({"a": "/inputs/a/", "b": "/media/b/"}).sections()
            {'inputs': ['a'], 'media': ['b']}
        """
        grouped: dict[str, list[str]] = {}
        for name, path in self._endpoints.items():
            grouped.setdefault(section_of(path), []).append(name)
        return grouped

    def __contains__(self, name: object) -> bool:
        return name in self._endpoints

    def __iter__(self) -> Iterator[str]:
        return iter(self._endpoints)

    def __len__(self) -> int:
        return len(self._endpoints)


DEFAULT_ENDPOINT_TABLE = EndpointTable(MARIMO_ENDPOINTS)
