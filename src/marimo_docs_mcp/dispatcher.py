"""Operation dispatch for the documentation tools.

Arguments are validated against a per-operation model before any I/O.
Every outcome is returned as a ToolEnvelope dict: data on success, a
structured error (code + kind + message) otherwise, never both.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Awaitable, Callable, Mapping, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from marimo_docs_mcp.contracts import build_docs_data, build_ok
from marimo_docs_mcp.docs import DocsFetcher, get_docs_fetcher, search_docs
from marimo_docs_mcp.errors import DocsError, InternalError, InvalidParams, MethodNotFound
from marimo_docs_mcp.formatting import build_docs_error, search_summary
from marimo_docs_mcp.utils import ApiSearchQuery, ElementName

logger = logging.getLogger("marimo-docs-mcp.dispatcher")


class GetElementApiArgs(BaseModel):
    model_config = ConfigDict(extra="ignore")

    element: ElementName


class SearchApiArgs(BaseModel):
    model_config = ConfigDict(extra="ignore")

    query: ApiSearchQuery


async def get_element_api(element: str, fetcher: Optional[DocsFetcher] = None) -> dict[str, Any]:
    """Fetch one element's documentation as docs data."""
    fetcher = fetcher or await get_docs_fetcher()
    doc = await fetcher.fetch(element)
    return build_docs_data(
        action="get",
        entries=[doc.model_dump()],
        summary={"count": 1, "element": element, "url": fetcher.url_for(element)},
    )


async def search_api(query: str, fetcher: Optional[DocsFetcher] = None) -> dict[str, Any]:
    """Search every element's documentation as docs data."""
    fetcher = fetcher or await get_docs_fetcher()
    outcome = await search_docs(fetcher, query)
    return build_docs_data(
        action="search",
        entries=[doc.model_dump() for doc in outcome.matches],
        summary=search_summary(outcome),
    )


@dataclass(frozen=True)
class Operation:
    args_model: type[BaseModel]
    handler: Callable[[Any, Optional[DocsFetcher]], Awaitable[dict[str, Any]]]

    @property
    def required_field(self) -> str:
        """Name of the operation's single required argument."""
        return next(name for name, field in self.args_model.model_fields.items() if field.is_required())


async def _run_get_element_api(args: GetElementApiArgs, fetcher: Optional[DocsFetcher]) -> dict[str, Any]:
    return await get_element_api(args.element, fetcher)


async def _run_search_api(args: SearchApiArgs, fetcher: Optional[DocsFetcher]) -> dict[str, Any]:
    return await search_api(args.query, fetcher)


OPERATIONS: Mapping[str, Operation] = {
    "get_element_api": Operation(GetElementApiArgs, _run_get_element_api),
    "search_api": Operation(SearchApiArgs, _run_search_api),
}


def parse_arguments(name: str, arguments: Optional[Mapping[str, Any]]) -> tuple[Operation, BaseModel]:
    """Resolve the operation and validate its arguments.

    Raises:
        InvalidParams: arguments missing or not a mapping, required field missing/empty, or invalid
        MethodNotFound: ``name`` is not an exposed operation
    """
    if arguments is None:
        raise InvalidParams("Missing arguments")
    if not isinstance(arguments, Mapping):
        raise InvalidParams("Invalid arguments", {"received": type(arguments).__name__})

    operation = OPERATIONS.get(name)
    if operation is None:
        raise MethodNotFound(f"Unknown tool: {name}", {"tool": name, "available_tools": list(OPERATIONS)})

    field = operation.required_field
    if not arguments.get(field):
        raise InvalidParams(f"Missing {field} parameter", {"field": field})

    try:
        args = operation.args_model.model_validate(dict(arguments))
    except ValidationError as exc:
        first = exc.errors()[0]
        raise InvalidParams(f"Invalid {field} parameter: {first['msg']}", {"field": field}) from exc
    return operation, args


async def dispatch(
    name: str,
    arguments: Optional[Mapping[str, Any]],
    fetcher: Optional[DocsFetcher] = None,
) -> dict[str, Any]:
    """Run one operation and wrap its outcome in a ToolEnvelope."""
    try:
        operation, args = parse_arguments(name, arguments)
        data = await operation.handler(args, fetcher)
    except DocsError as exc:
        logger.info("%s failed (%s): %s", name, exc.code, exc.message.splitlines()[0])
        return build_docs_error(exc)
    except Exception as exc:
        logger.exception("Unexpected error in %s", name)
        return build_docs_error(InternalError(f"Unexpected error in {name}", {"reason": str(exc)}))
    return build_ok(data)
