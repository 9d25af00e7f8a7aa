from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple, Union

from errors import NotFoundError, ValidationError
from resources import ResourceRegistry
from tools import JsonDict, ToolRegistry

logger = logging.getLogger(__name__)


# ------------------------------ Requests ------------------------------


@dataclass(frozen=True)
class ListResources:
    pass


@dataclass(frozen=True)
class ReadResource:
    uri: str


@dataclass(frozen=True)
class ListTools:
    pass


@dataclass(frozen=True)
class CallTool:
    name: str
    arguments: Optional[JsonDict] = field(default=None, hash=False)


Request = Union[ListResources, ReadResource, ListTools, CallTool]


# ------------------------------ Responses -----------------------------


@dataclass(frozen=True)
class ContentItem:
    mime_type: str
    text: Optional[str] = None
    data: Any = None
    uri: Optional[str] = None


@dataclass(frozen=True)
class Response:
    content: Tuple[ContentItem, ...]
    is_error: bool = False

    @classmethod
    def error(cls, message: str) -> "Response":
        return cls(content=(ContentItem(mime_type="text/plain", text=message),), is_error=True)

    @property
    def text(self) -> str:
        return "\n".join(item.text for item in self.content if item.text is not None)


# ----------------------------- Dispatcher -----------------------------


class Dispatcher:
    """Routes each request to the registries and shapes the outcome into a Response.

    Registry errors never escape ``handle``: unknown names and invalid
    arguments become error responses, and so does any unexpected exception
    raised by a resolver or handler.
    """

    def __init__(self, resources: ResourceRegistry, tools: ToolRegistry) -> None:
        self.resources = resources
        self.tools = tools
        self._routes: Dict[type, Callable[[Any], Response]] = {
            ListResources: self._list_resources,
            ReadResource: self._read_resource,
            ListTools: self._list_tools,
            CallTool: self._call_tool,
        }

    def handle(self, request: Request) -> Response:
        route = self._routes.get(type(request))
        if route is None:
            raise TypeError(f"unsupported request: {request!r}")
        try:
            return route(request)
        except NotFoundError as exc:
            logger.info("%s", exc.message)
            return Response.error(exc.message)
        except ValidationError as exc:
            logger.info("rejected %s: %s", request, exc.message)
            return Response.error(f"Invalid arguments for {request.name}: {exc.message}")
        except Exception:
            logger.exception("failed to handle %s", request)
            return Response.error(f"Internal error while handling {type(request).__name__}")

    def _list_resources(self, _: ListResources) -> Response:
        items = tuple(
            ContentItem(mime_type="application/json", data=meta, uri=meta["uri"])
            for meta in self.resources.list_resources()
        )
        return Response(content=items)

    def _read_resource(self, request: ReadResource) -> Response:
        resolved = self.resources.read_resource(request.uri)
        return Response(content=(ContentItem(mime_type=resolved.mime_type, text=resolved.text, uri=resolved.uri),))

    def _list_tools(self, _: ListTools) -> Response:
        items = tuple(ContentItem(mime_type="application/json", data=meta) for meta in self.tools.list_tools())
        return Response(content=items)

    def _call_tool(self, request: CallTool) -> Response:
        output = self.tools.call_tool(request.name, request.arguments)
        return Response(content=(ContentItem(mime_type=output.mime_type, text=output.text),), is_error=output.is_error)
