from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ResourceError, ToolError
from fastmcp.tools.tool import Tool, ToolResult
from mcp.types import TextContent
from pydantic import Field

from catalog import build_dispatcher
from config import Settings
from dispatcher import CallTool, Dispatcher, ListResources, ListTools, ReadResource
from errors import ConfigurationError

logger = logging.getLogger(__name__)


class DispatchedTool(Tool):
    """FastMCP tool whose calls are routed through the Dispatcher.

    The declared ``parameters`` schema is advertised as-is; argument checks
    happen in the tool registry so handlers only ever see validated input.
    """

    dispatcher: Any = Field(default=None, exclude=True, repr=False)

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        response = self.dispatcher.handle(CallTool(self.name, arguments))
        if response.is_error:
            raise ToolError(response.text)
        return ToolResult(content=[TextContent(type="text", text=response.text)])


def _resource_reader(dispatcher: Dispatcher, uri: str) -> Callable[[], str]:
    def _read() -> str:
        response = dispatcher.handle(ReadResource(uri))
        if response.is_error:
            raise ResourceError(response.text)
        return response.text

    return _read


def create_mcp(settings: Optional[Settings] = None, dispatcher: Optional[Dispatcher] = None) -> FastMCP:
    """Create a FastMCP server exposing the Gridiron documentation resources and lookup tools.

    Every resource and tool registered with ``dispatcher`` is mirrored onto the
    FastMCP instance in registration order. Raises ``RegistrationError`` when
    the static catalogs contain duplicates.
    """
    cfg = settings or Settings.from_env()
    dispatcher = dispatcher or build_dispatcher(cfg.docs_dir)

    mcp = FastMCP(name=cfg.server_name, version=cfg.server_version)

    # ------------------------------ Resources -----------------------------
    resources = dispatcher.handle(ListResources())
    if resources.is_error:
        raise ConfigurationError(resources.text)
    for item in resources.content:
        meta = item.data
        mcp.resource(meta["uri"], name=meta["title"], mime_type=meta["mimeType"])(
            _resource_reader(dispatcher, meta["uri"])
        )

    # -------------------------------- Tools -------------------------------
    tools = dispatcher.handle(ListTools())
    if tools.is_error:
        raise ConfigurationError(tools.text)
    for item in tools.content:
        meta = item.data
        mcp.add_tool(
            DispatchedTool(
                name=meta["name"],
                description=meta["description"],
                parameters=meta["inputSchema"],
                dispatcher=dispatcher,
            )
        )

    logger.info(
        "%s ready: %d resources, %d tools (docs: %s)",
        cfg.server_name,
        len(resources.content),
        len(tools.content),
        cfg.docs_dir,
    )
    return mcp
