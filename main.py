
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from config import Settings
from errors import ConfigurationError
from fastmcp_app import create_mcp
from logging_config import configure_logging

logger = logging.getLogger("gridiron_context")

cli = typer.Typer(add_completion=False)


@cli.command()
def run(
    transport: str = typer.Option("stdio", help="Transport: 'stdio' or 'http'."),
    host: Optional[str] = typer.Option(None, help="Host interface to bind (HTTP transport)."),
    port: Optional[int] = typer.Option(None, help="Port to bind (HTTP transport)."),
    docs_dir: Optional[Path] = typer.Option(None, help="Directory holding the markdown documents."),
    log_level: Optional[str] = typer.Option(None, help="Logging level (DEBUG, INFO, ...)."),
) -> None:
    """Start the Gridiron context server (defaults to stdio transport)."""

    settings = Settings.from_env()
    if host is not None:
        settings.host = host
    if port is not None:
        settings.port = port
    if docs_dir is not None:
        settings.docs_dir = docs_dir
    if log_level is not None:
        settings.log_level = log_level

    configure_logging(settings.log_level)

    if transport not in ("stdio", "http"):
        raise typer.BadParameter("transport must be 'stdio' or 'http'", param_hint="--transport")

    try:
        mcp = create_mcp(settings)
    except ConfigurationError as exc:
        logger.error("startup aborted: %s", exc.message)
        raise typer.Exit(code=1) from exc

    logger.info("Gridiron MCP server starting (transport=%s)", transport)
    if transport == "stdio":
        mcp.run()
    else:
        app = mcp.http_app(path="/mcp", transport="http", json_response=True, stateless_http=True)
        import uvicorn
        uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    cli()
