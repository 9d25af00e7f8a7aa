from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path

DEFAULT_DOCS_DIR = Path(__file__).parent.absolute() / "resource_docs"


@dataclass
class Settings:
    """Runtime configuration for the Gridiron context server."""

    docs_dir: Path = field(default_factory=lambda: DEFAULT_DOCS_DIR)
    server_name: str = "gridiron-context"
    server_version: str = "1.0.0"
    host: str = "127.0.0.1"
    port: int = 8085
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        docs_dir = Path(os.getenv("GRIDIRON_DOCS_DIR", str(DEFAULT_DOCS_DIR))).expanduser()
        server_name = os.getenv("GRIDIRON_SERVER_NAME", cls.server_name)
        host = os.getenv("MCP_HOST", cls.host)
        port = int(os.getenv("MCP_PORT", str(cls.port)))
        log_level = os.getenv("GRIDIRON_LOG_LEVEL", cls.log_level)
        return cls(docs_dir=docs_dir, server_name=server_name, host=host, port=port, log_level=log_level)
