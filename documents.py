from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


class _NotFound:
    """Sentinel returned by collaborators when the requested entry is absent."""

    _instance = None

    def __new__(cls) -> "_NotFound":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __bool__(self) -> bool:
        return False


NOT_FOUND = _NotFound()


def missing_document_text(filename: str) -> str:
    return f"Document not found: {filename}"


class DocumentStore:
    """Reads markdown documents from a directory on demand."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def path_for(self, filename: str) -> Path:
        return self.root / filename

    def read(self, filename: str) -> Union[str, _NotFound]:
        path = self.path_for(filename)
        if not path.is_file():
            logger.warning("document not found: %s", path)
            return NOT_FOUND
        return path.read_text(encoding="utf-8")

    def read_or_placeholder(self, filename: str) -> str:
        text = self.read(filename)
        if text is NOT_FOUND:
            return missing_document_text(filename)
        return text
