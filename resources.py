from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List

from errors import ConfigurationError, DuplicateURIError, NotFoundError


@dataclass(frozen=True)
class ResourceDescriptor:
    uri: str
    title: str
    mime_type: str
    resolve: Callable[[], str]

    def as_metadata(self) -> Dict[str, str]:
        return {"uri": self.uri, "title": self.title, "mimeType": self.mime_type}


@dataclass(frozen=True)
class ResolvedResource:
    uri: str
    mime_type: str
    text: str


class ResourceRegistry:
    """Ordered, URI-keyed collection of read-only documentation resources."""

    def __init__(self) -> None:
        self._resources: Dict[str, ResourceDescriptor] = {}

    def __len__(self) -> int:
        return len(self._resources)

    def register(self, descriptor: ResourceDescriptor) -> None:
        if descriptor.uri in self._resources:
            raise DuplicateURIError(descriptor.uri)
        self._resources[descriptor.uri] = descriptor

    def list_resources(self) -> List[Dict[str, str]]:
        if not self._resources:
            raise ConfigurationError("no resources registered")
        return [descriptor.as_metadata() for descriptor in self._resources.values()]

    def get(self, uri: str) -> ResourceDescriptor:
        descriptor = self._resources.get(uri)
        if descriptor is None:
            raise NotFoundError("resource", uri)
        return descriptor

    def read_resource(self, uri: str) -> ResolvedResource:
        descriptor = self.get(uri)
        return ResolvedResource(uri=descriptor.uri, mime_type=descriptor.mime_type, text=descriptor.resolve())
