"""Static resource and tool declarations, and the loops that register them."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterable, Optional, Tuple

from dispatcher import Dispatcher
from documents import NOT_FOUND, DocumentStore
from lookup_tables import (
    CONSTANTS_INFO,
    GITHUB_PROJECTS,
    HARD_RULES,
    REPO_INFO,
    TECH_STACK,
    LookupTable,
    resource_index,
)
from resource_docs import RESOURCE_CATALOG, ResourceSpec
from resources import ResourceDescriptor, ResourceRegistry
from tools import JsonDict, MissingEntry, ToolDescriptor, ToolRegistry, object_schema


@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    table: LookupTable
    # Name of the single string argument used as the table key; None for
    # argument-free tools.
    key_param: Optional[str] = None
    key_description: str = ""
    unknown_label: str = "key"

    def input_schema(self) -> JsonDict:
        if self.key_param is None:
            return object_schema()
        prop = {"type": "string", "enum": self.table.keys(), "description": self.key_description}
        return object_schema({self.key_param: prop}, required=[self.key_param])


TOOL_CATALOG: Tuple[ToolSpec, ...] = (
    ToolSpec(
        name="get_repo_info",
        description="Get detailed information about a specific Gridiron repository",
        table=LookupTable("repo_info", REPO_INFO),
        key_param="repo",
        key_description="The repository name",
        unknown_label="repository",
    ),
    ToolSpec(
        name="get_github_project",
        description="Get the correct GitHub Project for a given issue type or repository",
        table=LookupTable("github_projects", GITHUB_PROJECTS),
        key_param="type",
        key_description="Issue type: 'parent' for epics, or repo name for repo-specific issues",
        unknown_label="type",
    ),
    ToolSpec(
        name="list_resources",
        description="List all available documentation resources in the MCP server",
        table=LookupTable.single("resource_index", resource_index()),
    ),
    ToolSpec(
        name="get_tech_stack",
        description="Get the complete technology stack for the Gridiron project",
        table=LookupTable.single("tech_stack", TECH_STACK),
    ),
    ToolSpec(
        name="get_hard_rules",
        description="Get the absolute rules that must never be violated in this project",
        table=LookupTable.single("hard_rules", HARD_RULES),
    ),
    ToolSpec(
        name="get_constants_info",
        description="Get information about where simulation constants are defined",
        table=LookupTable.single("constants_info", CONSTANTS_INFO),
    ),
)


def lookup_handler(spec: ToolSpec) -> Callable[[JsonDict], Any]:
    """Build the handler shared by every tool: one table lookup keyed by an argument."""

    def _invoke(params: JsonDict) -> Any:
        key = params.get(spec.key_param) if spec.key_param else None
        entry = spec.table.get(key)
        if entry is NOT_FOUND:
            return MissingEntry(f"Unknown {spec.unknown_label}: {key}")
        return entry

    return _invoke


def document_resolver(store: DocumentStore, filename: str) -> Callable[[], str]:
    def _resolve() -> str:
        return store.read_or_placeholder(filename)

    return _resolve


def build_resource_registry(
    store: DocumentStore, specs: Iterable[ResourceSpec] = RESOURCE_CATALOG
) -> ResourceRegistry:
    registry = ResourceRegistry()
    for spec in specs:
        registry.register(
            ResourceDescriptor(
                uri=spec.uri,
                title=spec.name,
                mime_type=spec.mime_type,
                resolve=document_resolver(store, spec.filename),
            )
        )
    return registry


def build_tool_registry(specs: Iterable[ToolSpec] = TOOL_CATALOG) -> ToolRegistry:
    registry = ToolRegistry()
    for spec in specs:
        registry.register(
            ToolDescriptor(
                name=spec.name,
                description=spec.description,
                input_schema=spec.input_schema(),
                invoke=lookup_handler(spec),
            )
        )
    return registry


def build_dispatcher(docs_dir: Path) -> Dispatcher:
    """Construct both registries from the static catalogs. Raises RegistrationError on duplicates."""
    return Dispatcher(build_resource_registry(DocumentStore(docs_dir)), build_tool_registry())
