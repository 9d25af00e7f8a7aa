import json

import pytest

from catalog import (
    TOOL_CATALOG,
    ToolSpec,
    build_resource_registry,
    build_tool_registry,
    lookup_handler,
)
from dispatcher import CallTool, ListResources, ListTools, ReadResource
from documents import DocumentStore
from errors import DuplicateNameError, DuplicateURIError
from lookup_tables import REPO_INFO, LookupTable, resource_index
from resource_docs import RESOURCE_CATALOG, ResourceSpec
from tools import MissingEntry, ToolDescriptor, ToolRegistry, object_schema

EXPECTED_URIS = [
    "gridiron://project/overview",
    "gridiron://project/repos",
    "gridiron://project/architecture",
    "gridiron://guidelines/csharp",
    "gridiron://guidelines/typescript",
    "gridiron://guidelines/testing",
    "gridiron://guidelines/git",
    "gridiron://guidelines/architecture-principles",
    "gridiron://engine/philosophy",
    "gridiron://engine/statistical-targets",
    "gridiron://engine/attribute-mappings",
    "gridiron://frontend/design-system",
    "gridiron://agents/dev",
    "gridiron://agents/plan",
    "gridiron://agents/qa",
    "gridiron://agents/review",
    "gridiron://agents/requirements",
    "gridiron://roadmap",
]

EXPECTED_TOOLS = [
    "get_repo_info",
    "get_github_project",
    "list_resources",
    "get_tech_stack",
    "get_hard_rules",
    "get_constants_info",
]

VALID_ARGUMENTS = {
    "get_repo_info": {"repo": "gridiron-web"},
    "get_github_project": {"type": "parent"},
}


def test_resource_listing_matches_catalog(dispatcher):
    listing = dispatcher.handle(ListResources())
    assert [item.data["uri"] for item in listing.content] == EXPECTED_URIS
    assert len(listing.content) == len(RESOURCE_CATALOG)


def test_tool_listing_matches_catalog(dispatcher):
    listing = dispatcher.handle(ListTools())
    assert [item.data["name"] for item in listing.content] == EXPECTED_TOOLS
    assert len(listing.content) == len(TOOL_CATALOG)


def test_every_listed_resource_reads_with_declared_type(dispatcher):
    for item in dispatcher.handle(ListResources()).content:
        response = dispatcher.handle(ReadResource(item.data["uri"]))
        assert response.is_error is False
        assert response.content[0].mime_type == item.data["mimeType"] == "text/markdown"
        assert response.content[0].uri == item.data["uri"]


def test_every_listed_tool_returns_its_table_entry(dispatcher):
    for spec in TOOL_CATALOG:
        arguments = VALID_ARGUMENTS.get(spec.name, {})
        response = dispatcher.handle(CallTool(spec.name, arguments))
        assert response.is_error is False, response.text
        key = arguments.get(spec.key_param) if spec.key_param else None
        assert json.loads(response.text) == spec.table.get(key)


def test_repo_enum_matches_table_keys(dispatcher):
    listing = dispatcher.handle(ListTools())
    schema = listing.content[0].data["inputSchema"]
    assert schema["required"] == ["repo"]
    assert schema["properties"]["repo"]["enum"] == [
        "gridiron",
        "gridiron-web",
        "gridiron-engine",
        "gridiron-meta",
    ]
    project_schema = listing.content[1].data["inputSchema"]
    assert project_schema["properties"]["type"]["enum"] == ["parent", "gridiron", "gridiron-web", "gridiron-engine"]


def test_argument_free_tools_declare_empty_object_schema(dispatcher):
    for item in dispatcher.handle(ListTools()).content[2:]:
        assert item.data["inputSchema"] == {"type": "object", "properties": {}}


def test_gridiron_repo_is_csharp(dispatcher):
    response = dispatcher.handle(CallTool("get_repo_info", {"repo": "gridiron"}))
    assert '"language": "C#"' in response.text
    assert json.loads(response.text) == REPO_INFO["gridiron"]


def test_list_resources_tool_groups_catalog(dispatcher):
    index = json.loads(dispatcher.handle(CallTool("list_resources", {})).text)
    assert list(index) == ["project", "guidelines", "engine", "frontend", "agents", "roadmap"]
    assert [entry["uri"] for group in index.values() for entry in group] == EXPECTED_URIS
    assert index["roadmap"] == [{"uri": "gridiron://roadmap", "title": "Roadmap", "description": "Project milestones"}]


def test_lookup_handler_reports_unknown_key():
    spec = ToolSpec(
        name="get_repo_info",
        description="repo",
        table=LookupTable("repo_info", {"gridiron": {"name": "gridiron"}}),
        key_param="repo",
        unknown_label="repository",
    )
    handler = lookup_handler(spec)
    assert handler({"repo": "gridiron"}) == {"name": "gridiron"}
    assert handler({"repo": "gridiron-mobile"}) == MissingEntry("Unknown repository: gridiron-mobile")


def test_flagged_response_for_schema_valid_missing_key():
    # Schema allows a key the table does not carry.
    table = LookupTable("github_projects", {"parent": {"name": "Goal To Go Football"}})
    spec = ToolSpec(
        name="get_github_project",
        description="project",
        table=table,
        key_param="type",
        unknown_label="type",
    )
    registry = ToolRegistry()
    registry.register(
        ToolDescriptor(
            name=spec.name,
            description=spec.description,
            input_schema=object_schema({"type": {"type": "string", "enum": ["parent", "gridiron"]}}, required=["type"]),
            invoke=lookup_handler(spec),
        )
    )
    output = registry.call_tool("get_github_project", {"type": "gridiron"})
    assert output.is_error is True
    assert output.text == "Unknown type: gridiron"


def test_duplicate_resource_in_catalog_is_fatal(docs_dir):
    spec = RESOURCE_CATALOG[0]
    with pytest.raises(DuplicateURIError):
        build_resource_registry(DocumentStore(docs_dir), [spec, spec])


def test_duplicate_tool_in_catalog_is_fatal():
    with pytest.raises(DuplicateNameError):
        build_tool_registry([TOOL_CATALOG[0], TOOL_CATALOG[0]])


def test_resource_index_groups_in_order():
    specs = [
        ResourceSpec("a/one", "One", "one.md", "a", "One", "first"),
        ResourceSpec("b/two", "Two", "two.md", "b", "Two", "second"),
        ResourceSpec("a/three", "Three", "three.md", "a", "Three", "third"),
    ]
    assert resource_index(specs) == {
        "a": [
            {"uri": "gridiron://a/one", "title": "One", "description": "first"},
            {"uri": "gridiron://a/three", "title": "Three", "description": "third"},
        ],
        "b": [{"uri": "gridiron://b/two", "title": "Two", "description": "second"}],
    }


def test_single_entry_table():
    table = LookupTable.single("tech_stack", {"backend": {}})
    assert table.get() == {"backend": {}}
    assert table.get(None) == {"backend": {}}
