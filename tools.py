from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional

from jsonschema import Draft7Validator
from jsonschema.exceptions import SchemaError

from errors import ConfigurationError, DuplicateNameError, NotFoundError, ValidationError

JsonDict = Dict[str, Any]


@dataclass(frozen=True)
class MissingEntry:
    """Returned by a handler when a schema-valid key has no backing data."""

    message: str


@dataclass(frozen=True)
class ToolDescriptor:
    name: str
    description: str
    input_schema: JsonDict
    invoke: Callable[[JsonDict], Any]

    def as_metadata(self) -> JsonDict:
        return {"name": self.name, "description": self.description, "inputSchema": self.input_schema}


@dataclass(frozen=True)
class ToolOutput:
    text: str
    is_error: bool = False
    mime_type: str = "application/json"


def object_schema(properties: Optional[JsonDict] = None, required: Optional[List[str]] = None) -> JsonDict:
    schema: JsonDict = {"type": "object", "properties": dict(properties or {})}
    if required:
        schema["required"] = list(required)
    return schema


def serialize_result(result: Any) -> str:
    # Declaration order is the canonical key order for the static tables.
    return json.dumps(result, indent=2, ensure_ascii=False)


def _first_violation(validator: Draft7Validator, arguments: Any) -> Optional[ValidationError]:
    errors = sorted(validator.iter_errors(arguments), key=lambda e: [str(p) for p in e.path])
    if not errors:
        return None
    first = errors[0]
    if first.validator == "required" and isinstance(first.instance, Mapping):
        missing = [key for key in first.validator_value if key not in first.instance]
        return ValidationError(".".join([*map(str, first.path), missing[0]]), "is required")
    path = ".".join(str(p) for p in first.path) or "arguments"
    return ValidationError(path, first.message)


@dataclass
class _Entry:
    descriptor: ToolDescriptor
    validator: Draft7Validator = field(repr=False)


class ToolRegistry:
    """Ordered, name-keyed collection of tools with schema-checked dispatch."""

    def __init__(self) -> None:
        self._tools: Dict[str, _Entry] = {}

    def __len__(self) -> int:
        return len(self._tools)

    def register(self, descriptor: ToolDescriptor) -> None:
        if descriptor.name in self._tools:
            raise DuplicateNameError(descriptor.name)
        try:
            Draft7Validator.check_schema(descriptor.input_schema)
        except SchemaError as exc:
            raise ConfigurationError(f"invalid schema for tool {descriptor.name}: {exc.message}") from exc
        self._tools[descriptor.name] = _Entry(descriptor, Draft7Validator(descriptor.input_schema))

    def list_tools(self) -> List[JsonDict]:
        if not self._tools:
            raise ConfigurationError("no tools registered")
        return [entry.descriptor.as_metadata() for entry in self._tools.values()]

    def get(self, name: str) -> ToolDescriptor:
        entry = self._tools.get(name)
        if entry is None:
            raise NotFoundError("tool", name)
        return entry.descriptor

    def validate(self, name: str, arguments: Optional[Mapping[str, Any]]) -> JsonDict:
        entry = self._tools.get(name)
        if entry is None:
            raise NotFoundError("tool", name)
        if arguments is None:
            arguments = {}
        violation = _first_violation(entry.validator, arguments)
        if violation is not None:
            raise violation
        return dict(arguments)

    def call_tool(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> ToolOutput:
        params = self.validate(name, arguments)
        result = self.get(name).invoke(params)
        if isinstance(result, MissingEntry):
            return ToolOutput(text=result.message, is_error=True, mime_type="text/plain")
        return ToolOutput(text=serialize_result(result))
