"""Schema document entities."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from .schema_naming import DOCUMENT_SCHEMA_PREFIX, schema_reference


@dataclass(frozen=True)
class ScalarProperty:
    """Inline scalar property such as ``{"type": "string", "format": "date-time"}``."""

    type: str
    format: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class ArrayProperty:
    """Array property over another property schema."""

    items: PropertySchema
    description: str | None = None


@dataclass(frozen=True)
class ReferenceProperty:
    """``$ref`` to a schema defined in the same document."""

    schema_name: str


@dataclass(frozen=True)
class ObjectProperty:
    """Inline object, either opaque or a shallow id/uuid/display shape."""

    description: str | None = None
    properties: Mapping[str, PropertySchema] = field(default_factory=dict)


PropertySchema = ScalarProperty | ArrayProperty | ReferenceProperty | ObjectProperty


@dataclass(frozen=True)
class SchemaNode:
    """One named object schema."""

    name: str
    description: str
    properties: Mapping[str, PropertySchema]
    required: tuple[str, ...] = ()

    def references(self) -> Iterator[tuple[str, str]]:
        """Yield ``(property path, target schema name)`` for every ``$ref`` inside the node."""
        for property_name, schema in self.properties.items():
            yield from _property_references(property_name, schema)


@dataclass(frozen=True)
class PathDescription:
    """Read operation of one resource and the representation schemas it can return."""

    resource_name: str
    resource_type: str
    representation_schemas: Mapping[str, str]
    discriminator: str = "v"


@dataclass(frozen=True)
class SchemaDocument:
    """Assembled schemas plus per-resource operation descriptions."""

    schemas: Mapping[str, SchemaNode]
    paths: Mapping[str, PathDescription]

    def references(self) -> Iterator[tuple[str, str]]:
        """Yield ``(location, target schema name)`` for every reference in the document."""
        for node in self.schemas.values():
            for property_path, target in node.references():
                yield f"schemas.{node.name}.{property_path}", target
        for resource_name, path in self.paths.items():
            for label, target in path.representation_schemas.items():
                yield f"paths.{resource_name}.{label}", target

    def to_dict(self, reference_prefix: str = DOCUMENT_SCHEMA_PREFIX) -> dict[str, Any]:
        return {
            "schemas": {
                name: render_schema_node(node, reference_prefix)
                for name, node in self.schemas.items()
            },
            "paths": {
                resource_name: {
                    "resource": path.resource_type,
                    "discriminator": path.discriminator,
                    "representations": {
                        label: schema_reference(target, reference_prefix)
                        for label, target in path.representation_schemas.items()
                    },
                }
                for resource_name, path in self.paths.items()
            },
        }


def render_schema_node(node: SchemaNode, reference_prefix: str) -> dict[str, Any]:
    rendered: dict[str, Any] = {
        "type": "object",
        "description": node.description,
        "properties": {
            name: render_property(schema, reference_prefix)
            for name, schema in node.properties.items()
        },
    }
    if node.required:
        rendered["required"] = list(node.required)
    return rendered


def render_property(schema: PropertySchema, reference_prefix: str) -> dict[str, Any]:
    if isinstance(schema, ReferenceProperty):
        return {"$ref": schema_reference(schema.schema_name, reference_prefix)}
    if isinstance(schema, ArrayProperty):
        rendered: dict[str, Any] = {
            "type": "array",
            "items": render_property(schema.items, reference_prefix),
        }
    elif isinstance(schema, ObjectProperty):
        rendered = {"type": "object"}
        if schema.properties:
            rendered["properties"] = {
                name: render_property(child, reference_prefix)
                for name, child in schema.properties.items()
            }
    else:
        rendered = {"type": schema.type}
        if schema.format:
            rendered["format"] = schema.format
    if schema.description:
        rendered["description"] = schema.description
    return rendered


def _property_references(path: str, schema: PropertySchema) -> Iterator[tuple[str, str]]:
    if isinstance(schema, ReferenceProperty):
        yield path, schema.schema_name
    elif isinstance(schema, ArrayProperty):
        yield from _property_references(f"{path}[]", schema.items)
    elif isinstance(schema, ObjectProperty):
        for name, child in schema.properties.items():
            yield from _property_references(f"{path}.{name}", child)
