"""Render a schema document as an OpenAPI 3.0 mapping."""

from __future__ import annotations

from typing import Any

from rest_schema_analyzer.configuration.runtime_settings import ApiSettings
from rest_schema_analyzer.resource_catalog.catalog_models import STANDARD_REPRESENTATIONS
from rest_schema_analyzer.schema_assembly.schema_models import (
    PathDescription,
    SchemaDocument,
    render_schema_node,
)
from rest_schema_analyzer.schema_assembly.schema_naming import schema_reference

OPENAPI_VERSION = "3.0.1"
COMPONENT_SCHEMA_PREFIX = "#/components/schemas/"

CUSTOM_REPRESENTATION_EXAMPLES = {
    "customBasic": {"summary": "Custom (basic)", "value": "custom:(uuid,display,name)"},
    "customNested": {
        "summary": "Custom (nested)",
        "value": "custom:(uuid,display,person:(uuid,display))",
    },
}

_STANDARD_LABELS = {kind.label: kind.value for kind in STANDARD_REPRESENTATIONS}


def render_openapi(document: SchemaDocument, api: ApiSettings | None = None) -> dict[str, Any]:
    """Build the OpenAPI mapping: ``info``, one GET path per resource and ``components``."""
    settings = api or ApiSettings()
    return {
        "openapi": OPENAPI_VERSION,
        "info": {
            "title": settings.title,
            "version": settings.version,
            "description": settings.description,
        },
        "paths": {
            resource_path(settings.base_path, path.resource_name): render_path_item(path)
            for path in document.paths.values()
        },
        "components": {
            "schemas": {
                name: render_schema_node(node, COMPONENT_SCHEMA_PREFIX)
                for name, node in document.schemas.items()
            }
        },
    }


def resource_path(base_path: str, resource_name: str) -> str:
    return f"{base_path.rstrip('/')}/{resource_name}/{{uuid}}"


def render_path_item(path: PathDescription) -> dict[str, Any]:
    """GET operation returning one of the resource's representation schemas."""
    resource_type = path.resource_type
    selectors = {
        label.lower(): schema_reference(target, COMPONENT_SCHEMA_PREFIX)
        for label, target in path.representation_schemas.items()
    }
    standard = [
        _STANDARD_LABELS[label]
        for label in path.representation_schemas
        if label in _STANDARD_LABELS
    ]
    return {
        "get": {
            "summary": f"Get a {resource_type} by UUID",
            "description": f"Retrieve a {resource_type} resource in the requested representation",
            "parameters": [
                {
                    "name": "uuid",
                    "in": "path",
                    "required": True,
                    "description": f"The UUID of the {resource_type}",
                    "schema": {"type": "string"},
                },
                {
                    "name": path.discriminator,
                    "in": "query",
                    "required": False,
                    "description": (
                        "The representation to return. Allowed values: "
                        + ", ".join(f"'{value}'" for value in standard)
                        + ", or a custom representation string such as "
                        "custom:(uuid,display,person:(uuid,display))"
                    ),
                    "schema": {"type": "string", "enum": standard},
                    "examples": {
                        key: dict(example)
                        for key, example in CUSTOM_REPRESENTATION_EXAMPLES.items()
                    },
                },
            ],
            "responses": {
                "200": {
                    "description": "Successful response",
                    "content": {
                        "application/json": {
                            "schema": {
                                "type": "object",
                                "oneOf": [{"$ref": ref} for ref in selectors.values()],
                                "discriminator": {
                                    "propertyName": path.discriminator,
                                    "mapping": selectors,
                                },
                            }
                        }
                    },
                },
                "404": {"description": "Resource with given UUID doesn't exist"},
                "401": {"description": "User not logged in"},
                "400": {"description": "Bad request - invalid parameters"},
            },
        }
    }
