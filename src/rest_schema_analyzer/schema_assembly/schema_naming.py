"""Single source of truth for schema names.

Every schema name, whether minted where a schema is defined or where a
``$ref`` points at it, comes from these functions, so definition and
reference sites always agree byte for byte.

Examples:
  ("PatientIdentifierResource", "ref") -> "PatientIdentifierRef"
  delegate "UserAndPassword1_8", "default" -> "UserDefault"
  property type "Location (from introspection)", "full" -> "LocationFull"
"""

from __future__ import annotations

from rest_schema_analyzer.resource_catalog.catalog_models import (
    RepresentationKind,
    ResourceDescriptor,
)
from rest_schema_analyzer.type_resolution.type_names import (
    canonical_type_name,
    clean_type_string,
    strip_resource_suffix,
    strip_version_suffix,
)

DOCUMENT_SCHEMA_PREFIX = "#/schemas/"


def representation_label(representation: RepresentationKind | str | None) -> str:
    """``RepresentationKind.REFERENCE`` or ``"REF"`` -> ``"Ref"``; empty -> ``"Default"``."""
    if isinstance(representation, RepresentationKind):
        return representation.label
    if not representation:
        return RepresentationKind.DEFAULT.label
    return representation.strip().lower().capitalize()


def schema_name(identity: str, representation: RepresentationKind | str | None) -> str:
    """``BaseName + CapitalizedRepresentation`` for a resource or type identity."""
    base = strip_resource_suffix(identity.strip()) or "Unknown"
    return f"{base}{representation_label(representation)}"


def schema_name_for_delegate(
    delegate_simple_name: str, representation: RepresentationKind | str | None
) -> str:
    return schema_name(canonical_type_name(delegate_simple_name), representation)


def schema_name_for_property_type(
    property_type: str, representation: RepresentationKind | str | None
) -> str:
    return schema_name(clean_type_string(property_type), representation)


def schema_name_for_resource(
    resource: ResourceDescriptor, representation: RepresentationKind | str | None
) -> str:
    """Name a resource's schema after its delegate type, falling back to its class or name."""
    if resource.delegate_type is not None:
        return schema_name_for_delegate(resource.delegate_type.simple_name, representation)
    if resource.resource_class:
        return schema_name(strip_version_suffix(resource.resource_class), representation)
    parts = resource.resource_type.replace("_", "-").split("-")
    pascal = "".join(part.capitalize() for part in parts)
    return schema_name(pascal, representation)


def schema_reference(name: str, prefix: str = DOCUMENT_SCHEMA_PREFIX) -> str:
    """JSON pointer for a schema name inside a rendered document."""
    return f"{prefix}{name}"
