"""Resource catalog file reader."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .catalog_models import (
    FieldDescriptor,
    IntrospectableType,
    RepresentationKind,
    ResourceCatalog,
    ResourceDescriptor,
    StaticRepresentationHandler,
    parse_representation_kind,
)
from .delegate_types import StaticDelegateType


class CatalogError(Exception):
    """Raised when a resource catalog file is invalid."""


def load_resource_catalog(catalog_path: Path | str) -> ResourceCatalog:
    """Load a YAML or JSON catalog file into resource descriptors."""
    path = Path(catalog_path)
    if not path.exists():
        raise CatalogError(f"Catalog file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise CatalogError(f"Failed to parse catalog file: {exc}") from exc
    return parse_resource_catalog(parsed)


def parse_resource_catalog(parsed: Any) -> ResourceCatalog:
    """Build a catalog from an already parsed mapping."""
    if parsed is None:
        parsed = {}
    if not isinstance(parsed, Mapping):
        raise CatalogError("Catalog root must be a mapping.")

    type_table = _parse_types_section(parsed.get("types"))
    raw_resources = parsed.get("resources") or []
    if not isinstance(raw_resources, Sequence) or isinstance(raw_resources, str):
        raise CatalogError("Catalog section 'resources' must be a list.")

    resources = []
    seen_names: set[str] = set()
    for index, raw_resource in enumerate(raw_resources):
        resource = _parse_resource(raw_resource, index, type_table)
        if resource.name in seen_names:
            raise CatalogError(f"Duplicate resource name in catalog: {resource.name}")
        seen_names.add(resource.name)
        resources.append(resource)

    types: dict[str, IntrospectableType] = dict(type_table)
    return ResourceCatalog(resources=tuple(resources), types=types)


def _parse_types_section(value: Any) -> dict[str, StaticDelegateType]:
    if value is None:
        return {}
    section = _require_mapping(value, "types")
    definitions: dict[str, Mapping[str, Any]] = {}
    for type_name, definition in section.items():
        name = _require_non_empty_string(type_name, "types key")
        if definition is None:
            definition = {}
        definitions[name] = _require_mapping(definition, f"types.{name}")

    resolved: dict[str, StaticDelegateType] = {}
    for name in definitions:
        _resolve_static_type(name, definitions, resolved, chain=())
    return resolved


def _resolve_static_type(
    name: str,
    definitions: Mapping[str, Mapping[str, Any]],
    resolved: dict[str, StaticDelegateType],
    *,
    chain: tuple[str, ...],
) -> StaticDelegateType:
    if name in resolved:
        return resolved[name]
    if name in chain:
        cycle = " -> ".join((*chain, name))
        raise CatalogError(f"Type inheritance cycle: {cycle}")
    definition = definitions.get(name)
    if definition is None:
        raise CatalogError(f"types.{chain[-1]}.extends refers to unknown type '{name}'.")

    parent_name = _optional_string(definition.get("extends"), f"types.{name}.extends")
    parent = (
        _resolve_static_type(parent_name, definitions, resolved, chain=(*chain, name))
        if parent_name
        else None
    )
    fields = _string_mapping(definition.get("fields"), f"types.{name}.fields")
    static_type = StaticDelegateType(name=name, declared_fields=fields, parent=parent)
    resolved[name] = static_type
    return static_type


def _parse_resource(
    value: Any, index: int, type_table: Mapping[str, StaticDelegateType]
) -> ResourceDescriptor:
    section = _require_mapping(value, f"resources[{index}]")
    name = _require_non_empty_string(section.get("name"), f"resources[{index}].name")
    label = f"resources.{name}"

    delegate_name = _optional_string(section.get("delegate_type"), f"{label}.delegate_type")
    # Unknown delegate types are kept; the assembler reports them as unresolvable.
    delegate_type = type_table.get(delegate_name) if delegate_name else None

    raw_representations = section.get("representations") or {}
    representations = _require_mapping(raw_representations, f"{label}.representations")
    parsed_representations: dict[RepresentationKind, tuple[FieldDescriptor, ...]] = {}
    for raw_kind, raw_fields in representations.items():
        kind = parse_representation_kind(str(raw_kind))
        if kind is None or kind is RepresentationKind.CUSTOM:
            raise CatalogError(
                f"{label}.representations has unsupported representation '{raw_kind}'."
            )
        parsed_representations[kind] = _parse_fields(
            raw_fields, f"{label}.representations.{raw_kind}"
        )

    return ResourceDescriptor(
        name=name,
        delegate_type=delegate_type,
        handler=StaticRepresentationHandler(representations=parsed_representations),
        resource_class=_optional_string(section.get("resource_class"), f"{label}.resource_class"),
        declared_properties=_string_mapping(section.get("properties"), f"{label}.properties"),
    )


def _parse_fields(value: Any, field_label: str) -> tuple[FieldDescriptor, ...]:
    if value is None:
        return ()
    if not isinstance(value, Sequence) or isinstance(value, str):
        raise CatalogError(f"{field_label} must be a list of fields.")
    return tuple(_parse_field(item, f"{field_label}[{index}]") for index, item in enumerate(value))


def _parse_field(value: Any, field_label: str) -> FieldDescriptor:
    if isinstance(value, str):
        return FieldDescriptor(name=_require_non_empty_string(value, field_label))
    section = _require_mapping(value, field_label)
    required = section.get("required", False)
    if not isinstance(required, bool):
        raise CatalogError(f"{field_label}.required must be a boolean.")
    return FieldDescriptor(
        name=_require_non_empty_string(section.get("name"), f"{field_label}.name"),
        explicit_type_hint=_optional_string(section.get("convert_as"), f"{field_label}.convert_as"),
        nested_representation=_optional_string(
            section.get("representation"), f"{field_label}.representation"
        ),
        alias_field=_optional_string(
            section.get("delegate_property"), f"{field_label}.delegate_property"
        ),
        accessor_type=_optional_string(
            section.get("accessor_type"), f"{field_label}.accessor_type"
        ),
        required=required,
    )


def _string_mapping(value: Any, section_name: str) -> dict[str, str]:
    if value is None:
        return {}
    section = _require_mapping(value, section_name)
    normalized: dict[str, str] = {}
    for key, type_name in section.items():
        field_name = _require_non_empty_string(key, f"{section_name} key")
        normalized[field_name] = _require_non_empty_string(
            type_name, f"{section_name}.{field_name}"
        )
    return normalized


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise CatalogError(f"Catalog section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise CatalogError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise CatalogError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise CatalogError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None
