"""Per-representation schema builder with cycle-safe recursion into referenced types."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from rest_schema_analyzer.resource_catalog.catalog_models import (
    FieldDescriptor,
    RepresentationKind,
    ResourceDescriptor,
)
from rest_schema_analyzer.type_resolution.domain_registry import DomainTypeRegistry
from rest_schema_analyzer.type_resolution.property_type_resolver import (
    PropertyTypeResolver,
    TypeResolution,
)
from rest_schema_analyzer.type_resolution.type_names import (
    ArrayType,
    ReferenceType,
    ResolvedType,
    format_type_name,
    openapi_scalar,
    parse_type_name,
)

from .schema_models import (
    ArrayProperty,
    ObjectProperty,
    PropertySchema,
    ReferenceProperty,
    ScalarProperty,
    SchemaNode,
)
from .schema_naming import schema_name_for_property_type, schema_name_for_resource

logger = logging.getLogger(__name__)

DEFAULT_DEPTH_BUDGET = 2

CUSTOM_DESCRIPTION = (
    "Custom representation - specify any subset of these properties "
    "in the ?v=custom:(...) query parameter"
)

MINIMAL_PROPERTIES: dict[str, PropertySchema] = {
    "id": ScalarProperty(type="integer", description="Unique identifier"),
    "uuid": ScalarProperty(type="string", description="Universally unique identifier"),
    "display": ScalarProperty(type="string", description="Display representation"),
}


class SchemaAssemblyError(Exception):
    """Raised when a schema document cannot be assembled."""


class SchemaNameCollisionError(SchemaAssemblyError):
    """Raised when two different owners mint the same schema name."""


@dataclass
class SchemaBuildSession:
    """Run-scoped state shared by every build of one assembly run.

    Both maps are append-only: a schema name or a resolved field type, once
    written, is never replaced.
    """

    schemas: dict[str, SchemaNode] = field(default_factory=dict)
    schema_owners: dict[str, str] = field(default_factory=dict)
    known_types: dict[str, dict[str, str]] = field(default_factory=dict)
    resolutions: dict[tuple[str, str, str], TypeResolution] = field(default_factory=dict)

    def known_types_for(self, resource: ResourceDescriptor) -> dict[str, str]:
        known = self.known_types.get(resource.name)
        if known is None:
            known = introspect_known_types(resource)
            self.known_types[resource.name] = known
        return known

    def resolution(
        self, resource_name: str, kind: RepresentationKind, field_name: str
    ) -> TypeResolution | None:
        return self.resolutions.get((resource_name, kind.value, field_name))

    def claim(self, name: str, owner: str) -> None:
        current = self.schema_owners.get(name)
        if current is not None and current != owner:
            raise SchemaNameCollisionError(
                f"Schema name '{name}' is minted by both {current} and {owner}."
            )

    def register(self, node: SchemaNode, owner: str) -> SchemaNode:
        self.claim(node.name, owner)
        existing = self.schemas.get(node.name)
        if existing is not None:
            return existing
        self.schemas[node.name] = node
        self.schema_owners[node.name] = owner
        return node


def introspect_known_types(resource: ResourceDescriptor) -> dict[str, str]:
    """Delegate fields plus resource-declared property getters, the getters winning."""
    known: dict[str, str] = {}
    if resource.delegate_type is not None:
        try:
            known.update(resource.delegate_type.field_types())
        except Exception as exc:  # pylint: disable=broad-exception-caught
            logger.warning("Could not introspect delegate type of %s: %s", resource.name, exc)
    known.update(resource.declared_properties)
    return known


class RepresentationSchemaBuilder:
    """Turn one resource representation into a schema node."""

    def __init__(
        self,
        resolver: PropertyTypeResolver,
        registry: DomainTypeRegistry,
        *,
        depth_budget: int = DEFAULT_DEPTH_BUDGET,
    ) -> None:
        if depth_budget < 0:
            raise ValueError("depth_budget must not be negative.")
        self._resolver = resolver
        self._registry = registry
        self._depth_budget = depth_budget

    def build(
        self,
        resource: ResourceDescriptor,
        kind: RepresentationKind,
        session: SchemaBuildSession,
        *,
        depth_budget: int | None = None,
        visited: frozenset[str] = frozenset(),
        fields: Sequence[FieldDescriptor] | None = None,
    ) -> SchemaNode | None:
        """Build (or reuse) the schema of one representation.

        Returns None when the resource exposes no fields for ``kind``; callers
        skip the representation in that case.

        Args:
          resource: Resource whose representation is described.
          kind: Standard representation to build.
          session: Run-scoped registry of already built schemas.
          depth_budget: Remaining recursion levels; defaults to the builder budget.
          visited: Names of the resources being expanded on the current path.
          fields: Field list already read from the handler; read on demand when None.
        """
        name = schema_name_for_resource(resource, kind)
        existing = session.schemas.get(name)
        if existing is not None:
            session.claim(name, _resource_owner(resource))
            return existing

        if fields is None:
            fields = self.read_fields(resource, kind)
        if not fields:
            return None
        budget = self._depth_budget if depth_budget is None else depth_budget
        return self._build_node(
            resource,
            kind,
            name,
            fields,
            session,
            budget=budget,
            path=visited | {resource.name},
            description=f"{kind.label} representation of {resource.name}",
        )

    def build_custom(
        self,
        resource: ResourceDescriptor,
        field_names: Iterable[str],
        session: SchemaBuildSession,
    ) -> SchemaNode | None:
        """Build the ad-hoc representation documenting every requestable field."""
        name = schema_name_for_resource(resource, RepresentationKind.CUSTOM)
        existing = session.schemas.get(name)
        if existing is not None:
            session.claim(name, _resource_owner(resource))
            return existing

        fields = tuple(
            FieldDescriptor(name=field_name) for field_name in dict.fromkeys(field_names)
        )
        if not fields:
            logger.warning("No properties found for custom representation of %s", resource.name)
            return None
        return self._build_node(
            resource,
            RepresentationKind.CUSTOM,
            name,
            fields,
            session,
            budget=self._depth_budget,
            path=frozenset({resource.name}),
            description=CUSTOM_DESCRIPTION,
        )

    def read_fields(
        self, resource: ResourceDescriptor, kind: RepresentationKind
    ) -> tuple[FieldDescriptor, ...]:
        """Field list of one representation; empty when unsupported or unreadable."""
        try:
            fields = resource.handler.representation_fields(kind)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            logger.warning(
                "Could not read %s representation of %s: %s", kind.value, resource.name, exc
            )
            return ()
        if not fields:
            logger.debug("No %s representation for %s", kind.value, resource.name)
            return ()
        return tuple(fields)

    # pylint: disable=too-many-arguments
    def _build_node(
        self,
        resource: ResourceDescriptor,
        kind: RepresentationKind,
        name: str,
        fields: Sequence[FieldDescriptor],
        session: SchemaBuildSession,
        *,
        budget: int,
        path: frozenset[str],
        description: str,
    ) -> SchemaNode:
        known = session.known_types_for(resource)
        properties: dict[str, PropertySchema] = {}
        required: list[str] = []
        for descriptor in fields:
            resolution = self._resolver.resolve(descriptor.name, descriptor, resource, known)
            session.resolutions[(resource.name, kind.value, descriptor.name)] = resolution
            resolved = parse_type_name(resolution.type_name, self._registry.is_referenceable)
            properties[descriptor.name] = self._property_schema(resolved, session, budget, path)
            if descriptor.required and descriptor.name not in required:
                required.append(descriptor.name)

        node = SchemaNode(
            name=name,
            description=description,
            properties=properties,
            required=tuple(required),
        )
        return session.register(node, _resource_owner(resource))

    def _property_schema(
        self,
        resolved: ResolvedType,
        session: SchemaBuildSession,
        budget: int,
        path: frozenset[str],
    ) -> PropertySchema:
        if isinstance(resolved, ArrayType):
            return ArrayProperty(
                items=self._property_schema(resolved.element, session, budget, path),
                description=f"Array of {format_type_name(resolved.element)}",
            )
        if isinstance(resolved, ReferenceType):
            return self._reference_schema(resolved.type_name, session, budget, path)
        return scalar_property(resolved.name)

    def _reference_schema(
        self,
        type_name: str,
        session: SchemaBuildSession,
        budget: int,
        path: frozenset[str],
    ) -> PropertySchema:
        target = self._registry.resource_for(type_name)
        if target is None:
            name = schema_name_for_property_type(type_name, RepresentationKind.DEFAULT)
            if name not in session.schemas:
                session.register(minimal_schema(name, type_name), f"type {type_name}")
            return ReferenceProperty(schema_name=name)

        name = schema_name_for_resource(target, RepresentationKind.DEFAULT)
        if name in session.schemas:
            return ReferenceProperty(schema_name=name)
        if target.name in path:
            logger.debug("Cycle on %s via %s; inlining shallow schema", target.name, sorted(path))
            return shallow_reference(type_name)
        if budget <= 0:
            logger.debug("Depth budget exhausted before %s; inlining shallow schema", target.name)
            return shallow_reference(type_name)

        node = self.build(
            target,
            RepresentationKind.DEFAULT,
            session,
            depth_budget=budget - 1,
            visited=path,
        )
        if node is None:
            return shallow_reference(type_name)
        return ReferenceProperty(schema_name=node.name)


def scalar_property(type_name: str) -> PropertySchema:
    """Inline schema for a non-referenceable type; unknown types become opaque objects."""
    mapped = openapi_scalar(type_name)
    if mapped is None:
        return ObjectProperty(description=f"Complex type: {type_name}")
    openapi_type, openapi_format = mapped
    return ScalarProperty(type=openapi_type, format=openapi_format)


def minimal_schema(name: str, type_name: str) -> SchemaNode:
    """Safety-net schema for a referenceable type that is not cataloged."""
    return SchemaNode(
        name=name,
        description=f"Minimal schema for {type_name}",
        properties=dict(MINIMAL_PROPERTIES),
    )


def shallow_reference(type_name: str) -> ObjectProperty:
    return ObjectProperty(
        description=f"Shallow reference to {type_name}",
        properties=dict(MINIMAL_PROPERTIES),
    )


def _resource_owner(resource: ResourceDescriptor) -> str:
    return f"resource {resource.name}"
