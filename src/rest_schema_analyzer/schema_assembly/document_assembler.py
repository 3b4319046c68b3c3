"""Orchestrate one analysis run over a resource catalog."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from rest_schema_analyzer.resource_catalog.catalog_models import (
    STANDARD_REPRESENTATIONS,
    RepresentationKind,
    ResourceDescriptor,
)
from rest_schema_analyzer.type_resolution.domain_registry import (
    DEFAULT_CORE_DOMAIN_TYPES,
    DomainTypeRegistry,
)
from rest_schema_analyzer.type_resolution.property_type_resolver import (
    PropertyTypeResolver,
    ResolutionRules,
)

from .reference_validation import find_dangling_references
from .representation_schema_builder import (
    DEFAULT_DEPTH_BUDGET,
    RepresentationSchemaBuilder,
    SchemaAssemblyError,
    SchemaBuildSession,
)
from .schema_models import PathDescription, SchemaDocument, SchemaNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SkippedResource:
    """A resource left out of the document and why."""

    name: str
    reason: str


@dataclass(frozen=True)
class AssemblyReport:
    """Run summary returned next to the document."""

    processed: tuple[str, ...]
    documented: tuple[str, ...]
    skipped: tuple[SkippedResource, ...]
    schema_count: int


@dataclass(frozen=True)
class AssemblyResult:
    document: SchemaDocument
    report: AssemblyReport


class SchemaDocumentAssembler:
    """Build every representation of every resource into one schema document."""

    def __init__(
        self,
        rules: ResolutionRules | None = None,
        *,
        depth_budget: int = DEFAULT_DEPTH_BUDGET,
        core_domain_types: Iterable[str] = DEFAULT_CORE_DOMAIN_TYPES,
    ) -> None:
        self._resolver = PropertyTypeResolver(rules)
        self._depth_budget = depth_budget
        self._core_domain_types = tuple(core_domain_types)

    def assemble(self, catalog: Iterable[ResourceDescriptor]) -> SchemaDocument:
        return self.assemble_with_report(catalog).document

    def assemble_with_report(self, catalog: Iterable[ResourceDescriptor]) -> AssemblyResult:
        """Run the full analysis.

        Per-resource problems only drop that resource; an empty catalog or a
        document with dangling references raises SchemaAssemblyError.
        """
        resources = tuple(catalog)
        if not resources:
            raise SchemaAssemblyError("Resource catalog contains no resources.")

        registry = DomainTypeRegistry.build(resources, self._core_domain_types)
        builder = RepresentationSchemaBuilder(
            self._resolver, registry, depth_budget=self._depth_budget
        )
        session = SchemaBuildSession()
        paths: dict[str, PathDescription] = {}
        skipped: list[SkippedResource] = []

        for resource in resources:
            reason = registry.rejection_reason(resource.name)
            if reason is None and resource.name in paths:
                reason = "duplicate resource name"
            if reason is not None:
                skipped.append(SkippedResource(resource.name, reason))
                continue

            built = self._assemble_resource(resource, builder, session)
            if not built:
                reason = "no representation could be built"
                logger.warning("Omitting resource %s: %s", resource.name, reason)
                skipped.append(SkippedResource(resource.name, reason))
                continue
            paths[resource.name] = PathDescription(
                resource_name=resource.name,
                resource_type=resource.resource_type,
                representation_schemas=MappingProxyType(
                    {kind.label: node.name for kind, node in built.items()}
                ),
            )

        document = SchemaDocument(
            schemas=MappingProxyType(dict(session.schemas)),
            paths=MappingProxyType(paths),
        )
        dangling = find_dangling_references(document)
        if dangling:
            details = ", ".join(f"{item.location} -> {item.target}" for item in dangling)
            raise SchemaAssemblyError(f"Document contains dangling references: {details}")

        report = AssemblyReport(
            processed=tuple(resource.name for resource in resources),
            documented=tuple(paths),
            skipped=tuple(skipped),
            schema_count=len(document.schemas),
        )
        logger.info(
            "Documented %d of %d resources with %d schemas (%d skipped)",
            len(report.documented),
            len(report.processed),
            report.schema_count,
            len(report.skipped),
        )
        return AssemblyResult(document=document, report=report)

    def _assemble_resource(
        self,
        resource: ResourceDescriptor,
        builder: RepresentationSchemaBuilder,
        session: SchemaBuildSession,
    ) -> dict[RepresentationKind, SchemaNode]:
        built: dict[RepresentationKind, SchemaNode] = {}
        # Introspected names come first so the custom view follows the delegate's field order.
        custom_fields: dict[str, None] = dict.fromkeys(session.known_types_for(resource))

        for kind in STANDARD_REPRESENTATIONS:
            fields = builder.read_fields(resource, kind)
            if not fields:
                continue
            custom_fields.update(dict.fromkeys(field.name for field in fields))
            node = builder.build(resource, kind, session, fields=fields)
            if node is not None:
                built[kind] = node

        custom = builder.build_custom(resource, custom_fields, session)
        if custom is not None:
            built[RepresentationKind.CUSTOM] = custom
        return built


def assemble_document(
    catalog: Iterable[ResourceDescriptor],
    rules: ResolutionRules | None = None,
    *,
    depth_budget: int = DEFAULT_DEPTH_BUDGET,
    core_domain_types: Sequence[str] = DEFAULT_CORE_DOMAIN_TYPES,
) -> SchemaDocument:
    """Convenience wrapper around SchemaDocumentAssembler.assemble."""
    assembler = SchemaDocumentAssembler(
        rules, depth_budget=depth_budget, core_domain_types=core_domain_types
    )
    return assembler.assemble(catalog)
