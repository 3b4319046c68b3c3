"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from rest_schema_analyzer.resource_catalog.catalog_models import IntrospectableType
from rest_schema_analyzer.schema_assembly.representation_schema_builder import (
    DEFAULT_DEPTH_BUDGET,
)
from rest_schema_analyzer.type_resolution.domain_registry import DEFAULT_CORE_DOMAIN_TYPES
from rest_schema_analyzer.type_resolution.property_type_resolver import (
    DEFAULT_COMMON_BASE_TYPE_NAMES,
    DEFAULT_KNOWN_COLLECTION_FIELDS,
    DEFAULT_REPRESENTATION_LITERALS,
    DEFAULT_WELL_KNOWN_FIELDS,
    ResolutionRules,
)

DEFAULT_API_TITLE = "REST API"
DEFAULT_API_VERSION = "1.0.0"
DEFAULT_API_DESCRIPTION = "Schemas generated from the resource catalog by rest-schema-analyzer."
DEFAULT_BASE_PATH = "/ws/rest/v1"


@dataclass(frozen=True)
class ApiSettings:
    """Document metadata used by the OpenAPI rendering."""

    title: str = DEFAULT_API_TITLE
    version: str = DEFAULT_API_VERSION
    description: str = DEFAULT_API_DESCRIPTION
    base_path: str = DEFAULT_BASE_PATH


@dataclass(frozen=True)
class AnalyzerSettings:  # pylint: disable=too-many-instance-attributes
    """Top-level analyzer configuration aggregate."""

    path: Path | None = None
    depth_budget: int = DEFAULT_DEPTH_BUDGET
    core_domain_types: tuple[str, ...] = DEFAULT_CORE_DOMAIN_TYPES
    common_base_types: tuple[str, ...] = DEFAULT_COMMON_BASE_TYPE_NAMES
    known_collection_fields: Mapping[str, str] = field(
        default_factory=lambda: dict(DEFAULT_KNOWN_COLLECTION_FIELDS)
    )
    well_known_fields: Mapping[str, str] = field(
        default_factory=lambda: dict(DEFAULT_WELL_KNOWN_FIELDS)
    )
    representation_literals: frozenset[str] = DEFAULT_REPRESENTATION_LITERALS
    api: ApiSettings = field(default_factory=ApiSettings)

    def resolution_rules(
        self, type_table: Mapping[str, IntrospectableType]
    ) -> ResolutionRules:
        """Resolver rules with base type names looked up in the catalog's type table.

        Names missing from the table are ignored.
        """
        base_types = tuple(
            type_table[name] for name in self.common_base_types if name in type_table
        )
        return ResolutionRules(
            common_base_types=base_types,
            well_known_fields=dict(self.well_known_fields),
            known_collection_fields=dict(self.known_collection_fields),
            representation_literals=self.representation_literals,
        )
