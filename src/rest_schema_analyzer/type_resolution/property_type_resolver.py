"""Cascading resolver that picks one authoritative type per field.

Strategies run in strict priority order and the first non-empty answer wins:

1. prior knowledge (introspected or already resolved types for the resource)
2. explicit conversion hint on the field
3. declared accessor return type
4. aliased delegate field
5. nested-representation lookup on the delegate type, then on common base types
6. exact-match name inference, which always answers

Answers from strategies 2-4 that are exactly a representation literal
(``REF``, ``Full`` ...) describe how to render the field, not its type, and
are rejected so the cascade continues.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass, field
from enum import Enum

from rest_schema_analyzer.resource_catalog.catalog_models import (
    FieldDescriptor,
    IntrospectableType,
    ResourceDescriptor,
)

logger = logging.getLogger(__name__)

DEFAULT_REPRESENTATION_LITERALS = frozenset({"REF", "DEFAULT", "FULL", "Ref", "Default", "Full"})

DEFAULT_WELL_KNOWN_FIELDS: Mapping[str, str] = {
    "id": "Integer",
    "uuid": "String",
    "display": "String",
    "voided": "Boolean",
    "retired": "Boolean",
    "dateCreated": "DateTime",
    "dateChanged": "DateTime",
    "dateVoided": "DateTime",
    "dateRetired": "DateTime",
    "auditInfo": "Object",
    "links": "List<Link>",
}

DEFAULT_KNOWN_COLLECTION_FIELDS: Mapping[str, str] = {
    "roles": "List<Role>",
    "privileges": "List<Privilege>",
    "names": "List<PersonName>",
    "addresses": "List<PersonAddress>",
    "identifiers": "List<PatientIdentifier>",
    "attributes": "List<PersonAttribute>",
}

DEFAULT_COMMON_BASE_TYPE_NAMES = (
    "BaseOpenmrsObject",
    "BaseOpenmrsMetadata",
    "BaseOpenmrsData",
    "Person",
    "User",
    "Patient",
    "Encounter",
    "Obs",
    "Concept",
    "Location",
    "Provider",
)


class ResolutionStrategy(str, Enum):
    """Identifies which cascade step produced a type."""

    PRIOR_KNOWLEDGE = "prior_knowledge"
    EXPLICIT_HINT = "explicit_hint"
    ACCESSOR_RETURN_TYPE = "accessor_return_type"
    ALIASED_DELEGATE_FIELD = "aliased_delegate_field"
    NESTED_REPRESENTATION = "nested_representation"
    COMMON_BASE_TYPE = "common_base_type"
    NAME_INFERENCE = "name_inference"


@dataclass(frozen=True)
class TypeResolution:
    """Resolved type name for one field and the strategy that produced it."""

    field_name: str
    type_name: str
    strategy: ResolutionStrategy


@dataclass(frozen=True)
class ResolutionRules:  # pylint: disable=too-many-instance-attributes
    """Configuration data consumed by the cascade."""

    common_base_types: tuple[IntrospectableType, ...] = ()
    well_known_fields: Mapping[str, str] = field(
        default_factory=lambda: dict(DEFAULT_WELL_KNOWN_FIELDS)
    )
    known_collection_fields: Mapping[str, str] = field(
        default_factory=lambda: dict(DEFAULT_KNOWN_COLLECTION_FIELDS)
    )
    representation_literals: frozenset[str] = DEFAULT_REPRESENTATION_LITERALS
    plural_suffix: str = "s"
    plural_min_length: int = 4
    plural_fallback_type: str = "List<Object>"
    default_type: str = "String"


class PropertyTypeResolver:
    """Resolve field types through the ordered strategy cascade."""

    def __init__(self, rules: ResolutionRules | None = None) -> None:
        self._rules = rules or ResolutionRules()

    @property
    def rules(self) -> ResolutionRules:
        return self._rules

    def resolve(
        self,
        field_name: str,
        descriptor: FieldDescriptor,
        resource: ResourceDescriptor,
        already_known: MutableMapping[str, str],
    ) -> TypeResolution:
        """Return the type for ``field_name`` and remember it in ``already_known``.

        Never raises: introspection failures only skip the strategy that hit them.
        """
        resolution = self._run_cascade(field_name, descriptor, resource, already_known)
        already_known.setdefault(field_name, resolution.type_name)
        logger.debug(
            "Resolved %s.%s -> %s via %s",
            resource.name,
            field_name,
            resolution.type_name,
            resolution.strategy.value,
        )
        return resolution

    def _run_cascade(
        self,
        field_name: str,
        descriptor: FieldDescriptor,
        resource: ResourceDescriptor,
        already_known: Mapping[str, str],
    ) -> TypeResolution:
        known = already_known.get(field_name)
        if known:
            return TypeResolution(field_name, known, ResolutionStrategy.PRIOR_KNOWLEDGE)

        for strategy, candidate in (
            (ResolutionStrategy.EXPLICIT_HINT, descriptor.explicit_type_hint),
            (ResolutionStrategy.ACCESSOR_RETURN_TYPE, descriptor.accessor_type),
        ):
            if self._accept(field_name, strategy, candidate):
                return TypeResolution(field_name, candidate.strip(), strategy)

        alias = descriptor.alias_field
        if alias and alias != field_name:
            aliased = already_known.get(alias) or _introspect(
                resource.delegate_type, alias, resource.name
            )
            if self._accept(field_name, ResolutionStrategy.ALIASED_DELEGATE_FIELD, aliased):
                return TypeResolution(
                    field_name, aliased.strip(), ResolutionStrategy.ALIASED_DELEGATE_FIELD
                )

        if descriptor.nested_representation:
            nested = self._resolve_nested(field_name, resource)
            if nested is not None:
                return nested

        return TypeResolution(
            field_name, self.infer_from_name(field_name), ResolutionStrategy.NAME_INFERENCE
        )

    def _accept(
        self, field_name: str, strategy: ResolutionStrategy, candidate: str | None
    ) -> bool:
        if candidate is None or not candidate.strip():
            return False
        if candidate.strip() in self._rules.representation_literals:
            logger.debug(
                "Rejected %s answer '%s' for %s: representation literal, not a type",
                strategy.value,
                candidate,
                field_name,
            )
            return False
        return True

    def _resolve_nested(
        self, field_name: str, resource: ResourceDescriptor
    ) -> TypeResolution | None:
        direct = _introspect(resource.delegate_type, field_name, resource.name)
        if direct:
            return TypeResolution(field_name, direct, ResolutionStrategy.NESTED_REPRESENTATION)
        for base_type in self._rules.common_base_types:
            shared = _introspect(base_type, field_name, resource.name)
            if shared:
                return TypeResolution(field_name, shared, ResolutionStrategy.COMMON_BASE_TYPE)
        return None

    def infer_from_name(self, field_name: str) -> str:
        """Conservative exact-match heuristics; unknown names default to ``String``."""
        rules = self._rules
        if field_name in rules.well_known_fields:
            return rules.well_known_fields[field_name]
        if field_name in rules.known_collection_fields:
            return rules.known_collection_fields[field_name]
        if field_name.endswith(rules.plural_suffix) and len(field_name) >= rules.plural_min_length:
            return rules.plural_fallback_type
        return rules.default_type


def _introspect(
    introspectable: IntrospectableType | None, field_name: str, resource_name: str
) -> str | None:
    if introspectable is None:
        return None
    try:
        type_name = introspectable.field_type(field_name)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        logger.debug(
            "Introspection for %s.%s failed: %s",
            resource_name,
            field_name,
            exc,
        )
        return None
    return type_name or None
