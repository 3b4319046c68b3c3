"""Registry of referenceable domain types."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from rest_schema_analyzer.resource_catalog.catalog_models import ResourceDescriptor

from .type_names import (
    canonical_type_name,
    clean_type_string,
    schema_base_name,
    strip_resource_suffix,
)

logger = logging.getLogger(__name__)

# Types that are often only reachable as nested fields and never cataloged themselves.
DEFAULT_CORE_DOMAIN_TYPES = (
    "Person",
    "Patient",
    "User",
    "Provider",
    "Encounter",
    "Visit",
    "Obs",
    "Order",
    "Concept",
    "Drug",
    "Location",
    "Program",
    "Role",
    "Privilege",
    "Form",
    "Field",
    "PatientIdentifier",
    "PersonName",
    "PersonAddress",
    "PersonAttribute",
)


class DomainTypeRegistry:
    """Type names that become separate named schemas linked by ``$ref``."""

    def __init__(
        self,
        resources_by_type: Mapping[str, ResourceDescriptor],
        core_types: Iterable[str] = (),
        rejected: Mapping[str, str] | None = None,
    ) -> None:
        self._resources_by_type = dict(resources_by_type)
        self._type_names = frozenset(self._resources_by_type) | frozenset(core_types)
        self._rejected = dict(rejected or {})

    @classmethod
    def build(
        cls,
        catalog: Iterable[ResourceDescriptor],
        core_types: Iterable[str] = DEFAULT_CORE_DOMAIN_TYPES,
    ) -> DomainTypeRegistry:
        """Scan the catalog once and index every resource by its delegate type names.

        A resource is indexed under its delegate's simple name, its canonical
        name and its schema base name. The first resource claiming a schema base
        name keeps it; later claimants are rejected because they would mint the
        same schema names.
        """
        resources_by_type: dict[str, ResourceDescriptor] = {}
        owners: dict[str, ResourceDescriptor] = {}
        rejected: dict[str, str] = {}
        for resource in catalog:
            simple_name = _delegate_simple_name(resource)
            if simple_name is None:
                reason = "delegate type could not be determined"
                logger.warning("Skipping resource %s: %s", resource.name, reason)
                rejected[resource.name] = reason
                continue

            base_name = schema_base_name(simple_name)
            owner = owners.get(base_name)
            if owner is not None:
                reason = (
                    f"schema base name '{base_name}' is already claimed by resource {owner.name}"
                )
                logger.warning("Skipping resource %s: %s", resource.name, reason)
                rejected[resource.name] = reason
                continue

            owners[base_name] = resource
            for key in (base_name, canonical_type_name(simple_name), simple_name):
                resources_by_type.setdefault(key, resource)
            logger.debug("Registered domain type %s for resource %s", simple_name, resource.name)

        logger.debug("Domain types: %s", sorted(resources_by_type))
        return cls(resources_by_type, core_types, rejected)

    def is_referenceable(self, type_name: str) -> bool:
        return clean_type_string(type_name) in self._type_names

    def resource_for(self, type_name: str) -> ResourceDescriptor | None:
        """Cataloged resource backing a type, or None for safety-net core types.

        ``PatientResource`` finds the resource registered under ``Patient`` since
        both mint the same schema names.
        """
        cleaned = clean_type_string(type_name)
        resource = self._resources_by_type.get(cleaned)
        if resource is None:
            resource = self._resources_by_type.get(strip_resource_suffix(cleaned))
        return resource

    def rejection_reason(self, resource_name: str) -> str | None:
        return self._rejected.get(resource_name)

    @property
    def type_names(self) -> frozenset[str]:
        return self._type_names

    def __contains__(self, type_name: object) -> bool:
        return isinstance(type_name, str) and self.is_referenceable(type_name)

    def __len__(self) -> int:
        return len(self._type_names)


def _delegate_simple_name(resource: ResourceDescriptor) -> str | None:
    if resource.delegate_type is None:
        return None
    try:
        simple_name = resource.delegate_type.simple_name
    except Exception as exc:  # pylint: disable=broad-exception-caught
        logger.warning("Could not read delegate type of %s: %s", resource.name, exc)
        return None
    return simple_name or None
