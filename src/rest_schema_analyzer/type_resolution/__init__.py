"""Type resolution exports."""

from .domain_registry import DEFAULT_CORE_DOMAIN_TYPES, DomainTypeRegistry
from .property_type_resolver import (
    DEFAULT_COMMON_BASE_TYPE_NAMES,
    DEFAULT_KNOWN_COLLECTION_FIELDS,
    DEFAULT_REPRESENTATION_LITERALS,
    DEFAULT_WELL_KNOWN_FIELDS,
    PropertyTypeResolver,
    ResolutionRules,
    ResolutionStrategy,
    TypeResolution,
)
from .type_names import (
    ArrayType,
    ReferenceType,
    ResolvedType,
    ScalarType,
    canonical_type_name,
    clean_type_string,
    extract_element_type,
    format_type_name,
    is_container_type,
    openapi_scalar,
    parse_type_name,
    schema_base_name,
    strip_resource_suffix,
    strip_version_suffix,
)

__all__ = [
    "DEFAULT_CORE_DOMAIN_TYPES",
    "DomainTypeRegistry",
    "DEFAULT_COMMON_BASE_TYPE_NAMES",
    "DEFAULT_KNOWN_COLLECTION_FIELDS",
    "DEFAULT_REPRESENTATION_LITERALS",
    "DEFAULT_WELL_KNOWN_FIELDS",
    "PropertyTypeResolver",
    "ResolutionRules",
    "ResolutionStrategy",
    "TypeResolution",
    "ArrayType",
    "ReferenceType",
    "ResolvedType",
    "ScalarType",
    "canonical_type_name",
    "clean_type_string",
    "extract_element_type",
    "format_type_name",
    "is_container_type",
    "openapi_scalar",
    "parse_type_name",
    "schema_base_name",
    "strip_resource_suffix",
    "strip_version_suffix",
]
