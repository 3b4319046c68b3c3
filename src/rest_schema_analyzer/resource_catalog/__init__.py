"""Resource catalog exports."""

from .catalog_models import (
    STANDARD_REPRESENTATIONS,
    FieldDescriptor,
    IntrospectableType,
    RepresentationHandler,
    RepresentationKind,
    ResourceCatalog,
    ResourceDescriptor,
    StaticRepresentationHandler,
    parse_representation_kind,
)
from .catalog_reader import CatalogError, load_resource_catalog, parse_resource_catalog
from .delegate_types import ClassDelegateType, StaticDelegateType, render_annotation

__all__ = [
    "STANDARD_REPRESENTATIONS",
    "FieldDescriptor",
    "IntrospectableType",
    "RepresentationHandler",
    "RepresentationKind",
    "ResourceCatalog",
    "ResourceDescriptor",
    "StaticRepresentationHandler",
    "parse_representation_kind",
    "CatalogError",
    "load_resource_catalog",
    "parse_resource_catalog",
    "ClassDelegateType",
    "StaticDelegateType",
    "render_annotation",
]
