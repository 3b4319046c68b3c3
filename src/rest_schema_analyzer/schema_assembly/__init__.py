"""Schema assembly exports."""

from .document_assembler import (
    AssemblyReport,
    AssemblyResult,
    SchemaDocumentAssembler,
    SkippedResource,
    assemble_document,
)
from .reference_validation import DanglingReference, find_dangling_references
from .representation_schema_builder import (
    DEFAULT_DEPTH_BUDGET,
    RepresentationSchemaBuilder,
    SchemaAssemblyError,
    SchemaBuildSession,
    SchemaNameCollisionError,
)
from .schema_models import (
    ArrayProperty,
    ObjectProperty,
    PathDescription,
    PropertySchema,
    ReferenceProperty,
    ScalarProperty,
    SchemaDocument,
    SchemaNode,
)
from .schema_naming import (
    schema_name,
    schema_name_for_delegate,
    schema_name_for_property_type,
    schema_name_for_resource,
    schema_reference,
)

__all__ = [
    "AssemblyReport",
    "AssemblyResult",
    "SchemaDocumentAssembler",
    "SkippedResource",
    "assemble_document",
    "DanglingReference",
    "find_dangling_references",
    "DEFAULT_DEPTH_BUDGET",
    "RepresentationSchemaBuilder",
    "SchemaAssemblyError",
    "SchemaBuildSession",
    "SchemaNameCollisionError",
    "ArrayProperty",
    "ObjectProperty",
    "PathDescription",
    "PropertySchema",
    "ReferenceProperty",
    "ScalarProperty",
    "SchemaDocument",
    "SchemaNode",
    "schema_name",
    "schema_name_for_delegate",
    "schema_name_for_property_type",
    "schema_name_for_resource",
    "schema_reference",
]
