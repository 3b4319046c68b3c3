"""Document writing exports."""

from .document_writer import (
    OutputFormat,
    output_format_for_path,
    serialize_document,
    write_document,
)
from .openapi_renderer import (
    COMPONENT_SCHEMA_PREFIX,
    OPENAPI_VERSION,
    render_openapi,
    render_path_item,
    resource_path,
)

__all__ = [
    "OutputFormat",
    "output_format_for_path",
    "serialize_document",
    "write_document",
    "COMPONENT_SCHEMA_PREFIX",
    "OPENAPI_VERSION",
    "render_openapi",
    "render_path_item",
    "resource_path",
]
