"""Analysis run use-case service."""

from __future__ import annotations

import logging

from rest_schema_analyzer.configuration import ConfigurationError, load_configuration
from rest_schema_analyzer.document_writing import (
    OutputFormat,
    output_format_for_path,
    render_openapi,
    serialize_document,
    write_document,
)
from rest_schema_analyzer.resource_catalog import CatalogError, load_resource_catalog
from rest_schema_analyzer.schema_assembly import SchemaAssemblyError, SchemaDocumentAssembler

from .run_contracts import AnalysisInputs, AnalysisOutcome, AnalysisRequest

logger = logging.getLogger(__name__)


class AnalysisRunError(Exception):
    """Raised when an analysis run cannot be completed."""


def execute_schema_analysis_run(request: AnalysisRequest) -> AnalysisOutcome:
    """Load catalog and settings, assemble the document and serialize its OpenAPI rendering.

    The text is written to ``request.output_path`` when one is given.
    """
    inputs = _load_analysis_inputs(request.catalog_path, request.config_path)
    settings = inputs.settings
    assembler = SchemaDocumentAssembler(
        settings.resolution_rules(inputs.catalog.types),
        depth_budget=settings.depth_budget,
        core_domain_types=settings.core_domain_types,
    )
    try:
        result = assembler.assemble_with_report(inputs.catalog)
    except SchemaAssemblyError as exc:
        raise AnalysisRunError(str(exc)) from exc

    for skipped in result.report.skipped:
        logger.info("Skipped resource %s: %s", skipped.name, skipped.reason)

    output_format = request.output_format or (
        output_format_for_path(request.output_path) if request.output_path else OutputFormat.JSON
    )
    text = serialize_document(render_openapi(result.document, settings.api), output_format)

    output_path = None
    if request.output_path:
        try:
            output_path = write_document(text, request.output_path)
        except OSError as exc:
            raise AnalysisRunError(f"Failed to write schema document: {exc}") from exc
    return AnalysisOutcome(text=text, output_path=output_path, report=result.report)


def _load_analysis_inputs(catalog_path: str, config_path: str | None) -> AnalysisInputs:
    try:
        settings = load_configuration(config_path)
        catalog = load_resource_catalog(catalog_path)
    except (ConfigurationError, CatalogError, OSError) as exc:
        raise AnalysisRunError(str(exc)) from exc
    return AnalysisInputs(settings=settings, catalog=catalog)
