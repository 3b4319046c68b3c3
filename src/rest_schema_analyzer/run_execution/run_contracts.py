"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from rest_schema_analyzer.configuration.runtime_settings import AnalyzerSettings
from rest_schema_analyzer.document_writing.document_writer import OutputFormat
from rest_schema_analyzer.resource_catalog.catalog_models import ResourceCatalog
from rest_schema_analyzer.schema_assembly.document_assembler import AssemblyReport


@dataclass(frozen=True)
class AnalysisRequest:
    """Input contract for one analysis run."""

    catalog_path: str
    config_path: str | None = None
    output_path: str | None = None
    output_format: OutputFormat | None = None


@dataclass(frozen=True)
class AnalysisOutcome:
    """Output contract for one completed run."""

    text: str
    output_path: Path | None
    report: AssemblyReport


@dataclass(frozen=True)
class AnalysisInputs:
    """Loaded inputs required during run execution."""

    settings: AnalyzerSettings
    catalog: ResourceCatalog
