"""Serialize rendered documents to JSON or YAML text and write them out."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


class OutputFormat(str, Enum):
    """Supported document syntaxes."""

    JSON = "json"
    YAML = "yaml"


def output_format_for_path(
    path: Path | str, default: OutputFormat = OutputFormat.JSON
) -> OutputFormat:
    """Pick the syntax from a file suffix (``.yaml``/``.yml`` or ``.json``)."""
    suffix = Path(path).suffix.lower()
    if suffix in {".yaml", ".yml"}:
        return OutputFormat.YAML
    if suffix == ".json":
        return OutputFormat.JSON
    return default


def serialize_document(document: Mapping[str, Any], output_format: OutputFormat | str) -> str:
    """Render a plain mapping with stable key order and a trailing newline."""
    fmt = OutputFormat(output_format)
    if fmt is OutputFormat.YAML:
        return yaml.safe_dump(
            _plain(document), sort_keys=False, default_flow_style=False, allow_unicode=True
        )
    return json.dumps(_plain(document), indent=2, ensure_ascii=False) + "\n"


def write_document(text: str, output_path: Path | str) -> Path:
    """Write serialized document text, creating parent directories, and return the resolved path."""
    destination = Path(output_path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(text, encoding="utf-8")
    logger.info("Wrote schema document to %s", destination)
    return destination.resolve()


def _plain(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {str(key): _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value
