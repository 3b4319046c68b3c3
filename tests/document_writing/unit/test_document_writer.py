"""Document serialization tests."""

from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType

import pytest
import yaml
from rest_schema_analyzer.document_writing import (
    OutputFormat,
    output_format_for_path,
    serialize_document,
    write_document,
)


def _document() -> dict:
    shared = {"type": "string"}
    return {
        "openapi": "3.0.1",
        "components": MappingProxyType({"schemas": {"A": {"properties": {"x": shared, "y": shared}}}}),
        "tags": ("b", "a"),
    }


def test_serializes_json_with_stable_order() -> None:
    text = serialize_document(_document(), OutputFormat.JSON)

    assert text.endswith("\n")
    assert list(json.loads(text)) == ["openapi", "components", "tags"]
    assert json.loads(text)["tags"] == ["b", "a"]


def test_serializes_yaml_without_aliases() -> None:
    text = serialize_document(_document(), "yaml")

    assert "&id" not in text
    assert text.startswith("openapi:")
    assert yaml.safe_load(text)["openapi"] == "3.0.1"
    assert yaml.safe_load(text)["components"]["schemas"]["A"]["properties"]["y"] == {"type": "string"}


def test_unknown_format_is_rejected() -> None:
    with pytest.raises(ValueError):
        serialize_document({}, "xml")


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("openapi.yaml", OutputFormat.YAML),
        ("openapi.YML", OutputFormat.YAML),
        ("openapi.json", OutputFormat.JSON),
        ("openapi.txt", OutputFormat.JSON),
    ],
)
def test_output_format_for_path(path: str, expected: OutputFormat) -> None:
    assert output_format_for_path(path) is expected


def test_write_document_creates_parent_directories(tmp_path: Path) -> None:
    destination = tmp_path / "build" / "openapi.json"

    written = write_document("{}\n", destination)

    assert written == destination.resolve()
    assert destination.read_text(encoding="utf-8") == "{}\n"
