"""CLI orchestration integration tests."""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from click.testing import CliRunner
from rest_schema_analyzer.cli import cli, main


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def _sample_catalog() -> Path:
    return _project_root() / "samples" / "sample-catalog.yaml"


def test_generate_writes_json_document(tmp_path: Path) -> None:
    runner = CliRunner()
    output_path = tmp_path / "out" / "openapi.json"

    result = runner.invoke(
        cli,
        ["generate", "--catalog", str(_sample_catalog()), "--output", str(output_path)],
    )

    assert result.exit_code == 0
    assert str(output_path.resolve()) in result.output
    document = json.loads(output_path.read_text(encoding="utf-8"))
    assert document["openapi"] == "3.0.1"
    assert "/ws/rest/v1/patient/{uuid}" in document["paths"]
    assert "/ws/rest/v1/legacyreport/{uuid}" not in document["paths"]
    assert "PatientFull" in document["components"]["schemas"]


def test_generate_prints_yaml_to_stdout(capsys) -> None:
    exit_code = main(["generate", "--catalog", str(_sample_catalog()), "--format", "yaml"])
    captured = capsys.readouterr()

    assert exit_code == 0
    document = yaml.safe_load(captured.out)
    assert document["info"]["title"] == "REST API"
    assert "ObsDefault" in document["components"]["schemas"]


def test_generate_uses_configuration_for_common_base_types(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = tmp_path / "analyzer.yaml"
    config_path.write_text(
        "common_base_types: [Obs]\napi:\n  title: Clinic API\n  base_path: /api\n",
        encoding="utf-8",
    )
    output_path = tmp_path / "openapi.yaml"

    result = runner.invoke(
        cli,
        [
            "generate",
            "--catalog",
            str(_sample_catalog()),
            "--config",
            str(config_path),
            "--output",
            str(output_path),
        ],
    )

    assert result.exit_code == 0
    document = yaml.safe_load(output_path.read_text(encoding="utf-8"))
    assert document["info"]["title"] == "Clinic API"
    assert "/api/patient/{uuid}" in document["paths"]
    patient_default = document["components"]["schemas"]["PatientDefault"]
    assert patient_default["properties"]["person"] == {"$ref": "#/components/schemas/PersonDefault"}


def test_generate_config_writes_scaffold(tmp_path: Path) -> None:
    runner = CliRunner()
    output_path = tmp_path / "analyzer.yaml"

    result = runner.invoke(cli, ["generate-config", "--output", str(output_path)])

    assert result.exit_code == 0
    assert str(output_path.resolve()) in result.output
    assert yaml.safe_load(output_path.read_text(encoding="utf-8"))["depth_budget"] == 2
