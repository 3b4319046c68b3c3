"""End-to-end schema assembly scenarios."""

from __future__ import annotations

import json
from pathlib import Path

from rest_schema_analyzer.resource_catalog import load_resource_catalog, parse_resource_catalog
from rest_schema_analyzer.schema_assembly import (
    ArrayProperty,
    ReferenceProperty,
    ScalarProperty,
    SchemaDocumentAssembler,
    find_dangling_references,
)


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def _patient_catalog():
    return parse_resource_catalog(
        {
            "types": {
                "Patient": {
                    "fields": {
                        "uuid": "String",
                        "display": "String",
                        "identifiers": "List<PatientIdentifier>",
                    }
                }
            },
            "resources": [
                {
                    "name": "patient",
                    "delegate_type": "Patient",
                    "representations": {
                        "default": ["uuid", "display"],
                        "full": ["uuid", "display", "identifiers"],
                    },
                }
            ],
        }
    )


def test_patient_scenario_produces_linked_schemas() -> None:
    document = SchemaDocumentAssembler().assemble(_patient_catalog())

    default = document.schemas["PatientDefault"]
    assert default.properties == {
        "uuid": ScalarProperty(type="string"),
        "display": ScalarProperty(type="string"),
    }

    full = document.schemas["PatientFull"]
    assert list(full.properties) == ["uuid", "display", "identifiers"]
    identifiers = full.properties["identifiers"]
    assert isinstance(identifiers, ArrayProperty)
    assert identifiers.items == ReferenceProperty(schema_name="PatientIdentifierDefault")

    safety_net = document.schemas["PatientIdentifierDefault"]
    assert {"id", "uuid", "display"} <= set(safety_net.properties)
    assert find_dangling_references(document) == []


def test_patient_scenario_renders_schema_section() -> None:
    rendered = SchemaDocumentAssembler().assemble(_patient_catalog()).to_dict()

    assert rendered["schemas"]["PatientFull"]["properties"]["identifiers"] == {
        "type": "array",
        "items": {"$ref": "#/schemas/PatientIdentifierDefault"},
        "description": "Array of PatientIdentifier",
    }
    assert rendered["paths"]["patient"]["discriminator"] == "v"
    assert rendered["paths"]["patient"]["representations"]["Full"] == "#/schemas/PatientFull"


def test_two_runs_are_byte_identical() -> None:
    catalog_path = _project_root() / "samples" / "sample-catalog.yaml"

    first = SchemaDocumentAssembler().assemble(load_resource_catalog(catalog_path))
    second = SchemaDocumentAssembler().assemble(load_resource_catalog(catalog_path))

    assert json.dumps(first.to_dict()) == json.dumps(second.to_dict())


def test_sample_catalog_covers_versioned_cyclic_and_unresolvable_resources() -> None:
    catalog = load_resource_catalog(_project_root() / "samples" / "sample-catalog.yaml")

    result = SchemaDocumentAssembler().assemble_with_report(catalog)
    document = result.document

    assert find_dangling_references(document) == []
    assert "legacyreport" not in document.paths
    assert [skipped.name for skipped in result.report.skipped] == ["legacyreport"]
    assert "LocationDefault" in document.schemas
    assert "UserDefault" in document.schemas
    assert document.schemas["EncounterDefault"].properties["obs"] == ArrayProperty(
        items=ReferenceProperty(schema_name="ObsDefault"), description="Array of Obs"
    )
    assert document.schemas["ObsDefault"].properties["value"] == ScalarProperty(type="number")
    assert "ConceptDefault" in document.schemas
