"""Reference validation tests."""

from __future__ import annotations

from rest_schema_analyzer.schema_assembly import (
    ArrayProperty,
    DanglingReference,
    ObjectProperty,
    PathDescription,
    ReferenceProperty,
    ScalarProperty,
    SchemaDocument,
    SchemaNode,
    find_dangling_references,
)


def test_reports_missing_targets_in_properties_and_paths() -> None:
    patient = SchemaNode(
        name="PatientDefault",
        description="Default representation of patient",
        properties={
            "uuid": ScalarProperty(type="string"),
            "person": ReferenceProperty(schema_name="PersonDefault"),
            "identifiers": ArrayProperty(items=ReferenceProperty(schema_name="PatientIdentifierDefault")),
            "creator": ObjectProperty(properties={"user": ReferenceProperty(schema_name="UserRef")}),
        },
    )
    document = SchemaDocument(
        schemas={"PatientDefault": patient},
        paths={
            "patient": PathDescription(
                resource_name="patient",
                resource_type="patient",
                representation_schemas={"Default": "PatientDefault", "Full": "PatientFull"},
            )
        },
    )

    assert find_dangling_references(document) == [
        DanglingReference("schemas.PatientDefault.person", "PersonDefault"),
        DanglingReference("schemas.PatientDefault.identifiers[]", "PatientIdentifierDefault"),
        DanglingReference("schemas.PatientDefault.creator.user", "UserRef"),
        DanglingReference("paths.patient.Full", "PatientFull"),
    ]


def test_complete_document_has_no_dangling_references() -> None:
    person = SchemaNode(
        name="PersonDefault",
        description="Default representation of person",
        properties={"uuid": ScalarProperty(type="string")},
    )
    patient = SchemaNode(
        name="PatientDefault",
        description="Default representation of patient",
        properties={"person": ReferenceProperty(schema_name="PersonDefault")},
    )

    document = SchemaDocument(
        schemas={"PersonDefault": person, "PatientDefault": patient}, paths={}
    )

    assert find_dangling_references(document) == []
    assert document.to_dict()["schemas"]["PatientDefault"]["properties"]["person"] == {
        "$ref": "#/schemas/PersonDefault"
    }
