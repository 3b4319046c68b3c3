"""Type name formatting and parsing tests."""

from __future__ import annotations

import pytest
from rest_schema_analyzer.type_resolution import (
    ArrayType,
    ReferenceType,
    ScalarType,
    canonical_type_name,
    clean_type_string,
    extract_element_type,
    format_type_name,
    is_container_type,
    openapi_scalar,
    parse_type_name,
    schema_base_name,
)
from rest_schema_analyzer.type_resolution.type_names import split_generic


def _domain(name: str) -> bool:
    return name in {"Patient", "PatientIdentifier"}


def test_clean_type_string_drops_provenance_annotation() -> None:
    assert clean_type_string("User (from DEFAULT representation)") == "User"
    assert clean_type_string("  String ") == "String"
    assert clean_type_string(None) == "String"


@pytest.mark.parametrize(
    ("simple_name", "expected"),
    [
        ("Patient", "Patient"),
        ("Patient1_8", "Patient"),
        ("UserAndPassword1_8", "User"),
        ("AndroidDevice", "AndroidDevice"),
        ("Concept2_0", "Concept"),
    ],
)
def test_canonical_type_name(simple_name: str, expected: str) -> None:
    assert canonical_type_name(simple_name) == expected


@pytest.mark.parametrize(
    ("simple_name", "expected"),
    [
        ("Patient", "Patient"),
        ("PatientResource", "Patient"),
        ("PatientResource1_8", "Patient"),
        ("UserAndPassword1_8", "User"),
        ("Resource", "Resource"),
    ],
)
def test_schema_base_name_drops_resource_suffix(simple_name: str, expected: str) -> None:
    assert schema_base_name(simple_name) == expected


def test_split_generic_is_bracket_aware() -> None:
    assert split_generic("Map<String, List<Obs>>") == ("Map", ("String", "List<Obs>"))
    assert split_generic("String") == ("String", ())
    assert split_generic("List<>") == ("List", ())


def test_container_detection_and_element_extraction() -> None:
    assert is_container_type("List<Patient>")
    assert is_container_type("Set<String>")
    assert is_container_type("Collection<Obs>")
    assert not is_container_type("Map<String, Obs>")
    assert not is_container_type("Patient")
    assert extract_element_type("Set<PatientIdentifier>") == "PatientIdentifier"
    assert extract_element_type("List<Map<String, Obs>>") == "Map<String, Obs>"
    assert extract_element_type("List") == "Object"


def test_parse_type_name_builds_tagged_union() -> None:
    assert parse_type_name("Patient", _domain) == ReferenceType("Patient")
    assert parse_type_name("Integer", _domain) == ScalarType("Integer")
    assert parse_type_name("Set<PatientIdentifier>", _domain) == ArrayType(
        element=ReferenceType("PatientIdentifier"), container="Set"
    )
    assert parse_type_name("List<List<String>>", _domain) == ArrayType(
        element=ArrayType(element=ScalarType("String"))
    )
    assert parse_type_name("Patient (from introspection)", _domain) == ReferenceType("Patient")


def test_format_type_name_renders_display_string() -> None:
    resolved = parse_type_name("Set<List<Patient>>", _domain)

    assert format_type_name(resolved) == "Set<List<Patient>>"


@pytest.mark.parametrize(
    ("type_name", "expected"),
    [
        ("String", ("string", None)),
        ("int", ("integer", None)),
        ("Long", ("integer", "int64")),
        ("Double", ("number", None)),
        ("BigDecimal", ("number", None)),
        ("Boolean", ("boolean", None)),
        ("Date", ("string", "date-time")),
        ("DateTime", ("string", "date-time")),
        ("Object", None),
        ("Map<String, Obs>", None),
    ],
)
def test_openapi_scalar(type_name: str, expected: tuple[str, str | None] | None) -> None:
    assert openapi_scalar(type_name) == expected
