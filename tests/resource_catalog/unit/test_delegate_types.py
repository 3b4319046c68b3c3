"""Delegate type adapter tests."""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, ClassVar, Optional

import pytest
from rest_schema_analyzer.resource_catalog import (
    ClassDelegateType,
    StaticDelegateType,
    render_annotation,
)


class PatientIdentifier:
    """Referenced only by annotation."""


@dataclass
class BaseData:
    uuid: str
    voided: bool = False
    date_created: datetime.datetime | None = None


@dataclass
class Patient(BaseData):
    identifiers: list[PatientIdentifier] = field(default_factory=list)
    tags: set[str] = field(default_factory=set)
    weight: Decimal | None = None
    registry: ClassVar[str] = "patients"
    _cache: dict[str, Any] = field(default_factory=dict)

    @property
    def display(self) -> str:
        return self.uuid

    @property
    def untyped(self):
        return None


def test_static_type_merges_parent_fields_with_child_overrides() -> None:
    base = StaticDelegateType(name="BaseOpenmrsData", declared_fields={"uuid": "String", "voided": "Boolean"})
    person = StaticDelegateType(
        name="Person", declared_fields={"voided": "Bool", "gender": "String"}, parent=base
    )

    assert person.simple_name == "Person"
    assert person.field_types() == {"uuid": "String", "voided": "Bool", "gender": "String"}
    assert person.field_type("uuid") == "String"
    assert person.field_type("missing") is None


def test_class_delegate_reads_annotations_across_mro_and_properties() -> None:
    delegate = ClassDelegateType(Patient)

    assert delegate.simple_name == "Patient"
    assert delegate.field_types() == {
        "uuid": "String",
        "voided": "Boolean",
        "date_created": "DateTime",
        "identifiers": "List<PatientIdentifier>",
        "tags": "Set<String>",
        "weight": "Number",
        "display": "String",
    }
    assert delegate.field_type("registry") is None
    assert delegate.field_type("_cache") is None
    assert delegate.field_type("untyped") is None


@pytest.mark.parametrize(
    ("annotation", "expected"),
    [
        (str, "String"),
        (int, "Integer"),
        (bool, "Boolean"),
        (float, "Number"),
        (datetime.date, "DateTime"),
        (Optional[int], "Integer"),
        (int | None, "Integer"),
        (int | str, "Object"),
        (list[str], "List<String>"),
        (tuple[PatientIdentifier, ...], "List<PatientIdentifier>"),
        (frozenset[int], "Set<Integer>"),
        (dict[str, int], "Map<String, Integer>"),
        (list, "List<Object>"),
        (dict, "Map<Object, Object>"),
        (Any, "Object"),
        (PatientIdentifier, "PatientIdentifier"),
        ("Encounter", "Encounter"),
    ],
)
def test_render_annotation(annotation: object, expected: str) -> None:
    assert render_annotation(annotation) == expected
