"""Cross-reference checks for assembled documents."""

from __future__ import annotations

from dataclasses import dataclass

from .schema_models import SchemaDocument


@dataclass(frozen=True)
class DanglingReference:
    """A reference whose target schema is missing from the document."""

    location: str
    target: str


def find_dangling_references(document: SchemaDocument) -> list[DanglingReference]:
    """Return every reference without a schema of that exact name, in document order."""
    return [
        DanglingReference(location=location, target=target)
        for location, target in document.references()
        if target not in document.schemas
    ]
