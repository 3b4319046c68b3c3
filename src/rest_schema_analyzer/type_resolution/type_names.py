"""Canonical type-name formatting and parsing.

Type names travel between metadata sources as display strings such as
``List<PatientIdentifier>``. Inside the engine they are parsed into a small
tagged union so that nested generics never need string surgery downstream.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

CONTAINER_TYPES = ("List", "Set", "Collection")
DEFAULT_ELEMENT_TYPE = "Object"

_PROVENANCE_MARKER = " (from "
_VERSION_SUFFIX = re.compile(r"\d+_\d+$")
_COMPOUND_SEPARATOR = "And"
RESOURCE_SUFFIX = "Resource"

_OPENAPI_SCALARS: dict[str, tuple[str, str | None]] = {
    "string": ("string", None),
    "char": ("string", None),
    "character": ("string", None),
    "integer": ("integer", None),
    "int": ("integer", None),
    "short": ("integer", None),
    "byte": ("integer", None),
    "long": ("integer", "int64"),
    "number": ("number", None),
    "double": ("number", None),
    "float": ("number", None),
    "bigdecimal": ("number", None),
    "boolean": ("boolean", None),
    "bool": ("boolean", None),
    "date": ("string", "date-time"),
    "datetime": ("string", "date-time"),
    "timestamp": ("string", "date-time"),
    "instant": ("string", "date-time"),
    "localdate": ("string", "date-time"),
    "localdatetime": ("string", "date-time"),
}


@dataclass(frozen=True)
class ScalarType:
    """A leaf type that is rendered inline."""

    name: str


@dataclass(frozen=True)
class ReferenceType:
    """A referenceable domain type that gets its own named schema."""

    type_name: str


@dataclass(frozen=True)
class ArrayType:
    """A container over another resolved type."""

    element: ResolvedType
    container: str = "List"


ResolvedType = ScalarType | ReferenceType | ArrayType


def clean_type_string(type_string: str | None) -> str:
    """Drop provenance annotations: ``User (from DEFAULT representation)`` -> ``User``."""
    if type_string is None:
        return "String"
    marker = type_string.find(_PROVENANCE_MARKER)
    if marker > 0:
        return type_string[:marker].strip()
    return type_string.strip()


def strip_version_suffix(name: str) -> str:
    """``PatientResource1_8`` -> ``PatientResource``."""
    return _VERSION_SUFFIX.sub("", name)


def canonical_type_name(simple_name: str) -> str:
    """Collapse versioned and compound delegate names to their base name.

    ``Patient1_8`` -> ``Patient``, ``UserAndPassword1_8`` -> ``User``.
    """
    base = strip_version_suffix(simple_name)
    head, separator, _ = base.partition(_COMPOUND_SEPARATOR)
    if separator and head:
        return head
    return base


def strip_resource_suffix(identity: str) -> str:
    if identity.endswith(RESOURCE_SUFFIX) and identity != RESOURCE_SUFFIX:
        return identity[: -len(RESOURCE_SUFFIX)]
    return identity


def schema_base_name(simple_name: str) -> str:
    """Base every schema name of a delegate starts with: ``PatientResource1_8`` -> ``Patient``."""
    return strip_resource_suffix(canonical_type_name(simple_name))


def split_generic(type_string: str) -> tuple[str, tuple[str, ...]]:
    """Split ``Map<String, List<X>>`` into ``("Map", ("String", "List<X>"))``.

    Commas nested inside inner brackets never split an argument. Strings
    without a well-formed argument list come back with no arguments.
    """
    text = type_string.strip()
    start = text.find("<")
    end = text.rfind(">")
    if start <= 0 or end <= start:
        return text, ()

    raw_name = text[:start].strip()
    arguments: list[str] = []
    depth = 0
    current: list[str] = []
    for char in text[start + 1 : end]:
        if char == "<":
            depth += 1
        elif char == ">":
            depth -= 1
        elif char == "," and depth == 0:
            arguments.append("".join(current).strip())
            current = []
            continue
        current.append(char)
    arguments.append("".join(current).strip())
    return raw_name, tuple(argument for argument in arguments if argument)


def is_container_type(type_string: str) -> bool:
    raw_name, _ = split_generic(clean_type_string(type_string))
    return raw_name in CONTAINER_TYPES


def extract_element_type(type_string: str) -> str:
    """Element type of a container string; the first argument wins for multi-argument generics."""
    _, arguments = split_generic(clean_type_string(type_string))
    return arguments[0] if arguments else DEFAULT_ELEMENT_TYPE


def parse_type_name(type_string: str, is_referenceable: Callable[[str], bool]) -> ResolvedType:
    """Parse a display string into the tagged union."""
    cleaned = clean_type_string(type_string)
    raw_name, _ = split_generic(cleaned)
    if raw_name in CONTAINER_TYPES:
        element = parse_type_name(extract_element_type(cleaned), is_referenceable)
        return ArrayType(element=element, container=raw_name)
    if is_referenceable(cleaned):
        return ReferenceType(type_name=cleaned)
    return ScalarType(name=cleaned)


def format_type_name(resolved: ResolvedType) -> str:
    """Render the tagged union back to its display string."""
    if isinstance(resolved, ArrayType):
        return f"{resolved.container}<{format_type_name(resolved.element)}>"
    if isinstance(resolved, ReferenceType):
        return resolved.type_name
    return resolved.name


def openapi_scalar(type_name: str) -> tuple[str, str | None] | None:
    """OpenAPI ``(type, format)`` for a scalar type name, or None for complex types."""
    return _OPENAPI_SCALARS.get(clean_type_string(type_name).lower())
