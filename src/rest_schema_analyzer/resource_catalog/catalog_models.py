"""Resource catalog entities."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol


class RepresentationKind(str, Enum):
    """Named views of a resource."""

    REFERENCE = "ref"
    DEFAULT = "default"
    FULL = "full"
    CUSTOM = "custom"

    @property
    def label(self) -> str:
        """Capitalized label used in schema names, e.g. ``Ref`` or ``Default``."""
        return self.value.capitalize()


STANDARD_REPRESENTATIONS = (
    RepresentationKind.REFERENCE,
    RepresentationKind.DEFAULT,
    RepresentationKind.FULL,
)

_REPRESENTATION_ALIASES = {
    "ref": RepresentationKind.REFERENCE,
    "reference": RepresentationKind.REFERENCE,
    "default": RepresentationKind.DEFAULT,
    "full": RepresentationKind.FULL,
    "custom": RepresentationKind.CUSTOM,
}


def parse_representation_kind(value: str) -> RepresentationKind | None:
    """Map a representation label in any casing to its kind, or None when unknown."""
    return _REPRESENTATION_ALIASES.get(value.strip().lower())


class IntrospectableType(Protocol):
    """Capability every delegate-type adapter must provide."""

    @property
    def simple_name(self) -> str:
        """Unqualified type name, e.g. ``Patient``."""

    def field_types(self) -> Mapping[str, str]:
        """Declared and inherited gettable fields mapped to their type names."""

    def field_type(self, field_name: str) -> str | None:
        """Type name of one field, or None when the type has no such field."""


@dataclass(frozen=True)
class FieldDescriptor:  # pylint: disable=too-many-instance-attributes
    """One field exposed by one representation of a resource."""

    name: str
    explicit_type_hint: str | None = None
    nested_representation: str | None = None
    alias_field: str | None = None
    accessor_type: str | None = None
    required: bool = False


class RepresentationHandler(Protocol):
    """Capability answering which fields a representation exposes."""

    def representation_fields(
        self, kind: RepresentationKind
    ) -> Sequence[FieldDescriptor] | None:
        """Return the field list, or None when the representation is unsupported."""


@dataclass(frozen=True)
class StaticRepresentationHandler:
    """Handler backed by fixed per-representation field lists."""

    representations: Mapping[RepresentationKind, tuple[FieldDescriptor, ...]]

    def representation_fields(
        self, kind: RepresentationKind
    ) -> Sequence[FieldDescriptor] | None:
        return self.representations.get(kind)


@dataclass(frozen=True)
class ResourceDescriptor:
    """One externally addressable resource and the domain type it wraps."""

    name: str
    delegate_type: IntrospectableType | None
    handler: RepresentationHandler
    resource_class: str | None = None
    declared_properties: Mapping[str, str] = field(default_factory=dict)

    @property
    def resource_type(self) -> str:
        """Last segment of the resource name (``module/queue-room`` -> ``queue-room``)."""
        return self.name.rsplit("/", 1)[-1]


@dataclass(frozen=True)
class ResourceCatalog:
    """Ordered resources plus the named types they were described with."""

    resources: tuple[ResourceDescriptor, ...]
    types: Mapping[str, IntrospectableType] = field(default_factory=dict)

    def __iter__(self) -> Iterator[ResourceDescriptor]:
        return iter(self.resources)

    def __len__(self) -> int:
        return len(self.resources)
