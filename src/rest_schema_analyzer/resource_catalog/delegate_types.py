"""Delegate-type adapters implementing the introspectable-type capability."""

from __future__ import annotations

import collections.abc
import datetime
import inspect
import types
import typing
import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, ClassVar, Union, get_args, get_origin, get_type_hints

_SCALAR_ANNOTATIONS: dict[Any, str] = {
    str: "String",
    bool: "Boolean",
    int: "Integer",
    float: "Number",
    Decimal: "Number",
    datetime.datetime: "DateTime",
    datetime.date: "DateTime",
    uuid.UUID: "String",
}

_LIST_ORIGINS = (
    list,
    tuple,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Collection,
    collections.abc.Iterable,
)
_SET_ORIGINS = (set, frozenset, collections.abc.Set, collections.abc.MutableSet)
_MAP_ORIGINS = (dict, collections.abc.Mapping, collections.abc.MutableMapping)


@dataclass(frozen=True, eq=False)
class StaticDelegateType:
    """Delegate type described by a fixed field table with optional single inheritance."""

    name: str
    declared_fields: Mapping[str, str] = field(default_factory=dict)
    parent: StaticDelegateType | None = None

    @property
    def simple_name(self) -> str:
        return self.name

    def field_types(self) -> dict[str, str]:
        resolved = self.parent.field_types() if self.parent is not None else {}
        resolved.update(self.declared_fields)
        return resolved

    def field_type(self, field_name: str) -> str | None:
        return self.field_types().get(field_name)


class ClassDelegateType:
    """Delegate type read from a Python class through its annotations.

    Public annotated attributes (inherited ones included) and ``property``
    return annotations become fields. ``ClassVar`` and underscore-prefixed
    names are not fields.
    """

    def __init__(self, cls: type) -> None:
        self._cls = cls

    @property
    def simple_name(self) -> str:
        return self._cls.__name__

    def field_types(self) -> dict[str, str]:
        fields: dict[str, str] = {}
        for name, annotation in _class_annotations(self._cls).items():
            if name.startswith("_") or _is_class_variable(annotation):
                continue
            fields[name] = render_annotation(annotation)
        properties = inspect.getmembers(self._cls, lambda value: isinstance(value, property))
        for name, member in properties:
            if name.startswith("_") or member.fget is None:
                continue
            returned = _function_annotations(member.fget).get("return")
            if returned is not None:
                fields[name] = render_annotation(returned)
        return fields

    def field_type(self, field_name: str) -> str | None:
        return self.field_types().get(field_name)


def render_annotation(annotation: Any) -> str:
    """Render a Python annotation as a canonical type name such as ``List<Patient>``."""
    if isinstance(annotation, str):
        return annotation.strip()
    if annotation is Any or annotation is object or annotation is None:
        return "Object"
    try:
        scalar = _SCALAR_ANNOTATIONS.get(annotation)
    except TypeError:
        scalar = None
    if scalar is not None:
        return scalar
    if annotation in _MAP_ORIGINS:
        return "Map<Object, Object>"
    if annotation in _SET_ORIGINS:
        return "Set<Object>"
    if annotation in _LIST_ORIGINS:
        return "List<Object>"

    origin = get_origin(annotation)
    args = get_args(annotation)
    if origin is Union or origin is types.UnionType:
        present = [arg for arg in args if arg is not type(None)]
        return render_annotation(present[0]) if len(present) == 1 else "Object"
    if origin in _MAP_ORIGINS:
        rendered = ", ".join(render_annotation(arg) for arg in args) or "Object, Object"
        return f"Map<{rendered}>"
    if origin in _SET_ORIGINS:
        return f"Set<{_element_name(args)}>"
    if origin in _LIST_ORIGINS:
        return f"List<{_element_name(args)}>"
    if origin is typing.Annotated and args:
        return render_annotation(args[0])
    if isinstance(annotation, type):
        return annotation.__name__
    return "Object"


def _element_name(args: tuple[Any, ...]) -> str:
    if not args:
        return "Object"
    return render_annotation(args[0])


def _is_class_variable(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return annotation.replace("typing.", "").startswith("ClassVar")
    return get_origin(annotation) is ClassVar or annotation is ClassVar


def _class_annotations(cls: type) -> dict[str, Any]:
    try:
        return get_type_hints(cls)
    except (NameError, TypeError):
        merged: dict[str, Any] = {}
        for klass in reversed(cls.__mro__):
            merged.update(getattr(klass, "__annotations__", {}))
        return merged


def _function_annotations(function: Any) -> dict[str, Any]:
    try:
        return get_type_hints(function)
    except (NameError, TypeError):
        return dict(getattr(function, "__annotations__", {}))
