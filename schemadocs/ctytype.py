"""Type expressions of provider schemas and their Markdown labels."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any


class SchemaError(Exception):
    """Raised when a schema cannot be interpreted or rendered."""


class TypeKind(enum.Enum):
    """The kinds of value types a schema attribute may have."""

    STRING = "string"
    NUMBER = "number"
    BOOL = "bool"
    DYNAMIC = "dynamic"
    LIST = "list"
    SET = "set"
    MAP = "map"
    OBJECT = "object"
    TUPLE = "tuple"


_PRIMITIVE_KINDS = frozenset({TypeKind.STRING, TypeKind.NUMBER, TypeKind.BOOL})
_COLLECTION_KINDS = frozenset({TypeKind.LIST, TypeKind.SET, TypeKind.MAP})


@dataclass(frozen=True)
class CtyType:
    """An immutable value type: primitive, collection, object or tuple."""

    kind: TypeKind
    element: CtyType | None = None
    attributes: tuple[tuple[str, CtyType], ...] = ()
    elements: tuple[CtyType, ...] = ()

    def __post_init__(self) -> None:
        if self.kind in _COLLECTION_KINDS and self.element is None:
            raise SchemaError(f"{self.kind.value} type needs an element type")

    def is_primitive(self) -> bool:
        return self.kind in _PRIMITIVE_KINDS

    def is_collection(self) -> bool:
        return self.kind in _COLLECTION_KINDS

    def is_object(self) -> bool:
        return self.kind is TypeKind.OBJECT

    def is_tuple(self) -> bool:
        return self.kind is TypeKind.TUPLE

    @property
    def attribute_types(self) -> dict[str, CtyType]:
        """The attribute types of an object type, by name."""
        return dict(self.attributes)

    def friendly_name(self) -> str:
        """A short lower-case name for messages."""
        if self.is_collection():
            assert self.element is not None
            return f"{self.kind.value} of {self.element.friendly_name()}"
        return self.kind.value


STRING = CtyType(TypeKind.STRING)
NUMBER = CtyType(TypeKind.NUMBER)
BOOL = CtyType(TypeKind.BOOL)
DYNAMIC = CtyType(TypeKind.DYNAMIC)


def list_of(element: CtyType) -> CtyType:
    return CtyType(TypeKind.LIST, element=element)


def set_of(element: CtyType) -> CtyType:
    return CtyType(TypeKind.SET, element=element)


def map_of(element: CtyType) -> CtyType:
    return CtyType(TypeKind.MAP, element=element)


def object_of(attributes: Mapping[str, CtyType]) -> CtyType:
    return CtyType(TypeKind.OBJECT, attributes=tuple(sorted(attributes.items())))


def tuple_of(elements: Iterable[CtyType]) -> CtyType:
    return CtyType(TypeKind.TUPLE, elements=tuple(elements))


_PRIMITIVE_NAMES = {
    "string": STRING,
    "number": NUMBER,
    "bool": BOOL,
    "dynamic": DYNAMIC,
}

_COLLECTION_BUILDERS = {
    "list": list_of,
    "set": set_of,
    "map": map_of,
}


def parse_type(data: Any) -> CtyType:
    """Build a type from its JSON form, such as ``"string"`` or ``["list", "bool"]``."""
    if isinstance(data, str):
        try:
            return _PRIMITIVE_NAMES[data]
        except KeyError:
            raise SchemaError(f"invalid primitive type name {data!r}") from None

    if isinstance(data, (list, tuple)) and len(data) >= 2 and isinstance(data[0], str):
        kind_name, argument = data[0], data[1]
        if kind_name in _COLLECTION_BUILDERS:
            return _COLLECTION_BUILDERS[kind_name](parse_type(argument))
        if kind_name == "object":
            if not isinstance(argument, Mapping):
                raise SchemaError("object type needs a mapping of attribute types")
            return object_of({name: parse_type(spec) for name, spec in argument.items()})
        if kind_name == "tuple":
            if not isinstance(argument, (list, tuple)):
                raise SchemaError("tuple type needs a list of element types")
            return tuple_of(parse_type(spec) for spec in argument)

    raise SchemaError(f"invalid type specification {data!r}")


_PRIMITIVE_LABELS = {
    TypeKind.STRING: "String",
    TypeKind.BOOL: "Boolean",
    TypeKind.NUMBER: "Number",
}

_COLLECTION_LABELS = {
    TypeKind.LIST: "List of ",
    TypeKind.SET: "Set of ",
    TypeKind.MAP: "Map of ",
}


def type_name(ty: CtyType | None) -> str:
    """Return the label used for a type in the documentation."""
    if ty is None:
        raise SchemaError('unexpected type "nil type"')
    if ty.kind is TypeKind.DYNAMIC:
        return "Dynamic"
    if ty.is_primitive():
        return _PRIMITIVE_LABELS[ty.kind]
    if ty.is_collection():
        try:
            inner = type_name(ty.element)
        except SchemaError as exc:
            raise SchemaError(
                f'unable to write element type for "{ty.friendly_name()}": {exc}'
            ) from exc
        return _COLLECTION_LABELS[ty.kind] + inner
    if ty.is_tuple():
        return "Tuple"
    if ty.is_object():
        return "Object"
    raise SchemaError(f'unexpected type "{ty.friendly_name()}"')