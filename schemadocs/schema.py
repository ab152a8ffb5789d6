"""Provider schema model and the rules that place its members into groups."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from schemadocs.ctytype import CtyType, SchemaError, parse_type


class NestingMode(enum.Enum):
    """How a nested block or nested attribute type repeats."""

    SINGLE = "single"
    GROUP = "group"
    LIST = "list"
    SET = "set"
    MAP = "map"


def _nesting_mode(data: Mapping[str, Any]) -> NestingMode:
    raw = data.get("nesting_mode", NestingMode.SINGLE.value)
    try:
        return NestingMode(raw)
    except ValueError:
        raise SchemaError(f"unexpected nesting mode: {raw}") from None


@dataclass
class SchemaAttribute:
    """A single attribute of a block or nested attribute type."""

    attribute_type: CtyType | None = None
    attribute_nested_type: SchemaNestedAttributeType | None = None
    description: str = ""
    required: bool = False
    optional: bool = False
    computed: bool = False
    sensitive: bool = False
    deprecated: bool = False
    write_only: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SchemaAttribute:
        nested = data.get("nested_type")
        return cls(
            attribute_type=parse_type(data["type"]) if data.get("type") is not None else None,
            attribute_nested_type=(
                SchemaNestedAttributeType.from_dict(nested) if nested is not None else None
            ),
            description=data.get("description", "") or "",
            required=bool(data.get("required", False)),
            optional=bool(data.get("optional", False)),
            computed=bool(data.get("computed", False)),
            sensitive=bool(data.get("sensitive", False)),
            deprecated=bool(data.get("deprecated", False)),
            write_only=bool(data.get("write_only", False)),
        )


@dataclass
class SchemaNestedAttributeType:
    """Attributes nested under an attribute, with their nesting mode."""

    attributes: dict[str, SchemaAttribute] = field(default_factory=dict)
    nesting_mode: NestingMode = NestingMode.SINGLE
    min_items: int = 0
    max_items: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SchemaNestedAttributeType:
        return cls(
            attributes={
                name: SchemaAttribute.from_dict(spec)
                for name, spec in (data.get("attributes") or {}).items()
            },
            nesting_mode=_nesting_mode(data),
            min_items=int(data.get("min_items", 0) or 0),
            max_items=int(data.get("max_items", 0) or 0),
        )


@dataclass
class SchemaBlock:
    """A block: attributes, nested blocks, description and deprecation."""

    attributes: dict[str, SchemaAttribute] = field(default_factory=dict)
    nested_blocks: dict[str, SchemaBlockType] = field(default_factory=dict)
    description: str = ""
    deprecated: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SchemaBlock:
        return cls(
            attributes={
                name: SchemaAttribute.from_dict(spec)
                for name, spec in (data.get("attributes") or {}).items()
            },
            nested_blocks={
                name: SchemaBlockType.from_dict(spec)
                for name, spec in (data.get("block_types") or {}).items()
            },
            description=data.get("description", "") or "",
            deprecated=bool(data.get("deprecated", False)),
        )


@dataclass
class SchemaBlockType:
    """A nested block together with its nesting mode and item limits."""

    block: SchemaBlock = field(default_factory=SchemaBlock)
    nesting_mode: NestingMode = NestingMode.SINGLE
    min_items: int = 0
    max_items: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SchemaBlockType:
        return cls(
            block=SchemaBlock.from_dict(data.get("block") or {}),
            nesting_mode=_nesting_mode(data),
            min_items=int(data.get("min_items", 0) or 0),
            max_items=int(data.get("max_items", 0) or 0),
        )


@dataclass
class Schema:
    """A versioned schema with its root block."""

    block: SchemaBlock = field(default_factory=SchemaBlock)
    version: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Schema:
        return cls(
            block=SchemaBlock.from_dict(data.get("block") or {}),
            version=int(data.get("version", 0) or 0),
        )


def attribute_is_required(att: SchemaAttribute) -> bool:
    return att.required


def attribute_is_write_only(att: SchemaAttribute) -> bool:
    return att.write_only


def attribute_is_optional(att: SchemaAttribute) -> bool:
    return att.optional


def attribute_is_read_only(att: SchemaAttribute) -> bool:
    """Read-only means computed but neither optional nor required."""
    return att.computed and not att.optional and not att.required


def block_is_required(block: SchemaBlockType) -> bool:
    return block.min_items > 0


def block_is_optional(block: SchemaBlockType) -> bool:
    """True for blocks with no minimum that are empty or have a settable child."""
    if block.min_items > 0:
        return False
    inner = block.block
    if not inner.nested_blocks and not inner.attributes:
        return True
    if any(
        block_is_required(child) or block_is_optional(child)
        for child in inner.nested_blocks.values()
    ):
        return True
    return any(
        attribute_is_required(att) or attribute_is_optional(att)
        for att in inner.attributes.values()
    )


def block_is_read_only(block: SchemaBlockType) -> bool:
    """True for blocks without item limits whose leaves are all read-only."""
    if block.min_items != 0 or block.max_items != 0:
        return False
    inner = block.block
    return all(block_is_read_only(child) for child in inner.nested_blocks.values()) and all(
        attribute_is_read_only(att) for att in inner.attributes.values()
    )


def block_contains_write_only(block: SchemaBlockType) -> bool:
    """True for blocks holding a write-only attribute at any depth."""
    inner = block.block
    return any(block_contains_write_only(child) for child in inner.nested_blocks.values()) or any(
        attribute_is_write_only(att) for att in inner.attributes.values()
    )