"""One-line summaries of attributes and blocks for schema documentation."""

from __future__ import annotations

from schemadocs.ctytype import SchemaError, type_name
from schemadocs.schema import (
    NestingMode,
    SchemaAttribute,
    SchemaBlockType,
    attribute_is_optional,
    attribute_is_read_only,
    attribute_is_required,
    block_is_optional,
    block_is_read_only,
    block_is_required,
)

WRITE_ONLY_LABEL = (
    "[Write-only](https://developer.hashicorp.com/terraform/language/resources/"
    "ephemeral#write-only-arguments)"
)

_MODE_SUFFIXES = {
    NestingMode.SINGLE: "",
    NestingMode.LIST: " List",
    NestingMode.SET: " Set",
    NestingMode.MAP: " Map",
}


def _attribute_state(att: SchemaAttribute) -> str:
    if attribute_is_required(att):
        return "Required"
    if attribute_is_optional(att):
        return "Optional"
    if attribute_is_read_only(att):
        return "Read-only"
    raise SchemaError("attribute does not match any filter states")


def _block_state(block: SchemaBlockType) -> str:
    if block_is_required(block):
        return "Required"
    if block_is_optional(block):
        return "Optional"
    if block_is_read_only(block):
        return "Read-only"
    raise SchemaError("block does not match any filter states")


def _attribute_flags(att: SchemaAttribute) -> list[str]:
    flags = []
    if att.sensitive:
        flags.append("Sensitive")
    if att.deprecated:
        flags.append("Deprecated")
    if att.write_only:
        flags.append(WRITE_ONLY_LABEL)
    return flags


def _finish(parts: list[str], description: str) -> str:
    text = "(" + ", ".join(parts) + ")"
    desc = description.strip()
    return f"{text} {desc}" if desc else text


def attribute_description(att: SchemaAttribute, include_rw: bool) -> str:
    """Describe an attribute with a plain type, e.g. ``(String, Required) Text.``"""
    parts = [type_name(att.attribute_type)]
    if include_rw:
        parts.append(_attribute_state(att))
    parts.extend(_attribute_flags(att))
    return _finish(parts, att.description)


def block_type_description(block: SchemaBlockType) -> str:
    """Describe a nested block, e.g. ``(Block List, Min: 1, Max: 4) Text.``"""
    mode = block.nesting_mode
    if mode not in _MODE_SUFFIXES:
        raise SchemaError(f"unexpected nesting mode for block: {mode.value}")
    parts = ["Block" + _MODE_SUFFIXES[mode]]

    if mode is NestingMode.SINGLE:
        parts.append(_block_state(block))
    elif block.min_items > 0:
        parts.append(f"Min: {block.min_items}")

    if block.max_items > 0:
        parts.append(f"Max: {block.max_items}")
    if block.block.deprecated:
        parts.append("Deprecated")
    return _finish(parts, block.block.description)


def nested_attribute_type_description(att: SchemaAttribute, include_rw: bool) -> str:
    """Describe an attribute with nested attributes, e.g. ``(Attributes Set, Min: 5) Text.``"""
    nested = att.attribute_nested_type
    if nested is None:
        raise SchemaError("attribute has no nested attribute type")

    mode = nested.nesting_mode
    if mode not in _MODE_SUFFIXES:
        raise SchemaError(f"unexpected nesting mode for attributes: {mode.value}")
    parts = ["Attributes" + _MODE_SUFFIXES[mode]]

    if mode is NestingMode.SINGLE:
        if include_rw:
            parts.append(_attribute_state(att))
    elif nested.min_items > 0:
        parts.append(f"Min: {nested.min_items}")

    if nested.max_items > 0:
        parts.append(f"Max: {nested.max_items}")
    parts.extend(_attribute_flags(att))
    return _finish(parts, att.description)