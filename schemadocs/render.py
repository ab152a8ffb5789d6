"""Markdown rendering of a complete provider schema."""

from __future__ import annotations

import io
from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace

from schemadocs.ctytype import CtyType, SchemaError, type_name
from schemadocs.descriptions import (
    attribute_description,
    block_type_description,
    nested_attribute_type_description,
)
from schemadocs.schema import (
    Schema,
    SchemaAttribute,
    SchemaBlock,
    SchemaBlockType,
    SchemaNestedAttributeType,
    attribute_is_optional,
    attribute_is_read_only,
    attribute_is_required,
    attribute_is_write_only,
    block_contains_write_only,
    block_is_optional,
    block_is_read_only,
    block_is_required,
)

_DEFAULT_ID_DESCRIPTION = "The ID of this resource."

_WRITE_ONLY_NOTE = (
    "> **NOTE**: [Write-only arguments](https://developer.hashicorp.com/terraform/"
    "language/resources/ephemeral#write-only-arguments) are supported in Terraform "
    "1.11 and later.\n\n"
)


@dataclass(frozen=True)
class _GroupFilter:
    """A characteristic group with its headings and membership tests."""

    top_level_title: str
    nested_title: str
    filter_attribute: Callable[[SchemaAttribute], bool]
    filter_block: Callable[[SchemaBlockType], bool]


_GROUP_FILTERS: tuple[_GroupFilter, ...] = (
    _GroupFilter("### Required", "Required:", attribute_is_required, block_is_required),
    _GroupFilter("### Optional", "Optional:", attribute_is_optional, block_is_optional),
    _GroupFilter("### Read-Only", "Read-Only:", attribute_is_read_only, block_is_read_only),
)


@dataclass(frozen=True)
class _NestedType:
    """A nested schema section still to be written below its parent."""

    anchor_id: str
    path_title: str
    path: tuple[str, ...]
    group: _GroupFilter | None = None
    block: SchemaBlock | None = None
    object: CtyType | None = None
    attrs: SchemaNestedAttributeType | None = None


def _quoted(name: str) -> str:
    return f'"{name}"'


def _see_below(anchor_id: str) -> str:
    return f" (see [below for nested schema](#{anchor_id}))"


class _Renderer:
    """Accumulates the Markdown text of a schema."""

    def __init__(self) -> None:
        self._out = io.StringIO()

    @property
    def text(self) -> str:
        return self._out.getvalue()

    def _write(self, text: str) -> None:
        self._out.write(text)

    def attribute(
        self, path: tuple[str, ...], att: SchemaAttribute, group: _GroupFilter
    ) -> list[_NestedType]:
        name = path[-1]
        self._write(f"- `{name}` ")
        if att.attribute_nested_type is None:
            self._write(attribute_description(att, False))
        else:
            self._write(nested_attribute_type_description(att, False))

        ty = att.attribute_type
        if ty is not None and ty.is_tuple():
            raise SchemaError("TODO: tuples are not yet supported")

        anchor_id = "nestedatt--" + "--".join(path)
        path_title = ".".join(path)
        nested: list[_NestedType] = []
        if att.attribute_nested_type is not None:
            self._write(_see_below(anchor_id))
            nested.append(
                _NestedType(anchor_id, path_title, path, group, attrs=att.attribute_nested_type)
            )
        elif ty is not None and ty.is_object():
            self._write(_see_below(anchor_id))
            nested.append(_NestedType(anchor_id, path_title, path, group, object=ty))
        elif (
            ty is not None
            and ty.is_collection()
            and ty.element is not None
            and ty.element.is_object()
        ):
            self._write(_see_below(anchor_id))
            nested.append(_NestedType(anchor_id, path_title, path, group, object=ty.element))

        self._write("\n")
        return nested

    def block_type(self, path: tuple[str, ...], block: SchemaBlockType) -> list[_NestedType]:
        name = path[-1]
        self._write(f"- `{name}` ")
        try:
            self._write(block_type_description(block))
        except SchemaError as exc:
            raise SchemaError(
                f"unable to write block description for {_quoted(name)}: {exc}"
            ) from exc

        anchor_id = "nestedblock--" + "--".join(path)
        self._write(_see_below(anchor_id) + "\n")
        return [_NestedType(anchor_id, ".".join(path), path, block=block.block)]

    def block_children(
        self, parents: tuple[str, ...], block: SchemaBlock, root: bool
    ) -> None:
        attributes = dict(block.attributes)
        groups: dict[int, list[str]] = {}

        for name in [*block.attributes, *block.nested_blocks]:
            index = self._classify(name, parents, block, attributes)
            groups.setdefault(index, []).append(name)

        nested: list[_NestedType] = []
        for index, gf in enumerate(_GROUP_FILTERS):
            names = sorted(groups.get(index, []))
            if not names:
                continue

            self._write((gf.top_level_title if root else gf.nested_title) + "\n\n")

            if any(self._is_write_only(name, block, attributes) for name in names):
                self._write(_WRITE_ONLY_NOTE)

            for name in names:
                path = (*parents, name)
                child_block = block.nested_blocks.get(name)
                if child_block is not None:
                    try:
                        nested.extend(self.block_type(path, child_block))
                    except SchemaError as exc:
                        raise SchemaError(
                            f"unable to render block {_quoted(name)}: {exc}"
                        ) from exc
                    continue
                att = attributes.get(name)
                if att is None:
                    raise SchemaError(f"unexpected name in schema render {_quoted(name)}")
                try:
                    nested.extend(self.attribute(path, att, gf))
                except SchemaError as exc:
                    raise SchemaError(
                        f"unable to render attribute {_quoted(name)}: {exc}"
                    ) from exc

            self._write("\n")

        self.nested_types(nested)

    @staticmethod
    def _classify(
        name: str,
        parents: tuple[str, ...],
        block: SchemaBlock,
        attributes: dict[str, SchemaAttribute],
    ) -> int:
        child_block = block.nested_blocks.get(name)
        if child_block is not None:
            for index, gf in enumerate(_GROUP_FILTERS):
                if gf.filter_block(child_block):
                    return index
        else:
            att = attributes.get(name)
            if att is not None:
                for index, gf in enumerate(_GROUP_FILTERS):
                    # A top-level `id` without a description is documented as read-only.
                    if name.lower() == "id" and not parents and att.description == "":
                        if "Read-Only" in gf.top_level_title:
                            attributes[name] = replace(att, description=_DEFAULT_ID_DESCRIPTION)
                            return index
                    elif gf.filter_attribute(att):
                        return index

        raise SchemaError(
            f"no match for {_quoted(name)}, this can happen if you have incompatible schema "
            "defined, for example an optional block where all the child attributes are "
            "computed, in which case the block itself should also be marked computed"
        )

    @staticmethod
    def _is_write_only(
        name: str, block: SchemaBlock, attributes: dict[str, SchemaAttribute]
    ) -> bool:
        child_block = block.nested_blocks.get(name)
        if child_block is not None:
            return block_contains_write_only(child_block)
        att = attributes.get(name)
        return att is not None and attribute_is_write_only(att)

    def nested_types(self, nested: Sequence[_NestedType]) -> None:
        for nt in nested:
            self._write(f'<a id="{nt.anchor_id}"></a>\n')
            self._write(f"### Nested Schema for `{nt.path_title}`\n\n")

            if nt.block is not None:
                self.block_children(nt.path, nt.block, False)
            elif nt.object is not None and nt.group is not None:
                self.object_children(nt.path, nt.object, nt.group)
            elif nt.attrs is not None and nt.group is not None:
                self.nested_attribute_children(nt.path, nt.attrs, nt.group)
            else:
                raise SchemaError(
                    f"missing information on nested block: {'.'.join(nt.path)}"
                )

            self._write("\n")

    def object_attribute(
        self, path: tuple[str, ...], ty: CtyType, group: _GroupFilter
    ) -> list[_NestedType]:
        name = path[-1]
        self._write(f"- `{name}` ({type_name(ty)})")

        if ty.is_tuple():
            raise SchemaError("TODO: tuples are not yet supported")

        anchor_id = "nestedobjatt--" + "--".join(path)
        path_title = ".".join(path)
        nested: list[_NestedType] = []
        if ty.is_object():
            self._write(_see_below(anchor_id))
            nested.append(_NestedType(anchor_id, path_title, path, group, object=ty))
        elif ty.is_collection() and ty.element is not None and ty.element.is_object():
            self._write(_see_below(anchor_id))
            nested.append(_NestedType(anchor_id, path_title, path, group, object=ty.element))

        self._write("\n")
        return nested

    def object_children(
        self, parents: tuple[str, ...], ty: CtyType, group: _GroupFilter
    ) -> None:
        self._write(group.nested_title + "\n\n")

        attribute_types = ty.attribute_types
        nested: list[_NestedType] = []
        for name in sorted(attribute_types):
            try:
                nested.extend(
                    self.object_attribute((*parents, name), attribute_types[name], group)
                )
            except SchemaError as exc:
                raise SchemaError(
                    f"unable to render attribute {_quoted(name)}: {exc}"
                ) from exc

        self._write("\n")
        self.nested_types(nested)

    def nested_attribute_children(
        self,
        parents: tuple[str, ...],
        nested_attributes: SchemaNestedAttributeType,
        group: _GroupFilter,
    ) -> None:
        attributes = nested_attributes.attributes
        sorted_names = sorted(attributes)

        nested: list[_NestedType] = []
        for gf in _GROUP_FILTERS:
            names = [name for name in sorted_names if gf.filter_attribute(attributes[name])]
            if not names:
                continue

            self._write(gf.nested_title + "\n\n")
            for name in names:
                try:
                    nested.extend(self.attribute((*parents, name), attributes[name], group))
                except SchemaError as exc:
                    raise SchemaError(
                        f"unable to render attribute {_quoted(name)}: {exc}"
                    ) from exc
            self._write("\n")

        self.nested_types(nested)


def render(schema: Schema) -> str:
    """Return the Markdown documentation of a schema's root block."""
    renderer = _Renderer()
    try:
        renderer.block_children((), schema.block, True)
    except SchemaError as exc:
        raise SchemaError(f"unable to render schema: {exc}") from exc
    return "## Schema\n\n" + renderer.text