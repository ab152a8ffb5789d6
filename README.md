# schemadocs

`schemadocs` turns a provider schema into Markdown reference documentation. The schema
is given as a dictionary in the JSON form of a single resource or data source schema:
a `version` and a root `block` with `attributes` and `block_types`.

Attributes and blocks are sorted into **Required**, **Optional** and **Read-Only**
groups, and then alphabetically within each group. Nested blocks, attributes with
nested attributes, and object types (or collections of objects) each get an anchored
"Nested Schema" section below their parent.

## Installation

```
pip install .
```

The package has no runtime dependencies.

## Rendering a schema

```python
import json

from schemadocs.schema import Schema
from schemadocs.render import render

with open("aws_route_table_association.schema.json") as fh:
    schema = Schema.from_dict(json.load(fh))

print(render(schema))
```

`render(schema)` returns the document as a string that starts with `## Schema`.
Some rules apply:

- If a top-level attribute named `id` has no description, it is listed under
  Read-Only with the description "The ID of this resource."
- If a group contains a write-only attribute, or a block with a write-only attribute
  at any depth, the group begins with a note about write-only arguments.
- If the schema cannot be documented, `render` raises `schemadocs.ctytype.SchemaError`.
  Examples are an optional block whose children are all computed, an attribute of
  tuple type, or a block with an unsupported nesting mode.

`Schema.from_dict` and the other `from_dict` constructors raise `SchemaError` when
they meet an unknown type specification or nesting mode.

## Smaller pieces

- `schemadocs.ctytype` models attribute types with the immutable `CtyType` and the
  `TypeKind` enum. Build types with `parse_type` (from JSON forms such as `"string"`
  or `["list", ["object", {...}]]`), `list_of`, `set_of`, `map_of`, `object_of` and
  `tuple_of`. `type_name` gives the label used in the documentation, for example
  `List of Map of String`, `Dynamic`, `Object` or `Tuple`.
- `schemadocs.schema` provides the dataclasses `SchemaAttribute`,
  `SchemaNestedAttributeType`, `SchemaBlock`, `SchemaBlockType` and `Schema`, the
  `NestingMode` enum, and the predicates that classify members:
  `attribute_is_required`, `attribute_is_optional`, `attribute_is_read_only`,
  `attribute_is_write_only`, `block_is_required`, `block_is_optional`,
  `block_is_read_only` and `block_contains_write_only`.
- `schemadocs.descriptions` formats the one-line summaries used in list items:
  - `attribute_description(att, include_rw)` produces, for example,
    `(String, Required, Sensitive) The description.`
  - `block_type_description(block)` produces, for example,
    `(Block List, Min: 1, Max: 4) The description.`
  - `nested_attribute_type_description(att, include_rw)` produces, for example,
    `(Attributes Set, Min: 5) The description.`
- `schemadocs.tmplfuncs` holds helpers for documentation templates:
  - `prefix_lines(prefix, text)` puts `prefix` in front of every line of `text`.
  - `code_file(format, file)` returns the trimmed contents of a file as a fenced
    code block. It raises `OSError` if the file cannot be read and `ValueError` if
    the file is empty or contains only whitespace.

## What it does not do

`schemadocs` is a library only. It has no command-line tool. It does not fetch
schemas from a provider or run any other program. It does not write files, and it
does not process templates. You need to load the schema JSON and decide where the
rendered Markdown goes.

## Running the tests

```
pip install .[test]
pytest
```