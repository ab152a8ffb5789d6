import pytest

from schemadocs.ctytype import STRING, SchemaError
from schemadocs.descriptions import (
    attribute_description,
    block_type_description,
    nested_attribute_type_description,
)
from schemadocs.schema import (
    NestingMode,
    SchemaAttribute,
    SchemaBlock,
    SchemaBlockType,
    SchemaNestedAttributeType,
)

ATT = "This is an attribute."
BLK = "This is a block."
WO = (
    "[Write-only](https://developer.hashicorp.com/terraform/language/resources/"
    "ephemeral#write-only-arguments)"
)


def _att(description=ATT, **flags):
    return SchemaAttribute(attribute_type=STRING, description=description, **flags)


@pytest.mark.parametrize(
    "expected, att",
    [
        ("(String, Required) This is an attribute.", _att(required=True)),
        (f"(String, Required, {WO}) This is an attribute.", _att(required=True, write_only=True)),
        ("(String, Required, Deprecated) This is an attribute.", _att(required=True, deprecated=True)),
        (
            "(String, Required, Sensitive, Deprecated) This is an attribute.",
            _att(required=True, deprecated=True, sensitive=True),
        ),
        ("(String, Optional) This is an attribute.", _att(optional=True)),
        ("(String, Optional) This is an attribute.", _att(optional=True, computed=True)),
        ("(String, Optional, Deprecated) This is an attribute.", _att(optional=True, deprecated=True)),
        (
            "(String, Optional, Deprecated) This is an attribute.",
            _att(optional=True, computed=True, deprecated=True),
        ),
        (
            "(String, Optional, Sensitive, Deprecated) This is an attribute.",
            _att(optional=True, computed=True, deprecated=True, sensitive=True),
        ),
        ("(String, Read-only) This is an attribute.", _att(computed=True)),
        ("(String, Read-only, Deprecated) This is an attribute.", _att(computed=True, deprecated=True)),
        (
            "(String, Read-only, Sensitive, Deprecated) This is an attribute.",
            _att(computed=True, deprecated=True, sensitive=True),
        ),
        ("(String, Required) This is an attribute.", _att(" This is an attribute.", required=True)),
        ("(String, Required) This is an attribute.", _att("This is an attribute. ", required=True)),
        (
            "(String, Required) This is an attribute.",
            _att("\n\t This is an attribute.\n\t ", required=True),
        ),
    ],
)
def test_attribute_description(expected, att):
    assert attribute_description(att, True) == expected


def test_attribute_description_without_state():
    assert attribute_description(_att(required=True), False) == "(String) This is an attribute."


def test_attribute_description_no_state_raises():
    with pytest.raises(SchemaError, match="filter states"):
        attribute_description(_att(), True)


def _bt(mode, min_items=0, max_items=0, deprecated=False, attributes=None):
    return SchemaBlockType(
        nesting_mode=mode,
        min_items=min_items,
        max_items=max_items,
        block=SchemaBlock(description=BLK, deprecated=deprecated, attributes=attributes or {}),
    )


S, L, SE, M = NestingMode.SINGLE, NestingMode.LIST, NestingMode.SET, NestingMode.MAP


@pytest.mark.parametrize(
    "expected, bt",
    [
        ("(Block, Optional) This is a block.", _bt(S, attributes={"foo": SchemaAttribute(required=True)})),
        ("(Block, Required) This is a block.", _bt(S, min_items=1)),
        ("(Block, Required, Deprecated) This is a block.", _bt(S, min_items=1, deprecated=True)),
        ("(Block List) This is a block.", _bt(L)),
        ("(Block List, Min: 1) This is a block.", _bt(L, min_items=1)),
        ("(Block List, Max: 4) This is a block.", _bt(L, max_items=4)),
        ("(Block List, Min: 1, Max: 4) This is a block.", _bt(L, 1, 4)),
        ("(Block List, Min: 1, Max: 4, Deprecated) This is a block.", _bt(L, 1, 4, True)),
        ("(Block Set) This is a block.", _bt(SE)),
        ("(Block Set, Min: 1) This is a block.", _bt(SE, min_items=1)),
        ("(Block Set, Max: 4) This is a block.", _bt(SE, max_items=4)),
        ("(Block Set, Min: 1, Max: 4) This is a block.", _bt(SE, 1, 4)),
        ("(Block Set, Min: 1, Max: 4, Deprecated) This is a block.", _bt(SE, 1, 4, True)),
        ("(Block Map) This is a block.", _bt(M)),
        ("(Block Map, Min: 1) This is a block.", _bt(M, min_items=1)),
        ("(Block Map, Max: 4) This is a block.", _bt(M, max_items=4)),
        ("(Block Map, Min: 1, Max: 4) This is a block.", _bt(M, 1, 4)),
        ("(Block Map, Min: 1, Max: 4, Deprecated) This is a block.", _bt(M, 1, 4, True)),
    ],
)
def test_block_type_description(expected, bt):
    assert block_type_description(bt) == expected


def test_block_type_description_group_mode_raises():
    with pytest.raises(SchemaError, match="unexpected nesting mode"):
        block_type_description(_bt(NestingMode.GROUP))


def test_block_type_description_no_state_raises():
    bt = _bt(S, max_items=1, attributes={"foo": SchemaAttribute(attribute_type=STRING, computed=True)})
    with pytest.raises(SchemaError, match="filter states"):
        block_type_description(bt)


def _nested(mode, min_items=0, max_items=0, **flags):
    return SchemaAttribute(
        description=ATT,
        attribute_nested_type=SchemaNestedAttributeType(
            nesting_mode=mode,
            attributes={"foo": SchemaAttribute(attribute_type=STRING, required=True, description="x")},
            min_items=min_items,
            max_items=max_items,
        ),
        **flags,
    )


@pytest.mark.parametrize(
    "expected, att",
    [
        ("(Attributes, Optional) This is an attribute.", _nested(S, optional=True)),
        (f"(Attributes, Optional, {WO}) This is an attribute.", _nested(S, optional=True, write_only=True)),
        ("(Attributes List, Min: 2, Max: 3) This is an attribute.", _nested(L, 2, 3, required=True)),
        ("(Attributes Map) This is an attribute.", _nested(M)),
        ("(Attributes Set, Min: 5) This is an attribute.", _nested(SE, 5)),
    ],
)
def test_nested_attribute_type_description(expected, att):
    assert nested_attribute_type_description(att, True) == expected


def test_nested_attribute_type_description_missing_nested_type():
    with pytest.raises(SchemaError):
        nested_attribute_type_description(_att(optional=True), True)