import dataclasses

import pytest

from adocgraph.asg import (
    AttributeKind,
    AttributeValue,
    Block,
    BlockMetadata,
    Document,
    Position,
    TextNode,
)


def test_resolve_single():
    v = AttributeValue.single("hello")
    assert v.resolve() == "hello"
    assert v.kind is AttributeKind.SINGLE


def test_resolve_multiline():
    v = AttributeValue.multiline(["hello", "world"])
    assert v.resolve() == "hello world"


def test_resolve_multiline_legacy():
    v = AttributeValue.multiline_legacy(["hello", "world"])
    assert v.resolve() == "helloworld"


def test_resolve_resolved():
    v = AttributeValue.resolved("already done")
    assert v.resolve() == "already done"


def test_as_str_single():
    assert AttributeValue.single("val").as_str() == "val"


def test_as_str_multiline_returns_none():
    assert AttributeValue.multiline(["a", "b"]).as_str() is None


def test_as_str_multiline_legacy_returns_none():
    assert AttributeValue.multiline_legacy(["a", "b"]).as_str() is None


def test_as_str_resolved_returns_none():
    assert AttributeValue.resolved("x").as_str() is None


@pytest.mark.parametrize(
    "value, expected",
    [
        (AttributeValue.single("x"), False),
        (AttributeValue.multiline(["a"]), True),
        (AttributeValue.multiline_legacy(["a"]), True),
        (AttributeValue.resolved("x"), False),
    ],
)
def test_is_multiline(value, expected):
    assert value.is_multiline() is expected


def test_attribute_value_equality_and_immutability():
    a = AttributeValue.multiline(["a", "b"])
    assert a == AttributeValue.multiline(("a", "b"))
    assert not a == AttributeValue.multiline_legacy(["a", "b"])
    with pytest.raises(dataclasses.FrozenInstanceError):
        a.text = "changed"


def test_block_metadata_default():
    m = BlockMetadata()
    assert m.roles == []
    assert m.options == []
    assert m.attributes == []


def test_block_metadata_defaults_not_shared():
    first = BlockMetadata()
    second = BlockMetadata()
    first.roles.append("lead")
    assert second.roles == []


def test_block_new_sets_name():
    assert Block("paragraph").name == "paragraph"


def test_block_new_all_fields_none():
    b = Block("paragraph")
    for f in dataclasses.fields(b):
        if f.name == "name":
            continue
        assert getattr(b, f.name) is None, f.name


def test_document_holds_blocks_and_location():
    loc = (Position(1, 1), Position(1, 5))
    para = Block("paragraph", inlines=[TextNode("hello", loc)], location=loc)
    doc = Document(blocks=[para], location=loc)
    assert doc.blocks[0].inlines[0].value == "hello"
    assert doc.location[1].col == 5
    assert doc.attributes is None
    assert doc.header is None