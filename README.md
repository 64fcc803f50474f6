# adocgraph

Building blocks for working with AsciiDoc documents as an abstract semantic
graph (ASG):

- `adocgraph.asg` holds the node types: `Document`, `Header`, `Author`,
  `Block`, `BlockMetadata`, `Position`, and the inline nodes `TextNode`,
  `SpanNode`, `RefNode` and `RawNode`. It also holds `AttributeValue` and
  `AttributeKind`, for document attribute values that are written on one
  line or continued over several.
- `adocgraph.diagnostic` holds `ParseDiagnostic`, which carries a message,
  a `Severity` (`WARNING` or `ERROR`) and a `SourceSpan` of byte offsets.
- `adocgraph.attrvalues` checks attribute names, expands `{name}`
  references, and applies attribute entries. It also reads author lines and
  recognises revision lines.
- `adocgraph.entries` reads `:key: value` entry lines, with continuation
  lines, and reads the author and revision lines that follow a title.

The package has no third-party dependencies.

## Installation

```
pip install adocgraph
```

## Attribute values

```python
from adocgraph.asg import AttributeValue

AttributeValue.single("hello").resolve()                         # "hello"
AttributeValue.multiline(["hello", "world"]).resolve()           # "hello world"
AttributeValue.multiline_legacy(["hello", "world"]).resolve()    # "helloworld"
AttributeValue.resolved("already done").resolve()                # "already done"
AttributeValue.single("val").as_str()                            # "val"
AttributeValue.multiline(["a", "b"]).as_str()                    # None
AttributeValue.multiline(["a"]).is_multiline()                   # True
```

A value continued with a trailing backslash (`\`) has its lines joined with
single spaces. A value continued with the legacy trailing `+` has its lines
concatenated as they are.

## Attribute entries

```python
from adocgraph.asg import AttributeValue
from adocgraph.attrvalues import AttributeEntry, apply_attribute_entry

attrs = {}
apply_attribute_entry(AttributeEntry.set("product", AttributeValue.single("Widget")), attrs)
apply_attribute_entry(AttributeEntry.set("title", AttributeValue.single("{product} Guide")), attrs)
attrs["title"].resolve()        # "Widget Guide"

apply_attribute_entry(AttributeEntry.delete("product"), attrs)
"product" in attrs              # False
```

References to attributes that are not defined, such as `{unknown}`, are left
as they are. `substitute_attributes` returns `None` when nothing was
expanded, and `is_valid_attribute_name` checks a name against
`[a-zA-Z0-9_][-a-zA-Z0-9_]*`.

## Reading entry lines

The functions in `adocgraph.entries` take a sequence of lines (with or
without line terminators), starting where parsing should begin, and report
how many lines they used.

```python
from adocgraph.entries import (
    parse_attribute_entries,
    parse_attribute_entry,
    parse_author_revision,
)

entry, used = parse_attribute_entry([":desc: first \\\n", "  second\n"])
entry.value.resolve()   # "first second"
used                    # 2

attrs = {}
count, any_parsed = parse_attribute_entries(
    [":product: Widget", "// a comment", ":!draft:", "Body text"], attrs
)
count                   # 3
attrs["product"].resolve()   # "Widget"

authors, used = parse_author_revision(["Doc Writer", "v1.0", ":toc:"])
authors[0].fullname     # "Doc Writer"
used                    # 2
```

`parse_attribute_entry` returns `None` when the first line is not a
well-formed entry. `parse_attribute_entries` stops at the first line that is
neither an entry nor a `//` comment.

## Authors and revisions

```python
from adocgraph.attrvalues import is_revision_line, parse_authors

authors = parse_authors("Doc Writer <doc@example.com>; Jane Q Public")
authors[0].initials       # "DW"
authors[0].address        # "doc@example.com"
authors[1].middlename     # "Q"

is_revision_line("v1.0, 2024-01-01")   # True
is_revision_line("Just text")          # False
```

## What this package does not do

It does not parse whole documents, blocks or inline markup: nothing here
turns AsciiDoc text into a `Document` or into inline nodes, and nothing
produces `ParseDiagnostic` values. The node and diagnostic types are plain
data classes for other code to build and read. There is no command-line
tool.

## Running the tests

```
pip install -e .[test]
pytest
```