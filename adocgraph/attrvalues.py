"""Attribute entries, attribute references and author/revision line helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

from .asg import AttributeValue, Author

_ASCII_DIGITS = frozenset("0123456789")
_NAME_START = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_"
)
_NAME_REST = _NAME_START | {"-"}


@dataclass(frozen=True)
class AttributeEntry:
    """A parsed attribute entry: either sets a value or deletes the attribute."""

    key: str
    value: Optional[AttributeValue] = None

    @classmethod
    def set(cls, key: str, value: AttributeValue) -> "AttributeEntry":
        """An entry of the form ``:key: value``."""
        return cls(key, value)

    @classmethod
    def delete(cls, key: str) -> "AttributeEntry":
        """An entry of the form ``:!key:`` or ``:key!:``."""
        return cls(key, None)

    @property
    def is_delete(self) -> bool:
        """Whether the entry removes the attribute."""
        return self.value is None


def substitute_attributes(
    value: str, attrs: Mapping[str, AttributeValue]
) -> Optional[str]:
    """Expand ``{name}`` references in ``value``.

    Returns ``None`` when no reference was expanded. Unknown references and
    unmatched braces are kept as written.
    """
    if "{" not in value:
        return None
    pieces: List[str] = []
    rest = value
    changed = False
    while True:
        open_at = rest.find("{")
        if open_at < 0:
            break
        pieces.append(rest[:open_at])
        after_open = rest[open_at + 1 :]
        close_at = after_open.find("}")
        if close_at < 0:
            pieces.append("{")
            rest = after_open
            continue
        name = after_open[:close_at]
        attr = attrs.get(name)
        if attr is not None:
            pieces.append(attr.resolve())
            changed = True
        else:
            pieces.append("{" + name + "}")
        rest = after_open[close_at + 1 :]
    pieces.append(rest)
    return "".join(pieces) if changed else None


def resolve_attr_refs(
    value: AttributeValue, attrs: Mapping[str, AttributeValue]
) -> AttributeValue:
    """Return a resolved value if any reference expanded, else ``value`` itself."""
    substituted = substitute_attributes(value.resolve(), attrs)
    if substituted is None:
        return value
    return AttributeValue.resolved(substituted)


def is_valid_attribute_name(name: str) -> bool:
    """Whether ``name`` matches ``[a-zA-Z0-9_][-a-zA-Z0-9_]*``."""
    if not name or name[0] not in _NAME_START:
        return False
    return all(c in _NAME_REST for c in name[1:])


def parse_single_author(text: str) -> Optional[Author]:
    """Parse ``"First [Middle] Last [<address>]"`` into an author."""
    text = text.strip()
    if not text:
        return None

    name_part = text
    address: Optional[str] = None
    angle_start = text.find("<")
    if angle_start >= 0:
        angle_end = text.find(">", angle_start)
        if angle_end >= 0:
            address = text[angle_start + 1 : angle_end]
            name_part = text[:angle_start].strip()

    parts = name_part.split()
    if not parts:
        return None

    firstname = parts[0]
    middlename: Optional[str] = None
    lastname: Optional[str] = None
    if len(parts) == 2:
        lastname = parts[1]
    elif len(parts) > 2:
        middlename = parts[1]
        lastname = parts[-1]

    initials = "".join(part[0].upper()[:1] or part[0] for part in parts)

    return Author(
        fullname=name_part.strip(),
        initials=initials,
        firstname=firstname,
        middlename=middlename,
        lastname=lastname,
        address=address,
    )


def parse_authors(line: str) -> List[Author]:
    """Parse an author line holding one or more ``;``-separated authors."""
    authors = (parse_single_author(chunk) for chunk in line.split(";"))
    return [author for author in authors if author is not None]


def is_revision_line(line: str) -> bool:
    """Whether a line looks like a revision line (``v1.0`` or a date)."""
    trimmed = line.strip()
    if not trimmed:
        return False
    if trimmed[0] == "v" and len(trimmed) > 1 and trimmed[1] in _ASCII_DIGITS:
        return True
    return trimmed[0] in _ASCII_DIGITS


def apply_attribute_entry(
    entry: AttributeEntry, attributes: Dict[str, AttributeValue]
) -> None:
    """Apply ``entry`` to ``attributes`` in place, expanding references on set."""
    if entry.value is None:
        attributes.pop(entry.key, None)
    else:
        attributes[entry.key] = resolve_attr_refs(entry.value, attributes)