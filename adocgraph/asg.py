"""Abstract Semantic Graph (ASG) node types produced by the parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, List, Optional, Tuple, Union


class AttributeKind(Enum):
    """How an attribute value was written in the source."""

    SINGLE = auto()
    MULTILINE = auto()
    MULTILINE_LEGACY = auto()
    RESOLVED = auto()


@dataclass(frozen=True)
class AttributeValue:
    """An attribute value that may be single-line or span several lines.

    Single and resolved values keep their text in ``text``; multiline values
    keep their line segments in ``segments``.
    """

    kind: AttributeKind
    text: str = ""
    segments: Tuple[str, ...] = ()

    @classmethod
    def single(cls, value: str) -> "AttributeValue":
        """A single-line value."""
        return cls(AttributeKind.SINGLE, text=value)

    @classmethod
    def multiline(cls, segments) -> "AttributeValue":
        """A value continued with trailing backslashes; segments join with a space."""
        return cls(AttributeKind.MULTILINE, segments=tuple(segments))

    @classmethod
    def multiline_legacy(cls, segments) -> "AttributeValue":
        """A value continued with trailing ``+``; segments are concatenated."""
        return cls(AttributeKind.MULTILINE_LEGACY, segments=tuple(segments))

    @classmethod
    def resolved(cls, value: str) -> "AttributeValue":
        """A value whose attribute references have already been expanded."""
        return cls(AttributeKind.RESOLVED, text=value)

    def resolve(self) -> str:
        """Return the value as one string."""
        if self.kind is AttributeKind.MULTILINE:
            return " ".join(self.segments)
        if self.kind is AttributeKind.MULTILINE_LEGACY:
            return "".join(self.segments)
        return self.text

    def as_str(self) -> Optional[str]:
        """Return the text of a single-line value, or ``None`` for any other kind."""
        if self.kind is AttributeKind.SINGLE:
            return self.text
        return None

    def is_multiline(self) -> bool:
        """Whether the value was written across several lines."""
        return self.kind in (AttributeKind.MULTILINE, AttributeKind.MULTILINE_LEGACY)


@dataclass
class BlockMetadata:
    """Block-level metadata: roles, options and element attributes."""

    roles: List[str] = field(default_factory=list)
    options: List[str] = field(default_factory=list)
    attributes: List[Tuple[str, str]] = field(default_factory=list)


@dataclass(frozen=True)
class Position:
    """A 1-based source position."""

    line: int
    col: int


Location = Tuple[Position, Position]


@dataclass
class TextNode:
    """A leaf text node."""

    value: str
    location: Optional[Location] = None


@dataclass
class SpanNode:
    """An inline formatting span such as strong or emphasis."""

    variant: str
    form: str
    inlines: List["InlineNode"] = field(default_factory=list)
    location: Optional[Location] = None


@dataclass
class RefNode:
    """An inline reference: a link or a cross-reference."""

    variant: str
    target: str
    inlines: List["InlineNode"] = field(default_factory=list)
    location: Optional[Location] = None


@dataclass
class RawNode:
    """Passthrough content that bypasses all substitutions."""

    value: str
    location: Optional[Location] = None


InlineNode = Union[TextNode, SpanNode, RefNode, RawNode]


@dataclass
class Author:
    """A document author."""

    fullname: str
    initials: str
    firstname: str
    middlename: Optional[str] = None
    lastname: Optional[str] = None
    address: Optional[str] = None


@dataclass
class Header:
    """A document header: title and optional authors."""

    title: List[InlineNode] = field(default_factory=list)
    authors: Optional[List[Author]] = None
    location: Optional[Location] = None


@dataclass
class Block:
    """A block-level node; every field but the name is optional."""

    name: str
    form: Optional[str] = None
    delimiter: Optional[str] = None
    id: Optional[str] = None
    style: Optional[str] = None
    target: Optional[str] = None
    reftext: Optional[List[InlineNode]] = None
    metadata: Optional[BlockMetadata] = None
    title: Optional[List[InlineNode]] = None
    level: Optional[int] = None
    variant: Optional[str] = None
    marker: Optional[str] = None
    inlines: Optional[List[InlineNode]] = None
    blocks: Optional[List["Block"]] = None
    items: Optional[List["Block"]] = None
    principal: Optional[List[InlineNode]] = None
    terms: Optional[List[List[InlineNode]]] = None
    location: Optional[Location] = None


@dataclass
class Document:
    """The root node of an ASG."""

    attributes: Optional[Dict[str, AttributeValue]] = None
    header: Optional[Header] = None
    blocks: List[Block] = field(default_factory=list)
    location: Optional[Location] = None