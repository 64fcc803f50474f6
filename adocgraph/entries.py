"""Line-based parsing of attribute entries and author/revision lines.

Every function takes a sequence of source lines (with or without their line
terminators) starting at the position to parse, and reports how many of
those lines it consumed.
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional, Sequence, Tuple

from .asg import AttributeValue, Author
from .attrvalues import (
    AttributeEntry,
    apply_attribute_entry,
    is_revision_line,
    is_valid_attribute_name,
    parse_authors,
)

_NAME = re.compile(r"[A-Za-z0-9]+(?:[-_][A-Za-z0-9]+)*")
_BLANKS = " \t"


def _strip_eol(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def _segment(text: str, backslash: bool) -> str:
    return text.rstrip() if backslash else text


def _collect_continuation(
    first_value: str, rest: Sequence[str], marker: str
) -> Tuple[List[str], int]:
    """Gather the segments of a continued value; return them and the extra lines used."""
    backslash = marker == "\\"
    segments: List[str] = []
    head = first_value.rstrip(marker)
    if head:
        segments.append(_segment(head, backslash))

    consumed = 0
    for raw in rest:
        consumed += 1
        line = _strip_eol(raw).lstrip(_BLANKS)
        if not line:
            break
        if line.endswith(marker):
            body = line.rstrip(marker)
            if body:
                segments.append(_segment(body, backslash))
            continue
        segments.append(line)
        break
    return segments, consumed


def _parse_name(text: str, start: int = 0) -> Optional[Tuple[str, str]]:
    match = _NAME.match(text, start)
    if match is None or not is_valid_attribute_name(match.group()):
        return None
    return match.group(), text[match.end():]


def parse_attribute_entry(
    lines: Sequence[str],
) -> Optional[Tuple[AttributeEntry, int]]:
    """Parse one attribute entry at the start of ``lines``.

    Returns the entry and the number of lines it spans, or ``None`` when the
    first line is not a well-formed attribute entry.
    """
    if not lines:
        return None
    line = _strip_eol(lines[0])
    if not line.startswith(":"):
        return None
    body = line[1:]

    if body.startswith("!"):
        parsed = _parse_name(body, 1)
        if parsed is None:
            return None
        key, after = parsed
        if not after.startswith(":"):
            return None
        after = after[1:]
        is_delete = True
    else:
        parsed = _parse_name(body)
        if parsed is None:
            return None
        key, after = parsed
        if after.startswith("!"):
            if not after.startswith("!:"):
                return None
            after = after[2:]
            is_delete = True
        elif after.startswith(":"):
            after = after[1:]
            is_delete = False
        else:
            return None

    if is_delete:
        if after:
            return None
        return AttributeEntry.delete(key), 1

    if not after:
        return AttributeEntry.set(key, AttributeValue.single("")), 1
    if after[0] not in _BLANKS:
        return None

    value = after.lstrip(_BLANKS)
    if not value:
        return AttributeEntry.set(key, AttributeValue.single("")), 1

    if value.endswith("\\"):
        segments, extra = _collect_continuation(value, lines[1:], "\\")
        return AttributeEntry.set(key, AttributeValue.multiline(segments)), 1 + extra
    if value.endswith("+"):
        segments, extra = _collect_continuation(value, lines[1:], "+")
        entry = AttributeEntry.set(key, AttributeValue.multiline_legacy(segments))
        return entry, 1 + extra
    return AttributeEntry.set(key, AttributeValue.single(value)), 1


def parse_attribute_entries(
    lines: Sequence[str], attributes: Dict[str, AttributeValue]
) -> Tuple[int, bool]:
    """Apply consecutive attribute entries and ``//`` comments to ``attributes``.

    Stops at the first line that is neither. Returns the number of lines
    consumed and whether at least one entry was parsed.
    """
    position = 0
    parsed_any = False
    while position < len(lines):
        line = _strip_eol(lines[position])
        if line.startswith("//"):
            position += 1
            continue
        parsed = parse_attribute_entry(lines[position:])
        if parsed is None:
            break
        entry, used = parsed
        apply_attribute_entry(entry, attributes)
        parsed_any = True
        position += used
    return position, parsed_any


def parse_author_revision(
    lines: Sequence[str],
) -> Tuple[Optional[List[Author]], int]:
    """Parse an author line and an optional revision line below a title.

    Returns the authors (``None`` if there is no author line) and the number
    of lines consumed.
    """
    if not lines:
        return None, 0
    first = _strip_eol(lines[0])
    if not first or first[0] in ":=":
        return None, 0

    authors = parse_authors(first)
    if not authors:
        return None, 0

    consumed = 1
    if len(lines) > 1:
        revision = _strip_eol(lines[1])
        if revision and not revision.startswith(":") and is_revision_line(revision):
            consumed = 2
    return authors, consumed