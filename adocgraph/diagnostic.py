"""Structured diagnostics emitted while building the ASG."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Severity(Enum):
    """How serious a diagnostic is."""

    WARNING = auto()
    ERROR = auto()


@dataclass(frozen=True)
class SourceSpan:
    """A half-open range of byte offsets into the source."""

    start: int
    end: int


@dataclass(frozen=True)
class ParseDiagnostic:
    """An issue found during parsing, with its location and severity."""

    span: SourceSpan
    message: str
    severity: Severity