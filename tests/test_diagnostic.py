import dataclasses

import pytest

from adocgraph.diagnostic import ParseDiagnostic, Severity, SourceSpan


def test_diagnostic_fields_round_trip():
    diag = ParseDiagnostic(SourceSpan(3, 9), "empty title", Severity.ERROR)
    assert diag.span.start == 3
    assert diag.span.end == 9
    assert diag.message == "empty title"
    assert diag.severity is Severity.ERROR


def test_diagnostic_equality_depends_on_all_fields():
    base = ParseDiagnostic(SourceSpan(0, 1), "msg", Severity.WARNING)
    assert base == ParseDiagnostic(SourceSpan(0, 1), "msg", Severity.WARNING)
    assert not base == ParseDiagnostic(SourceSpan(0, 1), "msg", Severity.ERROR)
    assert not base == ParseDiagnostic(SourceSpan(0, 2), "msg", Severity.WARNING)


def test_diagnostics_are_hashable_and_deduplicate():
    a = ParseDiagnostic(SourceSpan(0, 1), "msg", Severity.WARNING)
    b = ParseDiagnostic(SourceSpan(0, 1), "msg", Severity.WARNING)
    c = ParseDiagnostic(SourceSpan(4, 5), "other", Severity.ERROR)
    assert len({a, b, c}) == 2


def test_diagnostic_is_immutable():
    diag = ParseDiagnostic(SourceSpan(0, 1), "msg", Severity.WARNING)
    with pytest.raises(dataclasses.FrozenInstanceError):
        diag.message = "changed"
    assert diag.message == "msg"


def test_span_is_immutable():
    span = SourceSpan(2, 4)
    with pytest.raises(dataclasses.FrozenInstanceError):
        span.start = 0
    assert span.start == 2
    assert span.end == 4


def test_severity_has_two_distinct_levels():
    diagnostics = {
        ParseDiagnostic(SourceSpan(0, 1), "msg", severity) for severity in Severity
    }
    assert len(diagnostics) == 2
    assert {d.severity for d in diagnostics} == {Severity.WARNING, Severity.ERROR}