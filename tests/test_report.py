"""Tests for diagnostics collection and rendering."""
from __future__ import annotations

import io

import pytest

from fmod_headers import GrammarError, parse
from fmod_headers.internals import errors as er
from fmod_headers.internals.report import Reporter, Span


SOURCE = "int x;\nint y @;\n"


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

def test_registry_lookup():
    assert er.ERR.HE1001 is er.ERR["HE1001"]
    assert er.ERR.HW3001.severity == er.Severity.WARNING

def test_unknown_code():
    with pytest.raises(AttributeError):
        er.ERR.HE9999

def test_missing_format_key():
    with pytest.raises(KeyError) as excinfo:
        er.format_message("HE2001")
    assert "missing text key 'field'" in excinfo.value.args[0]

def test_duplicate_code_rejected():
    with pytest.raises(ValueError):
        er._add(er.ERR.HE0001)

def test_emit_by_severity():
    reporter = Reporter()
    er.emit(reporter, er.ERR.HE2001, None, field="errors")
    er.emit(reporter, er.ERR.HW3002, None, name="FMOD_OK", prev_loc="5:14")
    assert [d.kind for d in reporter.items] == ["error", "warning"]
    assert reporter.has_errors and reporter.has_warnings
    assert reporter.items[0].message == "missing field 'errors'"


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _grammar_error_reporter() -> Reporter:
    reporter = Reporter(source=SOURCE, filename="fmod_errors.h")
    with pytest.raises(GrammarError) as excinfo:
        parse(SOURCE)
    e = excinfo.value
    reporter.error(e.code, e.message, e.span)
    return reporter

def test_format_ascii():
    text = _grammar_error_reporter().format(use_color=False, use_unicode=False)
    lines = text.splitlines()
    assert lines[0].startswith("fmod_errors.h:2:7: error [HE1001]: grammar error at line 2, column 7")
    assert lines[1] == "  | int y @;"
    assert lines[2] == "  `       ^"

def test_format_unicode():
    text = _grammar_error_reporter().format(use_color=False, use_unicode=True)
    lines = text.splitlines()
    assert lines[0].startswith("  ╭──┤ fmod_errors.h:2:7: error [HE1001]")
    assert lines[2] == "  │       ┯"
    assert lines[3] == "  ╰───────╯"

def test_format_color():
    text = _grammar_error_reporter().format(use_color=True, use_unicode=False)
    assert "\x1b[31m" in text

def test_format_without_span():
    reporter = Reporter(filename="hdr.h")
    reporter.warn("HW3001", "redefined", None)
    assert reporter.format(use_color=False) == "hdr.h: warning [HW3001]: redefined."

def test_print_to_plain_stream_has_no_color(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    reporter = Reporter(source="x\n", filename="hdr.h")
    reporter.error("HE2001", "missing field 'errors'", Span(1, 1, 1, 2))
    stream = io.StringIO()
    reporter.print(stream)
    assert "\x1b[" not in stream.getvalue()
    assert stream.getvalue().startswith("hdr.h:1:1: error [HE2001]")

def test_print_nothing():
    stream = io.StringIO()
    Reporter().print(stream)
    assert stream.getvalue() == ""
