import io

import pytest

from swallow.codes import Code
from swallow.location import Location, Position
from swallow.options import CompileUnit
from swallow.reporter import ReportedError, Reporter
from swallow.style import ColorType, ReportType


SOURCE = "let x = 1\n"


def _unit():
    return CompileUnit("test.sw", SOURCE)


def _location(begin_col, end_col):
    return Location(Position(line=1, column=begin_col), Position(line=1, column=end_col))


def test_build_report_fields():
    reporter = Reporter(_unit())
    report = reporter.build_report(
        _location(5, 6),
        "'x' was not declared",
        "The definition of this identifier cannot be found in the context",
        "Function or Variable is undefined",
        Code.LID_NOT_DECLARED,
    )
    assert report.report_type is ReportType.ERROR
    assert report.message == "'x' was not declared"
    assert report.note == "Function or Variable is undefined"
    assert report.code == Code.LID_NOT_DECLARED
    assert len(report.labels) == 1


def test_build_report_label_span_uses_columns_minus_one():
    reporter = Reporter(_unit())
    report = reporter.build_report(_location(5, 6), "m", "label", "n", Code.PARSING)
    label = report.labels[0]
    assert label.span.start_index == 4
    assert label.span.end_index == 5
    assert label.color is ColorType.RED
    assert label.message == "label"
    assert label.span.details is reporter.details


def test_details_match_unit():
    reporter = Reporter(_unit())
    assert reporter.details.source == SOURCE
    assert reporter.details.path == "test.sw"


def test_normal_prints_and_raises():
    out = io.StringIO()
    reporter = Reporter(_unit(), output=out)
    with pytest.raises(ReportedError) as info:
        reporter.normal(
            _location(5, 6),
            "Ambiguously type here",
            "Ambiguously typed program",
            "No more information",
            Code.AMBIGUOUSLY_TYPE,
        )
    error = info.value
    assert error.code == Code.AMBIGUOUSLY_TYPE
    assert error.exit_status == 1
    assert str(error) == "Ambiguously type here"
    assert out.getvalue() == "\n" + error.report.render()


def test_normal_output_mentions_path_and_message():
    out = io.StringIO()
    reporter = Reporter(_unit(), output=out)
    with pytest.raises(ReportedError):
        reporter.normal(_location(1, 4), "Illegal Pattern", "lbl", "note", Code.PATTERN_MISMATCH)
    text = out.getvalue()
    assert "test.sw" in text
    assert "Illegal Pattern" in text
    assert "Error:" in text


def test_location_outside_source_is_rejected():
    reporter = Reporter(_unit())
    with pytest.raises(ValueError):
        reporter.build_report(_location(100, 101), "m", "l", "n", Code.UNKNOWN)