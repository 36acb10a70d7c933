import io
import re

import pytest

from swallow.report import FileGroup, LabelGroup, Report, ReportBuilder
from swallow.spans import Details, Label, Span
from swallow.style import ColorType, ReportType

ANSI = re.compile(r"\x1b\[[0-9;]*m")


def plain(text):
    return ANSI.sub("", text)


def make_label(details, start, end, message="here", color=ColorType.RED):
    return Label(message, Span(details, start, end), color)


@pytest.fixture
def two_lines():
    return Details("let x = 1\nlet y = 2\n", "main.sw")


@pytest.fixture
def five_lines():
    return Details("a = 1\nb = 2\nc = 3\nd = 4\ne = 5\n", "five.sw")


def build_report(details, note=None):
    builder = (
        ReportBuilder()
        .with_type(ReportType.ERROR)
        .with_message("bad thing")
        .with_code(5)
        .add_label(make_label(details, 4, 5, "msg"))
    )
    if note is not None:
        builder.with_note(note)
    return builder.build()


def test_builder_requires_type(two_lines):
    with pytest.raises(ValueError):
        ReportBuilder().with_message("m").with_code(1).build()


def test_builder_requires_message():
    with pytest.raises(ValueError):
        ReportBuilder().with_type(ReportType.ERROR).with_code(1).build()


def test_builder_requires_code():
    with pytest.raises(ValueError):
        ReportBuilder().with_type(ReportType.ERROR).with_message("m").build()


def test_builder_keeps_fields(two_lines):
    report = build_report(two_lines, note="a note")
    assert report.report_type is ReportType.ERROR
    assert report.message == "bad thing"
    assert report.code == 5
    assert report.note == "a note"
    assert len(report.labels) == 1


def test_header_formats_prefix_and_code(two_lines):
    text = plain(build_report(two_lines).render())
    assert text.startswith("[E005] Error: bad thing\n")


def test_render_shows_source_lines_and_path(two_lines):
    text = plain(build_report(two_lines).render())
    assert "-[main.sw]" in text
    assert "1 |  let x = 1" in text
    assert "2 |  let y = 2" in text


def test_render_shows_marker_and_message(two_lines):
    text = plain(build_report(two_lines).render())
    assert "^^" in text
    assert ":= msg" in text


def test_note_is_rendered_only_when_given(two_lines):
    with_note = plain(build_report(two_lines, note="try again").render())
    without_note = plain(build_report(two_lines).render())
    assert "Note: try again" in with_note
    assert "Note:" not in without_note


def test_render_ends_with_closing_line(two_lines):
    text = plain(build_report(two_lines).render())
    assert text.endswith("/\n")
    assert text.splitlines()[-1].rstrip("/").strip("-") == ""


def test_print_writes_render(two_lines):
    report = build_report(two_lines)
    output = io.StringIO()
    report.print(output)
    assert output.getvalue() == report.render()


def test_find_remove_overlapping_labels(two_lines):
    first = make_label(two_lines, 0, 3)
    second = make_label(two_lines, 2, 5)
    third = make_label(two_lines, 6, 8)
    labels = [third, second, first]
    overlapping = LabelGroup.find_remove_overlapping_labels(labels)
    assert overlapping == [first]
    assert labels == [third, second]


def test_find_remove_overlapping_labels_empty():
    labels = []
    assert LabelGroup.find_remove_overlapping_labels(labels) == []
    assert labels == []


def test_find_label_levels(two_lines):
    first = make_label(two_lines, 0, 3)
    second = make_label(two_lines, 2, 5)
    third = make_label(two_lines, 6, 8)
    levels = LabelGroup.find_label_levels([first, second, third])
    assert levels == [[third, second], [first]]


def test_label_levels_partition_all_labels(two_lines):
    labels = [make_label(two_lines, 0, 4), make_label(two_lines, 1, 3), make_label(two_lines, 2, 6)]
    levels = LabelGroup.find_label_levels(labels)
    flattened = [label for level in levels for label in level]
    assert sorted(map(id, flattened)) == sorted(map(id, labels))


def test_label_group_first_and_last(two_lines):
    late = make_label(two_lines, 12, 14)
    early = make_label(two_lines, 1, 2)
    group = LabelGroup(two_lines, [late, early])
    assert group.first_label is early
    assert group.last_label is late


def test_label_group_requires_labels(two_lines):
    with pytest.raises(ValueError):
        LabelGroup(two_lines, [])


def test_find_labels_in_line(two_lines):
    on_first = make_label(two_lines, 1, 2)
    on_second = make_label(two_lines, 12, 14)
    group = LabelGroup(two_lines, [on_first, on_second])
    assert group.find_labels_in_line(0) == [on_first]
    assert group.find_labels_in_line(1) == [on_second]


def test_colored_source_line_keeps_text(two_lines):
    label = make_label(two_lines, 4, 5)
    group = LabelGroup(two_lines, [label])
    line = group.render_colored_source_line(two_lines.line_spans[0], [label])
    assert plain(line) == "let x = 1\n"


def test_labels_level_without_message_has_no_caption(two_lines):
    label = make_label(two_lines, 4, 5, message=None)
    rendered = plain(LabelGroup.render_labels_level([[label]], 0, two_lines.line_spans[0], "    "))
    assert ":=" not in rendered
    assert rendered.count("\n") == 1


def test_file_group_splits_distant_labels(five_lines):
    near = [make_label(five_lines, 0, 1), make_label(five_lines, 6, 7)]
    far = [make_label(five_lines, 0, 1), make_label(five_lines, 24, 25)]
    assert len(FileGroup(five_lines, near).label_groups) == 1
    assert len(FileGroup(five_lines, far).label_groups) == 2


def test_file_group_separator_between_groups(five_lines):
    far = [make_label(five_lines, 0, 1), make_label(five_lines, 24, 25)]
    assert "⋮" in plain(FileGroup(five_lines, far).render("    "))


def test_biggest_displayed_number(five_lines):
    labels = [make_label(five_lines, 0, 1), make_label(five_lines, 24, 25)]
    group = FileGroup(five_lines, labels)
    assert group.biggest_displayed_number() == labels[1].line + 2


def test_file_group_requires_labels(five_lines):
    with pytest.raises(ValueError):
        FileGroup(five_lines, [])


def test_find_file_groups_by_source(two_lines, five_lines):
    report = Report(
        ReportType.WARNING,
        "two files",
        3,
        [make_label(two_lines, 1, 2), make_label(five_lines, 0, 1), make_label(two_lines, 4, 5)],
    )
    groups = report.find_file_groups()
    assert [group.details for group in groups] == [two_lines, five_lines]
    text = plain(report.render())
    assert "-[main.sw]" in text and "-[five.sw]" in text