"""Rendering of diagnostic reports: labelled source excerpts grouped by file."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from swallow.spans import Details, Label, Span, sort_ascending, sort_descending
from swallow.style import (
    COLOR_BEACH,
    COLOR_GREY,
    COLOR_RED,
    COLOR_WHITE,
    DISPLAYED_LINE_PADDING,
    RESET,
    ColorType,
    ReportType,
    color_code,
    colored,
    format_text,
    repeat_string,
    report_type_to_prefix,
    report_type_to_string,
    rgb,
)


def _relative_index_map(labels: list[Label], line_span: Span, *, ends: bool) -> dict[int, Label]:
    """Map each label's start (or end) index, relative to ``line_span``, to the label."""
    mapping: dict[int, Label] = {}
    for label in labels:
        relative = label.span.relative_to(line_span)
        mapping[relative.end_index if ends else relative.start_index] = label
    return mapping


class LabelGroup:
    """Labels of one file that lie close enough together to be shown in one excerpt."""

    def __init__(self, details: Details, labels: list[Label]) -> None:
        if not labels:
            raise ValueError("Couldn't find the last labels as there are no labels.")
        self.details = details
        self.labels = list(labels)
        ordered = sort_ascending(self.labels)
        self.first_label = ordered[0]
        self.last_label = ordered[-1]

    def render(self, spaces_prefix: str) -> str:
        """The numbered source lines around the labels, with their markers."""
        first_line = self.first_label.line
        last_line = self.last_label.line

        beginning_line = first_line - DISPLAYED_LINE_PADDING if first_line >= DISPLAYED_LINE_PADDING else 0
        ending_line = last_line + DISPLAYED_LINE_PADDING
        if ending_line >= len(self.details.line_spans):
            ending_line = last_line

        number_width = max(len(spaces_prefix) - 3, 0)
        parts: list[str] = []
        for line_index in range(beginning_line, ending_line + 1):
            line_span = self.details.line_spans[line_index]
            number = str(line_index + 1).rjust(number_width)
            parts.append("  " + rgb(f"{number} |  ", COLOR_GREY))

            labels = self.find_labels_in_line(line_index)
            parts.append(self.render_colored_source_line(line_span, labels))
            if not labels:
                continue

            levels = self.find_label_levels(labels)
            parts.extend(
                self.render_labels_level(levels, level, line_span, spaces_prefix)
                for level in range(len(levels))
            )
        return "".join(parts)

    @staticmethod
    def render_labels_level(
        level_labels: list[list[Label]],
        current_level: int,
        line_span: Span,
        spaces_prefix: str,
    ) -> str:
        """Marker line for one level of labels, followed by their message lines."""
        deeper = [label for labels in level_labels[current_level + 1 :] for label in labels]
        next_startings = _relative_index_map(deeper, line_span, ends=False)
        next_endings = _relative_index_map(deeper, line_span, ends=True)

        current_labels = level_labels[current_level]
        current_startings = _relative_index_map(current_labels, line_span, ends=False)

        parts = [spaces_prefix, rgb("o  ", COLOR_GREY)]

        last_label: Label | None = None
        last_end_index = 0
        for index in range(line_span.width):
            if index in next_endings:
                parts.append(colored("|", next_endings[index].color))
                continue
            if index in next_startings:
                parts.append(colored("|", next_startings[index].color))
                continue

            label = current_startings.get(index)
            if label is None:
                if last_label is not None and (
                    (index == last_end_index and index != 0) or index < last_end_index
                ):
                    parts.append(colored("^", last_label.color))
                else:
                    parts.append(" ")
                continue

            relative = label.span.relative_to(line_span)
            if last_end_index >= index and index != 0:
                marker = "=" if label.message else "+"
            elif relative.end_index > index:
                marker = "^" if label.message else "+"
            else:
                marker = "^"
            parts.append(colored(marker, label.color))

            last_end_index = relative.end_index
            last_label = label

        parts.append("\n")

        for label in current_labels:
            if not label.message:
                continue
            parts.append(spaces_prefix + rgb("o  ", COLOR_GREY))
            relative = label.span.relative_to(line_span)
            for index in range(relative.start_index):
                marker = next_endings.get(index) or next_startings.get(index) or current_startings.get(index)
                parts.append(colored("|", marker.color) if marker is not None else " ")
            parts.append(colored(":= ", label.color))
            parts.append(format_text(label.message))
            parts.append("\n")

        return "".join(parts)

    def render_colored_source_line(self, line_span: Span, labels: list[Label]) -> str:
        """One source line with the text under each label drawn in the label's colour."""
        source = self.details.line_source(line_span)
        base = color_code(ColorType.DEFAULT)

        mapped: dict[int, Label] = {}
        for label in labels:
            own_line = self.details.line_spans[label.line]
            mapped[label.span.relative_to(own_line).start_index] = label

        parts = [base]
        index = 0
        while index < len(source):
            label = mapped.get(index)
            if label is None:
                parts.append(source[index])
                index += 1
                continue
            stop = min(index + label.span.width + 1, len(source))
            end = next((i for i in range(index + 1, stop) if i in mapped), stop)
            parts.append(color_code(label.color) + source[index:end] + base)
            index = end

        parts.append(RESET + "\n")
        return "".join(parts)

    @staticmethod
    def find_label_levels(labels: list[Label]) -> list[list[Label]]:
        """Split labels into levels in which no two labels overlap."""
        levels: list[list[Label]] = []
        current = sort_descending(labels)
        while True:
            overlapping = LabelGroup.find_remove_overlapping_labels(current)
            levels.append(current)
            if not overlapping:
                return levels
            current = overlapping

    @staticmethod
    def find_remove_overlapping_labels(labels: list[Label]) -> list[Label]:
        """Remove from ``labels`` those overlapping an earlier kept label and return them."""
        if not labels:
            return []
        current = labels[0]
        kept = [current]
        overlapping: list[Label] = []
        for label in labels[1:]:
            if label.span.end_index < current.span.start_index:
                current = label
                kept.append(label)
            else:
                overlapping.append(label)
        labels[:] = kept
        return overlapping

    def find_labels_in_line(self, line_index: int) -> list[Label]:
        """Labels of this group that lie within the given line."""
        line_span = self.details.line_spans[line_index]
        return [label for label in self.labels if line_span.is_inside_span(label.span)]


class FileGroup:
    """All labels of a report that point into one source file."""

    def __init__(self, details: Details, labels: list[Label]) -> None:
        if not labels:
            raise ValueError("Cannot find label groups if there are no labels.")
        self.details = details

        collections: list[list[Label]] = [[]]
        last_line = labels[0].line
        for label in sort_ascending(labels):
            if label.line - last_line > DISPLAYED_LINE_PADDING:
                collections.append([])
            collections[-1].append(label)
            last_line = label.line

        self.label_groups = [LabelGroup(details, group) for group in collections if group]

    def render(self, spaces_prefix: str) -> str:
        """The file header followed by each of its label groups."""
        parts = [
            rgb("-[", COLOR_GREY) + rgb(self.details.path, COLOR_WHITE) + rgb("]", COLOR_GREY) + "\n",
            spaces_prefix + rgb("o", COLOR_GREY) + "\n",
        ]
        separator = spaces_prefix + rgb("⋮", COLOR_GREY) + "\n"
        parts.append(separator.join(group.render(spaces_prefix) for group in self.label_groups))
        return "".join(parts)

    def biggest_displayed_number(self) -> int:
        """Largest 1-based line number this file's excerpts may show."""
        biggest = max((group.last_label.line for group in self.label_groups), default=0)
        return biggest + 1 + DISPLAYED_LINE_PADDING


@dataclass
class Report:
    """A diagnostic: its kind, message, code, labelled spans and an optional note."""

    report_type: ReportType
    message: str
    code: int
    labels: list[Label] = field(default_factory=list)
    note: str | None = None

    def render(self) -> str:
        """The whole report as coloured terminal text."""
        header = f"[{report_type_to_prefix(self.report_type)}{int(self.code):03d}] " \
                 f"{report_type_to_string(self.report_type)}:"
        parts = [rgb(header, COLOR_RED), " ", rgb(self.message, COLOR_WHITE), "\n"]

        file_groups = self.find_file_groups()
        biggest = max((group.biggest_displayed_number() for group in file_groups), default=0)
        number_width = len(str(biggest))
        spaces_prefix = " " * (number_width + 3)

        parts.append(spaces_prefix + rgb("/", COLOR_GREY))
        between = spaces_prefix + rgb("o", COLOR_GREY) + "\n" + spaces_prefix + rgb("^", COLOR_GREY)
        parts.append(between.join(group.render(spaces_prefix) for group in file_groups))

        parts.append(spaces_prefix + rgb("o", COLOR_GREY) + "\n")

        if self.note is not None:
            parts.append(spaces_prefix + rgb("o-- ", COLOR_GREY) + rgb("Note: ", COLOR_BEACH))
            parts.append(format_text(self.note))
            parts.append("\n")

        parts.append(rgb(repeat_string("-", number_width + 3), COLOR_GREY) + rgb("/", COLOR_GREY) + "\n")
        return "".join(parts)

    def print(self, output: TextIO | None = None) -> None:
        """Write the rendered report to ``output`` (standard output by default)."""
        (output if output is not None else sys.stdout).write(self.render())

    def find_file_groups(self) -> list[FileGroup]:
        """One group per source file, in the order files first appear among the labels."""
        by_file: dict[Details, list[Label]] = {}
        for label in self.labels:
            by_file.setdefault(label.span.details, []).append(label)
        return [FileGroup(details, labels) for details, labels in by_file.items()]


class ReportBuilder:
    """Step-by-step construction of a :class:`Report`."""

    def __init__(self) -> None:
        self._message: str | None = None
        self._note: str | None = None
        self._type: ReportType | None = None
        self._code: int | None = None
        self._labels: list[Label] = []

    def with_message(self, message: str) -> ReportBuilder:
        self._message = message
        return self

    def with_note(self, note: str) -> ReportBuilder:
        self._note = note
        return self

    def add_label(self, label: Label) -> ReportBuilder:
        self._labels.append(label)
        return self

    def with_type(self, report_type: ReportType) -> ReportBuilder:
        self._type = report_type
        return self

    def with_code(self, code: int) -> ReportBuilder:
        self._code = code
        return self

    def build(self) -> Report:
        """Make the report; a type, a message and a code are required."""
        if self._type is None:
            raise ValueError("A type is required to build a report.")
        if self._message is None:
            raise ValueError("A message is required to build a report.")
        if self._code is None:
            raise ValueError("A code is required to build a report.")
        return Report(self._type, self._message, self._code, list(self._labels), self._note)