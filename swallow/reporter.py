"""Turning a compiler error at a source location into a printed report."""

from __future__ import annotations

import sys
from typing import TextIO

from swallow.location import Location
from swallow.options import CompileUnit
from swallow.report import Report, ReportBuilder
from swallow.spans import Details, LabelBuilder, Span
from swallow.style import ColorType, ReportType

EXIT_FAILURE = 1


class ReportedError(Exception):
    """A compilation error that has been reported to the user and ends the run."""

    exit_status = EXIT_FAILURE

    def __init__(self, report: Report) -> None:
        super().__init__(report.message)
        self.report = report

    @property
    def code(self) -> int:
        """The diagnostic code of the report."""
        return self.report.code


class Reporter:
    """Reports errors found in one compile unit."""

    def __init__(self, unit: CompileUnit, output: TextIO | None = None) -> None:
        self.unit = unit
        self.details = Details(unit.file_value, unit.file_path)
        self._output = output

    def build_report(
        self,
        location: Location,
        message: str,
        label_message: str,
        note: str,
        code: int,
    ) -> Report:
        """An error report with one red label over the columns of ``location``."""
        span = Span(
            self.details,
            location.begin.column - 1,
            location.end.column - 1,
        )
        label = (
            LabelBuilder()
            .with_message(label_message)
            .with_span(span)
            .with_color(ColorType.RED)
            .build()
        )
        return (
            ReportBuilder()
            .with_type(ReportType.ERROR)
            .with_message(message)
            .with_code(code)
            .add_label(label)
            .with_note(note)
            .build()
        )

    def normal(
        self,
        location: Location,
        message: str,
        label_message: str,
        note: str,
        code: int,
    ) -> None:
        """Print an error report and stop compilation by raising :class:`ReportedError`."""
        report = self.build_report(location, message, label_message, note, code)
        output = self._output if self._output is not None else sys.stdout
        output.write("\n")
        report.print(output)
        output.flush()
        raise ReportedError(report)