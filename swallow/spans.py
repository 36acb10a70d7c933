"""Spans of source text, the labels that point at them and per-file line details."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from swallow.style import ColorType


@dataclass
class Span:
    """A half-open range of character indexes in the source held by ``details``."""

    details: Details | None = field(default=None, compare=False, repr=False)
    start_index: int = 0
    end_index: int = 0

    def relative_to(self, span: Span) -> Span:
        """This span with indexes measured from the start of ``span``."""
        return Span(
            span.details,
            self.start_index - span.start_index,
            self.end_index - span.start_index,
        )

    def is_inside_span(self, span: Span) -> bool:
        """True when ``span`` lies within this span."""
        return self.start_index <= span.start_index and self.end_index >= span.end_index

    @property
    def width(self) -> int:
        """Number of characters the span covers."""
        return self.end_index - self.start_index


@dataclass(eq=False)
class Label:
    """A coloured, optionally captioned marker on a span of source."""

    message: str | None
    span: Span
    color: ColorType = ColorType.DEFAULT
    line: int = field(init=False)

    def __post_init__(self) -> None:
        if self.span.details is None:
            raise ValueError("a label's span must belong to a source")
        self.line = self.span.details.label_line(self.span)


class LabelBuilder:
    """Step-by-step construction of a :class:`Label`."""

    def __init__(self) -> None:
        self._message: str | None = None
        self._color: ColorType | None = None
        self._span: Span | None = None

    def with_message(self, message: str) -> LabelBuilder:
        self._message = message
        return self

    def with_color(self, color: ColorType) -> LabelBuilder:
        self._color = color
        return self

    def with_span(self, span: Span) -> LabelBuilder:
        self._span = span
        return self

    def build(self) -> Label:
        """Make the label; a span is required."""
        if self._span is None:
            raise ValueError("A span is required to build a label.")
        color = self._color if self._color is not None else ColorType.DEFAULT
        return Label(self._message, self._span, color)


class Details:
    """A source text with its path and the span of each of its lines."""

    def __init__(self, source: str, path: str) -> None:
        self.source = source
        self.path = path
        self.line_spans: list[Span] = []

        current: Span | None = None
        for index, char in enumerate(source):
            if current is None:
                current = Span(self, index, index)
                self.line_spans.append(current)
            if char == "\n":
                current.end_index = index
                current = None
        if current is not None:
            current.end_index = len(source) - 1

    def line_source(self, span: Span) -> str:
        """Text covered by ``span``, with tabs shown as spaces."""
        text = self.source[span.start_index : span.start_index + span.width]
        return text.replace("\t", " ")

    def label_line(self, span: Span) -> int:
        """Index of the first line that contains ``span``."""
        for index, line_span in enumerate(self.line_spans):
            if line_span.is_inside_span(span):
                return index
        raise ValueError("Couldn't find the associated line for this span.")


def ascending_key(label: Label) -> tuple[int, int]:
    """Sort key ordering labels by start, then by end."""
    return (label.span.start_index, label.span.end_index)


def sort_ascending(labels: Iterable[Label]) -> list[Label]:
    """Labels ordered by start index, ties broken by end index."""
    return sorted(labels, key=ascending_key)


def sort_descending(labels: Iterable[Label]) -> list[Label]:
    """Labels ordered by start index from last to first, ties by end index rising."""
    return sorted(labels, key=lambda label: (-label.span.start_index, label.span.end_index))