"""Source positions and locations: a point in a file and the span between two points."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

_MIN_COUNTER = 1


def _advance(value: int, count: int) -> int:
    """Add ``count`` to ``value``, never going below the first line or column."""
    return max(_MIN_COUNTER, value + count)


@dataclass
class Position:
    """A point in a source file, with 1-based line and column."""

    filename: str | None = None
    line: int = 1
    column: int = 1

    def lines(self, count: int = 1) -> None:
        """Advance ``count`` lines, resetting the column."""
        if count:
            self.column = 1
            self.line = _advance(self.line, count)

    def columns(self, count: int = 1) -> None:
        """Advance ``count`` columns."""
        self.column = _advance(self.column, count)

    def __add__(self, width: int) -> Position:
        moved = replace(self)
        moved.columns(width)
        return moved

    def __sub__(self, width: int) -> Position:
        return self + -width

    def __str__(self) -> str:
        prefix = f"{self.filename}:" if self.filename else ""
        return f"{prefix}{self.line}.{self.column}"


@dataclass
class Location:
    """Two points in a source file; ``end`` defaults to a copy of ``begin``."""

    begin: Position = field(default_factory=Position)
    end: Position | None = None

    def __post_init__(self) -> None:
        if self.end is None:
            self.end = replace(self.begin)

    def step(self) -> None:
        """Move the beginning up to the end."""
        self.begin = replace(self.end)

    def columns(self, count: int = 1) -> None:
        """Extend the end by ``count`` columns."""
        self.end.columns(count)

    def lines(self, count: int = 1) -> None:
        """Extend the end by ``count`` lines."""
        self.end.lines(count)

    def __add__(self, other: Location | int) -> Location:
        if isinstance(other, Location):
            return Location(replace(self.begin), replace(other.end))
        if isinstance(other, int):
            joined = Location(replace(self.begin), replace(self.end))
            joined.columns(other)
            return joined
        return NotImplemented

    def __sub__(self, width: int) -> Location:
        if not isinstance(width, int):
            return NotImplemented
        return self + -width

    def __str__(self) -> str:
        end_col = self.end.column - 1 if self.end.column > 0 else 0
        text = str(self.begin)
        if self.end.filename and (
            not self.begin.filename or self.begin.filename != self.end.filename
        ):
            text += f"-{self.end.filename}:{self.end.line}.{end_col}"
        elif self.begin.line < self.end.line:
            text += f"-{self.end.line}.{end_col}"
        elif self.begin.column < end_col:
            text += f"-{end_col}"
        return text