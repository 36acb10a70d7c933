"""Report kinds, terminal colours and small text helpers for diagnostics."""

from __future__ import annotations

from enum import Enum
from itertools import takewhile

DISPLAYED_LINE_PADDING = 1

RGB = tuple[int, int, int]

COLOR_RED: RGB = (228, 38, 103)
COLOR_GREEN: RGB = (175, 255, 95)
COLOR_WHITE: RGB = (220, 238, 235)
COLOR_GREY: RGB = (148, 148, 148)
COLOR_BEACH: RGB = (125, 199, 164)
COLOR_LIGHT_GREY: RGB = (170, 173, 176)
COLOR_BLUE: RGB = (0, 116, 217)
COLOR_ORANGE: RGB = (255, 133, 27)
COLOR_YELLOW: RGB = (255, 220, 0)
COLOR_AQUA: RGB = (127, 219, 255)

RESET = "\033[00m"


class ReportType(Enum):
    """Severity of a report."""

    ERROR = "error"
    INFO = "info"
    WARNING = "warning"


class ColorType(Enum):
    """Named colours a label may be drawn in."""

    DEFAULT = "DEFAULT"
    RED = "RED"
    GREEN = "GREEN"
    BLUE = "BLUE"
    ORANGE = "ORANGE"
    YELLOW = "YELLOW"
    AQUA = "AQUA"


_PREFIXES = {ReportType.ERROR: "E", ReportType.INFO: "I", ReportType.WARNING: "W"}
_NAMES = {ReportType.ERROR: "Error", ReportType.INFO: "Info", ReportType.WARNING: "Warning"}

_PALETTE: dict[ColorType, RGB] = {
    ColorType.DEFAULT: COLOR_LIGHT_GREY,
    ColorType.RED: COLOR_RED,
    ColorType.GREEN: COLOR_GREEN,
    ColorType.BLUE: COLOR_BLUE,
    ColorType.ORANGE: COLOR_ORANGE,
    ColorType.YELLOW: COLOR_YELLOW,
    ColorType.AQUA: COLOR_AQUA,
}


def _escape(color: RGB) -> str:
    red, green, blue = color
    return f"\033[38;2;{red};{green};{blue}m"


def report_type_to_prefix(report_type: ReportType) -> str:
    """One-letter prefix used in a report's code, such as ``E``."""
    try:
        return _PREFIXES[report_type]
    except KeyError:
        raise ValueError(f"unsupported report type: {report_type!r}") from None


def report_type_to_string(report_type: ReportType) -> str:
    """Human-readable name of a report type."""
    try:
        return _NAMES[report_type]
    except KeyError:
        raise ValueError(f"unsupported report type: {report_type!r}") from None


def color_code(color: ColorType) -> str:
    """Terminal escape that switches to ``color``."""
    try:
        return _escape(_PALETTE[color])
    except KeyError:
        raise ValueError(f"unsupported color: {color!r}") from None


def rgb(text: str, color: RGB) -> str:
    """``text`` drawn in an RGB colour, followed by a reset."""
    return f"{_escape(color)}{text}{RESET}"


def colored(text: str, color: ColorType) -> str:
    """``text`` drawn in a named colour, followed by a reset."""
    return f"{color_code(color)}{text}{RESET}"


def get_color_by_name(name: str) -> ColorType:
    """Colour for an upper-case name; anything unknown is the default colour."""
    try:
        return ColorType[name]
    except KeyError:
        return ColorType.DEFAULT


def format_text(text: str) -> str:
    """Expand ``{COLOR}`` and ``{/}`` markers into terminal colour escapes."""
    white = _escape(COLOR_WHITE)
    parts = [white]
    chars = iter(text)
    for char in chars:
        if char != "{":
            parts.append(char)
            continue
        mode = "".join(takewhile(lambda c: c != "}", chars))
        parts.append(white if mode == "/" else color_code(get_color_by_name(mode)))
    return "".join(parts)


def repeat_string(text: str, amount: int) -> str:
    """``text`` repeated ``amount`` times."""
    return text * amount