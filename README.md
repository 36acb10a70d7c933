# swallow

Supporting pieces for the Swallow compiler, a small lazy functional language:
source locations, diagnostic codes, compiler options and the coloured error
reports printed when compilation fails.

## Modules

- `swallow.location`: `Position` (filename, 1-based line and column) and
  `Location` (a `begin` and an `end` position). Both support `+` and `-` with
  a column count, `Location + Location` joins two locations, and `str()` gives
  the compact form `main.swa:1.3-7`. Lines and columns never drop below 1.
- `swallow.codes`: `Code`, an `IntEnum` of diagnostic codes from `UNKNOWN` (0)
  to `AMBIGUOUSLY_TYPE` (18), such as `LID_NOT_DECLARED`,
  `BINOP_TYPE_MISMATCH` and `MATCH_EXPR_IS_NON_EXHAUSTIVE`.
- `swallow.options`: `CompilerOptions` (`file`, `verbose`, `dump_ast`,
  `dump_types`, `dump_gmachine_ir`, plus the `HELP` and `VERSION` texts),
  `CompileUnit` (a path and its text) with `CompileUnit.from_path(path)`, and
  `read_entire_file(path)`, which raises `FileNotFoundError` for a missing file.
- `swallow.style`: `ReportType`, `ColorType`, `report_type_to_prefix`,
  `report_type_to_string`, and 24-bit terminal colouring helpers: `rgb`,
  `colored`, `color_code`, `get_color_by_name`, `format_text` and
  `repeat_string`.
- `swallow.spans`: `Span`, `Label`, `LabelBuilder` and `Details`. `Details`
  splits a text into line spans; a `Label` records which line its span lies
  on and raises `ValueError` when no line contains it. `sort_ascending` and
  `sort_descending` order labels by position.
- `swallow.report`: `Report`, `ReportBuilder`, `FileGroup` and `LabelGroup`,
  which lay out a message with the numbered source lines around each label,
  marker rows under the labelled text and each label's message after `:=`.
  `Report.render()` returns the text; `Report.print(output)` writes it to a
  stream (standard output by default).
- `swallow.reporter`: `Reporter` and `ReportedError`.

## Installing

```
pip install .
```

There are no runtime dependencies. For the test suite:

```
pip install ".[test]"
pytest
```

## Building a report

```python
from swallow.codes import Code
from swallow.report import ReportBuilder
from swallow.spans import Details, LabelBuilder, Span
from swallow.style import ColorType, ReportType

details = Details("fn main = x + 1;\n", "main.swa")

label = (
    LabelBuilder()
    .with_message("The definition of this identifier cannot be found in the context")
    .with_span(Span(details, 10, 11))
    .with_color(ColorType.RED)
    .build()
)

report = (
    ReportBuilder()
    .with_type(ReportType.ERROR)
    .with_code(Code.LID_NOT_DECLARED)
    .with_message("'x' was not declared")
    .add_label(label)
    .with_note("Function or Variable is undefined")
    .build()
)

print(report.render())
```

The first line reads `[E002] Error: 'x' was not declared` (with colour
escapes), followed by the file name, the numbered source lines around the
label, a row of `^` markers under the labelled text and the label's message.
`ReportBuilder.build()` raises `ValueError` when the type, message or code is
missing; `LabelBuilder.build()` does so when the span is missing.

Messages and notes may carry colour markers: `{RED}`, `{GREEN}`, `{BLUE}`,
`{ORANGE}`, `{YELLOW}` and `{AQUA}` switch colour, `{/}` switches back to the
default text colour, and any other name selects the light-grey default colour.
`format_text` applies them.

## Reporting errors in a compile unit

```python
from swallow.location import Location, Position
from swallow.options import CompileUnit
from swallow.reporter import Reporter

unit = CompileUnit("main.swa", "fn main = x + 1;\n")
reporter = Reporter(unit)
report = reporter.build_report(
    Location(Position(line=1, column=11), Position(line=1, column=12)),
    "'x' was not declared",
    "The definition of this identifier cannot be found in the context",
    "Function or Variable is undefined",
    2,
)
```

`Reporter.build_report` returns an error report with one red label over the
columns of the location. `Reporter.normal` takes the same arguments, writes a
blank line and the report to the reporter's output stream (standard output
unless one was given to `Reporter`), and then raises `ReportedError`, which
carries the `report`, its `code` and an `exit_status` of 1.

## What this package does not do

It holds no lexer, parser, type checker or code generator, and no
command-line program: nothing here reads a Swallow program and compiles it.
`CompilerOptions` only records the options such a command would take.