"""Compiler options and the source file being compiled."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar


def read_entire_file(file_path: str | Path) -> str:
    """Return the whole contents of ``file_path``; raise if it cannot be opened."""
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"file does not exist: {file_path}")
    with path.open(encoding="utf-8", newline="") as stream:
        return stream.read()


@dataclass(frozen=True)
class CompileUnit:
    """A source file: its path and its text."""

    file_path: str
    file_value: str

    @classmethod
    def from_path(cls, file_path: str | Path) -> CompileUnit:
        """Read ``file_path`` and build the unit for it."""
        return cls(str(file_path), read_entire_file(file_path))


@dataclass
class CompilerOptions:
    """Options accepted by the compile command."""

    file: str = ""
    dump_ast: bool | None = None
    dump_types: bool | None = None
    dump_gmachine_ir: bool | None = None
    verbose: bool | None = False

    HELP: ClassVar[str] = (
        "USAGE: swa compile [FLAGS] [OPTIONS] file \n"
        "\n"
        "FLAGS:\n"
        "    -v, --verbose\tThe swallow source file path\n"
        "    -d, --dump_ast\tDump the ast\n"
        "    -d, --dump_types\tDump the definition types\n"
        "    -d, --dump_gmachine_ir\tDump the G-Machine instructions\n"
        "\n"
        "OPTIONS:\n"
        "    -h, --help <help>\n"
        "    --version <version>\n"
        "\n"
        "ARGS:\n"
        "    file"
    )
    VERSION: ClassVar[str] = "0.0.1"