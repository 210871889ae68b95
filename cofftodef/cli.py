"""Command line entry point: extract COFF symbols and write a .def file."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Sequence

from cofftodef.coff import CoffError, symbols_from_file
from cofftodef.deffile import Mode, write_def_file

DEFAULT_OUTPUT = "out.def"


def usage_text() -> str:
    """Return the usage message."""
    return (
        "xyo-coff-to-def - Extract symbols from COFF object and generate a DEF file for linker\n\n"
        "usage:\n"
        "    xyo-coff-to-def [--out file] [--mode type] [--show] foo1.obj foo2.obj ...\n\n"
        "options:\n"
        "    --out file     output file (default out.def)\n"
        "    --mode type    mode of operation [ WIN32 | WIN64 ]\n"
        "    --show         show coff symbols\n"
    )


def read_list_file(path: str | os.PathLike[str]) -> list[str]:
    """Read object file names from a list file, skipping // comment lines."""
    names = []
    with open(path, "rb") as handle:
        for raw in handle:
            if raw.startswith(b"//"):
                continue
            for terminator in (b"\r", b"\n"):
                raw = raw.split(terminator, 1)[0]
            names.append(os.fsdecode(raw))
    return names


def _object_files(inputs: Iterable[str]) -> Iterable[str]:
    for item in sorted(set(inputs)):
        if item.startswith("@"):
            try:
                yield from read_list_file(item[1:])
            except OSError:
                continue
        else:
            yield item


def collect_symbols(inputs: Iterable[str], show: bool) -> set[str]:
    """Gather defined external symbols from object files and @list files."""
    symbols: set[str] = set()
    for path in _object_files(inputs):
        try:
            names = symbols_from_file(path)
        except (OSError, CoffError):
            continue
        if show:
            print(f"Coff Symbols: {path}\n")
            for name in names:
                print(name)
        symbols.update(names)
    return symbols


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; returns the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(usage_text())
        return 0

    output = DEFAULT_OUTPUT
    mode = Mode.WIN32
    show = False
    inputs: list[str] = []

    remaining = iter(args)
    for arg in remaining:
        if not arg.startswith("--"):
            inputs.append(arg)
            continue
        option = arg[2:]
        if option == "out":
            output = next(remaining, output)
        elif option == "mode":
            value = next(remaining, None)
            if value in ("WIN32", "WIN64"):
                mode = Mode[value]
        elif option == "show":
            show = True

    symbols = collect_symbols(inputs, show)
    try:
        write_def_file(symbols, output, mode)
    except OSError:
        print(f"Error: unable to generate def file {output}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())