# cofftodef

This tool reads the external symbols of COFF object files (`.obj`) and writes
a module-definition (`.def`) file. A linker can use that file to build a DLL.

It reads only objects built for i386 (machine `0x014c`) or AMD64 (machine
`0x8664`). It collects every external symbol that is defined in an object and
skips undefined references. It then sorts the symbols and removes duplicates.

## Installation

```
pip install .
```

## Command line

```
cofftodef [--out file] [--mode type] [--show] foo1.obj foo2.obj ...
```

Options:

- `--out file`: the output file. The default is `out.def`.
- `--mode type`: the mode, `WIN32` or `WIN64`. The default is `WIN32`. Any other value is ignored.
- `--show`: print each object's symbols as it is read, under a `Coff Symbols: <path>` heading.

Other options that start with `--` are ignored. If you run the command with no
arguments, it prints the usage text and exits with status 0.

An argument of the form `@list.txt` names a list file. Each line of a list file
is the path of one object file. Lines that begin with `//` are skipped.

Some inputs cannot be read, or are not supported COFF objects. The tool skips
these without reporting them. The same applies to list files that cannot be
opened.

The command exits with status 1 and prints
`Error: unable to generate def file <name>` if it cannot write the output file.

## The DEF file

The file begins with `LIBRARY` and `EXPORTS` and lists one symbol on each line.
Lines end with CRLF. The tool always leaves out compiler-internal symbols:

- floating-point constants (`__real@...`)
- RTTI and exception-handling records (`??_...`, `__CT??...`, `__CTA1_N`, `__CTA2?...`, `__CTA1?AV...`, `__CTA2PAV...`, `__TI1_N`, `__TI2?...`, `__TI1?AV...`, `__TI2PAV...`)
- SIMD constants (`__mask@@...`, `__xmm@...`)

In `WIN32` mode:

- A symbol that starts with `_` loses that underscore, unless it contains `@`. A symbol that contains `@` is written unchanged.
- A symbol that starts with `?` (a C++ decorated name) is written unchanged.
- Any other symbol is dropped.

In `WIN64` mode, every symbol that is not excluded is written as it is.

## Library use

```python
from pathlib import Path

from cofftodef.cli import collect_symbols
from cofftodef.coff import CoffError, external_symbols, symbols_from_file
from cofftodef.deffile import Mode, export_name, is_excluded, render_def, write_def_file

symbols = set(symbols_from_file("foo.obj"))
symbols.update(external_symbols(Path("bar.obj").read_bytes()))

print(render_def(symbols, Mode.WIN64))
write_def_file(symbols, "out.def", Mode.WIN32)

# Works like the command line and also accepts @list files
all_symbols = collect_symbols(["foo.obj", "@objects.txt"], show=False)
```

Each function works as follows:

- `external_symbols` and `symbols_from_file` return the names in symbol-table order. They raise `CoffError`, a subclass of `ValueError`, if the data is not a supported or well-formed COFF object.
- `export_name` returns `None` for a symbol that is not exported in the given mode.
- `write_def_file` raises `OSError` if it cannot write the file.

## What it does not do

The command has no option to show a license or version. Its usage text gives
the command's name as `xyo-coff-to-def`. It does not read the export tables of
import libraries or linked images (DLL or EXE). It reads COFF object files
only.