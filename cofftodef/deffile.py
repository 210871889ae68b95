"""Building linker module-definition (.def) files from symbol names."""

from __future__ import annotations

import os
from collections.abc import Iterable
from enum import IntEnum
from pathlib import Path

DEF_HEADER = "LIBRARY\r\nEXPORTS\r\n"
LINE_END = "\r\n"

_EXCLUDED_PREFIXES = (
    "__real@",
    "??_",
    "__CT??",
    "__CTA2?",
    "__TI2?",
    "__CTA1?AV",
    "__CTA2PAV",
    "__TI1?AV",
    "__TI2PAV",
    "__mask@@",
    "__xmm@",
)
_EXCLUDED_NAMES = frozenset({"__CTA1_N", "__TI1_N"})


class Mode(IntEnum):
    """Target naming convention."""

    WIN32 = 0
    WIN64 = 1


def is_excluded(name: str) -> bool:
    """Tell whether a symbol is compiler-generated and must not be exported."""
    return name in _EXCLUDED_NAMES or name.startswith(_EXCLUDED_PREFIXES)


def export_name(name: str, mode: Mode) -> str | None:
    """Return the name to export for a symbol, or None if it is not exported."""
    if Mode(mode) is Mode.WIN64:
        return name
    if name.startswith("_"):
        return name if "@" in name else name[1:]
    if name.startswith("?"):
        return name
    return None


def render_def(symbols: Iterable[str], mode: Mode) -> str:
    """Render the text of a .def file for the given symbols."""
    lines = [DEF_HEADER]
    for name in sorted(set(symbols)):
        if is_excluded(name):
            continue
        exported = export_name(name, mode)
        if exported is not None:
            lines.append(exported + LINE_END)
    return "".join(lines)


def write_def_file(
    symbols: Iterable[str], path: str | os.PathLike[str], mode: Mode
) -> None:
    """Write a .def file; raises OSError if it cannot be written."""
    Path(path).write_bytes(render_def(symbols, mode).encode("latin-1"))