"""Reading external symbol names from i386 and AMD64 COFF object files."""

from __future__ import annotations

import os
import struct
from pathlib import Path

MACHINE_I386 = 0x014C
MACHINE_AMD64 = 0x8664
SUPPORTED_MACHINES = frozenset({MACHINE_I386, MACHINE_AMD64})

SYM_CLASS_EXTERNAL = 2
SYM_UNDEFINED = 0

# Machine, NumberOfSections, TimeDateStamp, PointerToSymbolTable,
# NumberOfSymbols, SizeOfOptionalHeader, Characteristics
_FILE_HEADER = struct.Struct("<HHIIIHH")
# Name, Value, SectionNumber, Type, StorageClass, NumberOfAuxSymbols
_SYMBOL = struct.Struct("<8sIhHBB")


class CoffError(ValueError):
    """Raised when data is not a supported or well-formed COFF object."""


def _decode(raw: bytes) -> str:
    return raw.decode("latin-1")


def _symbol_name(data: bytes, raw_name: bytes, string_table: int) -> str:
    if raw_name[:4] != b"\0\0\0\0":
        return _decode(raw_name.split(b"\0", 1)[0])
    start = string_table + int.from_bytes(raw_name[4:], "little")
    if start > len(data):
        raise CoffError("symbol name offset points past end of data")
    end = data.find(b"\0", start)
    if end < 0:
        end = len(data)
    return _decode(data[start:end])


def external_symbols(data: bytes) -> list[str]:
    """Return the names of defined external symbols, in symbol table order."""
    data = bytes(data)
    if len(data) < _FILE_HEADER.size:
        raise CoffError("data too short for a COFF file header")
    machine, _, _, table_offset, count, _, _ = _FILE_HEADER.unpack_from(data)
    if machine not in SUPPORTED_MACHINES:
        raise CoffError(f"unsupported machine type 0x{machine:04x}")
    string_table = table_offset + count * _SYMBOL.size
    if string_table > len(data):
        raise CoffError("symbol table extends past end of data")

    names: list[str] = []
    index = 0
    while index < count:
        raw_name, _value, section, _type, storage, aux = _SYMBOL.unpack_from(
            data, table_offset + index * _SYMBOL.size
        )
        index += aux + 1
        if storage != SYM_CLASS_EXTERNAL or section == SYM_UNDEFINED:
            continue
        names.append(_symbol_name(data, raw_name, string_table))
    return names


def symbols_from_file(path: str | os.PathLike[str]) -> list[str]:
    """Read a COFF object file and return its defined external symbols."""
    return external_symbols(Path(path).read_bytes())