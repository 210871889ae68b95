"""Extract external symbols from i386/AMD64 COFF object files and write linker DEF files."""

__version__ = "1.0.0"
__all__ = ["cli", "coff", "deffile"]