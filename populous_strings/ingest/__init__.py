"""Ingest package - reading and writing strings files on disk.

This package handles:
- Reading a whole lang??.dat file into memory and decoding it
- Encoding strings and replacing a lang??.dat file atomically
- Tab-separated export/import of the comparison table

Key classes:
- StringsFileReader: path -> StringsFile (strings + warnings)
- StringsFileWriter: (path, strings) -> complete file on disk

Design principle:
- The codec stays pure; all file-system errors are wrapped here
"""
from .strings_file import (
    DEFAULT_MAX_FILE_BYTES,
    StringsFileConfig,
    StringsFileReader,
    StringsFileWriter,
    read_strings_file,
    write_strings_file,
)
from .tsv import export_tsv, import_tsv, read_comparison_tsv

__all__ = [
    "DEFAULT_MAX_FILE_BYTES",
    "StringsFileConfig",
    "StringsFileReader",
    "StringsFileWriter",
    "read_strings_file",
    "write_strings_file",
    "export_tsv",
    "import_tsv",
    "read_comparison_tsv",
]
