"""Populous Strings -- Python tooling for the localized strings files of Populous: The Beginning.

The game keeps its text in lang??.dat files: a flat run of UTF-16LE strings,
each terminated by a two-byte NULL.

This package provides tools for:
- Decoding and encoding the strings format (bit-exact)
- Reading and atomically writing strings files, with wrapped errors
- Pairing an editable language file with a reference language by index
- Holding editor state (current file, unsaved changes) without any UI
- Exporting/importing the comparison table as TSV

Key principles:
- The codec is pure: bytes in, strings out (and back)
- Legacy files without a final NULL are read; writes always terminate every string
- Every failure surfaces as a StringsError carrying its original cause

Main subpackages:
- codec: StringCodec and CodecConfig
- ingest: File reader/writer and TSV export
- models: StringsFile, StringComparison and pairing helpers
- editor: EditorSession
- scripts: populous-strings command-line tool
"""

from populous_strings.codec.binary_strings import CodecConfig, StringCodec, decode, encode
from populous_strings.errors import EncodingError, IOFailure, MalformedInput, MissingPathError, StringsError
from populous_strings.ingest.strings_file import (
    StringsFileConfig,
    StringsFileReader,
    StringsFileWriter,
    read_strings_file,
    write_strings_file,
)

__all__ = [
    "CodecConfig",
    "StringCodec",
    "decode",
    "encode",
    "EncodingError",
    "IOFailure",
    "MalformedInput",
    "MissingPathError",
    "StringsError",
    "StringsFileConfig",
    "StringsFileReader",
    "StringsFileWriter",
    "read_strings_file",
    "write_strings_file",
]
