"""Codec package - the NULL-delimited UTF-16LE strings format.

Key objects:
- StringCodec: decode(bytes) -> list of str, encode(strings) -> bytes
- CodecConfig: text conversion settings (error handler, embedded NULL policy)

Design principle:
- Pure transforms: no file access, no state kept between calls
"""
from .binary_strings import (
    BYTES_PER_CODE_UNIT,
    DELIMITER,
    CodecConfig,
    StringCodec,
    decode,
    encode,
    code_unit_count,
    encoded_size,
    normalize_strings,
)

__all__ = [
    "BYTES_PER_CODE_UNIT",
    "DELIMITER",
    "CodecConfig",
    "StringCodec",
    "decode",
    "encode",
    "code_unit_count",
    "encoded_size",
    "normalize_strings",
]
