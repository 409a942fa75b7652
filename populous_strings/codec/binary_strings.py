from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from populous_strings.errors import EncodingError, MalformedInput


BYTES_PER_CODE_UNIT = 2
DELIMITER = b"\x00\x00"

# On-disk code unit: 16-bit little-endian.
_CODE_UNIT_DTYPE = np.dtype("<u2")
_TEXT_CODEC = "utf-16-le"


@dataclass(frozen=True)
class CodecConfig:
    """
    Text conversion settings for the strings-file codec.

    errors:
      Python codec error handler used for both directions.
      "surrogatepass" (default) keeps lone surrogates found in legacy files, so
      decode -> encode reproduces the original bytes. "strict" rejects them
      (MalformedInput on decode, EncodingError on encode).
    allow_embedded_null:
      - False: encode rejects strings containing U+0000 (it would be read back as a delimiter).
      - True: write them anyway; the string will split into several records on read.
    """
    errors: str = "surrogatepass"
    allow_embedded_null: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> CodecConfig:
        return cls(**d)


class StringCodec:
    """
    Codec for the NULL-delimited UTF-16LE strings format.

    Format:
      - each string is a run of 16-bit little-endian code units
      - each string is followed by a delimiter: one zero code unit (bytes 00 00)
      - delimiters are only recognised at even byte offsets

    Read/write asymmetry:
      - decode tolerates a final string with no delimiter (older files omit it)
      - encode always terminates every string, including the last
    """

    def __init__(self, config: Optional[CodecConfig] = None):
        self.config = config or CodecConfig()

    def decode(self, data: bytes) -> List[str]:
        strings, _ = self.decode_with_status(data)
        return strings

    def decode_with_status(self, data: bytes) -> Tuple[List[str], bool]:
        """
        Split a buffer into strings.

        Returns (strings, terminated). ``terminated`` is False when the buffer ends
        with an unterminated trailing string; an empty buffer counts as terminated.
        """
        buf = data if isinstance(data, bytes) else bytes(data)
        n = len(buf)
        if n % BYTES_PER_CODE_UNIT != 0:
            raise MalformedInput(
                f"Buffer length {n} is odd; it cannot hold a whole number of 16-bit code units."
            )
        if n == 0:
            return [], True

        units = np.frombuffer(buf, dtype=_CODE_UNIT_DTYPE)
        delimiter_units = np.flatnonzero(units == 0)

        strings: List[str] = []
        start = 0
        for unit_index in delimiter_units:
            end = int(unit_index) * BYTES_PER_CODE_UNIT
            strings.append(self._decode_segment(buf, start, end))
            start = end + BYTES_PER_CODE_UNIT

        terminated = start >= n
        if not terminated:
            strings.append(self._decode_segment(buf, start, n))
        return strings, terminated

    def encode(self, strings: Iterable[str]) -> bytes:
        cfg = self.config
        if isinstance(strings, (str, bytes)):
            raise EncodingError(
                f"Expected a sequence of strings, got a single {type(strings).__name__}; wrap it in a list."
            )
        parts: List[bytes] = []
        for i, s in enumerate(strings):
            if not isinstance(s, str):
                raise EncodingError(
                    f"String {i} has type {type(s).__name__}; expected str (normalize missing entries to '')."
                )
            if not cfg.allow_embedded_null and "\x00" in s:
                raise EncodingError(
                    f"String {i} contains U+0000 at position {s.index(chr(0))}, which is reserved as the delimiter."
                )
            try:
                parts.append(s.encode(_TEXT_CODEC, errors=cfg.errors))
            except UnicodeEncodeError as exc:
                raise EncodingError(f"String {i} cannot be encoded as 16-bit code units.") from exc
            parts.append(DELIMITER)
        return b"".join(parts)

    def _decode_segment(self, buf: bytes, start: int, end: int) -> str:
        # Unreachable for even-length buffers; kept as a hard check rather than truncating.
        if (end - start) % BYTES_PER_CODE_UNIT != 0:
            raise MalformedInput(f"Malformed string at bytes [{start}, {end}): odd byte count.")
        try:
            return buf[start:end].decode(_TEXT_CODEC, errors=self.config.errors)
        except UnicodeDecodeError as exc:
            raise MalformedInput(f"Malformed string at bytes [{start}, {end}).") from exc


def normalize_strings(strings: Iterable[Optional[str]]) -> List[str]:
    """Replace missing (None) entries with empty strings, keeping positions."""
    return ["" if s is None else s for s in strings]


def code_unit_count(s: str) -> int:
    """Number of 16-bit code units ``s`` occupies on disk (delimiter excluded)."""
    return len(s.encode(_TEXT_CODEC, errors="surrogatepass")) // BYTES_PER_CODE_UNIT


def encoded_size(strings: Sequence[str]) -> int:
    """Byte length ``encode(strings)`` will produce (code units plus one delimiter each)."""
    return sum((code_unit_count(s) + 1) * BYTES_PER_CODE_UNIT for s in strings)


def decode(data: bytes, config: Optional[CodecConfig] = None) -> List[str]:
    return StringCodec(config).decode(data)


def encode(strings: Iterable[str], config: Optional[CodecConfig] = None) -> bytes:
    return StringCodec(config).encode(strings)
