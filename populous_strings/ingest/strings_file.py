from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional
import os
import stat
import tempfile

from populous_strings.codec.binary_strings import CodecConfig, StringCodec
from populous_strings.errors import EncodingError, IOFailure, MalformedInput
from populous_strings.models.strings import StringsFile


# Largest file the legacy editor accepted (32-bit signed byte count).
DEFAULT_MAX_FILE_BYTES = 2**31 - 1


@dataclass(frozen=True)
class StringsFileConfig:
    """
    File-access configuration for strings files (lang??.dat).

    max_file_bytes:
      Reject files larger than this before reading them into memory.
    atomic_write:
      - True: write to a temporary file next to the target, fsync, then os.replace().
              A failed write leaves any previous file untouched.
      - False: truncate and write the target directly. A failure part-way through
              can leave a truncated file behind.
    codec:
      Text conversion settings passed to StringCodec.
    """
    max_file_bytes: int = DEFAULT_MAX_FILE_BYTES
    atomic_write: bool = True
    codec: CodecConfig = field(default_factory=CodecConfig)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "max_file_bytes": self.max_file_bytes,
            "atomic_write": self.atomic_write,
            "codec": self.codec.to_dict(),
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> StringsFileConfig:
        d = dict(d)
        if isinstance(d.get("codec"), dict):
            d["codec"] = CodecConfig.from_dict(d["codec"])
        return cls(**d)


class StringsFileReader:
    """
    Reads a whole strings file into memory and decodes it.

    Contract:
      - the file is read in one pass before any parsing
      - every failure is re-raised as a StringsError wrapping the original cause
      - a missing final delimiter is tolerated and reported in StringsFile.warnings
    """

    def __init__(self, config: Optional[StringsFileConfig] = None):
        self.config = config or StringsFileConfig()

    def read(self, file_path: str | Path) -> StringsFile:
        path = Path(file_path).expanduser()
        cfg = self.config

        try:
            data = self._read_bytes(path)
        except (OSError, IOFailure) as exc:
            raise IOFailure(f"Failed to read strings from file '{path}'.") from exc

        try:
            strings, terminated = StringCodec(cfg.codec).decode_with_status(data)
        except MalformedInput as exc:
            raise MalformedInput(f"Failed to read strings from file '{path}'.") from exc

        warnings: List[str] = []
        if not data:
            warnings.append("file is empty: no strings")
        if not terminated:
            warnings.append(
                f"string {len(strings) - 1} has no terminating NULL (tolerated; it will be terminated on save)"
            )

        return StringsFile(
            source_path=path,
            strings=tuple(strings),
            n_bytes=len(data),
            terminated=terminated,
            warnings=tuple(warnings),
        )

    def _read_bytes(self, path: Path) -> bytes:
        limit = int(self.config.max_file_bytes)
        with path.open("rb") as fh:
            size = os.fstat(fh.fileno()).st_size
            if size > limit:
                raise IOFailure(f"The file is too large and cannot be read ({size} bytes, limit {limit}).")
            return fh.read()


class StringsFileWriter:
    """
    Encodes strings and writes them as a complete strings file.

    The target is created if absent and fully replaced if present; nothing is
    ever appended. Encoding happens before the file system is touched, so an
    unencodable string never produces a partial file.
    """

    def __init__(self, config: Optional[StringsFileConfig] = None):
        self.config = config or StringsFileConfig()

    def write(self, file_path: str | Path, strings: Iterable[str]) -> Path:
        path = Path(file_path).expanduser()
        cfg = self.config

        try:
            data = StringCodec(cfg.codec).encode(strings)
        except EncodingError as exc:
            raise EncodingError(f"Failed to write strings file '{path}'.") from exc

        try:
            if cfg.atomic_write:
                write_bytes_atomic(path, data)
            else:
                with path.open("wb") as fh:
                    fh.write(data)
        except OSError as exc:
            raise IOFailure(f"Failed to write strings file '{path}'.") from exc
        return path


def write_bytes_atomic(path: Path, data: bytes) -> None:
    """Write ``data`` to a temporary file beside ``path``, fsync, then os.replace() it over ``path``."""
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
            fh.flush()
            os.fsync(fh.fileno())
        if path.exists():
            os.chmod(tmp, stat.S_IMODE(path.stat().st_mode))
        os.replace(tmp, path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise


def read_strings_file(file_path: str | Path, config: Optional[StringsFileConfig] = None) -> List[str]:
    """Read all strings from a strings file, in file order."""
    return StringsFileReader(config).read(file_path).to_list()


def write_strings_file(
    file_path: str | Path,
    strings: Iterable[str],
    config: Optional[StringsFileConfig] = None,
) -> None:
    """Write strings to a strings file, replacing any existing file."""
    StringsFileWriter(config).write(file_path, strings)
