"""Tests for reading and writing strings files on disk."""

from __future__ import annotations

import dataclasses
import tempfile
from pathlib import Path

import pytest

from populous_strings.codec.binary_strings import CodecConfig, encode
from populous_strings.errors import EncodingError, IOFailure, MalformedInput, StringsError
from populous_strings.ingest.strings_file import (
    DEFAULT_MAX_FILE_BYTES,
    StringsFileConfig,
    StringsFileReader,
    StringsFileWriter,
    read_strings_file,
    write_strings_file,
)


# -----------------------------------------------------------------------
# Reading
# -----------------------------------------------------------------------


def test_write_then_read_round_trip() -> None:
    strings = ["Start Game", "", "Options", "Größe", "日本語"]
    with tempfile.TemporaryDirectory() as d:
        p = Path(d) / "lang00.dat"
        write_strings_file(p, strings)
        assert p.read_bytes() == encode(strings)
        assert read_strings_file(p) == strings


def test_read_accepts_str_path() -> None:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d) / "lang01.dat"
        p.write_bytes(encode(["a", "b"]))
        assert read_strings_file(str(p)) == ["a", "b"]


def test_reader_reports_unterminated_string() -> None:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d) / "legacy.dat"
        p.write_bytes(encode(["first", "last"])[:-2])
        sf = StringsFileReader().read(p)
    assert sf.strings == ("first", "last")
    assert sf.terminated is False
    assert len(sf.warnings) == 1
    assert "string 1" in sf.warnings[0]
    assert sf.n_bytes == len(encode(["first", "last"])) - 2


def test_reader_empty_file() -> None:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d) / "empty.dat"
        p.write_bytes(b"")
        sf = StringsFileReader().read(p)
    assert sf.strings == ()
    assert sf.n_strings == 0
    assert sf.terminated is True
    assert sf.warnings == ("file is empty: no strings",)


def test_reader_frame() -> None:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d) / "lang.dat"
        p.write_bytes(encode(["ab", "", "\U0001F600"]))
        df = StringsFileReader().read(p).to_frame()
    assert list(df.columns) == ["index", "text", "n_units"]
    assert df["n_units"].tolist() == [2, 0, 2]


def test_missing_file_wraps_os_error() -> None:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d) / "missing.dat"
        with pytest.raises(IOFailure) as ei:
            read_strings_file(p)
    assert isinstance(ei.value.cause, FileNotFoundError)
    msg = ei.value.describe()
    assert msg.startswith("Failed to read strings from file")
    assert ": " in msg


def test_odd_length_file_wraps_malformed_input() -> None:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d) / "odd.dat"
        p.write_bytes(b"\x41\x00\x00")
        with pytest.raises(MalformedInput) as ei:
            read_strings_file(p)
    assert isinstance(ei.value.cause, MalformedInput)
    assert "odd" in ei.value.describe()


def test_file_over_limit_is_rejected() -> None:
    cfg = StringsFileConfig(max_file_bytes=8)
    with tempfile.TemporaryDirectory() as d:
        p = Path(d) / "big.dat"
        p.write_bytes(encode(["0123456789"]))
        with pytest.raises(IOFailure) as ei:
            read_strings_file(p, cfg)
        assert "too large" in ei.value.describe()

        # exactly at the limit is fine
        p.write_bytes(encode(["abc"]))
        assert read_strings_file(p, cfg) == ["abc"]


def test_all_errors_share_base_class() -> None:
    with tempfile.TemporaryDirectory() as d:
        with pytest.raises(StringsError):
            read_strings_file(Path(d) / "nope.dat")


# -----------------------------------------------------------------------
# Writing
# -----------------------------------------------------------------------


def test_write_replaces_longer_file_completely() -> None:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d) / "lang.dat"
        p.write_bytes(encode(["a much longer previous content"] * 10))
        write_strings_file(p, ["x"])
        assert p.read_bytes() == b"x\x00\x00\x00"


def test_atomic_write_leaves_no_temporary_files() -> None:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d) / "lang.dat"
        out = StringsFileWriter().write(p, ["a", "b"])
        assert out == p
        assert sorted(x.name for x in Path(d).iterdir()) == ["lang.dat"]


def test_encoding_failure_keeps_previous_file() -> None:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d) / "lang.dat"
        write_strings_file(p, ["old"])
        before = p.read_bytes()
        with pytest.raises(EncodingError) as ei:
            write_strings_file(p, ["new", "bad\x00"])
        assert isinstance(ei.value.cause, EncodingError)
        assert p.read_bytes() == before
        assert sorted(x.name for x in Path(d).iterdir()) == ["lang.dat"]


def test_strict_codec_rejects_lone_surrogate_on_write() -> None:
    cfg = StringsFileConfig(codec=CodecConfig(errors="strict"))
    with tempfile.TemporaryDirectory() as d:
        p = Path(d) / "lang.dat"
        with pytest.raises(EncodingError):
            write_strings_file(p, ["\ud800"], cfg)
        assert not p.exists()


def test_write_into_missing_directory_wraps_os_error() -> None:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d) / "no" / "such" / "dir" / "lang.dat"
        with pytest.raises(IOFailure) as ei:
            write_strings_file(p, ["a"])
    assert isinstance(ei.value.cause, OSError)
    assert ei.value.describe().startswith("Failed to write strings file")


def test_direct_write_mode() -> None:
    cfg = StringsFileConfig(atomic_write=False)
    with tempfile.TemporaryDirectory() as d:
        p = Path(d) / "lang.dat"
        p.write_bytes(b"\xff" * 64)
        write_strings_file(p, ["a", ""], cfg)
        assert p.read_bytes() == b"a\x00\x00\x00\x00\x00"


# -----------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------


def test_config_defaults_and_dict_round_trip() -> None:
    cfg = StringsFileConfig()
    assert cfg.max_file_bytes == DEFAULT_MAX_FILE_BYTES == 2**31 - 1
    assert cfg.atomic_write is True
    assert cfg.codec == CodecConfig()

    cfg2 = dataclasses.replace(cfg, atomic_write=False, codec=CodecConfig(errors="strict"))
    assert StringsFileConfig.from_dict(cfg2.to_dict()) == cfg2


def test_config_frozen() -> None:
    cfg = StringsFileConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.max_file_bytes = 1  # type: ignore[misc]
