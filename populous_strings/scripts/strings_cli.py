"""
Command-line access to strings files (lang??.dat).

Examples
--------
List the strings of a file, side by side with a reference language:

    populous-strings dump lang03.dat --reference lang00.dat

Export to a spreadsheet-friendly table, edit, and pack it back:

    populous-strings dump lang03.dat --reference lang00.dat --tsv lang03.tsv
    populous-strings pack lang03.tsv lang03_new.dat
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import List, Optional, Sequence
import sys

from populous_strings.errors import StringsError
from populous_strings.ingest.strings_file import StringsFileConfig, StringsFileReader, StringsFileWriter
from populous_strings.ingest.tsv import export_tsv, import_tsv
from populous_strings.models.comparison import pair_strings


def _config_from_args(ns) -> StringsFileConfig:
    cfg = StringsFileConfig()
    if getattr(ns, "max_bytes", None) is not None:
        cfg = replace(cfg, max_file_bytes=int(ns.max_bytes))
    return cfg


def _print_warnings(path: Path, warnings: Sequence[str]) -> None:
    for msg in warnings:
        print(f"[warn] {path.name}: {msg}")


def _cmd_dump(ns) -> int:
    reader = StringsFileReader(_config_from_args(ns))
    sf = reader.read(ns.file)
    _print_warnings(Path(ns.file), sf.warnings)

    reference: List[str] = []
    if ns.reference:
        ref = reader.read(ns.reference)
        _print_warnings(Path(ns.reference), ref.warnings)
        reference = ref.to_list()

    comparisons = pair_strings(sf.to_list(), reference)
    if ns.tsv:
        out = export_tsv(comparisons, ns.tsv)
        print(f"[info] wrote {len(comparisons)} rows -> {out}")
        return 0

    for i, c in enumerate(comparisons):
        if ns.reference:
            print(f"{i}\t{c.editable!r}\t{(c.reference or '')!r}")
        else:
            print(f"{i}\t{c.editable!r}")
    return 0


def _cmd_pack(ns) -> int:
    strings = import_tsv(ns.tsv)
    out = StringsFileWriter(_config_from_args(ns)).write(ns.out, strings)
    print(f"[info] wrote {len(strings)} strings -> {out}")
    return 0


def _cmd_info(ns) -> int:
    sf = StringsFileReader(_config_from_args(ns)).read(ns.file)
    print(f"file: {sf.source_path}")
    print(f"bytes: {sf.n_bytes}")
    print(f"strings: {sf.n_strings}")
    print(f"terminated: {sf.terminated}")
    _print_warnings(Path(ns.file), sf.warnings)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    import argparse

    p = argparse.ArgumentParser(
        prog="populous-strings",
        description="Inspect, export and rebuild NULL-delimited UTF-16 strings files.",
        epilog=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--max-bytes", type=int, default=None, help="Refuse to read files larger than this")
    sub = p.add_subparsers(dest="command", required=True)

    p_dump = sub.add_parser("dump", help="List strings (optionally next to a reference file)")
    p_dump.add_argument("file", help="Strings file to read")
    p_dump.add_argument("--reference", default=None, help="Reference strings file, paired by index")
    p_dump.add_argument("--tsv", default=None, help="Write the comparison table to this TSV instead of printing")
    p_dump.set_defaults(func=_cmd_dump)

    p_pack = sub.add_parser("pack", help="Build a strings file from the 'editable' column of a TSV")
    p_pack.add_argument("tsv", help="TSV written by 'dump --tsv'")
    p_pack.add_argument("out", help="Strings file to create or replace")
    p_pack.set_defaults(func=_cmd_pack)

    p_info = sub.add_parser("info", help="Summarize a strings file")
    p_info.add_argument("file", help="Strings file to read")
    p_info.set_defaults(func=_cmd_info)

    ns = p.parse_args(argv)
    try:
        return int(ns.func(ns))
    except StringsError as exc:
        print(f"ERROR: {exc.describe()}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
