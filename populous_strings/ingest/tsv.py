"""Tab-separated export/import of the comparison table.

Translators usually work in spreadsheets, so the editable and reference columns
can be round-tripped through a UTF-8 TSV file:

    index<TAB>editable<TAB>reference

Every text field is quoted, so tabs, quotes and any line break (including a lone
carriage return) stay inside their cell. Strings holding lone surrogates have no
UTF-8 form and are refused on export.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence
import csv

import pandas as pd

from populous_strings.errors import EncodingError, IOFailure, MalformedInput
from populous_strings.ingest.strings_file import write_bytes_atomic
from populous_strings.models.comparison import (
    StringComparison,
    comparisons_to_frame,
    editable_strings,
    frame_to_comparisons,
)


def export_tsv(comparisons: Sequence[StringComparison], file_path: str | Path) -> Path:
    path = Path(file_path).expanduser()
    df = comparisons_to_frame(comparisons)
    text = df.to_csv(sep="\t", index=False, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
    try:
        data = text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise EncodingError(f"Failed to write table '{path}': a string has no UTF-8 form.") from exc

    try:
        write_bytes_atomic(path, data)
    except OSError as exc:
        raise IOFailure(f"Failed to write table '{path}'.") from exc
    return path


def read_comparison_tsv(file_path: str | Path) -> List[StringComparison]:
    path = Path(file_path).expanduser()
    try:
        df = pd.read_csv(
            path,
            sep="\t",
            encoding="utf-8",
            dtype={"editable": str, "reference": str},
            na_filter=False,
            quoting=csv.QUOTE_MINIMAL,
        )
    except OSError as exc:
        raise IOFailure(f"Failed to read table '{path}'.") from exc
    except (ValueError, pd.errors.ParserError) as exc:
        raise MalformedInput(f"Failed to parse table '{path}'.") from exc

    try:
        return frame_to_comparisons(df)
    except (KeyError, ValueError) as exc:
        raise MalformedInput(f"Table '{path}' has no usable 'editable'/'index' columns.") from exc


def import_tsv(file_path: str | Path) -> List[str]:
    """Editable strings from a TSV written by :func:`export_tsv`, in index order."""
    return editable_strings(read_comparison_tsv(file_path))
