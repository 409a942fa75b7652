"""Positional pairing of an editable strings file with a read-only reference file.

Two strings files for different languages list the same messages in the same
order, so index ``i`` of the editable file is compared against index ``i`` of the
reference file. The files may have different lengths; the pairing always covers
the longer one.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional, Sequence

import pandas as pd


COMPARISON_COLUMNS = ("index", "editable", "reference")


@dataclass(frozen=True)
class StringComparison:
    """
    One row of the comparison grid.

    editable:
      The string being edited ("" when the editable file is shorter).
    reference:
      The reference string, or None when no reference exists at this index.
    """
    editable: str = ""
    reference: Optional[str] = None


def pair_strings(
    editable: Sequence[Optional[str]],
    reference: Sequence[Optional[str]],
) -> List[StringComparison]:
    """
    Pair two string sequences by position.

    The result has ``max(len(editable), len(reference))`` entries. Missing or empty
    editable entries become ""; missing or empty reference entries become None.
    """
    n = max(len(editable), len(reference))
    out: List[StringComparison] = []
    for i in range(n):
        e = editable[i] if i < len(editable) else None
        r = reference[i] if i < len(reference) else None
        out.append(StringComparison(editable=e or "", reference=r or None))
    return out


def editable_strings(comparisons: Sequence[StringComparison]) -> List[str]:
    return [c.editable or "" for c in comparisons]


def reference_strings(comparisons: Sequence[StringComparison]) -> List[str]:
    return [c.reference or "" for c in comparisons]


def clear_editable(comparisons: Sequence[StringComparison]) -> List[StringComparison]:
    """Blank every editable string; references and the number of rows are kept."""
    return [replace(c, editable="") for c in comparisons]


def comparisons_to_frame(comparisons: Sequence[StringComparison]) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "index": range(len(comparisons)),
            "editable": editable_strings(comparisons),
            "reference": [c.reference for c in comparisons],
        },
        columns=list(COMPARISON_COLUMNS),
    )


def frame_to_comparisons(df: pd.DataFrame) -> List[StringComparison]:
    """Inverse of :func:`comparisons_to_frame`; rows are ordered by ``index`` when present."""
    if "editable" not in df.columns:
        raise KeyError(f"Missing required column 'editable'. Present={list(df.columns)}")
    if "index" in df.columns:
        df = df.assign(_order=pd.to_numeric(df["index"])).sort_values("_order", kind="stable")

    def _text(v) -> Optional[str]:
        if v is None or (isinstance(v, float) and pd.isna(v)):
            return None
        return str(v)

    refs = df["reference"].tolist() if "reference" in df.columns else [None] * len(df)
    return [
        StringComparison(editable=_text(e) or "", reference=_text(r) or None)
        for e, r in zip(df["editable"].tolist(), refs)
    ]
