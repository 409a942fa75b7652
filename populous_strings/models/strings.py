from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

import pandas as pd

from populous_strings.codec.binary_strings import code_unit_count


@dataclass(frozen=True)
class StringsFile:
    """
    In-memory representation of one strings file after decoding.

    Notes
    - ``strings`` keeps file order; the index of a string is its identity in the game.
    - ``terminated`` is False when the file ended with a string lacking its delimiter.
      Such files are accepted; saving them again always writes the delimiter.
    """
    source_path: Optional[Path]
    strings: Tuple[str, ...]
    n_bytes: int
    terminated: bool = True
    warnings: Tuple[str, ...] = ()

    @property
    def n_strings(self) -> int:
        return len(self.strings)

    def to_list(self) -> List[str]:
        return list(self.strings)

    def to_frame(self) -> pd.DataFrame:
        """One row per string: index, text and its length in code units."""
        return pd.DataFrame(
            {
                "index": range(len(self.strings)),
                "text": list(self.strings),
                "n_units": [code_unit_count(s) for s in self.strings],
            }
        )
