from .strings import StringsFile
from .comparison import (
    StringComparison,
    clear_editable,
    comparisons_to_frame,
    editable_strings,
    frame_to_comparisons,
    pair_strings,
    reference_strings,
)

__all__ = [
    "StringsFile",
    "StringComparison",
    "clear_editable",
    "comparisons_to_frame",
    "editable_strings",
    "frame_to_comparisons",
    "pair_strings",
    "reference_strings",
]
