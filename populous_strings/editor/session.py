from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import List, Optional

from populous_strings.errors import MissingPathError
from populous_strings.ingest.strings_file import StringsFileConfig, StringsFileReader, StringsFileWriter
from populous_strings.models.comparison import (
    StringComparison,
    clear_editable,
    editable_strings,
    pair_strings,
    reference_strings,
)


@dataclass
class EditorSession:
    """
    UI-free state of the string editor: the comparison rows, the file being edited
    and whether it has unsaved changes.

    A front-end calls these methods from its menu handlers and asks ``dirty`` before
    discarding work. Loading either file re-pairs it with the other side by index.
    """
    config: StringsFileConfig = field(default_factory=StringsFileConfig)
    comparisons: List[StringComparison] = field(default_factory=list)
    current_path: Optional[Path] = None
    dirty: bool = False
    warnings: List[str] = field(default_factory=list)

    @property
    def editable(self) -> List[str]:
        return editable_strings(self.comparisons)

    @property
    def reference(self) -> List[str]:
        return reference_strings(self.comparisons)

    @property
    def has_comparisons(self) -> bool:
        return bool(self.comparisons)

    @property
    def has_reference_strings(self) -> bool:
        return any(c.reference for c in self.comparisons)

    def new(self) -> None:
        """Start a new strings file; reference strings stay loaded."""
        self.comparisons = clear_editable(self.comparisons)
        self.current_path = None
        self.dirty = False

    def open(self, file_path: str | Path) -> None:
        sf = StringsFileReader(self.config).read(file_path)
        self.comparisons = pair_strings(sf.to_list(), self.reference)
        self.current_path = sf.source_path
        self.dirty = False
        self.warnings = list(sf.warnings)

    def open_reference(self, file_path: str | Path) -> None:
        sf = StringsFileReader(self.config).read(file_path)
        self.comparisons = pair_strings(self.editable, sf.to_list())
        self.warnings = list(sf.warnings)

    def close_all(self) -> None:
        self.comparisons = []
        self.current_path = None
        self.dirty = False
        self.warnings = []

    def set_string(self, index: int, text: str) -> None:
        if not 0 <= index < len(self.comparisons):
            raise IndexError(f"String index {index} out of range (0..{len(self.comparisons) - 1}).")
        old = self.comparisons[index]
        if old.editable == text:
            return
        self.comparisons[index] = replace(old, editable=text)
        self.dirty = True

    def save(self) -> Path:
        if self.current_path is None:
            raise MissingPathError("No file path yet; use save_as().")
        return self.save_as(self.current_path)

    def save_as(self, file_path: str | Path) -> Path:
        path = StringsFileWriter(self.config).write(file_path, self.editable)
        self.current_path = path
        self.dirty = False
        return path
