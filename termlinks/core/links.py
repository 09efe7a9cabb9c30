"""Link kinds and grid spans shared by the scanners, catalog and opener."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

GridPos = tuple[int, int]  # (row, col)


class LinkKind(Enum):
    URL = "url"
    FILE_PATH = "file_path"


@dataclass(frozen=True, slots=True)
class DetectedLink:
    """A link found in the terminal grid.

    ``start`` and ``end`` are ``(row, col)`` pairs; ``end`` is inclusive.
    Columns count characters, not bytes.
    """

    kind: LinkKind
    start: GridPos
    end: GridPos
    text: str

    def contains(self, row: int, col: int) -> bool:
        start_row, start_col = self.start
        end_row, end_col = self.end
        if start_row == end_row:
            return row == start_row and start_col <= col <= end_col
        if row == start_row:
            return col >= start_col
        if row == end_row:
            return col <= end_col
        return start_row < row < end_row
