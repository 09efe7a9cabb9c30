"""Row text from pyte screens, one character per grid column."""

from __future__ import annotations

import re
import unicodedata
from typing import Any, Mapping

import pyte
from pyte import modes
from wcwidth import wcwidth

_ESCAPE_RE = re.compile(r"\x1b(?:\[[0-?]*[ -/]*[@-~]|\][^\x07\x1b]*(?:\x07|\x1b\\)|[@-Z\\-_])")


def _cell_char(cell: Any) -> str:
    ch = getattr(cell, "data", None)
    # Wide characters leave an empty placeholder cell behind them.
    if not isinstance(ch, str) or not ch:
        return " "
    # Combining marks are stored with their base character.
    return unicodedata.normalize("NFC", ch)[0]


def row_effective_len(row_dict: Mapping[int, Any], columns: int) -> int:
    if not row_dict or columns <= 0:
        return 0
    for c in range(columns - 1, -1, -1):
        cell = row_dict.get(c)
        if not cell:
            continue
        data = getattr(cell, "data", None)
        if data and data != " ":
            return c + 1
    return 0


def row_text(row_dict: Mapping[int, Any], columns: int) -> str:
    eff_len = row_effective_len(row_dict, columns)
    return "".join(_cell_char(row_dict.get(c)) for c in range(eff_len))


def screen_rows(screen: pyte.Screen) -> list[str]:
    """Visible lines of ``screen``, top to bottom, trailing blanks trimmed."""
    cols = int(screen.columns)
    return [row_text(screen.buffer.get(r, {}), cols) for r in range(int(screen.lines))]


def history_rows(screen: pyte.Screen) -> list[str]:
    """Scrolled-off lines of a ``HistoryScreen``, oldest first."""
    history = getattr(screen, "history", None)
    top = getattr(history, "top", None)
    if not top:
        return []
    cols = int(screen.columns)
    return [row_text(entry, cols) for entry in top]


def wrapped_row_count(text: str, columns: int) -> int:
    """Screen rows ``text`` occupies once long lines wrap at ``columns``.

    Escape sequences are ignored. Tabs count as a full tab stop; control and
    zero-width characters count as one cell each. The result never falls
    short of what pyte draws.
    """
    columns = max(1, int(columns))
    total = 0
    for line in _ESCAPE_RE.sub("", text).split("\n"):
        width = sum(8 if ch == "\t" else max(1, wcwidth(ch)) for ch in line)
        total += max(1, -(-width // columns))
    return total


def screen_from_text(data: str | bytes, columns: int = 200, lines: int | None = None) -> pyte.Screen:
    """Replay captured terminal output into a fresh screen.

    Bare ``\\n`` line endings are treated as ``\\r\\n``. When ``lines`` is not
    given the screen is tall enough to keep every line of ``data`` visible,
    including the extra rows taken by lines that wrap.
    """
    raw = data.encode("utf-8", errors="replace") if isinstance(data, str) else bytes(data)
    raw = raw.replace(b"\r\n", b"\n").replace(b"\n", b"\r\n")
    if lines is None:
        lines = wrapped_row_count(raw.decode("utf-8", errors="replace").replace("\r\n", "\n"), columns)
    screen = pyte.Screen(max(1, int(columns)), max(1, int(lines)))
    screen.set_mode(modes.DECAWM)
    stream = pyte.ByteStream(screen)
    stream.feed(raw)
    return screen
