"""Absolute and home-relative file path spans for terminal rows.

A single left-to-right pass per row. A path starts at ``/`` or ``~/`` when it
opens the row or follows a delimiter, extends over path characters, and loses
trailing sentence punctuation. Device and pseudo-filesystem nodes are skipped.
"""

from __future__ import annotations

from typing import Sequence

from .links import DetectedLink, LinkKind

_PATH_PUNCTUATION = frozenset("/._-+@:,=%")
_DELIMITERS = frozenset("\"'([{<`;|&")
_TRAILING_PUNCTUATION = frozenset(".,:;")

_IGNORED_DEVICE_PATHS: tuple[str, ...] = (
    "/dev/null",
    "/dev/zero",
    "/dev/random",
    "/dev/urandom",
    "/dev/stdin",
    "/dev/stdout",
    "/dev/stderr",
    "/dev/tty",
    "/dev/fd",
)
_IGNORED_PREFIXES: tuple[str, ...] = ("/proc/", "/sys/")


def is_path_char(ch: str) -> bool:
    return ch.isalnum() or ch in _PATH_PUNCTUATION


def is_path_delimiter(ch: str) -> bool:
    return ch.isspace() or ch in _DELIMITERS


def is_trailing_punctuation(ch: str) -> bool:
    return ch in _TRAILING_PUNCTUATION


def is_ignored_path(path: str) -> bool:
    """True for device nodes and /proc, /sys entries that are never worth opening."""
    for device in _IGNORED_DEVICE_PATHS:
        if path == device or path.startswith(device + "/"):
            return True
    return path.startswith(_IGNORED_PREFIXES)


def find_paths_in_line(row: int, line: str) -> list[DetectedLink]:
    results: list[DetectedLink] = []
    length = len(line)
    i = 0

    while i < length:
        ch = line[i]
        is_absolute = ch == "/"
        is_home = ch == "~" and i + 1 < length and line[i + 1] == "/"
        if not is_absolute and not is_home:
            i += 1
            continue

        if i > 0 and not is_path_delimiter(line[i - 1]):
            i += 1
            continue

        start_col = i
        i += 2 if is_home else 1

        has_separator_after_prefix = False
        while i < length and is_path_char(line[i]):
            if line[i] == "/":
                has_separator_after_prefix = True
            i += 1

        # `i` now sits past the consumed region; trimming only moves `end`.
        end = i
        while end > start_col + 1 and is_trailing_punctuation(line[end - 1]):
            end -= 1

        path_text = line[start_col:end]
        if path_text in ("/", "~/"):
            continue
        if is_absolute and not has_separator_after_prefix and len(path_text) < 3:
            continue
        if is_ignored_path(path_text):
            continue

        results.append(
            DetectedLink(
                kind=LinkKind.FILE_PATH,
                start=(row, start_col),
                end=(row, end - 1),
                text=path_text,
            )
        )

    return results


def detect_paths(lines: Sequence[str]) -> list[DetectedLink]:
    """Return file path links for every row, rows in order, left to right."""
    links: list[DetectedLink] = []
    for row, line in enumerate(lines):
        links.extend(find_paths_in_line(row, line))
    return links
