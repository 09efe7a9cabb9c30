"""URL spans for terminal rows, backed by linkify-it."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Sequence

from linkify_it import LinkifyIt

from .links import DetectedLink, LinkKind

# Only explicit-scheme URLs: no bare domains, e-mail addresses or "//host".
_LINKIFY_OPTIONS = {
    "fuzzy_link": False,
    "fuzzy_email": False,
    "fuzzy_ip": False,
}
_DISABLED_SCHEMAS = ("mailto:", "//")
# Remote schemes that share the http "//[user@]host[:port]/path" shape.
_HOST_SCHEMAS = ("ssh:", "sftp:", "git:", "ws:", "wss:")
# file: URLs usually have an empty host ("file:///tmp/x"). The last character
# may not be punctuation that ends a sentence or closes a bracket.
_FILE_URL_TAIL = re.compile(r"^//[^\s<>\"'`]*[^\s<>\"'`.,:;!?)\]}]")


@lru_cache(maxsize=1)
def _url_finder() -> LinkifyIt:
    finder = LinkifyIt(options=dict(_LINKIFY_OPTIONS))
    for schema in _DISABLED_SCHEMAS:
        finder.add(schema, None)
    for schema in _HOST_SCHEMAS:
        finder.add(schema, "http:")
    finder.add("file:", {"validate": _FILE_URL_TAIL})
    return finder


def find_urls_in_line(row: int, line: str) -> list[DetectedLink]:
    if not line:
        return []
    matches = _url_finder().match(line) or []
    out: list[DetectedLink] = []
    for match in matches:
        start_col = int(match.index)
        end_col = max(start_col, int(match.last_index) - 1)
        out.append(
            DetectedLink(
                kind=LinkKind.URL,
                start=(row, start_col),
                end=(row, end_col),
                text=line[start_col:end_col + 1],
            )
        )
    return out


def detect_urls(lines: Sequence[str]) -> list[DetectedLink]:
    """Return URL links for every row, rows in order, left to right."""
    links: list[DetectedLink] = []
    for row, line in enumerate(lines):
        links.extend(find_urls_in_line(row, line))
    return links
