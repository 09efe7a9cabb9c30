"""Per-view link catalog: last scan results plus a generation counter."""

from __future__ import annotations

import logging
from typing import Sequence

from .links import DetectedLink
from .path_scanner import detect_paths
from .url_tokenizer import detect_urls

logger = logging.getLogger(__name__)


class LinkDetector:
    """Scans terminal rows and answers "which link is under this cell".

    Owned by a single terminal view. ``scan`` always replaces the whole result
    set; ``generation`` goes up by one per scan so callers can tell whether
    their cached highlight state is stale. Not thread-safe.
    """

    def __init__(self) -> None:
        self._links: list[DetectedLink] = []
        self._generation = 0

    def scan(self, lines: Sequence[str]) -> None:
        rows = [str(line) for line in lines]
        self._generation += 1
        self._links.clear()
        self._links.extend(detect_urls(rows))
        self._links.extend(detect_paths(rows))
        logger.debug(
            "Scanned %d rows: %d links (generation %d)",
            len(rows),
            len(self._links),
            self._generation,
        )

    def link_at(self, row: int, col: int) -> DetectedLink | None:
        for link in self._links:
            if link.contains(row, col):
                return link
        return None

    @property
    def links(self) -> tuple[DetectedLink, ...]:
        return tuple(self._links)

    @property
    def generation(self) -> int:
        return self._generation

    def clear(self) -> None:
        """Drop all links without rescanning; the generation is left as is."""
        self._links.clear()
