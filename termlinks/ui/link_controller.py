"""Pointer handling for detected links in a terminal view.

The controller is not a widget. A terminal widget forwards its mouse
positions and modifiers here; the controller maps pixels to grid cells, keeps
the hovered link while the modifier is held and opens links on
modifier+click.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from PySide6 import QtCore
from PySide6.QtCore import Qt

from termlinks.core.link_detector import LinkDetector
from termlinks.core.links import DetectedLink
from termlinks.services.link_opener import open_link
from termlinks.services.screen_rows import screen_rows
from termlinks.settings_models import LinkSettings, link_settings_from

logger = logging.getLogger(__name__)

# On macOS Qt reports Cmd as ControlModifier and the Control key as MetaModifier.
_MODIFIER_FLAGS: dict[str, Qt.KeyboardModifier] = {
    "ctrl": Qt.KeyboardModifier.ControlModifier,
    "meta": Qt.KeyboardModifier.MetaModifier,
    "alt": Qt.KeyboardModifier.AltModifier,
    "shift": Qt.KeyboardModifier.ShiftModifier,
}


def modifier_held(required: str, modifiers) -> bool:
    """True if ``modifiers`` satisfies the configured activation modifier."""
    name = str(required or "").strip().lower()
    if name == "none":
        return True
    flag = _MODIFIER_FLAGS.get(name)
    if flag is None:
        return False
    return bool(Qt.KeyboardModifier(modifiers) & flag)


class TerminalLinkController(QtCore.QObject):
    linksChanged = QtCore.Signal(int)  # generation
    hoveredLinkChanged = QtCore.Signal(object)  # DetectedLink | None
    linkActivated = QtCore.Signal(object)  # DetectedLink

    def __init__(
        self,
        settings: Optional[LinkSettings] = None,
        parent: Optional[QtCore.QObject] = None,
        opener: Optional[Callable[..., None]] = None,
    ):
        super().__init__(parent)
        self._detector = LinkDetector()
        self._settings: LinkSettings = link_settings_from(settings)
        self._opener = opener or open_link
        self._cell_w = 1.0
        self._cell_h = 1.0
        self._pad_top = 0.0
        self._pad_left = 0.0
        self._hovered: Optional[DetectedLink] = None

    # -------- Configuration --------
    @property
    def detector(self) -> LinkDetector:
        return self._detector

    @property
    def settings(self) -> LinkSettings:
        return dict(self._settings)  # type: ignore[return-value]

    def set_settings(self, settings: LinkSettings) -> None:
        self._settings = link_settings_from(settings)
        if not self._settings["enabled"]:
            self._detector.clear()
            self._set_hovered(None)

    def set_cell_metrics(self, cell_width: float, cell_height: float) -> None:
        if cell_width <= 0 or cell_height <= 0:
            raise ValueError("Cell metrics must be positive")
        self._cell_w = float(cell_width)
        self._cell_h = float(cell_height)

    def set_padding(self, top: float = 0.0, left: float = 0.0) -> None:
        self._pad_top = float(top)
        self._pad_left = float(left)

    # -------- Scanning --------
    def rescan(self, rows: Sequence[str]) -> None:
        if self._settings["enabled"]:
            self._detector.scan(rows)
        else:
            self._detector.clear()
        self._set_hovered(None)
        self.linksChanged.emit(self._detector.generation)

    def rescan_screen(self, screen) -> None:
        self.rescan(screen_rows(screen))

    # -------- Pointer --------
    def cell_at(self, x: float, y: float) -> Optional[tuple[int, int]]:
        """Map a pixel position to ``(row, col)``; ``None`` inside the padding."""
        adj_x = float(x) - self._pad_left
        adj_y = float(y) - self._pad_top
        if adj_x < 0 or adj_y < 0:
            return None
        return int(adj_y // self._cell_h), int(adj_x // self._cell_w)

    def link_at_pixel(self, x: float, y: float) -> Optional[DetectedLink]:
        cell = self.cell_at(x, y)
        if cell is None:
            return None
        return self._detector.link_at(*cell)

    @property
    def hovered_link(self) -> Optional[DetectedLink]:
        return self._hovered

    def hover(self, x: float, y: float, modifiers=Qt.KeyboardModifier.NoModifier) -> Optional[DetectedLink]:
        """Track the link under the pointer while the activation modifier is held."""
        if not modifier_held(self._settings["activation_modifier"], modifiers):
            self._set_hovered(None)
            return None
        link = self.link_at_pixel(x, y)
        self._set_hovered(link)
        return link

    def leave(self) -> None:
        self._set_hovered(None)

    def click(self, x: float, y: float, modifiers=Qt.KeyboardModifier.NoModifier) -> bool:
        if not modifier_held(self._settings["activation_modifier"], modifiers):
            return False
        link = self.link_at_pixel(x, y)
        if link is None:
            return False
        logger.debug("Activating %s link at %s: %s", link.kind.value, link.start, link.text)
        self.linkActivated.emit(link)
        self._opener(link, settings=self._settings)
        return True

    def _set_hovered(self, link: Optional[DetectedLink]) -> None:
        if link == self._hovered:
            return
        self._hovered = link
        self.hoveredLinkChanged.emit(link)
