"""Open a detected link with the platform handler or the user's editor.

Building the command and launching it are separate steps so the decision
table can be checked without starting processes.
"""

from __future__ import annotations

import logging
import os
import shlex
import sys
from typing import Mapping

from PySide6.QtCore import QProcess

from termlinks.core.links import DetectedLink, LinkKind
from termlinks.settings_models import LinkSettings, default_link_settings

logger = logging.getLogger(__name__)


def platform_open_command(platform: str | None = None) -> str:
    plat = sys.platform if platform is None else platform
    return "open" if plat == "darwin" else "xdg-open"


def _editor_command(editor: str) -> list[str]:
    try:
        parts = shlex.split(editor)
    except ValueError:
        # Unbalanced quotes: treat the whole value as the program name.
        parts = [editor]
    return [part for part in parts if part]


def build_open_command(
    link: DetectedLink,
    *,
    environ: Mapping[str, str] | None = None,
    platform: str | None = None,
    settings: LinkSettings | None = None,
) -> tuple[str, list[str]]:
    """Return ``(program, args)`` that opens ``link``."""
    env = os.environ if environ is None else environ
    cfg = settings or default_link_settings()
    opener = str(cfg.get("open_command") or "").strip() or platform_open_command(platform)

    if link.kind is LinkKind.URL:
        return opener, [link.text]
    if link.kind is LinkKind.FILE_PATH:
        editor_var = str(cfg.get("editor_env") or "EDITOR")
        editor = _editor_command(str(env.get(editor_var) or "").strip())
        if editor:
            return editor[0], [*editor[1:], link.text]
        return opener, [link.text]
    raise ValueError(f"Unsupported link kind: {link.kind!r}")


def spawn_detached(program: str, args: list[str], working_dir: str = "") -> bool:
    """Start ``program`` without waiting for it; returns whether it launched."""
    result = QProcess.startDetached(program, list(args), working_dir)
    # Depending on the overload PySide returns either bool or (bool, pid).
    if isinstance(result, tuple):
        return bool(result[0])
    return bool(result)


def open_link(
    link: DetectedLink,
    *,
    environ: Mapping[str, str] | None = None,
    settings: LinkSettings | None = None,
) -> None:
    program, args = build_open_command(link, environ=environ, settings=settings)
    logger.info("Opening link: %s with %s", link.text, program)
    if not spawn_detached(program, args):
        logger.error("Failed to open link '%s' with %s", link.text, program)
