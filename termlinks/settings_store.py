from __future__ import annotations

import json
import logging
from copy import deepcopy
from pathlib import Path
from typing import Any, Mapping

from termlinks.settings_models import LinkSettings, default_settings, link_settings_from

logger = logging.getLogger(__name__)


def deep_merge_defaults(data: Mapping[str, Any], defaults: Mapping[str, Any]) -> dict[str, Any]:
    """Merge defaults into data without overwriting explicitly provided values."""
    merged = deepcopy(dict(data))
    for key, default_value in defaults.items():
        if key not in merged:
            merged[key] = deepcopy(default_value)
            continue
        current = merged[key]
        if isinstance(current, dict) and isinstance(default_value, dict):
            merged[key] = deep_merge_defaults(current, default_value)
    return merged


def dot_get(data: Mapping[str, Any], key: str, default: Any = None) -> Any:
    if not key:
        return data
    current: Any = data
    for part in key.split("."):
        if not isinstance(current, Mapping) or part not in current:
            return default
        current = current[part]
    return current


class JsonSettingsStore:
    """Read-only view of a JSON settings file with defaults merged in."""

    def __init__(self, path: Path, defaults: Mapping[str, Any] | None = None) -> None:
        self.path = Path(path)
        self.defaults: dict[str, Any] = deepcopy(dict(defaults if defaults is not None else default_settings()))
        self.data: dict[str, Any] = deepcopy(self.defaults)
        self.last_error: str | None = None

    def load(self) -> dict[str, Any]:
        loaded: dict[str, Any] = {}
        self.last_error = None

        if self.path.exists():
            try:
                raw = json.loads(self.path.read_text(encoding="utf-8"))
            except (OSError, ValueError) as exc:
                raw = None
                self.last_error = str(exc)
            if isinstance(raw, dict):
                loaded = raw
            elif self.last_error is None:
                self.last_error = (
                    f"Settings root in '{self.path}' must be a JSON object, "
                    f"found {type(raw).__name__}."
                )
            if self.last_error is not None:
                # Fall back to defaults without touching the invalid file.
                logger.warning("Ignoring settings file %s: %s", self.path, self.last_error)
        else:
            logger.debug("No settings file at %s, using defaults", self.path)

        self.data = deep_merge_defaults(loaded, self.defaults)
        return self.data

    def get(self, key: str, default: Any = None) -> Any:
        return dot_get(self.data, key, default)

    def link_settings(self) -> LinkSettings:
        return link_settings_from(self.get("links"))


def load_link_settings(path: Path) -> LinkSettings:
    """Read the ``links`` section of the settings file at ``path``."""
    store = JsonSettingsStore(path)
    store.load()
    return store.link_settings()
