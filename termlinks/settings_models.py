from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any, Literal, Mapping, TypedDict

ActivationModifier = Literal["ctrl", "meta", "alt", "shift", "none"]
ACTIVATION_MODIFIERS: tuple[str, ...] = ("ctrl", "meta", "alt", "shift", "none")

SETTINGS_DIRNAME = "termlinks"
SETTINGS_FILENAME = "settings.json"


class LinkSettings(TypedDict, total=False):
    enabled: bool
    editor_env: str
    open_command: str  # "" = platform default
    activation_modifier: ActivationModifier


class TermlinksSettings(TypedDict, total=False):
    links: LinkSettings


def default_link_settings() -> LinkSettings:
    return {
        "enabled": True,
        "editor_env": "EDITOR",
        "open_command": "",
        "activation_modifier": "ctrl",
    }


def default_settings() -> TermlinksSettings:
    return deepcopy({"links": default_link_settings()})


def default_settings_path() -> Path:
    return Path("~/.config").expanduser() / SETTINGS_DIRNAME / SETTINGS_FILENAME


def link_settings_from(data: Mapping[str, Any] | None) -> LinkSettings:
    """Coerce a loaded ``links`` mapping into well-typed settings."""
    defaults = default_link_settings()
    raw: Mapping[str, Any] = data if isinstance(data, Mapping) else {}

    enabled = raw.get("enabled", defaults["enabled"])
    editor_env = raw.get("editor_env")
    open_command = raw.get("open_command")
    modifier = str(raw.get("activation_modifier") or "").strip().lower()

    return {
        "enabled": enabled if isinstance(enabled, bool) else defaults["enabled"],
        "editor_env": str(editor_env).strip() if isinstance(editor_env, str) and editor_env.strip() else defaults["editor_env"],
        "open_command": str(open_command).strip() if isinstance(open_command, str) else defaults["open_command"],
        "activation_modifier": modifier if modifier in ACTIVATION_MODIFIERS else defaults["activation_modifier"],
    }
