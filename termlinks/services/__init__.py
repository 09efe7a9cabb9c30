from .link_opener import build_open_command, open_link, platform_open_command, spawn_detached
from .screen_rows import history_rows, screen_from_text, screen_rows

__all__ = [
    "build_open_command",
    "history_rows",
    "open_link",
    "platform_open_command",
    "screen_from_text",
    "screen_rows",
    "spawn_detached",
]
