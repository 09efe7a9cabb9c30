"""Qt glue for terminal views."""

from .link_controller import TerminalLinkController, modifier_held

__all__ = ["TerminalLinkController", "modifier_held"]
