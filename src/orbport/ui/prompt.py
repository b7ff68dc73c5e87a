"""Interactive yes/no confirmation."""

from __future__ import annotations

import questionary


def ask_user_to_confirm(message: str) -> bool:
    """Ask ``message``; an interrupted prompt counts as no."""
    return questionary.confirm(message, default=False).ask() or False
