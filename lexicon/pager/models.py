"""Data models for the pager module."""

from dataclasses import dataclass
from enum import Enum

__all__ = ["PagerState", "CommandKind", "Command"]


class PagerState(str, Enum):
    IDLE             = "idle"
    RENDERING        = "rendering"
    AWAITING_COMMAND = "awaiting_command"
    DONE             = "done"


class CommandKind(str, Enum):
    MOVE = "move"   # advance by `pages` pages (negative scrolls back)
    QUIT = "quit"


@dataclass(frozen=True)
class Command:
    """One parsed line of pager input."""
    kind:  CommandKind
    pages: int = 0

    def __str__(self) -> str:
        if self.kind is CommandKind.QUIT:
            return "Command(quit)"
        return f"Command(move {self.pages:+d})"
