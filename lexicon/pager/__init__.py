"""
pager — bounded, interactive rendering of long text.

Public API
──────────
Pager          — per-session state machine + command loop
parse_command  — the navigation command grammar
ConsoleIO      — print-a-line / read-a-line channel
"""

from .commands import parse_command
from .console import ConsoleIO
from .models import Command, CommandKind, PagerState
from .pager import Pager

__all__ = ["Pager", "PagerState", "Command", "CommandKind", "ConsoleIO", "parse_command"]
