"""
Pager command grammar.

  input (case-insensitive)                 command
  ──────────────────────────────────────   ───────────────
  empty, >, forward, next, down            one page forward
  <, back, prev, previous, up              one page back
  -99 … 99                                 that many pages
  q…, quit…, exit…                         quit
"""

import re

from lexicon.exceptions import InvalidCommandError

from .models import Command, CommandKind

__all__ = ["parse_command", "FORWARD", "BACK", "QUIT"]

FORWARD = Command(CommandKind.MOVE, 1)
BACK    = Command(CommandKind.MOVE, -1)
QUIT    = Command(CommandKind.QUIT)

_FORWARD_RE = re.compile(r"^(?:>|forward|next|down)?$", re.IGNORECASE)
_BACK_RE    = re.compile(r"^(?:<|back|prev|previous|up)$", re.IGNORECASE)
_PAGES_RE   = re.compile(r"^[+-]?\d{1,2}$")
_QUIT_RE    = re.compile(r"^(?:q|exit)", re.IGNORECASE)   # prefix: q, quit, exit…


def parse_command(text: str) -> Command:
    """
    Parse one line of user input into a Command.

    Raises:
        InvalidCommandError: *text* matches no command form.
    """
    text = text.strip()
    if _FORWARD_RE.match(text):
        return FORWARD
    if _BACK_RE.match(text):
        return BACK
    if _PAGES_RE.match(text):
        return Command(CommandKind.MOVE, int(text))
    if _QUIT_RE.match(text):
        return QUIT
    raise InvalidCommandError(f"Unknown command: {text}")
