"""
Pager — renders text a page at a time and runs the navigation loop.

State machine
─────────────
    IDLE ──advance──▶ RENDERING ──more left──▶ AWAITING_COMMAND ──cmd──▶ RENDERING
                               └──exhausted / quit──▶ DONE

`position` is the cursor: how many lines of `text` have been shown, i.e. the
index of the first line not yet shown.  Each session owns its own Pager; a
session is started with reset() and driven with page().

Usage::

    pager = Pager(lines_per_page=23)
    pager.reset(script.code)
    viewed = pager.page()
"""

import logging
from typing import Optional, Union

from lexicon.exceptions import InvalidCommandError
from lexicon.store.models import split_lines

from .commands import parse_command
from .console import ConsoleIO
from .models import CommandKind, PagerState

__all__ = ["Pager"]

logger = logging.getLogger(__name__)


class Pager:
    """Paginates a list of lines through a ConsoleIO."""

    def __init__(
        self,
        lines_per_page: int = 23,
        io: Optional[ConsoleIO] = None,
        prompt: str = "-- MORE -- >> ",
        max_invalid_commands: int = 10,
    ) -> None:
        if lines_per_page < 1:
            raise ValueError(f"lines_per_page must be >= 1, got {lines_per_page}")
        self.lines_per_page = lines_per_page
        self.prompt = prompt
        self.max_invalid_commands = max_invalid_commands
        self._io = io or ConsoleIO()
        self.text: list[str] = []
        self.position = 0
        self.state = PagerState.IDLE

    # ── Session control ───────────────────────────────────────────────────

    def reset(self, text: Union[str, list[str]], position: int = 0) -> None:
        """Replace the text and place the cursor at *position*."""
        self.text = split_lines(text) if isinstance(text, str) else list(text)
        self.position = position
        self.state = PagerState.IDLE
        logger.debug("Pager reset: %s, cursor at %d", self.describe(), position)

    def advance(self, delta: int) -> int:
        """
        Move the cursor by *delta* lines and render the page ending there.

        Moving back past the top re-shows the first page.  The cursor is
        stored and returned clamped to [0, len(text)].
        """
        total = len(self.text)
        if self.position >= total or self.position < 0:
            self.state = PagerState.DONE
            self.position = self._clamped()
            return self.position

        self.state = PagerState.RENDERING
        self.position = max(self.position + delta, min(self.lines_per_page, total))
        start = max(self.position - self.lines_per_page, 0)
        for line in self.text[start:self.position]:
            self._io.write(line)

        self.position = self._clamped()
        self.state = (
            PagerState.AWAITING_COMMAND if self.position < total else PagerState.DONE
        )
        return self.position

    def page(self) -> int:
        """
        Run the interactive loop until the text is exhausted or the user quits.

        Returns the number of lines viewed.
        """
        self.advance(self.lines_per_page)
        while self.state is PagerState.AWAITING_COMMAND:
            command = self._read_command()
            if command is None or command.kind is CommandKind.QUIT:
                self.state = PagerState.DONE
                break
            self.advance(self.lines_per_page * command.pages)
        return self._clamped()

    # ── Description ───────────────────────────────────────────────────────

    def describe(self) -> str:
        return f"{len(self.text)} lines, {self.lines_per_page} shown"

    def __str__(self) -> str:
        return f"Lexicon Pager: {self.describe()}"

    __repr__ = __str__

    # ── Internal helpers ──────────────────────────────────────────────────

    def _clamped(self) -> int:
        return min(max(self.position, 0), len(self.text))

    def _read_command(self):
        """Prompt until a valid command arrives; None means quit."""
        for _ in range(self.max_invalid_commands):
            raw = self._io.read_line(self.prompt)
            if raw is None:
                logger.debug("End of input — leaving pager")
                return None
            try:
                return parse_command(raw)
            except InvalidCommandError as exc:
                self._io.write(str(exc))
        logger.warning(
            "%d unknown commands in a row — leaving pager", self.max_invalid_commands
        )
        return None
