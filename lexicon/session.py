"""
LexiconSession — the public façade over ScriptRepository and Pager.

Usage::

    session = LexiconSession(ScriptRepository(load_scripts(path)),
                             resolver=get_resolver("text", records))

    session.named("Window")           # list of script names
    session.defining("Game_Party")    # scripts defining Game_Party
    session.line("Game_Party", 120)   # print lines 115–125, returns 11
    session.browse("Scene_Map")       # interactive pager, returns lines viewed
    session.find("Scene_Map#update")  # pager seeded at the definition

Every browse/find runs a Pager built for that call only.
"""

import logging
from typing import Optional, Union

from lexicon.config import LexiconConfig
from lexicon.exceptions import NotFoundError, UnresolvedSignatureError
from lexicon.pager import ConsoleIO, Pager
from lexicon.resolver.base import AbstractResolver
from lexicon.store.repository import Query, ScriptRepository

__all__ = ["LexiconSession"]

logger = logging.getLogger(__name__)


class LexiconSession:
    """Browse, search and paginate the loaded scripts."""

    def __init__(
        self,
        repository: ScriptRepository,
        resolver: Optional[AbstractResolver] = None,
        config: Optional[LexiconConfig] = None,
        io: Optional[ConsoleIO] = None,
    ) -> None:
        self.repository = repository
        self.resolver = resolver
        self.config = config or LexiconConfig()
        self.io = io or ConsoleIO()

    # ── Lookups ───────────────────────────────────────────────────────────

    def named(self, query: Query) -> list[str]:
        """Names of non-empty scripts whose name contains *query*."""
        return self.repository.named(query)

    def defining(self, symbol: Union[str, type]) -> list[str]:
        """Names of scripts defining the class or module *symbol*."""
        return self.repository.defining(symbol)

    # ── Display ───────────────────────────────────────────────────────────

    def line(self, name: Query, line: int, surround: Optional[int] = None) -> int:
        """
        Print the lines of script *name* around 0-based *line*.

        *surround* defaults to config.surrounding_lines; 0 prints only the
        requested line.  Returns the number of lines printed.

        Raises:
            NotFoundError: no script name matches.
        """
        if surround is None:
            surround = self.config.surrounding_lines
        chunk, count = self.repository.chunk_around(name, line, surround)
        for text in chunk:
            self.io.write(text)
        return count

    chunk = line
    line_around = line

    def browse(self, name: Query) -> int:
        """
        Page through every non-empty script whose name contains *name*.

        Returns the number of lines viewed.

        Raises:
            NotFoundError: no non-empty script name matches.
        """
        records = self.repository.records_named(name)
        if not records:
            raise NotFoundError(f"No non-empty script named {name!r}")
        text = [line for record in records for line in record.lines]
        logger.debug("Browsing %d script(s), %d lines", len(records), len(text))
        return self._run_pager(text)

    page = browse

    def find(self, signature: str) -> int:
        """
        Page the script defining *signature*, starting at its definition.

        Raises:
            UnresolvedSignatureError: no resolver is configured or the
                signature cannot be located.
        """
        if self.resolver is None:
            raise UnresolvedSignatureError(
                f"Cannot resolve {signature!r}: no resolver configured"
            )
        index, line = self.repository.locate_by_signature(signature, self.resolver)
        record = self.repository[index]
        logger.info("%s is defined in %r at line %d", signature, record.name, line + 1)
        return self._run_pager(record.lines, position=line)

    # ── Internal helpers ──────────────────────────────────────────────────

    def _new_pager(self) -> Pager:
        return Pager(
            lines_per_page=self.config.pager_lines,
            io=self.io,
            prompt=self.config.prompt,
            max_invalid_commands=self.config.max_invalid_commands,
        )

    def _run_pager(self, text: list[str], position: int = 0) -> int:
        pager = self._new_pager()
        pager.reset(text, position)
        return pager.page()
