"""
ScriptRepository — ordered, read-only collection of loaded scripts.

Usage::

    repo = ScriptRepository(load_scripts("Data/Scripts.rvdata2"))

    repo.named("Scene")           # ['Scene_Base', 'Scene_Map', ...]
    repo.defining("Game_Actor")   # ['Game_Actor']
    lines, count = repo.chunk_around("Game_Actor", 40, 5)
    index, line = repo.locate_by_signature("Game_Actor#level_up", resolver)

Index order equals load order; signature resolution depends on it.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Iterable, Iterator, Optional, Union

from lexicon.exceptions import NotFoundError, UnresolvedSignatureError
from lexicon.resolver.models import parse_signature
from lexicon.store.models import ScriptRecord

if TYPE_CHECKING:
    from lexicon.resolver.base import AbstractResolver
    from lexicon.resolver.models import SourceLocation

__all__ = ["ScriptRepository", "Query"]

logger = logging.getLogger(__name__)

# A name query: literal substring, compiled pattern, or a class (its __name__)
Query = Union[str, "re.Pattern[str]", type]

_DEFINITION_TEMPLATES = ("class {}", "module {}")


def _median(a: int, b: int, c: int) -> int:
    return sorted((a, b, c))[1]


def _query_text(query) -> Union[str, "re.Pattern[str]"]:
    if isinstance(query, type):
        return query.__name__
    return query


def _name_matches(name: str, query) -> bool:
    if isinstance(query, re.Pattern):
        return query.search(name) is not None
    return query in name


class ScriptRepository:
    """
    Search primitives over an ordered sequence of ScriptRecord objects.

    Records without a `source_id` are assigned their load position so that
    host locations can always be mapped back to an index.
    """

    def __init__(self, records: Iterable[ScriptRecord]) -> None:
        self._records: list[ScriptRecord] = []
        self._indices_by_source: dict[int, list[int]] = {}
        for index, record in enumerate(records):
            if record.source_id is None:
                record.source_id = index
            self._indices_by_source.setdefault(record.source_id, []).append(index)
            self._records.append(record)
        logger.debug("Repository holds %d scripts", len(self._records))

    # ── Container protocol ────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ScriptRecord]:
        return iter(self._records)

    def __getitem__(self, index: int) -> ScriptRecord:
        return self._records[index]

    @property
    def records(self) -> list[ScriptRecord]:
        return list(self._records)

    # ── Lookups (never raise) ─────────────────────────────────────────────

    def records_named(self, query: Query, skip_blank: bool = True) -> list[ScriptRecord]:
        """Records whose name contains *query*, in load order."""
        query = _query_text(query)
        return [
            r for r in self._records
            if _name_matches(r.name, query) and not (skip_blank and r.is_blank)
        ]

    def named(self, query: Query) -> list[str]:
        """
        Names of scripts containing *query* whose code is not blank.

        *query* may be a literal substring, a compiled regular expression
        (matched with `search`), or a class, whose name is used.
        """
        names = [r.name for r in self.records_named(query)]
        logger.debug("named(%r) → %d match(es)", query, len(names))
        return names

    def defining(self, symbol: Union[str, type]) -> list[str]:
        """
        Names of scripts that define the class or module *symbol*.

        Only the final segment of a namespaced symbol is used ("A::B" → "B").
        This is a plain substring search for "class <symbol>" and
        "module <symbol>"; exotic definitions are not caught.
        """
        symbol = _query_text(symbol).split("::")[-1]
        needles = [t.format(symbol) for t in _DEFINITION_TEMPLATES]
        names = [
            r.name for r in self._records
            if any(needle in r.code for needle in needles)
        ]
        logger.debug("defining(%r) → %d match(es)", symbol, len(names))
        return names

    # ── Single-record operations (fail fast) ──────────────────────────────

    def first_named(self, name: Query) -> ScriptRecord:
        """
        First record whose name contains *name*, blank or not.

        Raises:
            NotFoundError: no script name matches.
        """
        matches = self.records_named(name, skip_blank=False)
        if not matches:
            raise NotFoundError(f"No script named {_query_text(name)!r}")
        return matches[0]

    def chunk_around(self, name: Query, line: int, surround: int) -> tuple[list[str], int]:
        """
        Return the lines of script *name* around 0-based *line*.

        The window holds *surround* lines above and below *line*, shifted so
        it stays inside the script near either end.  Returns the slice and
        its length; *surround* = 0 yields just the requested line.

        Raises:
            NotFoundError: no script name matches.
            ValueError: *surround* is negative.
        """
        if surround < 0:
            raise ValueError(f"surround must be >= 0, got {surround}")
        lines = self.first_named(name).lines
        size = len(lines)
        start = _median(0, line - surround, size - surround)
        stop = _median(surround, line + surround, size)
        start = min(max(start, 0), size)
        stop = min(max(stop, 0), size)
        chunk = lines[start:stop + 1]
        return chunk, len(chunk)

    def locate_by_signature(
        self,
        signature: str,
        resolver: "AbstractResolver",
    ) -> tuple[int, int]:
        """
        Resolve `Type#method` / `Type.method` to (record index, 0-based line).

        Raises:
            UnresolvedSignatureError: malformed signature, unknown to the
                resolver, or located in a script this repository lacks.
        """
        parsed = parse_signature(signature)
        location = resolver.resolve(parsed)
        if location is None:
            raise UnresolvedSignatureError(f"Cannot resolve {signature!r}")
        index = self._index_for(location)
        if index is None:
            raise UnresolvedSignatureError(
                f"{signature!r} resolved to unknown script id {location.source_id}"
            )
        line = max(location.line_number - 1, 0)
        logger.debug("%s → script #%d line %d", parsed, index, line)
        return index, line

    def _index_for(self, location: "SourceLocation") -> Optional[int]:
        """
        Map a host location back to a record index.

        Several scripts may share a source_id (hand-edited projects, merged
        directories).  The host's own record index wins when it is one of
        them; otherwise the first script long enough to hold the line.
        """
        candidates = self._indices_by_source.get(location.source_id)
        if not candidates:
            return None
        if location.record_index in candidates:
            return location.record_index
        for index in candidates:
            if len(self._records[index].lines) >= location.line_number:
                return index
        return candidates[0]
