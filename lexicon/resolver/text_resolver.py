"""
TextResolver — locates method definitions by scanning script text.

Stands in for runtime introspection when the scripts are only available as
text (e.g. read from Scripts.rvdata2 outside the engine).  For each script in
load order:

    1. find a line opening the owner:   class Owner / module Owner
                                        (optionally prefixed, A::Owner)
    2. scan that body for the member:   def member            (Type#member)
                                        def self.member       (Type.member)
                                        def Owner.member      (Type.member)

A body ends at the first `end` (or sibling class/module) indented no deeper
than its opening line.  Definitions inside `class << self` blocks and other
metaprogramming are not recognised.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Optional

from lexicon.store.models import ScriptRecord

from .base import AbstractResolver
from .models import Signature, SourceLocation

__all__ = ["TextResolver"]

logger = logging.getLogger(__name__)

_BLOCK_RE = re.compile(r"^(?P<indent>\s*)(?:class|module|end)\b")


def _indent(line: str) -> int:
    return len(line) - len(line.lstrip())


class TextResolver(AbstractResolver):
    """Resolver that searches the loaded scripts' text."""

    def __init__(self, records: Iterable[ScriptRecord]) -> None:
        self._records = list(records)

    @property
    def kind(self) -> str:
        return "text"

    # ── Public API ────────────────────────────────────────────────────────

    def resolve(self, signature: Signature) -> Optional[SourceLocation]:
        owner = re.escape(signature.owner_name)
        member = re.escape(signature.member)
        owner_re = re.compile(rf"^\s*(?:class|module)\s+(?:\w+::)*{owner}(?![\w:])")
        if signature.instance:
            def_re = re.compile(rf"^\s*def\s+{member}(?=[\s(;]|$)")
        else:
            def_re = re.compile(rf"^\s*def\s+(?:self|{owner})\.{member}(?=[\s(;]|$)")

        for position, record in enumerate(self._records):
            line = self._find_in_record(record.lines, owner_re, def_re)
            if line is None:
                continue
            source_id = record.source_id if record.source_id is not None else position
            logger.debug("Resolved %s → %r line %d", signature, record.name, line + 1)
            return SourceLocation(
                source_id=source_id,
                line_number=line + 1,
                record_index=position,
            )

        logger.debug("Could not resolve %s", signature)
        return None

    # ── Private helpers ───────────────────────────────────────────────────

    @staticmethod
    def _find_in_record(
        lines: list[str],
        owner_re: re.Pattern,
        def_re: re.Pattern,
    ) -> Optional[int]:
        """Return the 0-based line of the member definition, or None."""
        for start, text in enumerate(lines):
            if not owner_re.match(text):
                continue
            depth = _indent(text)
            for index in range(start + 1, len(lines)):
                line = lines[index]
                if def_re.match(line):
                    return index
                if line.strip() and _BLOCK_RE.match(line) and _indent(line) <= depth:
                    break
        return None
