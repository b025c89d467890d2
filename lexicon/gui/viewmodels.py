"""
GUI ViewModels — pure-Python observable state containers.

No Qt imports here; every class is testable without a display.
Qt widgets observe these objects and update themselves in response to state
changes.

Public API
──────────
SearchMode               — what the search box matches against
ScriptBrowserViewModel   — search results, selection and signature
                           jumps for the script browser page
"""

import logging
import re
from enum import Enum
from typing import Optional

from lexicon.exceptions import LexiconBaseError
from lexicon.session import LexiconSession
from lexicon.store.models import ScriptRecord

__all__ = ["SearchMode", "ScriptBrowserViewModel"]

logger = logging.getLogger(__name__)

_BAD_PATTERN = "Bad pattern"


class SearchMode(str, Enum):
    NAME     = "name"       # repository.named()
    REGEX    = "regex"      # repository.named() with a compiled pattern
    DEFINING = "defining"   # repository.defining()


class ScriptBrowserViewModel:
    """
    Drives the script browser page.

    Attributes
    ──────────
    search_query   — text typed into the search box
    mode           — SearchMode
    selected       — the ScriptRecord shown in the code view, or None
    current_line   — 0-based line to scroll to in the code view
    status         — one-line message for the status label
    visible_names  — derived: names matching search_query under mode
    """

    def __init__(self, session: LexiconSession) -> None:
        self._session = session
        self.search_query: str                  = ""
        self.mode:         SearchMode           = SearchMode.NAME
        self.selected:     Optional[ScriptRecord] = None
        self.current_line: int                  = 0
        self.status:       str                  = ""

    @property
    def visible_names(self) -> list[str]:
        """Names matching search_query under the current mode."""
        if self.status.startswith(_BAD_PATTERN):
            self.status = ""
        if self.mode is SearchMode.DEFINING:
            if not self.search_query.strip():
                return []
            return self._session.defining(self.search_query.strip())
        if self.mode is SearchMode.REGEX:
            try:
                return self._session.named(re.compile(self.search_query))
            except re.error as exc:
                self.status = f"{_BAD_PATTERN}: {exc}"
                return []
        return self._session.named(self.search_query)

    @property
    def selected_text(self) -> str:
        """Code of the selected script, or an empty string."""
        return self.selected.code if self.selected else ""

    def select(self, name: str) -> None:
        """Show the first script called *name* (exact match preferred)."""
        repo = self._session.repository
        exact = [r for r in repo if r.name == name]
        self.selected = exact[0] if exact else repo.first_named(name)
        self.current_line = 0
        self.status = f"{self.selected.name}: {len(self.selected.lines)} lines"

    def find(self, signature: str) -> bool:
        """
        Select the script defining *signature* and point at its definition.

        Returns False (and sets status) when the signature cannot be resolved.
        """
        resolver = self._session.resolver
        if resolver is None:
            self.status = "No resolver configured"
            return False
        try:
            index, line = self._session.repository.locate_by_signature(signature, resolver)
        except LexiconBaseError as exc:
            self.status = str(exc)
            return False
        self.selected = self._session.repository[index]
        self.current_line = line
        self.status = f"{signature} → {self.selected.name}:{line + 1}"
        return True
