"""
lexicon — browse, search and paginate the scripts of an RPG Maker VX Ace
project from the console or a small Qt window.

Public API
──────────
LexiconSession    — façade: browse / line / named / defining / find
LexiconConfig     — pager size, surrounding lines, retry bound
ScriptRepository  — ordered script collection with lookups
ScriptRecord      — one named script
load_scripts      — read Scripts.rvdata2 or a directory of .rb files
"""

from lexicon.config import LexiconConfig
from lexicon.session import LexiconSession
from lexicon.store import ScriptRecord, ScriptRepository, load_scripts

__all__ = [
    "LexiconConfig",
    "LexiconSession",
    "ScriptRecord",
    "ScriptRepository",
    "load_scripts",
]

__version__ = "1.0.0"
