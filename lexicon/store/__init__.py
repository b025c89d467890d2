"""
store — the in-memory script corpus.

Public API
──────────
ScriptRecord      — dataclass representing one script
ScriptRepository  — ordered collection with named / defining / chunk_around /
                    locate_by_signature
load_scripts      — build records from Scripts.rvdata2 or a directory
"""

from lexicon.store.models import ScriptRecord
from lexicon.store.repository import ScriptRepository
from lexicon.store.loader import load_directory, load_rvdata2, load_scripts

__all__ = [
    "ScriptRecord",
    "ScriptRepository",
    "load_directory",
    "load_rvdata2",
    "load_scripts",
]
