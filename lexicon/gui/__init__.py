"""
gui — PyQt6 script browser for lexicon.

Modules
───────
main_window  — MainWindow, the top-level application window
pages        — page widgets
viewmodels   — pure-Python state containers (no Qt)

Only viewmodels is imported here so that it stays usable without a display.
"""

from lexicon.gui import viewmodels

__all__ = ["viewmodels"]
