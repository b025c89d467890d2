"""
MainWindow — top-level application window for the lexicon GUI.

Hosts a single ScriptBrowserPage over an already-loaded LexiconSession.
"""

import logging

from PyQt6.QtWidgets import QMainWindow, QWidget

from lexicon.gui.pages.script_browser import ScriptBrowserPage
from lexicon.session import LexiconSession

__all__ = ["MainWindow"]

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Root window: hosts the script browser page."""

    def __init__(self, session: LexiconSession, parent: QWidget = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(f"Lexicon — {len(session.repository)} scripts")
        self.resize(900, 600)

        self._page_browser = ScriptBrowserPage(session)
        self.setCentralWidget(self._page_browser)
        logger.debug("MainWindow ready")
