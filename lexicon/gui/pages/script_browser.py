"""
ScriptBrowserPage — the single page of the lexicon GUI.

Layout
──────
  ┌──────────────────────────────────────────────┐
  │ Search: [______________] [Name ▾]            │
  │ ┌────────────┐ ┌───────────────────────────┐ │
  │ │ Scene_Base │ │ class Scene_Map < ...     │ │
  │ │ Scene_Map  │ │   def start               │ │
  │ │ …          │ │ …                         │ │
  │ └────────────┘ └───────────────────────────┘ │
  │ Find: [Type#method_____] [Go]   status…      │
  └──────────────────────────────────────────────┘
"""

import logging

from PyQt6.QtGui import QTextCursor
from PyQt6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QPlainTextEdit,
    QPushButton,
    QSplitter,
    QVBoxLayout,
    QWidget,
)

from lexicon.gui.viewmodels import ScriptBrowserViewModel, SearchMode
from lexicon.session import LexiconSession

__all__ = ["ScriptBrowserPage"]

logger = logging.getLogger(__name__)

_MODES = [
    ("Name",     SearchMode.NAME),
    ("Regex",    SearchMode.REGEX),
    ("Defining", SearchMode.DEFINING),
]


class ScriptBrowserPage(QWidget):
    """Search the loaded scripts and read their code."""

    def __init__(self, session: LexiconSession, parent: QWidget = None) -> None:
        super().__init__(parent)
        self._vm = ScriptBrowserViewModel(session)
        self._build_ui()
        self._refresh_list()

    # ── UI construction ────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        # Search bar
        search_row = QHBoxLayout()
        search_row.addWidget(QLabel("Search:"))
        self._search_edit = QLineEdit()
        self._search_edit.setPlaceholderText("Script name or class…")
        self._search_edit.textChanged.connect(self._on_search_changed)
        search_row.addWidget(self._search_edit)
        self._mode_combo = QComboBox()
        for label, _mode in _MODES:
            self._mode_combo.addItem(label)
        self._mode_combo.currentIndexChanged.connect(self._on_mode_changed)
        search_row.addWidget(self._mode_combo)
        layout.addLayout(search_row)

        # Script list | code view
        splitter = QSplitter()
        self._list_widget = QListWidget()
        self._list_widget.currentTextChanged.connect(self._on_name_selected)
        splitter.addWidget(self._list_widget)
        self._code_view = QPlainTextEdit()
        self._code_view.setReadOnly(True)
        self._code_view.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)
        splitter.addWidget(self._code_view)
        splitter.setStretchFactor(1, 3)
        layout.addWidget(splitter)

        # Signature finder
        find_row = QHBoxLayout()
        find_row.addWidget(QLabel("Find:"))
        self._find_edit = QLineEdit()
        self._find_edit.setPlaceholderText("Type#method or Type.method")
        self._find_edit.returnPressed.connect(self._on_find)
        find_row.addWidget(self._find_edit)
        self._find_btn = QPushButton("Go")
        self._find_btn.clicked.connect(self._on_find)
        find_row.addWidget(self._find_btn)
        self._status_label = QLabel("")
        find_row.addWidget(self._status_label, 1)
        layout.addLayout(find_row)

    # ── Slots ──────────────────────────────────────────────────────────────

    def _on_search_changed(self, text: str) -> None:
        self._vm.search_query = text
        self._refresh_list()

    def _on_mode_changed(self, index: int) -> None:
        self._vm.mode = _MODES[index][1]
        self._refresh_list()

    def _on_name_selected(self, name: str) -> None:
        if not name:
            return
        self._vm.select(name)
        self._show_selected()

    def _on_find(self) -> None:
        if self._vm.find(self._find_edit.text()):
            self._show_selected()
        self._status_label.setText(self._vm.status)

    # ── Internal helpers ───────────────────────────────────────────────────

    def _refresh_list(self) -> None:
        self._list_widget.clear()
        self._list_widget.addItems(self._vm.visible_names)
        self._status_label.setText(self._vm.status)

    def _show_selected(self) -> None:
        self._code_view.setPlainText(self._vm.selected_text)
        block = self._code_view.document().findBlockByNumber(self._vm.current_line)
        cursor = QTextCursor(block)
        self._code_view.setTextCursor(cursor)
        self._code_view.centerCursor()
        self._status_label.setText(self._vm.status)
