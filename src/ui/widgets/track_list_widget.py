# ui/track_list_widget.py
from __future__ import annotations

from PySide6.QtCore import Signal, Qt, QItemSelectionModel
from PySide6.QtWidgets import QWidget, QVBoxLayout, QTableView, QMenu, QHeaderView

from ui.models.track_table_model import TrackTableModel
from core.models import Track


class TrackListWidget(QWidget):
    playTrack = Signal(object)    # Track
    showLyrics = Signal(object)   # Track

    def __init__(self):
        super().__init__()

        self.table = QTableView()
        self.model = TrackTableModel([])
        self.table.setModel(self.model)

        self.table.setSelectionBehavior(QTableView.SelectionBehavior.SelectRows)
        self.table.setSelectionMode(QTableView.SelectionMode.SingleSelection)
        self.table.verticalHeader().setVisible(False)
        self.table.setShowGrid(False)
        self.table.setAlternatingRowColors(True)

        self.table.setColumnWidth(0, 360)
        self.table.setColumnWidth(1, 200)
        self.table.setColumnWidth(2, 220)
        self.table.horizontalHeader().setStretchLastSection(True)
        self.table.horizontalHeader().setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        self.table.setObjectName("TrackTable")

        self.table.verticalHeader().setDefaultSectionSize(24)

        self._apply_styles()

        # Double click -> play
        self.table.doubleClicked.connect(self._on_double_click)

        # Right-click context menu
        self.table.setContextMenuPolicy(Qt.ContextMenuPolicy.CustomContextMenu)
        self.table.customContextMenuRequested.connect(self._on_context_menu)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.table)

    # -------------------------
    # External API
    # -------------------------
    def set_tracks(self, tracks: list[Track]):
        self.model.set_rows(tracks)

    def selected_track(self) -> Track | None:
        idx = self.table.currentIndex()
        if not idx.isValid():
            return None
        return self.model.track_at(idx.row())

    def set_now_playing(self, track_id: str | None):
        if track_id is None:
            self.table.clearSelection()
            return

        row = self.model.row_for_track_id(track_id)
        if row < 0:
            return  # track not in current filtered view

        idx = self.model.index(row, 0)
        sm = self.table.selectionModel()
        if sm is None:
            return

        sm.setCurrentIndex(idx, QItemSelectionModel.ClearAndSelect | QItemSelectionModel.Rows)
        self.table.scrollTo(idx, QTableView.ScrollHint.PositionAtCenter)

    # -------------------------
    # UI Events
    # -------------------------
    def _on_double_click(self, index):
        if not index.isValid():
            return
        track = self.model.track_at(index.row())
        if track is not None:
            self.playTrack.emit(track)

    def _on_context_menu(self, pos):
        idx = self.table.indexAt(pos)
        if not idx.isValid():
            return

        track = self.model.track_at(idx.row())
        if track is None:
            return

        menu = QMenu(self)
        act_play = menu.addAction("Play")
        act_lyrics = menu.addAction("View lyrics")
        act_lyrics.setEnabled(bool(track.lyric))

        chosen = menu.exec(self.table.viewport().mapToGlobal(pos))
        if chosen == act_play:
            self.playTrack.emit(track)
        elif chosen == act_lyrics:
            self.showLyrics.emit(track)

    def _apply_styles(self):
        self.setStyleSheet("""
        QTableView#TrackTable {
            background-color: #020617;
            alternate-background-color: #030712;
            border: none;
            color: #e5e7eb;
            gridline-color: #020617;
            selection-background-color: rgba(56, 189, 248, 0.2);
            selection-color: #e5e7eb;
        }

        QHeaderView::section {
            background-color: #020617;
            color: #9ca3af;
            padding: 4px 6px;
            border: none;
            border-bottom: 1px solid #111827;
            font-size: 11px;
            text-transform: uppercase;
            letter-spacing: 0.08em;
        }

        QTableView::item {
            padding: 4px 6px;
        }
        """)
