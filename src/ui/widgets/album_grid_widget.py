# ui/album_grid_widget.py
from __future__ import annotations

from typing import Iterable

from PySide6.QtCore import Qt, Signal, QSize, QModelIndex
from PySide6.QtGui import QStandardItem, QStandardItemModel
from PySide6.QtWidgets import QWidget, QVBoxLayout, QListView, QMenu


class AlbumGridWidget(QWidget):
    # Emit album name when user wants to open an album
    openAlbum = Signal(str)

    def __init__(self):
        super().__init__()

        self.view = QListView()
        self.model = QStandardItemModel(self)
        self.view.setModel(self.model)

        # two-column-ish tile grid that reflows with the window
        self.view.setViewMode(QListView.ViewMode.IconMode)
        self.view.setResizeMode(QListView.ResizeMode.Adjust)
        self.view.setMovement(QListView.Movement.Static)
        self.view.setGridSize(QSize(220, 64))
        self.view.setUniformItemSizes(True)
        self.view.setWordWrap(False)
        self.view.setSpacing(10)
        self.view.setEditTriggers(QListView.EditTrigger.NoEditTriggers)
        self.view.setObjectName("AlbumGrid")

        self._apply_styles()

        self.view.activated.connect(self._on_activated)
        self.view.clicked.connect(self._on_activated)

        self.view.setContextMenuPolicy(Qt.ContextMenuPolicy.CustomContextMenu)
        self.view.customContextMenuRequested.connect(self._on_context_menu)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.view)

    # -------------------------
    # External API
    # -------------------------

    def set_albums(self, albums: Iterable[str]):
        # albums arrive sorted and unique
        self.model.clear()
        for name in albums:
            it = QStandardItem(name or "")
            it.setEditable(False)
            it.setToolTip(name or "")
            it.setData(name, Qt.ItemDataRole.UserRole)
            it.setTextAlignment(Qt.AlignmentFlag.AlignCenter)
            self.model.appendRow(it)

    # -------------------------
    # UI Events
    # -------------------------

    def _on_activated(self, index: QModelIndex):
        if not index.isValid():
            return
        album = index.data(Qt.ItemDataRole.UserRole)
        if album is not None:
            self.openAlbum.emit(str(album))

    def _on_context_menu(self, pos):
        idx = self.view.indexAt(pos)
        if not idx.isValid():
            return

        menu = QMenu(self)
        act_open = menu.addAction("Open album")

        chosen = menu.exec(self.view.viewport().mapToGlobal(pos))
        if chosen == act_open:
            self._on_activated(idx)

    def _apply_styles(self):
        self.setStyleSheet("""
        QListView#AlbumGrid {
            background-color: #020617;
            border: none;
            color: #e5e7eb;
        }

        QListView#AlbumGrid::item {
            background: #0b1222;
            border: 1px solid #1f2937;
            border-radius: 10px;
            padding: 8px;
        }

        QListView#AlbumGrid::item:hover {
            border-color: #38bdf8;
        }

        QListView#AlbumGrid::item:selected {
            background: rgba(56, 189, 248, 0.2);
            color: #e5e7eb;
        }
        """)
