# ui/track_table_model.py
from __future__ import annotations
from PySide6.QtCore import QAbstractTableModel, Qt, QModelIndex
from core.models import Track

COLUMNS = ["Title", "Artist", "Album", "Language"]

class TrackTableModel(QAbstractTableModel):
    def __init__(self, tracks=()):
        super().__init__()
        self._rows: list[Track] = list(tracks)

    def set_rows(self, tracks):
        self.beginResetModel()
        self._rows = list(tracks)
        self.endResetModel()

    def rowCount(self, parent=QModelIndex()) -> int:
        return 0 if parent.isValid() else len(self._rows)

    def columnCount(self, parent=QModelIndex()) -> int:
        return len(COLUMNS)

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if role != Qt.DisplayRole or orientation != Qt.Horizontal:
            return None
        return COLUMNS[section]

    def data(self, index: QModelIndex, role=Qt.DisplayRole):
        if not index.isValid():
            return None
        t = self._rows[index.row()]
        col = index.column()

        if role == Qt.DisplayRole:
            if col == 0:
                return t.title
            if col == 1:
                return t.artist
            if col == 2:
                return t.album
            if col == 3:
                return t.language
        if role == Qt.ToolTipRole and t.genres:
            return t.genres
        if role == Qt.UserRole:
            return t
        return None

    def track_at(self, row: int) -> Track | None:
        if row < 0 or row >= len(self._rows):
            return None
        return self._rows[row]

    def row_for_track_id(self, track_id: str) -> int:
        for i, t in enumerate(self._rows):
            if t.id == track_id:
                return i
        return -1
