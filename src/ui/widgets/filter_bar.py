# ui/filter_bar.py
from __future__ import annotations

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QCheckBox, QLabel, QScrollArea

from core.filters import CATEGORIES

LABELS = {"type_of": "Type", "language": "Language", "artist": "Artist"}


class FilterBar(QWidget):
    """One horizontally scrolling checkbox row per filter category."""
    toggled = Signal(str, str)   # category, value

    def __init__(self, engine):
        super().__init__()
        self.engine = engine
        self._rows: dict[str, QHBoxLayout] = {}
        self._boxes: dict[str, dict[str, QCheckBox]] = {c: {} for c in CATEGORIES}

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(4)

        for category in CATEGORIES:
            holder = QWidget()
            row = QHBoxLayout(holder)
            row.setContentsMargins(4, 0, 4, 0)

            label = QLabel(LABELS[category])
            label.setObjectName("FilterLabel")
            label.setMinimumWidth(70)
            row.addWidget(label)
            row.addStretch(1)

            scroll = QScrollArea()
            scroll.setWidget(holder)
            scroll.setWidgetResizable(True)
            scroll.setFixedHeight(40)
            scroll.setObjectName("FilterRow")

            root.addWidget(scroll)
            self._rows[category] = row

        self.setStyleSheet("""
        QScrollArea#FilterRow { border: none; background: transparent; }
        QLabel#FilterLabel { color: #9ca3af; font-size: 11px; text-transform: uppercase; }
        """)

    def rebuild(self):
        """Recreate checkboxes from the current catalog options."""
        for category in CATEGORIES:
            row = self._rows[category]
            for box in self._boxes[category].values():
                row.removeWidget(box)
                box.deleteLater()
            self._boxes[category] = {}

            # label stays at 0, stretch stays last
            for i, value in enumerate(self.engine.options(category), start=1):
                box = QCheckBox(value or "(none)")
                box.toggled.connect(lambda _checked, c=category, v=value: self.toggled.emit(c, v))
                row.insertWidget(i, box)
                self._boxes[category][value] = box

        self.sync()

    def sync(self):
        """Reflect the engine's selections without re-emitting toggles."""
        for category in CATEGORIES:
            sel = self.engine.selection(category)
            for value, box in self._boxes[category].items():
                box.blockSignals(True)
                box.setChecked(value in sel)
                box.blockSignals(False)
