from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QTextEdit
)

MIN_FONT = 12
MAX_FONT = 30
FONT_STEP = 2
DEFAULT_FONT = 20


class LyricsDialog(QDialog):
    def __init__(self, title: str, lyrics: str, font_size: int = DEFAULT_FONT, parent=None):
        super().__init__(parent)
        self.setWindowTitle(f"Lyrics — {title}")
        self.resize(480, 640)
        self._font_size = max(MIN_FONT, min(MAX_FONT, int(font_size)))

        layout = QVBoxLayout(self)

        header = QLabel("Lyrics")
        header.setObjectName("LyricsHeader")
        layout.addWidget(header)

        self.text = QTextEdit()
        self.text.setReadOnly(True)
        self.text.setPlainText(lyrics or "")
        layout.addWidget(self.text, 1)

        btn_layout = QHBoxLayout()
        self.btn_smaller = QPushButton("A-")
        self.btn_larger = QPushButton("A+")
        btn_layout.addStretch(1)
        btn_layout.addWidget(self.btn_smaller)
        btn_layout.addWidget(self.btn_larger)
        btn_layout.addStretch(1)
        layout.addLayout(btn_layout)

        self.btn_smaller.clicked.connect(lambda: self.set_font_size(self._font_size - FONT_STEP))
        self.btn_larger.clicked.connect(lambda: self.set_font_size(self._font_size + FONT_STEP))

        self.setStyleSheet("QLabel#LyricsHeader { font-size: 18px; font-weight: bold; }")
        self._apply_font()

    @property
    def font_size(self) -> int:
        return self._font_size

    def set_font_size(self, size: int):
        self._font_size = max(MIN_FONT, min(MAX_FONT, int(size)))
        self._apply_font()

    def _apply_font(self):
        f = QFont(self.text.font())
        f.setPointSize(self._font_size)
        self.text.setFont(f)
        self.btn_smaller.setEnabled(self._font_size > MIN_FONT)
        self.btn_larger.setEnabled(self._font_size < MAX_FONT)
