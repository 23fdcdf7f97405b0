from PySide6.QtWidgets import QFrame, QLabel, QHBoxLayout
from PySide6.QtCore import Qt, QTimer

KINDS = ("info", "success", "warn", "error")

class Toast(QFrame):
    def __init__(self, parent, text: str, kind: str = "info", ms: int = 3000):
        super().__init__(parent)
        self.setWindowFlags(Qt.ToolTip)  # floats above
        self.setAttribute(Qt.WA_DeleteOnClose, True)

        self.label = QLabel(text)
        self.label.setWordWrap(True)
        self.label.setMaximumWidth(380)
        layout = QHBoxLayout(self)
        layout.addWidget(self.label)

        kind = "warn" if kind == "warning" else kind
        self.setObjectName(f"toast-{kind if kind in KINDS else 'info'}")
        self.setStyleSheet("""
        QFrame { border-radius: 10px; padding: 10px 12px; background: #222; color: #fff; }
        QFrame#toast-success { background: #1f6f3b; }
        QFrame#toast-warn { background: #7a5b12; }
        QFrame#toast-error { background: #7a1b1b; }
        """)

        QTimer.singleShot(max(500, int(ms)), self.close)

    def show_bottom_right(self, margin=16):
        p = self.parentWidget()
        if not p:
            self.show()
            return
        self.adjustSize()
        origin = p.mapToGlobal(p.rect().topLeft())
        x = origin.x() + p.width() - self.width() - margin
        y = origin.y() + p.height() - self.height() - margin
        self.move(x, y)
        self.show()
