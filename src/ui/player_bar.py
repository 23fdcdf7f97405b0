# ui/player_bar.py
from __future__ import annotations

from PySide6.QtCore import Qt, QSize
from PySide6.QtGui import QIcon, QPixmap, QPainter
from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel, QToolButton, QSlider
from PySide6.QtCore import QByteArray
from PySide6.QtSvg import QSvgRenderer

from core.utils import fmt_time
from player.session import PlaybackState

def _svg_icon(path_d: str, size: int = 20, color: str = "#e5e7eb") -> QIcon:
    svg = f"""
    <svg xmlns="http://www.w3.org/2000/svg" width="{size}" height="{size}" viewBox="0 0 24 24">
      <path d="{path_d}" fill="{color}"/>
    </svg>
    """.strip()

    renderer = QSvgRenderer(QByteArray(svg.encode("utf-8")))
    pm = QPixmap(size, size)
    pm.fill(Qt.transparent)

    p = QPainter(pm)
    renderer.render(p)
    p.end()

    return QIcon(pm)


# Simple, clean icons (Material-ish)
SVG_PREV = "M6 18V6h2v12H6zm3.5-6L18 6v12l-8.5-6z"
SVG_NEXT = "M16 6v12h2V6h-2zM6 18l8.5-6L6 6v12z"
SVG_PLAY = "M8 5v14l11-7L8 5z"
SVG_PAUSE = "M6 5h4v14H6V5zm8 0h4v14h-4V5z"

class PlayerBar(QWidget):
    """Transport controls bound to a PlaybackSession. Slider works in milliseconds."""

    def __init__(self, session, parent=None):
        super().__init__(parent)
        self.session = session

        self._dragging = False

        root = QHBoxLayout(self)
        root.setContentsMargins(8, 6, 8, 6)
        root.setSpacing(10)

        # --- buttons ---
        self.btn_prev = QToolButton()
        self.btn_prev.setObjectName("BtnPrev")
        self.btn_prev.setIcon(_svg_icon(SVG_PREV, 20))
        self.btn_prev.setIconSize(QSize(20, 20))
        self.btn_prev.setToolTip("Previous")

        self.btn_play = QToolButton()
        self.btn_play.setObjectName("BtnPlay")
        self.btn_play.setIcon(_svg_icon(SVG_PLAY, 22))
        self.btn_play.setIconSize(QSize(22, 22))
        self.btn_play.setToolTip("Play")

        self.btn_next = QToolButton()
        self.btn_next.setObjectName("BtnNext")
        self.btn_next.setIcon(_svg_icon(SVG_NEXT, 20))
        self.btn_next.setIconSize(QSize(20, 20))
        self.btn_next.setToolTip("Next")

        # --- labels ---
        self.lbl_title = QLabel("Nothing playing")
        self.lbl_title.setMinimumWidth(220)
        self.lbl_title.setTextInteractionFlags(Qt.TextSelectableByMouse)
        self.lbl_title.setObjectName("NowPlaying")

        self.lbl_time = QLabel("00:00")
        self.lbl_dur = QLabel("00:00")

        # --- slider ---
        self.slider = QSlider(Qt.Orientation.Horizontal)
        self.slider.setRange(0, 0)
        self.slider.setSingleStep(1000)
        self.slider.setPageStep(5000)

        root.addWidget(self.btn_prev)
        root.addWidget(self.btn_play)
        root.addWidget(self.btn_next)
        root.addSpacing(6)
        root.addWidget(self.lbl_title, 1)
        root.addWidget(self.lbl_time)
        root.addWidget(self.slider, 3)
        root.addWidget(self.lbl_dur)

        # --- signals ---
        self.slider.sliderPressed.connect(self._on_slider_pressed)
        self.slider.sliderReleased.connect(self._on_slider_released)
        self.slider.sliderMoved.connect(self._on_slider_moved)

        self.btn_play.clicked.connect(self.session.toggle_play_pause)
        self.btn_prev.clicked.connect(self.session.previous)
        self.btn_next.clicked.connect(self.session.next)

        self.session.trackChanged.connect(self._on_track_changed)
        self.session.stateChanged.connect(self._on_state_changed)
        self.session.positionChanged.connect(self._on_position)
        self.session.durationChanged.connect(self._on_duration)

        self.setObjectName("PlayerBar")
        self._apply_styles()

    # --- slider handling ---
    def _on_slider_pressed(self):
        self._dragging = True

    def _on_slider_moved(self, value: int):
        # show preview time while dragging
        self.lbl_time.setText(fmt_time(value / 1000))

    def _on_slider_released(self):
        self._dragging = False
        self.session.seek(self.slider.value() / 1000)

    # --- session updates ---
    def _on_track_changed(self, track):
        if track:
            self.lbl_title.setText(f"{track.artist} — {track.title}")
            self.lbl_title.setToolTip(track.album)
        else:
            self.lbl_title.setText("Nothing playing")
            self.lbl_title.setToolTip("")
            self.slider.setValue(0)
            self.lbl_time.setText("00:00")
            self.lbl_dur.setText("00:00")
            self._set_playing(False)

    def _on_state_changed(self, state):
        self._set_playing(state == PlaybackState.PLAYING)

    def _set_playing(self, playing: bool):
        if playing:
            self.btn_play.setIcon(_svg_icon(SVG_PAUSE, 22))
            self.btn_play.setToolTip("Pause")
        else:
            self.btn_play.setIcon(_svg_icon(SVG_PLAY, 22))
            self.btn_play.setToolTip("Play")

    def _on_duration(self, seconds: float):
        self.slider.setRange(0, max(0, int(seconds * 1000)))
        self.lbl_dur.setText(fmt_time(seconds))

    def _on_position(self, seconds: float):
        if self._dragging:
            return
        self.lbl_time.setText(fmt_time(seconds))
        self.slider.setValue(int(seconds * 1000))

    def _apply_styles(self):
        self.setStyleSheet("""
        QWidget#PlayerBar {
            background-color: #020617;
            border-top: 1px solid #111827;
        }

        QToolButton {
            border: 1px solid transparent;
            background: transparent;
            padding: 6px;
            border-radius: 10px;
            color: #e5e7eb;
        }
        QToolButton:hover {
            background: #0b1222;
            border-color: #1f2937;
            color: #38bdf8;
        }
        QToolButton:pressed {
            background: #0f172a;
        }

        /* Round play button */
        QToolButton#BtnPlay {
            background: #111827;
            border: 1px solid #1f2937;
            border-radius: 999px;
            padding: 8px;
        }
        QToolButton#BtnPlay:hover {
            border-color: #38bdf8;
            background: #020617;
        }

        QSlider::groove:horizontal {
            height: 4px;
            background: #0f172a;
            border-radius: 2px;
        }
        QSlider::handle:horizontal {
            width: 12px;
            height: 12px;
            margin: -4px 0;
            border-radius: 6px;
            background: #38bdf8;
        }
        QSlider::sub-page:horizontal {
            background: #38bdf8;
            border-radius: 2px;
        }

        QLabel {
            color: #9ca3af;
            font-size: 11px;
        }
        QLabel#NowPlaying {
            color: #e5e7eb;
            font-size: 12px;
        }
        """)
