# src/player/now_playing.py
from __future__ import annotations

from dataclasses import dataclass

from PySide6.QtCore import QObject, Signal

from core.models import UNKNOWN_ALBUM, UNKNOWN_ARTIST


@dataclass(frozen=True)
class NowPlayingInfo:
    title: str
    artist: str
    album: str
    artwork: str = ""
    rate: float = 1.0               # 1.0 playing, 0.0 paused
    duration: float | None = None   # seconds, None until resolved
    position: float = 0.0

    @classmethod
    def placeholder(cls) -> NowPlayingInfo:
        return cls(title="Unknown Title", artist=UNKNOWN_ARTIST, album=UNKNOWN_ALBUM, rate=1.0)


class MediaDisplay(QObject):
    """System-level "now playing" surface. Holds the last descriptor it was given."""
    nowPlayingChanged = Signal(object)  # NowPlayingInfo

    def __init__(self, parent=None):
        super().__init__(parent)
        self._current = NowPlayingInfo.placeholder()

    @property
    def current(self) -> NowPlayingInfo:
        return self._current

    def publish(self, info: NowPlayingInfo) -> None:
        self._current = info
        self.nowPlayingChanged.emit(info)
