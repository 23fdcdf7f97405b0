# src/player/output.py
from __future__ import annotations

import logging
import os

from PySide6.QtCore import QObject, QUrl, Signal
from PySide6.QtMultimedia import QAudioOutput, QMediaPlayer

from core.errors import ResourceLoadFailure

logger = logging.getLogger(__name__)

_SCHEMES = {"http", "https", "file"}


def resolve_link(link: str) -> QUrl:
    """
    Turn a track link into a playable QUrl.
    Accepts http(s)/file URLs and paths to existing local files.
    """
    text = (link or "").strip()
    if not text:
        raise ResourceLoadFailure(link, "empty audio link")

    if os.path.isfile(text):
        return QUrl.fromLocalFile(text)

    url = QUrl(text, QUrl.ParsingMode.StrictMode)
    if not url.isValid() or url.scheme().lower() not in _SCHEMES:
        raise ResourceLoadFailure(link)
    if url.scheme().lower() != "file" and not url.host():
        raise ResourceLoadFailure(link)
    return url


class QtAudioOutput(QObject):
    """
    Audio output port on top of QMediaPlayer.

    Every bind() hands out a new handle; all signals carry the handle that
    was active when they fired so listeners can drop stale ones.

    QMediaPlayer has no notion of audio-session interruptions. A platform
    integration (call handling, device focus) reports them through
    begin_interruption() / end_interruption(); nothing in the app raises
    them on its own.
    """
    positionChanged = Signal(int, float)    # handle, seconds
    durationResolved = Signal(int, float)   # handle, seconds
    ended = Signal(int)                     # handle
    loadFailed = Signal(int, str)           # handle, message
    interruptionBegan = Signal()
    interruptionEnded = Signal(bool)        # should_resume

    def __init__(self, volume: float = 0.7, parent=None):
        super().__init__(parent)
        self._handle = 0

        self.audio = QAudioOutput(self)
        self.media = QMediaPlayer(self)
        self.media.setAudioOutput(self.audio)
        self.set_volume(volume)

        self.media.positionChanged.connect(self._on_position)
        self.media.durationChanged.connect(self._on_duration)
        self.media.mediaStatusChanged.connect(self._on_media_status)
        self.media.errorOccurred.connect(self._on_error)

    # ----------------------------
    # Port API
    # ----------------------------

    def bind(self, link: str) -> int:
        url = resolve_link(link)   # raises before touching the current source

        self.media.stop()
        self._handle += 1
        self.media.setSource(url)
        logger.debug("bound handle %d to %s", self._handle, url.toString())
        return self._handle

    def release(self) -> None:
        self.media.stop()
        self.media.setSource(QUrl())
        self._handle += 1

    def play(self) -> None:
        self.media.play()

    def pause(self) -> None:
        self.media.pause()

    def seek(self, seconds: float) -> None:
        self.media.setPosition(max(0, int(round(seconds * 1000))))

    def set_volume(self, volume_0_to_1: float) -> None:
        self.audio.setVolume(min(1.0, max(0.0, float(volume_0_to_1))))

    def begin_interruption(self) -> None:
        self.interruptionBegan.emit()

    def end_interruption(self, should_resume: bool) -> None:
        self.interruptionEnded.emit(bool(should_resume))

    # ----------------------------
    # QMediaPlayer handlers
    # ----------------------------

    def _on_position(self, ms: int) -> None:
        self.positionChanged.emit(self._handle, ms / 1000.0)

    def _on_duration(self, ms: int) -> None:
        # 0 while unknown; the session keeps its own 0 until this is positive
        if ms > 0:
            self.durationResolved.emit(self._handle, ms / 1000.0)

    def _on_media_status(self, status: QMediaPlayer.MediaStatus) -> None:
        if status == QMediaPlayer.MediaStatus.EndOfMedia:
            self.ended.emit(self._handle)
        elif status == QMediaPlayer.MediaStatus.InvalidMedia:
            self.loadFailed.emit(self._handle, "invalid media")
        elif status == QMediaPlayer.MediaStatus.LoadedMedia and self.media.duration() <= 0:
            self.durationResolved.emit(self._handle, 0.0)

    def _on_error(self, error: QMediaPlayer.Error, message: str) -> None:
        if error == QMediaPlayer.Error.NoError:
            return
        logger.warning("media error on handle %d: %s", self._handle, message)
        self.loadFailed.emit(self._handle, message or str(error))


class NullAudioOutput(QObject):
    """
    Stand-in port used when no audio backend could be created.
    Browsing keeps working; every bind() fails with ResourceLoadFailure.
    """
    positionChanged = Signal(int, float)
    durationResolved = Signal(int, float)
    ended = Signal(int)
    loadFailed = Signal(int, str)
    interruptionBegan = Signal()
    interruptionEnded = Signal(bool)

    def __init__(self, reason: str = "audio output unavailable", parent=None):
        super().__init__(parent)
        self.reason = reason

    def bind(self, link: str) -> int:
        raise ResourceLoadFailure(link, self.reason)

    def release(self) -> None:
        pass

    def play(self) -> None:
        pass

    def pause(self) -> None:
        pass

    def seek(self, seconds: float) -> None:
        pass

    def set_volume(self, volume_0_to_1: float) -> None:
        pass

    def begin_interruption(self) -> None:
        pass

    def end_interruption(self, should_resume: bool) -> None:
        pass
