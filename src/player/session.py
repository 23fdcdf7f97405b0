# src/player/session.py
from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Iterable

from PySide6.QtCore import QObject, Signal

from core.errors import DurationUnavailable, ResourceLoadFailure
from core.models import Track
from core.utils import clamp
from player.now_playing import NowPlayingInfo

logger = logging.getLogger(__name__)


class PlaybackState(Enum):
    IDLE = auto()
    LOADED = auto()
    PLAYING = auto()
    PAUSED = auto()


class PlaybackSession(QObject):
    """
    Owns the current track, play state, position/duration and next/previous
    navigation over the visible track list.

    `output` is the audio output port (see player.output.QtAudioOutput).
    `display`, when given, receives a fresh NowPlayingInfo after every
    change of track, play state, seek position or duration.
    """
    stateChanged = Signal(object)       # PlaybackState
    trackChanged = Signal(object)       # Track | None
    positionChanged = Signal(float)     # seconds
    durationChanged = Signal(float)     # seconds
    loadFailed = Signal(object)         # ResourceLoadFailure

    def __init__(self, output, display=None, parent=None):
        super().__init__(parent)
        self.output = output
        self.display = display

        self._state = PlaybackState.IDLE
        self._track: Track | None = None
        self._handle: int | None = None
        self._position = 0.0
        self._duration = 0.0

        self._queue: list[Track] = []
        self._index: int | None = None
        # last queue position navigated to, even when its load failed
        self._cursor: int | None = None
        self._interrupted = False

        self._connections = [
            (output.positionChanged, self._on_position),
            (output.durationResolved, self._on_duration),
            (output.ended, self._on_ended),
            (output.loadFailed, self._on_load_failed),
            (output.interruptionBegan, self._on_interruption_began),
            (output.interruptionEnded, self._on_interruption_ended),
        ]
        for sig, slot in self._connections:
            sig.connect(slot)

    # ----------------------------
    # Read API
    # ----------------------------

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def current_track(self) -> Track | None:
        return self._track

    @property
    def is_playing(self) -> bool:
        return self._state == PlaybackState.PLAYING

    @property
    def position(self) -> float:
        return self._position

    @property
    def duration(self) -> float:
        return self._duration

    @property
    def queue(self) -> list[Track]:
        return list(self._queue)

    @property
    def index(self) -> int | None:
        return self._index

    def now_playing(self) -> NowPlayingInfo | None:
        t = self._track
        if t is None:
            return None
        return NowPlayingInfo(
            title=t.title,
            artist=t.artist,
            album=t.album,
            artwork=t.art,
            rate=1.0 if self.is_playing else 0.0,
            duration=self._duration if self._duration > 0 else None,
            position=self._position,
        )

    # ----------------------------
    # Queue
    # ----------------------------

    def set_queue(self, tracks: Iterable[Track]) -> None:
        self._queue = list(tracks)
        self._index = self._index_of(self._track)
        self._cursor = self._index

    def _index_of(self, track: Track | None) -> int | None:
        if track is None:
            return None
        for i, t in enumerate(self._queue):
            if t.id == track.id:
                return i
        return None

    # ----------------------------
    # Transport
    # ----------------------------

    def load(self, track: Track) -> bool:
        if self._track is not None and self._track.id == track.id:
            self._index = self._index_of(track)
            self._cursor = self._index
            return True

        try:
            handle = self.output.bind(track.link)
        except ResourceLoadFailure as e:
            logger.warning("cannot load %r: %s", track.title, e)
            self.loadFailed.emit(e)
            return False

        self._handle = handle
        self._track = track
        self._index = self._index_of(track)
        self._cursor = self._index
        self._position = 0.0
        self._duration = 0.0
        self._interrupted = False

        logger.debug("loaded %s (%s)", track.id, track.title)
        self.trackChanged.emit(track)
        self.positionChanged.emit(0.0)
        self.durationChanged.emit(0.0)
        self._set_state(PlaybackState.LOADED)
        self._refresh_now_playing()
        return True

    def play(self) -> None:
        if self._track is None:
            return
        self.output.play()
        self._interrupted = False
        if self._set_state(PlaybackState.PLAYING):
            self._refresh_now_playing()

    def pause(self) -> None:
        if self._state != PlaybackState.PLAYING:
            return
        self.output.pause()
        self._set_state(PlaybackState.PAUSED)
        self._refresh_now_playing()

    def toggle_play_pause(self) -> None:
        if self.is_playing:
            self.pause()
        else:
            self.play()

    def play_track(self, track: Track) -> bool:
        if not self.load(track):
            return False
        self.play()
        return True

    def play_at(self, index: int) -> bool:
        if not self._queue:
            return False
        index = int(index) % len(self._queue)
        target = self._queue[index]

        if self._track is not None and self._track.id == target.id:
            self._index = self._cursor = index
            self.seek(0.0)
            self.play()
            return True

        # a broken entry still moves the cursor so next/previous step past it
        self._cursor = index
        if not self.load(target):
            return False
        self._index = self._cursor = index
        self.play()
        return True

    def next(self) -> bool:
        if not self._queue:
            return False
        i = 0 if self._cursor is None else (self._cursor + 1) % len(self._queue)
        return self.play_at(i)

    def previous(self) -> bool:
        if not self._queue:
            return False
        n = len(self._queue)
        i = n - 1 if self._cursor is None else (self._cursor - 1) % n
        return self.play_at(i)

    def seek(self, seconds: float) -> None:
        if self._track is None:
            return
        upper = self._duration if self._duration > 0 else float("inf")
        pos = clamp(float(seconds), 0.0, upper)
        self.output.seek(pos)
        self._position = pos
        self.positionChanged.emit(pos)
        self._refresh_now_playing()

    def shutdown(self) -> None:
        """Stop listening to the output port. Later callbacks are never acted upon."""
        for sig, slot in self._connections:
            try:
                sig.disconnect(slot)
            except (RuntimeError, TypeError):
                logger.debug("output signal already disconnected")
        self._connections = []
        self._handle = None

    # ----------------------------
    # Output port callbacks
    # ----------------------------

    def _is_current(self, handle: int) -> bool:
        return self._handle is not None and handle == self._handle

    def _on_position(self, handle: int, seconds: float) -> None:
        if not self._is_current(handle):
            return
        self._position = max(0.0, float(seconds))
        self.positionChanged.emit(self._position)

    def _on_duration(self, handle: int, seconds: float) -> None:
        if not self._is_current(handle):
            return
        seconds = float(seconds)
        if seconds <= 0:
            title = self._track.title if self._track else "?"
            err = DurationUnavailable(f"no duration for {title!r}")
            logger.warning("%s", err)
            seconds = 0.0
        self._duration = seconds
        self.durationChanged.emit(seconds)
        self._refresh_now_playing()

    def _on_ended(self, handle: int) -> None:
        if not self._is_current(handle):
            return
        logger.debug("track ended: %s", self._track.id if self._track else None)
        # skip entries that fail to load; give up after one full lap
        for _ in range(len(self._queue)):
            if self.next():
                return
        if self._set_state(PlaybackState.PAUSED):
            self._refresh_now_playing()

    def _on_load_failed(self, handle: int, message: str) -> None:
        if not self._is_current(handle) or self._track is None:
            return
        err = ResourceLoadFailure(self._track.link, message)
        logger.warning("playback failed for %r: %s", self._track.title, message)
        if self._state == PlaybackState.PLAYING:
            self._set_state(PlaybackState.PAUSED)
            self._refresh_now_playing()
        self.loadFailed.emit(err)

    def _on_interruption_began(self) -> None:
        if self._state != PlaybackState.PLAYING:
            return
        self.pause()
        self._interrupted = True

    def _on_interruption_ended(self, should_resume: bool) -> None:
        was_interrupted = self._interrupted
        self._interrupted = False
        if was_interrupted and should_resume and self._track is not None:
            self.play()

    # ----------------------------
    # Helpers
    # ----------------------------

    def _set_state(self, state: PlaybackState) -> bool:
        if self._state == state:
            return False
        logger.debug("playback %s -> %s", self._state.name, state.name)
        self._state = state
        self.stateChanged.emit(state)
        return True

    def _refresh_now_playing(self) -> None:
        if self.display is None:
            return
        info = self.now_playing()
        if info is not None:
            self.display.publish(info)
