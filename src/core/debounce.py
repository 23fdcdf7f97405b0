# core/debounce.py
from __future__ import annotations

import logging

from PySide6.QtCore import QObject, QTimer, Signal

logger = logging.getLogger(__name__)

DEFAULT_DELAY_MS = 300


class SearchDebouncer(QObject):
    """
    Holds back search text until typing settles.

    Every submit() restarts one single-shot timer, so only the last value
    submitted inside a quiet window is ever realized.
    """
    debouncedChanged = Signal(str)

    def __init__(self, delay_ms: int = DEFAULT_DELAY_MS, parent=None):
        super().__init__(parent)
        self._raw = ""
        self._value = ""
        self._pending: str | None = None

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(max(0, int(delay_ms)))
        self._timer.timeout.connect(self._realize)

    @property
    def delay_ms(self) -> int:
        return self._timer.interval()

    @property
    def value(self) -> str:
        return self._value

    @property
    def raw(self) -> str:
        return self._raw

    @property
    def is_pending(self) -> bool:
        return self._pending is not None

    def submit(self, query: str) -> None:
        self._raw = query or ""
        self._pending = self._raw
        # start() on an active timer restarts it
        self._timer.start()

    def cancel(self) -> None:
        self._timer.stop()
        self._pending = None

    def _realize(self) -> None:
        if self._pending is None:
            return
        self._value = self._pending
        self._pending = None
        logger.debug("search query settled: %r", self._value)
        self.debouncedChanged.emit(self._value)
