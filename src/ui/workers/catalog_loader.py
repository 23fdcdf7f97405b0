# ui/workers/catalog_loader.py
import logging

from PySide6.QtCore import QThread, Signal

from core.errors import CatalogError

logger = logging.getLogger(__name__)


class CatalogLoader(QThread):
    loaded = Signal(object)                # list[Track]
    finished_signal = Signal(bool, str)    # ok, message

    def __init__(self, store, parent=None):
        super().__init__(parent)
        self.store = store

    def run(self):
        # signals emitted here are queued onto the UI thread
        try:
            tracks = self.store.fetch_all()
        except CatalogError as e:
            logger.warning("catalog unavailable: %s", e)
            self.loaded.emit([])
            self.finished_signal.emit(False, str(e))
            return

        self.loaded.emit(tracks)
        self.finished_signal.emit(True, f"Loaded {len(tracks)} tracks")
