from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QLabel, QStackedWidget,
    QPushButton, QLineEdit, QHBoxLayout, QToolButton, QStyle, QButtonGroup
)
from PySide6.QtGui import QShortcut, QKeySequence
import logging

from core.models import Track
from ui.player_bar import PlayerBar
from ui.toast import Toast
from ui.dialogs.lyrics_dialog import LyricsDialog
from ui.widgets.filter_bar import FilterBar
from ui.widgets.track_list_widget import TrackListWidget
from ui.widgets.album_grid_widget import AlbumGridWidget
from ui.workers.catalog_loader import CatalogLoader

logger = logging.getLogger(__name__)

PAGE_LIST, PAGE_ALBUMS, PAGE_ALBUM_TRACKS = range(3)


class MainWindow(QMainWindow):
    def __init__(self, app_state):
        super().__init__()
        self.setWindowTitle("Zaideih")
        self.resize(960, 640)
        self.app_state = app_state
        self.filters = app_state.filters
        self.debouncer = app_state.debouncer
        self.session = app_state.session

        self._selected_album: str | None = None
        self._lyrics_font = 20
        self.loader: CatalogLoader | None = None

        # --- Shortcuts ---
        QShortcut(QKeySequence("Ctrl+P"), self, activated=self.session.toggle_play_pause)
        QShortcut(QKeySequence("Return"), self, activated=self._play_selected)
        QShortcut(QKeySequence("Enter"), self, activated=self._play_selected)
        QShortcut(QKeySequence("Ctrl+Right"), self, activated=self.session.next)
        QShortcut(QKeySequence("Ctrl+Left"), self, activated=self.session.previous)

        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.layout = QVBoxLayout(self.central_widget)

        self.app_state.notification.connect(self._on_notify)

        # --- Filters ---
        self.filter_bar = FilterBar(self.filters)
        self.filter_bar.toggled.connect(self._on_filter_toggled)
        self.layout.addWidget(self.filter_bar)

        # --- Search + view toggle ---
        top_bar = QHBoxLayout()

        self.search_box = QLineEdit()
        self.search_box.setPlaceholderText("Search by album, artist, title, or genres")
        self.search_box.setClearButtonEnabled(True)
        top_bar.addWidget(self.search_box, stretch=1)

        self.btn_list = QPushButton("List View")
        self.btn_albums = QPushButton("Album View")
        for b in (self.btn_list, self.btn_albums):
            b.setCheckable(True)
            b.setObjectName("ViewToggle")
        self.btn_list.setChecked(True)
        self.view_group = QButtonGroup(self)
        self.view_group.setExclusive(True)
        self.view_group.addButton(self.btn_list)
        self.view_group.addButton(self.btn_albums)
        top_bar.addWidget(self.btn_list)
        top_bar.addWidget(self.btn_albums)

        self.btn_refresh = QToolButton()
        self.btn_refresh.setIcon(self.style().standardIcon(QStyle.StandardPixmap.SP_BrowserReload))
        self.btn_refresh.setToolTip("Refresh catalog")
        self.btn_refresh.clicked.connect(self.refresh_catalog)
        top_bar.addWidget(self.btn_refresh)

        self.layout.addLayout(top_bar)

        # --- Pages ---
        self.pages = QStackedWidget()

        self.track_list = TrackListWidget()
        self.album_grid = AlbumGridWidget()

        self.album_page = QWidget()
        album_layout = QVBoxLayout(self.album_page)
        album_layout.setContentsMargins(0, 0, 0, 0)
        album_header = QHBoxLayout()
        self.btn_back = QPushButton("‹ Albums")
        self.btn_back.clicked.connect(self._close_album)
        self.lbl_album = QLabel("")
        self.lbl_album.setObjectName("AlbumTitle")
        album_header.addWidget(self.btn_back)
        album_header.addWidget(self.lbl_album, 1)
        album_layout.addLayout(album_header)
        self.album_tracks = TrackListWidget()
        album_layout.addWidget(self.album_tracks)

        self.pages.addWidget(self.track_list)     # PAGE_LIST
        self.pages.addWidget(self.album_grid)     # PAGE_ALBUMS
        self.pages.addWidget(self.album_page)     # PAGE_ALBUM_TRACKS
        self.layout.addWidget(self.pages, 1)

        # --- PlayerBar ---
        self.player_bar = PlayerBar(self.session, self)
        self.layout.addWidget(self.player_bar)

        # --- Wiring ---
        self.search_box.textChanged.connect(self.debouncer.submit)
        self.debouncer.debouncedChanged.connect(self.filters.set_query)
        self.filters.changed.connect(self._refresh_views)

        self.btn_list.clicked.connect(self.show_list)
        self.btn_albums.clicked.connect(self.show_albums)
        self.album_grid.openAlbum.connect(self._open_album)

        for tl in (self.track_list, self.album_tracks):
            tl.playTrack.connect(self.on_play_track)
            tl.showLyrics.connect(self.show_lyrics)

        self.session.trackChanged.connect(self._on_session_track_changed)
        self.session.loadFailed.connect(self._on_load_failed)

        self._refresh_views()
        self.show_queued_notifications()

        self.setStyleSheet(self.styleSheet() + """
            QMainWindow, QWidget { background: #020617; color: #e5e7eb; }
            QLineEdit {
                background: #0b1222;
                border: 1px solid #1f2937;
                border-radius: 8px;
                padding: 6px 8px;
            }
            QPushButton#ViewToggle {
                background: #111827;
                border: 1px solid #1f2937;
                border-radius: 8px;
                padding: 6px 10px;
                font-size: 12px;
            }
            QPushButton#ViewToggle:checked {
                background: #0369a1;
                border-color: #38bdf8;
            }
            QLabel#AlbumTitle { font-size: 14px; font-weight: bold; }
            QToolButton {
                border: 1px solid transparent;
                background: transparent;
                padding: 6px;
                border-radius: 10px;
            }
            QToolButton:hover {
                background: #0b1222;
                border-color: #1f2937;
            }
            """)

    # ------------------ catalog ------------------
    def refresh_catalog(self):
        if self.loader is not None and self.loader.isRunning():
            return

        self.btn_refresh.setEnabled(False)
        self.statusBar().showMessage("Loading tracks…")

        self.loader = CatalogLoader(self.app_state.store, self)
        self.loader.loaded.connect(self._on_catalog_loaded)
        self.loader.finished_signal.connect(self._on_catalog_finished)
        self.loader.start()

    def _on_catalog_loaded(self, tracks):
        self.filters.set_catalog(tracks)
        self.filter_bar.rebuild()

    def _on_catalog_finished(self, ok: bool, msg: str):
        self.btn_refresh.setEnabled(True)
        self.statusBar().showMessage(msg, 4000)
        if not ok:
            self.app_state.notify(f"Could not load tracks: {msg}", "error")

    # ------------------ filters ------------------
    def _on_filter_toggled(self, category: str, value: str):
        self.filters.toggle(category, value)
        self.filter_bar.sync()

    def _refresh_views(self):
        visible = self.filters.visible()
        self.track_list.set_tracks(visible)
        self.album_grid.set_albums(self.filters.albums())
        if self._selected_album is not None:
            self.album_tracks.set_tracks(self.filters.album_tracks(self._selected_album))

        # navigation follows what the user currently sees
        if self.session.current_track is not None:
            self.session.set_queue(visible)
            self._highlight(self.session.current_track)

    # ------------------ views ------------------
    def show_list(self):
        self._selected_album = None
        self.btn_list.setChecked(True)
        self.pages.setCurrentIndex(PAGE_LIST)

    def show_albums(self):
        self.btn_albums.setChecked(True)
        self.pages.setCurrentIndex(PAGE_ALBUM_TRACKS if self._selected_album else PAGE_ALBUMS)

    def _open_album(self, album: str):
        self._selected_album = album
        self.lbl_album.setText(album)
        self.album_tracks.set_tracks(self.filters.album_tracks(album))
        self.pages.setCurrentIndex(PAGE_ALBUM_TRACKS)

    def _close_album(self):
        self._selected_album = None
        self.pages.setCurrentIndex(PAGE_ALBUMS)

    def show_lyrics(self, track: Track):
        if not track.lyric:
            self.app_state.notify("No lyrics for this track.", "info")
            return
        dlg = LyricsDialog(track.title, track.lyric, font_size=self._lyrics_font, parent=self)
        dlg.exec()
        self._lyrics_font = dlg.font_size

    # ------------------ playback ------------------
    def on_play_track(self, track: Track):
        self.session.set_queue(self.filters.visible())
        if self.session.play_track(track):
            logger.debug("playing %s", track.id)

    def _play_selected(self):
        tl = self.album_tracks if self.pages.currentIndex() == PAGE_ALBUM_TRACKS else self.track_list
        track = tl.selected_track()
        if track is not None:
            self.on_play_track(track)

    def _on_session_track_changed(self, track):
        self._highlight(track)

    def _highlight(self, track):
        track_id = track.id if track else None
        self.track_list.set_now_playing(track_id)
        self.album_tracks.set_now_playing(track_id)

    def _on_load_failed(self, err):
        self.app_state.notify(f"Cannot play track: {err}", "error")

    # ------------------ notifications ------------------
    def show_queued_notifications(self):
        for n in self.app_state.queued_notifications:
            self._on_notify(n)
        self.app_state.queued_notifications.clear()

    def _on_notify(self, n):
        # n is core.state.Notify
        msg = getattr(n, "message", "") or ""
        if not msg:
            return
        kind = (getattr(n, "notify_type", "info") or "info").lower()
        Toast(self, msg, kind=kind).show_bottom_right()

    def closeEvent(self, event):
        self.debouncer.cancel()
        self.session.shutdown()
        self.session.output.release()
        if self.loader is not None and self.loader.isRunning():
            self.loader.wait(2000)
        super().closeEvent(event)
