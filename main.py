import logging
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

ROOT = Path(__file__).resolve().parent
SRC_DIR = ROOT / "src"

if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from catalog.store import TrackStore
from core.config import AppConfig
from core.debounce import SearchDebouncer
from core.filters import FilterEngine
from core.state import AppState, Notify
from player.now_playing import MediaDisplay
from player.output import NullAudioOutput, QtAudioOutput
from player.session import PlaybackSession
from ui.main_window import MainWindow

logger = logging.getLogger("zaideih")

def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

def init_app_state(config: AppConfig) -> AppState:
    app_state = AppState(config)

    app_state.store = TrackStore(
        base_url=config.database_url,
        path=config.catalog_path,
        auth_token=config.auth_token,
        timeout=config.request_timeout,
    )
    app_state.filters = FilterEngine()
    app_state.debouncer = SearchDebouncer(config.search_delay_ms)
    app_state.display = MediaDisplay()

    # the one playback session; everything else gets it from app_state
    try:
        output = QtAudioOutput(volume=config.volume)
    except Exception as e:
        logger.exception("audio output unavailable")
        output = NullAudioOutput(reason=f"audio output unavailable ({e})")
        app_state.queued_notifications.append(
            Notify(message=f"Failed to initialize audio output: {e}", notify_type="error")
        )
    app_state.session = PlaybackSession(output, app_state.display)

    if not config.auth_token:
        app_state.queued_notifications.append(
            Notify(message="No database token configured, using public access.", notify_type="info")
        )

    return app_state

def main() -> int:
    config = AppConfig.from_env()
    configure_logging(config.log_level)

    qt_app = QApplication(sys.argv)
    qt_app.setApplicationName("Zaideih")

    app_state = init_app_state(config)
    main_window = MainWindow(app_state)
    main_window.show()
    main_window.refresh_catalog()

    code = qt_app.exec()
    app_state.store.close()
    return code

if __name__ == "__main__":
    raise SystemExit(main())
