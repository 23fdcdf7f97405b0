import sys
from pathlib import Path

import pytest
from PySide6.QtCore import QCoreApplication, QObject, Signal

ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = ROOT / "src"

for p in (SRC_DIR, ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from core.errors import ResourceLoadFailure  # noqa: E402
from core.models import Track  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def qapp():
    """One Qt application for the whole run; timers need it."""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


class FakeAudioOutput(QObject):
    """Stands in for QtAudioOutput: records calls, lets tests fire callbacks."""
    positionChanged = Signal(int, float)
    durationResolved = Signal(int, float)
    ended = Signal(int)
    loadFailed = Signal(int, str)
    interruptionBegan = Signal()
    interruptionEnded = Signal(bool)

    def __init__(self):
        super().__init__()
        self.handle = 0
        self.bound = None
        self.calls = []

    def bind(self, link):
        if not link or link.startswith("bad:"):
            raise ResourceLoadFailure(link)
        self.handle += 1
        self.bound = link
        self.calls.append(("bind", link))
        return self.handle

    def release(self):
        self.calls.append(("release",))

    def play(self):
        self.calls.append(("play",))

    def pause(self):
        self.calls.append(("pause",))

    def seek(self, seconds):
        self.calls.append(("seek", seconds))

    # test helpers
    def resolve_duration(self, seconds, handle=None):
        self.durationResolved.emit(self.handle if handle is None else handle, float(seconds))

    def finish(self, handle=None):
        self.ended.emit(self.handle if handle is None else handle)

    def names(self):
        return [c[0] for c in self.calls]


@pytest.fixture
def output():
    return FakeAudioOutput()


def make_track(track_id, **kw) -> Track:
    kw.setdefault("name", int(track_id) if str(track_id).isdigit() else 0)
    kw.setdefault("link", f"https://cdn.example.com/{track_id}.mp3")
    kw.setdefault("title", f"Track {track_id}")
    return Track(id=str(track_id), **kw)


@pytest.fixture
def track_factory():
    return make_track


@pytest.fixture
def sample_catalog():
    return [
        make_track(1, title="Kan Lai", artist="Sui Lian", album="Zion", type_of="Hymn",
                   language="Hebrew", genres="Gospel"),
        make_track(2, title="Morning Light", artist="Cing Nu", album="Blue", type_of="Song",
                   language="English", genres="Pop"),
        make_track(3, title="Lungdam", artist="Sui Lian", album="Altar", type_of="Song",
                   language="Zomi", genres="Worship, Folk"),
        make_track(4, title="Evening Hymn", artist="Thang Pi", album="Zion", type_of="Hymn",
                   language="English", genres="Choir"),
    ]
