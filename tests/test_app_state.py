import pytest

pytest.importorskip("PySide6.QtMultimedia")

import main  # noqa: E402
from core.config import AppConfig  # noqa: E402
from core.errors import ResourceLoadFailure  # noqa: E402
from player.output import NullAudioOutput  # noqa: E402
from player.session import PlaybackState  # noqa: E402


def _broken_output(volume=0.7):
    raise RuntimeError("no audio device")


def test_audio_failure_is_queued_not_fatal(monkeypatch, sample_catalog):
    monkeypatch.setattr(main, "QtAudioOutput", _broken_output)

    app_state = main.init_app_state(AppConfig.from_env({"ZAIDEIH_AUTH_TOKEN": "tok"}))

    assert isinstance(app_state.session.output, NullAudioOutput)
    errors = [n for n in app_state.queued_notifications if n.notify_type == "error"]
    assert len(errors) == 1
    assert "no audio device" in errors[0].message

    # browsing still works
    app_state.filters.set_catalog(sample_catalog)
    assert app_state.filters.visible() == sample_catalog

    failures = []
    app_state.session.loadFailed.connect(lambda e: failures.append(e))
    assert app_state.session.play_track(sample_catalog[0]) is False
    assert app_state.session.state == PlaybackState.IDLE
    assert isinstance(failures[0], ResourceLoadFailure)
    app_state.store.close()


def test_working_output_queues_no_error(monkeypatch, output):
    monkeypatch.setattr(main, "QtAudioOutput", lambda volume=0.7: output)

    app_state = main.init_app_state(AppConfig.from_env({}))

    assert app_state.session.output is output
    kinds = [n.notify_type for n in app_state.queued_notifications]
    assert kinds == ["info"]   # public access notice only
    app_state.store.close()
