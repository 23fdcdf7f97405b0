from PySide6.QtTest import QTest

from core.debounce import SearchDebouncer


def _collect(debouncer):
    seen = []
    debouncer.debouncedChanged.connect(lambda v: seen.append(v))
    return seen


def test_rapid_typing_realizes_only_last_value():
    d = SearchDebouncer(300)
    seen = _collect(d)

    d.submit("a")
    QTest.qWait(100)
    d.submit("ab")
    QTest.qWait(100)
    d.submit("abc")
    QTest.qWait(500)

    assert seen == ["abc"]
    assert d.value == "abc"
    assert not d.is_pending


def test_value_trails_raw_until_delay():
    d = SearchDebouncer(300)
    d.submit("hymn")

    assert d.raw == "hymn"
    assert d.value == ""
    assert d.is_pending

    QTest.qWait(450)
    assert d.value == "hymn"


def test_cancel_drops_pending_update():
    d = SearchDebouncer(100)
    seen = _collect(d)

    d.submit("x")
    d.cancel()
    QTest.qWait(250)

    assert seen == []
    assert d.value == ""
    assert not d.is_pending


def test_separate_bursts_realize_separately():
    d = SearchDebouncer(100)
    seen = _collect(d)

    d.submit("zion")
    QTest.qWait(250)
    d.submit("")
    QTest.qWait(250)

    assert seen == ["zion", ""]


def test_disconnected_observer_gets_nothing():
    d = SearchDebouncer(50)
    seen = []

    def on_changed(value):
        seen.append(value)

    d.debouncedChanged.connect(on_changed)
    d.debouncedChanged.disconnect(on_changed)

    d.submit("q")
    QTest.qWait(200)

    assert seen == []
    assert d.value == "q"
