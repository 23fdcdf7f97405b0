from core.models import ALL, UNKNOWN_ALBUM, UNKNOWN_ARTIST, FilterSelection, Track
from core.utils import fmt_time


def test_track_defaults():
    t = Track(id="a", name=1, link="https://x/a.mp3", title="A")
    assert t.album == UNKNOWN_ALBUM
    assert t.artist == UNKNOWN_ARTIST
    assert t.year == 0 and t.playcount == 0
    assert t.genres == ""


def test_track_equality_uses_id_only(track_factory):
    a = track_factory(1, title="First")
    b = track_factory(1, title="Renamed", album="Other")
    c = track_factory(2, title="First")

    assert a == b
    assert a != c
    assert len({a, b, c}) == 2
    assert a != "1"


def test_selection_starts_as_all():
    sel = FilterSelection()
    assert sel.is_all
    assert sel.options == frozenset({ALL})
    assert sel.allows("anything")


def test_selecting_concrete_option_drops_sentinel():
    sel = FilterSelection().toggled("Hymn")
    assert sel.options == frozenset({"Hymn"})
    assert sel.allows("Hymn")
    assert not sel.allows("Song")

    sel = sel.toggled("Song")
    assert sel.options == frozenset({"Hymn", "Song"})


def test_selecting_sentinel_resets_to_exactly_all():
    sel = FilterSelection().toggled("Hymn").toggled("Song")
    assert sel.toggled(ALL).options == frozenset({ALL})


def test_deselecting_last_option_restores_all():
    sel = FilterSelection().toggled("Hymn").toggled("Hymn")
    assert sel.is_all


def test_toggling_lone_sentinel_keeps_it():
    assert FilterSelection().toggled(ALL).is_all


def test_selection_is_never_empty():
    assert FilterSelection(frozenset()).is_all
    assert FilterSelection(frozenset({ALL, "Hymn"})).is_all
    sel = FilterSelection()
    for value in ["a", "b", "a", ALL, "c", "c"]:
        sel = sel.toggled(value)
        assert len(sel) >= 1


def test_fmt_time():
    assert fmt_time(0) == "00:00"
    assert fmt_time(5.9) == "00:05"
    assert fmt_time(65) == "01:05"
    assert fmt_time(3600) == "60:00"
    assert fmt_time(-3) == "00:00"
    assert fmt_time(float("nan")) == "00:00"
