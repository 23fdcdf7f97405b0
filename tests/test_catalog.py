"""Catalog parsing, the REST track store and the background loader."""

import logging
from unittest import mock

import pytest
import requests

from catalog.parse import parse_catalog, parse_track
from catalog.store import TrackStore
from core.errors import FetchFailure, ParseFailure
from core.models import UNKNOWN_ALBUM, UNKNOWN_ARTIST
from ui.workers.catalog_loader import CatalogLoader


def record(**kw):
    base = {"name": 1, "link": "https://cdn.example.com/1.mp3", "title": "Kan Lai"}
    base.update(kw)
    return base


# -------------------------
# parse_track
# -------------------------

def test_parse_track_fills_defaults():
    t = parse_track("k1", record())
    assert t.id == "k1"
    assert t.name == 1
    assert t.album == UNKNOWN_ALBUM
    assert t.artist == UNKNOWN_ARTIST
    assert t.art == "" and t.lyric == "" and t.type_of == ""
    assert t.year == 0 and t.playcount == 0


def test_parse_track_maps_type_to_type_of():
    t = parse_track("k1", record(type="Hymn", language="Zomi", year=1999, playcount=12))
    assert t.type_of == "Hymn"
    assert t.language == "Zomi"
    assert t.year == 1999
    assert t.playcount == 12


@pytest.mark.parametrize("missing", ["name", "link", "title"])
def test_parse_track_requires_fields(missing):
    rec = record()
    del rec[missing]
    with pytest.raises(ParseFailure) as exc:
        parse_track("k9", rec)
    assert exc.value.key == "k9"
    assert missing in str(exc.value)


def test_parse_track_rejects_bool_name_and_accepts_integral_float():
    with pytest.raises(ParseFailure):
        parse_track("k", record(name=True))
    assert parse_track("k", record(name=3.0)).name == 3
    with pytest.raises(ParseFailure):
        parse_track("k", record(name=3.5))


def test_parse_track_mistyped_optional_falls_back():
    t = parse_track("k", record(album=42, year="1999"))
    assert t.album == UNKNOWN_ALBUM
    assert t.year == 0


def test_parse_track_rejects_non_object():
    with pytest.raises(ParseFailure):
        parse_track("k", "not a record")


# -------------------------
# parse_catalog
# -------------------------

def test_parse_catalog_drops_bad_records(caplog):
    payload = {
        "a": record(title="Good"),
        "b": {"name": 2, "title": "No link"},
        "c": record(name=3, title="Also good"),
    }
    with caplog.at_level(logging.WARNING, logger="catalog.parse"):
        tracks = parse_catalog(payload)

    assert [t.id for t in tracks] == ["a", "c"]
    assert "dropping record" in caplog.text
    assert "'b'" in caplog.text


def test_parse_catalog_orders_by_key():
    payload = {"b": record(), "10": record(), "2": record(), "a": record()}
    assert [t.id for t in parse_catalog(payload)] == ["2", "10", "a", "b"]


def test_parse_catalog_accepts_sparse_list():
    payload = [None, record(title="One"), None, record(title="Three")]
    tracks = parse_catalog(payload)
    assert [(t.id, t.title) for t in tracks] == [("1", "One"), ("3", "Three")]


def test_parse_catalog_empty():
    assert parse_catalog(None) == []
    assert parse_catalog({}) == []


def test_parse_catalog_rejects_scalar_payload():
    with pytest.raises(ParseFailure):
        parse_catalog("oops")


# -------------------------
# TrackStore
# -------------------------

def _response(payload=None, status_error=None, json_error=None):
    r = mock.Mock()
    r.raise_for_status.side_effect = status_error
    if json_error is not None:
        r.json.side_effect = json_error
    else:
        r.json.return_value = payload
    return r


def test_store_fetch_all():
    store = TrackStore("https://db.example.com/", path="/Music/")
    with mock.patch.object(store.session, "get", return_value=_response({"x": record()})) as get:
        tracks = store.fetch_all()

    assert [t.id for t in tracks] == ["x"]
    get.assert_called_once_with("https://db.example.com/Music.json", params=None, timeout=15)


def test_store_sends_auth_token():
    store = TrackStore("https://db.example.com", auth_token="secret", timeout=5)
    with mock.patch.object(store.session, "get", return_value=_response({})) as get:
        assert store.fetch_all() == []
    get.assert_called_once_with("https://db.example.com/Music.json", params={"auth": "secret"}, timeout=5)


def test_store_network_error_is_fetch_failure():
    store = TrackStore("https://db.example.com")
    with mock.patch.object(store.session, "get", side_effect=requests.ConnectionError("down")):
        with pytest.raises(FetchFailure):
            store.fetch_all()


def test_store_http_error_is_fetch_failure():
    store = TrackStore("https://db.example.com")
    resp = _response(status_error=requests.HTTPError("401 Unauthorized"))
    with mock.patch.object(store.session, "get", return_value=resp):
        with pytest.raises(FetchFailure):
            store.fetch_raw()


def test_store_invalid_json_is_fetch_failure():
    store = TrackStore("https://db.example.com")
    resp = _response(json_error=ValueError("Expecting value"))
    with mock.patch.object(store.session, "get", return_value=resp):
        with pytest.raises(FetchFailure):
            store.fetch_raw()


# -------------------------
# CatalogLoader
# -------------------------

def _run_loader(store):
    loader = CatalogLoader(store)
    loaded, finished = [], []
    loader.loaded.connect(lambda tracks: loaded.append(tracks))
    loader.finished_signal.connect(lambda ok, msg: finished.append((ok, msg)))
    loader.run()   # synchronous: same thread, direct delivery
    return loaded, finished


def test_loader_reports_tracks(track_factory):
    store = mock.Mock()
    store.fetch_all.return_value = [track_factory(1), track_factory(2)]

    loaded, finished = _run_loader(store)

    assert [t.id for t in loaded[0]] == ["1", "2"]
    assert finished == [(True, "Loaded 2 tracks")]


def test_loader_turns_fetch_failure_into_empty_catalog():
    store = mock.Mock()
    store.fetch_all.side_effect = FetchFailure("unreachable")

    loaded, finished = _run_loader(store)

    assert loaded == [[]]
    assert finished == [(False, "unreachable")]
