# src/catalog/parse.py
from __future__ import annotations

import logging
from typing import Any, Iterable

from core.errors import ParseFailure
from core.models import UNKNOWN_ALBUM, UNKNOWN_ARTIST, Track

logger = logging.getLogger(__name__)

# database field -> (Track field, default)
_OPTIONAL_STR = (
    ("album", "album", UNKNOWN_ALBUM),
    ("art", "art", ""),
    ("artist", "artist", UNKNOWN_ARTIST),
    ("bitrate", "bitrate", ""),
    ("genres", "genres", ""),
    ("language", "language", ""),
    ("lyric", "lyric", ""),
    ("rating", "rating", ""),
    ("type", "type_of", ""),
)
_OPTIONAL_INT = (
    ("playcount", "playcount", 0),
    ("year", "year", 0),
)


def _as_int(v: Any) -> int | None:
    if isinstance(v, bool):
        return None
    if isinstance(v, int):
        return v
    if isinstance(v, float) and v.is_integer():
        return int(v)
    return None


def _as_str(v: Any) -> str | None:
    return v if isinstance(v, str) else None


def parse_track(key: str, record: Any) -> Track:
    if not isinstance(record, dict):
        raise ParseFailure(key, f"expected an object, got {type(record).__name__}")

    name = _as_int(record.get("name"))
    link = _as_str(record.get("link"))
    title = _as_str(record.get("title"))

    missing = [f for f, v in (("name", name), ("link", link), ("title", title)) if v is None]
    if missing:
        raise ParseFailure(key, "missing or invalid " + ", ".join(missing))

    fields: dict[str, Any] = {}
    for src, dst, default in _OPTIONAL_STR:
        v = _as_str(record.get(src))
        fields[dst] = default if v is None else v
    for src, dst, default in _OPTIONAL_INT:
        v = _as_int(record.get(src))
        fields[dst] = default if v is None else v

    return Track(id=str(key), name=name, link=link, title=title, **fields)


def _key_order(key: str) -> tuple[int, int, str]:
    # Realtime Database child order: integer keys numerically, then strings
    try:
        return (0, int(key), "")
    except ValueError:
        return (1, 0, key)


def _children(payload: Any) -> Iterable[tuple[str, Any]]:
    if payload is None:
        return []
    if isinstance(payload, dict):
        items = [(str(k), v) for k, v in payload.items()]
    elif isinstance(payload, list):
        # integer keys come back as a sparse JSON array
        items = [(str(i), v) for i, v in enumerate(payload) if v is not None]
    else:
        raise ParseFailure("<root>", f"unexpected payload type {type(payload).__name__}")
    return sorted(items, key=lambda kv: _key_order(kv[0]))


def parse_catalog(payload: Any) -> list[Track]:
    """
    Parse a whole `/Music` snapshot. Bad records are skipped with a warning.
    """
    tracks: list[Track] = []
    children = list(_children(payload))
    for key, record in children:
        try:
            tracks.append(parse_track(key, record))
        except ParseFailure as e:
            logger.warning("dropping record: %s", e)

    logger.info("parsed %d of %d catalog records", len(tracks), len(children))
    return tracks
