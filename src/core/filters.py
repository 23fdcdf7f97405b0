# core/filters.py
from __future__ import annotations

from typing import Iterable, Mapping

from PySide6.QtCore import QObject, Signal

from core.models import ALL, FilterSelection, Track
from core.utils import fold

CATEGORIES = ("type_of", "language", "artist")
SEARCH_FIELDS = ("album", "artist", "title", "genres")


def matches_search(track: Track, query: str) -> bool:
    if not query:
        return True
    needle = fold(query)
    return any(needle in fold(getattr(track, f)) for f in SEARCH_FIELDS)


def visible_tracks(
    tracks: Iterable[Track],
    selections: Mapping[str, FilterSelection],
    query: str = "",
) -> list[Track]:
    """
    Tracks passing every category selection and the search text, in catalog order.
    A category with no entry in `selections` does not filter.
    """
    active = [(c, selections[c]) for c in CATEGORIES if c in selections and not selections[c].is_all]
    out: list[Track] = []
    for t in tracks:
        if all(sel.allows(getattr(t, c)) for c, sel in active) and matches_search(t, query):
            out.append(t)
    return out


def unique_albums(tracks: Iterable[Track]) -> list[str]:
    return sorted({t.album for t in tracks})


def unique_values(tracks: Iterable[Track], field: str) -> list[str]:
    if field not in CATEGORIES:
        raise KeyError(field)
    values = {getattr(t, field) for t in tracks}
    values.discard(ALL)
    return [ALL] + sorted(values)


def tracks_in_album(tracks: Iterable[Track], album: str) -> list[Track]:
    return [t for t in tracks if t.album == album]


class FilterEngine(QObject):
    """
    Catalog + selections + debounced query. Everything derived is recomputed
    on read, observers listen to `changed`.
    """
    changed = Signal()

    def __init__(self, tracks: Iterable[Track] = (), parent=None):
        super().__init__(parent)
        self._catalog: list[Track] = list(tracks)
        self._selections: dict[str, FilterSelection] = {c: FilterSelection() for c in CATEGORIES}
        self._query = ""

    # -------------------------
    # Inputs
    # -------------------------
    def set_catalog(self, tracks: Iterable[Track]) -> None:
        self._catalog = list(tracks)
        self.changed.emit()

    def toggle(self, category: str, value: str) -> FilterSelection:
        sel = self._selections[category].toggled(value)
        self._selections[category] = sel
        self.changed.emit()
        return sel

    def select_all(self, category: str) -> None:
        self.toggle(category, ALL)

    def reset(self) -> None:
        self._selections = {c: FilterSelection() for c in CATEGORIES}
        self.changed.emit()

    def set_query(self, query: str) -> None:
        query = query or ""
        if query == self._query:
            return
        self._query = query
        self.changed.emit()

    # -------------------------
    # Read API
    # -------------------------
    @property
    def catalog(self) -> list[Track]:
        return list(self._catalog)

    @property
    def query(self) -> str:
        return self._query

    def selection(self, category: str) -> FilterSelection:
        return self._selections[category]

    def visible(self) -> list[Track]:
        return visible_tracks(self._catalog, self._selections, self._query)

    def albums(self) -> list[str]:
        return unique_albums(self.visible())

    def options(self, category: str) -> list[str]:
        return unique_values(self._catalog, category)

    def album_tracks(self, album: str) -> list[Track]:
        return tracks_in_album(self.visible(), album)
