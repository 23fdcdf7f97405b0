# core/models.py
from __future__ import annotations
from dataclasses import dataclass, field

ALL = "All"

UNKNOWN_ALBUM = "Unknown Album"
UNKNOWN_ARTIST = "Unknown Artist"


@dataclass(frozen=True, eq=False)
class Track:
    id: str             # database child key
    name: int           # catalog index
    link: str           # audio URL
    title: str
    album: str = UNKNOWN_ALBUM
    artist: str = UNKNOWN_ARTIST
    art: str = ""
    bitrate: str = ""
    genres: str = ""
    language: str = ""
    lyric: str = ""
    rating: str = ""
    type_of: str = ""
    year: int = 0
    playcount: int = 0

    # identity is the key, metadata may differ between fetches
    def __eq__(self, other) -> bool:
        if not isinstance(other, Track):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(frozen=True)
class FilterSelection:
    """
    Chosen options for one filter category.

    ALL only ever appears alone; an empty set collapses back to {ALL}.
    """
    options: frozenset[str] = field(default_factory=lambda: frozenset({ALL}))

    def __post_init__(self):
        opts = frozenset(self.options)
        if not opts:
            opts = frozenset({ALL})
        elif ALL in opts and len(opts) > 1:
            opts = frozenset({ALL})
        object.__setattr__(self, "options", opts)

    @property
    def is_all(self) -> bool:
        return self.options == frozenset({ALL})

    def allows(self, value: str) -> bool:
        return ALL in self.options or value in self.options

    def toggled(self, value: str) -> FilterSelection:
        if value == ALL:
            return FilterSelection()
        if value in self.options:
            return FilterSelection(self.options - {value})
        return FilterSelection((self.options - {ALL}) | {value})

    def __contains__(self, value: str) -> bool:
        return value in self.options

    def __len__(self) -> int:
        return len(self.options)
