# core/errors.py
from __future__ import annotations


class ZaideihError(Exception):
    """Base for every error raised by the player."""


class CatalogError(ZaideihError):
    pass


class FetchFailure(CatalogError):
    """The track store could not be reached or refused the request."""


class ParseFailure(CatalogError):
    def __init__(self, key: str, reason: str):
        super().__init__(f"Track {key!r}: {reason}")
        self.key = key
        self.reason = reason


class PlaybackError(ZaideihError):
    pass


class ResourceLoadFailure(PlaybackError):
    def __init__(self, link: str, reason: str = "unresolvable audio link"):
        super().__init__(f"{reason}: {link!r}")
        self.link = link
        self.reason = reason


class DurationUnavailable(PlaybackError):
    pass
