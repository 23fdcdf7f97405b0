from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from catalog.parse import parse_catalog
from core.errors import FetchFailure
from core.models import Track

logger = logging.getLogger(__name__)


class TrackStore:
    """Reads the track catalog from a Firebase Realtime Database over REST."""

    def __init__(
        self,
        base_url: str,
        path: str = "Music",
        auth_token: Optional[str] = None,
        timeout: float = 15,
        user_agent: str = "zaideih-player/0.1",
    ):
        self.base_url = base_url.rstrip("/")
        self.path = path.strip("/")
        self.auth_token = auth_token
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": user_agent})

    @property
    def url(self) -> str:
        return f"{self.base_url}/{self.path}.json"

    def fetch_raw(self) -> Any:
        # GET /<path>.json[?auth=<token>]
        params = {"auth": self.auth_token} if self.auth_token else None
        try:
            r = self.session.get(self.url, params=params, timeout=self.timeout)
            r.raise_for_status()
            return r.json()
        except requests.RequestException as e:
            logger.warning("catalog fetch failed: %s", e)
            raise FetchFailure(f"Could not fetch tracks from {self.url}: {e}") from e
        except ValueError as e:
            # body was not JSON
            logger.warning("catalog response is not JSON: %s", e)
            raise FetchFailure(f"Invalid catalog response from {self.url}") from e

    def fetch_all(self) -> list[Track]:
        tracks = parse_catalog(self.fetch_raw())
        logger.info("fetched %d tracks", len(tracks))
        return tracks

    def close(self) -> None:
        self.session.close()
