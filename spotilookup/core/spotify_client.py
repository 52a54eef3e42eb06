"""Spotify Web API gateway: authenticated GETs with a shared client-credentials token."""
import json
import logging
import threading
from typing import Any, Callable, Mapping, Optional

import requests

from spotilookup.config import SpotifySettings
from spotilookup.core.credentials import CredentialManager
from spotilookup.errors import DecodeError, NetworkError

logger = logging.getLogger(__name__)


class SpotifyGateway:
    """Forwards requests to the Spotify Web API with a valid bearer token.

    The HTTP status of resource calls is not inspected: the body is handed back
    as-is and any shape problem surfaces when it is validated.
    """

    def __init__(
        self,
        settings: SpotifySettings,
        credentials: Optional[CredentialManager] = None,
        session_factory: Callable[[], requests.Session] = requests.Session,
    ) -> None:
        self._settings = settings
        self._session_factory = session_factory
        # requests.Session is not thread-safe; each worker thread gets its own
        self._local = threading.local()
        self.credentials = credentials or CredentialManager(settings, session=session_factory())

    @property
    def session(self) -> requests.Session:
        session = getattr(self._local, "session", None)
        if session is None:
            session = self._session_factory()
            self._local.session = session
        return session

    @property
    def market(self) -> str:
        return self._settings.market

    def request(
        self, method: str, path: str, params: Optional[Mapping[str, Any]] = None
    ) -> bytes:
        """Issue ``method`` against ``<api_base><path>`` and return the raw body."""
        creds = self.credentials.ensure_valid_token()
        url = self._settings.api_base + path
        logger.debug("%s %s params=%s", method, url, params)
        try:
            resp = self.session.request(
                method,
                url,
                headers={"Authorization": creds.authorization},
                params=params,
                timeout=self._settings.timeout_sec,
            )
        except requests.RequestException as e:
            raise NetworkError(f"Spotify request {method} {path} failed: {e}") from e
        if resp.status_code >= 400:
            logger.warning("Spotify %s %s returned HTTP %s", method, path, resp.status_code)
        return resp.content

    def get_json(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        body = self.request("GET", path, params=params)
        try:
            return json.loads(body)
        except ValueError as e:
            raise DecodeError(f"Spotify returned a non-JSON body for {path}: {e}") from e

    def search(self, query: str, type_: str, limit: int = 1) -> Any:
        return self.get_json("/search", params={"q": query, "type": type_, "limit": limit})

    def artist_albums(self, artist_id: str) -> Any:
        # First page only (Spotify default page size)
        return self.get_json(f"/artists/{artist_id}/albums")

    def artist_top_tracks(self, artist_id: str, market: Optional[str] = None) -> Any:
        return self.get_json(
            f"/artists/{artist_id}/top-tracks",
            params={"market": market or self.market},
        )

    def album(self, album_id: str) -> Any:
        return self.get_json(f"/albums/{album_id}")
