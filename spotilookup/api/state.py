"""Shared application state (injected into routes)."""
import threading
from typing import Optional

from spotilookup.config import SpotifySettings, load_spotify_settings
from spotilookup.core.spotify_client import SpotifyGateway


class AppState:
    def __init__(self, settings: Optional[SpotifySettings] = None) -> None:
        self._settings = settings
        self._gateway: Optional[SpotifyGateway] = None
        self._lock = threading.Lock()

    @property
    def settings(self) -> SpotifySettings:
        if self._settings is None:
            self._settings = load_spotify_settings()
        return self._settings

    @property
    def gateway(self) -> SpotifyGateway:
        # One gateway (and so one token cache) for the whole process
        with self._lock:
            if self._gateway is None:
                self._gateway = SpotifyGateway(self.settings)
            return self._gateway


_state = AppState()


def get_gateway() -> SpotifyGateway:
    return _state.gateway
