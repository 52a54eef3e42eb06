"""Client-credentials token cache for the Spotify Web API."""
import base64
import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional

import requests

from spotilookup.config import SpotifySettings
from spotilookup.errors import AuthError, MappingError
from spotilookup.models.upstream import TokenResponse, parse_payload

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Credentials:
    token: str
    token_type: str
    expires_at: float  # clock() value after which the token must not be sent

    @property
    def authorization(self) -> str:
        return f"Bearer {self.token}"


def basic_auth_header(client_id: str, client_secret: str) -> str:
    raw = f"{client_id}:{client_secret}".encode()
    return "Basic " + base64.b64encode(raw).decode("ascii")


class CredentialManager:
    """Holds the current access token and refreshes it when missing or expired.

    Shared by all request threads: the expiry check and the refresh run under
    one lock, so callers racing past an expired token cause a single exchange.
    """

    def __init__(
        self,
        settings: SpotifySettings,
        session: Optional[requests.Session] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._settings = settings
        # Only used while holding self._lock, so never by two threads at once
        self._session = session or requests.Session()
        self._clock = clock
        self._lock = threading.Lock()
        self._credentials: Optional[Credentials] = None

    def ensure_valid_token(self) -> Credentials:
        """Return credentials whose expiry is in the future, exchanging for new ones if needed."""
        with self._lock:
            creds = self._credentials
            if creds is None or self._clock() >= creds.expires_at:
                creds = self._authenticate()
                self._credentials = creds
            return creds

    def _authenticate(self) -> Credentials:
        settings = self._settings
        try:
            resp = self._session.post(
                settings.token_url,
                headers={
                    "Authorization": basic_auth_header(settings.client_id, settings.client_secret),
                    "Content-Type": "application/x-www-form-urlencoded",
                },
                data={"grant_type": "client_credentials"},
                timeout=settings.timeout_sec,
            )
        except requests.RequestException as e:
            raise AuthError(f"Token request failed: {e}") from e

        try:
            body = resp.json()
        except ValueError as e:
            raise AuthError(
                f"Token endpoint returned a non-JSON body (HTTP {resp.status_code})"
            ) from e

        try:
            token = parse_payload(TokenResponse, body)
        except MappingError as e:
            raise AuthError(_token_failure_message(body, resp.status_code)) from e

        started = self._clock()
        logger.info(
            "Obtained Spotify access token (type %s, expires in %ds)",
            token.token_type,
            token.expires_in,
        )
        return Credentials(
            token=token.access_token,
            token_type=token.token_type,
            expires_at=started + token.expires_in,
        )


def _token_failure_message(body, status_code: int) -> str:
    if isinstance(body, dict) and body.get("error"):
        detail = body.get("error_description") or body["error"]
        return f"Spotify token exchange failed (HTTP {status_code}): {detail}"
    return f"Spotify token exchange returned no usable token (HTTP {status_code})"
