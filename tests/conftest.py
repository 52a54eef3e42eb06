import pytest
from fastapi.testclient import TestClient

from spotilookup.api.app import app
from spotilookup.api.state import get_gateway
from spotilookup.config import SpotifySettings
from spotilookup.core.credentials import CredentialManager
from spotilookup.core.spotify_client import SpotifyGateway
from tests.support import stubs


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def settings():
    return SpotifySettings(
        client_id="test-client-id",
        client_secret="test-client-secret",
        token_url=stubs.TOKEN_URL,
        api_base=stubs.API_BASE,
        timeout_sec=10.0,
        market="US",
    )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def spotify_session():
    return stubs.FakeSpotifySession()


@pytest.fixture
def gateway(settings, spotify_session, clock):
    credentials = CredentialManager(settings, session=spotify_session, clock=clock)
    return SpotifyGateway(settings, credentials=credentials, session_factory=lambda: spotify_session)


@pytest.fixture
def client(gateway):
    app.dependency_overrides[get_gateway] = lambda: gateway
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_gateway, None)
