"""Configuration: env, API bind address, Spotify client credentials."""
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Base paths (project root = parent of spotilookup package)
BASE_DIR = Path(__file__).resolve().parent.parent

# Load .env from project root so SPOTIFY_CLIENT_ID etc. are set
load_dotenv(BASE_DIR / ".env")

# API
API_HOST = os.getenv("SPOTILOOKUP_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("SPOTILOOKUP_API_PORT", "8080"))
LOG_LEVEL = os.getenv("SPOTILOOKUP_LOG_LEVEL", "INFO").upper()

# Spotify (client-credentials grant; no user login involved)
SPOTIFY_CLIENT_ID = os.getenv("SPOTIFY_CLIENT_ID", "")
SPOTIFY_CLIENT_SECRET = os.getenv("SPOTIFY_CLIENT_SECRET", "")
SPOTIFY_TOKEN_URL = os.getenv("SPOTIFY_TOKEN_URL", "https://accounts.spotify.com/api/token")
SPOTIFY_API_BASE = os.getenv("SPOTIFY_API_BASE", "https://api.spotify.com/v1")
SPOTIFY_TIMEOUT_SEC = float(os.getenv("SPOTIFY_TIMEOUT_SEC", "10"))
# Top tracks are per market
SPOTIFY_MARKET = os.getenv("SPOTIFY_MARKET", "US")


@dataclass(frozen=True)
class SpotifySettings:
    """Everything the credential manager and gateway need to talk to Spotify."""
    client_id: str
    client_secret: str
    token_url: str = "https://accounts.spotify.com/api/token"
    api_base: str = "https://api.spotify.com/v1"
    timeout_sec: float = 10.0
    market: str = "US"


def load_spotify_settings() -> SpotifySettings:
    return SpotifySettings(
        client_id=SPOTIFY_CLIENT_ID,
        client_secret=SPOTIFY_CLIENT_SECRET,
        token_url=SPOTIFY_TOKEN_URL,
        api_base=SPOTIFY_API_BASE.rstrip("/"),
        timeout_sec=SPOTIFY_TIMEOUT_SEC,
        market=SPOTIFY_MARKET,
    )
