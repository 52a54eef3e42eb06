"""Core services: Spotify credentials, gateway, and response mapping."""
from spotilookup.core.credentials import CredentialManager
from spotilookup.core.spotify_client import SpotifyGateway

__all__ = ["CredentialManager", "SpotifyGateway"]
