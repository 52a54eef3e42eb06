"""Data models: Spotify payload schemas and simplified response bodies."""
from spotilookup.models.responses import (
    AlbumResponse,
    ArtistFullResponse,
    ArtistShortResponse,
    NotFoundResponse,
    TrackResponse,
)

__all__ = [
    "AlbumResponse",
    "ArtistFullResponse",
    "ArtistShortResponse",
    "NotFoundResponse",
    "TrackResponse",
]
