"""Pydantic models for the parts of Spotify Web API payloads we read.

Only the fields the response mappers use are declared; everything else is
ignored. A missing or mistyped declared field fails validation; declared
fields are strict, so numbers sent as strings or booleans are rejected
rather than coerced.
"""
from typing import Any, List, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError

from spotilookup.errors import MappingError

ModelT = TypeVar("ModelT", bound=BaseModel)


class SpotifyModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class TokenResponse(SpotifyModel):
    """Body of a successful client-credentials exchange."""
    access_token: StrictStr = Field(min_length=1)
    token_type: StrictStr = "Bearer"
    expires_in: StrictInt = Field(gt=0)


class ExternalUrls(SpotifyModel):
    spotify: StrictStr


class Image(SpotifyModel):
    url: StrictStr
    height: StrictInt
    width: StrictInt


class ArtistImage(SpotifyModel):
    url: StrictStr


class Followers(SpotifyModel):
    total: StrictInt


class Track(SpotifyModel):
    id: StrictStr
    name: StrictStr
    duration_ms: StrictInt
    popularity: StrictInt
    external_urls: ExternalUrls


class Artist(SpotifyModel):
    id: StrictStr
    name: StrictStr
    popularity: StrictInt
    genres: List[StrictStr]
    followers: Followers
    images: List[ArtistImage]
    external_urls: ExternalUrls


class SimpleArtist(SpotifyModel):
    id: StrictStr
    name: StrictStr
    external_urls: ExternalUrls


class SimpleAlbum(SpotifyModel):
    name: StrictStr
    album_type: StrictStr


class AlbumHit(SpotifyModel):
    id: StrictStr


class TopTrack(SpotifyModel):
    name: StrictStr
    popularity: StrictInt


class AlbumTrack(SpotifyModel):
    name: StrictStr
    duration_ms: StrictInt
    track_number: StrictInt
    external_urls: ExternalUrls


class TrackPage(SpotifyModel):
    items: List[Track]


class ArtistPage(SpotifyModel):
    items: List[Artist]


class AlbumHitPage(SpotifyModel):
    items: List[AlbumHit]


class AlbumTrackPage(SpotifyModel):
    items: List[AlbumTrack]


class TrackSearch(SpotifyModel):
    tracks: TrackPage


class ArtistSearch(SpotifyModel):
    artists: ArtistPage


class AlbumSearch(SpotifyModel):
    albums: AlbumHitPage


class ArtistAlbums(SpotifyModel):
    """GET /artists/{id}/albums (first page)."""
    items: List[SimpleAlbum]


class ArtistTopTracks(SpotifyModel):
    """GET /artists/{id}/top-tracks."""
    tracks: List[TopTrack]


class Album(SpotifyModel):
    """GET /albums/{id}."""
    name: StrictStr
    album_type: StrictStr
    release_date: StrictStr
    total_tracks: StrictInt
    popularity: StrictInt
    artists: List[SimpleArtist]
    images: List[Image]
    tracks: AlbumTrackPage
    external_urls: ExternalUrls


def parse_payload(model: Type[ModelT], data: Any) -> ModelT:
    """Validate decoded upstream JSON against ``model``; raise MappingError on mismatch."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise MappingError(
            f"Unexpected {model.__name__} payload from Spotify: "
            f"{e.error_count()} invalid field(s), first at "
            f"{_error_location(e)}: {e.errors()[0]['msg']}"
        ) from e


def _error_location(e: ValidationError) -> str:
    loc = e.errors()[0].get("loc") or ()
    return ".".join(str(part) for part in loc) or "<root>"
