"""Catalog lookups: search Spotify by free text and return a simplified record."""
import logging
from typing import Optional, Union

from fastapi import APIRouter, Depends

from spotilookup.api.state import get_gateway
from spotilookup.core.mappers import (
    map_album,
    map_artist_full,
    map_artist_short,
    map_track,
    not_found,
)
from spotilookup.core.spotify_client import SpotifyGateway
from spotilookup.errors import BadRequest
from spotilookup.models.responses import (
    AlbumResponse,
    ArtistFullResponse,
    ArtistShortResponse,
    NotFoundResponse,
    TrackResponse,
)
from spotilookup.models.upstream import (
    Album,
    AlbumSearch,
    Artist,
    ArtistAlbums,
    ArtistSearch,
    ArtistTopTracks,
    TrackSearch,
    parse_payload,
)

router = APIRouter()
logger = logging.getLogger(__name__)


def _require_query(q: Optional[str]) -> str:
    if not q:
        raise BadRequest("Missing query parameter 'q'")
    return q


def _first_artist(gateway: SpotifyGateway, q: str) -> Optional[Artist]:
    result = parse_payload(ArtistSearch, gateway.search(q, "artist"))
    return result.artists.items[0] if result.artists.items else None


@router.get("/songs", response_model=Union[TrackResponse, NotFoundResponse])
def search_song(q: Optional[str] = None, gateway: SpotifyGateway = Depends(get_gateway)):
    """Best-matching track for ``q``."""
    q = _require_query(q)
    result = parse_payload(TrackSearch, gateway.search(q, "track"))
    if not result.tracks.items:
        return not_found("tracks")
    return map_track(result.tracks.items[0])


@router.get("/artist/short", response_model=Union[ArtistShortResponse, NotFoundResponse])
def artist_short(q: Optional[str] = None, gateway: SpotifyGateway = Depends(get_gateway)):
    """Best-matching artist for ``q`` with release counts per type."""
    q = _require_query(q)
    artist = _first_artist(gateway, q)
    if artist is None:
        return not_found("artist")
    albums = parse_payload(ArtistAlbums, gateway.artist_albums(artist.id))
    return map_artist_short(artist, albums)


@router.get("/artist/full", response_model=Union[ArtistFullResponse, NotFoundResponse])
def artist_full(q: Optional[str] = None, gateway: SpotifyGateway = Depends(get_gateway)):
    """Best-matching artist for ``q`` with top tracks and releases."""
    q = _require_query(q)
    artist = _first_artist(gateway, q)
    if artist is None:
        return not_found("artist")
    top_tracks = parse_payload(ArtistTopTracks, gateway.artist_top_tracks(artist.id))
    albums = parse_payload(ArtistAlbums, gateway.artist_albums(artist.id))
    return map_artist_full(artist, top_tracks, albums)


@router.get("/album", response_model=Union[AlbumResponse, NotFoundResponse])
def album(q: Optional[str] = None, gateway: SpotifyGateway = Depends(get_gateway)):
    """Best-matching album for ``q``, fetched in full (artists, images, tracks)."""
    q = _require_query(q)
    result = parse_payload(AlbumSearch, gateway.search(q, "album"))
    if not result.albums.items:
        return not_found("album")
    album_id = result.albums.items[0].id
    logger.debug("Album search %r matched %s", q, album_id)
    return map_album(parse_payload(Album, gateway.album(album_id)))
