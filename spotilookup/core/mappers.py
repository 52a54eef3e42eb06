"""Reshape validated Spotify payloads into the simplified response bodies."""
from typing import Iterable, List

from spotilookup.models.responses import (
    AlbumBasicInfo,
    AlbumInfo,
    AlbumResponse,
    AlbumStats,
    ArtistBasic,
    ArtistFullInfo,
    ArtistFullResponse,
    ArtistInfo,
    ArtistShortResponse,
    ImageInfo,
    NotFoundResponse,
    TopTrackInfo,
    TrackBasic,
    TrackInfo,
    TrackResponse,
)
from spotilookup.models.upstream import (
    Album,
    Artist,
    ArtistAlbums,
    ArtistTopTracks,
    SimpleAlbum,
    Track,
)


def format_duration(ms: int) -> str:
    """Milliseconds as ``m:ss``; minutes are not wrapped into hours."""
    minutes, seconds = divmod(ms // 1000, 60)
    return f"{minutes}:{seconds:02d}"


def not_found(kind: str) -> NotFoundResponse:
    return NotFoundResponse(message=f"No {kind} found")


def album_stats(albums: Iterable[SimpleAlbum]) -> AlbumStats:
    """Count albums per album_type; types other than album/single/compilation are ignored."""
    stats = AlbumStats()
    for album in albums:
        if album.album_type == "album":
            stats.album += 1
        elif album.album_type == "single":
            stats.single += 1
        elif album.album_type == "compilation":
            stats.compilation += 1
    return stats


def map_track(track: Track) -> TrackResponse:
    return TrackResponse(
        track=TrackInfo(
            name=track.name,
            id=track.id,
            url=track.external_urls.spotify,
            duration=format_duration(track.duration_ms),
            duration_ms=track.duration_ms,
            popularity=track.popularity,
        )
    )


def _artist_image(artist: Artist) -> str:
    return artist.images[0].url if artist.images else ""


def map_artist_short(artist: Artist, albums: ArtistAlbums) -> ArtistShortResponse:
    stats = album_stats(albums.items)
    return ArtistShortResponse(
        artist=ArtistInfo(
            name=artist.name,
            id=artist.id,
            url=artist.external_urls.spotify,
            image=_artist_image(artist),
            genres=list(artist.genres),
            followers=artist.followers.total,
            popularity=artist.popularity,
            albums=stats.album,
            singles=stats.single,
            compilations=stats.compilation,
        )
    )


def map_artist_full(
    artist: Artist, top_tracks: ArtistTopTracks, albums: ArtistAlbums
) -> ArtistFullResponse:
    return ArtistFullResponse(
        artist=ArtistFullInfo(
            name=artist.name,
            top_tracks=[TopTrackInfo(name=t.name, popularity=t.popularity) for t in top_tracks.tracks],
            albums=[AlbumBasicInfo(name=a.name, type=a.album_type) for a in albums.items],
            album_stats=album_stats(albums.items),
        )
    )


def _album_tracks(album: Album) -> List[TrackBasic]:
    return [
        TrackBasic(
            name=t.name,
            duration=t.duration_ms,
            track_number=t.track_number,
            url=t.external_urls.spotify,
        )
        for t in album.tracks.items
    ]


def map_album(album: Album) -> AlbumResponse:
    return AlbumResponse(
        album=AlbumInfo(
            name=album.name,
            artists=[
                ArtistBasic(name=a.name, id=a.id, url=a.external_urls.spotify)
                for a in album.artists
            ],
            release_date=album.release_date,
            total_tracks=album.total_tracks,
            popularity=album.popularity,
            type=album.album_type,
            url=album.external_urls.spotify,
            images=[ImageInfo(url=i.url, height=i.height, width=i.width) for i in album.images],
            tracks=_album_tracks(album),
        )
    )
