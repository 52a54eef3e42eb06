"""Response bodies served by the /spotify routes."""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ResponseModel(BaseModel):
    # camelCase keys are declared as aliases; construct with either name
    model_config = ConfigDict(populate_by_name=True)


class NotFoundResponse(ResponseModel):
    """Search matched nothing. Served with HTTP 200."""
    success: bool = False
    message: str


class TrackInfo(ResponseModel):
    name: str
    full_title: str = Field("", alias="fullTitle")  # not populated
    id: str
    url: str
    preview_url: str = ""  # not populated
    duration: str
    duration_ms: int
    explicit: bool = False  # not populated
    popularity: int


class TrackResponse(ResponseModel):
    success: bool = True
    track: TrackInfo


class ArtistInfo(ResponseModel):
    name: str
    id: str
    url: str
    image: str
    genres: List[str]
    followers: int
    popularity: int
    albums: int
    singles: int
    compilations: int


class ArtistShortResponse(ResponseModel):
    success: bool = True
    artist: ArtistInfo


class TopTrackInfo(ResponseModel):
    name: str
    popularity: int


class AlbumBasicInfo(ResponseModel):
    name: str
    type: str


class AlbumStats(ResponseModel):
    album: int = 0
    single: int = 0
    compilation: int = 0


class ArtistFullInfo(ResponseModel):
    name: str
    top_tracks: List[TopTrackInfo] = Field(alias="topTracks")
    albums: List[AlbumBasicInfo]
    album_stats: AlbumStats = Field(alias="albumStats")


class ArtistFullResponse(ResponseModel):
    success: bool = True
    artist: ArtistFullInfo


class ArtistBasic(ResponseModel):
    name: str
    id: str
    url: str


class ImageInfo(ResponseModel):
    url: str
    height: int
    width: int


class TrackBasic(ResponseModel):
    name: str
    duration: int  # milliseconds, unformatted
    track_number: int = Field(alias="trackNumber")
    url: str


class AlbumInfo(ResponseModel):
    name: str
    artists: List[ArtistBasic]
    release_date: str = Field(alias="releaseDate")
    genres: Optional[List[str]] = None  # not populated
    total_tracks: int = Field(alias="totalTracks")
    popularity: int
    type: str
    url: str
    images: List[ImageInfo]
    tracks: List[TrackBasic]


class AlbumResponse(ResponseModel):
    success: bool = True
    album: AlbumInfo
