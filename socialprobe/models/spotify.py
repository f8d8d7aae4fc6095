"""Spotify artist, account and listener models."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

from socialprobe.models.profile import Profile


class Track(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    popularity: int
    album: str
    release_date: str
    duration_ms: int


class Album(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    release_date: str
    total_tracks: int
    image_url: str


class Playlist(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    followers: int
    total_tracks: int
    image_url: str


class SpotifyProfile(Profile):
    """Fields common to every Spotify profile kind."""

    name: str
    followers: int
    type: Literal["artist", "account", "user"]
    external_url: str


class SpotifyArtistProfile(SpotifyProfile):
    type: Literal["artist"] = "artist"
    popularity: int
    monthly_listeners: int
    image_url: str
    genres: list[str]
    top_tracks: list[Track]
    albums: list[Album]


class SpotifyAccountProfile(SpotifyProfile):
    type: Literal["account"] = "account"
    popularity: int
    verified: bool = False
    image_url: str
    playlists: list[Playlist]


class SpotifyUserProfile(SpotifyProfile):
    type: Literal["user"] = "user"
    playlists: list[Playlist]


def external_url(kind: str, key: str) -> str:
    """Public Spotify link for an artist or a user/account key."""
    segment = "artist" if kind == "artist" else "user"
    return f"https://open.spotify.com/{segment}/{key}"
