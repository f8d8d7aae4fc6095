"""Curated Spotify profiles shipped with the package."""

import json
from collections.abc import Iterator, Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from socialprobe.models.spotify import (
    Album,
    Playlist,
    SpotifyAccountProfile,
    SpotifyArtistProfile,
    SpotifyProfile,
    SpotifyUserProfile,
    Track,
    external_url,
)

DATA_PATH = Path(__file__).resolve().parent.parent / "data" / "spotify.json"

# Short forms users commonly type, rewritten before lookup
ALIASES = {
    "weeknd": "theweeknd",
}


class _CuratedBase(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    followers: int


class CuratedArtist(_CuratedBase):
    type: Literal["artist"]
    popularity: int
    monthly_listeners: int
    image_url: str
    genres: tuple[str, ...]
    top_tracks: tuple[Track, ...]
    albums: tuple[Album, ...]

    def to_profile(self, username: str, note: str | None = None) -> SpotifyArtistProfile:
        return SpotifyArtistProfile(
            username=username,
            external_url=external_url(self.type, username),
            note=note,
            name=self.name,
            followers=self.followers,
            popularity=self.popularity,
            monthly_listeners=self.monthly_listeners,
            image_url=self.image_url,
            genres=list(self.genres),
            top_tracks=list(self.top_tracks),
            albums=list(self.albums),
        )


class CuratedAccount(_CuratedBase):
    type: Literal["account"]
    popularity: int
    verified: bool = False
    image_url: str
    playlists: tuple[Playlist, ...]

    def to_profile(self, username: str, note: str | None = None) -> SpotifyAccountProfile:
        return SpotifyAccountProfile(
            username=username,
            external_url=external_url(self.type, username),
            note=note,
            name=self.name,
            followers=self.followers,
            popularity=self.popularity,
            verified=self.verified,
            image_url=self.image_url,
            playlists=list(self.playlists),
        )


class CuratedUser(_CuratedBase):
    type: Literal["user"]
    playlists: tuple[Playlist, ...] = ()

    def to_profile(self, username: str, note: str | None = None) -> SpotifyUserProfile:
        return SpotifyUserProfile(
            username=username,
            external_url=external_url(self.type, username),
            note=note,
            name=self.name,
            followers=self.followers,
            playlists=list(self.playlists),
        )


CuratedRecord = Annotated[
    Union[CuratedArtist, CuratedAccount, CuratedUser],
    Field(discriminator="type"),
]

_RECORDS_ADAPTER = TypeAdapter(dict[str, CuratedRecord])


class CuratedCatalog:
    """Read-only mapping of normalized username to curated record."""

    def __init__(self, records: Mapping[str, CuratedRecord]):
        self._records = MappingProxyType(dict(records))

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, key: object) -> bool:
        return key in self._records

    def keys(self) -> Iterator[str]:
        """Keys in the order they were loaded."""
        return iter(self._records)

    def match_candidates(self) -> list[str]:
        """Keys in load order, each preceded by the aliases that rewrite to it."""
        candidates = []
        for key in self._records:
            candidates.extend(alias for alias, target in ALIASES.items() if target == key)
            candidates.append(key)
        return candidates

    def lookup(self, key: str) -> CuratedRecord | None:
        """Exact-key lookup, no fuzzy matching."""
        return self._records.get(key)

    def to_profile(self, key: str, note: str | None = None) -> SpotifyProfile | None:
        record = self.lookup(key)
        if record is None:
            return None
        return record.to_profile(key, note=note)


def canonical_key(normalized: str) -> str:
    """Rewrite a known short form to its catalog key."""
    return ALIASES.get(normalized, normalized)


def load_catalog(path: str | Path = DATA_PATH) -> CuratedCatalog:
    """
    Load and validate curated records from a JSON file.

    Args:
        path: JSON object mapping normalized usernames to records

    Returns:
        CuratedCatalog instance
    """
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    return CuratedCatalog(_RECORDS_ADAPTER.validate_python(raw))


@lru_cache(maxsize=1)
def default_catalog() -> CuratedCatalog:
    """Process-wide catalog loaded from the packaged data file."""
    return load_catalog()
