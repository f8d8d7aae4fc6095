"""Plausible-looking Spotify profiles for usernames with no real data.

Every generated profile is tagged ``provenance=simulated``. Values are drawn
from an injected ``random.Random`` so tests can pass a seeded instance; no
reproducibility is promised across calls otherwise.
"""

import random
import re
from datetime import date

from socialprobe.models.platform import Provenance
from socialprobe.models.spotify import (
    Album,
    Playlist,
    SpotifyArtistProfile,
    SpotifyUserProfile,
    Track,
    external_url,
)

GENRE_POOLS = [
    ["indie", "alternative", "rock", "indie rock", "alternative rock"],
    ["hip hop", "rap", "trap", "conscious hip hop", "underground hip hop"],
    ["edm", "electronic", "dance", "house", "techno"],
    ["pop", "synth pop", "dance pop", "electropop", "art pop"],
    ["r&b", "soul", "neo soul", "contemporary r&b", "urban contemporary"],
]

ALBUM_WORDS = [
    "Euphoria", "Dreamer", "Midnight", "Sunrise", "Horizon",
    "Nostalgia", "Revolution", "Journey", "Freedom", "Utopia",
]
SONG_WORDS = ["Love", "Hate", "Dream", "Hope", "Faith", "Paradise", "Heaven", "Hell", "Life", "Time"]
SONG_INNER = ["Mind", "Heart", "Soul", "Dream", "World"]
SONG_ADJECTIVES = ["Beautiful", "Crazy", "Amazing", "Perfect", "Broken"]
SONG_NOUNS = ["Day", "Night", "Love", "World", "Girl", "Boy"]
SONG_PATHS = ["Way", "Path", "Journey", "Story", "Legend"]

PLAYLIST_PREFIXES = ["My", "Favorite", "Best", "Ultimate", "Top", "Essential"]
PLAYLIST_TYPES = ["Vibes", "Mix", "Collection", "Playlist", "Selections", "Hits"]
PLAYLIST_GENRES = ["Rock", "Pop", "Hip Hop", "R&B", "Electronic", "Indie", "Chill", "Party", "Workout", "Focus"]

ARTIST_IMAGES = [
    "https://i.scdn.co/image/ab6761610000e5eb6a0633b2b741fd857558e409",
    "https://i.scdn.co/image/ab6761610000e5eb8c7f275dd8dae2d1676c7b49",
    "https://i.scdn.co/image/ab6761610000e5ebeac917b9a5db711acb84862a",
    "https://i.scdn.co/image/ab6761610000e5ebc7db57b1c848a1532767c696",
    "https://i.scdn.co/image/ab6761610000e5ebf3ca460461fae39243a15316",
]
ALBUM_IMAGES = [
    "https://i.scdn.co/image/ab67616d0000b273b11bdc91cb9ac98b16ea29b1",
    "https://i.scdn.co/image/ab67616d0000b273cb4ec52c48a6b071ed2ab6bc",
    "https://i.scdn.co/image/ab67616d0000b2737358a760596f0c9aee3a1cc6",
    "https://i.scdn.co/image/ab67616d0000b273e0c86ff886d8101f24dc223b",
    "https://i.scdn.co/image/ab67616d0000b273afb855e6eba49a012b37c60a",
]
PLAYLIST_IMAGES = [
    "https://mosaic.scdn.co/640/ab67616d0000b2733d92b2ad5af9fbc8637425f0ab67616d0000b27365a6fc854a3d3dd8561b3d6aab67616d0000b273b11078ee23dcd99e19a22136ab67616d0000b273f46de17106c4094169e8f278",
    "https://mosaic.scdn.co/640/ab67616d0000b273337c5cd881484f68c460b92cab67616d0000b273b29fe3874f65bb79ea52b19dab67616d0000b273d0ada88c5f051976c6dbafdab67616d0000b273dd7106adf7ec3cb52c87cabf",
    "https://mosaic.scdn.co/640/ab67616d0000b2736b44ad73d4e6c6e553dac3ebab67616d0000b273a48dd70027ffc3fc2e29e0cfab67616d0000b273ce8f4e0a06bbfc4f425917adab67616d0000b273e3119a3e3e0ca37bb180c0a0",
    "https://i.scdn.co/image/ab67706c0000da84df9f7092c2fbdefa3b502142",
    "https://i.scdn.co/image/ab67706c0000da84507e4f2a8c4af45e4b556d09",
]

TOP_TRACK_COUNT = 5

_ARTIST_SEPARATORS = re.compile(r"[-_\s]")
_USER_SEPARATORS = re.compile(r"[-_]")


def format_display_name(raw: str, separators: re.Pattern = _ARTIST_SEPARATORS) -> str:
    """
    Turn a handle into a display name.

    Examples:
        "bad-paddy" -> "Bad Paddy"
        "DJ_shadow" -> "Dj Shadow"
    """
    return " ".join(word[:1].upper() + word[1:].lower() for word in separators.split(raw))


class SyntheticProfileGenerator:
    """Builds simulated Spotify artist and listener profiles."""

    def __init__(self, rng: random.Random | None = None, latest_release_year: int | None = None):
        self.rng = rng or random.Random()
        # Newest generated album lands in the previous calendar year
        self._latest_year = latest_release_year or date.today().year - 1

    def generate_artist(self, username: str, raw: str | None = None) -> SpotifyArtistProfile:
        """
        Fabricate an artist profile.

        Args:
            username: Normalized username, used for the profile key and link
            raw: Username as typed, used for the display name

        Returns:
            SpotifyArtistProfile tagged as simulated
        """
        rng = self.rng
        display_name = format_display_name(raw or username)

        albums = [
            self._album(display_name, self._latest_year - i)
            for i in range(rng.randint(2, 3))
        ]
        top_tracks = [self._track(display_name, rng.choice(albums)) for _ in range(TOP_TRACK_COUNT)]

        return SpotifyArtistProfile(
            username=username,
            name=display_name,
            followers=rng.randint(100, 50_099),
            popularity=rng.randint(20, 99),
            monthly_listeners=rng.randint(1_000, 80_999),
            image_url=rng.choice(ARTIST_IMAGES),
            genres=self._genres(),
            top_tracks=top_tracks,
            albums=albums,
            provenance=Provenance.SIMULATED,
            external_url=external_url("artist", username),
        )

    def generate_listener(self, username: str, raw: str | None = None) -> SpotifyUserProfile:
        """Fabricate a listener profile with a handful of playlists."""
        rng = self.rng
        display_name = format_display_name(raw or username, _USER_SEPARATORS)
        playlists = [
            Playlist(
                name=self._playlist_name(display_name),
                followers=rng.randint(10, 1_009),
                total_tracks=rng.randint(20, 69),
                image_url=rng.choice(PLAYLIST_IMAGES),
            )
            for _ in range(rng.randint(2, 4))
        ]

        return SpotifyUserProfile(
            username=username,
            name=display_name,
            followers=rng.randint(10, 5_009),
            playlists=playlists,
            provenance=Provenance.SIMULATED,
            external_url=external_url("user", username),
        )

    def _genres(self) -> list[str]:
        pool = self.rng.choice(GENRE_POOLS)
        return self.rng.sample(pool, self.rng.randint(2, 4))

    def _album(self, display_name: str, year: int) -> Album:
        rng = self.rng
        month = rng.randint(1, 12)
        day = rng.randint(1, 28)
        return Album(
            name=self._album_title(display_name),
            release_date=f"{year}-{month:02d}-{day:02d}",
            total_tracks=rng.randint(6, 13),
            image_url=rng.choice(ALBUM_IMAGES),
        )

    def _track(self, display_name: str, album: Album) -> Track:
        return Track(
            name=self._song_title(display_name),
            popularity=self.rng.randint(50, 79),
            album=album.name,
            release_date=album.release_date,
            duration_ms=self.rng.randint(150_000, 249_999),
        )

    def _album_title(self, display_name: str) -> str:
        rng = self.rng
        templates = [
            display_name.split(" ")[0],
            f"The {display_name} Experience",
            f"{display_name} {rng.randint(1, 2)}",
            rng.choice(ALBUM_WORDS),
            f"{display_name}'s World",
        ]
        return rng.choice(templates)

    def _song_title(self, display_name: str) -> str:
        rng = self.rng
        templates = [
            rng.choice(SONG_WORDS),
            f"{display_name}'s Interlude",
            f"In My {rng.choice(SONG_INNER)}",
            f"{rng.choice(SONG_ADJECTIVES)} {rng.choice(SONG_NOUNS)}",
            f"The {rng.choice(SONG_PATHS)}",
        ]
        return rng.choice(templates)

    def _playlist_name(self, display_name: str) -> str:
        rng = self.rng
        if rng.random() > 0.5:
            return f"{rng.choice(PLAYLIST_PREFIXES)} {rng.choice(PLAYLIST_GENRES)}"
        return f"{display_name}'s {rng.choice(PLAYLIST_TYPES)}"
