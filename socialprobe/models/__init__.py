"""Pydantic models for socialprobe."""

from socialprobe.models.platform import Platform, Provenance
from socialprobe.models.profile import (
    GitHubProfile,
    GitHubRepo,
    InstagramProfile,
    LinkedInProfile,
    Profile,
    RedditProfile,
    TikTokProfile,
    TwitterProfile,
)
from socialprobe.models.result import ProfileQuery, ProfileResult, normalize_username
from socialprobe.models.spotify import (
    Album,
    Playlist,
    SpotifyAccountProfile,
    SpotifyArtistProfile,
    SpotifyProfile,
    SpotifyUserProfile,
    Track,
)
from socialprobe.models.tweet import RecentTweet

__all__ = [
    "Platform",
    "Provenance",
    "Profile",
    "ProfileQuery",
    "ProfileResult",
    "normalize_username",
    "GitHubProfile",
    "GitHubRepo",
    "TwitterProfile",
    "RecentTweet",
    "InstagramProfile",
    "LinkedInProfile",
    "RedditProfile",
    "TikTokProfile",
    "SpotifyProfile",
    "SpotifyArtistProfile",
    "SpotifyAccountProfile",
    "SpotifyUserProfile",
    "Track",
    "Album",
    "Playlist",
]
