"""Platform identifiers and provenance tags."""

from enum import Enum


class Platform(str, Enum):
    """Supported external platforms."""
    GITHUB = "github"
    TWITTER = "twitter"
    INSTAGRAM = "instagram"
    LINKEDIN = "linkedin"
    REDDIT = "reddit"
    TIKTOK = "tiktok"
    SPOTIFY = "spotify"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    Platform.GITHUB: "GitHub",
    Platform.TWITTER: "Twitter",
    Platform.INSTAGRAM: "Instagram",
    Platform.LINKEDIN: "LinkedIn",
    Platform.REDDIT: "Reddit",
    Platform.TIKTOK: "TikTok",
    Platform.SPOTIFY: "Spotify",
}


class Provenance(str, Enum):
    """Where a profile record came from."""
    REAL = "real"
    SCRAPED = "scraped"
    SIMULATED = "simulated"

    @property
    def flag(self) -> str:
        """Boolean marker key emitted alongside the provenance value."""
        return "real_api" if self is Provenance.REAL else self.value
