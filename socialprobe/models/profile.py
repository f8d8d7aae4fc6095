"""Profile data models, one per platform."""

from typing import Any

from pydantic import BaseModel, SerializerFunctionWrapHandler, model_serializer

from socialprobe.models.platform import Provenance
from socialprobe.models.tweet import RecentTweet

_OMIT_WHEN_UNSET = ("provenance", "note")


class Profile(BaseModel):
    """Common shape shared by every platform profile."""

    username: str
    provenance: Provenance | None = None
    note: str | None = None

    @model_serializer(mode="wrap")
    def _serialize(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        for key in _OMIT_WHEN_UNSET:
            if data.get(key) is None:
                data.pop(key, None)
        if self.provenance is not None:
            data[self.provenance.flag] = True
        return data

    @property
    def simulated(self) -> bool:
        return self.provenance == Provenance.SIMULATED


class GitHubRepo(BaseModel):
    """A recently updated public repository."""

    name: str
    description: str | None = None
    url: str | None = None
    stars: int = 0
    language: str | None = None


class GitHubProfile(Profile):
    followers: int = 0
    following: int = 0
    avatar_url: str | None = None
    public_repos: int = 0
    bio: str | None = None
    name: str | None = None
    company: str | None = None
    location: str | None = None
    created_at: str | None = None
    recent_repos: list[GitHubRepo] = []


class TwitterProfile(Profile):
    name: str = ""
    followers: int = 0
    following: int = 0
    tweets: int = 0
    avatar_url: str | None = None
    bio: str = ""
    location: str = ""
    joined: str = ""
    recent_tweets: list[RecentTweet] = []


class InstagramProfile(Profile):
    name: str = ""
    followers: int = 0
    posts: int = 0
    bio: str = ""


class LinkedInProfile(Profile):
    url: str
    estimated_connections: int | None = None
    checked: bool | None = None


class RedditProfile(Profile):
    karma: int = 0
    link_karma: int = 0
    comment_karma: int = 0
    created_at: str | None = None
    avatar_url: str | None = None
    is_gold: bool = False
    description: str = ""


class TikTokProfile(Profile):
    name: str = ""
    followers: int = 0
    likes: int = 0
    bio: str = ""
