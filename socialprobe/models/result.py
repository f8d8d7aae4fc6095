"""Uniform resolution result envelope."""

from pydantic import BaseModel, ConfigDict, SerializeAsAny, model_validator

from socialprobe.models.platform import Platform
from socialprobe.models.profile import Profile


class ProfileQuery(BaseModel):
    """One inbound lookup request."""

    model_config = ConfigDict(frozen=True)

    platform: Platform
    raw_username: str

    @property
    def normalized_username(self) -> str:
        return normalize_username(self.raw_username)


class ProfileResult(BaseModel):
    """Answer for one platform: whether the profile exists, and its summary."""

    exists: bool
    profile: SerializeAsAny[Profile] | None = None

    @model_validator(mode="after")
    def _profile_matches_exists(self) -> "ProfileResult":
        if self.exists != (self.profile is not None):
            raise ValueError("profile must be set if and only if exists is true")
        return self

    @classmethod
    def found(cls, profile: Profile) -> "ProfileResult":
        return cls(exists=True, profile=profile)

    @classmethod
    def not_found(cls) -> "ProfileResult":
        return cls(exists=False, profile=None)


def normalize_username(raw: str) -> str:
    """Lowercase and drop all whitespace."""
    return "".join(raw.split()).lower()
