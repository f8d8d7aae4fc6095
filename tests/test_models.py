"""Unit tests for the profile and envelope models."""

import pytest
from pydantic import ValidationError

from socialprobe.models import (
    Platform,
    Profile,
    ProfileQuery,
    ProfileResult,
    Provenance,
)
from socialprobe.models.profile import InstagramProfile, LinkedInProfile
from socialprobe.models.result import normalize_username


class TestProfileResult:
    """Test the exists/profile invariant."""

    def test_found(self):
        result = ProfileResult.found(Profile(username="jack"))
        assert result.exists
        assert result.profile.username == "jack"

    def test_not_found(self):
        result = ProfileResult.not_found()
        assert not result.exists
        assert result.profile is None

    def test_exists_without_profile(self):
        with pytest.raises(ValidationError):
            ProfileResult(exists=True)

    def test_missing_with_profile(self):
        with pytest.raises(ValidationError):
            ProfileResult(exists=False, profile=Profile(username="jack"))

    def test_subclass_serialized(self):
        result = ProfileResult.found(InstagramProfile(username="natgeo", followers=10))
        assert result.model_dump()["profile"]["followers"] == 10


class TestProvenanceFlags:
    """Test provenance serialization."""

    @pytest.mark.parametrize("provenance,flag", [
        (Provenance.REAL, "real_api"),
        (Provenance.SCRAPED, "scraped"),
        (Provenance.SIMULATED, "simulated"),
    ])
    def test_flag_emitted(self, provenance: Provenance, flag: str):
        data = Profile(username="jack", provenance=provenance).model_dump(mode="json")
        assert data[flag] is True
        assert data["provenance"] == provenance.value
        others = {"real_api", "scraped", "simulated"} - {flag}
        assert not others & data.keys()

    def test_no_provenance(self):
        data = Profile(username="jack").model_dump()
        assert data == {"username": "jack"}

    def test_note_kept_when_set(self):
        data = Profile(username="jack", note="close match").model_dump()
        assert data["note"] == "close match"

    def test_simulated_property(self):
        assert Profile(username="x", provenance=Provenance.SIMULATED).simulated
        assert not Profile(username="x", provenance=Provenance.REAL).simulated
        assert not Profile(username="x").simulated

    def test_json_dump(self):
        profile = LinkedInProfile(
            username="janedoe",
            url="https://www.linkedin.com/in/janedoe/",
            provenance=Provenance.SIMULATED,
        )
        assert '"simulated":true' in profile.model_dump_json()


class TestPlatform:
    def test_display_names(self):
        assert Platform.GITHUB.display_name == "GitHub"
        assert Platform.LINKEDIN.display_name == "LinkedIn"
        assert Platform.TIKTOK.display_name == "TikTok"

    def test_values(self):
        assert [p.value for p in Platform] == [
            "github", "twitter", "instagram", "linkedin", "reddit", "tiktok", "spotify",
        ]


class TestProfileQuery:
    """Test query normalization."""

    def test_normalized_username(self):
        query = ProfileQuery(platform=Platform.SPOTIFY, raw_username="  Justin Bieber ")
        assert query.normalized_username == "justinbieber"
        assert query.raw_username == "  Justin Bieber "

    def test_platform_coerced(self):
        assert ProfileQuery(platform="github", raw_username="x").platform is Platform.GITHUB

    def test_frozen(self):
        query = ProfileQuery(platform=Platform.GITHUB, raw_username="x")
        with pytest.raises(ValidationError):
            query.raw_username = "y"

    @pytest.mark.parametrize("raw,expected", [
        ("Drake", "drake"),
        ("the weeknd", "theweeknd"),
        ("\tBTS\n", "bts"),
        ("", ""),
    ])
    def test_normalize_username(self, raw: str, expected: str):
        assert normalize_username(raw) == expected
