"""Unit tests for the curated Spotify catalog."""

import json

import pytest
from pydantic import ValidationError

from socialprobe.core.catalog import (
    CuratedAccount,
    CuratedArtist,
    canonical_key,
    default_catalog,
    load_catalog,
)
from socialprobe.models.spotify import SpotifyAccountProfile, SpotifyArtistProfile


@pytest.fixture
def catalog():
    return default_catalog()


class TestCatalogContents:
    """Test the packaged records."""

    def test_loaded_in_file_order(self, catalog):
        assert list(catalog.keys()) == [
            "drake", "adele", "justinbieber", "spotifycharts", "spotifymaps",
            "theweeknd", "beyonce", "badpaddy", "spotify", "bts",
        ]
        assert len(catalog) == 10

    def test_drake_record(self, catalog):
        record = catalog.lookup("drake")
        assert isinstance(record, CuratedArtist)
        assert record.name == "Drake"
        assert record.followers == 67438211
        assert record.top_tracks[0].name == "One Dance"
        assert len(record.albums) == 3

    def test_accounts(self, catalog):
        for key in ("spotifycharts", "spotifymaps", "spotify"):
            assert isinstance(catalog.lookup(key), CuratedAccount)

    def test_lookup_is_exact(self, catalog):
        assert catalog.lookup("Drake") is None
        assert catalog.lookup("drak") is None
        assert "drake" in catalog
        assert "weeknd" not in catalog

    def test_match_candidates_include_aliases(self, catalog):
        candidates = catalog.match_candidates()
        assert "weeknd" in candidates
        assert candidates.index("weeknd") == candidates.index("theweeknd") - 1
        assert [c for c in candidates if c != "weeknd"] == list(catalog.keys())

    def test_repeated_lookups_identical(self, catalog):
        first = catalog.to_profile("adele")
        second = catalog.to_profile("adele")
        assert first == second
        assert first.model_dump() == second.model_dump()

    def test_default_catalog_cached(self):
        assert default_catalog() is default_catalog()


class TestCatalogImmutability:
    """Records cannot be changed through lookups."""

    def test_record_frozen(self, catalog):
        record = catalog.lookup("drake")
        with pytest.raises(ValidationError):
            record.followers = 1

    def test_profile_copies_do_not_leak(self, catalog):
        profile = catalog.to_profile("drake")
        profile.genres.append("polka")
        assert "polka" not in catalog.lookup("drake").genres
        assert "polka" not in catalog.to_profile("drake").genres


class TestToProfile:
    """Test curated record to profile conversion."""

    def test_artist_profile(self, catalog):
        profile = catalog.to_profile("drake")
        assert isinstance(profile, SpotifyArtistProfile)
        assert profile.username == "drake"
        assert profile.external_url == "https://open.spotify.com/artist/drake"
        assert profile.provenance is None

    def test_account_profile_links_user_path(self, catalog):
        profile = catalog.to_profile("spotifycharts")
        assert isinstance(profile, SpotifyAccountProfile)
        assert profile.external_url == "https://open.spotify.com/user/spotifycharts"
        assert profile.playlists

    def test_curated_dump_has_no_provenance_keys(self, catalog):
        data = catalog.to_profile("bts").model_dump(mode="json")
        for key in ("provenance", "note", "simulated", "scraped", "real_api"):
            assert key not in data

    def test_note_carried(self, catalog):
        profile = catalog.to_profile("adele", note="close match")
        assert profile.model_dump()["note"] == "close match"

    def test_unknown_key(self, catalog):
        assert catalog.to_profile("nobody") is None


class TestAliases:
    """Test short-form rewrites."""

    def test_weeknd_alias(self):
        assert canonical_key("weeknd") == "theweeknd"

    def test_passthrough(self):
        assert canonical_key("drake") == "drake"


class TestLoadCatalog:
    """Test loading records from an arbitrary file."""

    def test_load_custom_file(self, tmp_path):
        path = tmp_path / "records.json"
        path.write_text(json.dumps({
            "lofi": {"name": "Lofi Girl", "followers": 12, "type": "user"},
        }))
        catalog = load_catalog(path)
        assert len(catalog) == 1
        assert catalog.to_profile("lofi").external_url == "https://open.spotify.com/user/lofi"

    def test_rejects_unknown_type(self, tmp_path):
        path = tmp_path / "records.json"
        path.write_text(json.dumps({
            "x": {"name": "X", "followers": 1, "type": "podcast"},
        }))
        with pytest.raises(ValidationError):
            load_catalog(path)

    def test_rejects_extra_fields(self, tmp_path):
        path = tmp_path / "records.json"
        path.write_text(json.dumps({
            "x": {"name": "X", "followers": 1, "type": "user", "age": 3},
        }))
        with pytest.raises(ValidationError):
            load_catalog(path)
