"""Unit tests for synthetic profile generation - seeded random source."""

import random

import pytest

from socialprobe.core.generator import (
    ALBUM_IMAGES,
    GENRE_POOLS,
    PLAYLIST_GENRES,
    PLAYLIST_IMAGES,
    PLAYLIST_PREFIXES,
    PLAYLIST_TYPES,
    SyntheticProfileGenerator,
    format_display_name,
)
from socialprobe.models.platform import Provenance


SEEDS = range(40)


def make_generator(seed: int = 7, year: int = 2023) -> SyntheticProfileGenerator:
    return SyntheticProfileGenerator(random.Random(seed), latest_release_year=year)


class TestDisplayName:
    """Test handle to display name formatting."""

    def test_splits_on_separators(self):
        assert format_display_name("bad-paddy") == "Bad Paddy"
        assert format_display_name("the_night owl") == "The Night Owl"

    def test_lowercases_rest_of_word(self):
        assert format_display_name("DJ_SHADOW") == "Dj Shadow"

    def test_single_word(self):
        assert format_display_name("mystery") == "Mystery"


class TestGenerateArtist:
    """Shape invariants for generated artist profiles."""

    @pytest.mark.parametrize("seed", SEEDS)
    def test_exactly_five_top_tracks(self, seed: int):
        profile = make_generator(seed).generate_artist("nightowls")
        assert len(profile.top_tracks) == 5

    @pytest.mark.parametrize("seed", SEEDS)
    def test_tracks_reference_generated_albums(self, seed: int):
        profile = make_generator(seed).generate_artist("nightowls")
        album_names = {album.name for album in profile.albums}
        for track in profile.top_tracks:
            assert track.album in album_names
            matching = [a for a in profile.albums if a.name == track.album]
            assert track.release_date in {a.release_date for a in matching}

    @pytest.mark.parametrize("seed", SEEDS)
    def test_genres_unique_from_one_pool(self, seed: int):
        profile = make_generator(seed).generate_artist("nightowls")
        assert 2 <= len(profile.genres) <= 4
        assert len(set(profile.genres)) == len(profile.genres)
        assert any(set(profile.genres) <= set(pool) for pool in GENRE_POOLS)

    @pytest.mark.parametrize("seed", SEEDS)
    def test_albums_most_recent_first(self, seed: int):
        profile = make_generator(seed, year=2023).generate_artist("nightowls")
        assert 2 <= len(profile.albums) <= 3
        years = [int(album.release_date[:4]) for album in profile.albums]
        assert years == list(range(2023, 2023 - len(years), -1))
        for album in profile.albums:
            assert 6 <= album.total_tracks <= 13
            assert album.image_url in ALBUM_IMAGES

    @pytest.mark.parametrize("seed", SEEDS)
    def test_numeric_ranges(self, seed: int):
        profile = make_generator(seed).generate_artist("nightowls")
        assert 100 <= profile.followers <= 50_099
        assert 20 <= profile.popularity <= 99
        assert 1_000 <= profile.monthly_listeners <= 80_999
        for track in profile.top_tracks:
            assert 50 <= track.popularity <= 79
            assert 150_000 <= track.duration_ms <= 249_999

    def test_display_name_from_raw(self):
        profile = make_generator().generate_artist("nightowls", raw="Night_Owls")
        assert profile.name == "Night Owls"
        assert profile.username == "nightowls"

    def test_tagged_simulated_with_link(self):
        profile = make_generator().generate_artist("nightowls")
        assert profile.provenance == Provenance.SIMULATED
        assert profile.type == "artist"
        assert profile.external_url == "https://open.spotify.com/artist/nightowls"
        dumped = profile.model_dump()
        assert dumped["simulated"] is True
        assert "scraped" not in dumped

    def test_same_seed_same_output(self):
        first = make_generator(3).generate_artist("nightowls")
        second = make_generator(3).generate_artist("nightowls")
        assert first == second

    def test_default_year_is_previous_year(self):
        from datetime import date

        generator = SyntheticProfileGenerator(random.Random(1))
        profile = generator.generate_artist("nightowls")
        assert profile.albums[0].release_date.startswith(str(date.today().year - 1))


class TestGenerateListener:
    """Shape invariants for generated listener profiles."""

    @pytest.mark.parametrize("seed", SEEDS)
    def test_playlist_count_and_ranges(self, seed: int):
        profile = make_generator(seed).generate_listener("vinyl_fan")
        assert 2 <= len(profile.playlists) <= 4
        assert 10 <= profile.followers <= 5_009
        for playlist in profile.playlists:
            assert 10 <= playlist.followers <= 1_009
            assert 20 <= playlist.total_tracks <= 69
            assert playlist.image_url in PLAYLIST_IMAGES

    @pytest.mark.parametrize("seed", SEEDS)
    def test_playlist_names_follow_templates(self, seed: int):
        profile = make_generator(seed).generate_listener("vinyl_fan")
        for playlist in profile.playlists:
            if playlist.name.startswith("Vinyl Fan's "):
                assert playlist.name.removeprefix("Vinyl Fan's ") in PLAYLIST_TYPES
            else:
                prefix, genre = playlist.name.split(" ", 1)
                assert prefix in PLAYLIST_PREFIXES
                assert genre in PLAYLIST_GENRES

    def test_listener_shape(self):
        profile = make_generator().generate_listener("vinyl_fan")
        assert profile.name == "Vinyl Fan"
        assert profile.type == "user"
        assert profile.external_url == "https://open.spotify.com/user/vinyl_fan"
        assert profile.model_dump()["simulated"] is True
