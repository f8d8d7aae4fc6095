"""Unit tests for HTML parsing - uses cached fixtures, no internet required."""

from pathlib import Path

import pytest

from socialprobe.core.parser import (
    MAX_RECENT_TWEETS,
    load_html,
    parse_meta_tags,
    parse_nitter_page,
    parse_nitter_profile,
    parse_nitter_tweets,
)
from socialprobe.core.transformer import transform_twitter


FIXTURES_DIR = Path(__file__).parent / "fixtures"
NITTER = "https://nitter.net"


def get_fixture_html(name: str) -> str:
    """Load an HTML fixture by file stem."""
    fixture_path = FIXTURES_DIR / f"{name}.html"
    if not fixture_path.exists():
        pytest.skip(f"Fixture not found: {fixture_path}")
    return fixture_path.read_text(encoding="utf-8")


class TestNitterProfile:
    """Test profile card extraction."""

    @pytest.fixture
    def profile(self):
        return parse_nitter_profile(load_html(get_fixture_html("nitter_profile")), NITTER)

    def test_stat_counters_in_order(self, profile):
        assert profile["tweets_count_raw"] == "29,481"
        assert profile["following_count_raw"] == "4,402"
        assert profile["followers_count_raw"] == "6.5M"

    def test_avatar_absolutized(self, profile):
        assert profile["avatar_url"] == "https://nitter.net/pic/jack_400x400.jpg"

    def test_avatar_trailing_slash_base(self):
        soup = load_html(get_fixture_html("nitter_profile"))
        profile = parse_nitter_profile(soup, "https://nitter.example/")
        assert profile["avatar_url"] == "https://nitter.example/pic/jack_400x400.jpg"

    def test_text_fields(self, profile):
        assert profile["display_name"] == "jack"
        assert profile["bio"] == "no state is the best state"
        assert profile["location"] == "California"
        assert profile["joined"] == "March 2006"

    def test_bare_page(self):
        profile = parse_nitter_profile(load_html("<html><body></body></html>"), NITTER)
        assert "avatar_url" not in profile
        assert "followers_count_raw" not in profile
        assert profile["bio"] == ""


class TestNitterTweets:
    """Test timeline extraction."""

    def test_limit(self):
        tweets = parse_nitter_tweets(load_html(get_fixture_html("nitter_profile")))
        assert len(tweets) == MAX_RECENT_TWEETS
        assert tweets[0] == {"text": "just setting up my twttr", "date": "Jan 5"}
        assert all(t["text"] != "sixth is beyond the limit" for t in tweets)

    def test_empty_content_kept_by_parser(self):
        tweets = parse_nitter_tweets(load_html(get_fixture_html("nitter_profile")))
        assert tweets[2]["text"] == ""

    def test_custom_limit(self):
        tweets = parse_nitter_tweets(load_html(get_fixture_html("nitter_profile")), limit=2)
        assert [t["date"] for t in tweets] == ["Jan 5", "Jan 4"]


class TestNitterPage:
    """Test full-page parsing."""

    def test_profile_page(self):
        result = parse_nitter_page(get_fixture_html("nitter_profile"), NITTER)
        assert not result.not_found
        assert result.parse_errors == []
        assert result.profile_data["display_name"] == "jack"
        assert len(result.items) == MAX_RECENT_TWEETS

    def test_error_panel(self):
        result = parse_nitter_page(get_fixture_html("nitter_error"), NITTER)
        assert result.not_found
        assert result.profile_data == {}
        assert result.items == []

    def test_transformed_profile(self):
        result = parse_nitter_page(get_fixture_html("nitter_profile"), NITTER)
        profile = transform_twitter(result.profile_data, result.items, "jack")

        assert profile.followers == 6_500_000
        assert profile.following == 4402
        assert profile.tweets == 29481
        # Empty third tweet is dropped, long second tweet is truncated
        assert len(profile.recent_tweets) == 4
        assert profile.recent_tweets[1].text.endswith("...")
        assert len(profile.recent_tweets[1].text) == 103


class TestMetaTags:
    """Test meta tag collection."""

    def test_instagram_description(self):
        meta = parse_meta_tags(get_fixture_html("instagram_profile"))
        assert meta["description"].startswith("283M Followers, 134 Following, 29,512 Posts")
        assert "(@natgeo)" in meta["description"]

    def test_tiktok_open_graph(self):
        meta = parse_meta_tags(get_fixture_html("tiktok_profile"))
        assert meta["og:title"] == "Zach King @zachking"
        assert meta["og:description"].startswith("82.4M Followers, 1.2B Likes.")

    def test_tiktok_generic_title(self):
        meta = parse_meta_tags(get_fixture_html("tiktok_missing"))
        assert "@" not in meta["og:title"]

    def test_first_occurrence_wins(self):
        html = (
            '<html><head><meta name="description" content=" first ">'
            '<meta name="description" content="second"></head></html>'
        )
        assert parse_meta_tags(html) == {"description": "first"}

    def test_no_meta(self):
        assert parse_meta_tags("<html><head></head></html>") == {}
