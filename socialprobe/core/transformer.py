"""Data transformation and normalization for raw platform data."""

import re
from datetime import datetime, timezone
from typing import Any

from socialprobe.models.profile import (
    GitHubProfile,
    GitHubRepo,
    InstagramProfile,
    RedditProfile,
    TikTokProfile,
    TwitterProfile,
)
from socialprobe.models.platform import Provenance
from socialprobe.models.tweet import RecentTweet

TWEET_PREVIEW_LENGTH = 100

_COUNT_TOKEN = r"(\d+(?:[.,]\d+)*\s?[KMB]?)"


def normalize_count(count_str: str | None) -> int:
    """
    Convert count strings to integers.

    Examples:
        "1.2K" -> 1200
        "1M" -> 1000000
        "500" -> 500
        "1,234" -> 1234
    """
    if not count_str:
        return 0

    count_str = count_str.strip().upper().replace(",", "").replace(" ", "")

    if not count_str:
        return 0

    multipliers = {
        "K": 1_000,
        "M": 1_000_000,
        "B": 1_000_000_000,
    }

    for suffix, multiplier in multipliers.items():
        if count_str.endswith(suffix):
            try:
                number = float(count_str[:-1])
                return round(number * multiplier)
            except ValueError:
                return 0

    try:
        return int(float(count_str))
    except ValueError:
        return 0


def count_before_label(text: str | None, label: str) -> int | None:
    """
    Find the count written right before a label.

    Examples:
        ("12,345 Followers, 10 Following", "Followers") -> 12345
        ("1.2M Followers", "followers") -> 1200000

    Returns:
        The count, or None when the label is absent
    """
    if not text:
        return None
    match = re.search(_COUNT_TOKEN + r"\s+" + re.escape(label), text, re.IGNORECASE)
    if not match:
        return None
    return normalize_count(match.group(1))


def clean_username(username: str) -> str:
    """Strip surrounding whitespace and a leading @."""
    return username.strip().lstrip("@").strip()


def truncate(text: str, limit: int = TWEET_PREVIEW_LENGTH) -> str:
    return text[:limit] + "..." if len(text) > limit else text


def unix_to_iso(timestamp: float | int | None) -> str | None:
    """Render epoch seconds as a millisecond-precision UTC ISO string."""
    if timestamp is None:
        return None
    try:
        moment = datetime.fromtimestamp(float(timestamp), tz=timezone.utc)
    except (TypeError, ValueError, OverflowError, OSError):
        return None
    return iso_utc(moment)


def iso_utc(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _as_int(value: Any) -> int:
    return value if isinstance(value, int) and not isinstance(value, bool) else 0


def _as_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def transform_github(user: dict, repos: list[dict], username: str) -> GitHubProfile:
    """Build a GitHubProfile from the users API payload and its repo list."""
    recent_repos = [
        GitHubRepo(
            name=repo.get("name") or "",
            description=_as_str(repo.get("description")),
            url=_as_str(repo.get("html_url")),
            stars=_as_int(repo.get("stargazers_count")),
            language=_as_str(repo.get("language")),
        )
        for repo in repos
        if isinstance(repo, dict)
    ]
    return GitHubProfile(
        username=_as_str(user.get("login")) or username,
        followers=_as_int(user.get("followers")),
        following=_as_int(user.get("following")),
        avatar_url=_as_str(user.get("avatar_url")),
        public_repos=_as_int(user.get("public_repos")),
        bio=_as_str(user.get("bio")),
        name=_as_str(user.get("name")),
        company=_as_str(user.get("company")),
        location=_as_str(user.get("location")),
        created_at=_as_str(user.get("created_at")),
        recent_repos=recent_repos,
        provenance=Provenance.REAL,
    )


def transform_twitter(profile_data: dict, tweets_data: list[dict], username: str) -> TwitterProfile:
    """Build a TwitterProfile from parsed Nitter page data."""
    recent_tweets = [
        RecentTweet(text=truncate(raw["text"]), date=raw.get("date", ""))
        for raw in tweets_data
        if raw.get("text")
    ]
    return TwitterProfile(
        username=username,
        name=profile_data.get("display_name", ""),
        followers=normalize_count(profile_data.get("followers_count_raw")),
        following=normalize_count(profile_data.get("following_count_raw")),
        tweets=normalize_count(profile_data.get("tweets_count_raw")),
        avatar_url=profile_data.get("avatar_url"),
        bio=profile_data.get("bio", ""),
        location=profile_data.get("location", ""),
        joined=profile_data.get("joined", ""),
        recent_tweets=recent_tweets,
        provenance=Provenance.SCRAPED,
    )


def transform_instagram(meta: dict, username: str) -> InstagramProfile:
    """Build an InstagramProfile from the page's meta description."""
    description = meta.get("description", "")
    name_match = re.search(r"from (.+?) \(@", description)
    return InstagramProfile(
        username=username,
        name=name_match.group(1).strip() if name_match else username,
        followers=count_before_label(description, "Followers") or 0,
        posts=count_before_label(description, "Posts") or 0,
        bio=description,
        provenance=Provenance.SCRAPED,
    )


def transform_tiktok(meta: dict, username: str) -> TikTokProfile:
    """Build a TikTokProfile from og:title / og:description."""
    title = meta.get("og:title", "")
    description = meta.get("og:description", "")
    return TikTokProfile(
        username=username,
        name=title.replace(f"@{username}", "").strip(),
        followers=count_before_label(description, "Followers") or 0,
        likes=count_before_label(description, "Likes") or 0,
        bio=description,
        provenance=Provenance.SCRAPED,
    )


def transform_reddit(user: dict, username: str) -> RedditProfile:
    """Build a RedditProfile from the ``data`` object of about.json."""
    link_karma = _as_int(user.get("link_karma"))
    comment_karma = _as_int(user.get("comment_karma"))
    subreddit = user.get("subreddit")
    description = subreddit.get("public_description") if isinstance(subreddit, dict) else None
    return RedditProfile(
        username=_as_str(user.get("name")) or username,
        karma=_as_int(user.get("total_karma")) or link_karma + comment_karma,
        link_karma=link_karma,
        comment_karma=comment_karma,
        created_at=unix_to_iso(user.get("created_utc")),
        avatar_url=_as_str(user.get("icon_img")) or _as_str(user.get("snoovatar_img")),
        is_gold=bool(user.get("is_gold")),
        description=description or "",
        provenance=Provenance.REAL,
    )
