"""BeautifulSoup-based HTML parsing for scraped profile pages."""

from dataclasses import dataclass, field

from bs4 import BeautifulSoup

MAX_RECENT_TWEETS = 5


@dataclass
class ParseResult:
    """Result of parsing a profile page."""

    profile_data: dict
    items: list[dict] = field(default_factory=list)
    not_found: bool = False
    parse_errors: list[str] = field(default_factory=list)


# Nitter selectors - centralized for easy updates when the markup changes
NITTER_SELECTORS = {
    "error_panel": ".error-panel",
    "stat_num": ".profile-stat-num",
    "avatar": ".profile-card-avatar",
    "bio": ".profile-bio",
    "fullname": ".profile-card-fullname",
    "location": ".profile-location",
    "joindate": ".profile-joindate",
    "timeline_item": ".timeline-item",
    "tweet_content": ".tweet-content",
    "tweet_date": ".tweet-date",
}

# Order of the stat counters in the profile card
_STAT_FIELDS = ("tweets_count_raw", "following_count_raw", "followers_count_raw")


def load_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


def _text(soup: BeautifulSoup, selector: str) -> str:
    el = soup.select_one(selector)
    return el.get_text(strip=True) if el else ""


def parse_nitter_profile(soup: BeautifulSoup, base_url: str) -> dict:
    """
    Extract profile metadata from a Nitter profile page.

    Args:
        soup: BeautifulSoup object of the page
        base_url: Nitter instance URL, used to absolutize the avatar path

    Returns:
        Dict with raw profile data (not yet validated)
    """
    profile = {}

    stats = soup.select(NITTER_SELECTORS["stat_num"])
    for key, stat in zip(_STAT_FIELDS, stats):
        profile[key] = stat.get_text(strip=True)

    avatar = soup.select_one(NITTER_SELECTORS["avatar"])
    # The avatar class sits on a link wrapping the <img>
    if avatar is not None and avatar.name != "img":
        avatar = avatar.find("img")
    if avatar and avatar.get("src"):
        profile["avatar_url"] = f"{base_url.rstrip('/')}{avatar.get('src')}"

    profile["display_name"] = _text(soup, NITTER_SELECTORS["fullname"])
    profile["bio"] = _text(soup, NITTER_SELECTORS["bio"])
    profile["location"] = _text(soup, NITTER_SELECTORS["location"])
    profile["joined"] = _text(soup, NITTER_SELECTORS["joindate"]).replace("Joined", "").strip()

    return profile


def parse_nitter_tweets(soup: BeautifulSoup, limit: int = MAX_RECENT_TWEETS) -> list[dict]:
    """Extract the first ``limit`` timeline entries."""
    tweets = []
    for item in soup.select(NITTER_SELECTORS["timeline_item"])[:limit]:
        content = item.select_one(NITTER_SELECTORS["tweet_content"])
        date = item.select_one(NITTER_SELECTORS["tweet_date"])
        tweets.append({
            "text": content.get_text(strip=True) if content else "",
            "date": date.get_text(strip=True) if date else "",
        })
    return tweets


def parse_nitter_page(html: str, base_url: str) -> ParseResult:
    """
    Full Nitter page parsing - error detection, profile card and timeline.

    Args:
        html: Raw HTML content
        base_url: Nitter instance URL

    Returns:
        ParseResult; ``not_found`` is set when the page shows an error panel
    """
    soup = load_html(html)
    if soup.select_one(NITTER_SELECTORS["error_panel"]):
        return ParseResult(profile_data={}, not_found=True)

    errors = []

    try:
        profile_data = parse_nitter_profile(soup, base_url)
    except Exception as e:
        profile_data = {}
        errors.append(f"Profile parse error: {e}")

    try:
        tweets_data = parse_nitter_tweets(soup)
    except Exception as e:
        tweets_data = []
        errors.append(f"Tweets parse error: {e}")

    return ParseResult(profile_data=profile_data, items=tweets_data, parse_errors=errors)


def parse_meta_tags(html: str) -> dict:
    """
    Collect ``<meta>`` content by name or property.

    Returns:
        Dict such as {"description": ..., "og:title": ..., "og:description": ...}
    """
    soup = load_html(html)
    meta = {}
    for tag in soup.find_all("meta"):
        key = tag.get("property") or tag.get("name")
        content = tag.get("content")
        if key and content is not None and key not in meta:
            meta[key] = content.strip()
    return meta
