"""Twitter resolver: scrapes the public Nitter mirror of a profile."""

import httpx

from socialprobe.config import ProbeConfig
from socialprobe.core.fetcher import fetch_page
from socialprobe.core.generator import SyntheticProfileGenerator
from socialprobe.core.parser import parse_nitter_page
from socialprobe.core.transformer import clean_username, transform_twitter
from socialprobe.exceptions import RemoteNotFoundError
from socialprobe.logging import get_logger
from socialprobe.models.platform import Platform, Provenance
from socialprobe.models.profile import TwitterProfile
from socialprobe.models.result import ProfileResult
from socialprobe.resolvers.base import in_popular_list, resolve_with_fallback

POPULAR_USERNAMES = frozenset({
    "elonmusk", "google", "microsoft", "apple", "amazon", "netflix",
    "twitter", "facebook", "instagram", "tiktok", "billgates",
})


def looks_like_twitter_user(username: str) -> bool:
    return in_popular_list(username, POPULAR_USERNAMES) or len(username) > 3


class TwitterResolver:
    platform = Platform.TWITTER

    def __init__(
        self,
        client: httpx.AsyncClient,
        config: ProbeConfig | None = None,
        generator: SyntheticProfileGenerator | None = None,
    ):
        self._client = client
        self._config = config or ProbeConfig()
        self._generator = generator or SyntheticProfileGenerator()
        self._log = get_logger("twitter")

    async def resolve(self, username: str) -> ProfileResult:
        username = clean_username(username)
        if not username:
            return ProfileResult.not_found()
        return await resolve_with_fallback(self.platform, username, self._lookup, self._guess)

    async def _lookup(self, username: str) -> TwitterProfile:
        base_url = self._config.nitter_base_url.rstrip("/")
        page = await fetch_page(self._client, f"{base_url}/{username}")

        parsed = parse_nitter_page(page.text, base_url)
        if parsed.not_found:
            raise RemoteNotFoundError(f"Nitter reports @{username} missing")
        if parsed.parse_errors:
            self._log.warning("parse_incomplete", username=username, errors=parsed.parse_errors)

        return transform_twitter(parsed.profile_data, parsed.items, username)

    def _guess(self, username: str) -> TwitterProfile | None:
        if not looks_like_twitter_user(username):
            return None
        return TwitterProfile(
            username=username,
            followers=self._generator.rng.randint(0, 9_999),
            provenance=Provenance.SIMULATED,
        )
