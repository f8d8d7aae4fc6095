"""Instagram resolver: reads counts from the profile page meta description."""

import httpx

from socialprobe.config import ProbeConfig
from socialprobe.core.fetcher import fetch_page
from socialprobe.core.generator import SyntheticProfileGenerator
from socialprobe.core.parser import parse_meta_tags
from socialprobe.core.transformer import clean_username, transform_instagram
from socialprobe.logging import get_logger
from socialprobe.models.platform import Platform, Provenance
from socialprobe.models.profile import InstagramProfile
from socialprobe.models.result import ProfileResult
from socialprobe.resolvers.base import in_popular_list, resolve_with_fallback

PROFILE_URL = "https://www.instagram.com/{username}/"

POPULAR_USERNAMES = frozenset({
    "cristiano", "leomessi", "beyonce", "kimkardashian", "arianagrande", "nike", "natgeo",
})


def looks_like_instagram_user(username: str) -> bool:
    return in_popular_list(username, POPULAR_USERNAMES) or len(username) >= 4


class InstagramResolver:
    platform = Platform.INSTAGRAM

    def __init__(
        self,
        client: httpx.AsyncClient,
        config: ProbeConfig | None = None,
        generator: SyntheticProfileGenerator | None = None,
    ):
        self._client = client
        self._config = config or ProbeConfig()
        self._generator = generator or SyntheticProfileGenerator()
        self._log = get_logger("instagram")

    async def resolve(self, username: str) -> ProfileResult:
        username = clean_username(username)
        if not username:
            return ProfileResult.not_found()
        return await resolve_with_fallback(self.platform, username, self._lookup, self._guess)

    async def _lookup(self, username: str) -> InstagramProfile:
        page = await fetch_page(self._client, PROFILE_URL.format(username=username))
        meta = parse_meta_tags(page.text)
        if "description" not in meta:
            self._log.warning("parse_incomplete", username=username, field="description")
        return transform_instagram(meta, username)

    def _guess(self, username: str) -> InstagramProfile | None:
        if not looks_like_instagram_user(username):
            return None
        return InstagramProfile(
            username=username,
            followers=self._generator.rng.randint(0, 9_999),
            provenance=Provenance.SIMULATED,
        )
