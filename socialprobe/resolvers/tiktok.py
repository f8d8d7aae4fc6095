"""TikTok resolver: Open Graph meta tags of the profile page."""

import httpx

from socialprobe.config import ProbeConfig
from socialprobe.core.fetcher import fetch_page
from socialprobe.core.generator import SyntheticProfileGenerator
from socialprobe.core.parser import parse_meta_tags
from socialprobe.core.transformer import clean_username, transform_tiktok
from socialprobe.exceptions import RemoteNotFoundError
from socialprobe.logging import get_logger
from socialprobe.models.platform import Platform, Provenance
from socialprobe.models.profile import TikTokProfile
from socialprobe.models.result import ProfileResult
from socialprobe.resolvers.base import in_popular_list, resolve_with_fallback

PROFILE_URL = "https://www.tiktok.com/@{username}"

POPULAR_USERNAMES = frozenset({"charlidamelio", "addisonre", "khaby.lame", "bellapoarch", "zachking"})


def looks_like_tiktok_user(username: str) -> bool:
    return in_popular_list(username, POPULAR_USERNAMES) or len(username) > 3


class TikTokResolver:
    platform = Platform.TIKTOK

    def __init__(
        self,
        client: httpx.AsyncClient,
        config: ProbeConfig | None = None,
        generator: SyntheticProfileGenerator | None = None,
    ):
        self._client = client
        self._config = config or ProbeConfig()
        self._generator = generator or SyntheticProfileGenerator()
        self._log = get_logger("tiktok")

    async def resolve(self, username: str) -> ProfileResult:
        username = clean_username(username)
        if not username:
            return ProfileResult.not_found()
        return await resolve_with_fallback(self.platform, username, self._lookup, self._guess)

    async def _lookup(self, username: str) -> TikTokProfile:
        page = await fetch_page(self._client, PROFILE_URL.format(username=username))
        meta = parse_meta_tags(page.text)

        # Profile pages title themselves with the handle; anything else is a miss
        if f"@{username}" not in meta.get("og:title", ""):
            raise RemoteNotFoundError(f"TikTok page has no profile for @{username}")
        if "og:description" not in meta:
            self._log.warning("parse_incomplete", username=username, field="og:description")

        return transform_tiktok(meta, username)

    def _guess(self, username: str) -> TikTokProfile | None:
        if not looks_like_tiktok_user(username):
            return None
        rng = self._generator.rng
        return TikTokProfile(
            username=username,
            followers=rng.randint(1_000, 1_000_999),
            likes=rng.randint(10_000, 10_009_999),
            provenance=Provenance.SIMULATED,
        )
