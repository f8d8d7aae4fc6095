"""Reddit resolver: public about.json endpoint."""

from datetime import datetime, timedelta, timezone

import httpx

from socialprobe.config import ProbeConfig
from socialprobe.core.fetcher import fetch_json
from socialprobe.core.generator import SyntheticProfileGenerator
from socialprobe.core.transformer import clean_username, iso_utc, transform_reddit
from socialprobe.exceptions import RemoteNotFoundError
from socialprobe.models.platform import Platform, Provenance
from socialprobe.models.profile import RedditProfile
from socialprobe.models.result import ProfileResult
from socialprobe.resolvers.base import in_popular_list, resolve_with_fallback

ABOUT_URL = "https://www.reddit.com/user/{username}/about.json"
SIMULATED_ACCOUNT_AGE = timedelta(days=5 * 365)

POPULAR_USERNAMES = frozenset({"spez", "gallowboob", "tooshiftyforyou", "commonmisspellingbot"})


def looks_like_reddit_user(username: str) -> bool:
    return in_popular_list(username, POPULAR_USERNAMES) or len(username) > 3


class RedditResolver:
    platform = Platform.REDDIT

    def __init__(
        self,
        client: httpx.AsyncClient,
        config: ProbeConfig | None = None,
        generator: SyntheticProfileGenerator | None = None,
    ):
        self._client = client
        self._config = config or ProbeConfig()
        self._generator = generator or SyntheticProfileGenerator()

    async def resolve(self, username: str) -> ProfileResult:
        username = clean_username(username)
        if not username:
            return ProfileResult.not_found()
        return await resolve_with_fallback(self.platform, username, self._lookup, self._guess)

    async def _lookup(self, username: str) -> RedditProfile:
        payload = await fetch_json(
            self._client,
            ABOUT_URL.format(username=username),
            headers={"Accept": "application/json"},
        )
        user = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(user, dict) or not user:
            raise RemoteNotFoundError(f"Reddit returned no account data for u/{username}")
        return transform_reddit(user, username)

    def _guess(self, username: str) -> RedditProfile | None:
        if not looks_like_reddit_user(username):
            return None
        rng = self._generator.rng
        age = timedelta(seconds=rng.randint(0, int(SIMULATED_ACCOUNT_AGE.total_seconds())))
        return RedditProfile(
            username=username,
            karma=rng.randint(100, 50_099),
            created_at=iso_utc(datetime.now(timezone.utc) - age),
            provenance=Provenance.SIMULATED,
        )
