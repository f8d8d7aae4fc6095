"""GitHub resolver: authenticated REST API lookup."""

import httpx

from socialprobe.config import ProbeConfig
from socialprobe.core.fetcher import fetch_json
from socialprobe.core.generator import SyntheticProfileGenerator
from socialprobe.core.transformer import clean_username, transform_github
from socialprobe.exceptions import ParseError, RemoteNotFoundError, RemoteUnavailableError
from socialprobe.logging import get_logger
from socialprobe.models.platform import Platform, Provenance
from socialprobe.models.profile import GitHubProfile
from socialprobe.models.result import ProfileResult
from socialprobe.resolvers.base import in_popular_list, resolve_with_fallback

API_URL = "https://api.github.com"
RECENT_REPO_COUNT = 5

POPULAR_USERNAMES = frozenset({"octocat", "torvalds", "gvanrossum", "github", "microsoft", "google"})


def looks_like_github_user(username: str) -> bool:
    return in_popular_list(username, POPULAR_USERNAMES) or len(username) > 3


class GitHubResolver:
    platform = Platform.GITHUB

    def __init__(
        self,
        client: httpx.AsyncClient,
        config: ProbeConfig | None = None,
        generator: SyntheticProfileGenerator | None = None,
    ):
        self._client = client
        self._config = config or ProbeConfig()
        self._generator = generator or SyntheticProfileGenerator()
        self._log = get_logger("github")

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/vnd.github+json"}
        if self._config.github_token:
            headers["Authorization"] = f"token {self._config.github_token}"
        return headers

    async def resolve(self, username: str) -> ProfileResult:
        username = clean_username(username)
        if not username:
            return ProfileResult.not_found()
        return await resolve_with_fallback(self.platform, username, self._lookup, self._guess)

    async def _lookup(self, username: str) -> GitHubProfile:
        user = await fetch_json(self._client, f"{API_URL}/users/{username}", headers=self._headers())
        if not isinstance(user, dict):
            raise ParseError("GitHub user payload is not an object")
        repos = await self._recent_repos(username)
        return transform_github(user, repos, username)

    async def _recent_repos(self, username: str) -> list[dict]:
        # A failed repo listing leaves the profile without recent_repos
        try:
            repos = await fetch_json(
                self._client,
                f"{API_URL}/users/{username}/repos",
                headers=self._headers(),
                params={"sort": "updated", "per_page": RECENT_REPO_COUNT},
            )
        except (RemoteNotFoundError, RemoteUnavailableError, ParseError) as e:
            self._log.warning("parse_incomplete", username=username, field="recent_repos", error=str(e))
            return []
        if not isinstance(repos, list):
            self._log.warning("parse_incomplete", username=username, field="recent_repos")
            return []
        return repos[:RECENT_REPO_COUNT]

    def _guess(self, username: str) -> GitHubProfile | None:
        if not looks_like_github_user(username):
            return None
        rng = self._generator.rng
        return GitHubProfile(
            username=username,
            followers=rng.randint(0, 999),
            public_repos=rng.randint(0, 49),
            provenance=Provenance.SIMULATED,
        )
