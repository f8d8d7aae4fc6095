"""Pipeline orchestrator - owns shared resources and dispatches to resolvers."""

import asyncio
import random
from datetime import datetime

import httpx

from socialprobe.config import ProbeConfig
from socialprobe.core.catalog import CuratedCatalog
from socialprobe.core.fetcher import build_client
from socialprobe.core.generator import SyntheticProfileGenerator
from socialprobe.exceptions import UnknownPlatformError
from socialprobe.logging import configure_logging, get_logger, lookup_context
from socialprobe.models.platform import Platform
from socialprobe.models.result import ProfileResult
from socialprobe.resolvers import PlatformResolver, build_resolvers


def parse_platform(value: str | Platform) -> Platform:
    """Map a platform identifier onto the enum."""
    if isinstance(value, Platform):
        return value
    try:
        return Platform(value.strip().lower())
    except ValueError as e:
        raise UnknownPlatformError(f"Unknown platform: {value}") from e


class ProfileService:
    """
    High-level lookup interface across all supported platforms.

    Example:
        async with ProfileService() as service:
            result = await service.resolve("github", "octocat")
            print(result.exists, result.profile)
    """

    def __init__(
        self,
        config: ProbeConfig | None = None,
        rng: random.Random | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        catalog: CuratedCatalog | None = None,
    ):
        """
        Initialize the service with optional configuration.

        Args:
            config: ProbeConfig instance, uses defaults if None
            rng: Random source for simulated profiles, a fresh one if None
            transport: httpx transport override for the shared client
            catalog: Curated Spotify catalog, the packaged one if None
        """
        self.config = config or ProbeConfig()
        self.generator = SyntheticProfileGenerator(rng)
        self._transport = transport
        self._catalog = catalog
        self._client: httpx.AsyncClient | None = None
        self._resolvers: dict[Platform, PlatformResolver] = {}
        self._log = get_logger("service")

    async def __aenter__(self) -> "ProfileService":
        """Async context manager entry - open the shared HTTP client."""
        configure_logging(self.config)
        self._client = build_client(self.config, self._transport)
        self._resolvers = build_resolvers(self._client, self.config, self.generator, self._catalog)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None
        self._resolvers = {}

    @property
    def platforms(self) -> list[Platform]:
        return list(Platform)

    def resolver_for(self, platform: str | Platform) -> PlatformResolver:
        platform = parse_platform(platform)
        if not self._resolvers:
            raise RuntimeError("ProfileService must be used as an async context manager")
        return self._resolvers[platform]

    async def resolve(self, platform: str | Platform, username: str) -> ProfileResult:
        """
        Resolve one username on one platform.

        Args:
            platform: Platform identifier, e.g. "github"
            username: Username as supplied by the caller

        Returns:
            ProfileResult envelope

        Raises:
            UnknownPlatformError: Platform is not supported
        """
        resolver = self.resolver_for(platform)
        with lookup_context(resolver.platform.value, username):
            start = datetime.now()
            self._log.info("resolve_start")

            result = await resolver.resolve(username)

            self._log.info(
                "resolve_complete",
                exists=result.exists,
                duration_ms=(datetime.now() - start).total_seconds() * 1000,
            )
        return result

    async def resolve_all(
        self,
        username: str,
        platforms: list[str | Platform] | None = None,
    ) -> dict[Platform, ProfileResult]:
        """
        Resolve one username on several platforms concurrently.

        Args:
            username: Username as supplied by the caller
            platforms: Subset to query, all platforms if None

        Returns:
            Mapping of platform to result, in the requested order
        """
        targets = [parse_platform(p) for p in platforms] if platforms else self.platforms
        semaphore = asyncio.Semaphore(max(1, self.config.max_concurrency))

        async def bounded(platform: Platform) -> ProfileResult:
            async with semaphore:
                return await self.resolve(platform, username)

        results = await asyncio.gather(*(bounded(p) for p in targets))
        return dict(zip(targets, results))
