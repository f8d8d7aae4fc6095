"""Per-platform resolvers."""

import httpx

from socialprobe.config import ProbeConfig
from socialprobe.core.catalog import CuratedCatalog
from socialprobe.core.generator import SyntheticProfileGenerator
from socialprobe.models.platform import Platform
from socialprobe.resolvers.base import PlatformResolver, resolve_with_fallback
from socialprobe.resolvers.github import GitHubResolver
from socialprobe.resolvers.instagram import InstagramResolver
from socialprobe.resolvers.linkedin import LinkedInResolver
from socialprobe.resolvers.reddit import RedditResolver
from socialprobe.resolvers.spotify import SpotifyResolver
from socialprobe.resolvers.tiktok import TikTokResolver
from socialprobe.resolvers.twitter import TwitterResolver


def build_resolvers(
    client: httpx.AsyncClient,
    config: ProbeConfig,
    generator: SyntheticProfileGenerator,
    catalog: CuratedCatalog | None = None,
) -> dict[Platform, PlatformResolver]:
    """One resolver per platform, sharing the HTTP client and random source."""
    resolvers: list[PlatformResolver] = [
        GitHubResolver(client, config, generator),
        TwitterResolver(client, config, generator),
        InstagramResolver(client, config, generator),
        LinkedInResolver(client, config, generator),
        RedditResolver(client, config, generator),
        TikTokResolver(client, config, generator),
        SpotifyResolver(catalog, config, generator),
    ]
    return {resolver.platform: resolver for resolver in resolvers}


__all__ = [
    "PlatformResolver",
    "resolve_with_fallback",
    "build_resolvers",
    "GitHubResolver",
    "TwitterResolver",
    "InstagramResolver",
    "LinkedInResolver",
    "RedditResolver",
    "TikTokResolver",
    "SpotifyResolver",
]
