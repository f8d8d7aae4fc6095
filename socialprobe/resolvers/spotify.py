"""Spotify resolver backed by the curated catalog instead of a live API.

Resolution order: alias rewrite, exact catalog hit, first catalog key or alias
within the close-match distance, then a generated artist or listener profile
depending on how the username looks.
"""

import re

from socialprobe.config import ProbeConfig
from socialprobe.core.catalog import CuratedCatalog, canonical_key, default_catalog
from socialprobe.core.generator import SyntheticProfileGenerator
from socialprobe.core.similarity import find_close_matches
from socialprobe.logging import get_logger
from socialprobe.models.platform import Platform
from socialprobe.models.result import ProfileResult, normalize_username

_DIGIT_RUN = re.compile(r"\d{3,}")
_WHITESPACE = re.compile(r"\s")


def looks_like_artist(raw: str) -> bool:
    return len(raw) > 3 and not _DIGIT_RUN.search(raw)


def looks_like_listener(raw: str) -> bool:
    return len(raw) >= 3 and not _WHITESPACE.search(raw)


class SpotifyResolver:
    platform = Platform.SPOTIFY

    def __init__(
        self,
        catalog: CuratedCatalog | None = None,
        config: ProbeConfig | None = None,
        generator: SyntheticProfileGenerator | None = None,
    ):
        self._catalog = catalog or default_catalog()
        self._config = config or ProbeConfig()
        self._generator = generator or SyntheticProfileGenerator()
        self._log = get_logger("spotify")

    async def resolve(self, username: str) -> ProfileResult:
        return self.resolve_sync(username)

    def resolve_sync(self, username: str) -> ProfileResult:
        """CPU-only resolution; ``resolve`` wraps this for the async interface."""
        raw = username.strip()
        normalized = normalize_username(raw)
        if not normalized:
            return ProfileResult.not_found()

        key = canonical_key(normalized)
        profile = self._catalog.to_profile(key)
        if profile is not None:
            return ProfileResult.found(profile)

        matches = find_close_matches(key, self._catalog.match_candidates(), self._config.close_match_max_distance)
        if matches:
            match = canonical_key(matches[0])
            record = self._catalog.lookup(match)
            note = f"Exact match '{username}' not found, showing results for '{record.name}' instead."
            self._log.info("close_match", username=username, matched=match)
            return ProfileResult.found(self._catalog.to_profile(match, note=note))

        if looks_like_artist(username):
            return ProfileResult.found(self._generator.generate_artist(normalized, raw))
        if looks_like_listener(username):
            return ProfileResult.found(self._generator.generate_listener(normalized, raw))
        return ProfileResult.not_found()
