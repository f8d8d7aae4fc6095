"""Resolver contract and the shared live-then-fallback pipeline."""

from collections.abc import Awaitable, Callable
from typing import Protocol, runtime_checkable

from socialprobe.exceptions import ParseError, RemoteNotFoundError, RemoteUnavailableError
from socialprobe.logging import get_logger
from socialprobe.models.platform import Platform
from socialprobe.models.profile import Profile
from socialprobe.models.result import ProfileResult

LiveLookup = Callable[[str], Awaitable[Profile]]
Fallback = Callable[[str], Profile | None]

_log = get_logger("pipeline")


@runtime_checkable
class PlatformResolver(Protocol):
    """One implementation per platform."""

    platform: Platform

    async def resolve(self, username: str) -> ProfileResult:
        """Resolve ``username`` into the uniform envelope. Never raises for remote failures."""
        ...


async def resolve_with_fallback(
    platform: Platform,
    username: str,
    live: LiveLookup,
    fallback: Fallback,
) -> ProfileResult:
    """
    Run one live attempt and fall back once if it fails.

    ``live`` returns a profile or raises. A ``RemoteNotFoundError`` is final.
    ``RemoteUnavailableError`` and ``ParseError`` hand over to ``fallback``,
    which returns a simulated profile or None for "does not exist". Any other
    exception propagates to the caller.
    """
    try:
        profile = await live(username)
    except RemoteNotFoundError:
        _log.info("remote_not_found", platform=platform.value, username=username)
        return ProfileResult.not_found()
    except (RemoteUnavailableError, ParseError) as e:
        _log.warning(
            "live_lookup_failed",
            platform=platform.value,
            username=username,
            error=str(e),
            error_type=type(e).__name__,
        )
        guessed = fallback(username)
        if guessed is None:
            return ProfileResult.not_found()
        _log.info("fallback_used", platform=platform.value, username=username)
        return ProfileResult.found(guessed)

    return ProfileResult.found(profile)


def in_popular_list(username: str, popular: frozenset[str]) -> bool:
    return username.lower() in popular
