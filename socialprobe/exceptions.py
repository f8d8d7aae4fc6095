"""Custom exception hierarchy for socialprobe."""


class SocialProbeError(Exception):
    """Base exception for all socialprobe errors."""


class RemoteNotFoundError(SocialProbeError):
    """Remote platform explicitly reports the profile does not exist."""


class RemoteUnavailableError(SocialProbeError):
    """Live lookup failed: network error, timeout or unexpected status."""


class PageBlockedError(RemoteUnavailableError):
    """Detected bot blocking or rate limit."""


class ParseError(SocialProbeError):
    """Response body could not be interpreted."""


class UnknownPlatformError(SocialProbeError):
    """No resolver is registered for the requested platform."""
