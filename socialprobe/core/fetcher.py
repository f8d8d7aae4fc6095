"""httpx-based fetching for live platform lookups."""

from dataclasses import dataclass
from typing import Any

import httpx

from socialprobe.config import ProbeConfig
from socialprobe.exceptions import (
    PageBlockedError,
    ParseError,
    RemoteNotFoundError,
    RemoteUnavailableError,
)


@dataclass
class FetchResult:
    """Result of a successful fetch."""

    text: str
    status: int
    url: str


def build_client(
    config: ProbeConfig | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Create the shared ``httpx.AsyncClient`` with timeouts and headers.

    Args:
        config: ProbeConfig instance, uses defaults if None
        transport: Optional transport override (tests use ``httpx.MockTransport``)
    """
    config = config or ProbeConfig()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(config.http_timeout_seconds),
        follow_redirects=True,
        headers={"User-Agent": config.user_agent},
        transport=transport,
    )


def _check_status(response: httpx.Response, url: str) -> None:
    status = response.status_code
    if status == 404:
        raise RemoteNotFoundError(f"{url} returned HTTP 404")
    if status in (403, 429):
        raise PageBlockedError(f"Blocked or rate limited (HTTP {status})")
    if status >= 400:
        raise RemoteUnavailableError(f"HTTP {status} from {url}")


async def request(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
    params: dict[str, Any] | None = None,
) -> httpx.Response:
    """
    Issue one request, translating failures into the socialprobe taxonomy.

    Raises:
        RemoteNotFoundError: Remote answered 404
        PageBlockedError: Remote answered 403 or 429
        RemoteUnavailableError: Any other error status, timeout or transport error
    """
    try:
        response = await client.request(method, url, headers=headers, params=params)
    except httpx.TimeoutException as e:
        raise RemoteUnavailableError(f"Timed out fetching {url}") from e
    except httpx.HTTPError as e:
        raise RemoteUnavailableError(f"Network error fetching {url}: {e}") from e

    _check_status(response, url)
    return response


async def fetch_page(
    client: httpx.AsyncClient,
    url: str,
    headers: dict[str, str] | None = None,
) -> FetchResult:
    """Fetch an HTML document."""
    response = await request(client, "GET", url, headers=headers)
    return FetchResult(text=response.text, status=response.status_code, url=str(response.url))


async def fetch_json(
    client: httpx.AsyncClient,
    url: str,
    headers: dict[str, str] | None = None,
    params: dict[str, Any] | None = None,
) -> Any:
    """
    Fetch and decode a JSON document.

    Raises:
        ParseError: Body is not valid JSON
    """
    response = await request(client, "GET", url, headers=headers, params=params)
    try:
        return response.json()
    except ValueError as e:
        raise ParseError(f"Malformed JSON from {url}") from e


async def probe(
    client: httpx.AsyncClient,
    url: str,
    headers: dict[str, str] | None = None,
) -> int:
    """HEAD request used purely as an existence check; returns the status."""
    response = await request(client, "HEAD", url, headers=headers)
    return response.status_code
