"""FastAPI web server for socialprobe."""

import random
from contextlib import asynccontextmanager
from datetime import datetime

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from socialprobe import ProfileService, ProbeConfig, __version__
from socialprobe.core.exporter import merge_results, to_dict
from socialprobe.core.orchestrator import parse_platform
from socialprobe.exceptions import UnknownPlatformError
from socialprobe.logging import get_logger
from socialprobe.models.platform import Platform

log = get_logger("api")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str


def _service(request: Request) -> ProfileService:
    return request.app.state.service


def _unknown_platform(platform: str) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": f"Unknown platform: {platform}"})


def create_app(
    config: ProbeConfig | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    rng: random.Random | None = None,
) -> FastAPI:
    """
    Build the API application.

    Args:
        config: ProbeConfig instance, uses defaults if None
        transport: httpx transport override for upstream calls
        rng: Random source for simulated profiles
    """
    config = config or ProbeConfig()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Manage the service lifecycle."""
        async with ProfileService(config, rng=rng, transport=transport) as service:
            app.state.service = service
            yield

    app = FastAPI(
        title="socialprobe API",
        description="Username presence and profile lookup across platforms",
        version=__version__,
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.get("/health", response_model=HealthResponse, tags=["System"])
    async def health_check():
        """Check API health status."""
        return HealthResponse(
            status="healthy",
            version=__version__,
            timestamp=datetime.now().isoformat(),
        )

    @app.get("/api/platforms", tags=["System"])
    async def list_platforms() -> list[str]:
        """Supported platform identifiers."""
        return [platform.value for platform in Platform]

    @app.get("/api/all/{username}", tags=["Lookup"])
    async def resolve_all(username: str, request: Request):
        """Look up one username on every supported platform."""
        try:
            results = await _service(request).resolve_all(username)
        except Exception:
            log.exception("internal_fault", platform="all", username=username)
            return JSONResponse(status_code=500, content={"error": "Server error fetching profiles"})
        return merge_results(username, results)

    @app.get("/api/{platform}/{username}", tags=["Lookup"])
    async def resolve_profile(platform: str, username: str, request: Request):
        """
        Look up one username on one platform.

        Always answers 200 with ``{"exists": ..., "profile": ...}`` unless an
        unexpected internal error occurs.
        """
        try:
            target = parse_platform(platform)
        except UnknownPlatformError:
            return _unknown_platform(platform)

        try:
            result = await _service(request).resolve(target, username)
        except Exception:
            log.exception("internal_fault", platform=target.value, username=username)
            return JSONResponse(
                status_code=500,
                content={"error": f"Server error fetching {target.display_name} profile"},
            )
        return to_dict(result)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = ProbeConfig()
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
