"""Configuration management using Pydantic Settings."""

from enum import Enum

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


class LogFormat(str, Enum):
    """Log output format."""
    JSON = "json"
    CONSOLE = "console"


class ProbeConfig(BaseSettings):
    """Configuration for the socialprobe service."""

    # Upstream HTTP settings
    http_timeout_seconds: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    github_token: str | None = Field(
        default=None,
        validation_alias=AliasChoices("SOCIALPROBE_GITHUB_TOKEN", "GITHUB_TOKEN"),
    )
    nitter_base_url: str = "https://nitter.net"

    # Resolution
    close_match_max_distance: int = 2
    max_concurrency: int = 7

    # Logging
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.CONSOLE

    # API server
    api_host: str = "0.0.0.0"
    api_port: int = 5000
    cors_origins: list[str] = ["*"]

    model_config = {
        "env_prefix": "SOCIALPROBE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
    }
