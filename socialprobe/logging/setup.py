"""Structlog configuration for socialprobe."""

import logging
import sys

import structlog

from socialprobe.config import ProbeConfig, LogFormat


def configure_logging(config: ProbeConfig | None = None) -> None:
    """
    Configure structlog with appropriate processors and output format.

    Args:
        config: ProbeConfig instance, uses defaults if None
    """
    if config is None:
        config = ProbeConfig()

    # Set up standard library logging
    log_level = getattr(logging, config.log_level.upper(), logging.INFO)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )

    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if config.log_format == LogFormat.JSON:
        processors.extend([
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ])
    else:
        processors.extend([
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=True),
        ])

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        # stdout is reserved for command output
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """
    Get a lazy structlog logger.

    The returned proxy picks up the active configuration on first use, so
    module-level loggers honor a later ``configure_logging`` call.

    Args:
        name: Optional logger name for context

    Returns:
        structlog logger proxy
    """
    if name:
        return structlog.get_logger(logger_name=name)
    return structlog.get_logger()


def lookup_context(platform: str, username: str):
    """
    Bind ``platform`` and ``username`` to every log line emitted inside the block.

    Concurrent lookups each run in their own task, so bindings never leak
    between them.

    Example:
        with lookup_context("github", "octocat"):
            log.info("resolve_start")
    """
    return structlog.contextvars.bound_contextvars(platform=platform, username=username)
