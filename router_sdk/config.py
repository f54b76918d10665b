"""Configuration for the router SDK.

Environment variables (read at import):
- ROUTER_SDK_LOG_LEVEL: Minimum log level (default: INFO)
- ROUTER_SDK_LOG_FORMAT: "console" or "json" (default: console)
"""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Callable
from dataclasses import dataclass

import structlog

LOG_LEVEL = os.environ.get("ROUTER_SDK_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.environ.get("ROUTER_SDK_LOG_FORMAT", "console").lower()

VALID_LOG_FORMATS = {"console", "json"}


@dataclass(frozen=True)
class RouterConfig:
    """Settings shared by the router encoding operations.

    Attributes:
        clock: Returns the current unix time in seconds. Sampled once per
            call to turn a relative ttl into an absolute deadline.
    """

    clock: Callable[[], float] = time.time

    def now_seconds(self) -> int:
        return int(self.clock())


# Default configuration instance
DEFAULT_ROUTER_CONFIG = RouterConfig()


def configure_logging(level: str | None = None, log_format: str | None = None) -> None:
    """Configure structlog for applications embedding the SDK.

    Args:
        level: Log level name (default: ROUTER_SDK_LOG_LEVEL)
        log_format: "console" or "json" (default: ROUTER_SDK_LOG_FORMAT)

    Raises:
        ValueError: If the level or format is unknown
    """
    level_name = (level or LOG_LEVEL).upper()
    log_level = logging.getLevelName(level_name)
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level_name}")

    fmt = (log_format or LOG_FORMAT).lower()
    if fmt not in VALID_LOG_FORMATS:
        raise ValueError(f"Unknown log format: {fmt} (expected one of {sorted(VALID_LOG_FORMATS)})")

    renderer = (
        structlog.processors.JSONRenderer() if fmt == "json" else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )


__all__ = ["RouterConfig", "DEFAULT_ROUTER_CONFIG", "configure_logging", "LOG_LEVEL", "LOG_FORMAT"]
