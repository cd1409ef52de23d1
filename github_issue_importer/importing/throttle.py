"""Throttles requests made against the GitHub API."""

import asyncio
from abc import ABC, abstractmethod

import structlog

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class RequestThrottle(ABC):
    """Base ABC for request throttles awaited between issue submissions."""

    @abstractmethod
    async def wait(self) -> None:
        """Suspend until the next request may be made."""
        pass


class FixedIntervalThrottle(RequestThrottle):
    """Waits a fixed interval after every request, whatever its outcome."""

    def __init__(self, interval: float) -> None:
        """Initialize the throttle with the interval in seconds."""
        if interval < 0:
            raise ValueError(f"Throttle interval must not be negative, got {interval}")
        self.interval = interval

    async def wait(self) -> None:
        """Sleep for the configured interval."""
        logger.debug("Throttling before next request", interval=self.interval)
        await asyncio.sleep(self.interval)
