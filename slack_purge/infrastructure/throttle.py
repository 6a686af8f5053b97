"""Fixed-delay rate limiting for Slack Web API calls."""

import asyncio
from typing import Any, Awaitable, Callable, Dict, Optional


class CallThrottle:
    """Pauses for a fixed interval after every remote call.

    Calls are issued one at a time, so sleeping after each one keeps the
    gap between the end of a call and the start of the next at least
    ``interval_seconds``.
    """

    def __init__(
        self,
        interval_seconds: float = 1.0,
        sleep: Optional[Callable[[float], Awaitable[Any]]] = None,
    ):
        if interval_seconds < 0:
            raise ValueError(f"interval_seconds must be >= 0, got {interval_seconds}")
        self.interval_seconds = interval_seconds
        self._sleep = sleep or asyncio.sleep
        self.calls = 0

    async def pause(self):
        """Record a finished call and wait out the interval."""
        self.calls += 1
        await self._sleep(self.interval_seconds)

    def get_status(self) -> Dict[str, Any]:
        if self.interval_seconds > 0:
            ceiling = int(60 // self.interval_seconds)
        else:
            ceiling = None
        return {
            "calls": self.calls,
            "interval_seconds": self.interval_seconds,
            "max_calls_per_minute": ceiling,
        }
