"""Infrastructure — rate limiting and logging."""

from slack_purge.infrastructure.log import log
from slack_purge.infrastructure.throttle import CallThrottle

__all__ = ["CallThrottle", "log"]
