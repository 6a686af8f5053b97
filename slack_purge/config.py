"""Configuration and shared defaults."""

__version__ = "0.1.0"

import os
import sys
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

DEFAULT_API_HOST = "https://slack.com/api/"

# conversations.history and chat.delete are Tier 3 (~50 calls/min)
DEFAULT_DELAY_SECONDS = 1.0


def normalize_api_host(host: str) -> str:
    host = (host or DEFAULT_API_HOST).strip()
    if not host.endswith("/"):
        host += "/"
    return host


def _parse_delay(raw: str) -> float:
    try:
        delay = float(raw)
    except ValueError:
        _stderr_print(
            f"Invalid SLACK_PURGE_DELAY_SECONDS={raw!r}, "
            f"falling back to {DEFAULT_DELAY_SECONDS}"
        )
        return DEFAULT_DELAY_SECONDS
    if delay < 0:
        _stderr_print(
            f"Negative SLACK_PURGE_DELAY_SECONDS={raw!r}, "
            f"falling back to {DEFAULT_DELAY_SECONDS}"
        )
        return DEFAULT_DELAY_SECONDS
    return delay


CONFIG = {
    "slack_token": os.getenv("SLACK_TOKEN", ""),
    "slack_channel_id": os.getenv("SLACK_CHANNEL_ID", ""),
    "api_host": normalize_api_host(os.getenv("SLACK_API_HOST", DEFAULT_API_HOST)),
    "rate_limit_delay_seconds": _parse_delay(
        os.getenv("SLACK_PURGE_DELAY_SECONDS", str(DEFAULT_DELAY_SECONDS))
    ),
}


@dataclass(frozen=True)
class PurgeConfig:
    """Typed view of CONFIG, overridden by command-line flags."""

    token: str = ""
    channel_id: str = ""
    api_host: str = DEFAULT_API_HOST
    delay_seconds: float = DEFAULT_DELAY_SECONDS

    @classmethod
    def from_env(cls) -> "PurgeConfig":
        """Create PurgeConfig from environment variables (and .env)."""
        return cls(
            token=CONFIG["slack_token"],
            channel_id=CONFIG["slack_channel_id"],
            api_host=CONFIG["api_host"],
            delay_seconds=CONFIG["rate_limit_delay_seconds"],
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.token and self.channel_id)
