"""Slack Purge — delete messages from a Slack channel."""

from slack_purge.config import CONFIG, PurgeConfig, __version__
from slack_purge.domain.models import Attachment, HistoryPage, Message, PurgeResult, PurgeStats
from slack_purge.infrastructure.throttle import CallThrottle
from slack_purge.adapters.slack.client import (
    SlackClient,
    SlackClientError,
    SlackDecodeError,
    SlackHistoryError,
    SlackRequestError,
    SlackTransportError,
)
from slack_purge.purge import run_purge

__all__ = [
    "CONFIG",
    "PurgeConfig",
    "__version__",
    "Attachment",
    "HistoryPage",
    "Message",
    "PurgeResult",
    "PurgeStats",
    "CallThrottle",
    "SlackClient",
    "SlackClientError",
    "SlackDecodeError",
    "SlackHistoryError",
    "SlackRequestError",
    "SlackTransportError",
    "run_purge",
]
