"""Slack Web API adapter."""

from slack_purge.adapters.slack.client import (
    SlackClient,
    SlackClientError,
    SlackDecodeError,
    SlackHistoryError,
    SlackRequestError,
    SlackTransportError,
)

__all__ = [
    "SlackClient",
    "SlackClientError",
    "SlackDecodeError",
    "SlackHistoryError",
    "SlackRequestError",
    "SlackTransportError",
]
