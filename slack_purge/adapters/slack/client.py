"""Slack Web API client using aiohttp.

See https://api.slack.com/methods/conversations.history and
https://api.slack.com/methods/chat.delete. Both methods allow roughly 50
calls per minute, so every call is followed by a throttle pause.
"""

import asyncio
import json
from typing import Any, Dict, Optional

import aiohttp

from slack_purge.config import DEFAULT_API_HOST, normalize_api_host
from slack_purge.domain.models import HistoryPage, PurgeStats
from slack_purge.infrastructure.log import log
from slack_purge.infrastructure.throttle import CallThrottle

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded; charset=UTF-8"
JSON_CONTENT_TYPE = "application/json; charset=UTF-8"


class SlackClientError(Exception):
    """Base class for errors that abort a purge run."""


class SlackRequestError(SlackClientError):
    """The request could not be built."""


class SlackTransportError(SlackClientError):
    """The request could not be sent or the response could not be read."""


class SlackDecodeError(SlackClientError):
    """The response body was not the expected JSON."""


class SlackHistoryError(SlackClientError):
    """conversations.history answered with ok=false."""


class SlackClient:
    """Async Slack client bound to one token and one channel."""

    def __init__(
        self,
        token: str,
        channel_id: str,
        api_host: str = DEFAULT_API_HOST,
        throttle: Optional[CallThrottle] = None,
    ):
        self._token = token
        self._channel_id = channel_id
        self._api_host = normalize_api_host(api_host)
        self._throttle = throttle or CallThrottle()

    @property
    def channel_id(self) -> str:
        return self._channel_id

    @property
    def api_host(self) -> str:
        return self._api_host

    @property
    def throttle(self) -> CallThrottle:
        return self._throttle

    def _headers(self, content_type: str) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self._token}",
            "Content-Type": content_type,
        }

    async def _post(self, method: str, body: Any, content_type: str) -> str:
        """POST to a Web API method and return the raw response body.

        The throttle pause runs whether or not the call succeeded.
        """
        url = f"{self._api_host}{method}"
        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(
                    url, data=body, headers=self._headers(content_type)
                ) as resp:
                    raw = await resp.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise SlackTransportError(f"can't send request: {e}") from e
        finally:
            await self._throttle.pause()
        return raw.decode("utf-8", errors="replace")

    async def fetch_history_page(self, cursor: str = "") -> HistoryPage:
        """Fetch at most one page of channel history starting at ``cursor``.

        The ``ok`` flag is not checked here; callers decide what a failed
        page means.
        """
        values = {
            "token": self._token,
            "channel": self._channel_id,
        }
        if cursor:
            values["cursor"] = cursor

        raw = await self._post("conversations.history", values, FORM_CONTENT_TYPE)
        try:
            data = json.loads(raw)
        except ValueError as e:
            raise SlackDecodeError(f"can't parse response body: {e}") from e
        if not isinstance(data, dict):
            raise SlackDecodeError(
                f"can't parse response body: expected an object, got {type(data).__name__}"
            )
        try:
            return HistoryPage.from_api(data)
        except (AttributeError, TypeError, ValueError) as e:
            raise SlackDecodeError(f"can't parse response body: {e}") from e

    async def delete_message(self, ts: str, execute: bool) -> Optional[str]:
        """Delete one message. A dry run (execute=False) sends nothing.

        Slack-side failures (``ok: false``) are logged, not raised.
        """
        if not execute:
            return None
        try:
            body = json.dumps(
                {"channel": self._channel_id, "ts": ts},
                separators=(",", ":"),
            )
        except (TypeError, ValueError) as e:
            raise SlackRequestError(f"can't create json: {e}") from e

        raw = await self._post("chat.delete", body, JSON_CONTENT_TYPE)
        log(f"body: {raw}")
        return raw

    async def delete_all(self, page: HistoryPage, execute: bool) -> PurgeStats:
        """Delete every message on ``page`` and on each page after it."""
        stats = PurgeStats()
        while True:
            if not page.ok:
                raise SlackHistoryError(f"can't get messages: {page.error}")
            stats.pages += 1

            for message in page.messages:
                label = message.label
                if label:
                    log(f"delete a message: {label}")
                await self.delete_message(message.ts, execute)
                stats.messages += 1
                if execute:
                    stats.deleted += 1

            if not page.has_more:
                return stats
            log(f"next cursor: {page.next_cursor}")
            page = await self.fetch_history_page(page.next_cursor)
